"""Docs build commands, keyed by spec name.

Most repositories build with a plain ``make docs``. A few OCI specs need their
Makefile patched first (no TTY for docker, pandoc title metadata, go module
init quirks) and a retry after pinning the spec's own Go module to the
checkout target. Each strategy is a pure function of the checkout target.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from typing import Callable, Dict, Tuple

PATCHED_MAKEFILE = "Makefile.new"
OUTPUT_DIRNAME = "output"


@dataclass(frozen=True)
class BuildCommand:
    strategy: str
    argv: Tuple[str, ...]

    def display(self) -> str:
        return " ".join(self.argv) if self.strategy == "generic" else self.argv[-1]


BuildStrategy = Callable[[str], BuildCommand]


def _shell(strategy: str, script: str) -> BuildCommand:
    return BuildCommand(strategy=strategy, argv=("sh", "-c", script))


def _retry_with_pinned_module(module: str, target: str) -> str:
    return (
        f"(make -f {PATCHED_MAKEFILE} docs || "
        f"(cd .tool/ && go get {module}@{shlex.quote(target)} && cd ../ && make -f {PATCHED_MAKEFILE} docs))"
    )


def generic_build(target: str) -> BuildCommand:
    return BuildCommand(strategy="generic", argv=("make", "docs"))


def image_build(target: str) -> BuildCommand:
    script = (
        "cat Makefile"
        " | sed 's/-it/-i/g'"
        """ | sed 's|-f gfm|-f gfm --metadata title="Open Container Initiative Image Format Specification"|g'"""
        f" > {PATCHED_MAKEFILE} && "
        + _retry_with_pinned_module("github.com/opencontainers/image-spec/specs-go", target)
    )
    return _shell("image", script)


def distribution_build(target: str) -> BuildCommand:
    script = (
        "cat Makefile"
        " | sed 's/-it/-i/g'"
        r" | sed 's/go mod init \&\& \\/\(rm -f go.* \&\& go mod init main \)\&\& \\/g'"
        """ | sed 's|-f gfm|-f gfm --metadata title="Open Container Initiative Distribution Specification"|g'"""
        f"> {PATCHED_MAKEFILE} && "
        + _retry_with_pinned_module("github.com/opencontainers/distribution-spec/specs-go", target)
        + " && rm -f output/.gitkeep"
    )
    return _shell("distribution", script)


def runtime_build(target: str) -> BuildCommand:
    script = (
        "cat Makefile"
        " | sed 's/-it/-i/g'"
        r" | sed 's/go mod init \\/go mod init main \\/g'"
        f" > {PATCHED_MAKEFILE} && "
        + _retry_with_pinned_module("github.com/opencontainers/runtime-spec/specs-go", target)
    )
    return _shell("runtime", script)


BUILD_STRATEGIES: Dict[str, BuildStrategy] = {
    "image": image_build,
    "distribution": distribution_build,
    "runtime": runtime_build,
}


def select_build_strategy(spec_name: str) -> BuildStrategy:
    return BUILD_STRATEGIES.get(spec_name, generic_build)


def build_command_for(spec_name: str, target: str) -> BuildCommand:
    return select_build_strategy(spec_name)(target)
