# File: src/spec_docs_site/builder.py
from __future__ import annotations

import shutil
from pathlib import Path
from typing import Optional

from .errors import BuildError, RelocationError
from .runner import CommandRunner, run_command
from .strategies import OUTPUT_DIRNAME, PATCHED_MAKEFILE, build_command_for
from .utils.logging import get_logger
from .vcs import VersionControl

log = get_logger("spec_docs_site.builder")


class VersionBuilder:
    """
    Builds the docs of one release inside a spec's clone and moves the rendered
    `output/` directory to the release destination. Every step is fatal.
    """

    def __init__(self, vcs: VersionControl, runner: Optional[CommandRunner] = None):
        self.vcs = vcs
        self.runner: CommandRunner = runner or run_command

    def build(self, spec_name: str, workspace: Path, checkout_target: str, destination: Path) -> None:
        blog = log.bind(spec=spec_name, target=checkout_target)

        self.vcs.checkout(workspace, checkout_target)
        self.vcs.clean(workspace, checkout_target)

        command = build_command_for(spec_name, checkout_target)
        blog.info("build.run", strategy=command.strategy, command=command.display())
        try:
            returncode = self.runner(command.argv, workspace)
        except OSError as e:
            raise BuildError(
                f"[{spec_name}] cannot run docs build for {checkout_target}: {e}",
                data={"spec": spec_name, "target": checkout_target, "command": list(command.argv)},
            ) from e
        finally:
            (workspace / PATCHED_MAKEFILE).unlink(missing_ok=True)

        if returncode != 0:
            raise BuildError(
                f"[{spec_name}] docs build for {checkout_target} exited with status {returncode}",
                returncode=returncode,
                data={"spec": spec_name, "target": checkout_target, "command": list(command.argv)},
            )

        self.relocate_output(spec_name, workspace, destination)

    def relocate_output(self, spec_name: str, workspace: Path, destination: Path) -> None:
        output = workspace / OUTPUT_DIRNAME
        log.info("build.move", spec=spec_name, source=f"{OUTPUT_DIRNAME}/", destination=str(destination))
        if not output.is_dir():
            raise RelocationError(
                f"[{spec_name}] build produced no {OUTPUT_DIRNAME}/ directory in {workspace}",
                data={"spec": spec_name, "path": str(output)},
            )
        try:
            shutil.move(str(output), str(destination))
        except OSError as e:
            raise RelocationError(
                f"[{spec_name}] cannot move {output} to {destination}: {e}",
                data={"spec": spec_name, "path": str(output), "destination": str(destination)},
            ) from e
