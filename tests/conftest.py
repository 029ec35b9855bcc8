"""Shared fakes for the orchestration tests."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence, Set, Tuple

import pytest

from spec_docs_site.workspace import WorkspacePaths


class FakeVersionControl:
    """Records every call; clones are plain directories."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, ...]] = []
        self.checked_out: Optional[str] = None

    def ensure_cloned(self, remote: str, destination: Path) -> bool:
        if destination.exists():
            return False
        self.calls.append(("clone", remote, str(destination)))
        destination.mkdir(parents=True)
        return True

    def checkout(self, workspace: Path, target: str) -> None:
        self.calls.append(("checkout", target))
        self.checked_out = target

    def clean(self, workspace: Path, target: str) -> None:
        self.calls.append(("clean", target))

    def release_date(self, workspace: Path, target: str) -> Optional[str]:
        return "2024-01-02"

    def commands(self, kind: str) -> List[Tuple[str, ...]]:
        return [c for c in self.calls if c[0] == kind]


class FakeRunner:
    """Pretends to run `make docs`: writes output/index.html in the clone."""

    def __init__(self, vcs: FakeVersionControl, fail_on: Optional[Set[str]] = None) -> None:
        self.vcs = vcs
        self.fail_on = fail_on or set()
        self.runs: List[Tuple[Tuple[str, ...], str, Optional[str]]] = []

    def __call__(self, argv: Sequence[str], cwd: Path) -> int:
        target = self.vcs.checked_out
        self.runs.append((tuple(argv), str(cwd), target))
        (cwd / "Makefile.new").write_text("patched", encoding="utf-8")
        if target in self.fail_on:
            return 2
        out = cwd / "output"
        out.mkdir()
        (out / "index.html").write_text(f"<p>{target}</p>", encoding="utf-8")
        return 0

    @property
    def targets(self) -> List[Optional[str]]:
        return [r[2] for r in self.runs]


@pytest.fixture
def fake_vcs() -> FakeVersionControl:
    return FakeVersionControl()


@pytest.fixture
def fake_runner(fake_vcs: FakeVersionControl) -> FakeRunner:
    return FakeRunner(fake_vcs)


@pytest.fixture
def paths(tmp_path: Path) -> WorkspacePaths:
    return WorkspacePaths.from_anchor(tmp_path)
