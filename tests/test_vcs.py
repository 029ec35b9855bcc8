"""Tests for the GitPython-backed version control collaborator."""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest
from git import Repo
from git.exc import GitCommandNotFound

from spec_docs_site import vcs as vcs_module
from spec_docs_site.errors import GitError, WorkspaceError
from spec_docs_site.vcs import GitVersionControl, repo_base_name

needs_git = pytest.mark.skipif(shutil.which("git") is None, reason="git executable not available")


@pytest.mark.parametrize(
    ("remote", "expected"),
    [
        ("https://github.com/opencontainers/image-spec", "image-spec"),
        ("https://github.com/opencontainers/image-spec.git", "image-spec"),
        ("https://github.com/opencontainers/runtime-spec/", "runtime-spec"),
        ("git@github.com:opencontainers/distribution-spec.git", "distribution-spec"),
        ("git@example.com:repo.git", "repo"),
        ("/srv/git/artifacts.git", "artifacts"),
    ],
)
def test_repo_base_name(remote: str, expected: str) -> None:
    assert repo_base_name(remote) == expected


def test_repo_base_name_rejects_empty() -> None:
    with pytest.raises(WorkspaceError):
        repo_base_name("https://example.com/.git")


def test_existing_destination_is_not_cloned(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def fail_clone(*args, **kwargs):
        raise AssertionError("clone must not run")

    monkeypatch.setattr(vcs_module.Repo, "clone_from", fail_clone)
    destination = tmp_path / "image-spec"
    destination.mkdir()

    assert GitVersionControl().ensure_cloned("https://example.invalid/image-spec", destination) is False


def test_clone_passes_depth(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    seen = {}

    def fake_clone(url, to_path, **kwargs):
        seen.update(url=url, to_path=to_path, **kwargs)

    monkeypatch.setattr(vcs_module.Repo, "clone_from", fake_clone)
    destination = tmp_path / "x"

    assert GitVersionControl(depth=50).ensure_cloned("https://example.invalid/x", destination) is True
    assert seen == {"url": "https://example.invalid/x", "to_path": str(destination), "depth": 50}


def test_missing_git_executable_is_a_git_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def no_git(*args, **kwargs):
        raise GitCommandNotFound("git", "No such file or directory")

    monkeypatch.setattr(vcs_module.Repo, "clone_from", no_git)

    with pytest.raises(GitError) as exc_info:
        GitVersionControl().ensure_cloned("https://example.invalid/x", tmp_path / "x")
    assert exc_info.value.step == "git"


@pytest.fixture
def origin(tmp_path: Path) -> Path:
    path = tmp_path / "origin" / "spec"
    path.mkdir(parents=True)
    repo = Repo.init(str(path))
    (path / "Makefile").write_text("docs:\n\tmkdir -p output\n", encoding="utf-8")
    repo.index.add(["Makefile"])
    repo.index.commit("first")
    repo.create_tag("v1.0.0")
    (path / "README.md").write_text("second\n", encoding="utf-8")
    repo.index.add(["README.md"])
    repo.index.commit("second")
    repo.create_tag("v1.1.0")
    return path


@needs_git
def test_clone_checkout_and_release_date(tmp_path: Path, origin: Path) -> None:
    git_vcs = GitVersionControl()
    clone = tmp_path / "git-workspace" / "spec"

    assert git_vcs.ensure_cloned(str(origin), clone) is True
    assert (clone / "README.md").exists()

    (clone / "Makefile").write_text("local edit\n", encoding="utf-8")
    git_vcs.checkout(clone, "v1.0.0")
    git_vcs.clean(clone, "v1.0.0")

    assert not (clone / "README.md").exists()
    assert (clone / "Makefile").read_text(encoding="utf-8").startswith("docs:")

    date = git_vcs.release_date(clone, "v1.0.0")
    assert date is not None and len(date) == 10
    assert git_vcs.release_date(clone, "no-such-tag") is None

    assert git_vcs.ensure_cloned(str(origin), clone) is False


@needs_git
def test_clone_failure_is_fatal(tmp_path: Path) -> None:
    with pytest.raises(GitError):
        GitVersionControl().ensure_cloned(str(tmp_path / "missing"), tmp_path / "dest")


@needs_git
def test_checkout_unknown_ref_is_fatal(tmp_path: Path, origin: Path) -> None:
    git_vcs = GitVersionControl()
    clone = tmp_path / "clone"
    git_vcs.ensure_cloned(str(origin), clone)

    with pytest.raises(GitError):
        git_vcs.checkout(clone, "v9.9.9")


def test_checkout_outside_a_repository_is_fatal(tmp_path: Path) -> None:
    with pytest.raises(GitError):
        GitVersionControl().checkout(tmp_path, "v1")
