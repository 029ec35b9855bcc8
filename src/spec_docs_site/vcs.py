"""Git operations used by the site build."""

import re
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

from git import Repo
from git.exc import BadName, InvalidGitRepositoryError, NoSuchPathError
from git.exc import GitError as GitPythonError

from .errors import GitError, WorkspaceError
from .utils.logging import get_logger

logger = get_logger(__name__)

_SEGMENT_SPLIT_RE = re.compile(r"[/:]")


def repo_base_name(remote: str) -> str:
    """Derive the local clone directory name from a remote URL.

    Args:
        remote: Repository URL (https, ssh, scp-like or local path)

    Returns:
        Final path segment of the URL without a trailing ``.git``

    Raises:
        WorkspaceError: If no usable name can be derived
    """
    tail = _SEGMENT_SPLIT_RE.split(remote.rstrip("/"))[-1]
    if tail.endswith(".git"):
        tail = tail[: -len(".git")]
    if not tail or tail in (".", ".."):
        raise WorkspaceError(f"Cannot derive a directory name from remote: {remote}", data={"remote": remote})
    return tail


class VersionControl(Protocol):
    """Operations the build needs from version control."""

    def ensure_cloned(self, remote: str, destination: Path) -> bool:
        """Clone ``remote`` into ``destination`` unless it already exists."""
        ...

    def checkout(self, workspace: Path, target: str) -> None:
        """Force-checkout ``target``, discarding local modifications."""
        ...

    def clean(self, workspace: Path, target: str) -> None:
        """Force-clean untracked files, using ``target`` as the path filter."""
        ...

    def release_date(self, workspace: Path, target: str) -> Optional[str]:
        """Committer date of ``target`` as YYYY-MM-DD, or None when unknown."""
        ...


class GitVersionControl:
    """GitPython-backed :class:`VersionControl`."""

    def __init__(self, depth: Optional[int] = None):
        self.depth = depth

    def ensure_cloned(self, remote: str, destination: Path) -> bool:
        """Clone a repository once.

        An existing destination is reused as-is: no fetch, no pull, no
        freshness check.

        Args:
            remote: Repository URL to clone
            destination: Local path of the clone

        Returns:
            True if a clone was performed, False if the destination existed

        Raises:
            GitError: If the clone fails
        """
        if destination.exists():
            logger.info("Clone exists, skipping", path=str(destination))
            return False

        clone_kwargs: Dict[str, Any] = {}
        if self.depth:
            clone_kwargs["depth"] = self.depth

        logger.info("Starting git clone", url=remote, target=str(destination))
        try:
            Repo.clone_from(remote, str(destination), **clone_kwargs)
        except GitPythonError as e:
            raise GitError(f"Clone failed: {e}", data={"remote": remote, "path": str(destination)}) from e
        logger.info("Git clone completed", url=remote, target=str(destination))
        return True

    def checkout(self, workspace: Path, target: str) -> None:
        logger.info("running git checkout", command=f"git checkout -f {target}", cwd=str(workspace))
        self._git(workspace, "checkout", "-f", target)

    def clean(self, workspace: Path, target: str) -> None:
        # target is passed as the pathspec, matching the historical behaviour
        logger.info("running git clean", command=f"git clean -f {target}", cwd=str(workspace))
        self._git(workspace, "clean", "-f", target)

    def release_date(self, workspace: Path, target: str) -> Optional[str]:
        try:
            commit = self._open(workspace).commit(target)
        except (BadName, ValueError, GitPythonError, GitError) as e:
            logger.warning("Cannot read release date", target=target, error=str(e))
            return None
        return commit.committed_datetime.date().isoformat()

    def _open(self, workspace: Path) -> Repo:
        try:
            return Repo(str(workspace))
        except (InvalidGitRepositoryError, NoSuchPathError) as e:
            raise GitError(f"Not a git repository: {workspace}", data={"path": str(workspace)}) from e

    def _git(self, workspace: Path, *args: str) -> None:
        repo = self._open(workspace)
        try:
            repo.git.execute(["git", *args])
        except GitPythonError as e:
            raise GitError(
                f"git {' '.join(args)} failed: {e}",
                data={"command": ["git", *args], "path": str(workspace)},
            ) from e
