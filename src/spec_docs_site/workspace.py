"""Workspace layout and directory helpers."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .errors import WorkspaceError
from .utils.logging import get_logger
from .vcs import repo_base_name

logger = get_logger(__name__)

GIT_WORKSPACE_DIRNAME = "git-workspace"
SPECS_DIRNAME = "specs"
INDEX_FILENAME = "index.html"


def get_current_working_directory() -> Path:
    """Get the resolved current working directory.

    Returns:
        Absolute current working directory

    Raises:
        WorkspaceError: If the working directory cannot be determined
    """
    try:
        cwd = Path.cwd().resolve()
    except OSError as e:
        raise WorkspaceError(f"Cannot determine current working directory: {e}")
    logger.info("current directory", path=str(cwd))
    return cwd


def ensure_directory(directory_path: Union[str, Path]) -> Path:
    """Ensure a directory exists and is writable.

    Args:
        directory_path: Path to check/create

    Returns:
        Path to the directory

    Raises:
        WorkspaceError: If the directory cannot be created or is not writable
    """
    path = Path(directory_path)

    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise WorkspaceError(
            f"Failed to create directory {path}: {e}",
            data={"path": str(path)},
        )

    if not os.access(path, os.W_OK):
        raise WorkspaceError(f"Directory is not writable: {path}", data={"path": str(path)})

    logger.debug("Directory is writable", path=str(path))
    return path


@dataclass(frozen=True)
class WorkspacePaths:
    """Every path the build touches, derived from a single anchor directory.

    Layout under the anchor:
        docs/git-workspace/<repo-base-name>/   one clone per spec
        docs/specs/<spec-name>/<target>/       one directory per built release
        docs/index.html                        aggregated index page
    """

    anchor: Path
    docs_dir: Path
    git_workspace: Path

    @classmethod
    def from_anchor(cls, anchor: Optional[Path] = None, docs_dirname: str = "docs") -> "WorkspacePaths":
        root = Path(anchor).resolve() if anchor is not None else get_current_working_directory()
        docs_dir = root / docs_dirname
        return cls(anchor=root, docs_dir=docs_dir, git_workspace=docs_dir / GIT_WORKSPACE_DIRNAME)

    @property
    def specs_root(self) -> Path:
        # sibling of the git workspace
        return self.git_workspace.parent / SPECS_DIRNAME

    @property
    def index_file(self) -> Path:
        return self.docs_dir / INDEX_FILENAME

    def clone_dir(self, remote: str) -> Path:
        return self.git_workspace / repo_base_name(remote)

    def spec_output_dir(self, spec_name: str) -> Path:
        return self.specs_root / spec_name

    def release_dir(self, spec_name: str, checkout_target: str) -> Path:
        return self.spec_output_dir(spec_name) / checkout_target

    def release_href(self, spec_name: str, checkout_target: str) -> str:
        """Link to a release directory, relative to the index page."""
        rel = self.release_dir(spec_name, checkout_target).relative_to(self.docs_dir)
        return rel.as_posix() + "/"
