"""Error taxonomy for the site build.

Every error is fatal: nothing in the pipeline catches or retries these, the
entry point logs the failing step and exits non-zero.
"""

from typing import Any, Dict, Optional


class SpecsSiteError(Exception):
    """Base exception for all site build failures."""

    step = "run"

    def __init__(self, message: str, data: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.data = data or {}

    def describe(self) -> str:
        """Single-line description used for the final stderr message."""
        return f"{self.step}: {self.message}"


class ConfigReadError(SpecsSiteError):
    """The specs config file could not be read."""

    step = "config-read"


class ConfigParseError(SpecsSiteError):
    """The specs config file is not valid YAML or does not match the schema."""

    step = "config-parse"


class InvalidReleaseError(SpecsSiteError):
    """A release entry has neither a tag nor a commit."""

    step = "config"


class WorkspaceError(SpecsSiteError):
    """A workspace or output directory could not be prepared."""

    step = "filesystem"


class GitError(SpecsSiteError):
    """Clone, checkout or clean failed."""

    step = "git"


class BuildError(SpecsSiteError):
    """The documentation build could not be run or exited non-zero."""

    step = "build"

    def __init__(
        self,
        message: str,
        returncode: Optional[int] = None,
        data: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, data=data)
        self.returncode = returncode


class RelocationError(SpecsSiteError):
    """The build output could not be moved to its destination."""

    step = "relocate"


class IndexWriteError(SpecsSiteError):
    """The aggregated index page could not be written."""

    step = "index-write"
