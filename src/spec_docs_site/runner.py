# File: src/spec_docs_site/runner.py
from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Protocol, Sequence

from .utils.logging import get_logger

log = get_logger("spec_docs_site.runner")


class CommandRunner(Protocol):
    def __call__(self, argv: Sequence[str], cwd: Path) -> int: ...


def run_command(argv: Sequence[str], cwd: Path) -> int:
    """
    Run argv in cwd with stdout/stderr inherited so build output streams to the
    terminal. Returns the exit status; raises OSError if argv[0] cannot be run.
    """
    log.debug("command.start", argv=list(argv), cwd=str(cwd))
    proc = subprocess.run(list(argv), cwd=str(cwd), check=False)
    log.debug("command.exit", argv=list(argv), returncode=proc.returncode)
    return proc.returncode
