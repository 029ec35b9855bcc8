# File: src/spec_docs_site/orchestrator.py
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from .builder import VersionBuilder
from .index import render_index, write_index
from .models.run_summary import RunSummary
from .models.specs_config import SpecsConfig
from .processor import SpecProcessor
from .runner import CommandRunner
from .settings import Settings
from .utils.logging import get_logger
from .vcs import GitVersionControl, VersionControl
from .workspace import WorkspacePaths, ensure_directory

log = get_logger("spec_docs_site.orchestrator")

DEFAULT_TITLE = "OCI specs latest"


def run(
    config: SpecsConfig,
    paths: WorkspacePaths,
    vcs: VersionControl,
    runner: Optional[CommandRunner] = None,
    title: str = DEFAULT_TITLE,
) -> RunSummary:
    """
    Process every spec in declared order and write the aggregated index page.
    The first failure propagates and nothing further is processed.
    """
    log.info("workspace.ensure", path=str(paths.git_workspace))
    ensure_directory(paths.git_workspace)

    summary = RunSummary(index_path=str(paths.index_file))
    processor = SpecProcessor(paths, vcs, VersionBuilder(vcs, runner), summary)

    fragments: List[str] = []
    for spec in config.specs:
        fragments.append(processor.process(spec))
        summary.specs += 1

    write_index(paths.index_file, render_index(title, "".join(fragments)))
    log.info("index.written", path=str(paths.index_file))
    return summary


def build_site(
    config: SpecsConfig,
    settings: Settings,
    anchor: Optional[Path] = None,
    vcs: Optional[VersionControl] = None,
    runner: Optional[CommandRunner] = None,
) -> RunSummary:
    """Wire the default collaborators from settings and run."""
    paths = WorkspacePaths.from_anchor(anchor, docs_dirname=settings.DOCS_DIR)
    return run(
        config,
        paths,
        vcs or GitVersionControl(depth=settings.CLONE_DEPTH),
        runner=runner,
        title=settings.SITE_TITLE,
    )
