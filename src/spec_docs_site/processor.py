# File: src/spec_docs_site/processor.py
from __future__ import annotations

from typing import List

from .builder import VersionBuilder
from .index import release_item, spec_heading
from .models.run_summary import RunSummary
from .models.specs_config import Spec
from .resolver import resolve_checkout_target
from .utils.logging import get_logger
from .vcs import VersionControl
from .workspace import WorkspacePaths, ensure_directory

log = get_logger("spec_docs_site.processor")


class SpecProcessor:
    """
    Materializes one spec's clone and builds its releases newest-first,
    skipping any release whose destination directory already exists.
    """

    def __init__(
        self,
        paths: WorkspacePaths,
        vcs: VersionControl,
        builder: VersionBuilder,
        summary: RunSummary,
    ):
        self.paths = paths
        self.vcs = vcs
        self.builder = builder
        self.summary = summary

    def process(self, spec: Spec) -> str:
        slog = log.bind(spec=spec.name)
        slog.info("spec.begin", remote=spec.remote)

        parts: List[str] = [spec_heading(spec.name)]

        workspace = self.paths.clone_dir(spec.remote)
        if self.vcs.ensure_cloned(spec.remote, workspace):
            self.summary.clones += 1

        ensure_directory(self.paths.spec_output_dir(spec.name))

        parts.append("<ul>")
        # releases are declared oldest-first; newest is built and listed first
        for i in range(len(spec.releases) - 1, -1, -1):
            release = spec.releases[i]
            slog.info(
                "release.begin",
                count=i + 1,
                tag=release.tag,
                branch=release.branch,
                commit=release.commit,
            )
            target = resolve_checkout_target(release, spec_name=spec.name, index=i)
            parts.append(
                release_item(
                    target,
                    self.paths.release_href(spec.name, target),
                    self.vcs.release_date(workspace, target),
                )
            )

            destination = self.paths.release_dir(spec.name, target)
            if destination.exists():
                slog.info("release.skip", reason="output folder exists", path=str(destination))
                self.summary.skipped += 1
                continue

            self.builder.build(spec.name, workspace, target, destination)
            self.summary.builds += 1
        parts.append("</ul>")

        slog.info("spec.end")
        return "".join(parts)
