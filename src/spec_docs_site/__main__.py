# File: src/spec_docs_site/__main__.py
from __future__ import annotations

import sys
from typing import List, Optional

from pydantic import ValidationError

from .config import load_specs_config
from .errors import SpecsSiteError
from .orchestrator import build_site
from .settings import Settings
from .utils.logging import configure_logging, get_logger

USAGE = """\
spec-docs-site: builds every configured spec release with `make docs` and
writes docs/index.html.

usage: python -m spec_docs_site [SPECS_CONFIG]

environment:
  SPECS_CONFIG  path of the YAML config (default: specs.yaml)
  DOCS_DIR      docs root relative to the working directory (default: docs)
  SITE_TITLE    index page title (default: OCI specs latest)
  CLONE_DEPTH   shallow clone depth (default: full history)
  LOG_LEVEL     DEBUG, INFO, WARNING, ERROR (default: INFO)
  LOG_JSON      1 to emit JSON log lines
"""


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point. Any failure stops the run and exits with status 1.

    Examples:
      python -m spec_docs_site
      SPECS_CONFIG=ci/specs.yaml LOG_JSON=1 python -m spec_docs_site
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if any(a in ("-h", "--help") for a in args):
        sys.stderr.write(USAGE)
        sys.stderr.flush()
        return 0

    try:
        settings = Settings()
    except ValidationError as e:
        sys.stderr.write(f"spec-docs-site: invalid settings: {e}\n")
        return 1
    if args:
        settings = settings.model_copy(update={"SPECS_CONFIG": args[0]})

    configure_logging(settings.LOG_LEVEL, json_logs=settings.LOG_JSON)
    log = get_logger("spec_docs_site.main")

    try:
        config = load_specs_config(settings.SPECS_CONFIG)
        summary = build_site(config, settings)
    except SpecsSiteError as e:
        log.error("run.failed", step=e.step, error=e.message, **e.data)
        sys.stderr.write(f"spec-docs-site: {e.describe()}\n")
        sys.stderr.flush()
        return 1

    log.info("run.done", **summary.model_dump())
    return 0


if __name__ == "__main__":
    sys.exit(main())
