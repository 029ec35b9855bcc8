# File: src/spec_docs_site/config.py
from __future__ import annotations

from pathlib import Path
from typing import Union

import yaml
from pydantic import ValidationError

from .errors import ConfigParseError, ConfigReadError
from .models.specs_config import SpecsConfig
from .utils.logging import get_logger

log = get_logger("spec_docs_site.config")


def load_specs_config(path: Union[str, Path]) -> SpecsConfig:
    """
    Read and validate the YAML specs config. An empty file yields no specs.
    """
    p = Path(path)
    try:
        raw = p.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigReadError(f"Cannot read specs config {p}: {e}", data={"path": str(p)}) from e

    try:
        # BaseLoader keeps every scalar as its source text: `tag: 1.10` stays "1.10"
        doc = yaml.load(raw, Loader=yaml.BaseLoader)
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML in {p}: {e}", data={"path": str(p)}) from e

    if doc is None:
        doc = {}
    if not isinstance(doc, dict):
        raise ConfigParseError(
            f"Specs config {p} must be a mapping with a 'specs' key",
            data={"path": str(p)},
        )

    try:
        config = SpecsConfig.model_validate(doc)
    except ValidationError as e:
        raise ConfigParseError(f"Invalid specs config {p}: {e}", data={"path": str(p)}) from e

    log.info("config.loaded", path=str(p), specs=[s.name for s in config.specs])
    return config
