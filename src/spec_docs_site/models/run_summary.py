# File: src/spec_docs_site/models/run_summary.py
from __future__ import annotations

from pydantic import BaseModel, Field


class RunSummary(BaseModel):
    """
    Counters for one orchestrator run, logged at the end and asserted in tests.
    """
    specs: int = Field(default=0, ge=0)
    clones: int = Field(default=0, ge=0)
    builds: int = Field(default=0, ge=0)
    skipped: int = Field(default=0, ge=0)
    index_path: str = ""
