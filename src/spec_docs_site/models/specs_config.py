# File: src/spec_docs_site/models/specs_config.py
from __future__ import annotations

from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Release(BaseModel):
    """
    One documented point of a spec:
      - tag: checkout target when set
      - commit: checkout target when no tag is set
      - branch: accepted and kept, never used for checkout
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    commit: Optional[str] = None
    tag: Optional[str] = None
    branch: Optional[str] = None


class Spec(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(min_length=1, description="Unique key, used as the output directory name")
    remote: str = Field(min_length=1, description="Git remote URL")
    releases: Tuple[Release, ...] = ()

    @field_validator("releases", mode="before")
    @classmethod
    def _none_is_empty(cls, v: Any) -> Any:
        return () if v is None or v == "" else v


class SpecsConfig(BaseModel):
    """Top-level `specs:` document, in declared order."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    specs: Tuple[Spec, ...] = ()

    @field_validator("specs", mode="before")
    @classmethod
    def _none_is_empty(cls, v: Any) -> Any:
        return () if v is None or v == "" else v

    @model_validator(mode="after")
    def _unique_names(self) -> "SpecsConfig":
        seen = set()
        for spec in self.specs:
            if spec.name in seen:
                raise ValueError(f"duplicate spec name: {spec.name}")
            seen.add(spec.name)
        return self
