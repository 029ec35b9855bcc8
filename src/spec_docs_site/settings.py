# File: src/spec_docs_site/settings.py
from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # inputs & layout
    SPECS_CONFIG: str = Field(default="specs.yaml")
    DOCS_DIR: str = Field(default="docs")

    # logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_JSON: bool = Field(default=False)

    # index page
    SITE_TITLE: str = Field(default="OCI specs latest")

    # unset means full history
    CLONE_DEPTH: Optional[int] = Field(default=None, ge=1)

    model_config = SettingsConfigDict(extra="ignore")
