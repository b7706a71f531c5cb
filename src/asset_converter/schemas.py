"""Pydantic schemas for runtime validation of conversion settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_QUALITY_WEBP = 80
DEFAULT_QUALITY_AVIF = 60
DEFAULT_ROOT = Path("assets")


class ConversionSettings(BaseModel):
    """Validated input for a batch conversion run."""

    model_config = ConfigDict(extra="forbid")

    quality_webp: int = Field(default=DEFAULT_QUALITY_WEBP, ge=0, le=100)
    quality_avif: int = Field(default=DEFAULT_QUALITY_AVIF, ge=0, le=100)
    force: bool = False
