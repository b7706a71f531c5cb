"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass

from asset_converter.schemas import DEFAULT_QUALITY_AVIF, DEFAULT_QUALITY_WEBP
from asset_converter.types import TargetFormat


@dataclass(frozen=True)
class ConversionOptions:
    """Quality and overwrite settings passed through use-cases."""

    quality_webp: int = DEFAULT_QUALITY_WEBP
    quality_avif: int = DEFAULT_QUALITY_AVIF
    force: bool = False

    def quality_for(self, target_format: TargetFormat) -> int:
        """Return the 0-100 quality configured for ``target_format``."""
        if target_format == "webp":
            return self.quality_webp
        return self.quality_avif
