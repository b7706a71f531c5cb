"""Command-line builders for the supported external encoders."""

from __future__ import annotations

from pathlib import Path

from asset_converter.adapters.tools import (
    AVIF_TOOL,
    UNIFIED_TOOL,
    WEBP_TOOL,
    ToolAvailability,
)
from asset_converter.application.ports import Encoder
from asset_converter.types import TargetFormat


class UnifiedEncoder:
    """ImageMagick; output format follows the target extension."""

    name = "unified"
    executable = UNIFIED_TOOL
    formats: frozenset[TargetFormat] = frozenset({"webp", "avif"})

    def arguments(self, source: Path, target: Path, quality: int) -> list[str]:
        return [str(source), "-quality", str(quality), str(target)]


class WebpEncoder:
    """libwebp ``cwebp``."""

    name = "webp"
    executable = WEBP_TOOL
    formats: frozenset[TargetFormat] = frozenset({"webp"})

    def arguments(self, source: Path, target: Path, quality: int) -> list[str]:
        return ["-q", str(quality), str(source), "-o", str(target)]


class AvifEncoder:
    """libavif ``avifenc``.

    The quality value is passed unchanged as both the minimum and maximum
    quantizer.
    """

    name = "avif"
    executable = AVIF_TOOL
    formats: frozenset[TargetFormat] = frozenset({"avif"})

    def arguments(self, source: Path, target: Path, quality: int) -> list[str]:
        return ["--min", str(quality), "--max", str(quality), str(source), str(target)]


def select_encoder(
    target_format: TargetFormat, tools: ToolAvailability
) -> Encoder | None:
    """Pick the encoder for ``target_format``.

    The unified converter wins whenever it is present; otherwise the
    specialized encoder for the format is used if available.

    Returns
    -------
    Encoder | None
        ``None`` when no available tool can write ``target_format``.
    """
    if tools.unified:
        return UnifiedEncoder()
    if target_format == "webp" and tools.webp_encoder:
        return WebpEncoder()
    if target_format == "avif" and tools.avif_encoder:
        return AvifEncoder()
    return None
