"""Batch conversion of JPEG/PNG assets to WebP and AVIF siblings."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from asset_converter.schemas import (
    DEFAULT_QUALITY_AVIF,
    DEFAULT_QUALITY_WEBP,
    DEFAULT_ROOT,
)

if TYPE_CHECKING:
    from asset_converter.application.results import BatchSummary

__version__ = "0.1.0"


def convert_assets(
    root: Path = DEFAULT_ROOT,
    *,
    quality_webp: int = DEFAULT_QUALITY_WEBP,
    quality_avif: int = DEFAULT_QUALITY_AVIF,
    force: bool = False,
) -> BatchSummary:
    """Convert every JPEG/PNG under ``root`` to WebP and AVIF.

    Parameters
    ----------
    root : Path, default=Path("assets")
        Directory scanned recursively.
    quality_webp : int, default=80
        WebP quality on a 0-100 scale.
    quality_avif : int, default=60
        AVIF quality on a 0-100 scale.
    force : bool, default=False
        Regenerate outputs that already exist.

    Returns
    -------
    BatchSummary
        Per-file outcomes of the run.
    """
    from .application import build_conversion_options, convert_tree

    options = build_conversion_options(
        quality_webp=quality_webp,
        quality_avif=quality_avif,
        force=force,
    )
    return convert_tree(root, options)


__all__ = ["DEFAULT_ROOT", "convert_assets"]
