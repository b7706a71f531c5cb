"""Application-layer use-cases and option objects."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from asset_converter.application.options import ConversionOptions
from asset_converter.application.ports import CommandRunner, Encoder, ToolLocator
from asset_converter.application.results import (
    BatchSummary,
    CommandResult,
    ConversionPlan,
    FileReport,
    FormatOutcome,
)

if TYPE_CHECKING:
    from asset_converter.adapters.tools import ToolAvailability


def build_conversion_options(
    *,
    quality_webp: int,
    quality_avif: int,
    force: bool = False,
) -> ConversionOptions:
    """Build typed conversion options via lazy use-case import."""
    from asset_converter.application.use_cases import build_conversion_options as _impl

    return _impl(quality_webp=quality_webp, quality_avif=quality_avif, force=force)


def convert_tree(
    root: Path,
    options: ConversionOptions,
    *,
    tools: ToolAvailability | None = None,
    runner: CommandRunner | None = None,
    locator: ToolLocator | None = None,
) -> BatchSummary:
    """Convert every source image under ``root`` via lazy use-case import."""
    from asset_converter.application.use_cases import convert_tree as _impl

    return _impl(root, options, tools=tools, runner=runner, locator=locator)


__all__ = [
    "BatchSummary",
    "CommandResult",
    "CommandRunner",
    "ConversionOptions",
    "ConversionPlan",
    "Encoder",
    "FileReport",
    "FormatOutcome",
    "ToolLocator",
    "build_conversion_options",
    "convert_tree",
]
