"""Application use-cases orchestrating batch image conversion."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from asset_converter.adapters.encoders import select_encoder
from asset_converter.adapters.tools import ToolAvailability, probe_tools
from asset_converter.application.options import ConversionOptions
from asset_converter.application.ports import CommandRunner, Encoder, ToolLocator
from asset_converter.application.results import (
    BatchSummary,
    ConversionPlan,
    FileReport,
    FormatOutcome,
)
from asset_converter.errors import ConversionError, SettingsError
from asset_converter.infrastructure.discovery import enumerate_images
from asset_converter.infrastructure.process import SubprocessCommandRunner
from asset_converter.schemas import ConversionSettings
from asset_converter.types import TARGET_FORMATS, TargetFormat

logger = logging.getLogger(__name__)


def build_conversion_options(
    *,
    quality_webp: int,
    quality_avif: int,
    force: bool = False,
) -> ConversionOptions:
    """Validate raw settings into typed conversion options."""
    try:
        settings = ConversionSettings(
            quality_webp=quality_webp,
            quality_avif=quality_avif,
            force=force,
        )
    except ValidationError as exc:
        raise SettingsError(f"Invalid conversion settings: {exc}") from exc
    return ConversionOptions(
        quality_webp=settings.quality_webp,
        quality_avif=settings.quality_avif,
        force=settings.force,
    )


def plan_conversion(source: Path, force: bool) -> ConversionPlan:
    """Derive sibling output paths and decide which must be generated."""
    webp_path = source.with_suffix(".webp")
    avif_path = source.with_suffix(".avif")
    return ConversionPlan(
        source=source,
        webp_path=webp_path,
        avif_path=avif_path,
        generate_webp=force or not webp_path.exists(),
        generate_avif=force or not avif_path.exists(),
    )


def _invoke(
    encoder: Encoder,
    source: Path,
    target: Path,
    quality: int,
    runner: CommandRunner,
) -> None:
    args = encoder.arguments(source, target, quality)
    logger.debug("Running %s %s", encoder.executable, " ".join(args))
    result = runner.run(encoder.executable, args)
    if result.exit_code != 0:
        detail = result.stderr.strip() or f"exit code {result.exit_code}"
        raise ConversionError(f"{encoder.executable} failed: {detail}")


def convert_file(
    source: Path,
    options: ConversionOptions,
    tools: ToolAvailability,
    runner: CommandRunner | None = None,
) -> FileReport:
    """Use-case: write the WebP and AVIF siblings of one source image.

    Parameters
    ----------
    source : Path
        JPEG or PNG image.
    options : ConversionOptions
        Quality settings and force flag.
    tools : ToolAvailability
        Encoders resolved at startup.
    runner : CommandRunner | None, default=None
        Process runner. Defaults to :class:`SubprocessCommandRunner`.

    Returns
    -------
    FileReport
        Outcome for each target format. Encoder failures are logged and
        reported as ``FAILED``; they never propagate.
    """
    runner = runner or SubprocessCommandRunner()
    plan = plan_conversion(source, options.force)
    outcomes: dict[TargetFormat, FormatOutcome] = {}

    for target_format in TARGET_FORMATS:
        target = plan.target(target_format)
        if not plan.needs(target_format):
            logger.info("Skipping %s (exists)", target)
            outcomes[target_format] = FormatOutcome.SKIPPED_EXISTS
            continue

        encoder = select_encoder(target_format, tools)
        if encoder is None:
            logger.debug("No %s encoder available for %s", target_format, source)
            outcomes[target_format] = FormatOutcome.SKIPPED_NO_ENCODER
            continue

        logger.info("Converting %s -> %s", source, target)
        try:
            _invoke(
                encoder,
                source,
                target,
                options.quality_for(target_format),
                runner,
            )
        except ConversionError as exc:
            logger.warning(
                "Failed to convert %s to %s (%s encoder): %s",
                source,
                target_format,
                encoder.name,
                exc,
            )
            outcomes[target_format] = FormatOutcome.FAILED
            continue
        outcomes[target_format] = FormatOutcome.CONVERTED

    return FileReport(source=source, outcomes=outcomes)


def convert_tree(
    root: Path,
    options: ConversionOptions,
    *,
    tools: ToolAvailability | None = None,
    runner: CommandRunner | None = None,
    locator: ToolLocator | None = None,
) -> BatchSummary:
    """Use-case: convert every source image under ``root``.

    Tools are probed once (unless ``tools`` is given) and passed to each
    per-file conversion. Files are processed sequentially.
    """
    if tools is None:
        tools = probe_tools(locator)
    if not tools.any_available:
        logger.warning(
            "No conversion tool found (magick, cwebp or avifenc); "
            "images will be listed but not converted."
        )

    runner = runner or SubprocessCommandRunner()
    summary = BatchSummary()
    sources = enumerate_images(root)
    if not sources:
        logger.info("No images found under %s", root)
        return summary

    logger.info("Found %d image(s) under %s", len(sources), root)
    for source in sources:
        summary.reports.append(convert_file(source, options, tools, runner))
    return summary
