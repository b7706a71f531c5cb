"""Unit tests for encoder command builders and selection policy."""

from __future__ import annotations

from pathlib import Path

import pytest

from asset_converter.adapters.encoders import (
    AvifEncoder,
    UnifiedEncoder,
    WebpEncoder,
    select_encoder,
)
from asset_converter.adapters.tools import ToolAvailability

SOURCE = Path("assets/img/logo.png")


def test_unified_arguments_put_output_last() -> None:
    args = UnifiedEncoder().arguments(SOURCE, SOURCE.with_suffix(".avif"), 60)
    assert args == [str(SOURCE), "-quality", "60", str(SOURCE.with_suffix(".avif"))]


def test_cwebp_arguments_use_output_flag() -> None:
    args = WebpEncoder().arguments(SOURCE, SOURCE.with_suffix(".webp"), 80)
    assert args == ["-q", "80", str(SOURCE), "-o", str(SOURCE.with_suffix(".webp"))]


def test_avifenc_uses_quality_as_both_quantizer_bounds() -> None:
    args = AvifEncoder().arguments(SOURCE, SOURCE.with_suffix(".avif"), 42)
    assert args == [
        "--min",
        "42",
        "--max",
        "42",
        str(SOURCE),
        str(SOURCE.with_suffix(".avif")),
    ]


@pytest.mark.parametrize(
    ("tools", "target_format", "expected"),
    [
        (ToolAvailability(unified=True, webp_encoder=True, avif_encoder=True), "webp", "magick"),
        (ToolAvailability(unified=True), "avif", "magick"),
        (ToolAvailability(webp_encoder=True, avif_encoder=True), "webp", "cwebp"),
        (ToolAvailability(webp_encoder=True, avif_encoder=True), "avif", "avifenc"),
        (ToolAvailability(webp_encoder=True), "avif", None),
        (ToolAvailability(avif_encoder=True), "webp", None),
        (ToolAvailability(), "webp", None),
    ],
)
def test_select_encoder_prefers_unified_tool(
    tools: ToolAvailability, target_format: str, expected: str | None
) -> None:
    encoder = select_encoder(target_format, tools)
    if expected is None:
        assert encoder is None
    else:
        assert encoder is not None
        assert encoder.executable == expected
        assert target_format in encoder.formats
