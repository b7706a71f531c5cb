"""Unit tests for external tool probing."""

from __future__ import annotations

import shutil

import pytest
from doubles import FakeLocator

from asset_converter.adapters.tools import (
    ShutilToolLocator,
    ToolAvailability,
    probe_tools,
)


def test_probe_reports_each_tool_independently() -> None:
    tools = probe_tools(FakeLocator("cwebp", "avifenc"))
    assert tools == ToolAvailability(unified=False, webp_encoder=True, avif_encoder=True)
    assert tools.any_available


def test_probe_with_nothing_installed() -> None:
    tools = probe_tools(FakeLocator())
    assert tools == ToolAvailability()
    assert not tools.any_available


def test_default_locator_uses_shutil_which(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        shutil, "which", lambda name: "/opt/bin/magick" if name == "magick" else None
    )
    assert ShutilToolLocator().which("magick") == "/opt/bin/magick"
    assert probe_tools() == ToolAvailability(unified=True)
