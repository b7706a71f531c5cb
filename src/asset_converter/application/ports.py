"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from asset_converter.application.results import CommandResult
from asset_converter.types import TargetFormat


class ToolLocator(Protocol):
    """Resolve an executable name on the search path."""

    def which(self, name: str) -> str | None:
        """Return the resolved path, or ``None`` when not found."""


class CommandRunner(Protocol):
    """Run one external command to completion."""

    def run(self, command: str, args: Sequence[str]) -> CommandResult:
        """Run ``command`` with ``args`` and return its exit status."""


class Encoder(Protocol):
    """External encoder able to write one or more target formats."""

    name: str
    executable: str
    formats: frozenset[TargetFormat]

    def arguments(self, source: Path, target: Path, quality: int) -> list[str]:
        """Build the argument list converting ``source`` into ``target``."""
