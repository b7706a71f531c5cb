"""External encoder discovery on the executable search path."""

from __future__ import annotations

import shutil
from dataclasses import dataclass

from asset_converter.application.ports import ToolLocator

UNIFIED_TOOL = "magick"
WEBP_TOOL = "cwebp"
AVIF_TOOL = "avifenc"


class ShutilToolLocator:
    """Resolve executables with ``shutil.which``."""

    def which(self, name: str) -> str | None:
        """Return the absolute path of ``name`` or ``None``."""
        return shutil.which(name)


@dataclass(frozen=True)
class ToolAvailability:
    """Capability set of external encoders resolved once per run."""

    unified: bool = False
    webp_encoder: bool = False
    avif_encoder: bool = False

    @property
    def any_available(self) -> bool:
        return self.unified or self.webp_encoder or self.avif_encoder


def probe_tools(locator: ToolLocator | None = None) -> ToolAvailability:
    """Check which external encoders are resolvable.

    Parameters
    ----------
    locator : ToolLocator | None, default=None
        Executable resolver. Defaults to :class:`ShutilToolLocator`.

    Returns
    -------
    ToolAvailability
        Flags for the unified converter and both specialized encoders.
    """
    locator = locator or ShutilToolLocator()
    return ToolAvailability(
        unified=locator.which(UNIFIED_TOOL) is not None,
        webp_encoder=locator.which(WEBP_TOOL) is not None,
        avif_encoder=locator.which(AVIF_TOOL) is not None,
    )
