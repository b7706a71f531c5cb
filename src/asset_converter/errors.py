"""Exception hierarchy for asset conversion."""

from __future__ import annotations


class AssetConverterError(Exception):
    """Base error for the converter; carries the CLI exit code."""

    exit_code: int = 1


class SettingsError(AssetConverterError):
    """Conversion settings failed validation."""

    exit_code = 2


class DiscoveryError(AssetConverterError):
    """The image root could not be walked."""

    exit_code = 3


class ConversionError(AssetConverterError):
    """An external encoder exited non-zero for one output."""


class CommandLaunchError(ConversionError):
    """An external encoder could not be started."""
