"""Source image discovery."""

from __future__ import annotations

from pathlib import Path

from asset_converter.errors import DiscoveryError
from asset_converter.types import SOURCE_EXTENSIONS


def is_source_image(path: Path) -> bool:
    """Return whether ``path`` has a convertible raster extension."""
    return path.suffix.lower().lstrip(".") in SOURCE_EXTENSIONS


def _raise_discovery_error(exc: OSError) -> None:
    raise DiscoveryError(f"Cannot read '{exc.filename}': {exc.strerror or exc}") from exc


def enumerate_images(root: Path) -> list[Path]:
    """Recursively list JPEG/PNG files under ``root``.

    Parameters
    ----------
    root : Path
        Directory to walk.

    Returns
    -------
    list[Path]
        Matching regular files, sorted. Empty when ``root`` does not exist.

    Raises
    ------
    DiscoveryError
        If ``root`` or one of its subdirectories cannot be read.
    """
    if not root.exists():
        return []
    if not root.is_dir():
        raise DiscoveryError(f"Image root '{root}' is not a directory.")

    found: list[Path] = []
    for dirpath, _dirnames, filenames in root.walk(on_error=_raise_discovery_error):
        for name in filenames:
            candidate = dirpath / name
            if is_source_image(candidate) and candidate.is_file():
                found.append(candidate)
    return sorted(found)
