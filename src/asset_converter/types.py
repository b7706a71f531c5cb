"""Shared type aliases for converter modules."""

from __future__ import annotations

from typing import Literal

type TargetFormat = Literal["webp", "avif"]

TARGET_FORMATS: tuple[TargetFormat, ...] = ("webp", "avif")

SOURCE_EXTENSIONS: frozenset[str] = frozenset({"jpg", "jpeg", "png"})
