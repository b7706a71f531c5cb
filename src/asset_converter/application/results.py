"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from asset_converter.types import TargetFormat


@dataclass(frozen=True)
class CommandResult:
    """Exit status of an external command."""

    exit_code: int
    stderr: str = ""


@dataclass(frozen=True)
class ConversionPlan:
    """Target paths for one source image and whether each must be written."""

    source: Path
    webp_path: Path
    avif_path: Path
    generate_webp: bool
    generate_avif: bool

    def target(self, target_format: TargetFormat) -> Path:
        """Return the output path for ``target_format``."""
        return self.webp_path if target_format == "webp" else self.avif_path

    def needs(self, target_format: TargetFormat) -> bool:
        """Return whether ``target_format`` must be (re)generated."""
        return self.generate_webp if target_format == "webp" else self.generate_avif


class FormatOutcome(str, Enum):
    """What happened to one target format of one source image."""

    CONVERTED = "converted"
    SKIPPED_EXISTS = "skipped_exists"
    SKIPPED_NO_ENCODER = "skipped_no_encoder"
    FAILED = "failed"


@dataclass(frozen=True)
class FileReport:
    """Per-format outcomes for one source image."""

    source: Path
    outcomes: dict[TargetFormat, FormatOutcome]


@dataclass
class BatchSummary:
    """Aggregated outcome of a batch run."""

    reports: list[FileReport] = field(default_factory=list)

    @property
    def files(self) -> int:
        return len(self.reports)

    def count(self, outcome: FormatOutcome) -> int:
        """Count format outcomes equal to ``outcome`` across all files."""
        return sum(
            1
            for report in self.reports
            for value in report.outcomes.values()
            if value is outcome
        )

    @property
    def converted(self) -> int:
        return self.count(FormatOutcome.CONVERTED)

    @property
    def skipped(self) -> int:
        return self.count(FormatOutcome.SKIPPED_EXISTS) + self.count(
            FormatOutcome.SKIPPED_NO_ENCODER
        )

    @property
    def failed(self) -> int:
        return self.count(FormatOutcome.FAILED)
