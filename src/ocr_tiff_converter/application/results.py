"""Application-layer job, outcome and summary objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

SKIP_REASON_EXISTS = "already_exists"


class OutcomeStatus(StrEnum):
    """Terminal state of a single conversion job."""

    CONVERTED = "converted"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class ConversionJob:
    """One source file and its mirrored destination."""

    source_path: Path
    relative_path: Path
    destination_path: Path


@dataclass(frozen=True)
class ConversionOutcome:
    """Structured result of one job; exactly one per job."""

    job: ConversionJob
    status: OutcomeStatus
    index: int = 0
    reason: str | None = None
    cause: str | None = None

    @classmethod
    def converted(cls, job: ConversionJob, index: int = 0) -> ConversionOutcome:
        return cls(job=job, status=OutcomeStatus.CONVERTED, index=index)

    @classmethod
    def skipped(
        cls, job: ConversionJob, index: int = 0, reason: str = SKIP_REASON_EXISTS
    ) -> ConversionOutcome:
        return cls(job=job, status=OutcomeStatus.SKIPPED, index=index, reason=reason)

    @classmethod
    def failed(cls, job: ConversionJob, cause: str, index: int = 0) -> ConversionOutcome:
        return cls(job=job, status=OutcomeStatus.FAILED, index=index, cause=cause)


@dataclass
class RunSummary:
    """Counters for one batch run.

    Only the driver's control flow calls :meth:`record`, once per job.
    """

    input_dir: Path
    output_dir: Path
    total: int = 0
    converted: int = 0
    skipped: int = 0
    failed: int = 0
    failures: dict[Path, str] = field(default_factory=dict)

    def record(self, outcome: ConversionOutcome) -> None:
        """Count a terminal outcome."""
        if outcome.status is OutcomeStatus.CONVERTED:
            self.converted += 1
        elif outcome.status is OutcomeStatus.SKIPPED:
            self.skipped += 1
        else:
            self.failed += 1
            self.failures[outcome.job.relative_path] = outcome.cause or "unknown error"

    @property
    def processed(self) -> int:
        return self.converted + self.skipped + self.failed

    @property
    def is_complete(self) -> bool:
        """Whether every discovered job has a recorded outcome."""
        return self.total == self.processed
