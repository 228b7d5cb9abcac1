"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from ocr_tiff_converter.application.results import (
    ConversionJob,
    ConversionOutcome,
    RunSummary,
)
from ocr_tiff_converter.types import CommandArgs

if TYPE_CHECKING:
    from ocr_tiff_converter.schemas import BatchConversionConfig


class CommandRunner(Protocol):
    """Run one external command to completion."""

    def run(self, args: CommandArgs, timeout: float | None = None) -> None:
        """Run command; raise ``ToolExecutionError`` on failure."""


class ProgressReporter(Protocol):
    """Observe batch progress without influencing outcomes."""

    def run_started(self, config: BatchConversionConfig, total: int, target: str) -> None:
        """Announce a run over ``total`` discovered files."""

    def no_files(self, config: BatchConversionConfig, label: str) -> None:
        """Announce that discovery found nothing to convert."""

    def job_started(self, index: int, total: int, job: ConversionJob) -> None:
        """Announce that a job is being converted."""

    def job_finished(self, outcome: ConversionOutcome, total: int) -> None:
        """Announce the terminal state of a job."""

    def run_finished(self, summary: RunSummary) -> None:
        """Print final counts."""
