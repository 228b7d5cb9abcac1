"""Progress reporter implementations."""

from __future__ import annotations

import typer

from ocr_tiff_converter.application.results import (
    ConversionJob,
    ConversionOutcome,
    OutcomeStatus,
    RunSummary,
)
from ocr_tiff_converter.converter.core import truncate_label
from ocr_tiff_converter.schemas import BatchConversionConfig

RULE = "=" * 46
# Blank padding that erases the tail of the transient "Converting..." line.
_ERASE = " " * 10


class NullProgressReporter:
    """Reporter that prints nothing; used by the library API by default."""

    def run_started(self, config: BatchConversionConfig, total: int, target: str) -> None:
        del config, total, target

    def no_files(self, config: BatchConversionConfig, label: str) -> None:
        del config, label

    def job_started(self, index: int, total: int, job: ConversionJob) -> None:
        del index, total, job

    def job_finished(self, outcome: ConversionOutcome, total: int) -> None:
        del outcome, total

    def run_finished(self, summary: RunSummary) -> None:
        del summary


class ConsoleProgressReporter:
    """Colored, line-oriented progress on stdout.

    Parameters
    ----------
    title : str
        Banner title, e.g. ``"PDF to TIFF Converter for OCR"``.
    label_width : int, default=70
        Maximum characters of the relative path shown per line.
    """

    def __init__(self, title: str, label_width: int = 70) -> None:
        self.title = title
        self.label_width = label_width

    def _label(self, job: ConversionJob) -> str:
        return truncate_label(job.relative_path.as_posix(), self.label_width)

    def run_started(self, config: BatchConversionConfig, total: int, target: str) -> None:
        typer.echo(RULE)
        typer.echo(self.title)
        typer.echo(RULE)
        typer.echo(f"Input:      {config.input_dir}")
        typer.echo(f"Output:     {config.output_dir}")
        typer.echo(f"Files:      {total}")
        typer.echo(f"Format:     {target}")
        typer.echo(RULE)
        typer.echo("")

    def no_files(self, config: BatchConversionConfig, label: str) -> None:
        typer.secho(f"No {label} files found in {config.input_dir}", fg=typer.colors.YELLOW)

    def job_started(self, index: int, total: int, job: ConversionJob) -> None:
        typer.echo(f"[{index}/{total}] Converting: {self._label(job)}...", nl=False)

    def job_finished(self, outcome: ConversionOutcome, total: int) -> None:
        prefix = f"[{outcome.index}/{total}]"
        label = self._label(outcome.job)
        if outcome.status is OutcomeStatus.SKIPPED:
            tag = typer.style("SKIP", fg=typer.colors.YELLOW)
            typer.echo(f"{prefix} {tag}: {label} (already exists)")
        elif outcome.status is OutcomeStatus.CONVERTED:
            tag = typer.style("Done", fg=typer.colors.GREEN)
            typer.echo(f"\r{prefix} {tag}: {label}{_ERASE}")
        else:
            tag = typer.style("FAILED", fg=typer.colors.RED)
            typer.echo(f"\r{prefix} {tag}: {label}{_ERASE}")

    def run_finished(self, summary: RunSummary) -> None:
        typer.echo("")
        typer.echo(RULE)
        typer.echo("Conversion Complete")
        typer.echo(RULE)
        converted = typer.style(str(summary.converted), fg=typer.colors.GREEN)
        skipped = typer.style(str(summary.skipped), fg=typer.colors.YELLOW)
        failed = typer.style(str(summary.failed), fg=typer.colors.RED)
        typer.echo(f"Converted: {converted} files")
        typer.echo(f"Skipped:   {skipped} files (already exist)")
        typer.echo(f"Failed:    {failed} files")
        for relative_path in summary.failures:
            typer.echo(f"  - {relative_path.as_posix()}")
        typer.echo(f"Output:    {summary.output_dir}")
        typer.echo(RULE)
