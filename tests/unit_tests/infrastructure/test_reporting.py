"""Unit tests for console progress reporting."""

from __future__ import annotations

from pathlib import Path

import pytest

from ocr_tiff_converter.application.results import (
    ConversionJob,
    ConversionOutcome,
    RunSummary,
)
from ocr_tiff_converter.infrastructure.reporting import ConsoleProgressReporter
from ocr_tiff_converter.schemas import BatchConversionConfig


def _job(relative: str) -> ConversionJob:
    return ConversionJob(
        source_path=Path("/in") / relative,
        relative_path=Path(relative),
        destination_path=Path("/out") / relative,
    )


def _config() -> BatchConversionConfig:
    return BatchConversionConfig(
        input_dir=Path("/in"), output_dir=Path("/out"), extensions={".pdf"}
    )


def test_banner_lists_roots_and_format(capsys: pytest.CaptureFixture[str]) -> None:
    """Print input, output, file count and target format."""
    ConsoleProgressReporter("PDF to TIFF Converter for OCR").run_started(
        _config(), 12, "8-bit, grayscale, LZW, 300 DPI"
    )
    out = capsys.readouterr().out
    assert "PDF to TIFF Converter for OCR" in out
    assert "Input:      /in" in out
    assert "Files:      12" in out
    assert "Format:     8-bit, grayscale, LZW, 300 DPI" in out


def test_converting_line_is_overwritten_by_terminal_state(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Print a transient line and replace it with Done/FAILED."""
    reporter = ConsoleProgressReporter("t")
    job = _job("sub/a.pdf")
    reporter.job_started(1, 2, job)
    reporter.job_finished(ConversionOutcome.converted(job, index=1), 2)
    reporter.job_started(2, 2, job)
    reporter.job_finished(ConversionOutcome.failed(job, "boom", index=2), 2)

    out = capsys.readouterr().out
    assert "[1/2] Converting: sub/a.pdf..." in out
    assert "\r[1/2] Done: sub/a.pdf" in out
    assert "\r[2/2] FAILED: sub/a.pdf" in out
    assert "boom" not in out


def test_skip_line(capsys: pytest.CaptureFixture[str]) -> None:
    """Print a single SKIP line for existing outputs."""
    job = _job("a.pdf")
    ConsoleProgressReporter("t").job_finished(ConversionOutcome.skipped(job, index=3), 9)
    assert capsys.readouterr().out == "[3/9] SKIP: a.pdf (already exists)\n"


def test_labels_are_truncated(capsys: pytest.CaptureFixture[str]) -> None:
    """Cut long relative paths to the configured width."""
    job = _job("d" * 30 + "/" + "f" * 60 + ".pdf")
    ConsoleProgressReporter("t", label_width=20).job_started(1, 1, job)
    out = capsys.readouterr().out
    assert out == f"[1/1] Converting: {'d' * 20}..."


def test_summary_always_lists_counts(capsys: pytest.CaptureFixture[str]) -> None:
    """Print every counter, the failed paths and the output root."""
    summary = RunSummary(input_dir=Path("/in"), output_dir=Path("/out"), total=3)
    summary.record(ConversionOutcome.converted(_job("a.pdf")))
    summary.record(ConversionOutcome.converted(_job("c.pdf")))
    summary.record(ConversionOutcome.failed(_job("b.PDF"), "magick exited with status 1"))

    ConsoleProgressReporter("t").run_finished(summary)

    out = capsys.readouterr().out
    assert "Conversion Complete" in out
    assert "Converted: 2 files" in out
    assert "Skipped:   0 files" in out
    assert "Failed:    1 files" in out
    assert "  - b.PDF" in out
    assert "status 1" not in out
    assert "Output:    /out" in out


def test_no_files_message(capsys: pytest.CaptureFixture[str]) -> None:
    """Tell the user nothing matched."""
    ConsoleProgressReporter("t").no_files(_config(), "PDF")
    assert "No PDF files found in /in" in capsys.readouterr().out
