"""Application use-cases orchestrating batch conversion."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from pydantic import ValidationError

from ocr_tiff_converter.adapters.runners import SubprocessCommandRunner
from ocr_tiff_converter.application.ports import CommandRunner, ProgressReporter
from ocr_tiff_converter.application.results import ConversionJob, ConversionOutcome, RunSummary
from ocr_tiff_converter.converter.core import (
    default_output_dir,
    discover_sources,
    plan_jobs,
    prepare_output_dir,
    resolve_input_dir,
)
from ocr_tiff_converter.errors import ConversionError, FileSystemError, InvalidInputError
from ocr_tiff_converter.infrastructure.reporting import NullProgressReporter
from ocr_tiff_converter.infrastructure.tools import require_tools
from ocr_tiff_converter.plugins.base import ConversionStrategy
from ocr_tiff_converter.schemas import BatchConversionConfig

logger = logging.getLogger(__name__)


def build_batch_config(
    *,
    input_dir: Path,
    output_dir: Path | None,
    strategy: ConversionStrategy,
    timeout: float | None = None,
    atomic_writes: bool = True,
    label_width: int = 70,
) -> BatchConversionConfig:
    """Build a validated run configuration.

    ``output_dir`` defaults to ``<input_dir><strategy.output_dir_suffix>``.

    Raises
    ------
    InvalidInputError
        If the input root is missing or parameters fail validation.
    """
    input_root = resolve_input_dir(input_dir)
    if output_dir is None:
        output_dir = default_output_dir(input_root, strategy.output_dir_suffix)
    try:
        return BatchConversionConfig(
            input_dir=input_root,
            output_dir=Path(output_dir).expanduser().resolve(),
            extensions=strategy.extensions,
            timeout=timeout,
            atomic_writes=atomic_writes,
            label_width=label_width,
        )
    except ValidationError as exc:
        raise InvalidInputError(f"Invalid batch conversion parameters: {exc}") from exc


def should_skip(job: ConversionJob) -> bool:
    """An existing destination file marks finished work; nothing else is checked."""
    return job.destination_path.is_file()


def convert_job(
    job: ConversionJob,
    strategy: ConversionStrategy,
    runner: CommandRunner,
    options: Mapping[str, object],
    *,
    index: int = 0,
) -> ConversionOutcome:
    """Convert one job and capture any per-file failure as an outcome."""
    destination_dir = job.destination_path.parent
    try:
        destination_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        error = FileSystemError(f"cannot create directory {destination_dir}: {exc}")
        logger.info("%s: %s", job.relative_path, error)
        return ConversionOutcome.failed(job, str(error), index=index)

    try:
        strategy.convert(job, runner, options)
    except ConversionError as exc:
        logger.info("%s: %s", job.relative_path, exc)
        return ConversionOutcome.failed(job, str(exc), index=index)
    except Exception as exc:
        logger.exception("unexpected error while converting %s", job.relative_path)
        return ConversionOutcome.failed(job, f"{type(exc).__name__}: {exc}", index=index)
    return ConversionOutcome.converted(job, index=index)


def run_batch_conversion(
    *,
    input_dir: Path,
    output_dir: Path | None,
    strategy: ConversionStrategy,
    runner: CommandRunner | None = None,
    reporter: ProgressReporter | None = None,
    timeout: float | None = None,
    atomic_writes: bool = True,
    label_width: int = 70,
    check_tools: bool = True,
) -> RunSummary:
    """Use-case: convert every matching file under ``input_dir``.

    Files are processed one at a time in sorted path order. Per-file
    failures are counted and never abort the run.

    Raises
    ------
    ConfigurationError
        Missing tool, invalid input root, or uncreatable output root. Raised
        before any file is converted.
    """
    if check_tools:
        require_tools(strategy.required_tools)

    config = build_batch_config(
        input_dir=input_dir,
        output_dir=output_dir,
        strategy=strategy,
        timeout=timeout,
        atomic_writes=atomic_writes,
        label_width=label_width,
    )
    runner = runner or SubprocessCommandRunner()
    reporter = reporter or NullProgressReporter()

    output_root = prepare_output_dir(config.output_dir)
    sources = discover_sources(config.input_dir, config.extensions, exclude=[output_root])
    jobs = plan_jobs(
        config.input_dir,
        output_root,
        sources,
        config.extensions,
        config.target_extension,
    )
    summary = RunSummary(
        input_dir=config.input_dir,
        output_dir=output_root,
        total=len(jobs),
    )
    if not jobs:
        reporter.no_files(config, strategy.label)
        return summary

    logger.debug("converting %d %s files into %s", len(jobs), strategy.label, output_root)
    reporter.run_started(config, summary.total, strategy.target_description)
    options = {"timeout": config.timeout, "atomic_writes": config.atomic_writes}
    for index, job in enumerate(jobs, start=1):
        if should_skip(job):
            outcome = ConversionOutcome.skipped(job, index=index)
        else:
            reporter.job_started(index, summary.total, job)
            outcome = convert_job(job, strategy, runner, options, index=index)
        summary.record(outcome)
        reporter.job_finished(outcome, summary.total)

    reporter.run_finished(summary)
    return summary
