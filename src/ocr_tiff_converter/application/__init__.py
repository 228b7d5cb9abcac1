"""Application-layer use-cases and option objects."""

from __future__ import annotations

from pathlib import Path

from ocr_tiff_converter.application.options import (
    PDF_TARGET,
    TIFF_TARGET,
    ConversionTarget,
)
from ocr_tiff_converter.application.ports import CommandRunner, ProgressReporter
from ocr_tiff_converter.application.results import (
    ConversionJob,
    ConversionOutcome,
    OutcomeStatus,
    RunSummary,
)


def run_batch_conversion(
    *,
    input_dir: Path,
    output_dir: Path | None,
    strategy: object,
    runner: CommandRunner | None = None,
    reporter: ProgressReporter | None = None,
    timeout: float | None = None,
    atomic_writes: bool = True,
    label_width: int = 70,
    check_tools: bool = True,
) -> RunSummary:
    """Run a batch conversion via lazy use-case import."""
    from ocr_tiff_converter.application.use_cases import run_batch_conversion as _impl

    return _impl(
        input_dir=input_dir,
        output_dir=output_dir,
        strategy=strategy,  # type: ignore[arg-type]
        runner=runner,
        reporter=reporter,
        timeout=timeout,
        atomic_writes=atomic_writes,
        label_width=label_width,
        check_tools=check_tools,
    )


__all__ = [
    "ConversionTarget",
    "PDF_TARGET",
    "TIFF_TARGET",
    "ConversionJob",
    "ConversionOutcome",
    "OutcomeStatus",
    "RunSummary",
    "run_batch_conversion",
]
