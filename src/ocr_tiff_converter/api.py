"""Public directory conversion API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable
from typing import Optional

from ocr_tiff_converter.adapters.magick import DEFAULT_MAGICK
from ocr_tiff_converter.application.ports import CommandRunner, ProgressReporter
from ocr_tiff_converter.application.results import RunSummary
from ocr_tiff_converter.application.use_cases import run_batch_conversion
from ocr_tiff_converter.plugins.registry import create_default_registry
from ocr_tiff_converter.types import PathLike, SourceFormat


def convert_directory(
    input_dir: PathLike,
    output_dir: Optional[PathLike] = None,
    *,
    source_format: SourceFormat | str = "auto",
    strategy_modules: Optional[Iterable[str]] = None,
    magick: str = DEFAULT_MAGICK,
    timeout: Optional[float] = None,
    atomic_writes: bool = True,
    runner: Optional[CommandRunner] = None,
    reporter: Optional[ProgressReporter] = None,
    check_tools: bool = True,
) -> RunSummary:
    """Convert every supported file under ``input_dir`` to OCR-ready TIFF."""
    registry = create_default_registry(strategy_modules, magick=magick)
    strategy = registry.resolve(source_format)
    return run_batch_conversion(
        input_dir=Path(input_dir),
        output_dir=Path(output_dir) if output_dir is not None else None,
        strategy=strategy,
        runner=runner,
        reporter=reporter,
        timeout=timeout,
        atomic_writes=atomic_writes,
        check_tools=check_tools,
    )


def convert_pdf_directory(
    input_dir: PathLike,
    output_dir: Optional[PathLike] = None,
    *,
    magick: str = DEFAULT_MAGICK,
    timeout: Optional[float] = None,
    atomic_writes: bool = True,
    runner: Optional[CommandRunner] = None,
    reporter: Optional[ProgressReporter] = None,
    check_tools: bool = True,
) -> RunSummary:
    """Rasterize PDFs into 300 DPI grayscale multi-page TIFFs."""
    return convert_directory(
        input_dir,
        output_dir,
        source_format="pdf",
        magick=magick,
        timeout=timeout,
        atomic_writes=atomic_writes,
        runner=runner,
        reporter=reporter,
        check_tools=check_tools,
    )


def convert_tiff_directory(
    input_dir: PathLike,
    output_dir: Optional[PathLike] = None,
    *,
    magick: str = DEFAULT_MAGICK,
    timeout: Optional[float] = None,
    atomic_writes: bool = True,
    runner: Optional[CommandRunner] = None,
    reporter: Optional[ProgressReporter] = None,
    check_tools: bool = True,
) -> RunSummary:
    """Re-encode TIFFs as 8-bit LZW without alpha."""
    return convert_directory(
        input_dir,
        output_dir,
        source_format="tiff",
        magick=magick,
        timeout=timeout,
        atomic_writes=atomic_writes,
        runner=runner,
        reporter=reporter,
        check_tools=check_tools,
    )
