"""Top-level API for batch conversion of PDF/TIFF files into OCR-ready TIFFs."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from ocr_tiff_converter.application.results import RunSummary

__version__ = "0.1.0"


def convert_directory(
    input_dir: Path,
    output_dir: Path | None = None,
    *,
    source_format: str = "auto",
    strategy_modules: Iterable[str] | None = None,
    **kwargs: object,
) -> RunSummary:
    """Convert a directory tree of PDF and/or TIFF files.

    Parameters
    ----------
    input_dir : Path
        Root directory searched recursively for source files.
    output_dir : Path | None, default=None
        Output root mirroring the input tree. Defaults to a sibling
        directory named after the input root.
    source_format : str, default="auto"
        ``"pdf"``, ``"tiff"``, ``"auto"`` or the name of a loaded strategy.
    strategy_modules : Iterable[str] | None, optional
        Modules or file paths registering extra strategies.
    **kwargs : object
        Forwarded to :func:`ocr_tiff_converter.api.convert_directory`
        (``magick``, ``timeout``, ``atomic_writes``, ``runner``,
        ``reporter``, ``check_tools``).

    Returns
    -------
    RunSummary
        Counts of converted, skipped and failed files.
    """
    from .api import convert_directory as _impl

    return _impl(
        input_dir,
        output_dir,
        source_format=source_format,
        strategy_modules=strategy_modules,
        **kwargs,  # type: ignore[arg-type]
    )


def convert_pdf_directory(
    input_dir: Path,
    output_dir: Path | None = None,
    **kwargs: object,
) -> RunSummary:
    """Convert PDFs to multi-page 8-bit grayscale LZW TIFFs at 300 DPI.

    ``output_dir`` defaults to ``<input_dir>_tiffs_converted``.
    """
    from .api import convert_pdf_directory as _impl

    return _impl(input_dir, output_dir, **kwargs)  # type: ignore[arg-type]


def convert_tiff_directory(
    input_dir: Path,
    output_dir: Path | None = None,
    **kwargs: object,
) -> RunSummary:
    """Convert TIFFs to 8-bit LZW TIFFs without alpha.

    ``output_dir`` defaults to ``<input_dir>_converted``.
    """
    from .api import convert_tiff_directory as _impl

    return _impl(input_dir, output_dir, **kwargs)  # type: ignore[arg-type]


__all__ = [
    "RunSummary",
    "convert_directory",
    "convert_pdf_directory",
    "convert_tiff_directory",
]
