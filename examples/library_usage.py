#!/usr/bin/env python3
"""Run a PDF batch from Python and inspect the summary."""

from __future__ import annotations

import sys
from pathlib import Path

from ocr_tiff_converter import convert_pdf_directory
from ocr_tiff_converter.errors import ConfigurationError
from ocr_tiff_converter.infrastructure.reporting import ConsoleProgressReporter


def main() -> int:
    if len(sys.argv) < 2:
        print(f"Usage: {sys.argv[0]} <input_directory> [output_directory]")
        return 1
    input_dir = Path(sys.argv[1])
    output_dir = Path(sys.argv[2]) if len(sys.argv) > 2 else None
    try:
        summary = convert_pdf_directory(
            input_dir,
            output_dir,
            reporter=ConsoleProgressReporter("PDF to TIFF Converter for OCR"),
        )
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    for relative_path, cause in summary.failures.items():
        print(f"{relative_path}: {cause}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
