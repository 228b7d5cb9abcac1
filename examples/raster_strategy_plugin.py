#!/usr/bin/env python3
"""Example strategy module adding PNG/JPEG sources.

Load it with:

    convert-for-ocr convert photos --source raster \
        --strategy-module examples/raster_strategy_plugin.py
"""

from __future__ import annotations

from ocr_tiff_converter.application.options import ConversionTarget
from ocr_tiff_converter.plugins.builtins import MagickStrategy


class RasterSourceStrategy(MagickStrategy):
    """Convert camera/phone images to grayscale 8-bit LZW TIFFs."""

    name = "raster"
    label = "PNG/JPEG"
    extensions = frozenset({".png", ".jpg", ".jpeg"})
    target = ConversionTarget(colorspace="Gray")
    output_dir_suffix = "_tiffs_converted"


STRATEGY = RasterSourceStrategy()
