"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConversionTarget:
    """Fixed output format policy for one source format.

    ``None`` for ``resolution_dpi`` or ``colorspace`` means the source value
    is kept as-is.
    """

    resolution_dpi: int | None = None
    colorspace: str | None = None
    bit_depth: int = 8
    compression: str = "lzw"
    alpha: str = "off"
    extension: str = ".tiff"

    def describe(self) -> str:
        """Return a short human-readable description of the target format."""
        parts = [f"{self.bit_depth}-bit"]
        if self.colorspace:
            parts.append("grayscale" if self.colorspace.lower() == "gray" else self.colorspace)
        parts.append(self.compression.upper())
        if self.resolution_dpi:
            parts.append(f"{self.resolution_dpi} DPI")
        return ", ".join(parts)


PDF_TARGET = ConversionTarget(resolution_dpi=300, colorspace="Gray")
TIFF_TARGET = ConversionTarget()

