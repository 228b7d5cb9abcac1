"""ImageMagick command construction."""

from __future__ import annotations

from pathlib import Path

from ocr_tiff_converter.application.options import ConversionTarget

DEFAULT_MAGICK = "magick"


def build_magick_command(
    source_path: Path,
    destination_path: Path,
    target: ConversionTarget,
    *,
    binary: str = DEFAULT_MAGICK,
) -> list[str]:
    """Build an ImageMagick argument vector for one conversion.

    Parameters
    ----------
    source_path : Path
        Input PDF or TIFF file.
    destination_path : Path
        Output file; its suffix selects the TIFF coder.
    target : ConversionTarget
        Output format policy.
    binary : str, default="magick"
        ImageMagick executable name or path.

    Returns
    -------
    list[str]
        Arguments suitable for ``subprocess.run``.

    Notes
    -----
    ``-density`` is a read setting and must precede the input file so the
    PDF delegate rasterizes at that resolution. All pages are kept, so a
    multi-page source yields a multi-page TIFF.
    """
    args: list[str] = [binary]
    if target.resolution_dpi:
        args += ["-density", str(target.resolution_dpi)]
    args.append(str(source_path))
    if target.colorspace:
        args += ["-colorspace", target.colorspace]
    args += ["-alpha", target.alpha]
    args += ["-depth", str(target.bit_depth)]
    args += ["-compress", target.compression]
    args.append(str(destination_path))
    return args
