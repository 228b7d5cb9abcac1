#!/usr/bin/env python3
"""
ocr_tiff_converter.cli.cli

Typer-based CLI for batch-converting PDF and TIFF files into OCR-compatible
TIFFs (8-bit, LZW, no alpha).

Examples
--------
Rasterize every PDF under ``scans/`` into ``scans_tiffs_converted/``:

    convert-for-ocr pdf scans

Fix 16-bit / alpha TIFFs that OCR software rejects:

    convert-for-ocr tiff scans fixed

Convert a mixed tree, picking the conversion per file extension:

    convert-for-ocr convert scans --source auto
"""

from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path

import click
import typer

from ocr_tiff_converter.adapters.magick import DEFAULT_MAGICK
from ocr_tiff_converter.errors import ConverterError

app = typer.Typer(
    name="convert-for-ocr",
    help="Convert PDF and TIFF files into OCR-compatible 8-bit LZW TIFFs.",
    no_args_is_help=True,
)

INPUT_HELP = "Directory searched recursively for source files."
OUTPUT_HELP = "Output directory mirroring the input tree."
MAGICK_HELP = "ImageMagick executable."
TIMEOUT_HELP = "Seconds before a single conversion is killed and counted as failed."
NO_ATOMIC_HELP = "Let the tool write the destination directly instead of a temp file."
MAGICK_ENVVAR = "OCR_CONVERTER_MAGICK"

TITLES = {
    "pdf": "PDF to TIFF Converter for OCR",
    "tiff": "TIFF Converter for OCR",
}


def _print_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly error.

    Parameters
    ----------
    exc : Exception
        Exception raised before or during the run.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.secho(f"✗ {type(exc).__name__}: {exc}", err=True, fg=typer.colors.RED)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _run(
    ctx: typer.Context,
    *,
    input_dir: Path,
    output_dir: Path | None,
    source_format: str,
    magick: str,
    timeout: float | None,
    atomic: bool,
    strategy_modules: list[str] | None = None,
) -> None:
    """Resolve the strategy, run the batch and map errors to exit codes."""
    debug: bool = bool(ctx.obj.get("debug", False))
    try:
        from ocr_tiff_converter.application.use_cases import run_batch_conversion
        from ocr_tiff_converter.infrastructure.reporting import ConsoleProgressReporter
        from ocr_tiff_converter.plugins.registry import create_default_registry

        registry = create_default_registry(strategy_modules, magick=magick)
        strategy = registry.resolve(source_format)
        title = TITLES.get(strategy.name, f"{strategy.label} to TIFF Converter for OCR")
        run_batch_conversion(
            input_dir=input_dir,
            output_dir=output_dir,
            strategy=strategy,
            reporter=ConsoleProgressReporter(title=title),
            timeout=timeout,
            atomic_writes=atomic,
        )
    except ConverterError as exc:
        raise typer.Exit(code=_print_error(exc, debug))
    except Exception as exc:
        # Unexpected crash; --debug adds the traceback.
        raise typer.Exit(code=_print_error(exc, debug))


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log tool invocations and failures to stderr."
    ),
) -> None:
    """Initialize shared CLI state and logging.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug error output.
    verbose : bool, default=False
        Whether to log at DEBUG level.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("convert")
def convert_cmd(
    ctx: typer.Context,
    input_dir: Path = typer.Argument(..., help=INPUT_HELP),
    output_dir: Path | None = typer.Argument(
        None, help=f"{OUTPUT_HELP} Default: <input_dir>_converted (pdf: _tiffs_converted)."
    ),
    source: str = typer.Option(
        "auto",
        "--source",
        "-s",
        help="Source format: pdf, tiff, auto (per file extension) or a loaded strategy name.",
    ),
    strategy_module: list[str] | None = typer.Option(
        None,
        "--strategy-module",
        help="Module import path or file path registering extra strategies (repeatable).",
    ),
    magick: str = typer.Option(DEFAULT_MAGICK, "--magick", envvar=MAGICK_ENVVAR, help=MAGICK_HELP),
    timeout: float | None = typer.Option(None, "--timeout", min=0.001, help=TIMEOUT_HELP),
    no_atomic: bool = typer.Option(False, "--no-atomic", help=NO_ATOMIC_HELP),
) -> None:
    """Convert matching files under INPUT_DIR, mirroring its structure.

    Existing outputs are skipped, so an interrupted run can be resumed by
    running the same command again.
    """
    _run(
        ctx,
        input_dir=input_dir,
        output_dir=output_dir,
        source_format=source,
        magick=magick,
        timeout=timeout,
        atomic=not no_atomic,
        strategy_modules=strategy_module,
    )


@app.command("pdf")
def pdf_cmd(
    ctx: typer.Context,
    input_dir: Path = typer.Argument(..., help=INPUT_HELP),
    output_dir: Path | None = typer.Argument(
        None, help=f"{OUTPUT_HELP} Default: <input_dir>_tiffs_converted."
    ),
    magick: str = typer.Option(DEFAULT_MAGICK, "--magick", envvar=MAGICK_ENVVAR, help=MAGICK_HELP),
    timeout: float | None = typer.Option(None, "--timeout", min=0.001, help=TIMEOUT_HELP),
    no_atomic: bool = typer.Option(False, "--no-atomic", help=NO_ATOMIC_HELP),
) -> None:
    """Convert PDFs to multi-page 8-bit grayscale TIFFs (LZW, 300 DPI).

    Notes
    -----
    - Requires ImageMagick (`magick`) and Ghostscript (`gs`) on PATH.
    """
    _run(
        ctx,
        input_dir=input_dir,
        output_dir=output_dir,
        source_format="pdf",
        magick=magick,
        timeout=timeout,
        atomic=not no_atomic,
    )


@app.command("tiff")
def tiff_cmd(
    ctx: typer.Context,
    input_dir: Path = typer.Argument(..., help=INPUT_HELP),
    output_dir: Path | None = typer.Argument(
        None, help=f"{OUTPUT_HELP} Default: <input_dir>_converted."
    ),
    magick: str = typer.Option(DEFAULT_MAGICK, "--magick", envvar=MAGICK_ENVVAR, help=MAGICK_HELP),
    timeout: float | None = typer.Option(None, "--timeout", min=0.001, help=TIMEOUT_HELP),
    no_atomic: bool = typer.Option(False, "--no-atomic", help=NO_ATOMIC_HELP),
) -> None:
    """Convert 16-bit / alpha TIFFs to 8-bit LZW TIFFs OCR software accepts.

    Notes
    -----
    - Requires ImageMagick (`magick`) on PATH.
    - Pages and resolution metadata are kept.
    """
    _run(
        ctx,
        input_dir=input_dir,
        output_dir=output_dir,
        source_format="tiff",
        magick=magick,
        timeout=timeout,
        atomic=not no_atomic,
    )


@app.command("doctor")
def doctor_cmd(
    magick: str = typer.Option(DEFAULT_MAGICK, "--magick", envvar=MAGICK_ENVVAR, help=MAGICK_HELP),
) -> None:
    """Print located external tools and registered strategies."""
    from ocr_tiff_converter.infrastructure.tools import find_tool, tool_version

    typer.echo(f"Python: {sys.version.split()[0]}")
    for tool in (magick, "gs"):
        located = find_tool(tool)
        if located is None:
            typer.echo(f"{tool}: <not installed>")
            continue
        version = tool_version(located) or "<unknown version>"
        typer.echo(f"{tool}: {located} ({version})")

    try:
        from ocr_tiff_converter.plugins.registry import create_default_registry

        registry = create_default_registry(magick=magick)
        typer.echo(f"strategies: {', '.join([*registry.names(), 'auto'])}")
    except ConverterError:
        typer.echo("strategies: <unavailable>")


def main(args: list[str] | None = None) -> None:
    """Console entry point.

    Usage errors (missing argument, unknown option) exit with status 1 like
    configuration errors instead of Click's default 2.
    """
    try:
        code = app(args=args, prog_name="convert-for-ocr", standalone_mode=False)
    except click.UsageError as exc:
        exc.show()
        raise SystemExit(1) from exc
    except click.ClickException as exc:
        exc.show()
        raise SystemExit(exc.exit_code) from exc
    except click.Abort as exc:
        typer.echo("Aborted!", err=True)
        raise SystemExit(1) from exc
    raise SystemExit(code if isinstance(code, int) else 0)


if __name__ == "__main__":
    main()
