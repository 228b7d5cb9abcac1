"""Shared batch-conversion core utilities."""

from __future__ import annotations

from collections.abc import Collection, Iterable
from pathlib import Path

from ocr_tiff_converter.application.results import ConversionJob
from ocr_tiff_converter.errors import InvalidInputError, OutputDirectoryError


def resolve_input_dir(input_dir: Path) -> Path:
    """Return the absolute input root.

    Raises
    ------
    InvalidInputError
        If the path does not exist or is not a directory.
    """
    path = Path(input_dir).expanduser()
    if not path.exists():
        raise InvalidInputError(f"Input directory does not exist: {input_dir}")
    if not path.is_dir():
        raise InvalidInputError(f"Input path is not a directory: {input_dir}")
    return path.resolve()


def default_output_dir(input_dir: Path, suffix: str) -> Path:
    """Return the sibling output root ``<input_dir><suffix>``."""
    path = Path(input_dir).expanduser()
    # Path("data/") and Path("data") share a name, so no trailing separator leaks in.
    return path.with_name(f"{path.name}{suffix}")


def prepare_output_dir(output_dir: Path) -> Path:
    """Create the output root (idempotently) and return its absolute path.

    Raises
    ------
    OutputDirectoryError
        If the root cannot be created or exists as a file.
    """
    path = Path(output_dir).expanduser()
    try:
        path.mkdir(parents=True, exist_ok=True)
    except FileExistsError as exc:
        raise OutputDirectoryError(f"Output path is not a directory: {output_dir}") from exc
    except OSError as exc:
        raise OutputDirectoryError(
            f"Cannot create output directory {output_dir}: {exc}"
        ) from exc
    return path.resolve()


def matches_extension(path: Path, extensions: Collection[str]) -> bool:
    """Check a file suffix against lowercase extensions, ignoring case."""
    return path.suffix.lower() in extensions


def discover_sources(
    input_dir: Path,
    extensions: Collection[str],
    exclude: Iterable[Path] | None = None,
) -> list[Path]:
    """List matching files under ``input_dir`` in deterministic order.

    Parameters
    ----------
    input_dir : Path
        Absolute input root.
    extensions : Collection[str]
        Lowercase suffixes including the dot, e.g. ``{".tif", ".tiff"}``.
    exclude : Iterable[Path] | None, optional
        Directories whose contents are never returned (e.g. an output root
        nested inside the input root). Entries that are not strictly inside
        ``input_dir``, such as an output root containing it, are ignored.

    Returns
    -------
    list[Path]
        Absolute file paths, deduplicated, sorted by full path.
    """
    root = resolve_input_dir(input_dir)
    excluded = [
        skip
        for skip in (Path(item).resolve() for item in exclude or [])
        if skip != root and skip.is_relative_to(root)
    ]
    found: set[Path] = set()
    for candidate in root.rglob("*"):
        if not matches_extension(candidate, extensions):
            continue
        if not candidate.is_file():
            continue
        if any(candidate.is_relative_to(skip) for skip in excluded):
            continue
        found.add(candidate.absolute())
    return sorted(found, key=str)


def strip_extension(name: str, extensions: Collection[str]) -> str:
    """Remove a known source extension from ``name`` regardless of its case."""
    stem, dot, suffix = name.rpartition(".")
    if dot and stem and f".{suffix.lower()}" in extensions:
        return stem
    return name


def map_destination(
    input_dir: Path,
    source_path: Path,
    output_dir: Path,
    extensions: Collection[str],
    target_extension: str = ".tiff",
) -> tuple[Path, Path]:
    """Mirror ``source_path`` from the input root into the output root.

    Returns
    -------
    tuple[Path, Path]
        ``(relative_path, destination_path)``; ``a/B.PDF`` maps to
        ``<output_dir>/a/B.tiff``.
    """
    relative = source_path.relative_to(input_dir)
    stem = strip_extension(relative.name, extensions)
    destination = output_dir / relative.parent / f"{stem}{target_extension}"
    return relative, destination


def plan_jobs(
    input_dir: Path,
    output_dir: Path,
    sources: Iterable[Path],
    extensions: Collection[str],
    target_extension: str = ".tiff",
) -> list[ConversionJob]:
    """Build one immutable job per discovered source, preserving order."""
    jobs: list[ConversionJob] = []
    for source in sources:
        relative, destination = map_destination(
            input_dir, source, output_dir, extensions, target_extension
        )
        jobs.append(
            ConversionJob(
                source_path=source,
                relative_path=relative,
                destination_path=destination,
            )
        )
    return jobs


def truncate_label(label: str, width: int = 70) -> str:
    """Cut a progress label to ``width`` characters."""
    return label[:width]
