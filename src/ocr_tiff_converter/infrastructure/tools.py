"""External tool lookup."""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Iterable
from pathlib import Path

from ocr_tiff_converter.errors import MissingToolError

INSTALL_HINTS: dict[str, str] = {
    "magick": "brew install imagemagick",
    "gs": "brew install ghostscript",
}


def find_tool(name: str) -> str | None:
    """Return the resolved executable path, or ``None`` when not found."""
    return shutil.which(name)


def require_tools(names: Iterable[str]) -> dict[str, str]:
    """Resolve every tool or raise for the first missing one.

    Parameters
    ----------
    names : Iterable[str]
        Executable names or paths.

    Returns
    -------
    dict[str, str]
        Mapping of requested name to resolved path.

    Raises
    ------
    MissingToolError
        If any tool cannot be located.
    """
    resolved: dict[str, str] = {}
    for name in dict.fromkeys(names):
        located = find_tool(name)
        if located is None:
            raise MissingToolError(name, INSTALL_HINTS.get(Path(name).name))
        resolved[name] = located
    return resolved


def tool_version(path: str) -> str | None:
    """Return the first line of ``<tool> --version`` or ``None`` on failure."""
    try:
        completed = subprocess.run(
            [path, "--version"],
            capture_output=True,
            text=True,
            check=False,
            timeout=10,
        )
    except (OSError, subprocess.TimeoutExpired):
        return None
    lines = (completed.stdout or "").strip().splitlines()
    return lines[0] if lines else None
