"""Shared pytest configuration, marker assignment and fake external tools."""

from __future__ import annotations

import os
import stat
from collections.abc import Callable
from pathlib import Path

import pytest

# Writes a tiny TIFF header to the last argument; files named *zzbad* fail.
FAKE_MAGICK = """#!/bin/sh
for last; do :; done
case "$*" in
  *zzbad*) echo "magick: no images defined" >&2; exit 1 ;;
esac
printf 'II*\\000' > "$last"
"""
FAKE_GS = "#!/bin/sh\necho 10.02.1\n"


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        parts = set(Path(str(item.fspath)).parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


def _install_tool(bin_dir: Path, name: str, body: str) -> Path:
    path = bin_dir / name
    path.write_text(body, encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def fake_tools(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Put fake ``magick`` and ``gs`` first on PATH."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    _install_tool(bin_dir, "magick", FAKE_MAGICK)
    _install_tool(bin_dir, "gs", FAKE_GS)
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")
    return bin_dir


@pytest.fixture
def install_fake_magick() -> Callable[[Path, str], Path]:
    """Return a helper that writes the fake ImageMagick script to ``dir/name``."""

    def _install(bin_dir: Path, name: str = "magick") -> Path:
        return _install_tool(bin_dir, name, FAKE_MAGICK)

    return _install
