"""Shared fixtures for unit tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def pdf_tree(tmp_path: Path) -> Path:
    """Create ``input/{a.pdf, b.PDF, sub/c.pdf}`` plus a non-matching file."""
    root = tmp_path / "input"
    (root / "sub").mkdir(parents=True)
    (root / "a.pdf").write_bytes(b"%PDF-1.4 a")
    (root / "b.PDF").write_bytes(b"%PDF-1.4 b")
    (root / "sub" / "c.pdf").write_bytes(b"%PDF-1.4 c")
    (root / "notes.txt").write_text("not a pdf", encoding="utf-8")
    return root
