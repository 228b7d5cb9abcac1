"""Shared type aliases for converter modules."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Literal

type SourceFormat = Literal["pdf", "tiff", "auto"]

type CommandArgs = Sequence[str]
type PathLike = str | Path
