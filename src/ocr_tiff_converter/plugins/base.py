"""Strategy protocol for converting one source file."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from ocr_tiff_converter.application.ports import CommandRunner
from ocr_tiff_converter.application.results import ConversionJob

StrategyOptions = Mapping[str, Any]


@runtime_checkable
class ConversionStrategy(Protocol):
    """Protocol implemented by per-format conversion strategies.

    Attributes
    ----------
    name : str
        Unique registry name, also accepted by ``--source``.
    label : str
        Human-readable format name used in reports ("PDF", "TIFF").
    extensions : frozenset[str]
        Lowercase source suffixes including the dot.
    required_tools : tuple[str, ...]
        Executables that must be on PATH before a run starts.
    output_dir_suffix : str
        Suffix appended to the input root for the default output root.
    target_description : str
        Output format summary shown in the run banner.
    """

    name: str
    label: str
    extensions: frozenset[str]
    required_tools: tuple[str, ...]
    output_dir_suffix: str
    target_description: str

    def can_handle(self, source_path: Path) -> bool:
        """Check whether this strategy converts ``source_path``."""

    def convert(
        self,
        job: ConversionJob,
        runner: CommandRunner,
        options: StrategyOptions,
    ) -> None:
        """Write ``job.destination_path`` or raise ``ConversionError``.

        Parameters
        ----------
        job : ConversionJob
            Source and destination paths; the destination directory exists.
        runner : CommandRunner
            Runner used for external commands.
        options : Mapping[str, Any]
            Driver options: ``timeout`` (float | None) and
            ``atomic_writes`` (bool).
        """
