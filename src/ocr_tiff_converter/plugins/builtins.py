"""Built-in conversion strategies."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from pathlib import Path

from ocr_tiff_converter.adapters.magick import DEFAULT_MAGICK, build_magick_command
from ocr_tiff_converter.application.options import (
    PDF_TARGET,
    TIFF_TARGET,
    ConversionTarget,
)
from ocr_tiff_converter.application.ports import CommandRunner
from ocr_tiff_converter.application.results import ConversionJob
from ocr_tiff_converter.errors import ConversionError, StrategyError, ToolExecutionError
from ocr_tiff_converter.plugins.base import ConversionStrategy, StrategyOptions

logger = logging.getLogger(__name__)


def partial_path(destination_path: Path) -> Path:
    """Return the hidden work file written before the final rename.

    The suffix is kept so ImageMagick still selects the TIFF coder.
    """
    return destination_path.with_name(
        f".{destination_path.stem}.partial{destination_path.suffix}"
    )


class MagickStrategy:
    """Convert one file with a single ImageMagick invocation.

    Subclasses set the class attributes; the command comes from
    :func:`build_magick_command` and ``target``.
    """

    name = "magick"
    label = "image"
    extensions: frozenset[str] = frozenset()
    target: ConversionTarget = TIFF_TARGET
    extra_tools: tuple[str, ...] = ()
    output_dir_suffix = "_converted"

    def __init__(self, magick: str = DEFAULT_MAGICK) -> None:
        self.magick = magick

    @property
    def required_tools(self) -> tuple[str, ...]:
        return (self.magick, *self.extra_tools)

    @property
    def target_description(self) -> str:
        return self.target.describe()

    def can_handle(self, source_path: Path) -> bool:
        return source_path.suffix.lower() in self.extensions

    def build_command(self, source_path: Path, destination_path: Path) -> list[str]:
        return build_magick_command(
            source_path, destination_path, self.target, binary=self.magick
        )

    def convert(
        self,
        job: ConversionJob,
        runner: CommandRunner,
        options: StrategyOptions,
    ) -> None:
        """Run ImageMagick for ``job``.

        With ``atomic_writes`` the tool writes to :func:`partial_path` and the
        result is renamed onto the destination only after a zero exit, so a
        failed run never leaves a file that a later skip check would accept.

        Raises
        ------
        ConversionError
            If the tool fails or the output cannot be moved into place.
        """
        timeout = options.get("timeout")
        if not options.get("atomic_writes", True):
            runner.run(
                self.build_command(job.source_path, job.destination_path),
                timeout=timeout,
            )
            return

        work_path = partial_path(job.destination_path)
        try:
            runner.run(self.build_command(job.source_path, work_path), timeout=timeout)
            if not work_path.is_file():
                raise ToolExecutionError(f"{self.magick} exited cleanly but wrote no output")
            os.replace(work_path, job.destination_path)
        except OSError as exc:
            raise ConversionError(f"cannot move output into place: {exc}") from exc
        finally:
            if work_path.exists():
                logger.debug("removing partial output %s", work_path)
                work_path.unlink(missing_ok=True)


class PdfSourceStrategy(MagickStrategy):
    """Rasterize PDF pages into one grayscale multi-page TIFF."""

    name = "pdf"
    label = "PDF"
    extensions = frozenset({".pdf"})
    target = PDF_TARGET
    # ImageMagick delegates PDF rendering to Ghostscript.
    extra_tools = ("gs",)
    output_dir_suffix = "_tiffs_converted"


class TiffSourceStrategy(MagickStrategy):
    """Re-encode TIFFs as 8-bit LZW without alpha, keeping pages and resolution."""

    name = "tiff"
    label = "TIFF"
    extensions = frozenset({".tif", ".tiff"})
    target = TIFF_TARGET
    output_dir_suffix = "_converted"


class ExtensionDispatchStrategy:
    """Pick the strategy for each file from its extension."""

    name = "auto"
    output_dir_suffix = "_converted"

    def __init__(self, strategies: Sequence[ConversionStrategy]) -> None:
        if not strategies:
            raise StrategyError("Extension dispatch needs at least one strategy.")
        owners: dict[str, str] = {}
        for strategy in strategies:
            for extension in strategy.extensions:
                if extension in owners:
                    raise StrategyError(
                        f"Multiple strategies handle '{extension}' "
                        f"({owners[extension]}, {strategy.name}). "
                        "Pass --source explicitly."
                    )
                owners[extension] = strategy.name
        self._strategies = tuple(strategies)

    @property
    def strategies(self) -> tuple[ConversionStrategy, ...]:
        return self._strategies

    @property
    def label(self) -> str:
        return "/".join(strategy.label for strategy in self._strategies)

    @property
    def extensions(self) -> frozenset[str]:
        return frozenset().union(*(s.extensions for s in self._strategies))

    @property
    def required_tools(self) -> tuple[str, ...]:
        tools: dict[str, None] = {}
        for strategy in self._strategies:
            tools.update(dict.fromkeys(strategy.required_tools))
        return tuple(tools)

    @property
    def target_description(self) -> str:
        return "; ".join(
            f"{strategy.label}: {strategy.target_description}"
            for strategy in self._strategies
        )

    def strategy_for(self, source_path: Path) -> ConversionStrategy:
        """Return the strategy owning ``source_path``'s extension."""
        for strategy in self._strategies:
            if strategy.can_handle(source_path):
                return strategy
        raise ConversionError(f"No strategy handles '{source_path.suffix}' files.")

    def can_handle(self, source_path: Path) -> bool:
        return any(strategy.can_handle(source_path) for strategy in self._strategies)

    def convert(
        self,
        job: ConversionJob,
        runner: CommandRunner,
        options: StrategyOptions,
    ) -> None:
        self.strategy_for(job.source_path).convert(job, runner, options)
