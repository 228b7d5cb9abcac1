"""Strategy registry and discovery helpers."""

from __future__ import annotations

import importlib
import importlib.util
from collections.abc import Iterable
from pathlib import Path
from types import ModuleType

from pydantic import ValidationError

from ocr_tiff_converter.adapters.magick import DEFAULT_MAGICK
from ocr_tiff_converter.errors import StrategyError
from ocr_tiff_converter.plugins.base import ConversionStrategy
from ocr_tiff_converter.plugins.builtins import (
    ExtensionDispatchStrategy,
    PdfSourceStrategy,
    TiffSourceStrategy,
)
from ocr_tiff_converter.schemas import StrategyResolutionConfig

AUTO = "auto"


class StrategyRegistry:
    """Registry for conversion strategies."""

    def __init__(self) -> None:
        self._strategies: dict[str, ConversionStrategy] = {}

    def register(self, strategy: ConversionStrategy) -> None:
        """Register strategy instance by unique name.

        Parameters
        ----------
        strategy : ConversionStrategy
            Strategy instance to register.

        Raises
        ------
        StrategyError
            If the strategy has no valid name, claims the reserved ``auto``
            name, or declares no extensions.
        """
        name = str(getattr(strategy, "name", "")).strip().lower()
        if not name:
            raise StrategyError("Strategy must define a non-empty 'name'.")
        if name == AUTO:
            raise StrategyError(f"Strategy name '{AUTO}' is reserved.")
        if not getattr(strategy, "extensions", None):
            raise StrategyError(f"Strategy '{name}' must declare at least one extension.")
        self._strategies[name] = strategy

    def names(self) -> list[str]:
        """Return registered strategy names, sorted."""
        return sorted(self._strategies.keys())

    def get(self, name: str) -> ConversionStrategy:
        """Get strategy by name, ignoring case and surrounding blanks.

        Raises
        ------
        StrategyError
            If the name is not registered.
        """
        try:
            return self._strategies[name.strip().lower()]
        except KeyError as exc:
            raise StrategyError(
                f"Unknown source format '{name}'. "
                f"Available: {', '.join([*self.names(), AUTO])}"
            ) from exc

    def resolve(self, source_format: str) -> ConversionStrategy:
        """Resolve a source format name to a strategy.

        ``auto`` yields an :class:`ExtensionDispatchStrategy` over every
        registered strategy, in name order.

        Raises
        ------
        StrategyError
            If the name is invalid or unknown, or ``auto`` cannot be built.
        """
        try:
            payload = StrategyResolutionConfig(source_format=source_format)
        except ValidationError as exc:
            raise StrategyError(f"Invalid source format: {exc}") from exc

        if payload.source_format == AUTO:
            return ExtensionDispatchStrategy(
                [self._strategies[name] for name in self.names()]
            )
        return self.get(payload.source_format)

    def load_module(self, module_or_path: str) -> None:
        """Load strategy providers from module name or file path.

        .. warning::
            This executes code from the given module. Only load strategies
            from trusted sources.
        """
        module = _import_module_or_path(module_or_path)
        _register_from_module(module, self)


def _import_module_or_path(module_or_path: str) -> ModuleType:
    """Import module by import path or filesystem path.

    Raises
    ------
    StrategyError
        If import cannot be completed.
    """
    candidate = Path(module_or_path)
    if candidate.exists():
        spec = importlib.util.spec_from_file_location(candidate.stem, candidate)
        if spec is None or spec.loader is None:
            raise StrategyError(f"Unable to load strategy module from {candidate}.")
        module = importlib.util.module_from_spec(spec)
        try:
            spec.loader.exec_module(module)
        except Exception as exc:
            raise StrategyError(
                f"Unable to execute strategy module {candidate}: {exc}"
            ) from exc
        return module

    try:
        return importlib.import_module(module_or_path)
    except Exception as exc:
        raise StrategyError(
            f"Unable to import strategy module '{module_or_path}': {exc}"
        ) from exc


def _register_from_module(module: ModuleType, registry: StrategyRegistry) -> None:
    """Register strategies exposed by ``module``.

    A module provides ``register_strategies(registry)``, ``STRATEGIES`` or
    ``STRATEGY``.
    """
    if hasattr(module, "register_strategies"):
        module.register_strategies(registry)
        return

    strategies_obj = getattr(module, "STRATEGIES", None)
    if strategies_obj is not None:
        for strategy in strategies_obj:
            registry.register(strategy)
        return

    strategy_obj = getattr(module, "STRATEGY", None)
    if strategy_obj is not None:
        registry.register(strategy_obj)
        return

    raise StrategyError(
        "Strategy module must expose register_strategies(registry), STRATEGIES, or STRATEGY."
    )


def create_default_registry(
    extra_modules: Iterable[str] | None = None,
    *,
    magick: str = DEFAULT_MAGICK,
) -> StrategyRegistry:
    """Create registry with the PDF and TIFF strategies plus external ones.

    Parameters
    ----------
    extra_modules : Iterable[str] | None, optional
        Additional strategy modules to load.
    magick : str, default="magick"
        ImageMagick executable used by the built-in strategies.
    """
    registry = StrategyRegistry()
    registry.register(PdfSourceStrategy(magick=magick))
    registry.register(TiffSourceStrategy(magick=magick))
    for module in extra_modules or []:
        registry.load_module(module)
    return registry
