"""Strategy interfaces and registry for per-format conversion."""

from .base import ConversionStrategy
from .registry import StrategyRegistry, create_default_registry

__all__ = ["ConversionStrategy", "StrategyRegistry", "create_default_registry"]
