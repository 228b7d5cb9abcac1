"""Exception taxonomy for batch conversion."""

from __future__ import annotations


class ConverterError(Exception):
    """Base class for all converter errors.

    Attributes
    ----------
    exit_code : int
        Process exit code used by the CLI when the error is fatal.
    """

    exit_code: int = 1


class ConfigurationError(ConverterError):
    """Fatal error detected before any file is processed."""


class InvalidInputError(ConfigurationError):
    """Input root is missing, not a directory, or run parameters are invalid."""


class MissingToolError(ConfigurationError):
    """Required external binary cannot be located on PATH."""

    def __init__(self, tool: str, hint: str | None = None) -> None:
        message = f"Required tool '{tool}' is not installed or not on PATH."
        if hint:
            message = f"{message} Install with: {hint}"
        super().__init__(message)
        self.tool = tool
        self.hint = hint


class OutputDirectoryError(ConfigurationError):
    """Output root cannot be created or is not a directory."""


class StrategyError(ConfigurationError):
    """Conversion strategy cannot be registered, loaded, or resolved."""


class ConversionError(ConverterError):
    """Per-file conversion failure; recovered by the batch driver."""


class ToolExecutionError(ConversionError):
    """External tool exited non-zero, could not be started, or timed out."""

    def __init__(self, message: str, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode


class FileSystemError(ConversionError):
    """Destination directory for a single file cannot be created."""
