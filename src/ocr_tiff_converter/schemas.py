"""Pydantic schemas for runtime validation of batch conversion inputs."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def normalize_extension(value: str) -> str:
    """Return a lowercase extension with a single leading dot."""
    cleaned = value.strip().lower()
    if not cleaned.startswith("."):
        cleaned = f".{cleaned}"
    return cleaned


class BatchConversionConfig(BaseModel):
    """Validated input for a single batch conversion run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    input_dir: Path
    output_dir: Path
    extensions: frozenset[str]
    target_extension: str = ".tiff"
    timeout: float | None = Field(default=None, gt=0)
    atomic_writes: bool = True
    label_width: int = Field(default=70, ge=10)

    @field_validator("extensions", mode="before")
    @classmethod
    def _normalize_extensions(cls, value: object) -> frozenset[str]:
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple, set, frozenset)):
            raise ValueError("extensions must be a collection of suffixes.")
        normalized = frozenset(
            normalize_extension(str(item)) for item in value if str(item).strip()
        )
        if not normalized:
            raise ValueError("extensions must contain at least one suffix.")
        return normalized

    @field_validator("target_extension")
    @classmethod
    def _normalize_target(cls, value: str) -> str:
        if not value.strip(". "):
            raise ValueError("target_extension cannot be empty.")
        return normalize_extension(value)

    @model_validator(mode="after")
    def _check_roots(self) -> BatchConversionConfig:
        if self.input_dir == self.output_dir:
            raise ValueError("output_dir must differ from input_dir.")
        return self


class StrategyResolutionConfig(BaseModel):
    """Validated input for strategy registry resolution."""

    model_config = ConfigDict(extra="forbid")

    source_format: str = Field(min_length=1)

    @field_validator("source_format")
    @classmethod
    def _normalize_name(cls, value: str) -> str:
        normalized = value.strip().lower()
        if not normalized:
            raise ValueError("source_format cannot be blank.")
        return normalized
