"""Scanner settings resolved from command line, environment and defaults."""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .extraction.shared import DEFAULT_SOURCE_EXTENSION

_TRUE_VALUES = {"1", "true", "yes", "on"}


def env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean environment variable ("1", "true", "yes", "on" are true)."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUE_VALUES


def default_max_workers() -> int:
    return os.cpu_count() or 1


class ScanSettings(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    source_dir: Path
    output_file: Path
    json_output: Optional[Path] = None
    extension: str = DEFAULT_SOURCE_EXTENSION
    max_workers: int = Field(default_factory=default_max_workers, ge=1)
    strict: bool = False
    normalize_aliases: bool = True

    @field_validator("extension")
    @classmethod
    def _check_extension(cls, value: str) -> str:
        if not value.startswith(".") or len(value) < 2:
            raise ValueError(f"extension must look like '.sol', got {value!r}")
        return value
