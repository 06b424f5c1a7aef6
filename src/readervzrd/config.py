"""Configuration for readervzrd.

Settings have working defaults; a process can override them through
READERVZRD_* environment variables via ReaderSettings.from_env().
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Self

from readervzrd.core.models import validate_delimiter


ENV_PREFIX = "READERVZRD_"


@dataclass(frozen=True, slots=True)
class ReaderSettings:
    """Tunables for format detection and JSON flattening.

    Attributes:
        sniff_bytes: How many leading bytes are inspected to classify a file.
        nested_separator: Joins parent and child keys of nested JSON objects.
        sniff_delimiters: Candidate CSV delimiters for extensionless text
            files, in priority order.

    Example:
        >>> ReaderSettings(nested_separator="/").nested_separator
        '/'
    """

    sniff_bytes: int = 8192
    nested_separator: str = "."
    sniff_delimiters: str = ",\t;|"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.sniff_bytes < 16:
            raise ValueError("sniff_bytes must be at least 16")
        if not self.nested_separator:
            raise ValueError("nested_separator cannot be empty")
        if not self.sniff_delimiters:
            raise ValueError("sniff_delimiters cannot be empty")
        for delimiter in self.sniff_delimiters:
            validate_delimiter(delimiter)

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> Self:
        """Build settings from READERVZRD_* environment variables.

        Recognised variables are READERVZRD_SNIFF_BYTES and
        READERVZRD_NESTED_SEPARATOR; unset ones keep their defaults.

        Args:
            environ: Mapping to read instead of os.environ.

        Returns:
            ReaderSettings with overrides applied.

        Raises:
            ValueError: If a variable holds an invalid value.
        """
        env = os.environ if environ is None else environ
        overrides: dict[str, object] = {}

        sniff_bytes = env.get(f"{ENV_PREFIX}SNIFF_BYTES")
        if sniff_bytes is not None:
            try:
                overrides["sniff_bytes"] = int(sniff_bytes)
            except ValueError:
                raise ValueError(
                    f"{ENV_PREFIX}SNIFF_BYTES must be an integer, got {sniff_bytes!r}"
                ) from None

        separator = env.get(f"{ENV_PREFIX}NESTED_SEPARATOR")
        if separator is not None:
            overrides["nested_separator"] = separator

        return cls(**overrides)  # type: ignore[arg-type]
