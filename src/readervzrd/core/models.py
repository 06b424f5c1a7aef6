"""Core domain models for readervzrd.

These models are pure Python dataclasses with no I/O dependencies.
A FileFormat is decided once per reader and never changes afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Self


# Characters polars cannot use as a field separator
_FORBIDDEN_DELIMITERS = frozenset({"\n", "\r", '"'})


class FormatKind(str, Enum):
    """The closed set of file formats a reader can handle."""

    CSV = "csv"
    JSON = "json"
    PARQUET = "parquet"


@dataclass(frozen=True, slots=True)
class FileFormat:
    """A detected file format.

    Attributes:
        kind: Which backend reads the file.
        delimiter: Field separator, set for CSV only.

    Example:
        >>> FileFormat.csv(";").delimiter
        ';'
        >>> FileFormat.json().kind
        <FormatKind.JSON: 'json'>
    """

    kind: FormatKind
    delimiter: str | None = None

    def __post_init__(self) -> None:
        """Validate the delimiter against the format kind."""
        if self.kind is FormatKind.CSV:
            if self.delimiter is None:
                raise ValueError("CSV format requires a delimiter")
            validate_delimiter(self.delimiter)
        elif self.delimiter is not None:
            raise ValueError(f"{self.kind.value} format does not take a delimiter")

    @classmethod
    def csv(cls, delimiter: str = ",") -> Self:
        """Return a CSV format using the given field separator."""
        return cls(kind=FormatKind.CSV, delimiter=delimiter)

    @classmethod
    def json(cls) -> Self:
        """Return the JSON format."""
        return cls(kind=FormatKind.JSON)

    @classmethod
    def parquet(cls) -> Self:
        """Return the Parquet format."""
        return cls(kind=FormatKind.PARQUET)

    def __str__(self) -> str:
        if self.kind is FormatKind.CSV:
            return f"csv (delimiter={self.delimiter!r})"
        return self.kind.value


def validate_delimiter(delimiter: str) -> str:
    """Check that a delimiter is usable as a CSV field separator.

    Args:
        delimiter: Candidate separator.

    Returns:
        The delimiter, unchanged.

    Raises:
        ValueError: If the delimiter is not a single ASCII character, or is
            a line break or the quote character.
    """
    if len(delimiter) != 1 or not delimiter.isascii():
        raise ValueError(
            f"Delimiter must be a single ASCII character, got {delimiter!r}"
        )
    if delimiter in _FORBIDDEN_DELIMITERS:
        raise ValueError(f"Delimiter {delimiter!r} cannot separate CSV fields")
    return delimiter
