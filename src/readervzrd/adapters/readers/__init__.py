"""Format adapters implementing the FormatAdapter protocol.

This package provides one adapter per supported format:

- CSV: PolarsCsvAdapter
- JSON: JsonAdapter
- Parquet: PolarsParquetAdapter

create_adapter() is the single place that maps a FileFormat to its adapter.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

from readervzrd.adapters.readers.json import JsonAdapter
from readervzrd.adapters.readers.polars import PolarsCsvAdapter, PolarsParquetAdapter
from readervzrd.core.models import FileFormat, FormatKind


if TYPE_CHECKING:
    from readervzrd.config import ReaderSettings
    from readervzrd.core.ports import FormatAdapter


def create_adapter(
    file_format: FileFormat,
    source: IO[bytes],
    path: str,
    settings: ReaderSettings | None = None,
) -> FormatAdapter:
    """Build the adapter that reads file_format from an open binary handle.

    Args:
        file_format: The detected format.
        source: Open binary handle on the file; adapters rewind it themselves.
        path: File path, used in error messages.
        settings: Reader settings; only JSON flattening consults them.

    Returns:
        An adapter satisfying the FormatAdapter protocol.
    """
    if file_format.kind is FormatKind.CSV:
        return PolarsCsvAdapter(source, path, file_format.delimiter or ",")
    if file_format.kind is FormatKind.JSON:
        separator = settings.nested_separator if settings is not None else "."
        return JsonAdapter(source, path, separator=separator)
    if file_format.kind is FormatKind.PARQUET:
        return PolarsParquetAdapter(source, path)
    raise ValueError(f"No adapter for format {file_format}")


__all__ = [
    "JsonAdapter",
    "PolarsCsvAdapter",
    "PolarsParquetAdapter",
    "create_adapter",
]
