"""Polars adapters for CSV and Parquet files.

These adapters wrap polars.read_csv() and polars.read_parquet() and turn
the resulting DataFrames into headers and text records. CSV columns are
read as strings so field text is passed through untouched; Parquet
values keep their native types until rendered with to_text().
"""

from __future__ import annotations

from io import BytesIO
from typing import IO, TYPE_CHECKING

import polars as pl
from polars.exceptions import PolarsError

from readervzrd.core.exceptions import UnderlyingParseError
from readervzrd.core.models import FileFormat
from readervzrd.core.values import to_text


if TYPE_CHECKING:
    from collections.abc import Iterator

    from readervzrd.core.ports import Record


def _iter_text_rows(frame: pl.DataFrame) -> Iterator[Record]:
    for row in frame.iter_rows():
        yield [to_text(value) for value in row]


def drop_blank_lines(data: bytes) -> bytes:
    """Remove empty lines that sit outside quoted fields.

    A line break inside a quoted field belongs to the field, so quote
    parity is tracked across lines and only unquoted empty lines go.

    Example:
        >>> drop_blank_lines(b'a,b\\n\\n1,"x\\n\\ny"\\n\\n')
        b'a,b\\n1,"x\\n\\ny"\\n'
    """
    kept: list[bytes] = []
    quoted = False
    for line in data.splitlines(keepends=True):
        if not quoted and not line.strip(b"\r\n"):
            continue
        kept.append(line)
        if line.count(b'"') % 2:
            quoted = not quoted
    return b"".join(kept)


class PolarsCsvAdapter:
    """Adapter that reads delimited text through polars.read_csv().

    Blank lines are skipped, so they never show up as records. Header
    names are returned as written, repeats and empty names included.
    """

    def __init__(self, source: IO[bytes], path: str, delimiter: str = ",") -> None:
        self._source = source
        self._path = path
        self._format = FileFormat.csv(delimiter)

    def headers(self) -> list[str]:
        """Return the first row of the file as written."""
        frame = self._read(has_header=False, n_rows=1)
        if frame.height == 0:
            return []
        return [to_text(value) for value in frame.row(0)]

    def records(self) -> Iterator[Record]:
        """Decode the file and return its rows as text records.

        Empty fields come back as "".

        Raises:
            UnderlyingParseError: If polars rejects the file, e.g. for rows
                with more fields than the header.
        """
        return _iter_text_rows(self._read(has_header=True))

    def _read(self, has_header: bool, n_rows: int | None = None) -> pl.DataFrame:
        self._source.seek(0)
        data = drop_blank_lines(self._source.read())
        try:
            return pl.read_csv(
                BytesIO(data),
                has_header=has_header,
                separator=self._format.delimiter or ",",
                infer_schema_length=0,
                n_rows=n_rows,
                raise_if_empty=False,
            )
        except PolarsError as e:
            raise UnderlyingParseError(
                f"Cannot parse {self._path} as {self._format}: {e}",
                self._path,
                file_format=self._format,
                cause=e,
            ) from e


class PolarsParquetAdapter:
    """Adapter that reads Parquet files through polars."""

    def __init__(self, source: IO[bytes], path: str) -> None:
        self._source = source
        self._path = path
        self._format = FileFormat.parquet()

    def headers(self) -> list[str]:
        """Return the column names from the file schema without reading data."""
        self._source.seek(0)
        try:
            schema = pl.read_parquet_schema(self._source)
        except (PolarsError, OSError) as e:
            raise self._parse_error(e) from e
        return list(schema)

    def records(self) -> Iterator[Record]:
        """Decode the file and return its rows as text records.

        Values are rendered with to_text(), in schema column order.

        Raises:
            UnderlyingParseError: If the file is not valid Parquet.
        """
        self._source.seek(0)
        try:
            frame = pl.read_parquet(self._source)
        except (PolarsError, OSError) as e:
            raise self._parse_error(e) from e
        return _iter_text_rows(frame)

    def _parse_error(self, cause: Exception) -> UnderlyingParseError:
        return UnderlyingParseError(
            f"Cannot parse {self._path} as parquet: {cause}",
            self._path,
            file_format=self._format,
            cause=cause,
        )
