"""FileReader, the single entry point for reading tabular files.

A FileReader detects the file format once, opens the file, and hands
out headers and records through the matching format adapter.

Headers are cached on the reader after the first call, and every call
to records() starts a fresh pass from the first record. Neither call
can drain data the other one needs, so they may be called any number
of times and in any order.

Example:
    >>> from readervzrd import FileReader
    >>> with FileReader("people.csv") as reader:  # doctest: +SKIP
    ...     headers = reader.headers()
    ...     rows = list(reader.records())
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from readervzrd.adapters.readers import create_adapter
from readervzrd.config import ReaderSettings
from readervzrd.core.exceptions import FileAccessError, ReaderClosedError
from readervzrd.detection import FormatDetector


if TYPE_CHECKING:
    from collections.abc import Iterator
    from types import TracebackType

    from readervzrd.core.models import FileFormat
    from readervzrd.core.ports import Record


logger = logging.getLogger(__name__)


class FileReader:
    """Reads headers and records from a CSV, JSON or Parquet file.

    Args:
        path: File to read.
        delimiter: Optional CSV field separator. Ignored for JSON and
            Parquet files, whose format comes from the file itself.
        settings: Detection and flattening settings; defaults apply if None.

    Raises:
        FileAccessError: If the file cannot be opened or read.
        BinaryContentError: If the file holds unsupported binary data.
        UnrecognizedFormatError: If the format cannot be detected.
        UnderlyingParseError: If a Parquet-named file is not Parquet.
        ValueError: If the delimiter is not a usable separator.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        delimiter: str | None = None,
        *,
        settings: ReaderSettings | None = None,
    ) -> None:
        self._path = os.fspath(path)
        self._settings = settings or ReaderSettings()
        self._format = FormatDetector(self._settings).detect(self._path, delimiter)

        try:
            self._handle = open(self._path, "rb")  # noqa: SIM115
        except OSError as e:
            raise FileAccessError(
                f"Cannot open {self._path}: {e}", self._path, cause=e
            ) from e

        self._adapter = create_adapter(
            self._format, self._handle, self._path, self._settings
        )
        self._headers: list[str] | None = None
        self._closed = False
        logger.debug("Opened %s as %s", self._path, self._format)

    @property
    def path(self) -> str:
        """The file this reader reads."""
        return self._path

    @property
    def file_format(self) -> FileFormat:
        """The format detected at construction."""
        return self._format

    @property
    def closed(self) -> bool:
        """True once close() has released the file handle."""
        return self._closed

    def headers(self) -> list[str]:
        """Return the field names of the file.

        The first successful call caches the result; later calls return
        a copy of the cache without touching the file.

        Raises:
            ReaderClosedError: If the reader is closed.
            UnderlyingParseError: If the file content cannot be parsed.
        """
        self._ensure_open()
        if self._headers is None:
            self._headers = self._adapter.headers()
        return list(self._headers)

    def records(self) -> Iterator[Record]:
        """Return a lazy iterator over every record, from the first one.

        Each call starts an independent pass; iterators returned by
        earlier calls are unaffected. Every record has one value per
        header.

        Raises:
            ReaderClosedError: If the reader is closed, including when an
                iterator is advanced after close().
            UnderlyingParseError: If the file content cannot be parsed.
        """
        self._ensure_open()
        return self._guard(self._adapter.records())

    def close(self) -> None:
        """Release the file handle. Calling close() again does nothing."""
        if self._closed:
            return
        self._handle.close()
        self._closed = True
        logger.debug("Closed reader for %s", self._path)

    def __enter__(self) -> FileReader:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"FileReader({self._path!r}, format={self._format}, {state})"

    def _ensure_open(self) -> None:
        if self._closed:
            raise ReaderClosedError(self._path)

    def _guard(self, rows: Iterator[Record]) -> Iterator[Record]:
        while True:
            self._ensure_open()
            try:
                row = next(rows)
            except StopIteration:
                return
            yield row
