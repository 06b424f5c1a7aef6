"""Format detection by file extension with a content-sniffing fallback.

The extension decides the format whenever it is a known one. Files with
no extension, or an unknown one, are classified from a bounded prefix of
their bytes. Anything that cannot be classified confidently is rejected
instead of being guessed at.
"""

from __future__ import annotations

import csv
import logging
import os
from pathlib import Path

from readervzrd.config import ReaderSettings
from readervzrd.core.exceptions import (
    BinaryContentError,
    FileAccessError,
    UnderlyingParseError,
    UnrecognizedFormatError,
)
from readervzrd.core.models import FileFormat, FormatKind, validate_delimiter


logger = logging.getLogger(__name__)

PARQUET_MAGIC = b"PAR1"

# Extension (lowercase, no dot) -> (format kind, default CSV delimiter)
EXTENSION_MAP: dict[str, tuple[FormatKind, str | None]] = {
    "csv": (FormatKind.CSV, ","),
    "tsv": (FormatKind.CSV, "\t"),
    "json": (FormatKind.JSON, None),
    "jsonl": (FormatKind.JSON, None),
    "ndjson": (FormatKind.JSON, None),
    "parquet": (FormatKind.PARQUET, None),
    "pq": (FormatKind.PARQUET, None),
}


def is_binary(prefix: bytes, truncated: bool = False) -> bool:
    """Check whether a byte prefix looks like binary rather than UTF-8 text.

    Args:
        prefix: Leading bytes of a file.
        truncated: True if the file continues past the prefix, in which
            case a multi-byte character cut off at the end is still text.

    Returns:
        True for NUL bytes or invalid UTF-8.
    """
    if b"\x00" in prefix:
        return True
    try:
        prefix.decode("utf-8")
    except UnicodeDecodeError as e:
        cut_short = (
            e.reason == "unexpected end of data" and e.start >= len(prefix) - 3
        )
        return not (truncated and cut_short)
    return False


def sniff_delimiter(
    text: str, candidates: str, truncated: bool = False
) -> str | None:
    """Find a delimiter that splits every sample line into the same columns.

    Args:
        text: Decoded file prefix.
        candidates: Delimiters to try, in priority order.
        truncated: True if the last line may be cut off by the prefix limit.

    Returns:
        The first candidate giving at least two columns on at least two
        lines with a constant width, or None.
    """
    lines = text.splitlines()
    if truncated and len(lines) > 1 and not text.endswith(("\n", "\r")):
        lines = lines[:-1]
    lines = [line for line in lines if line.strip()]
    if len(lines) < 2:
        return None

    for delimiter in candidates:
        widths = {len(row) for row in csv.reader(lines, delimiter=delimiter)}
        if len(widths) == 1 and widths.pop() >= 2:
            return delimiter
    return None


class FormatDetector:
    """Decide the FileFormat of a file on disk."""

    def __init__(self, settings: ReaderSettings | None = None) -> None:
        self._settings = settings or ReaderSettings()

    def detect(
        self, path: str | os.PathLike[str], delimiter: str | None = None
    ) -> FileFormat:
        """Detect the format of a file.

        Args:
            path: File to inspect.
            delimiter: Optional CSV delimiter hint. It only sets the CSV
                separator and is ignored for JSON and Parquet files.

        Returns:
            The detected FileFormat.

        Raises:
            FileAccessError: If the file cannot be opened or read.
            BinaryContentError: If a text-format file holds binary data, or
                an extensionless file is binary and not Parquet.
            UnderlyingParseError: If a Parquet-named file lacks the magic.
            UnrecognizedFormatError: If an extensionless text file cannot
                be classified.
            ValueError: If the delimiter hint is not a usable separator.
        """
        if delimiter is not None:
            validate_delimiter(delimiter)

        name = os.fspath(path)
        prefix, truncated = self._read_prefix(name)
        extension = Path(name).suffix.lstrip(".").lower()

        if extension in EXTENSION_MAP:
            kind, default_delimiter = EXTENSION_MAP[extension]
            file_format = self._by_extension(
                name, kind, delimiter or default_delimiter, prefix, truncated
            )
            logger.debug("Detected %s as %s by extension", name, file_format)
        else:
            file_format = self._by_content(name, delimiter, prefix, truncated)
            logger.debug("Detected %s as %s by content", name, file_format)

        if delimiter is not None and file_format.kind is not FormatKind.CSV:
            logger.debug(
                "Ignoring delimiter hint %r for %s file", delimiter, file_format
            )
        return file_format

    def _read_prefix(self, name: str) -> tuple[bytes, bool]:
        """Read the leading bytes of a file and whether more bytes follow."""
        try:
            with open(name, "rb") as f:
                prefix = f.read(self._settings.sniff_bytes + 1)
        except OSError as e:
            raise FileAccessError(f"Cannot read {name}: {e}", name, cause=e) from e

        truncated = len(prefix) > self._settings.sniff_bytes
        return prefix[: self._settings.sniff_bytes], truncated

    def _by_extension(
        self,
        name: str,
        kind: FormatKind,
        delimiter: str | None,
        prefix: bytes,
        truncated: bool,
    ) -> FileFormat:
        if kind is FormatKind.PARQUET:
            if not prefix.startswith(PARQUET_MAGIC):
                raise UnderlyingParseError(
                    f"File {name} is not Parquet: missing {PARQUET_MAGIC!r} magic",
                    name,
                    file_format=FileFormat.parquet(),
                )
            return FileFormat.parquet()

        if is_binary(prefix, truncated):
            raise BinaryContentError(name, expected=kind.value)
        if kind is FormatKind.JSON:
            return FileFormat.json()
        return FileFormat.csv(delimiter or ",")

    def _by_content(
        self, name: str, delimiter: str | None, prefix: bytes, truncated: bool
    ) -> FileFormat:
        if prefix.startswith(PARQUET_MAGIC):
            return FileFormat.parquet()
        if is_binary(prefix, truncated):
            raise BinaryContentError(name)

        text = prefix.decode("utf-8", errors="ignore").lstrip("\ufeff")
        stripped = text.lstrip()
        if not stripped:
            raise UnrecognizedFormatError(name, "file has no content")
        if stripped[0] in "{[":
            return FileFormat.json()

        candidates = delimiter or self._settings.sniff_delimiters
        sniffed = sniff_delimiter(text, candidates, truncated)
        if sniffed is None:
            raise UnrecognizedFormatError(
                name, "text content is neither JSON nor consistently delimited"
            )
        return FileFormat.csv(sniffed)


def detect_format(
    path: str | os.PathLike[str],
    delimiter: str | None = None,
    *,
    settings: ReaderSettings | None = None,
) -> FileFormat:
    """Detect the format of a file with a default FormatDetector.

    Example:
        >>> detect_format("people.tsv")  # doctest: +SKIP
        FileFormat(kind=<FormatKind.CSV: 'csv'>, delimiter='\\t')
    """
    return FormatDetector(settings).detect(path, delimiter)
