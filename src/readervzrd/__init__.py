"""readervzrd - Read CSV, JSON and Parquet files through one interface.

This library detects the format of a data file and exposes it as
field names plus text records, so callers never branch on file format.

Example:
    >>> from readervzrd import FileReader
    >>> with FileReader("tests/people.csv") as reader:  # doctest: +SKIP
    ...     reader.headers()
    ...     for record in reader.records():
    ...         print(record)
    ['Name', 'Age', 'Country']
    ['John', '30', 'USA']
"""

from readervzrd.config import ReaderSettings
from readervzrd.core.exceptions import (
    BinaryContentError,
    FileAccessError,
    FileError,
    InvalidJsonStructureError,
    ReaderClosedError,
    UnderlyingParseError,
    UnrecognizedFormatError,
)
from readervzrd.core.models import FileFormat, FormatKind
from readervzrd.core.ports import FormatAdapter, Record
from readervzrd.detection import FormatDetector, detect_format
from readervzrd.reader import FileReader


__version__ = "0.3.0"

__all__ = [
    "BinaryContentError",
    "FileAccessError",
    "FileError",
    "FileFormat",
    "FileReader",
    "FormatAdapter",
    "FormatDetector",
    "FormatKind",
    "InvalidJsonStructureError",
    "ReaderClosedError",
    "ReaderSettings",
    "Record",
    "UnderlyingParseError",
    "UnrecognizedFormatError",
    "__version__",
    "detect_format",
]
