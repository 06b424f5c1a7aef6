"""JSON adapter for arrays of objects and JSON Lines.

The whole document is parsed once and cached, because the headers are
the union of keys over every record and cannot be known before the last
record is seen. Nested objects are flattened into dotted keys; arrays are
kept as compact JSON text.
"""

from __future__ import annotations

import json
import re
from typing import IO, TYPE_CHECKING, Any

from readervzrd.core.exceptions import (
    InvalidJsonStructureError,
    UnderlyingParseError,
)
from readervzrd.core.models import FileFormat
from readervzrd.core.values import align, flatten_object


if TYPE_CHECKING:
    from collections.abc import Iterator

    from readervzrd.core.ports import Record


_WHITESPACE = re.compile(r"\s*")


def iter_json_values(text: str) -> Iterator[Any]:
    """Decode consecutive JSON values from text.

    Accepts a single document as well as concatenated or
    newline-delimited values.

    Raises:
        json.JSONDecodeError: On the first malformed value.
    """
    decoder = json.JSONDecoder()
    pos = _WHITESPACE.match(text).end()  # type: ignore[union-attr]
    while pos < len(text):
        value, pos = decoder.raw_decode(text, pos)
        yield value
        pos = _WHITESPACE.match(text, pos).end()  # type: ignore[union-attr]


class JsonAdapter:
    """Adapter that reads JSON records into flattened, aligned rows.

    Accepted documents:
        - an array of objects
        - a single object, read as one record
        - a stream of objects or arrays of objects (JSON Lines)
    """

    def __init__(self, source: IO[bytes], path: str, separator: str = ".") -> None:
        self._source = source
        self._path = path
        self._separator = separator
        self._format = FileFormat.json()
        self._headers: list[str] | None = None
        self._rows: list[dict[str, str]] | None = None

    def headers(self) -> list[str]:
        """Return the flattened keys of all records, in first-seen order."""
        headers, _ = self._load()
        return list(headers)

    def records(self) -> Iterator[Record]:
        """Return the cached records aligned to the headers.

        Keys a record does not have are padded with "".
        """
        headers, rows = self._load()
        return (align(row, headers) for row in rows)

    def _load(self) -> tuple[list[str], list[dict[str, str]]]:
        if self._headers is not None and self._rows is not None:
            return self._headers, self._rows

        self._source.seek(0)
        raw = self._source.read()
        try:
            text = raw.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise self._parse_error(f"not UTF-8 text ({e})", e) from e

        rows: list[dict[str, str]] = []
        seen: dict[str, None] = {}
        try:
            for value in iter_json_values(text):
                for obj in self._objects(value):
                    flat = flatten_object(obj, self._separator)
                    seen.update(dict.fromkeys(flat))
                    rows.append(flat)
        except json.JSONDecodeError as e:
            raise self._parse_error(
                f"invalid JSON at line {e.lineno} column {e.colno}: {e.msg}", e
            ) from e
        except ValueError as e:
            raise InvalidJsonStructureError(
                f"Cannot read {self._path} as records: {e}",
                self._path,
                file_format=self._format,
                cause=e,
            ) from e

        self._headers = list(seen)
        self._rows = rows
        return self._headers, self._rows

    def _objects(self, value: Any) -> list[dict[str, Any]]:
        if isinstance(value, dict):
            return [value]
        if isinstance(value, list):
            for item in value:
                if not isinstance(item, dict):
                    raise self._structure_error(item)
            return value
        raise self._structure_error(value)

    def _structure_error(self, value: Any) -> InvalidJsonStructureError:
        return InvalidJsonStructureError(
            f"Cannot read {self._path} as records: "
            f"expected a JSON object, found {type(value).__name__}",
            self._path,
            file_format=self._format,
        )

    def _parse_error(self, detail: str, cause: Exception) -> UnderlyingParseError:
        return UnderlyingParseError(
            f"Cannot parse {self._path} as json: {detail}",
            self._path,
            file_format=self._format,
            cause=cause,
        )
