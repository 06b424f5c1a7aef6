"""Port interfaces for hexagonal architecture.

Ports define contracts that adapters must implement. The FileReader
depends only on these protocols, never on concrete implementations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    from collections.abc import Iterator


Record = list[str]


@runtime_checkable
class FormatAdapter(Protocol):
    """Reads one file format into headers and records.

    Adapters are bound to an open binary handle and rewind it before
    every pass, so headers() and records() never depend on the handle
    position left behind by a previous call.
    """

    def headers(self) -> list[str]:
        """Return the field names of the file.

        Raises:
            UnderlyingParseError: If the backend cannot parse the file.
        """
        ...

    def records(self) -> Iterator[Record]:
        """Return a lazy iterator over all records, from the first one.

        Each record has exactly one value per header.

        Raises:
            UnderlyingParseError: If the backend cannot parse the file.
        """
        ...
