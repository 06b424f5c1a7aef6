"""Value rendering shared by all format adapters.

Every backend hands back its own native values (polars scalars, decoded
JSON). They are rendered here into the single textual form used for
records, so the same value reads the same whatever file it came from.
"""

from __future__ import annotations

import json
from typing import Any


def to_text(value: Any) -> str:
    """Render a backend value as record text.

    Args:
        value: A scalar or container value from any backend.

    Returns:
        The textual form: "" for missing values, lowercase booleans,
        compact JSON for lists and mappings, str() for everything else.

    Example:
        >>> to_text(None), to_text(True), to_text(3), to_text(["dog", "cat"])
        ('', 'true', '3', '["dog","cat"]')
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if isinstance(value, list | tuple | dict):
        return json.dumps(
            value, separators=(",", ":"), ensure_ascii=False, default=str
        )
    return str(value)


def flatten_object(
    obj: dict[str, Any], separator: str = ".", prefix: str = ""
) -> dict[str, str]:
    """Flatten a decoded JSON object into dotted keys and text values.

    Nested objects are flattened recursively; arrays and scalars are
    rendered with to_text(). An empty nested object contributes no key.
    Two paths that flatten to the same key, such as a literal "a.b" key
    next to {"a": {"b": ...}}, are rejected rather than merged.

    Args:
        obj: The decoded JSON object.
        separator: Joins parent and child keys.
        prefix: Key prefix of the enclosing object.

    Returns:
        Ordered mapping of flattened key to text value, in document order.

    Raises:
        ValueError: If two values flatten to the same key.

    Example:
        >>> flatten_object({"a": 1, "b": {"c": 2, "d": [1, 2]}})
        {'a': '1', 'b.c': '2', 'b.d': '[1,2]'}
    """
    flat: dict[str, str] = {}
    for key, value in obj.items():
        name = f"{prefix}{separator}{key}" if prefix else key
        if isinstance(value, dict):
            nested = flatten_object(value, separator, name)
        else:
            nested = {name: to_text(value)}
        for flat_key, text in nested.items():
            if flat_key in flat:
                raise ValueError(f"Duplicate flattened key {flat_key!r}")
            flat[flat_key] = text
    return flat


def align(flat: dict[str, str], headers: list[str]) -> list[str]:
    """Order a flattened record by headers, padding missing keys with ""."""
    return [flat.get(header, "") for header in headers]
