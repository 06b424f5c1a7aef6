"""Core domain module for readervzrd.

This module contains pure Python domain models, the error taxonomy and
port definitions. It has no I/O dependencies and can be tested in isolation.
"""

from readervzrd.core.models import FileFormat, FormatKind
from readervzrd.core.ports import FormatAdapter, Record


__all__ = [
    "FileFormat",
    "FormatAdapter",
    "FormatKind",
    "Record",
]
