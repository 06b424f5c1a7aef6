"""Error handling patterns with recovery hints.

This example demonstrates how to handle common errors and use
the recovery_hint property to provide actionable guidance.
"""

from pathlib import Path

from readervzrd import (
    BinaryContentError,
    FileAccessError,
    # Exceptions
    FileError,
    FileReader,
    UnderlyingParseError,
    UnrecognizedFormatError,
)


# Pattern 1: Handle files whose format cannot be detected
def read_headers_or_none(path: Path) -> list[str] | None:
    """Return headers, or None if the file is not a supported format."""
    try:
        with FileReader(path) as reader:
            return reader.headers()
    except (UnrecognizedFormatError, BinaryContentError) as e:
        print(f"Unsupported file: {e.path}")
        print(f"Hint: {e.recovery_hint}")
        return None


# Pattern 2: Handle malformed content
def count_records(path: Path) -> int:
    """Count records, reporting parse errors with the backend's diagnostic."""
    try:
        with FileReader(path) as reader:
            return sum(1 for _ in reader.records())
    except UnderlyingParseError as e:
        print(f"Malformed {e.file_format} file: {e}")
        print(f"Cause: {e.cause!r}")
        raise


# Pattern 3: Catch-all for any library error
def read_safe(path: Path) -> list[list[str]]:
    """Read all records, returning an empty list on any library error."""
    try:
        with FileReader(path) as reader:
            return list(reader.records())
    except FileAccessError as e:
        print(f"Cannot open: {e.path}")
        print(f"Hint: {e.recovery_hint}")
        return []
    except FileError as e:
        # Catch any other library errors
        print(f"Unexpected error: {e}")
        print(f"Hint: {e.recovery_hint}")
        return []


# Example usage
if __name__ == "__main__":
    notes = Path("notes")
    notes.write_text("Remember to water the plants.\n")

    # This will print the detection failure and its hint
    read_headers_or_none(notes)
    read_safe(Path("does_not_exist.csv"))
