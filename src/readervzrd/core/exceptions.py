"""Domain exceptions for readervzrd.

All library errors inherit from FileError, allowing users to catch any
library exception with a single except clause. Each exception provides
a recovery_hint property with guidance on resolving the error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from readervzrd.core.models import FileFormat


class FileError(Exception):
    """Base class for all readervzrd exceptions.

    Attributes:
        path: The file the failing operation was working on.
    """

    def __init__(self, message: str, path: str) -> None:
        self.path = path
        super().__init__(message)

    @property
    def recovery_hint(self) -> str | None:
        """Optional guidance on how to resolve this error."""
        return None


class UnrecognizedFormatError(FileError):
    """Raised when neither the extension nor the content identify a format."""

    def __init__(self, path: str, reason: str | None = None) -> None:
        message = f"Could not detect the file format of {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, path)

    @property
    def recovery_hint(self) -> str:
        """Suggest naming the file with a known extension."""
        return "Rename the file with a .csv, .tsv, .json or .parquet extension"


class BinaryContentError(FileError):
    """Raised when a file holds binary data that no supported format claims."""

    def __init__(self, path: str, expected: str | None = None) -> None:
        if expected:
            message = f"File {path} has a .{expected} name but binary content"
        else:
            message = f"File {path} has binary content of an unsupported format"
        self.expected = expected
        super().__init__(message, path)

    @property
    def recovery_hint(self) -> str:
        """Suggest checking what the file actually contains."""
        return f"Check that {self.path} is a CSV, JSON or Parquet file"


class UnderlyingParseError(FileError):
    """Raised when the backend parser rejects the file content.

    Attributes:
        file_format: The format the file was being read as.
        cause: The backend exception, if any.
    """

    def __init__(
        self,
        message: str,
        path: str,
        file_format: FileFormat | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.file_format = file_format
        self.cause = cause
        super().__init__(message, path)

    @property
    def recovery_hint(self) -> str:
        """Point at the malformed file."""
        if self.file_format is not None:
            return f"Check that {self.path} is well-formed {self.file_format}"
        return f"Check that {self.path} is well-formed"


class InvalidJsonStructureError(UnderlyingParseError):
    """Raised when valid JSON does not have a record-shaped structure."""

    @property
    def recovery_hint(self) -> str:
        """Describe the accepted JSON shapes."""
        return (
            "Use an array of objects, a single object, "
            "or one object per line (JSON Lines)"
        )


class FileAccessError(FileError):
    """Raised when the operating system refuses to open or read the file.

    Attributes:
        cause: The underlying OSError.
    """

    def __init__(self, message: str, path: str, cause: OSError | None = None) -> None:
        self.cause = cause
        super().__init__(message, path)

    @property
    def recovery_hint(self) -> str:
        """Suggest a fix based on the OS error."""
        if isinstance(self.cause, FileNotFoundError):
            return f"Verify the path exists: {self.path}"
        if isinstance(self.cause, PermissionError):
            return f"Check read permissions on {self.path}"
        return f"Check that {self.path} is a readable regular file"


class ReaderClosedError(FileError):
    """Raised when a closed FileReader is used."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Reader for {path} is closed", path)

    @property
    def recovery_hint(self) -> str:
        """Suggest opening a new reader."""
        return "Create a new FileReader for the file"
