"""Unit tests for reader settings.

These tests verify the defaults, validation and environment overrides
of ReaderSettings.
"""

from __future__ import annotations

import pytest

from readervzrd.config import ReaderSettings


@pytest.mark.core
class TestReaderSettings:
    """Tests for ReaderSettings."""

    def test_defaults(self) -> None:
        """Defaults cover the common case."""
        settings = ReaderSettings()

        assert settings.sniff_bytes == 8192
        assert settings.nested_separator == "."
        assert settings.sniff_delimiters == ",\t;|"

    def test_rejects_tiny_sniff_window(self) -> None:
        """A sniff window too small to hold a magic number is rejected."""
        with pytest.raises(ValueError, match="sniff_bytes"):
            ReaderSettings(sniff_bytes=4)

    def test_rejects_empty_separator(self) -> None:
        """Nested keys need a non-empty separator."""
        with pytest.raises(ValueError, match="nested_separator"):
            ReaderSettings(nested_separator="")

    def test_rejects_unusable_sniff_delimiters(self) -> None:
        """Every sniff candidate must be a valid delimiter."""
        with pytest.raises(ValueError):
            ReaderSettings(sniff_delimiters=',"')


@pytest.mark.core
class TestReaderSettingsFromEnv:
    """Tests for ReaderSettings.from_env."""

    def test_empty_environment_gives_defaults(self) -> None:
        """No variables means default settings."""
        assert ReaderSettings.from_env({}) == ReaderSettings()

    def test_reads_overrides(self) -> None:
        """READERVZRD_* variables override defaults."""
        # Arrange
        env = {
            "READERVZRD_SNIFF_BYTES": "1024",
            "READERVZRD_NESTED_SEPARATOR": "__",
        }

        # Act
        settings = ReaderSettings.from_env(env)

        # Assert
        assert settings.sniff_bytes == 1024
        assert settings.nested_separator == "__"

    def test_invalid_integer(self) -> None:
        """A non-numeric sniff size is reported by variable name."""
        with pytest.raises(ValueError, match="READERVZRD_SNIFF_BYTES"):
            ReaderSettings.from_env({"READERVZRD_SNIFF_BYTES": "lots"})

    def test_reads_os_environ_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without an explicit mapping, os.environ is used."""
        monkeypatch.setenv("READERVZRD_NESTED_SEPARATOR", "/")

        assert ReaderSettings.from_env().nested_separator == "/"
