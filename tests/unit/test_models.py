"""Unit tests for core domain models."""

import pytest


@pytest.mark.core
@pytest.mark.tier(0)
class TestFileFormat:
    """Tests for the FileFormat variant set."""

    @pytest.mark.tra("Domain.FileFormat.Constructors")
    def test_constructors_set_kind(self) -> None:
        """Each constructor yields its own kind."""
        from readervzrd.core.models import FileFormat, FormatKind

        assert FileFormat.csv().kind is FormatKind.CSV
        assert FileFormat.json().kind is FormatKind.JSON
        assert FileFormat.parquet().kind is FormatKind.PARQUET

    def test_csv_defaults_to_comma(self) -> None:
        """CSV format uses a comma unless told otherwise."""
        from readervzrd.core.models import FileFormat

        assert FileFormat.csv().delimiter == ","
        assert FileFormat.csv("\t").delimiter == "\t"

    def test_csv_requires_delimiter(self) -> None:
        """A CSV format without a delimiter is rejected."""
        from readervzrd.core.models import FileFormat, FormatKind

        with pytest.raises(ValueError, match="requires a delimiter"):
            FileFormat(kind=FormatKind.CSV)

    def test_json_rejects_delimiter(self) -> None:
        """Only CSV formats carry a delimiter."""
        from readervzrd.core.models import FileFormat, FormatKind

        with pytest.raises(ValueError, match="does not take a delimiter"):
            FileFormat(kind=FormatKind.JSON, delimiter=",")

    def test_is_immutable(self) -> None:
        """FileFormat is frozen once created."""
        from dataclasses import FrozenInstanceError

        from readervzrd.core.models import FileFormat

        fmt = FileFormat.csv()
        with pytest.raises(FrozenInstanceError):
            fmt.delimiter = ";"  # type: ignore[misc]

    def test_equality(self) -> None:
        """Formats compare by value."""
        from readervzrd.core.models import FileFormat

        assert FileFormat.csv(";") == FileFormat.csv(";")
        assert FileFormat.csv(";") != FileFormat.csv(",")
        assert FileFormat.json() != FileFormat.parquet()

    def test_str(self) -> None:
        """str() names the format and, for CSV, the delimiter."""
        from readervzrd.core.models import FileFormat

        assert str(FileFormat.parquet()) == "parquet"
        assert str(FileFormat.csv(";")) == "csv (delimiter=';')"


@pytest.mark.core
@pytest.mark.tier(0)
@pytest.mark.tra("Domain.FileFormat.Delimiter")
class TestValidateDelimiter:
    """Tests for validate_delimiter."""

    @pytest.mark.parametrize("delimiter", [",", ";", "\t", "|", " "])
    def test_accepts_single_ascii_characters(self, delimiter: str) -> None:
        """Common separators pass through unchanged."""
        from readervzrd.core.models import validate_delimiter

        assert validate_delimiter(delimiter) == delimiter

    @pytest.mark.parametrize("delimiter", ["", ",,", "§", "\n", "\r", '"'])
    def test_rejects_unusable_separators(self, delimiter: str) -> None:
        """Empty, multi-character, non-ASCII, line-break and quote are rejected."""
        from readervzrd.core.models import validate_delimiter

        with pytest.raises(ValueError):
            validate_delimiter(delimiter)
