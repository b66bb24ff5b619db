import pytest

from sheet_outline.errors import MissingRequiredColumn, OutlineError
from sheet_outline.parsers.columns import (
    ColumnConfig,
    ColumnResolution,
    ColumnRole,
    clean_header,
    resolve_column,
    resolve_columns,
)


class TestResolveColumn:
    def test_matches_keyword_case_insensitively(self) -> None:
        headers = ["Timestamp", "CATEGORY (B)", "Details"]

        assert resolve_column(headers, ColumnRole.LABEL) == 1
        assert resolve_column(headers, ColumnRole.DETAIL) == 2

    def test_section_keyword_resolves_label(self) -> None:
        assert resolve_column(["Section", "Notes"], ColumnRole.LABEL) == 0

    def test_single_letter_fallback(self) -> None:
        headers = ["A", "B", "C"]

        assert resolve_column(headers, ColumnRole.LABEL) == 1
        assert resolve_column(headers, ColumnRole.DETAIL) == 2

    def test_letter_must_match_whole_name(self) -> None:
        """'b' only matches a header named exactly 'b'."""
        assert resolve_column(["Bob", "Notes"], ColumnRole.LABEL) is None

    def test_first_match_wins(self) -> None:
        headers = ["Category", "Subcategory"]

        assert resolve_column(headers, ColumnRole.LABEL) == 0

    def test_returns_none_when_unresolved(self) -> None:
        assert resolve_column(["Name", "Notes"], ColumnRole.DETAIL) is None

    def test_custom_config(self) -> None:
        config = ColumnConfig(label_keywords=("topic",), detail_keywords=("body",))

        assert resolve_column(["Topic", "Body"], ColumnRole.LABEL, config) == 0
        assert resolve_column(["Topic", "Body"], ColumnRole.DETAIL, config) == 1


class TestResolveColumns:
    def test_header_names_are_trimmed_and_unquoted(self) -> None:
        resolution = resolve_columns([' "Category" ', "Details "])

        assert resolution.headers == ["Category", "Details"]
        assert resolution.label_index == 0
        assert resolution.detail_index == 1

    def test_empty_headers_keep_their_position(self) -> None:
        resolution = resolve_columns(["", "Category", "", "Details"])

        assert resolution.label_index == 1
        assert resolution.detail_index == 3

    def test_missing_label_column_raises(self) -> None:
        with pytest.raises(MissingRequiredColumn) as exc_info:
            resolve_columns(["Name", "Details"])

        assert exc_info.value.role == "label"
        assert exc_info.value.headers == ["Name", "Details"]
        assert isinstance(exc_info.value, OutlineError)
        assert "Name" in str(exc_info.value)

    def test_missing_detail_column_is_degraded(self) -> None:
        resolution = resolve_columns(["Category", "Notes"])

        assert resolution.label_index == 0
        assert resolution.detail_index is None

    def test_missing_detail_column_logs_warning(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level("WARNING"):
            resolve_columns(["Category"])

        assert "Detail column not found" in caplog.text


class TestColumnResolution:
    def test_required_width_covers_both_columns(self) -> None:
        resolution = ColumnResolution(headers=[], label_index=1, detail_index=4)

        assert resolution.required_width == 5

    def test_required_width_without_detail(self) -> None:
        resolution = ColumnResolution(headers=[], label_index=2, detail_index=None)

        assert resolution.required_width == 3


def test_clean_header_strips_quotes_and_space() -> None:
    assert clean_header('  "Details"  ') == "Details"
