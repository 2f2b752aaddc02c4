"""Unit tests for header and data-row column-count normalization."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from pdf_tables.tables.normalization import build_normalized_table, normalize_data_row, normalize_header_tokens


class TestNormalizeHeaderTokens:

    def test_plain_header_unchanged(self):
        assert normalize_header_tokens(["Name", "Age", "City"]) == ["Name", "Age", "City"]

    def test_short_token_joins_previous_cell(self):
        assert normalize_header_tokens(["Item", "Qty", "Weight", "kg", "Price"]) == ["Item", "Qty", "Weight kg", "Price"]

    def test_first_three_tokens_never_merge(self):
        assert normalize_header_tokens(["S", "No", "ID", "x"]) == ["S", "No", "ID x"]

    def test_consecutive_short_tokens_all_merge(self):
        assert normalize_header_tokens(["A", "B", "Cost", "in", "$"]) == ["A", "B", "Cost in $"]

    def test_two_tokens(self):
        assert normalize_header_tokens(["Key", "Value"]) == ["Key", "Value"]


class TestNormalizeDataRow:

    def test_exact_width_copied(self):
        tokens = ["a", "b", "c"]
        result = normalize_data_row(tokens, 3)
        assert result == tokens
        assert result is not tokens

    def test_short_row_padded(self):
        assert normalize_data_row(["1.", "Bob"], 4) == ["1.", "Bob", "", ""]

    def test_overflow_middle_absorbs_extra_tokens(self):
        result = normalize_data_row(["1", "John", "Michael", "Smith", "NY"], 3)
        assert result == ["1", "John Michael Smith", "NY"]

    def test_overflow_reserves_last_c_minus_2_tokens(self):
        result = normalize_data_row(["7", "long", "product", "name", "4", "kg", "9.50"], 5)
        assert result == ["7", "long product name", "4", "kg", "9.50"]
        assert result[2:] == ["4", "kg", "9.50"]

    def test_overflow_two_columns(self):
        assert normalize_data_row(["key", "a", "b", "c"], 2) == ["key", "a b c"]

    def test_no_tokens(self):
        assert normalize_data_row([], 3) == ["", "", ""]
        assert normalize_data_row(None, 2) == ["", ""]


class TestBuildNormalizedTable:

    def test_all_rows_header_width(self):
        table = build_normalized_table(
            [["Item", "Qty", "Weight", "kg"], ["bolt", "5"], ["washer", "10", "1", "2", "3"], ["nut", "3", "0.2"]]
        )
        assert table.column_count == 3
        assert all(len(row) == 3 for row in table.rows)

    def test_already_normalized_is_unchanged(self):
        rows = [["Name", "Age", "City"], ["Alice", "30", "Paris"], ["Bob", "25", "London"]]
        assert build_normalized_table(rows).rows == rows

    def test_normalizing_twice_is_a_no_op(self):
        once = build_normalized_table([["Item", "Qty", "Weight", "kg"], ["1", "a", "b", "c", "d"], ["2", "e"]])
        twice = build_normalized_table(once.rows)
        assert twice.rows == once.rows
