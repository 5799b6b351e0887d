"""
Tests for the document module.
"""

from datetime import date

import pytest

from xlmatch.document import TabularDocument, cell_text, trim_row
from xlmatch.errors import DocumentOpenError, RowReadError

from conftest import set_cached_formula


class TestCellText:
    """Cell values rendered as sheet text."""

    def test_cell_text(self):
        assert cell_text(None) == ""
        assert cell_text("abc") == "abc"
        assert cell_text(7) == "7"
        assert cell_text(3.0) == "3"
        assert cell_text(2.5) == "2.5"
        assert cell_text(True) == "TRUE"
        assert cell_text(False) == "FALSE"
        assert cell_text(date(2024, 1, 31)) == "2024-01-31"

    def test_trim_row_drops_trailing_empties_only(self):
        assert trim_row(("a", None, "b", None, None)) == ["a", "", "b"]
        assert trim_row((None, None)) == []


class TestTabularDocument:
    """Open, read and save behaviour."""

    def test_read_rows_keeps_row_positions(self, make_workbook):
        path = make_workbook("a.xlsx", [["id", "name"], [], ["x1", None, "note"], [5]])
        doc = TabularDocument.open(path)
        try:
            rows = doc.read_rows("Sheet1")
        finally:
            doc.close()

        assert rows == [["id", "name"], [], ["x1", "", "note"], ["5"]]

    def test_read_rows_of_empty_sheet(self, make_workbook):
        path = make_workbook("empty.xlsx", [])
        doc = TabularDocument.open(path)
        assert doc.read_rows("Sheet1") == []

    def test_open_missing_file(self, tmp_path):
        missing = str(tmp_path / "nope.xlsx")
        with pytest.raises(DocumentOpenError) as exc:
            TabularDocument.open(missing)
        assert exc.value.path == missing
        assert str(exc.value).startswith(f"failed to open {missing}: ")

    def test_open_corrupt_file(self, tmp_path):
        bad = tmp_path / "bad.xlsx"
        bad.write_text("not a workbook")
        with pytest.raises(DocumentOpenError):
            TabularDocument.open(str(bad))

    def test_read_missing_sheet(self, make_workbook):
        path = make_workbook("data.xlsx", [["a"]], sheet_name="Data")
        doc = TabularDocument.open(path)
        with pytest.raises(RowReadError, match="failed to read rows of Sheet1"):
            doc.read_rows("Sheet1")

    def test_rows_before_read(self, make_workbook):
        doc = TabularDocument.open(make_workbook("a.xlsx", [["a"]]))
        with pytest.raises(RuntimeError):
            doc.rows

    def test_save_round_trip_preserves_text(self, make_workbook):
        rows = [["id", "qty"], ["x1", 3], [], [None, "tail"]]
        path = make_workbook("a.xlsx", rows)

        doc = TabularDocument.open(path)
        before = doc.read_rows("Sheet1")
        doc.save()
        doc.close()

        reopened = TabularDocument.open(path)
        assert reopened.read_rows("Sheet1") == before

    def test_formula_cells_read_as_cached_value(self, make_workbook):
        path = make_workbook("a.xlsx", [["x1", "=A1"]])
        set_cached_formula(path, "B1", "A1", "x1")

        doc = TabularDocument.open(path)
        try:
            assert doc.read_rows("Sheet1") == [["x1", "x1"]]
            assert doc.sheet("Sheet1")["B1"].value == "=A1"
        finally:
            doc.close()

    def test_save_keeps_formulas(self, make_workbook):
        path = make_workbook("a.xlsx", [["x1", "=A1"]])
        set_cached_formula(path, "B1", "A1", "x1")

        doc = TabularDocument.open(path)
        doc.read_rows("Sheet1")
        doc.save()
        doc.close()

        reopened = TabularDocument.open(path)
        try:
            assert reopened.sheet("Sheet1")["B1"].value == "=A1"
        finally:
            reopened.close()
