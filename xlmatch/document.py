# xlmatch/document.py
"""
Document module: opens one workbook, exposes a sheet as rows of cell text, writes it back in place.
"""
import logging
from datetime import date, datetime, time
from typing import List, Optional

from openpyxl import load_workbook
from openpyxl.workbook.workbook import Workbook
from openpyxl.worksheet.worksheet import Worksheet

from .errors import DocumentOpenError, DocumentSaveError, RowReadError

logger = logging.getLogger(__name__)

Row = List[str]


def cell_text(value) -> str:
    """
    Render a cell value the way the sheet displays it.

    None becomes "", integral floats lose their ".0", booleans become TRUE/FALSE
    and dates use ISO format.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return str(value)


def trim_row(values) -> Row:
    """Convert a tuple of raw values to text and drop trailing empty cells."""
    row = [cell_text(v) for v in values]
    while row and row[-1] == "":
        row.pop()
    return row


class TabularDocument:
    """
    One spreadsheet file held open for the duration of a single comparison.

    Two copies of the workbook are loaded: `workbook` keeps formulas and is the
    one styled and saved, `values` holds the cached results that the sheet
    displays and is the one rows are read from.
    """

    def __init__(self, path: str, workbook: Workbook, values: Optional[Workbook] = None):
        self.path = path
        self.workbook = workbook
        self.values = values if values is not None else workbook
        self.mutated = False
        self._rows: Optional[List[Row]] = None

    @classmethod
    def open(cls, path: str) -> "TabularDocument":
        logger.debug("opening %s", path)
        try:
            wb = load_workbook(path, keep_vba=str(path).lower().endswith(".xlsm"))
            values = load_workbook(path, data_only=True)
        except Exception as e:
            raise DocumentOpenError(path, e) from e
        return cls(path, wb, values)

    def sheet(self, sheet_name: str) -> Worksheet:
        return self._sheet_of(self.workbook, sheet_name)

    def _sheet_of(self, wb: Workbook, sheet_name: str) -> Worksheet:
        try:
            return wb[sheet_name]
        except KeyError as e:
            raise RowReadError(self.path, sheet_name, f"no worksheet named '{sheet_name}'") from e

    def read_rows(self, sheet_name: str) -> List[Row]:
        """
        Return every row of the sheet from row 1 down to the last used row.

        Formula cells give their cached result. Empty rows inside the used range
        are kept, so list index i is sheet row i + 1.
        """
        ws = self._sheet_of(self.values, sheet_name)
        try:
            rows = [trim_row(values) for values in ws.iter_rows(values_only=True)]
        except Exception as e:
            raise RowReadError(self.path, sheet_name, e) from e
        self._rows = rows
        logger.debug("read %d rows from %s[%s]", len(rows), self.path, sheet_name)
        return rows

    @property
    def rows(self) -> List[Row]:
        if self._rows is None:
            raise RuntimeError(f"rows of {self.path} have not been read yet")
        return self._rows

    def save(self) -> None:
        try:
            self.workbook.save(self.path)
        except Exception as e:
            raise DocumentSaveError(self.path, e) from e
        logger.debug("saved %s", self.path)

    def close(self) -> None:
        self.workbook.close()
        if self.values is not self.workbook:
            self.values.close()
