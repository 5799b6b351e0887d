# xlmatch/addressing.py
"""
Cell addressing helpers: 0-based column indices to sheet letters and addresses.
"""
from openpyxl.utils import get_column_letter

ROW_RANGE_FIRST = "A"
ROW_RANGE_LAST = "AA"


def column_letter(col_index: int) -> str:
    """Return the sheet letters for a 0-based column index (0 -> "A", 26 -> "AA")."""
    if col_index < 0:
        raise ValueError(f"column index must not be negative (got {col_index})")
    return get_column_letter(col_index + 1)


def cell_address(col_index: int, row_index: int) -> str:
    """
    Build an address like "B3" from 0-based column and row indices.
    """
    if row_index < 0:
        raise ValueError(f"row index must not be negative (got {row_index})")
    return f"{column_letter(col_index)}{row_index + 1}"


def row_range(row_index: int) -> str:
    # fixed-width span used by the row_range marking policy
    row = row_index + 1
    return f"{ROW_RANGE_FIRST}{row}:{ROW_RANGE_LAST}{row}"
