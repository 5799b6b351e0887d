# xlmatch/errors.py
"""
Failures of a comparison call. Each one renders as the status string shown to the user.
"""


class MatchError(Exception):
    """Base class for every failure that ends a comparison."""


class InvalidColumnError(MatchError):
    def __init__(self, label: str, col_index: int):
        self.label = label
        self.col_index = col_index
        super().__init__(f"column index {label} must not be negative (got {col_index})")


class DocumentOpenError(MatchError):
    def __init__(self, path: str, cause: Exception):
        self.path = path
        super().__init__(f"failed to open {path}: {cause}")


class RowReadError(MatchError):
    def __init__(self, path: str, sheet_name: str, cause):
        self.path = path
        self.sheet_name = sheet_name
        super().__init__(f"failed to read rows of {sheet_name} in {path}: {cause}")


class ColumnNotFoundError(MatchError):
    def __init__(self, path: str, column: str, row_number: int):
        self.path = path
        self.column = column
        self.row_number = row_number
        super().__init__(f"column {column} not found at row {row_number} of {path}")


class DocumentSaveError(MatchError):
    def __init__(self, path: str, cause: Exception):
        self.path = path
        super().__init__(f"failed to save {path}: {cause}")
