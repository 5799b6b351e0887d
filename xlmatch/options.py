# xlmatch/options.py

from dataclasses import dataclass

MISSING_COLUMN_POLICIES = ("skip", "abort")
MARKING_POLICIES = ("both", "row_range")


@dataclass
class CompareOptions:
    """
    Behaviour switches for one comparison.

    missing_column: "skip" ignores rows narrower than the chosen column,
                    "abort" ends the comparison at the first such row.
    marking:        "both" highlights the matched cell in each file,
                    "row_range" highlights columns A..AA of the matched row in file A only.
    sheet_name:     worksheet read from both files.
    """
    missing_column: str = "skip"
    marking:        str = "both"
    sheet_name:     str = "Sheet1"

    def __post_init__(self):
        if self.missing_column not in MISSING_COLUMN_POLICIES:
            raise ValueError(
                f"missing_column must be one of {MISSING_COLUMN_POLICIES}, got {self.missing_column!r}"
            )
        if self.marking not in MARKING_POLICIES:
            raise ValueError(
                f"marking must be one of {MARKING_POLICIES}, got {self.marking!r}"
            )

    @property
    def abort_on_missing(self) -> bool:
        return self.missing_column == "abort"

    @property
    def marks_both(self) -> bool:
        return self.marking == "both"
