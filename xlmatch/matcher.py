# xlmatch/matcher.py

"""
Matcher/annotator: compares one column of each workbook across every pair of rows
and highlights the cells whose text is equal.
"""
import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional, Set

from .addressing import cell_address, column_letter, row_range
from .document import Row, TabularDocument
from .errors import ColumnNotFoundError, InvalidColumnError, MatchError
from .messages import MessageBox
from .options import CompareOptions
from .styles import MatchMarker

logger = logging.getLogger(__name__)

STATUS_OK_PREFIX = "comparison complete"


@dataclass
class MatchReport:
    path_a:    str
    path_b:    str
    rows_a:    int = 0
    rows_b:    int = 0
    matches:   int = 0
    skipped_a: int = 0
    skipped_b: int = 0
    marked_a:  Set[str] = field(default_factory=set)
    marked_b:  Set[str] = field(default_factory=set)

    @property
    def saved_paths(self) -> List[str]:
        paths = [self.path_a]
        if self.marked_b and not _same_file(self.path_a, self.path_b):
            paths.append(self.path_b)
        return paths

    def summary(self) -> str:
        return (
            f"{STATUS_OK_PREFIX}: {self.matches} matching pairs, "
            f"updated {', '.join(self.saved_paths)}"
        )


def _same_file(path_a: str, path_b: str) -> bool:
    try:
        return os.path.samefile(path_a, path_b)
    except OSError:
        # at least one side does not exist; opening it will report the failure
        return os.path.realpath(path_a) == os.path.realpath(path_b)


def _column_keys(rows: List[Row], col_index: int) -> List[Optional[str]]:
    """Text at col_index for each row, or None where the row is narrower than that."""
    return [row[col_index] if col_index < len(row) else None for row in rows]


class MatcherFacade:
    """
    Orchestrates opening, matching, marking and saving for one comparison.
    """

    @staticmethod
    def run_compare(
        path_a: str,
        path_b: str,
        col_a:  int,
        col_b:  int,
        *,
        options: Optional[CompareOptions] = None,
    ) -> MatchReport:
        options = options or CompareOptions()

        # 1) Reject negative indices before touching either file
        if col_a < 0:
            raise InvalidColumnError("A", col_a)
        if col_b < 0:
            raise InvalidColumnError("B", col_b)

        # 2) Open and read A, then B; a failure on A leaves B unopened
        doc_a = TabularDocument.open(path_a)
        doc_b = None
        try:
            doc_a.read_rows(options.sheet_name)
            if _same_file(path_a, path_b):
                doc_b = doc_a
            else:
                doc_b = TabularDocument.open(path_b)
                doc_b.read_rows(options.sheet_name)

            report = MatcherFacade._match(doc_a, doc_b, col_a, col_b, options)

            # 3) Persist; B only when something was written to it
            doc_a.save()
            if doc_b is not doc_a and doc_b.mutated:
                doc_b.save()
        finally:
            doc_a.close()
            if doc_b is not None and doc_b is not doc_a:
                doc_b.close()
        return report

    @staticmethod
    def _match(
        doc_a: TabularDocument,
        doc_b: TabularDocument,
        col_a: int,
        col_b: int,
        options: CompareOptions,
    ) -> MatchReport:
        ws_a = doc_a.sheet(options.sheet_name)
        ws_b = doc_b.sheet(options.sheet_name)
        marker_a = MatchMarker(doc_a.workbook)
        marker_b = MatchMarker(doc_b.workbook) if options.marks_both else None

        keys_a = _column_keys(doc_a.rows, col_a)
        keys_b = _column_keys(doc_b.rows, col_b)

        report = MatchReport(
            path_a=doc_a.path,
            path_b=doc_b.path,
            rows_a=len(keys_a),
            rows_b=len(keys_b),
            skipped_a=keys_a.count(None),
            skipped_b=keys_b.count(None),
        )

        for i, value_a in enumerate(keys_a):
            if value_a is None:
                if options.abort_on_missing:
                    raise ColumnNotFoundError(doc_a.path, column_letter(col_a), i + 1)
                continue
            for j, value_b in enumerate(keys_b):
                if value_b is None:
                    if options.abort_on_missing:
                        raise ColumnNotFoundError(doc_b.path, column_letter(col_b), j + 1)
                    continue
                if value_a != value_b:
                    continue

                report.matches += 1
                if marker_b is not None:
                    addr_a = cell_address(col_a, i)
                    addr_b = cell_address(col_b, j)
                    marker_a.apply(ws_a, addr_a)
                    marker_b.apply(ws_b, addr_b)
                    report.marked_a.add(addr_a)
                    report.marked_b.add(addr_b)
                    doc_b.mutated = True
                    logger.debug("match %s!%s == %s!%s", doc_a.path, addr_a, doc_b.path, addr_b)
                else:
                    addr_a = row_range(i)
                    marker_a.apply(ws_a, addr_a)
                    report.marked_a.add(addr_a)
                    logger.debug("match %s!%s (row %d of %s)", doc_a.path, addr_a, j + 1, doc_b.path)
                doc_a.mutated = True

        return report


def compare(
    path_a: str,
    path_b: str,
    col_a:  int,
    col_b:  int,
    options: Optional[CompareOptions] = None,
    message_box: Optional[MessageBox] = None,
) -> str:
    """
    Compare column col_a of path_a with column col_b of path_b and highlight matches.

    Returns a status string: the success summary, or the description of the
    failure that ended the comparison. The same text is stored in message_box
    when one is given.
    """
    logger.info("compare %s[%d] with %s[%d]", path_a, col_a, path_b, col_b)
    try:
        report = MatcherFacade.run_compare(path_a, path_b, col_a, col_b, options=options)
        status = report.summary()
        logger.info(status)
    except MatchError as e:
        status = str(e)
        logger.warning(status)

    if message_box is not None:
        message_box.set(status)
    return status
