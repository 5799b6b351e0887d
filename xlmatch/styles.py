# xlmatch/styles.py
"""
Highlight marker: a named style registered once per workbook and applied to cell addresses.
"""
from openpyxl.styles import Alignment, Border, NamedStyle, PatternFill, Side
from openpyxl.workbook.workbook import Workbook
from openpyxl.worksheet.worksheet import Worksheet

HIGHLIGHT_STYLE_NAME = "xlmatch-highlight"
HIGHLIGHT_COLOR = "FFEB00"
BORDER_COLOR = "000000"


def build_highlight_style(name: str = HIGHLIGHT_STYLE_NAME) -> NamedStyle:
    edge = Side(style="thin", color=BORDER_COLOR)
    style = NamedStyle(name=name)
    style.border = Border(left=edge, top=edge, right=edge, bottom=edge)
    style.fill = PatternFill("solid", fgColor=HIGHLIGHT_COLOR)
    style.alignment = Alignment(horizontal="left", vertical="center", indent=1, wrap_text=True)
    return style


class MatchMarker:
    """
    Highlight style bound to one workbook.

    Creating a marker registers the named style unless the workbook already has
    one under that name, in which case the existing definition is reused.
    """

    def __init__(self, workbook: Workbook, name: str = HIGHLIGHT_STYLE_NAME):
        self.name = name
        if name not in workbook.named_styles:
            workbook.add_named_style(build_highlight_style(name))

    def apply(self, ws: Worksheet, address: str) -> None:
        """Style a single cell ("B3") or every cell of a range ("A3:AA3")."""
        if ":" in address:
            for row in ws[address]:
                for cell in row:
                    self._mark(cell)
        else:
            self._mark(ws[address])

    def _mark(self, cell) -> None:
        # the named style carries "General"; dates and numbers keep their own format
        number_format = cell.number_format
        cell.style = self.name
        cell.number_format = number_format
