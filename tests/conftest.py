"""
Shared fixtures: small workbooks written on the fly.
"""

import re
import zipfile

import pytest
from openpyxl import Workbook, load_workbook


def write_rows(path, rows, sheet_name="Sheet1"):
    """Write rows (lists of values, None for an empty cell) to a new workbook at path."""
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_name
    for r, row in enumerate(rows, start=1):
        for c, value in enumerate(row, start=1):
            if value is not None:
                ws.cell(row=r, column=c, value=value)
    wb.save(path)
    return str(path)


def styled_cells(path, style_name, sheet_name="Sheet1"):
    """Coordinates of every cell in the sheet that carries the named style."""
    wb = load_workbook(path)
    ws = wb[sheet_name]
    found = {
        cell.coordinate
        for row in ws.iter_rows()
        for cell in row
        if cell.style == style_name
    }
    wb.close()
    return found


def set_cached_formula(path, coordinate, formula, cached, sheet_xml="xl/worksheets/sheet1.xml"):
    """
    Rewrite one cell as a string formula with a cached result, the way Excel
    saves it after calculating. openpyxl itself never stores formula results.
    """
    with zipfile.ZipFile(path) as zf:
        entries = [(info, zf.read(info.filename)) for info in zf.infolist()]

    cell_xml = f'<c r="{coordinate}" t="str"><f>{formula}</f><v>{cached}</v></c>'
    pattern = re.compile(rf'<c r="{coordinate}"[^>]*?(/>|>.*?</c>)', re.S)

    with zipfile.ZipFile(path, "w", zipfile.ZIP_DEFLATED) as zf:
        for info, data in entries:
            if info.filename == sheet_xml:
                text, count = pattern.subn(cell_xml, data.decode("utf-8"), count=1)
                assert count == 1, f"cell {coordinate} not found in {sheet_xml}"
                data = text.encode("utf-8")
            zf.writestr(info, data)
    return str(path)


@pytest.fixture
def make_workbook(tmp_path):
    def _make(name, rows, sheet_name="Sheet1"):
        return write_rows(tmp_path / name, rows, sheet_name)
    return _make
