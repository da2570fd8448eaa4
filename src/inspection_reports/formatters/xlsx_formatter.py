"""XLSX output formatter using openpyxl.

Writes the ``render_table`` rows cell-for-cell into a single worksheet.  Every
cell is stored as a string, including values that look like formulas.
"""

from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import Any

from openpyxl import Workbook, load_workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from inspection_reports.core.config import CompanyConfig, ExportConfig
from inspection_reports.models import CompanyInfo, NormalizedReport, Premise
from inspection_reports.reporting.renderer import AREA_TABLE_HEADER, render_table


def trim_table(rows: list[list[str]]) -> list[list[str]]:
    """Drop trailing empty cells; a fully blank row becomes ``[""]``.

    Spreadsheet files do not keep empty cells, so this is the shape a table
    has after a write/read cycle.
    """
    trimmed: list[list[str]] = []
    for row in rows:
        cells = ["" if value is None else str(value) for value in row]
        while cells and cells[-1] == "":
            cells.pop()
        trimmed.append(cells or [""])
    return trimmed


def read_table(data: bytes, sheet_title: str | None = None) -> list[list[str]]:
    """Read a worksheet written by ``XLSXFormatter`` back into string rows."""
    workbook = load_workbook(BytesIO(data))
    sheet = workbook[sheet_title] if sheet_title else workbook.worksheets[0]
    return trim_table([list(row) for row in sheet.iter_rows(values_only=True)])


class XLSXFormatter:
    """Renders a report as a one-sheet XLSX workbook."""

    def __init__(self, config: ExportConfig | None = None, company: CompanyInfo | None = None) -> None:
        self._config = config or ExportConfig()
        self._company = company or CompanyConfig().to_company_info()

    def format(self, report: NormalizedReport, premise: Premise, **kwargs: Any) -> bytes:
        rows = render_table(report, premise, company_name=self._company.name)

        workbook = Workbook()
        sheet = workbook.active
        sheet.title = self._config.sheet_title

        bold = Font(bold=True)
        # Title row, and the area header row that precedes the area rows.
        bold_rows = {1, rows.index(AREA_TABLE_HEADER) + 1}
        for row_idx, row in enumerate(rows, start=1):
            for col_idx, value in enumerate(row, start=1):
                cell = sheet.cell(row=row_idx, column=col_idx, value=value)
                if cell.data_type == "f":
                    cell.data_type = "s"
                if row_idx in bold_rows:
                    cell.font = bold

        for col_idx, width in enumerate(self._config.column_widths, start=1):
            sheet.column_dimensions[get_column_letter(col_idx)].width = width

        buffer = BytesIO()
        workbook.save(buffer)
        return buffer.getvalue()

    def format_to_file(self, report: NormalizedReport, premise: Premise, path: Path, **kwargs: Any) -> Path:
        """Write the workbook to *path* and return it."""
        path.write_bytes(self.format(report, premise, **kwargs))
        return path

    @property
    def content_type(self) -> str:
        return "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

    @property
    def extension(self) -> str:
        return "xlsx"
