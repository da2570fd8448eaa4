"""Output formatters that turn a normalized report into export files.

Usage::

    from inspection_reports.formatters import PDFFormatter, XLSXFormatter

    pdf_bytes = PDFFormatter().format(report, premise)
    xlsx_bytes = XLSXFormatter().format(report, premise)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from inspection_reports.formatters.html_formatter import HTMLFormatter
from inspection_reports.formatters.json_formatter import JSONFormatter
from inspection_reports.formatters.protocols import IOutputFormatter

if TYPE_CHECKING:
    from inspection_reports.core.config import AppSettings

__all__ = [
    "FORMATS",
    "HTMLFormatter",
    "IOutputFormatter",
    "JSONFormatter",
    "PDFFormatter",
    "XLSXFormatter",
    "get_formatter",
]

FORMATS: tuple[str, ...] = ("html", "pdf", "xlsx", "json")


def get_formatter(name: str, settings: AppSettings) -> IOutputFormatter:
    """Build the formatter registered under *name* from application settings."""
    company = settings.company.to_company_info()
    if name == "html":
        return HTMLFormatter(company)
    if name == "json":
        return JSONFormatter()
    if name == "pdf":
        from inspection_reports.formatters.pdf_formatter import PDFFormatter

        return PDFFormatter(settings.export, company)
    if name == "xlsx":
        from inspection_reports.formatters.xlsx_formatter import XLSXFormatter

        return XLSXFormatter(settings.export, company)
    raise ValueError(f"Unknown output format {name!r}; expected one of {', '.join(FORMATS)}")


def __getattr__(name: str) -> Any:
    """Lazy-load the reportlab/openpyxl formatters so they are only imported when needed."""
    if name == "PDFFormatter":
        from inspection_reports.formatters.pdf_formatter import PDFFormatter

        return PDFFormatter
    if name == "XLSXFormatter":
        from inspection_reports.formatters.xlsx_formatter import XLSXFormatter

        return XLSXFormatter
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
