"""inspection-reports: normalize, aggregate and export cleaning inspection reports.

Usage::

    from inspection_reports import (
        AppSettings, ReportService, MemoryReportSource, Capability,
        normalize, aggregate, render_html, render_table,
    )

    result = aggregate(normalize(rows))
    rows = render_table(result.reports[0], premise)
"""

from __future__ import annotations

from inspection_reports.core.config import AppSettings
from inspection_reports.exceptions import (
    DataSourceError,
    FormatError,
    InspectionReportError,
    NotFoundError,
    PermissionDeniedError,
    RenderError,
    ValidationError,
)
from inspection_reports.models import (
    AreaEntry,
    Capability,
    ColorToken,
    CompanyInfo,
    DocumentKind,
    NormalizedReport,
    Premise,
    PremiseSummary,
    RawAreaRating,
    RawInspectionReport,
    RenderedDocument,
)
from inspection_reports.persistence import MemoryReportSource, RestReportSource
from inspection_reports.reporting import (
    AggregateResult,
    aggregate,
    build_document,
    normalize,
    rating_color,
    render_html,
    render_table,
)
from inspection_reports.services import ReportService

__all__ = [
    "AggregateResult",
    "AppSettings",
    "AreaEntry",
    "Capability",
    "ColorToken",
    "CompanyInfo",
    "DataSourceError",
    "DocumentKind",
    "FormatError",
    "InspectionReportError",
    "MemoryReportSource",
    "NormalizedReport",
    "NotFoundError",
    "PermissionDeniedError",
    "Premise",
    "PremiseSummary",
    "RawAreaRating",
    "RawInspectionReport",
    "RenderError",
    "RenderedDocument",
    "ReportService",
    "RestReportSource",
    "ValidationError",
    "aggregate",
    "build_document",
    "normalize",
    "rating_color",
    "render_html",
    "render_table",
]
