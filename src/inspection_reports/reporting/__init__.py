"""Inspection report pipeline: normalize -> aggregate -> render.

Usage::

    from inspection_reports.reporting import aggregate, normalize, render_html, render_table

    result = aggregate(normalize(rows))
    html = render_html(result.reports[0], premise, company)
"""

from __future__ import annotations

from inspection_reports.reporting.aggregator import (
    AggregateResult,
    aggregate,
    format_time_ago,
    group_by_premise,
    rating_color,
    sort_reports,
    summarize_premise,
)
from inspection_reports.reporting.normalizer import normalize, normalize_report
from inspection_reports.reporting.renderer import build_document, render_html, render_table

__all__ = [
    "AggregateResult",
    "aggregate",
    "build_document",
    "format_time_ago",
    "group_by_premise",
    "normalize",
    "normalize_report",
    "rating_color",
    "render_html",
    "render_table",
    "sort_reports",
    "summarize_premise",
]
