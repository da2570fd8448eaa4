"""Document renderer: one normalized report -> HTML (PDF source) or table rows.

Both renderers are pure functions of the report, its premise and the company
metadata; the only exception is the generation timestamp in the HTML footer.
Every interpolated value goes through Jinja2 autoescaping.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from jinja2 import Environment, StrictUndefined

from inspection_reports.exceptions import RenderError
from inspection_reports.models import (
    CompanyInfo,
    DocumentKind,
    NormalizedReport,
    Premise,
    RenderedDocument,
)
from inspection_reports.reporting.aggregator import rating_color
from inspection_reports.reporting.normalizer import coerce_premise, format_display_date
from inspection_reports.reporting.styles import (
    AREA_BG_COLOR,
    BADGE_TINT_ALPHA,
    BODY_TEXT_COLOR,
    BRAND_COLOR,
    DIVIDER_COLOR,
    HEADING_TEXT_COLOR,
    LABEL_TEXT_COLOR,
    MUTED_TEXT_COLOR,
    TOKEN_HEX,
)

log = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE: tuple[float, float] = (612.0, 792.0)

AREA_TABLE_HEADER = ["Areas Inspected", "Rating", "Comments"]

_REPORT_TEMPLATE = """\
<html>
  <head>
    <meta charset="utf-8">
    <style>
      body { font-family: Arial, sans-serif; padding: 20px; }
      .header { display: flex; justify-content: space-between; margin-bottom: 20px; }
      .company-info { margin-bottom: 10px; }
      .company-name { font-size: 18px; font-weight: bold; color: {{ colors.heading }}; }
      .company-slogan { font-size: 14px; color: {{ colors.body }}; margin-bottom: 5px; }
      .report-title { font-size: 22px; font-weight: bold; color: {{ colors.brand }}; text-align: center; margin: 15px 0; }
      .section { margin-bottom: 15px; }
      .section-title { font-weight: bold; font-size: 16px; margin-bottom: 8px; color: {{ colors.heading }};
                       border-bottom: 2px solid {{ colors.brand }}; padding-bottom: 4px; }
      .info-row { display: flex; margin-bottom: 5px; }
      .info-label { width: 150px; font-weight: bold; color: {{ colors.label }}; }
      .info-value { color: {{ colors.body }}; }
      .area-item { margin-bottom: 10px; padding: 10px; background-color: {{ colors.area_bg }}; border-radius: 6px; }
      .area-header { display: flex; justify-content: space-between; }
      .area-name { font-weight: 600; color: {{ colors.heading }}; }
      .rating { padding: 2px 8px; border-radius: 4px; font-weight: bold; font-size: 12px; }
      .comment { color: {{ colors.body }}; margin-top: 4px; padding: 8px; background-color: white; border-radius: 4px; }
      .footer { margin-top: 30px; padding-top: 10px; border-top: 1px solid {{ colors.divider }};
                font-size: 12px; color: {{ colors.muted }}; text-align: center; }
      .logo { height: 60px; margin-bottom: 10px; }
    </style>
  </head>
  <body>
    <div class="header">
      <div class="company-info">
        {% if company.logo_url %}<img src="{{ company.logo_url }}" class="logo" alt="{{ company.name }} Logo">{% endif %}
        <div class="company-name">{{ company.name }}</div>
        <div class="company-slogan">{{ company.slogan }}</div>
        <div>{{ company.address }}</div>
        <div>Phone: {{ company.phone }}</div>
      </div>
      <div>
        <div>Report ID: {{ report.id }}</div>
        <div>Date Generated: {{ generated_on }}</div>
      </div>
    </div>

    <div class="report-title">{{ premise.name }} Inspection Report</div>

    <div class="section">
      <div class="section-title">Inspection Details</div>
      {% for label, value in details %}
      <div class="info-row">
        <span class="info-label">{{ label }}:</span>
        <span class="info-value">{{ value }}</span>
      </div>
      {% endfor %}
      <div class="info-row">
        <span class="info-label">Overall Rating:</span>
        <span class="rating" style="{{ badge(report.overall_rating) }}">{{ report.overall_rating }}</span>
      </div>
    </div>

    <div class="section">
      <div class="section-title">Areas Inspected</div>
      {% for area, entry in report.areas.items() %}
      <div class="area-item">
        <div class="area-header">
          <span class="area-name">{{ area }}</span>
          <span class="rating" style="{{ badge(entry.rating) }}">{{ entry.rating }}</span>
        </div>
        {% if entry.comment %}<div class="comment">{{ entry.comment }}</div>{% endif %}
      </div>
      {% endfor %}
    </div>

    {% if report.client_feedback %}
    <div class="section">
      <div class="section-title">Client Feedback</div>
      <div class="comment">{{ report.client_feedback }}</div>
    </div>
    {% endif %}

    <div class="footer">
      {{ company.name }} - {{ company.slogan }}<br>
      {{ company.address }} | Phone: {{ company.phone }} | Email: {{ company.email }}<br>
      Generated on {{ generated_on }}
    </div>
  </body>
</html>
"""

_env = Environment(autoescape=True, trim_blocks=True, lstrip_blocks=True, undefined=StrictUndefined)
_template = _env.from_string(_REPORT_TEMPLATE)

_COLORS = {
    "brand": BRAND_COLOR,
    "heading": HEADING_TEXT_COLOR,
    "label": LABEL_TEXT_COLOR,
    "body": BODY_TEXT_COLOR,
    "muted": MUTED_TEXT_COLOR,
    "area_bg": AREA_BG_COLOR,
    "divider": DIVIDER_COLOR,
}


def rating_hex(rating: str) -> str:
    return TOKEN_HEX[rating_color(rating)]


def _badge_style(rating: str) -> str:
    color = rating_hex(rating)
    return f"color: {color}; background-color: {color}{BADGE_TINT_ALPHA}"


def _check_areas(report: NormalizedReport) -> None:
    for area, entry in report.areas.items():
        if not isinstance(area, str) or not area.strip():
            raise RenderError(f"Report {report.id}: area with a blank name")
        if not isinstance(entry.rating, str) or not entry.rating.strip():
            raise RenderError(f"Report {report.id}: area {area!r} has no rating")


def _time_range(report: NormalizedReport) -> str:
    return f"{report.time_in} - {report.time_out}"


def render_html(
    report: NormalizedReport,
    premise: Premise | Mapping[str, Any],
    company: CompanyInfo,
    *,
    generated_at: datetime | None = None,
) -> str:
    """Render *report* as a self-contained HTML document for PDF conversion."""
    premise = coerce_premise(premise)
    _check_areas(report)
    generated_at = generated_at or datetime.now()

    details = [
        ("Premise Name", premise.name),
        ("Address", premise.address),
        ("Inspection Date", report.date),
        ("Time", _time_range(report)),
        ("Inspector", report.inspector_name),
    ]
    return _template.render(
        report=report,
        premise=premise,
        company=company,
        details=details,
        colors=_COLORS,
        badge=_badge_style,
        generated_on=format_display_date(generated_at.date()),
    )


def render_table(
    report: NormalizedReport,
    premise: Premise | Mapping[str, Any],
    *,
    company_name: str = "Cleanlily Cleaners",
) -> list[list[str]]:
    """Render *report* as spreadsheet rows; every cell is a string."""
    premise = coerce_premise(premise)
    _check_areas(report)

    rows: list[list[str]] = [
        [f"{company_name} - Inspection Report"],
        [""],
        ["Premise Name", premise.name],
        ["Address", premise.address],
        ["Inspection Date", report.date],
        ["Time", _time_range(report)],
        ["Inspector", report.inspector_name],
        ["Overall Rating", report.overall_rating],
        ["Sites Visited", str(report.sites_visited)],
        [""],
        list(AREA_TABLE_HEADER),
    ]
    for area, entry in report.areas.items():
        rows.append([area, entry.rating, entry.comment or ""])

    if report.client_feedback:
        rows.append([""])
        rows.append(["Client Feedback"])
        rows.append([report.client_feedback])
    return rows


def build_document(
    report: NormalizedReport,
    premise: Premise | Mapping[str, Any],
    kind: DocumentKind,
    company: CompanyInfo,
    *,
    page_size: tuple[float, float] = DEFAULT_PAGE_SIZE,
    generated_at: datetime | None = None,
) -> RenderedDocument:
    """Render *report* in the requested encoding, tagged with a filename."""
    kind = DocumentKind(kind)
    if kind is DocumentKind.PDF_SOURCE:
        document = RenderedDocument(
            kind=kind,
            filename=f"Report_{report.id}.html",
            content=render_html(report, premise, company, generated_at=generated_at),
            page_size=page_size,
        )
    else:
        document = RenderedDocument(
            kind=kind,
            filename=f"Report_{report.id}.xlsx",
            content=render_table(report, premise, company_name=company.name),
        )
    log.debug("Rendered report %s as %s", report.id, kind.value)
    return document
