"""PDF output formatter using reportlab.

Lays out the same sections as the HTML document (company header, inspection
details, areas inspected, client feedback, footer) directly with reportlab,
so exporting a PDF needs no HTML-to-PDF engine.  Requires the ``pdf``
optional dependency::

    pip install inspection-reports[pdf]
"""

from __future__ import annotations

from datetime import datetime
from html import escape
from io import BytesIO
from pathlib import Path
from typing import Any

from inspection_reports.core.config import CompanyConfig, ExportConfig
from inspection_reports.models import CompanyInfo, NormalizedReport, Premise
from inspection_reports.reporting.normalizer import coerce_premise, format_display_date
from inspection_reports.reporting.renderer import AREA_TABLE_HEADER, rating_hex
from inspection_reports.reporting.styles import (
    AREA_BG_COLOR,
    BODY_TEXT_COLOR,
    BRAND_COLOR,
    DIVIDER_COLOR,
    HEADING_TEXT_COLOR,
    LABEL_TEXT_COLOR,
    MUTED_TEXT_COLOR,
)

try:
    from reportlab.lib.colors import HexColor, white
    from reportlab.lib.enums import TA_CENTER
    from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
    from reportlab.platypus import (
        Flowable,
        Paragraph,
        SimpleDocTemplate,
        Spacer,
        Table,
        TableStyle,
    )
except ImportError as _exc:
    raise ImportError(
        "reportlab is required for PDF output. Install with: pip install inspection-reports[pdf]"
    ) from _exc


# ── Unicode sanitization ────────────────────────────────────────────
# Helvetica lacks glyphs for many characters that phone keyboards emit
# (smart quotes, narrow spaces, dashes).

_UNICODE_REPLACEMENTS: dict[str, str] = {
    "\u2011": "-",       # non-breaking hyphen
    "\u2010": "-",       # hyphen
    "\u2013": "-",       # en-dash
    "\u2014": "-",       # em-dash
    "\u202f": " ",       # narrow no-break space
    "\u00a0": " ",       # non-breaking space
    "\u2009": " ",       # thin space
    "\u2018": "'",       # left single quote
    "\u2019": "'",       # right single quote
    "\u201c": '"',       # left double quote
    "\u201d": '"',       # right double quote
    "\u2026": "...",     # ellipsis
}


def _sanitize_text(text: str) -> str:
    for char, replacement in _UNICODE_REPLACEMENTS.items():
        text = text.replace(char, replacement)
    return text


def _text(value: object) -> str:
    """Escape free text for reportlab's paragraph mini-markup."""
    return escape(_sanitize_text(str(value)), quote=False)


def _hex(color_str: str) -> HexColor:
    return HexColor(color_str)


class PDFFormatter:
    """Renders a NormalizedReport as a one-report inspection PDF."""

    def __init__(self, config: ExportConfig | None = None, company: CompanyInfo | None = None) -> None:
        self._config = config or ExportConfig()
        self._company = company or CompanyConfig().to_company_info()
        self._page_size: tuple[float, float] = self._config.page_size
        self._margin: float = self._config.margin_points
        self._styles = self._build_styles()

    # ── Public API ───────────────────────────────────────────────────

    def format(
        self,
        report: NormalizedReport,
        premise: Premise,
        *,
        generated_at: datetime | None = None,
        **kwargs: Any,
    ) -> bytes:
        """Render *report* to PDF bytes."""
        premise = coerce_premise(premise)
        generated_on = format_display_date((generated_at or datetime.now()).date())

        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=self._page_size,
            leftMargin=self._margin,
            rightMargin=self._margin,
            topMargin=self._margin,
            bottomMargin=self._margin + 24,
            title=f"{premise.name} Inspection Report",
            author=self._company.name,
        )
        story = self._build_story(report, premise, generated_on)

        def _footer(canvas: Any, _doc: Any) -> None:
            self._draw_footer(canvas, generated_on)

        doc.build(story, onFirstPage=_footer, onLaterPages=_footer)
        return buffer.getvalue()

    def format_to_file(self, report: NormalizedReport, premise: Premise, path: Path, **kwargs: Any) -> Path:
        """Write PDF to *path* and return it."""
        path.write_bytes(self.format(report, premise, **kwargs))
        return path

    @property
    def content_type(self) -> str:
        return "application/pdf"

    @property
    def extension(self) -> str:
        return "pdf"

    # ── Style setup ──────────────────────────────────────────────────

    def _build_styles(self) -> dict[str, ParagraphStyle]:
        base = getSampleStyleSheet()
        font = self._config.font_family
        body_sz = self._config.body_font_size

        return {
            "company_name": ParagraphStyle(
                "company_name",
                parent=base["BodyText"],
                fontName=f"{font}-Bold",
                fontSize=body_sz + 8,
                leading=(body_sz + 8) * 1.2,
                textColor=_hex(HEADING_TEXT_COLOR),
            ),
            "company_line": ParagraphStyle(
                "company_line",
                parent=base["BodyText"],
                fontName=font,
                fontSize=body_sz,
                leading=body_sz * 1.3,
                textColor=_hex(BODY_TEXT_COLOR),
            ),
            "title": ParagraphStyle(
                "title",
                parent=base["Title"],
                fontName=f"{font}-Bold",
                fontSize=body_sz + 12,
                leading=(body_sz + 12) * 1.2,
                alignment=TA_CENTER,
                textColor=_hex(BRAND_COLOR),
                spaceBefore=12,
                spaceAfter=12,
            ),
            "heading": ParagraphStyle(
                "heading",
                parent=base["Heading2"],
                fontName=f"{font}-Bold",
                fontSize=body_sz + 6,
                leading=(body_sz + 6) * 1.3,
                spaceBefore=10,
                spaceAfter=6,
                textColor=_hex(HEADING_TEXT_COLOR),
            ),
            "label": ParagraphStyle(
                "label",
                parent=base["BodyText"],
                fontName=f"{font}-Bold",
                fontSize=body_sz,
                textColor=_hex(LABEL_TEXT_COLOR),
            ),
            "body": ParagraphStyle(
                "body",
                parent=base["BodyText"],
                fontName=font,
                fontSize=body_sz,
                leading=body_sz * 1.4,
                textColor=_hex(BODY_TEXT_COLOR),
            ),
            "table_header": ParagraphStyle(
                "table_header",
                parent=base["BodyText"],
                fontName=f"{font}-Bold",
                fontSize=body_sz,
                textColor=white,
            ),
        }

    # ── Story construction ───────────────────────────────────────────

    def _build_story(self, report: NormalizedReport, premise: Premise, generated_on: str) -> list[Flowable]:
        story: list[Flowable] = []
        story.extend(self._build_company_header(report, generated_on))
        story.append(Paragraph(f"{_text(premise.name)} Inspection Report", self._styles["title"]))
        story.extend(self._build_details(report, premise))
        story.extend(self._build_areas(report))
        if report.client_feedback:
            story.append(Paragraph("Client Feedback", self._styles["heading"]))
            story.append(Paragraph(_text(report.client_feedback), self._styles["body"]))
        return story

    def _build_company_header(self, report: NormalizedReport, generated_on: str) -> list[Flowable]:
        company = self._company
        left = [
            Paragraph(_text(company.name), self._styles["company_name"]),
            Paragraph(_text(company.slogan), self._styles["company_line"]),
            Paragraph(_text(company.address), self._styles["company_line"]),
            Paragraph(f"Phone: {_text(company.phone)}", self._styles["company_line"]),
        ]
        right = [
            Paragraph(f"Report ID: {_text(report.id)}", self._styles["company_line"]),
            Paragraph(f"Date Generated: {_text(generated_on)}", self._styles["company_line"]),
        ]
        width = self._content_width()
        header = Table([[left, right]], colWidths=[width * 0.65, width * 0.35])
        header.setStyle(TableStyle([("VALIGN", (0, 0), (-1, -1), "TOP")]))
        return [header, Spacer(1, 8)]

    def _rating_markup(self, rating: str) -> str:
        return f'<font color="{rating_hex(rating)}"><b>{_text(rating)}</b></font>'

    def _build_details(self, report: NormalizedReport, premise: Premise) -> list[Flowable]:
        rows = [
            ("Premise Name", _text(premise.name)),
            ("Address", _text(premise.address)),
            ("Inspection Date", _text(report.date)),
            ("Time", _text(f"{report.time_in} - {report.time_out}")),
            ("Inspector", _text(report.inspector_name)),
            ("Overall Rating", self._rating_markup(report.overall_rating)),
            ("Sites Visited", _text(report.sites_visited)),
        ]
        data = [
            [Paragraph(f"{label}:", self._styles["label"]), Paragraph(value, self._styles["body"])]
            for label, value in rows
        ]
        table = Table(data, colWidths=[150, self._content_width() - 150])
        table.setStyle(
            TableStyle(
                [
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 3),
                    ("TOPPADDING", (0, 0), (-1, -1), 3),
                ]
            )
        )
        return [Paragraph("Inspection Details", self._styles["heading"]), table, Spacer(1, 6)]

    def _build_areas(self, report: NormalizedReport) -> list[Flowable]:
        items: list[Flowable] = [Paragraph("Areas Inspected", self._styles["heading"])]
        if not report.areas:
            items.append(Paragraph("No area ratings recorded.", self._styles["body"]))
            return items

        data: list[list[Any]] = [
            [Paragraph(title, self._styles["table_header"]) for title in AREA_TABLE_HEADER]
        ]
        for area, entry in report.areas.items():
            data.append(
                [
                    Paragraph(_text(area), self._styles["label"]),
                    Paragraph(self._rating_markup(entry.rating), self._styles["body"]),
                    Paragraph(_text(entry.comment or ""), self._styles["body"]),
                ]
            )

        width = self._content_width()
        table = Table(data, colWidths=[width * 0.35, width * 0.18, width * 0.47], repeatRows=1)
        table.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, 0), _hex(BRAND_COLOR)),
                    ("ROWBACKGROUNDS", (0, 1), (-1, -1), [_hex(AREA_BG_COLOR), white]),
                    ("LINEBELOW", (0, 0), (-1, -1), 0.5, _hex(DIVIDER_COLOR)),
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ("TOPPADDING", (0, 0), (-1, -1), 5),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 5),
                ]
            )
        )
        items.append(table)
        return items

    # ── Footer ───────────────────────────────────────────────────────

    def _draw_footer(self, canvas: Any, generated_on: str) -> None:
        canvas.saveState()
        width, _height = self._page_size
        company = self._company
        center = width / 2

        canvas.setStrokeColor(_hex(DIVIDER_COLOR))
        canvas.line(self._margin, self._margin + 20, width - self._margin, self._margin + 20)
        canvas.setFont(self._config.font_family, 8)
        canvas.setFillColor(_hex(MUTED_TEXT_COLOR))
        canvas.drawCentredString(
            center, self._margin + 10, _sanitize_text(f"{company.name} - {company.slogan}")
        )
        canvas.drawCentredString(
            center,
            self._margin + 1,
            _sanitize_text(f"{company.address} | Phone: {company.phone} | Email: {company.email}"),
        )
        canvas.drawCentredString(
            center, self._margin - 8, f"Generated on {generated_on} | Page {canvas.getPageNumber()}"
        )
        canvas.restoreState()

    def _content_width(self) -> float:
        return float(self._page_size[0]) - 2 * self._margin
