"""HTML output formatter: the PDF-source document as UTF-8 bytes."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any

from inspection_reports.core.config import CompanyConfig
from inspection_reports.models import CompanyInfo, NormalizedReport, Premise
from inspection_reports.reporting.renderer import render_html


class HTMLFormatter:
    """Renders a report with ``render_html``."""

    def __init__(self, company: CompanyInfo | None = None) -> None:
        self._company = company or CompanyConfig().to_company_info()

    def format(
        self,
        report: NormalizedReport,
        premise: Premise,
        *,
        generated_at: datetime | None = None,
        **kwargs: Any,
    ) -> bytes:
        return render_html(report, premise, self._company, generated_at=generated_at).encode("utf-8")

    def format_to_file(self, report: NormalizedReport, premise: Premise, path: Path, **kwargs: Any) -> Path:
        """Write HTML to *path* and return it."""
        path.write_bytes(self.format(report, premise, **kwargs))
        return path

    @property
    def content_type(self) -> str:
        return "text/html"

    @property
    def extension(self) -> str:
        return "html"
