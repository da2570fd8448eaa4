"""Report service: fetch raw rows, run the reporting pipeline, gate exports."""

from __future__ import annotations

import logging
from datetime import datetime, tzinfo
from typing import Any

from inspection_reports.core.config import AppSettings
from inspection_reports.exceptions import NotFoundError, PermissionDeniedError
from inspection_reports.formatters.protocols import IOutputFormatter
from inspection_reports.models import (
    Capability,
    DocumentKind,
    NormalizedReport,
    Premise,
    PremiseSummary,
    RenderedDocument,
)
from inspection_reports.persistence.protocols import IReportSource
from inspection_reports.reporting.aggregator import (
    AggregateResult,
    aggregate,
    group_by_premise,
    summarize_premise,
)
from inspection_reports.reporting.normalizer import normalize
from inspection_reports.reporting.renderer import build_document

log = logging.getLogger(__name__)


class ReportService:
    """Loads a premise's inspection reports and renders them for export.

    Raw rows are fetched fresh on every call; nothing is cached between calls.
    """

    def __init__(
        self,
        source: IReportSource,
        capabilities: Capability | None = None,
        settings: AppSettings | None = None,
        *,
        tz: tzinfo | None = None,
    ) -> None:
        self._source = source
        self._capabilities = capabilities or Capability()
        self._settings = settings or AppSettings()
        self._tz = tz

    @property
    def capabilities(self) -> Capability:
        return self._capabilities

    def _require_premise(self, premise_id: int) -> Premise:
        premise = self._source.fetch_premise(premise_id)
        if premise is None:
            raise NotFoundError(f"Premise {premise_id} not found")
        return premise

    def load_reports(self, premise_id: int) -> tuple[Premise, AggregateResult]:
        """Fetch, normalize and sort the reports of one premise."""
        premise = self._require_premise(premise_id)
        rows = self._source.fetch_reports(premise_id)
        result = aggregate(normalize(rows, tz=self._tz))
        log.info("Loaded %d inspection reports for premise %s", len(result.reports), premise_id)
        return premise, result

    def get_report(self, premise_id: int, report_id: int) -> tuple[Premise, NormalizedReport]:
        premise, result = self.load_reports(premise_id)
        for report in result.reports:
            if report.id == report_id:
                return premise, report
        raise NotFoundError(f"Report {report_id} not found for premise {premise_id}")

    def premise_overview(
        self,
        *,
        now: datetime | None = None,
        search: str | None = None,
    ) -> list[PremiseSummary]:
        """One summary per premise, ordered by premise name.

        *search* keeps premises whose name or address contains it, ignoring case.
        """
        premises = self._source.list_premises(search=search or None)
        groups = group_by_premise(normalize(self._source.list_reports(), tz=self._tz))
        summaries = [summarize_premise(premise, groups.get(premise.id, []), now=now) for premise in premises]
        log.info("Summarized %d premises", len(summaries))
        return summaries

    def export(
        self,
        premise_id: int,
        report_id: int,
        kind: DocumentKind,
        *,
        generated_at: datetime | None = None,
    ) -> RenderedDocument:
        """Render one report for the sharing collaborator.

        Raises:
            PermissionDeniedError: The caller may not export.
            NotFoundError: The premise or report does not exist.
        """
        if not self._capabilities.can_export:
            raise PermissionDeniedError("Exporting reports is not permitted for this user")

        premise, report = self.get_report(premise_id, report_id)
        document = build_document(
            report,
            premise,
            DocumentKind(kind),
            self._settings.company.to_company_info(),
            page_size=self._settings.export.page_size,
            generated_at=generated_at,
        )
        log.info("Exported report %s (premise %s) as %s", report_id, premise_id, document.filename)
        return document

    def export_bytes(
        self,
        premise_id: int,
        report_id: int,
        formatter: IOutputFormatter,
        **kwargs: Any,
    ) -> bytes:
        """Render one report straight to file bytes with *formatter*."""
        if not self._capabilities.can_export:
            raise PermissionDeniedError("Exporting reports is not permitted for this user")

        premise, report = self.get_report(premise_id, report_id)
        data = formatter.format(report, premise, **kwargs)
        log.info(
            "Exported report %s (premise %s) as %s, %d bytes",
            report_id,
            premise_id,
            formatter.content_type,
            len(data),
        )
        return data
