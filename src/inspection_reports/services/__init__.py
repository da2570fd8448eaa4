"""Application services."""

from __future__ import annotations

from inspection_reports.services.report_service import ReportService

__all__ = ["ReportService"]
