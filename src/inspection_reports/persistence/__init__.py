"""Pluggable report sources for premises and inspection report rows."""

from __future__ import annotations

from inspection_reports.persistence.memory_backend import MemoryReportSource
from inspection_reports.persistence.protocols import IReportSource
from inspection_reports.persistence.rest_backend import RestReportSource, build_backend_client

__all__ = ["IReportSource", "MemoryReportSource", "RestReportSource", "build_backend_client"]
