"""JSON output formatter: the normalized report plus its premise, for API responses."""

from __future__ import annotations

import dataclasses
import json
from pathlib import Path
from typing import Any

from inspection_reports.models import NormalizedReport, Premise


def _report_payload(report: NormalizedReport) -> dict[str, Any]:
    payload = dataclasses.asdict(report)
    payload["created_at"] = report.created_at.isoformat()
    return payload


class JSONFormatter:
    """Renders a NormalizedReport and its premise as indented JSON bytes."""

    def format(self, report: NormalizedReport, premise: Premise, **kwargs: Any) -> bytes:
        payload = {
            "premise": premise.model_dump(mode="json"),
            "report": _report_payload(report),
        }
        return json.dumps(payload, indent=2, ensure_ascii=False).encode("utf-8")

    def format_to_file(self, report: NormalizedReport, premise: Premise, path: Path, **kwargs: Any) -> Path:
        """Write JSON to *path* and return it."""
        path.write_bytes(self.format(report, premise, **kwargs))
        return path

    @property
    def content_type(self) -> str:
        return "application/json"

    @property
    def extension(self) -> str:
        return "json"
