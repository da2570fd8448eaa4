"""Report source fake that records every fetch."""

from __future__ import annotations

from typing import Any, Optional

from inspection_reports.models import Premise


class FakeReportSource:
    """Serves fixed rows and counts how often the backend is hit."""

    def __init__(self, premises: list[Premise], reports: list[dict[str, Any]]) -> None:
        self._premises = {p.id: p for p in premises}
        self._reports = reports
        self.calls: list[str] = []

    def list_premises(self, search: Optional[str] = None) -> list[Premise]:
        self.calls.append(f"list_premises:{search}")
        needle = (search or "").lower()
        premises = [p for p in self._premises.values() if needle in p.name.lower() or needle in p.address.lower()]
        return sorted(premises, key=lambda p: p.name)

    def fetch_premise(self, premise_id: int) -> Optional[Premise]:
        self.calls.append(f"fetch_premise:{premise_id}")
        return self._premises.get(premise_id)

    def fetch_reports(self, premise_id: int) -> list[dict[str, Any]]:
        self.calls.append(f"fetch_reports:{premise_id}")
        return [dict(r) for r in self._reports if r.get("premise_id") == premise_id]

    def list_reports(self) -> list[dict[str, Any]]:
        self.calls.append("list_reports")
        return [dict(r) for r in self._reports]
