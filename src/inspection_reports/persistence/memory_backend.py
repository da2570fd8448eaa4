"""In-memory report source: dict-backed, used by tests and the CLI JSON snapshots."""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable, Mapping
from typing import Any, Optional

from inspection_reports.models import Premise
from inspection_reports.reporting.normalizer import coerce_premise

log = logging.getLogger(__name__)


class MemoryReportSource:
    """Holds premises and raw report rows in plain containers."""

    def __init__(
        self,
        premises: Iterable[Premise | Mapping[str, Any]] = (),
        reports: Iterable[Mapping[str, Any]] = (),
    ) -> None:
        self._premises: dict[int, Premise] = {}
        for premise in premises:
            model = coerce_premise(premise)
            self._premises[model.id] = model
        self._reports: list[dict[str, Any]] = [dict(row) for row in reports]

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> MemoryReportSource:
        """Build from ``{"premises": [...], "inspection_reports": [...]}``."""
        return cls(
            premises=payload.get("premises", []),
            reports=payload.get("inspection_reports", []),
        )

    def add_report(self, row: Mapping[str, Any]) -> None:
        self._reports.append(dict(row))
        log.debug("Added report %s to memory source", row.get("id"))

    def list_premises(self, search: Optional[str] = None) -> list[Premise]:
        premises = list(self._premises.values())
        if search:
            needle = search.casefold()
            premises = [p for p in premises if needle in p.name.casefold() or needle in p.address.casefold()]
        return sorted(premises, key=lambda p: p.name)

    def fetch_premise(self, premise_id: int) -> Optional[Premise]:
        return self._premises.get(premise_id)

    def fetch_reports(self, premise_id: int) -> list[dict[str, Any]]:
        return [copy.deepcopy(row) for row in self._reports if str(row.get("premise_id")) == str(premise_id)]

    def list_reports(self) -> list[dict[str, Any]]:
        return copy.deepcopy(self._reports)
