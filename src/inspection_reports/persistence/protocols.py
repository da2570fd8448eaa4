"""Report source protocol: the contract every data-fetch backend implements."""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable

from inspection_reports.models import Premise


@runtime_checkable
class IReportSource(Protocol):
    """Protocol for report sources (hosted REST backend, in-memory, etc.).

    Report rows are returned raw, each with an embedded ``report_areas`` list,
    exactly as the backend join produces them.
    """

    def list_premises(self, search: Optional[str] = None) -> list[Premise]:
        """Premises ordered by name, optionally filtered by a name/address substring (case-insensitive)."""
        ...

    def fetch_premise(self, premise_id: int) -> Optional[Premise]:
        """Return the premise, or None if it does not exist."""
        ...

    def fetch_reports(self, premise_id: int) -> list[dict[str, Any]]:
        """Raw report rows (with ``report_areas``) for one premise."""
        ...

    def list_reports(self) -> list[dict[str, Any]]:
        """Raw report rows (with ``report_areas``) for every premise."""
        ...
