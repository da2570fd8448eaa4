"""Output formatter protocol: the contract every export sink implements."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from inspection_reports.models import NormalizedReport, Premise


@runtime_checkable
class IOutputFormatter(Protocol):
    """Protocol for output formatters (PDF, XLSX, HTML, JSON)."""

    def format(self, report: NormalizedReport, premise: Premise, **kwargs: Any) -> bytes:
        """Render the report into output bytes."""
        ...

    def format_to_file(self, report: NormalizedReport, premise: Premise, path: Path, **kwargs: Any) -> Path:
        """Render and write to a file. Returns the output path."""
        ...

    @property
    def content_type(self) -> str:
        """MIME type for the output format (e.g. 'application/pdf')."""
        ...

    @property
    def extension(self) -> str:
        """File extension without the dot (e.g. 'pdf')."""
        ...


__all__ = ["IOutputFormatter"]
