"""Data models for inspection-reports.

Inbound rows from the hosted backend are pydantic models so that missing or
mistyped required fields are caught at the boundary.  Everything derived from
them (normalized reports, rendered documents, premise summaries) is a plain
dataclass.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# ── Enumerations ─────────────────────────────────────────────────────

AREA_NAMES: tuple[str, ...] = (
    "Floors Cleaned",
    "Toilets",
    "Bathrooms",
    "Kitchen/Pantry",
    "Dusting / Furniture",
    "Bins Emptied/Replaced",
    "Other",
)

AREA_RATINGS: tuple[str, ...] = ("Poor", "Good", "Very Good", "Excellent")
OVERALL_RATINGS: tuple[str, ...] = ("Poor", "Fair", "Good", "Excellent")


class ColorToken(str, Enum):
    """Display color for a rating label."""

    ACCENT_STRONG = "accent-strong"
    ACCENT_MEDIUM = "accent-medium"
    WARNING = "warning"
    DANGER = "danger"
    NEUTRAL_GRAY = "neutral-gray"


class DocumentKind(str, Enum):
    """Encoding of a rendered report document."""

    PDF_SOURCE = "pdf-source"
    SPREADSHEET = "spreadsheet"


class PremiseStatus(str, Enum):
    COMPLETED = "completed"
    ISSUES = "issues"
    PENDING = "pending"


# ── Raw rows (as returned by the backend join) ───────────────────────


class Premise(BaseModel):
    """A physical site under a cleaning contract."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    name: str = Field(min_length=1)
    address: str


class RawAreaRating(BaseModel):
    """One ``report_areas`` row."""

    model_config = ConfigDict(extra="ignore")

    report_id: Optional[int] = None
    area_name: str = Field(min_length=1)
    rating: str = Field(min_length=1)
    comments: Optional[str] = None

    @field_validator("area_name", "rating")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class RawInspectionReport(BaseModel):
    """One ``inspection_reports`` row joined with its ``report_areas``."""

    model_config = ConfigDict(extra="ignore")

    id: int
    premise_id: Optional[int] = None
    inspector_name: str = Field(min_length=1)
    date: str
    time_in: Optional[str] = ""
    time_out: Optional[str] = ""
    sites_visited: Optional[int] = 0
    client_feedback: Optional[str] = None
    overall_rating: str = Field(min_length=1)
    created_at: str
    report_areas: list[RawAreaRating] = Field(default_factory=list)


RawReportInput = Union[RawInspectionReport, dict[str, Any]]

# ── Derived objects ──────────────────────────────────────────────────


@dataclass
class AreaEntry:
    rating: str
    comment: Optional[str] = None


@dataclass
class NormalizedReport:
    """Display-ready inspection report."""

    id: int
    date: str
    time: str
    inspector_name: str
    overall_rating: str
    sites_visited: int
    created_at: datetime
    areas: dict[str, AreaEntry] = field(default_factory=dict)
    client_feedback: Optional[str] = None
    time_in: str = ""
    time_out: str = ""
    premise_id: Optional[int] = None


@dataclass
class RenderedDocument:
    """An export artifact handed to a sharing collaborator.

    ``content`` is an HTML string for ``PDF_SOURCE`` documents and a list of
    string rows for ``SPREADSHEET`` documents.
    """

    kind: DocumentKind
    filename: str
    content: Union[str, list[list[str]]]
    page_size: Optional[tuple[float, float]] = None


@dataclass
class PremiseSummary:
    premise: Premise
    report_count: int
    last_visit: str
    status: PremiseStatus
    cleaner: str
    latest_rating: Optional[str] = None


@dataclass(frozen=True)
class Capability:
    """Permissions granted to the caller, decided outside this package."""

    can_export: bool = False
    can_delete: bool = False


@dataclass(frozen=True)
class CompanyInfo:
    """Static company metadata shown on exported documents."""

    name: str
    slogan: str
    address: str
    phone: str
    email: str
    website: str
    logo_url: str
    services: tuple[str, ...] = ()
