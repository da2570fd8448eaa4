"""Row normalizer: raw joined report rows -> display-ready ``NormalizedReport``.

The ``date`` column drives the displayed inspection date while ``created_at``
drives the displayed time; the two are kept separate on purpose because the
mobile app has always shown them that way.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import date, datetime, tzinfo
from typing import Any, Optional

import pydantic

from inspection_reports.exceptions import FormatError, ValidationError
from inspection_reports.models import (
    AreaEntry,
    NormalizedReport,
    Premise,
    RawInspectionReport,
    RawReportInput,
)

log = logging.getLogger(__name__)

# Fallbacks for dates typed on a device (``toLocaleDateString`` output).
_LOCALE_DATE_FORMATS = ("%m/%d/%Y", "%m/%d/%y", "%b %d, %Y", "%B %d, %Y")


def _describe(exc: pydantic.ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value


def coerce_raw_report(raw: RawReportInput) -> RawInspectionReport:
    """Validate a mapping into a ``RawInspectionReport`` (models pass through)."""
    if isinstance(raw, RawInspectionReport):
        return raw
    if not isinstance(raw, Mapping):
        raise ValidationError(f"Expected a report row mapping, got {type(raw).__name__}")
    report_id = raw.get("id", "<unknown>")
    try:
        return RawInspectionReport.model_validate(raw)
    except pydantic.ValidationError as exc:
        raise ValidationError(
            f"Invalid inspection report {report_id}: {_describe(exc)}", report_id=report_id
        ) from exc


def coerce_premise(premise: Premise | Mapping[str, Any]) -> Premise:
    """Validate a mapping into a ``Premise`` (models pass through)."""
    if isinstance(premise, Premise):
        return premise
    if not isinstance(premise, Mapping):
        raise ValidationError(f"Expected a premise mapping, got {type(premise).__name__}")
    try:
        return Premise.model_validate(premise)
    except pydantic.ValidationError as exc:
        raise ValidationError(
            f"Invalid premise {premise.get('id', '<unknown>')}: {_describe(exc)}"
        ) from exc


def parse_timestamp(value: str, *, report_id: object = None) -> datetime:
    """Parse an ISO-8601 timestamp as stored in ``created_at``."""
    text = value.strip() if isinstance(value, str) else ""
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError as exc:
        raise FormatError(
            f"Report {report_id}: unparseable timestamp {value!r}",
            raw_value=value,
            report_id=report_id,
        ) from exc


def parse_inspection_date(value: str, *, report_id: object = None) -> date:
    """Parse the ``date`` column: ISO date/datetime, or a device-locale date."""
    text = value.strip() if isinstance(value, str) else ""
    if text:
        try:
            return parse_timestamp(text, report_id=report_id).date()
        except FormatError:
            pass
        for fmt in _LOCALE_DATE_FORMATS:
            try:
                return datetime.strptime(text, fmt).date()
            except ValueError:
                continue
    raise FormatError(
        f"Report {report_id}: unparseable inspection date {value!r}",
        raw_value=value,
        report_id=report_id,
    )


def format_display_date(value: date) -> str:
    """``Jan 5, 2024``."""
    return f"{value:%b} {value.day}, {value.year}"


def format_display_time(value: datetime) -> str:
    """``09:05 AM``."""
    return value.strftime("%I:%M %p")


def normalize_report(raw: RawReportInput, *, tz: tzinfo | None = None) -> NormalizedReport:
    """Normalize a single raw report row."""
    row = coerce_raw_report(raw)

    inspection_date = parse_inspection_date(row.date, report_id=row.id)
    created_at = parse_timestamp(row.created_at, report_id=row.id)
    shown_at = created_at.astimezone(tz) if tz is not None and created_at.tzinfo else created_at

    areas: dict[str, AreaEntry] = {}
    for area in row.report_areas:
        # Re-assigning an existing key keeps its original position.
        areas[area.area_name] = AreaEntry(rating=area.rating, comment=_blank_to_none(area.comments))

    return NormalizedReport(
        id=row.id,
        premise_id=row.premise_id,
        date=format_display_date(inspection_date),
        time=format_display_time(shown_at),
        inspector_name=row.inspector_name,
        overall_rating=row.overall_rating,
        sites_visited=row.sites_visited or 0,
        areas=areas,
        client_feedback=_blank_to_none(row.client_feedback),
        time_in=row.time_in or "",
        time_out=row.time_out or "",
        created_at=created_at,
    )


def normalize(raw_reports: Iterable[RawReportInput], *, tz: tzinfo | None = None) -> list[NormalizedReport]:
    """Normalize raw report rows, preserving input order.

    Args:
        raw_reports: Report rows (models or decoded JSON mappings), each with
            an embedded ``report_areas`` list.
        tz: Optional zone used to display ``created_at``; timestamps are shown
            in their own offset when omitted.

    Raises:
        ValidationError: A required field is missing or mistyped.
        FormatError: ``date`` or ``created_at`` cannot be parsed.
    """
    normalized = [normalize_report(raw, tz=tz) for raw in raw_reports]
    log.debug("Normalized %d inspection reports", len(normalized))
    return normalized
