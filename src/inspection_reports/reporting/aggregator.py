"""Report aggregator: ordering, rating colors and per-premise display fields."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from inspection_reports.models import (
    ColorToken,
    NormalizedReport,
    Premise,
    PremiseStatus,
    PremiseSummary,
)
from inspection_reports.reporting.styles import DEFAULT_RATING_COLOR, RATING_COLORS

log = logging.getLogger(__name__)


def rating_color(rating: str) -> ColorToken:
    """Map a rating label to its color token; unknown labels are neutral gray."""
    return RATING_COLORS.get(rating, DEFAULT_RATING_COLOR)


@dataclass
class AggregateResult:
    reports: list[NormalizedReport]
    rating_color: Callable[[str], ColorToken] = rating_color


def _aware(value: datetime) -> datetime:
    # Naive timestamps are taken as UTC so they sort against aware ones.
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


def _sort_key(report: NormalizedReport) -> tuple[datetime, int]:
    return (_aware(report.created_at), report.id)


def sort_reports(reports: Iterable[NormalizedReport]) -> list[NormalizedReport]:
    """Most recent first; equal timestamps fall back to the higher id first."""
    return sorted(reports, key=_sort_key, reverse=True)


def aggregate(normalized: Sequence[NormalizedReport]) -> AggregateResult:
    """Return a new, sorted report list plus the rating color lookup."""
    return AggregateResult(reports=sort_reports(normalized), rating_color=rating_color)


def group_by_premise(reports: Iterable[NormalizedReport]) -> dict[Optional[int], list[NormalizedReport]]:
    """Bucket reports by ``premise_id``; each bucket is sorted like ``aggregate``."""
    groups: dict[Optional[int], list[NormalizedReport]] = defaultdict(list)
    for report in reports:
        groups[report.premise_id].append(report)
    return {premise_id: sort_reports(bucket) for premise_id, bucket in groups.items()}


def format_time_ago(timestamp: datetime, now: datetime | None = None) -> str:
    """Coarse relative time: seconds, minutes, hours, then days."""
    now = _aware(now) if now is not None else datetime.now(timezone.utc)
    seconds = max(0, int((now - _aware(timestamp)).total_seconds()))

    if seconds < 60:
        return f"{seconds} seconds ago"
    if seconds < 3600:
        return f"{seconds // 60} minutes ago"
    if seconds < 86400:
        return f"{seconds // 3600} hours ago"
    return f"{seconds // 86400} days ago"


def summarize_premise(
    premise: Premise,
    reports: Sequence[NormalizedReport],
    *,
    now: datetime | None = None,
) -> PremiseSummary:
    """Derive the premise list fields from its most recent report."""
    ordered = sort_reports(reports)
    if not ordered:
        return PremiseSummary(
            premise=premise,
            report_count=0,
            last_visit="Never visited",
            status=PremiseStatus.PENDING,
            cleaner="Not assigned",
        )

    latest = ordered[0]
    status = PremiseStatus.ISSUES if latest.overall_rating == "Poor" else PremiseStatus.COMPLETED
    return PremiseSummary(
        premise=premise,
        report_count=len(ordered),
        last_visit=format_time_ago(latest.created_at, now),
        status=status,
        cleaner=latest.inspector_name or "Not assigned",
        latest_rating=latest.overall_rating,
    )
