"""Tests for report ordering, rating colors and premise summaries."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from inspection_reports.models import ColorToken, Premise, PremiseStatus
from inspection_reports.reporting.aggregator import (
    aggregate,
    format_time_ago,
    group_by_premise,
    rating_color,
    sort_reports,
    summarize_premise,
)
from tests.fakes.factories import make_report

_BASE = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


class TestAggregate:
    def test_most_recent_first(self) -> None:
        reports = [
            make_report(1, created_at=_BASE - timedelta(days=2)),
            make_report(2, created_at=_BASE),
            make_report(3, created_at=_BASE - timedelta(days=1)),
        ]
        assert [r.id for r in aggregate(reports).reports] == [2, 3, 1]

    def test_equal_timestamps_higher_id_first(self) -> None:
        reports = [make_report(3, created_at=_BASE), make_report(5, created_at=_BASE)]
        assert [r.id for r in aggregate(reports).reports] == [5, 3]

    def test_order_independent_of_input_order(self) -> None:
        reports = [make_report(i, created_at=_BASE) for i in (4, 9, 1)]
        forward = [r.id for r in aggregate(reports).reports]
        backward = [r.id for r in aggregate(list(reversed(reports))).reports]
        assert forward == backward == [9, 4, 1]

    def test_input_list_untouched(self) -> None:
        reports = [make_report(1, created_at=_BASE - timedelta(hours=1)), make_report(2, created_at=_BASE)]
        aggregate(reports)
        assert [r.id for r in reports] == [1, 2]

    def test_returns_new_list(self) -> None:
        reports = [make_report(1)]
        assert aggregate(reports).reports is not reports

    def test_empty(self) -> None:
        assert aggregate([]).reports == []

    def test_mixed_naive_and_aware_timestamps(self) -> None:
        reports = [
            make_report(1, created_at=datetime(2024, 3, 1, 13, 0)),
            make_report(2, created_at=_BASE),
        ]
        assert [r.id for r in sort_reports(reports)] == [1, 2]

    def test_result_carries_color_lookup(self) -> None:
        result = aggregate([make_report(1)])
        assert result.rating_color("Poor") is ColorToken.DANGER


class TestRatingColor:
    @pytest.mark.parametrize(
        ("rating", "token"),
        [
            ("Excellent", ColorToken.ACCENT_STRONG),
            ("Very Good", ColorToken.ACCENT_MEDIUM),
            ("Good", ColorToken.WARNING),
            ("Poor", ColorToken.DANGER),
        ],
    )
    def test_known_labels(self, rating: str, token: ColorToken) -> None:
        assert rating_color(rating) is token

    @pytest.mark.parametrize("rating", ["Fair", "", "excellent", "GOOD", "Outstanding", " Poor"])
    def test_other_labels_are_neutral(self, rating: str) -> None:
        assert rating_color(rating) is ColorToken.NEUTRAL_GRAY


class TestGroupByPremise:
    def test_buckets_sorted(self) -> None:
        reports = [
            make_report(1, premise_id=10, created_at=_BASE - timedelta(days=1)),
            make_report(2, premise_id=20, created_at=_BASE),
            make_report(3, premise_id=10, created_at=_BASE),
        ]
        groups = group_by_premise(reports)
        assert [r.id for r in groups[10]] == [3, 1]
        assert [r.id for r in groups[20]] == [2]

    def test_unassigned_reports(self) -> None:
        groups = group_by_premise([make_report(1, premise_id=None)])
        assert [r.id for r in groups[None]] == [1]


class TestFormatTimeAgo:
    @pytest.mark.parametrize(
        ("delta", "expected"),
        [
            (timedelta(seconds=0), "0 seconds ago"),
            (timedelta(seconds=59), "59 seconds ago"),
            (timedelta(minutes=1), "1 minutes ago"),
            (timedelta(minutes=59, seconds=59), "59 minutes ago"),
            (timedelta(hours=3), "3 hours ago"),
            (timedelta(hours=23, minutes=59), "23 hours ago"),
            (timedelta(days=1), "1 days ago"),
            (timedelta(days=40), "40 days ago"),
        ],
    )
    def test_thresholds(self, delta: timedelta, expected: str) -> None:
        assert format_time_ago(_BASE - delta, now=_BASE) == expected

    def test_future_clamps_to_zero(self) -> None:
        assert format_time_ago(_BASE + timedelta(minutes=5), now=_BASE) == "0 seconds ago"

    def test_naive_now(self) -> None:
        assert format_time_ago(_BASE - timedelta(hours=2), now=datetime(2024, 3, 1, 12, 0)) == "2 hours ago"


class TestSummarizePremise:
    @pytest.fixture
    def site(self) -> Premise:
        return Premise(id=10, name="Downtown Office", address="123 Main St")

    def test_never_visited(self, site) -> None:
        summary = summarize_premise(site, [], now=_BASE)
        assert summary.report_count == 0
        assert summary.last_visit == "Never visited"
        assert summary.status is PremiseStatus.PENDING
        assert summary.cleaner == "Not assigned"
        assert summary.latest_rating is None

    def test_latest_report_drives_fields(self, site) -> None:
        reports = [
            make_report(1, created_at=_BASE - timedelta(days=3), inspector_name="Old Hand"),
            make_report(2, created_at=_BASE - timedelta(hours=5), inspector_name="New Hire"),
        ]
        summary = summarize_premise(site, reports, now=_BASE)
        assert summary.report_count == 2
        assert summary.last_visit == "5 hours ago"
        assert summary.cleaner == "New Hire"
        assert summary.status is PremiseStatus.COMPLETED
        assert summary.latest_rating == "Excellent"

    def test_poor_latest_rating_flags_issues(self, site) -> None:
        reports = [
            make_report(1, created_at=_BASE - timedelta(days=3), overall_rating="Poor"),
            make_report(2, created_at=_BASE - timedelta(days=1), overall_rating="Poor"),
        ]
        assert summarize_premise(site, reports, now=_BASE).status is PremiseStatus.ISSUES

    def test_older_poor_rating_ignored(self, site) -> None:
        reports = [
            make_report(1, created_at=_BASE - timedelta(days=3), overall_rating="Poor"),
            make_report(2, created_at=_BASE - timedelta(days=1), overall_rating="Good"),
        ]
        assert summarize_premise(site, reports, now=_BASE).status is PremiseStatus.COMPLETED
