"""Tests for the row normalizer."""

from __future__ import annotations

import copy
from datetime import date, datetime, timedelta, timezone

import pytest

from inspection_reports.exceptions import FormatError, ValidationError
from inspection_reports.models import AreaEntry, RawInspectionReport
from inspection_reports.reporting.normalizer import (
    format_display_date,
    format_display_time,
    normalize,
    normalize_report,
    parse_inspection_date,
    parse_timestamp,
)
from tests.fakes.factories import make_raw_report


class TestDisplayFormats:
    def test_date_has_no_leading_zero_day(self) -> None:
        assert format_display_date(date(2024, 1, 5)) == "Jan 5, 2024"

    def test_date_two_digit_day(self) -> None:
        assert format_display_date(date(2023, 12, 25)) == "Dec 25, 2023"

    def test_time_morning(self) -> None:
        assert format_display_time(datetime(2024, 1, 5, 9, 5)) == "09:05 AM"

    def test_time_afternoon(self) -> None:
        assert format_display_time(datetime(2024, 1, 5, 14, 30)) == "02:30 PM"

    def test_time_midnight(self) -> None:
        assert format_display_time(datetime(2024, 1, 5, 0, 15)) == "12:15 AM"


class TestParsing:
    def test_timestamp_with_offset(self) -> None:
        ts = parse_timestamp("2024-01-05T14:30:00+00:00")
        assert ts == datetime(2024, 1, 5, 14, 30, tzinfo=timezone.utc)

    def test_timestamp_with_zulu_suffix(self) -> None:
        ts = parse_timestamp("2024-01-05T14:30:00Z")
        assert ts.tzinfo is not None
        assert ts.hour == 14

    def test_timestamp_with_fraction(self) -> None:
        ts = parse_timestamp("2024-01-05T14:30:00.123456+00:00")
        assert ts.microsecond == 123456

    def test_bad_timestamp_raises(self) -> None:
        with pytest.raises(FormatError) as exc_info:
            parse_timestamp("yesterday", report_id=7)
        assert exc_info.value.raw_value == "yesterday"
        assert exc_info.value.report_id == 7

    def test_iso_date(self) -> None:
        assert parse_inspection_date("2024-01-05") == date(2024, 1, 5)

    def test_iso_datetime_as_date(self) -> None:
        assert parse_inspection_date("2024-01-05T23:59:00+00:00") == date(2024, 1, 5)

    @pytest.mark.parametrize("text", ["1/5/2024", "01/05/2024", "1/5/24", "Jan 5, 2024", "January 5, 2024"])
    def test_device_locale_dates(self, text: str) -> None:
        assert parse_inspection_date(text) == date(2024, 1, 5)

    @pytest.mark.parametrize("text", ["", "   ", "soon", "2024-13-40"])
    def test_bad_date_raises(self, text: str) -> None:
        with pytest.raises(FormatError) as exc_info:
            parse_inspection_date(text, report_id=3)
        assert exc_info.value.raw_value == text
        assert exc_info.value.report_id == 3


class TestNormalizeReport:
    def test_display_fields(self, raw_report) -> None:
        report = normalize_report(raw_report)
        assert report.id == 1
        assert report.premise_id == 10
        assert report.date == "Jan 5, 2024"
        assert report.time == "02:30 PM"
        assert report.inspector_name == "Tariro Moyo"
        assert report.overall_rating == "Good"
        assert report.sites_visited == 2
        assert report.time_in == "08:00"
        assert report.time_out == "10:30"
        assert report.client_feedback == "Very happy with the service"

    def test_created_at_kept_as_datetime(self, raw_report) -> None:
        report = normalize_report(raw_report)
        assert report.created_at == datetime(2024, 1, 5, 14, 30, tzinfo=timezone.utc)

    def test_date_and_time_come_from_different_columns(self) -> None:
        raw = make_raw_report(date="2024-01-04", created_at="2024-01-05T09:05:00+00:00")
        report = normalize_report(raw)
        assert report.date == "Jan 4, 2024"
        assert report.time == "09:05 AM"

    def test_display_zone(self, raw_report) -> None:
        report = normalize_report(raw_report, tz=timezone(timedelta(hours=2)))
        assert report.time == "04:30 PM"
        assert report.created_at.hour == 14

    def test_areas_keyed_by_name(self, raw_report) -> None:
        report = normalize_report(raw_report)
        assert report.areas == {
            "Floors Cleaned": AreaEntry(rating="Excellent", comment="Spotless"),
            "Toilets": AreaEntry(rating="Good", comment=None),
        }

    def test_no_synthetic_areas(self) -> None:
        report = normalize_report(make_raw_report(report_areas=[]))
        assert report.areas == {}

    def test_duplicate_area_last_write_wins_first_position(self) -> None:
        raw = make_raw_report(
            report_areas=[
                {"area_name": "Toilets", "rating": "Poor", "comments": "first"},
                {"area_name": "Kitchen/Pantry", "rating": "Good", "comments": None},
                {"area_name": "Toilets", "rating": "Excellent", "comments": "second"},
            ]
        )
        report = normalize_report(raw)
        assert list(report.areas) == ["Toilets", "Kitchen/Pantry"]
        assert report.areas["Toilets"] == AreaEntry(rating="Excellent", comment="second")

    def test_blank_comment_becomes_none(self) -> None:
        raw = make_raw_report(report_areas=[{"area_name": "Other", "rating": "Good", "comments": "  "}])
        assert normalize_report(raw).areas["Other"].comment is None

    @pytest.mark.parametrize("feedback", [None, "", "   "])
    def test_blank_feedback_becomes_none(self, feedback) -> None:
        assert normalize_report(make_raw_report(client_feedback=feedback)).client_feedback is None

    def test_missing_optionals_default(self) -> None:
        raw = make_raw_report(time_in=None, time_out=None, sites_visited=None)
        report = normalize_report(raw)
        assert report.time_in == ""
        assert report.time_out == ""
        assert report.sites_visited == 0

    def test_accepts_model_rows(self, raw_report) -> None:
        model = RawInspectionReport.model_validate(raw_report)
        assert normalize_report(model) == normalize_report(raw_report)

    def test_missing_inspector_raises_with_id(self, raw_report) -> None:
        del raw_report["inspector_name"]
        with pytest.raises(ValidationError) as exc_info:
            normalize_report(raw_report)
        assert exc_info.value.report_id == 1
        assert "inspector_name" in str(exc_info.value)

    def test_empty_overall_rating_raises(self) -> None:
        with pytest.raises(ValidationError):
            normalize_report(make_raw_report(overall_rating=""))

    def test_mistyped_sites_visited_raises(self) -> None:
        with pytest.raises(ValidationError):
            normalize_report(make_raw_report(sites_visited="several"))

    def test_area_without_rating_raises(self) -> None:
        with pytest.raises(ValidationError):
            normalize_report(make_raw_report(report_areas=[{"area_name": "Toilets"}]))

    @pytest.mark.parametrize(
        "area",
        [{"area_name": "   ", "rating": "Good"}, {"area_name": "Toilets", "rating": " "}],
    )
    def test_blank_area_field_raises_with_id(self, area) -> None:
        with pytest.raises(ValidationError) as exc_info:
            normalize_report(make_raw_report(4, report_areas=[area]))
        assert exc_info.value.report_id == 4

    def test_non_mapping_row_raises(self) -> None:
        with pytest.raises(ValidationError):
            normalize_report(["not", "a", "row"])  # type: ignore[arg-type]

    def test_bad_date_raises_format_error(self) -> None:
        with pytest.raises(FormatError) as exc_info:
            normalize_report(make_raw_report(5, date="next tuesday"))
        assert exc_info.value.report_id == 5
        assert exc_info.value.raw_value == "next tuesday"


class TestNormalize:
    def test_preserves_input_order(self) -> None:
        rows = [make_raw_report(i) for i in (3, 1, 2)]
        assert [r.id for r in normalize(rows)] == [3, 1, 2]

    def test_empty_input(self) -> None:
        assert normalize([]) == []

    def test_does_not_mutate_input(self) -> None:
        rows = [make_raw_report(1), make_raw_report(2, client_feedback="")]
        before = copy.deepcopy(rows)
        normalize(rows)
        assert rows == before

    def test_first_bad_row_aborts(self) -> None:
        rows = [make_raw_report(1), make_raw_report(2, created_at="garbage")]
        with pytest.raises(FormatError) as exc_info:
            normalize(rows)
        assert exc_info.value.report_id == 2
