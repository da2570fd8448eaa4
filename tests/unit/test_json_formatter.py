"""Tests for the JSONFormatter."""

from __future__ import annotations

import json

from inspection_reports.formatters.json_formatter import JSONFormatter


class TestJSONFormatter:
    def test_format_returns_bytes(self, premise, report) -> None:
        assert isinstance(JSONFormatter().format(report, premise), bytes)

    def test_payload_fields(self, premise, report) -> None:
        parsed = json.loads(JSONFormatter().format(report, premise))
        assert parsed["premise"] == {"id": 10, "name": "Downtown Office", "address": "123 Main St"}
        assert parsed["report"]["id"] == 1
        assert parsed["report"]["date"] == "Jan 5, 2024"
        assert parsed["report"]["areas"] == {"Toilets": {"rating": "Good", "comment": "clean"}}
        assert parsed["report"]["client_feedback"] is None

    def test_created_at_serialized(self, premise, report) -> None:
        parsed = json.loads(JSONFormatter().format(report, premise))
        assert parsed["report"]["created_at"] == "2024-01-05T14:30:00+00:00"

    def test_content_type(self) -> None:
        assert JSONFormatter().content_type == "application/json"
        assert JSONFormatter().extension == "json"

    def test_format_to_file(self, premise, report, tmp_path) -> None:
        path = tmp_path / "out.json"
        result = JSONFormatter().format_to_file(report, premise, path)
        assert result == path
        assert json.loads(path.read_text(encoding="utf-8"))["report"]["inspector_name"] == "Tariro Moyo"
