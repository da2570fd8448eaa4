"""Shared fixtures for inspection-reports tests."""

from __future__ import annotations

from typing import Any

import pytest

from inspection_reports.core.config import CompanyConfig
from inspection_reports.models import CompanyInfo, NormalizedReport, Premise
from tests.fakes.factories import make_raw_report, make_report


@pytest.fixture
def premise() -> Premise:
    return Premise(id=10, name="Downtown Office", address="123 Main St")


@pytest.fixture
def company() -> CompanyInfo:
    return CompanyConfig().to_company_info()


@pytest.fixture
def raw_report() -> dict[str, Any]:
    return make_raw_report()


@pytest.fixture
def report() -> NormalizedReport:
    return make_report()


@pytest.fixture
def payload() -> dict[str, Any]:
    """JSON snapshot with two premises; only the first has reports."""
    return {
        "premises": [
            {"id": 10, "name": "Downtown Office", "address": "123 Main St"},
            {"id": 20, "name": "Airport Lounge", "address": "1 Runway Rd"},
        ],
        "inspection_reports": [
            make_raw_report(1, created_at="2024-01-05T14:30:00+00:00"),
            make_raw_report(2, created_at="2024-02-01T09:05:00+00:00", overall_rating="Poor"),
        ],
    }
