"""Nested pydantic-settings configuration for the application.

Each group reads its own ``INSPECT_<GROUP>_*`` env vars::

    export INSPECT_COMPANY_NAME="Cleanlily Cleaners"
    export INSPECT_BACKEND_URL=https://project.supabase.co
    export INSPECT_EXPORT_PAGE_WIDTH=595
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

from inspection_reports.models import CompanyInfo


class CompanyConfig(BaseSettings):
    """Company metadata printed on every exported report.

    Env vars use ``INSPECT_COMPANY_`` prefix.
    """

    model_config = {"env_prefix": "INSPECT_COMPANY_"}

    name: str = "Cleanlily Cleaners"
    slogan: str = "Professional Cleaning Services"
    address: str = "21 Downie Avenue, Belgravia, Harare, Zimbabwe"
    phone: str = "+263 78 411 5935"
    email: str = "info@cleanlily.co.zw"
    website: str = "https://cleanlily.co.zw"
    logo_url: str = "https://cleanlily.co.zw/wp-content/uploads/2024/04/Cleanlily-Cleaners-logo-png.png"
    services: list[str] = Field(
        default_factory=lambda: [
            "Office Cleaning",
            "Industrial Cleaning",
            "Home Cleaning",
            "Post Construction Cleaning",
            "Window Cleaning",
            "Carpet Cleaning",
        ]
    )

    def to_company_info(self) -> CompanyInfo:
        return CompanyInfo(
            name=self.name,
            slogan=self.slogan,
            address=self.address,
            phone=self.phone,
            email=self.email,
            website=self.website,
            logo_url=self.logo_url,
            services=tuple(self.services),
        )


class ExportConfig(BaseSettings):
    """Document export configuration.

    Env vars use ``INSPECT_EXPORT_`` prefix.  Page dimensions are in points
    (612 x 792 is US Letter).
    """

    model_config = {"env_prefix": "INSPECT_EXPORT_"}

    page_width: float = Field(default=612.0, gt=0)
    page_height: float = Field(default=792.0, gt=0)
    margin_points: float = Field(default=54.0, ge=0, le=216)
    font_family: str = "Helvetica"
    body_font_size: int = Field(default=10, ge=6, le=72)
    sheet_title: str = "Inspection Report"
    column_widths: list[int] = Field(default_factory=lambda: [30, 15, 50])
    output_dir: Path = Path("./exports")

    @property
    def page_size(self) -> tuple[float, float]:
        return (self.page_width, self.page_height)


class BackendConfig(BaseSettings):
    """Hosted backend (PostgREST) configuration.

    Env vars use ``INSPECT_BACKEND_`` prefix.
    """

    model_config = {"env_prefix": "INSPECT_BACKEND_"}

    url: str = "http://localhost:54321"
    api_key: str = ""
    timeout: float = 30.0
    rest_path: str = "/rest/v1"
    premises_table: str = "premises"
    reports_table: str = "inspection_reports"
    areas_table: str = "report_areas"


class ObservabilityConfig(BaseSettings):
    """Observability configuration.

    Env vars use ``INSPECT_OBSERVABILITY_`` prefix.
    """

    model_config = {"env_prefix": "INSPECT_OBSERVABILITY_"}

    log_level: str = "INFO"
    service_name: str = "inspection-reports"


class AppSettings(BaseSettings):
    """Top-level application settings aggregating all sub-configs."""

    company: CompanyConfig = Field(default_factory=CompanyConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    backend: BackendConfig = Field(default_factory=BackendConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
