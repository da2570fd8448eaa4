"""Exception hierarchy for inspection-reports."""

from __future__ import annotations


class InspectionReportError(Exception):
    """Base exception for all inspection-reports errors."""


class ValidationError(InspectionReportError):
    """A required field is missing or has the wrong type in raw input."""

    def __init__(self, message: str, report_id: object = None) -> None:
        super().__init__(message)
        self.report_id = report_id


class FormatError(InspectionReportError):
    """A date/time value cannot be parsed into its display format."""

    def __init__(self, message: str, raw_value: object = None, report_id: object = None) -> None:
        super().__init__(message)
        self.raw_value = raw_value
        self.report_id = report_id


class RenderError(InspectionReportError):
    """Raised when a report violates an invariant during document assembly."""


class DataSourceError(InspectionReportError):
    """Raised when the hosted backend cannot be queried."""


class NotFoundError(InspectionReportError):
    """Raised when a premise or report does not exist."""


class PermissionDeniedError(InspectionReportError):
    """Raised when the caller lacks the capability for an operation."""
