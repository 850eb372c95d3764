"""Composable text reports built from a leaf and a chain of decorators."""

from .builder import ReportBuilder
from .reports import (
    CsvExportDecorator,
    DateFilterDecorator,
    PdfExportDecorator,
    Report,
    ReportDecorator,
    SalesAmountFilterDecorator,
    SalesReport,
    SortingDecorator,
    UserAttributeFilterDecorator,
    UserReport,
    get_report,
    list_reports,
)

__all__ = [
    "CsvExportDecorator",
    "DateFilterDecorator",
    "PdfExportDecorator",
    "Report",
    "ReportBuilder",
    "ReportDecorator",
    "SalesAmountFilterDecorator",
    "SalesReport",
    "SortingDecorator",
    "UserAttributeFilterDecorator",
    "UserReport",
    "get_report",
    "list_reports",
]

__version__ = "0.1.0"
