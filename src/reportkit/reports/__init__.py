from .base import SEPARATOR, Report, SalesReport, UserReport
from .decorators import (
    CsvExportDecorator,
    DateFilterDecorator,
    PdfExportDecorator,
    ReportDecorator,
    SalesAmountFilterDecorator,
    SortingDecorator,
    UserAttributeFilterDecorator,
    depth,
    iter_layers,
)
from .registry import get_report, list_reports

__all__ = [
    "SEPARATOR",
    "CsvExportDecorator",
    "DateFilterDecorator",
    "PdfExportDecorator",
    "Report",
    "ReportDecorator",
    "SalesAmountFilterDecorator",
    "SalesReport",
    "SortingDecorator",
    "UserAttributeFilterDecorator",
    "UserReport",
    "depth",
    "get_report",
    "iter_layers",
    "list_reports",
]
