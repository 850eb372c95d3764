from __future__ import annotations

from datetime import date

from .reports.base import Report
from .reports.decorators import (
    CsvExportDecorator,
    DateFilterDecorator,
    PdfExportDecorator,
    SalesAmountFilterDecorator,
    SortingDecorator,
    UserAttributeFilterDecorator,
)


class ReportBuilder:
    """
    Fluent helper that wraps a base report in decorators, in call order.

    Each `with_*` call replaces the held report with a new decorator around
    it and returns the builder, so calls can be chained:

        report = (
            ReportBuilder(SalesReport())
            .with_date_filter(date(2023, 1, 1), date(2023, 12, 31))
            .with_csv_export()
            .build()
        )

    Range parameters are taken as given; `min_amount > max_amount` or
    `start > end` are not rejected.
    """

    def __init__(self, report: Report) -> None:
        self._report = report

    def with_date_filter(self, start: date, end: date) -> "ReportBuilder":
        self._report = DateFilterDecorator(self._report, start, end)
        return self

    def with_sales_amount_filter(self, min_amount: float, max_amount: float) -> "ReportBuilder":
        self._report = SalesAmountFilterDecorator(self._report, min_amount, max_amount)
        return self

    def with_user_attribute_filter(self, attribute: str) -> "ReportBuilder":
        self._report = UserAttributeFilterDecorator(self._report, attribute)
        return self

    def with_sorting(self, criterion: str) -> "ReportBuilder":
        self._report = SortingDecorator(self._report, criterion)
        return self

    def with_csv_export(self) -> "ReportBuilder":
        self._report = CsvExportDecorator(self._report)
        return self

    def with_pdf_export(self) -> "ReportBuilder":
        self._report = PdfExportDecorator(self._report)
        return self

    def build(self) -> Report:
        return self._report
