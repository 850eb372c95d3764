"""The two canonical reports printed by `reportkit demo`."""

from __future__ import annotations

from datetime import date

from .builder import ReportBuilder
from .reports.base import Report, SalesReport, UserReport


def sales_demo() -> Report:
    return (
        ReportBuilder(SalesReport())
        .with_date_filter(date(2023, 1, 1), date(2023, 12, 31))
        .with_sales_amount_filter(1000, 5000)
        .with_sorting("Sale date")
        .with_csv_export()
        .build()
    )


def users_demo() -> Report:
    return (
        ReportBuilder(UserReport())
        .with_user_attribute_filter("VIP")
        .with_sorting("Registration date")
        .with_pdf_export()
        .build()
    )


def demo_reports() -> list[Report]:
    return [sales_demo(), users_demo()]
