"""Read-through wrappers that annotate a report's output.

Every decorator owns exactly one inner report and appends a single fixed
annotation to whatever that report generates:

    inner.generate() + " | " + annotation

Wrapping order is preserved in the output: the innermost decorator's
annotation comes first and the outermost one's comes last.  Parameters are
captured at construction time and never change afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterator

from .base import SEPARATOR, Report


def _format_amount(value: float) -> str:
    # Ints keep their exact digits: 1000 -> "1000.0".
    if isinstance(value, int) and not isinstance(value, bool):
        return f"{value}.0"
    return str(float(value))


@dataclass(frozen=True)
class ReportDecorator(Report):
    report: Report

    def annotation(self) -> str:  # pragma: no cover - interface
        raise NotImplementedError

    def generate(self) -> str:
        return f"{self.report.generate()}{SEPARATOR}{self.annotation()}"


@dataclass(frozen=True)
class DateFilterDecorator(ReportDecorator):
    start: date
    end: date

    def annotation(self) -> str:
        return f"Filtered by dates: {self.start.isoformat()} - {self.end.isoformat()}"


@dataclass(frozen=True)
class SalesAmountFilterDecorator(ReportDecorator):
    min_amount: float
    max_amount: float

    def annotation(self) -> str:
        return f"Filtered by sales amount: from {_format_amount(self.min_amount)} to {_format_amount(self.max_amount)}"


@dataclass(frozen=True)
class UserAttributeFilterDecorator(ReportDecorator):
    attribute: str

    def annotation(self) -> str:
        return f"Filtered by user attribute: {self.attribute}"


@dataclass(frozen=True)
class SortingDecorator(ReportDecorator):
    criterion: str

    def annotation(self) -> str:
        return f"Sorted by: {self.criterion}"


@dataclass(frozen=True)
class CsvExportDecorator(ReportDecorator):
    def annotation(self) -> str:
        return "Exported to CSV"


@dataclass(frozen=True)
class PdfExportDecorator(ReportDecorator):
    def annotation(self) -> str:
        return "Exported to PDF"


def iter_layers(report: Report) -> Iterator[Report]:
    """Yield every layer of a chain, outermost first, ending with the leaf."""
    current = report
    while isinstance(current, ReportDecorator):
        yield current
        current = current.report
    yield current


def depth(report: Report) -> int:
    """Number of decorator layers wrapped around the leaf."""
    return sum(1 for layer in iter_layers(report) if isinstance(layer, ReportDecorator))
