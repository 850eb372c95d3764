from __future__ import annotations

# Joins a report's output with each annotation appended by a decorator.
SEPARATOR = " | "


class Report:
    """Anything that can describe itself as a line of text."""

    def generate(self) -> str:  # pragma: no cover - interface
        raise NotImplementedError


class SalesReport(Report):
    def generate(self) -> str:
        return "Sales report data"


class UserReport(Report):
    def generate(self) -> str:
        return "User report data"
