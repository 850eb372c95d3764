from __future__ import annotations

from typing import Dict, Type

from .base import Report, SalesReport, UserReport


_REGISTRY: Dict[str, Type[Report]] = {
    "sales": SalesReport,
    "users": UserReport,
}


def list_reports() -> list[str]:
    return sorted(_REGISTRY)


def get_report(name: str) -> Report:
    cls = _REGISTRY.get(name.strip().lower())
    if cls is None:
        raise KeyError(f"Unknown report '{name}'. Available: {list_reports()}")
    return cls()
