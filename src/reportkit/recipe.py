"""Declarative report chains.

A recipe names a leaf report and lists the decorators to wrap it in, in
order:

    {
      "report": "sales",
      "steps": [
        {"type": "date_filter", "start": "2023-01-01", "end": "2023-12-31"},
        {"type": "amount_filter", "min": 1000, "max": 5000},
        {"type": "sort", "criterion": "Sale date"},
        {"type": "export_csv"}
      ]
    }

Steps are applied to a `ReportBuilder` exactly in the listed order.
"""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .builder import ReportBuilder
from .reports.base import Report
from .reports.registry import get_report, list_reports


class RecipeValidationError(ValueError):
    """Raised when a recipe violates the contract."""


class _Step(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    def apply(self, builder: ReportBuilder) -> ReportBuilder:  # pragma: no cover - interface
        raise NotImplementedError


class DateFilterStep(_Step):
    type: Literal["date_filter"]
    start: date
    end: date

    def apply(self, builder: ReportBuilder) -> ReportBuilder:
        return builder.with_date_filter(self.start, self.end)


class AmountFilterStep(_Step):
    type: Literal["amount_filter"]
    min: float
    max: float

    def apply(self, builder: ReportBuilder) -> ReportBuilder:
        return builder.with_sales_amount_filter(self.min, self.max)


class AttributeFilterStep(_Step):
    type: Literal["attribute_filter"]
    attribute: str

    def apply(self, builder: ReportBuilder) -> ReportBuilder:
        return builder.with_user_attribute_filter(self.attribute)


class SortStep(_Step):
    type: Literal["sort"]
    criterion: str

    def apply(self, builder: ReportBuilder) -> ReportBuilder:
        return builder.with_sorting(self.criterion)


class CsvExportStep(_Step):
    type: Literal["export_csv"]

    def apply(self, builder: ReportBuilder) -> ReportBuilder:
        return builder.with_csv_export()


class PdfExportStep(_Step):
    type: Literal["export_pdf"]

    def apply(self, builder: ReportBuilder) -> ReportBuilder:
        return builder.with_pdf_export()


RecipeStep = Annotated[
    Union[
        DateFilterStep,
        AmountFilterStep,
        AttributeFilterStep,
        SortStep,
        CsvExportStep,
        PdfExportStep,
    ],
    Field(discriminator="type"),
]


class ReportRecipe(BaseModel):
    """
    A leaf report name plus the ordered decorator steps to wrap it in.

    report: registered leaf name (see `reportkit list`)
    steps: applied first to last; may be empty
    """
    model_config = ConfigDict(extra="forbid")

    report: str
    steps: list[RecipeStep] = Field(default_factory=list)

    @field_validator("report")
    @classmethod
    def _known_report(cls, v: str) -> str:
        name = v.strip().lower()
        if name not in list_reports():
            raise ValueError(f"unknown report '{v}', expected one of {list_reports()}")
        return name

    @field_validator("steps", mode="before")
    @classmethod
    def _none_is_empty(cls, v: Any) -> Any:
        return [] if v is None else v


def _format_loc(loc: tuple[Any, ...]) -> str:
    out = ""
    for part in loc:
        if isinstance(part, int):
            out += f"[{part}]"
        else:
            out += f".{part}" if out else str(part)
    return out or "recipe"


def _format_errors(exc: ValidationError) -> str:
    lines = [f"{_format_loc(tuple(err['loc']))}: {err['msg']}" for err in exc.errors()]
    return "; ".join(lines)


def validate_recipe_obj(obj: Any) -> ReportRecipe:
    """Validate a decoded recipe object.

    Raises RecipeValidationError naming the offending step (e.g. `steps[1].min`).
    """
    if not isinstance(obj, dict):
        raise RecipeValidationError("recipe must be a JSON object (mapping).")
    try:
        return ReportRecipe.model_validate(obj)
    except ValidationError as e:
        raise RecipeValidationError(f"invalid recipe: {_format_errors(e)}") from e


def load_and_validate_recipe(path: Path) -> ReportRecipe:
    """Load a recipe JSON file from disk and validate it."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise RecipeValidationError(f"{path.name} is not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise RecipeValidationError(f"{path.name} is not valid JSON: {e}") from e

    return validate_recipe_obj(raw)


def apply_recipe(recipe: ReportRecipe) -> Report:
    builder = ReportBuilder(get_report(recipe.report))
    for step in recipe.steps:
        builder = step.apply(builder)
    return builder.build()
