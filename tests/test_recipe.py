from __future__ import annotations

import json
from pathlib import Path

import pytest

from reportkit.recipe import (
    RecipeValidationError,
    apply_recipe,
    load_and_validate_recipe,
    validate_recipe_obj,
)


def test_empty_steps_yield_bare_leaf() -> None:
    assert apply_recipe(validate_recipe_obj({"report": "users"})).generate() == "User report data"
    assert apply_recipe(validate_recipe_obj({"report": "users", "steps": None})).generate() == "User report data"


def test_steps_apply_in_listed_order() -> None:
    recipe = validate_recipe_obj(
        {
            "report": "sales",
            "steps": [
                {"type": "export_pdf"},
                {"type": "attribute_filter", "attribute": "VIP"},
                {"type": "sort", "criterion": "Amount"},
                {"type": "amount_filter", "min": "10", "max": 20.5},
            ],
        }
    )
    assert apply_recipe(recipe).generate() == (
        "Sales report data | Exported to PDF | Filtered by user attribute: VIP"
        " | Sorted by: Amount | Filtered by sales amount: from 10.0 to 20.5"
    )


def test_non_numeric_amount_is_rejected_with_step_index() -> None:
    bad = {"report": "sales", "steps": [{"type": "sort", "criterion": "x"}, {"type": "amount_filter", "min": "abc", "max": 1}]}
    with pytest.raises(RecipeValidationError) as ei:
        validate_recipe_obj(bad)
    assert "steps[1]" in str(ei.value)


def test_non_iso_date_is_rejected_with_step_index() -> None:
    bad = {"report": "sales", "steps": [{"type": "date_filter", "start": "01/02/2023", "end": "2023-12-31"}]}
    with pytest.raises(RecipeValidationError) as ei:
        validate_recipe_obj(bad)
    assert "steps[0]" in str(ei.value)


def test_unknown_step_type_is_rejected() -> None:
    with pytest.raises(RecipeValidationError):
        validate_recipe_obj({"report": "sales", "steps": [{"type": "shuffle"}]})


def test_unknown_report_is_rejected() -> None:
    with pytest.raises(RecipeValidationError) as ei:
        validate_recipe_obj({"report": "inventory"})
    assert "unknown report" in str(ei.value)


def test_recipe_must_be_an_object() -> None:
    with pytest.raises(RecipeValidationError):
        validate_recipe_obj(["sales"])


def test_load_recipe_from_disk(tmp_path: Path) -> None:
    path = tmp_path / "recipe.json"
    path.write_text(
        json.dumps(
            {
                "report": "sales",
                "steps": [
                    {"type": "date_filter", "start": "2023-01-01", "end": "2023-12-31"},
                    {"type": "export_csv"},
                ],
            }
        ),
        encoding="utf-8",
    )
    report = apply_recipe(load_and_validate_recipe(path))
    assert report.generate() == "Sales report data | Filtered by dates: 2023-01-01 - 2023-12-31 | Exported to CSV"


def test_invalid_json_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "recipe.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(RecipeValidationError):
        load_and_validate_recipe(path)


def test_non_utf8_recipe_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "recipe.json"
    path.write_bytes(b'{"report": "\xff"}')
    with pytest.raises(RecipeValidationError) as ei:
        load_and_validate_recipe(path)
    assert "UTF-8" in str(ei.value)
