from __future__ import annotations

from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional

import typer

from .builder import ReportBuilder
from .demo import demo_reports
from .recipe import RecipeValidationError, apply_recipe, load_and_validate_recipe
from .reports import Report, ReportDecorator, depth, get_report, iter_layers, list_reports

app = typer.Typer(add_completion=False, help="Compose reports from a leaf and a chain of decorators.")


class ExportFormat(str, Enum):
    CSV = "csv"
    PDF = "pdf"


def _describe_layer(layer: Report) -> str:
    name = type(layer).__name__
    if isinstance(layer, ReportDecorator):
        return f"{name}: {layer.annotation()}"
    return f"{name} (leaf): {layer.generate()}"


def _emit(report: Report, *, explain: bool) -> None:
    typer.echo(report.generate())
    if explain:
        # Outermost layer first, leaf last.
        for i, layer in enumerate(iter_layers(report)):
            typer.echo(f"  [{i}] {_describe_layer(layer)}", err=True)
        typer.echo(f"  depth: {depth(report)}", err=True)


def _fail(message: str, code: int = 1) -> typer.Exit:
    typer.echo(f"ERROR: {message}", err=True)
    return typer.Exit(code=code)


@app.command()
def demo(
    explain: bool = typer.Option(False, "--explain", help="Print each decorator layer to stderr"),
) -> None:
    """
    Print the two canonical reports: a filtered, sorted, CSV-exported sales
    report and a VIP users report exported to PDF.
    """
    for report in demo_reports():
        _emit(report, explain=explain)


@app.command("list")
def list_cmd() -> None:
    """List the leaf reports that can be decorated."""
    for name in list_reports():
        typer.echo(name)


@app.command()
def generate(
    report: str = typer.Option("sales", "--report", help="Leaf report name (see `list`)"),
    start: Optional[datetime] = typer.Option(None, "--start", formats=["%Y-%m-%d"], help="Date filter start"),
    end: Optional[datetime] = typer.Option(None, "--end", formats=["%Y-%m-%d"], help="Date filter end"),
    min_amount: Optional[float] = typer.Option(None, "--min-amount", help="Sales amount filter lower bound"),
    max_amount: Optional[float] = typer.Option(None, "--max-amount", help="Sales amount filter upper bound"),
    attribute: Optional[str] = typer.Option(None, "--attribute", help="User attribute filter"),
    sort_by: Optional[str] = typer.Option(None, "--sort-by", help="Sort criterion"),
    export: Optional[ExportFormat] = typer.Option(None, "--export", case_sensitive=False, help="csv|pdf"),
    explain: bool = typer.Option(False, "--explain", help="Print each decorator layer to stderr"),
) -> None:
    """
    Decorate a leaf report from command-line options.

    Decorators are applied in a fixed order:
      dates -> amount -> attribute -> sort -> export
    Use `build --recipe` for any other order.
    """
    try:
        base = get_report(report)
    except KeyError as exc:
        raise _fail(str(exc.args[0]))

    if (start is None) != (end is None):
        raise _fail("--start and --end must be given together.")
    if (min_amount is None) != (max_amount is None):
        raise _fail("--min-amount and --max-amount must be given together.")

    builder = ReportBuilder(base)
    if start is not None and end is not None:
        builder.with_date_filter(start.date(), end.date())
    if min_amount is not None and max_amount is not None:
        builder.with_sales_amount_filter(min_amount, max_amount)
    if attribute is not None:
        builder.with_user_attribute_filter(attribute)
    if sort_by is not None:
        builder.with_sorting(sort_by)
    if export == ExportFormat.CSV:
        builder.with_csv_export()
    elif export == ExportFormat.PDF:
        builder.with_pdf_export()

    _emit(builder.build(), explain=explain)


@app.command()
def build(
    recipe: Path = typer.Option(..., "--recipe", help="Path to a recipe JSON file"),
    explain: bool = typer.Option(False, "--explain", help="Print each decorator layer to stderr"),
) -> None:
    """
    Decorate a leaf report from a recipe file, applying steps in listed order.
    """
    try:
        parsed = load_and_validate_recipe(recipe)
    except FileNotFoundError:
        raise _fail(f"recipe not found: {recipe}", code=2)
    except OSError as exc:
        raise _fail(f"cannot read recipe {recipe}: {exc.strerror or exc}")
    except RecipeValidationError as exc:
        raise _fail(str(exc))

    _emit(apply_recipe(parsed), explain=explain)
