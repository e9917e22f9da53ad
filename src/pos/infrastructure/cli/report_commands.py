"""CLI commands for sales reports."""

from __future__ import annotations

from decimal import Decimal

import click

from pos.application.dto import ReportLineDTO
from pos.application.show_report import DailyReportHandler, MonthlyReportHandler
from pos.domain.exceptions import DomainException, StorageError
from pos.domain.model.value_objects import CURRENCY_SYMBOL
from pos.infrastructure.bootstrap import document_repository


def _money(amount: Decimal) -> str:
    return f"{CURRENCY_SYMBOL}{amount:.2f}"


def _display_report(title: str, items: list[ReportLineDTO], total: Decimal) -> None:
    """Shared formatting for both report kinds."""
    click.echo(title)
    click.echo()

    if not items:
        click.echo("No sales found for this period.")
        return

    click.echo(f"  {'Item':<30} {'Qty':>6} {'Revenue':>14}")
    click.echo(f"  {'-'*52}")
    for line in items:
        click.echo(
            f"  {line.product_name:<30} {line.quantity:>6} {_money(line.revenue):>14}"
        )
    click.echo(f"  {'-'*52}")
    total_qty = sum(line.quantity for line in items)
    click.echo(f"  {'Total':<30} {total_qty:>6} {_money(total):>14}")


@click.command("daily")
@click.option("--date", "day", required=True, help="Calendar day, YYYY-MM-DD (UTC).")
@click.pass_obj
def report_daily(obj: dict, day: str) -> None:
    """Per-product sales for one day."""
    try:
        dto = DailyReportHandler(document_repository(obj["data_dir"])).handle(day)
    except (DomainException, StorageError) as exc:
        raise click.ClickException(str(exc))

    _display_report(f"Daily Sales Report: {dto.date}", dto.items, dto.total_revenue)


@click.command("monthly")
@click.option("--year", required=True, type=int, help="Year, e.g. 2024.")
@click.option("--month", required=True, type=int, help="Month number, 1-12.")
@click.pass_obj
def report_monthly(obj: dict, year: int, month: int) -> None:
    """Per-product sales for one month."""
    try:
        dto = MonthlyReportHandler(document_repository(obj["data_dir"])).handle(year, month)
    except (DomainException, StorageError) as exc:
        raise click.ClickException(str(exc))

    _display_report(
        f"Monthly Sales Report: {dto.month} {dto.year}", dto.items, dto.total_revenue
    )
