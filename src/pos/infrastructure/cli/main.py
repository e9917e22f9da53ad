import logging
from pathlib import Path

import click

from pos.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_remove,
    product_update,
)
from pos.infrastructure.cli.report_commands import report_daily, report_monthly
from pos.infrastructure.cli.serve_command import serve


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="POS_DATA_DIR",
    default=None,
    help="Directory holding db.json (default: ./data).",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="INFO",
    show_default=True,
)
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, log_level: str) -> None:
    """POS — retail point-of-sale backend"""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = {"data_dir": data_dir}


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def report() -> None:
    """Print sales reports."""


# Register subcommands
cli.add_command(serve)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_remove)
product.add_command(product_update)
report.add_command(report_daily)
report.add_command(report_monthly)
