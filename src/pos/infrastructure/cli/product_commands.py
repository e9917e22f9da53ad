"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from pos.application.add_product import AddProductHandler
from pos.application.list_products import ListProductsHandler
from pos.application.remove_product import RemoveProductHandler
from pos.application.update_product import UpdateProductHandler
from pos.domain.exceptions import DomainException, StorageError
from pos.infrastructure.bootstrap import document_repository


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--image-url", required=True, help="Picture shown in the catalog.")
@click.pass_obj
def product_add(obj: dict, name: str, image_url: str) -> None:
    """Add a new product to the catalog."""
    try:
        handler = AddProductHandler(document_repository(obj["data_dir"]))
        product = handler.handle(name=name, image_url=image_url)
    except (DomainException, StorageError) as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added")


@click.command("list")
@click.pass_obj
def product_list(obj: dict) -> None:
    """List all products in the catalog."""
    try:
        products = ListProductsHandler(document_repository(obj["data_dir"])).handle()
    except StorageError as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<22} {'Name':<30}")
    click.echo("-" * 53)
    for p in products:
        click.echo(f"{p.id:<22} {p.name:<30}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--image-url", default=None, help="New picture URL.")
@click.pass_obj
def product_update(obj: dict, product_id: str, name: str | None, image_url: str | None) -> None:
    """Rename a product or change its picture."""
    if name is None and image_url is None:
        raise click.UsageError("Give --name and/or --image-url.")

    try:
        handler = UpdateProductHandler(document_repository(obj["data_dir"]))
        product = handler.handle(product_id, name=name, image_url=image_url)
    except (DomainException, StorageError) as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} updated: '{product.name}'")


@click.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_remove(obj: dict, product_id: str) -> None:
    """Remove a product from the catalog (issued invoices are kept)."""
    try:
        RemoveProductHandler(document_repository(obj["data_dir"])).handle(product_id)
    except (DomainException, StorageError) as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} removed")
