"""CLI commands for the Product aggregate."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import click

from catalog.application.create_product import CreateProductHandler
from catalog.application.delete_product import DeleteProductHandler
from catalog.application.dto import ProductDTO, to_dto
from catalog.application.list_products import ListProductsHandler
from catalog.application.partial_update_product import PartialUpdateProductHandler
from catalog.application.show_product import ShowProductHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.exceptions import DomainException, StorageError, ValidationError
from catalog.domain.model.product import Product, ProductStatus
from catalog.domain.model.value_objects import PageRequest, to_decimal
from catalog.infrastructure.bootstrap import product_repository


def _parse_decimal(ctx, param, value: str | None) -> Decimal | None:
    if value is None:
        return None
    try:
        return to_decimal(value)
    except ValidationError as exc:
        raise click.BadParameter(str(exc))


def _parse_status(ctx, param, value: str | None) -> ProductStatus | None:
    return None if value is None else ProductStatus(value)


def field_options(func):
    """Attach the editable product field options shared by add/update/patch."""
    options = [
        click.option("--keywords", default=None, help="Search keywords (max 200 chars)."),
        click.option("--description", default=None, help="Description (min 10 chars)."),
        click.option("--rating", type=int, default=None, help="Rating from 0 to 5."),
        click.option("--price", default=None, callback=_parse_decimal, help="Price (e.g. 15.00)."),
        click.option("--quantity", type=int, default=None, help="Quantity in stock."),
        click.option(
            "--status",
            type=click.Choice([s.value for s in ProductStatus]),
            default=None,
            callback=_parse_status,
            help="Stock status.",
        ),
        click.option("--weight", default=None, callback=_parse_decimal, help="Weight (e.g. 1.25)."),
        click.option("--dimensions", default=None, help="Dimensions (max 50 chars)."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _build_product(product_id: int | None, title: str | None, fields: dict) -> Product:
    return Product(
        id=product_id,
        title=title,
        keywords=fields["keywords"],
        description=fields["description"],
        rating=fields["rating"],
        price=fields["price"],
        quantity_in_stock=fields["quantity"],
        status=fields["status"],
        weight=fields["weight"],
        dimensions=fields["dimensions"],
    )


def _display_product(dto: ProductDTO) -> None:
    """Shared formatting for displaying a product."""
    click.echo(f"Product #{dto.id}  (status={dto.status or '-'})")
    rows = [
        ("Title", dto.title),
        ("Keywords", dto.keywords),
        ("Description", dto.description),
        ("Rating", dto.rating),
        ("Price", dto.price),
        ("In stock", dto.quantity_in_stock),
        ("Weight", dto.weight),
        ("Dimensions", dto.dimensions),
        ("Added", dto.date_added),
        ("Modified", dto.date_modified),
    ]
    for label, value in rows:
        click.echo(f"  {label + ':':<13} {'-' if value is None else value}")


@click.command("add")
@click.option("--title", required=True, help="Product title (3-100 chars).")
@field_options
@click.option(
    "--date-added",
    type=click.DateTime(),
    default=None,
    help="Date added; must be today. Defaults to now.",
)
def product_add(title: str, date_added: datetime | None, **fields) -> None:
    """Add a new product to the catalog."""
    product = _build_product(None, title, fields)
    product.date_added = date_added or datetime.now()
    product.date_modified = datetime.now()

    handler = CreateProductHandler(product_repo=product_repository())

    try:
        saved = handler.handle(product)
    except (DomainException, StorageError) as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{saved.id} '{saved.title}' added.")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--title", required=True, help="Product title (3-100 chars).")
@field_options
def product_update(product_id: int, title: str, **fields) -> None:
    """Replace every editable field of a product.

    Options left out are cleared on the stored product.
    """
    product = _build_product(product_id, title, fields)
    product.date_modified = datetime.now()

    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        saved = handler.handle(product)
    except (DomainException, StorageError) as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{saved.id} updated.")
    _display_product(to_dto(saved))


@click.command("patch")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--title", default=None, help="Product title.")
@field_options
def product_patch(product_id: int, title: str | None, **fields) -> None:
    """Change only the given fields of a product (no validation)."""
    product = _build_product(product_id, title, fields)
    product.date_modified = datetime.now()

    handler = PartialUpdateProductHandler(product_repo=product_repository())

    try:
        saved = handler.handle(product)
    except StorageError as exc:
        raise click.ClickException(str(exc))

    if saved is None:
        raise click.ClickException(f"Product #{product_id} not found")

    click.echo(f"Product #{saved.id} patched.")
    _display_product(to_dto(saved))


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_show(product_id: int) -> None:
    """Show details of a product."""
    handler = ShowProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(product_id)
    except StorageError as exc:
        raise click.ClickException(str(exc))

    if product is None:
        raise click.ClickException(f"Product #{product_id} not found")

    _display_product(to_dto(product))


@click.command("list")
@click.option("--page", default=0, type=int, help="Zero-based page index.")
@click.option("--size", default=20, type=int, help="Products per page.")
def product_list(page: int, size: int) -> None:
    """List products in the catalog, one page at a time."""
    handler = ListProductsHandler(product_repo=product_repository())

    try:
        result = handler.handle(PageRequest(page=page, size=size))
    except (DomainException, StorageError) as exc:
        raise click.ClickException(str(exc))

    if not result.items:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Title':<30} {'Status':<14} {'Price':>10}")
    click.echo("-" * 63)
    for p in map(to_dto, result.items):
        click.echo(
            f"{p.id:<6} {p.title or '':<30} {p.status or '-':<14} {p.price or '-':>10}"
        )
    click.echo(f"Page {result.page + 1} of {result.total_pages}  ({result.total} products)")
    if result.has_next:
        click.echo(f"Next page: --page {result.page + 1}")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_delete(product_id: int) -> None:
    """Delete a product."""
    handler = DeleteProductHandler(product_repo=product_repository())

    try:
        handler.handle(product_id)
    except (DomainException, StorageError) as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted.")
