import click

from catalog.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_patch,
    product_show,
    product_update,
)
from catalog.infrastructure.logging import configure_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output to stderr.")
@click.option("--log-json", is_flag=True, default=False, help="Emit logs as JSON lines.")
def cli(verbose: bool, log_json: bool) -> None:
    """Catalog — Product Record Management"""
    configure_logging(verbose=verbose, log_json=log_json)


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_patch)
product.add_command(product_show)
product.add_command(product_update)
