import click

from ims.infrastructure.cli.email_commands import email_send_test, email_test_services
from ims.infrastructure.cli.product_commands import (
    product_create,
    product_delete,
    product_list,
    product_show,
    product_update,
    variant_update,
)
from ims.infrastructure.config import get_settings
from ims.infrastructure.logging import configure_logging


@click.group()
def cli() -> None:
    """IMS — Inventory Management System"""
    settings = get_settings()
    configure_logging(settings.environment, settings.log_level)


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def variant() -> None:
    """Manage product variants."""


@cli.group()
def email() -> None:
    """Try out the email backends."""


# Register subcommands
product.add_command(product_create)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
variant.add_command(variant_update)
email.add_command(email_send_test)
email.add_command(email_test_services)
