"""CLI commands for the Product aggregate and its variants."""

from __future__ import annotations

import json

import click

from ims.application.commands import (
    CreateProduct,
    DeleteProduct,
    UpdateProduct,
    UpdateVariant,
)
from ims.application.dto import ProductResponse, VariantSpec
from ims.application.queries import GetAllProducts, GetProductById
from ims.domain.exceptions import DomainException, EmailDeliveryError
from ims.infrastructure.bootstrap import Container, build_container

VARIANTS_HELP = (
    'JSON list of variants, e.g. \'[{"name": "Blue M", "price": 21.99, '
    '"stock": 5, "image": "blue.jpg"}]\'.'
)


def _parse_variants(raw: str | None) -> list[VariantSpec] | None:
    if raw is None:
        return None
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"not valid JSON ({exc.msg})", param_hint="--variants")
    if not isinstance(data, list) or not all(isinstance(v, dict) for v in data):
        raise click.BadParameter("expected a JSON list of objects", param_hint="--variants")
    return [VariantSpec.from_dict(v) for v in data]


def _container() -> Container:
    # Wiring resolves the email backend, which can fail on bad settings.
    try:
        return build_container()
    except DomainException as exc:
        raise click.ClickException(str(exc))


def _print_product(product: ProductResponse) -> None:
    click.echo(f"Product {product.id}")
    click.echo(f"  Name:        {product.name}")
    click.echo(f"  Description: {product.description}")
    click.echo(f"  Price:       {product.price:.2f}")
    click.echo(f"  Stock:       {product.stock}")
    if not product.variants:
        click.echo("  Variants:    (none)")
        return
    click.echo("  Variants:")
    for v in product.variants:
        image = v.image or "-"
        click.echo(f"    {v.id}  {v.name:<20} {v.price:>10.2f} {v.stock:>6}  {image}")


@click.command("create")
@click.option("--name", required=True, help="Product name (unique).")
@click.option("--description", required=True, help="Product description.")
@click.option("--price", required=True, type=float, help="Price (e.g. 19.99).")
@click.option("--stock", required=True, type=int, help="Units in stock.")
@click.option("--variants", "variants_json", default="[]", help=VARIANTS_HELP)
def product_create(
    name: str, description: str, price: float, stock: int, variants_json: str
) -> None:
    """Create a product, optionally with variants."""
    command = CreateProduct(
        name=name,
        description=description,
        price=price,
        stock=stock,
        variants=_parse_variants(variants_json) or [],
    )
    container = _container()

    try:
        product_id = container.create_product.handle(command)
    except (DomainException, EmailDeliveryError) as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} '{name}' created")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = _container().get_all_products.handle(GetAllProducts())

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<36}  {'Name':<20} {'Price':>10} {'Stock':>6} {'Variants':>8}")
    click.echo("-" * 86)
    for p in products:
        click.echo(
            f"{p.id:<36}  {p.name:<20} {p.price:>10.2f} {p.stock:>6} {len(p.variants):>8}"
        )


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--json", "as_json", is_flag=True, help="Print the product as JSON.")
def product_show(product_id: str, as_json: bool) -> None:
    """Show one product with its variants."""
    product = _container().get_product_by_id.handle(GetProductById(product_id))
    if product is None:
        raise click.ClickException(f"Product '{product_id}' not found")

    if as_json:
        click.echo(json.dumps(product.to_dict(), indent=2, ensure_ascii=False))
    else:
        _print_product(product)


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--description", default=None, help="New description.")
@click.option("--price", type=float, default=None, help="New price.")
@click.option("--stock", type=int, default=None, help="New stock.")
@click.option(
    "--variants",
    "variants_json",
    default=None,
    help=VARIANTS_HELP + " Replaces every existing variant; '[]' removes them all.",
)
def product_update(
    product_id: str,
    name: str | None,
    description: str | None,
    price: float | None,
    stock: int | None,
    variants_json: str | None,
) -> None:
    """Update a product. Options left out are not changed."""
    command = UpdateProduct(
        product_id=product_id,
        name=name,
        description=description,
        price=price,
        stock=stock,
        variants=_parse_variants(variants_json),
    )

    try:
        _container().update_product.handle(command)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} updated")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(product_id: str) -> None:
    """Delete a product together with its variants."""
    try:
        _container().delete_product.handle(DeleteProduct(product_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} deleted")


@click.command("update")
@click.option("--product-id", required=True, help="Owning product ID.")
@click.option("--variant-id", required=True, help="Variant ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", type=float, default=None, help="New price.")
@click.option("--stock", type=int, default=None, help="New stock.")
@click.option("--image", default=None, help="New image reference.")
def variant_update(
    product_id: str,
    variant_id: str,
    name: str | None,
    price: float | None,
    stock: int | None,
    image: str | None,
) -> None:
    """Update one variant. Options left out are not changed."""
    command = UpdateVariant(
        product_id=product_id,
        variant_id=variant_id,
        name=name,
        price=price,
        stock=stock,
        image=image,
    )

    try:
        _container().update_variant.handle(command)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Variant {variant_id} updated")
