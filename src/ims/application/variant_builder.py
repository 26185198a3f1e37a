"""Builds Variant entities from VariantSpec input.

Shared by the create and update handlers: both replace the variant
collection wholesale and give every new variant a fresh ID.
"""

from __future__ import annotations

from ims.application.dto import VariantSpec
from ims.domain.model.product import Product, Variant
from ims.domain.model.value_objects import Price, ProductName, VariantId


def build_variant(product: Product, spec: VariantSpec) -> Variant:
    price = spec.price if spec.price is not None else product.price
    stock = spec.stock if spec.stock is not None else product.stock
    return Variant.create(
        variant_id=VariantId.random(),
        product=product,
        name=ProductName(spec.name),
        price=Price(price).value,
        stock=stock,
        image=spec.image,
    )


def add_variants(product: Product, specs: list[VariantSpec]) -> None:
    for spec in specs:
        product.add_variant(build_variant(product, spec))
