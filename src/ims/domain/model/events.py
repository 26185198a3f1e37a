"""Domain events raised by the product catalog."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from ims.domain.model.product import Product


@dataclass(frozen=True)
class ProductCreatedDomainEvent:
    """A product was created and persisted.

    Carries the product itself plus a denormalised snapshot of its
    scalar fields taken at creation time, so listeners never need to
    reload it.
    """

    product: Product = field(repr=False, compare=False)
    product_id: str
    product_name: str
    product_description: str
    product_price: float
    product_stock: int
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_product(cls, product: Product) -> ProductCreatedDomainEvent:
        return cls(
            product=product,
            product_id=str(product.id),
            product_name=str(product.name),
            product_description=str(product.description),
            product_price=product.price,
            product_stock=product.stock,
        )
