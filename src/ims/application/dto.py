"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from ims.domain.model.product import Product, Variant


@dataclass(frozen=True)
class VariantSpec:
    """Input: a variant to build under a product.

    ``price`` and ``stock`` may be left out, in which case the owning
    product's values are used.
    """

    name: str
    price: float | None = None
    stock: int | None = None
    image: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> VariantSpec:
        return cls(
            name=data.get("name", ""),
            price=data.get("price"),
            stock=data.get("stock"),
            image=data.get("image"),
        )


@dataclass(frozen=True)
class VariantResponse:
    id: str
    name: str
    price: float
    stock: int
    image: str | None

    @staticmethod
    def from_domain(variant: Variant) -> VariantResponse:
        return VariantResponse(
            id=str(variant.id),
            name=str(variant.name),
            price=variant.price,
            stock=variant.stock,
            image=variant.image,
        )


@dataclass(frozen=True)
class ProductResponse:
    """Output: a product and its variants, flattened for presentation.

    Variants keep the aggregate's insertion order.
    """

    id: str
    name: str
    description: str
    price: float
    stock: int
    variants: list[VariantResponse] = field(default_factory=list)

    @staticmethod
    def from_domain(product: Product) -> ProductResponse:
        return ProductResponse(
            id=str(product.id),
            name=str(product.name),
            description=str(product.description),
            price=product.price,
            stock=product.stock,
            variants=[VariantResponse.from_domain(v) for v in product.variants],
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
