"""Command objects — one per state-changing use case.

``None`` on an optional field of an update command means "leave it
unchanged". For ``UpdateProduct.variants`` that is distinct from an
empty list, which removes every variant.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ims.application.dto import VariantSpec


@dataclass(frozen=True)
class CreateProduct:
    name: str
    description: str
    price: float
    stock: int
    variants: list[VariantSpec] = field(default_factory=list)
    # Accepted for compatibility with callers that pre-assign IDs; ignored.
    product_id: str | None = None


@dataclass(frozen=True)
class UpdateProduct:
    product_id: str
    name: str | None = None
    description: str | None = None
    price: float | None = None
    stock: int | None = None
    variants: list[VariantSpec] | None = None


@dataclass(frozen=True)
class DeleteProduct:
    product_id: str


@dataclass(frozen=True)
class UpdateVariant:
    product_id: str
    variant_id: str
    name: str | None = None
    price: float | None = None
    stock: int | None = None
    image: str | None = None
