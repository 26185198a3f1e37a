"""Product aggregate.

The Product is an aggregate root that exclusively owns its variants:
every change to a variant goes through the product that holds it, and
removing a product removes all of its variants with it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ims.domain.exceptions import InvalidArgumentError
from ims.domain.model.value_objects import (
    Price,
    ProductDescription,
    ProductId,
    ProductName,
    VariantId,
)


def _check_price(price: float) -> float:
    # Price does the type and sign checks; entities keep the raw float.
    return Price(price).value


def _check_stock(stock: int) -> int:
    if isinstance(stock, bool) or not isinstance(stock, int):
        raise InvalidArgumentError(
            f"Stock must be an integer, got {type(stock).__name__}"
        )
    if stock < 0:
        raise InvalidArgumentError(f"Stock cannot be negative, got {stock}")
    return stock


@dataclass
class Variant:
    """A purchasable variation of a product (size, colour ...).

    ``product`` is a navigation reference to the owning aggregate; it
    takes no part in equality or ``repr`` so the two never recurse.
    """

    id: VariantId
    product: Product = field(repr=False, compare=False)
    name: ProductName
    price: float
    stock: int
    image: str | None = None

    @classmethod
    def create(
        cls,
        variant_id: VariantId,
        product: Product,
        name: ProductName,
        price: float,
        stock: int,
        image: str | None = None,
    ) -> Variant:
        """Factory for new variants — enforces non-negative price and stock."""
        return cls(
            id=variant_id,
            product=product,
            name=name,
            price=_check_price(price),
            stock=_check_stock(stock),
            image=image,
        )

    @property
    def product_id(self) -> ProductId:
        return self.product.id

    def change_name(self, name: ProductName) -> None:
        self.name = name

    def change_price(self, new_price: float) -> None:
        self.price = _check_price(new_price)

    def change_stock(self, new_stock: int) -> None:
        self.stock = _check_stock(new_stock)

    def change_image(self, new_image: str | None) -> None:
        """Replace the image reference; ``None`` clears it."""
        self.image = new_image


@dataclass
class Product:
    """Aggregate root of the catalog.

    Use the ``Product.create()`` factory for new products — it enforces
    the price and stock invariants. The ``__init__`` is intentionally
    simple so repositories can reconstitute persisted products.

    Name uniqueness is *not* an entity invariant: it needs a view over
    every product and is enforced by the command handlers.
    """

    id: ProductId
    name: ProductName
    description: ProductDescription
    price: float
    stock: int
    variants: list[Variant] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        product_id: ProductId,
        name: ProductName,
        description: ProductDescription,
        price: Price,
        stock: int,
    ) -> Product:
        return cls(
            id=product_id,
            name=name,
            description=description,
            price=_check_price(price.value),
            stock=_check_stock(stock),
        )

    # --- Variants ---------------------------------------------------------------

    def add_variant(self, variant: Variant) -> None:
        """Append a variant. Duplicate IDs are the caller's concern."""
        self.variants.append(variant)

    def clear_variants(self) -> None:
        self.variants.clear()

    def find_variant(self, variant_id: str) -> Variant | None:
        for variant in self.variants:
            if str(variant.id) == variant_id:
                return variant
        return None

    # --- Mutators ---------------------------------------------------------------

    def update_name(self, name: ProductName) -> None:
        self.name = name

    def update_description(self, description: ProductDescription) -> None:
        self.description = description

    def update_price(self, new_price: float) -> None:
        self.price = _check_price(new_price)

    def update_stock(self, new_stock: int) -> None:
        self.stock = _check_stock(new_stock)
