"""Application service: Create Product use case."""

from __future__ import annotations

import structlog

from ims.application.commands import CreateProduct
from ims.application.variant_builder import add_variants
from ims.domain.events import EventDispatcher
from ims.domain.exceptions import DuplicateProductNameError
from ims.domain.model.events import ProductCreatedDomainEvent
from ims.domain.model.product import Product
from ims.domain.model.value_objects import (
    Price,
    ProductDescription,
    ProductId,
    ProductName,
)
from ims.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class CreateProductHandler:

    def __init__(
        self, product_repo: ProductRepository, dispatcher: EventDispatcher
    ) -> None:
        self._product_repo = product_repo
        self._dispatcher = dispatcher

    def handle(self, command: CreateProduct) -> ProductId:
        """Create a product with its variants and announce it.

        The product always gets a freshly generated ID; any ID carried
        by the command is ignored. ProductCreatedDomainEvent is
        dispatched only once the product has been saved.
        """
        name = ProductName(command.name)
        # Uniqueness is checked against the trimmed name that gets stored.
        if self._product_repo.get_by_name(str(name)) is not None:
            raise DuplicateProductNameError(f"A product named '{name}' already exists")

        product = Product.create(
            product_id=ProductId.random(),
            name=name,
            description=ProductDescription(command.description),
            price=Price(command.price),
            stock=command.stock,
        )
        add_variants(product, command.variants)

        self._product_repo.save(product)
        logger.info(
            "Product created",
            product_id=str(product.id),
            name=str(product.name),
            variants=len(product.variants),
        )

        self._dispatcher.dispatch(ProductCreatedDomainEvent.from_product(product))
        return product.id
