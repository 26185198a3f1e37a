"""Application service: Update Product use case."""

from __future__ import annotations

import structlog

from ims.application.commands import UpdateProduct
from ims.application.variant_builder import add_variants
from ims.domain.exceptions import DuplicateProductNameError, EntityNotFoundError
from ims.domain.model.value_objects import ProductDescription, ProductName
from ims.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, command: UpdateProduct) -> None:
        """Apply a partial update to a product.

        Fields left as None are untouched. A supplied variant list, even
        an empty one, replaces the whole collection with freshly built
        variants; caller-supplied variant IDs are never reused.
        """
        product = self._product_repo.get_by_id(command.product_id)
        if product is None:
            raise EntityNotFoundError(f"Product '{command.product_id}' not found")

        if command.name is not None:
            name = ProductName(command.name)
            if str(name) != str(product.name):
                existing = self._product_repo.get_by_name(str(name))
                if existing is not None and str(existing.id) != command.product_id:
                    raise DuplicateProductNameError(
                        f"A product named '{name}' already exists"
                    )
            product.update_name(name)
        if command.description is not None:
            product.update_description(ProductDescription(command.description))
        if command.price is not None:
            product.update_price(command.price)
        if command.stock is not None:
            product.update_stock(command.stock)

        if command.variants is not None:
            product.clear_variants()
            add_variants(product, command.variants)

        self._product_repo.save(product)
        logger.info(
            "Product updated",
            product_id=command.product_id,
            variants_replaced=command.variants is not None,
        )
