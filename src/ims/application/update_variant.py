"""Application service: Update Variant use case."""

from __future__ import annotations

import structlog

from ims.application.commands import UpdateVariant
from ims.domain.exceptions import EntityNotFoundError, VariantNotFoundError
from ims.domain.model.value_objects import ProductName
from ims.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class UpdateVariantHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, command: UpdateVariant) -> None:
        """Partially update one variant, then save the whole aggregate."""
        product = self._product_repo.get_by_id(command.product_id)
        if product is None:
            raise EntityNotFoundError(f"Product '{command.product_id}' not found")

        variant = product.find_variant(command.variant_id)
        if variant is None:
            raise VariantNotFoundError(f"Variant '{command.variant_id}' not found")

        if command.name is not None:
            variant.change_name(ProductName(command.name))
        if command.price is not None:
            variant.change_price(command.price)
        if command.stock is not None:
            variant.change_stock(command.stock)
        if command.image is not None:
            variant.change_image(command.image)

        self._product_repo.save(product)
        logger.info(
            "Variant updated",
            product_id=command.product_id,
            variant_id=command.variant_id,
        )
