"""Application service: Delete Product use case."""

from __future__ import annotations

import structlog

from ims.application.commands import DeleteProduct
from ims.domain.exceptions import EntityNotFoundError
from ims.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, command: DeleteProduct) -> None:
        """Delete a product; its variants go with it."""
        product = self._product_repo.get_by_id(command.product_id)
        if product is None:
            raise EntityNotFoundError(f"Product '{command.product_id}' not found")

        self._product_repo.delete(product)
        logger.info("Product deleted", product_id=command.product_id)
