"""Application services: product queries (read-only)."""

from __future__ import annotations

from ims.application.dto import ProductResponse
from ims.application.queries import GetAllProducts, GetProductById
from ims.domain.exceptions import InvalidArgumentError
from ims.domain.model.value_objects import ProductId
from ims.domain.repository.product_repository import ProductRepository


class GetAllProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, query: GetAllProducts) -> list[ProductResponse]:
        return [ProductResponse.from_domain(p) for p in self._product_repo.list_all()]


class GetProductByIdHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, query: GetProductById) -> ProductResponse | None:
        """Return the product, or None when no product has that ID.

        A malformed ID cannot match any product, so it is also None.
        """
        try:
            ProductId(query.product_id)
        except InvalidArgumentError:
            return None

        product = self._product_repo.get_by_id(query.product_id)
        if product is None:
            return None
        return ProductResponse.from_domain(product)
