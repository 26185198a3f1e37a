"""In-memory implementation of ProductRepository.

Owned by whoever constructs it and injected into the handlers; there
is no module-level store. A single lock serialises access so the
repository can be shared between threads.
"""

from __future__ import annotations

import copy
import threading

from ims.domain.model.product import Product
from ims.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._lock = threading.Lock()
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[str(p.id)] = copy.deepcopy(p)

    def get_by_id(self, product_id: str) -> Product | None:
        with self._lock:
            product = self._store.get(product_id)
            return copy.deepcopy(product) if product is not None else None

    def get_by_name(self, name: str) -> Product | None:
        with self._lock:
            for product in self._store.values():
                if str(product.name) == name:
                    return copy.deepcopy(product)
        return None

    def list_all(self) -> list[Product]:
        with self._lock:
            return [copy.deepcopy(p) for p in self._store.values()]

    def save(self, product: Product) -> None:
        # Copies go in and out so callers only change stored state via save().
        with self._lock:
            self._store[str(product.id)] = copy.deepcopy(product)

    def delete(self, product: Product) -> None:
        # Variants live inside the product, so they go with it.
        with self._lock:
            self._store.pop(str(product.id), None)
