"""JSON-file-backed implementation of ProductRepository.

Variants are stored nested inside their product's record, so saving
or deleting a product writes its variants in the same file write.
"""

from __future__ import annotations

import json
import threading
from pathlib import Path
from typing import Any

from ims.domain.model.product import Product, Variant
from ims.domain.model.value_objects import (
    ProductDescription,
    ProductId,
    ProductName,
    VariantId,
)
from ims.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = threading.Lock()
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        for product in self._load().values():
            if str(product.name) == name:
                return product
        return None

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        with self._lock:
            products = self._load()
            products[str(product.id)] = product
            self._persist(products)

    def delete(self, product: Product) -> None:
        with self._lock:
            products = self._load()
            products.pop(str(product.id), None)
            self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        products = (self._product_from_dict(item) for item in raw)
        return {str(p.id): p for p in products}

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [self._product_to_dict(p) for p in products.values()]
        self._file_path.write_text(
            json.dumps(raw, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")

    @staticmethod
    def _product_to_dict(product: Product) -> dict[str, Any]:
        return {
            "id": str(product.id),
            "name": str(product.name),
            "description": str(product.description),
            "price": product.price,
            "stock": product.stock,
            "variants": [
                {
                    "id": str(v.id),
                    "name": str(v.name),
                    "price": v.price,
                    "stock": v.stock,
                    "image": v.image,
                }
                for v in product.variants
            ],
        }

    @staticmethod
    def _product_from_dict(item: dict[str, Any]) -> Product:
        product = Product(
            id=ProductId(item["id"]),
            name=ProductName(item["name"]),
            description=ProductDescription(item["description"]),
            price=float(item["price"]),
            stock=int(item["stock"]),
        )
        for v in item.get("variants", []):
            product.add_variant(
                Variant(
                    id=VariantId(v["id"]),
                    product=product,
                    name=ProductName(v["name"]),
                    price=float(v["price"]),
                    stock=int(v["stock"]),
                    image=v.get("image"),
                )
            )
        return product
