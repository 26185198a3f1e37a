"""Query objects — read-only requests against the catalog."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GetAllProducts:
    pass


@dataclass(frozen=True)
class GetProductById:
    product_id: str
