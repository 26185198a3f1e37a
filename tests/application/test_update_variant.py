"""Integration tests for the UpdateVariant use case."""

import uuid

import pytest

from ims.application import update_variant
from ims.application.commands import UpdateVariant
from ims.application.update_variant import UpdateVariantHandler
from ims.domain.exceptions import (
    EntityNotFoundError,
    InvalidArgumentError,
    VariantNotFoundError,
)
from ims.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from tests.fakes import RecordingLogger, make_product


def _setup():
    product = make_product(
        variants=[
            {"name": "Azul M", "price": 21.99, "stock": 5, "image": "azul.jpg"},
            {"name": "Roja L", "price": 22.99, "stock": 3},
        ]
    )
    repo = InMemoryProductRepository([product])
    return (
        UpdateVariantHandler(repo),
        repo,
        str(product.id),
        str(product.variants[0].id),
    )


def test_updating_name_leaves_other_fields_unchanged():
    handler, repo, product_id, variant_id = _setup()
    handler.handle(UpdateVariant(product_id, variant_id, name="Azul XL"))

    variant = repo.get_by_id(product_id).find_variant(variant_id)
    assert str(variant.name) == "Azul XL"
    assert variant.price == 21.99
    assert variant.stock == 5
    assert variant.image == "azul.jpg"


def test_updates_price_stock_and_image():
    handler, repo, product_id, variant_id = _setup()
    handler.handle(
        UpdateVariant(product_id, variant_id, price=25.99, stock=15, image="nueva.jpg")
    )

    variant = repo.get_by_id(product_id).find_variant(variant_id)
    assert variant.price == 25.99
    assert variant.stock == 15
    assert variant.image == "nueva.jpg"
    assert str(variant.name) == "Azul M"


def test_other_variants_untouched():
    handler, repo, product_id, variant_id = _setup()
    handler.handle(UpdateVariant(product_id, variant_id, stock=0))

    other = repo.get_by_id(product_id).variants[1]
    assert str(other.name) == "Roja L"
    assert other.stock == 3


def test_unknown_product():
    handler, _, _, variant_id = _setup()
    with pytest.raises(EntityNotFoundError, match="Product .* not found"):
        handler.handle(UpdateVariant(str(uuid.uuid4()), variant_id, name="X"))


def test_unknown_variant():
    handler, _, product_id, _ = _setup()
    with pytest.raises(VariantNotFoundError, match="Variant .* not found"):
        handler.handle(UpdateVariant(product_id, str(uuid.uuid4()), name="X"))


def test_negative_values_rejected():
    handler, repo, product_id, variant_id = _setup()
    with pytest.raises(InvalidArgumentError):
        handler.handle(UpdateVariant(product_id, variant_id, stock=-1))
    assert repo.get_by_id(product_id).find_variant(variant_id).stock == 5


def test_logs_update(monkeypatch):
    recorder = RecordingLogger()
    monkeypatch.setattr(update_variant, "logger", recorder)
    handler, _, product_id, variant_id = _setup()

    handler.handle(UpdateVariant(product_id, variant_id, stock=2))

    assert recorder.records == [
        ("info", "Variant updated", {"product_id": product_id, "variant_id": variant_id})
    ]


def test_failed_update_is_not_logged(monkeypatch):
    recorder = RecordingLogger()
    monkeypatch.setattr(update_variant, "logger", recorder)
    handler, _, product_id, _ = _setup()

    with pytest.raises(VariantNotFoundError):
        handler.handle(UpdateVariant(product_id, str(uuid.uuid4()), stock=2))
    assert recorder.records == []
