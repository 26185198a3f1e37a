"""Unit tests for ProductCreatedDomainEvent."""

from dataclasses import FrozenInstanceError
from datetime import timezone

import pytest

from ims.domain.model.events import ProductCreatedDomainEvent
from tests.fakes import make_product


def test_snapshot_of_product_fields():
    product = make_product(price=19.99, stock=10)
    event = ProductCreatedDomainEvent.from_product(product)

    assert event.product is product
    assert event.product_id == str(product.id)
    assert event.product_name == "Camiseta"
    assert event.product_description == "Camiseta de algodón"
    assert event.product_price == 19.99
    assert event.product_stock == 10
    assert event.occurred_at.tzinfo == timezone.utc


def test_snapshot_does_not_follow_later_changes():
    product = make_product(price=19.99)
    event = ProductCreatedDomainEvent.from_product(product)
    product.update_price(5.0)
    assert event.product_price == 19.99


def test_event_is_immutable():
    event = ProductCreatedDomainEvent.from_product(make_product())
    with pytest.raises(FrozenInstanceError):
        event.product_name = "Other"
