"""Unit tests for domain value objects."""

import uuid

import pytest

from ims.domain.exceptions import InvalidArgumentError
from ims.domain.model.value_objects import (
    EmailAddress,
    Price,
    ProductDescription,
    ProductId,
    ProductName,
    VariantId,
)


# ── Identifiers ──────────────────────────────────────────────────────────────


class TestIdentifiers:

    @pytest.mark.parametrize("id_type", [ProductId, VariantId])
    def test_accepts_uuid(self, id_type):
        raw = str(uuid.uuid4())
        assert str(id_type(raw)) == raw

    @pytest.mark.parametrize("id_type", [ProductId, VariantId])
    @pytest.mark.parametrize("raw", ["", "not-a-uuid", "1234", "123e4567-e89b-12d3-a456"])
    def test_rejects_malformed_uuid(self, id_type, raw):
        with pytest.raises(InvalidArgumentError, match="Invalid UUID"):
            id_type(raw)

    def test_rejects_non_string(self):
        with pytest.raises(InvalidArgumentError):
            ProductId(42)

    def test_random_ids_are_distinct(self):
        assert ProductId.random() != ProductId.random()
        assert VariantId.random() != VariantId.random()

    def test_equality_by_value(self):
        raw = str(uuid.uuid4())
        assert ProductId(raw) == ProductId(raw)
        assert hash(ProductId(raw)) == hash(ProductId(raw))

    def test_immutable(self):
        product_id = ProductId.random()
        with pytest.raises(AttributeError):
            product_id.value = str(uuid.uuid4())


# ── ProductName / ProductDescription ────────────────────────────────────────


class TestProductName:

    def test_trims_whitespace(self):
        assert str(ProductName("  Camiseta  ")) == "Camiseta"

    @pytest.mark.parametrize("raw", ["", "   ", "\t\n"])
    def test_blank_rejected(self, raw):
        with pytest.raises(InvalidArgumentError, match="cannot be empty"):
            ProductName(raw)

    def test_max_length_accepted(self):
        assert len(str(ProductName("x" * 255))) == 255

    def test_too_long_rejected(self):
        with pytest.raises(InvalidArgumentError, match="255"):
            ProductName("x" * 256)

    def test_equality_after_trimming(self):
        assert ProductName("Mug") == ProductName(" Mug ")


class TestProductDescription:

    def test_keeps_value(self):
        assert str(ProductDescription("Camiseta de algodón")) == "Camiseta de algodón"

    @pytest.mark.parametrize("raw", ["", "    "])
    def test_blank_rejected(self, raw):
        with pytest.raises(InvalidArgumentError, match="cannot be empty"):
            ProductDescription(raw)


# ── Price ────────────────────────────────────────────────────────────────────


class TestPrice:

    def test_zero_allowed(self):
        assert Price(0).value == 0.0

    def test_int_coerced_to_float(self):
        price = Price(10)
        assert price.value == 10.0
        assert isinstance(price.value, float)

    @pytest.mark.parametrize("raw", [-0.01, -1, -1000.5])
    def test_negative_rejected(self, raw):
        with pytest.raises(InvalidArgumentError, match="cannot be negative"):
            Price(raw)

    @pytest.mark.parametrize("raw", ["19.99", None, True])
    def test_non_number_rejected(self, raw):
        with pytest.raises(InvalidArgumentError, match="must be a number"):
            Price(raw)

    def test_str_formatting(self):
        assert str(Price(19.9)) == "19.90"


# ── EmailAddress ─────────────────────────────────────────────────────────────


class TestEmailAddress:

    @pytest.mark.parametrize(
        "raw", ["user@example.com", "first.last+tag@sub.example.org", "a@b.co"]
    )
    def test_valid(self, raw):
        assert str(EmailAddress(raw)) == raw

    @pytest.mark.parametrize(
        "raw",
        [
            "not-an-email",
            "",
            "user@",
            "@example.com",
            "user@@example.com",
            "user@localhost",
            "us er@example.com",
            "user@exa..mple.com",
            ".user@example.com",
            "user@-example.com",
            "user;x@example.com",
        ],
    )
    def test_invalid(self, raw):
        with pytest.raises(InvalidArgumentError, match="Invalid email address"):
            EmailAddress(raw)

    def test_invalid_email_is_a_value_error(self):
        with pytest.raises(ValueError):
            EmailAddress("not-an-email")
