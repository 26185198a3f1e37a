"""Integration tests for the UpdateProduct use case."""

import uuid

import pytest

from ims.application.commands import UpdateProduct
from ims.application.dto import VariantSpec
from ims.application.update_product import UpdateProductHandler
from ims.domain.exceptions import (
    DuplicateProductNameError,
    EntityNotFoundError,
    InvalidArgumentError,
)
from ims.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from tests.fakes import make_product


def _setup():
    camiseta = make_product(
        variants=[
            {"name": "Azul M", "price": 21.99, "stock": 5, "image": "azul.jpg"},
            {"name": "Roja L", "price": 22.99, "stock": 3},
        ]
    )
    polo = make_product(name="Polo", description="Polo de algodón", price=29.99, stock=4)
    repo = InMemoryProductRepository([camiseta, polo])
    return UpdateProductHandler(repo), repo, str(camiseta.id), str(polo.id)


class TestUpdateProductFields:

    def test_updates_supplied_fields_only(self):
        handler, repo, product_id, _ = _setup()
        handler.handle(UpdateProduct(product_id=product_id, price=15.0))

        saved = repo.get_by_id(product_id)
        assert saved.price == 15.0
        assert str(saved.name) == "Camiseta"
        assert str(saved.description) == "Camiseta de algodón"
        assert saved.stock == 10

    def test_updates_every_field(self):
        handler, repo, product_id, _ = _setup()
        handler.handle(
            UpdateProduct(
                product_id=product_id,
                name="Camiseta Premium",
                description="Algodón orgánico",
                price=39.5,
                stock=0,
            )
        )
        saved = repo.get_by_id(product_id)
        assert str(saved.name) == "Camiseta Premium"
        assert str(saved.description) == "Algodón orgánico"
        assert saved.price == 39.5
        assert saved.stock == 0

    def test_keeping_same_name_is_allowed(self):
        handler, repo, product_id, _ = _setup()
        handler.handle(UpdateProduct(product_id=product_id, name="Camiseta", stock=1))
        assert repo.get_by_id(product_id).stock == 1

    def test_not_found(self):
        handler, _, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="not found"):
            handler.handle(UpdateProduct(product_id=str(uuid.uuid4()), price=1.0))

    def test_rename_to_existing_name_rejected(self):
        handler, repo, product_id, _ = _setup()
        with pytest.raises(DuplicateProductNameError):
            handler.handle(UpdateProduct(product_id=product_id, name="Polo"))
        assert str(repo.get_by_id(product_id).name) == "Camiseta"

    def test_rename_to_padded_existing_name_rejected(self):
        handler, repo, _, polo_id = _setup()
        with pytest.raises(DuplicateProductNameError):
            handler.handle(UpdateProduct(product_id=polo_id, name=" Camiseta"))
        assert sorted(str(p.name) for p in repo.list_all()) == ["Camiseta", "Polo"]

    def test_padded_own_name_is_allowed(self):
        handler, repo, product_id, _ = _setup()
        handler.handle(UpdateProduct(product_id=product_id, name="Camiseta  ", stock=3))
        saved = repo.get_by_id(product_id)
        assert str(saved.name) == "Camiseta"
        assert saved.stock == 3

    @pytest.mark.parametrize(
        "overrides",
        [{"price": -1.0}, {"stock": -2}, {"name": " "}, {"description": "  "}],
    )
    def test_invalid_values_rejected_and_nothing_saved(self, overrides):
        handler, repo, product_id, _ = _setup()
        with pytest.raises(InvalidArgumentError):
            handler.handle(UpdateProduct(product_id=product_id, **overrides))

        saved = repo.get_by_id(product_id)
        assert saved.price == 19.99
        assert saved.stock == 10
        assert str(saved.name) == "Camiseta"


class TestUpdateProductVariants:

    def test_omitted_variants_left_untouched(self):
        handler, repo, product_id, _ = _setup()
        before = [v.id for v in repo.get_by_id(product_id).variants]

        handler.handle(UpdateProduct(product_id=product_id, stock=7))

        after = repo.get_by_id(product_id).variants
        assert [v.id for v in after] == before
        assert after[0].image == "azul.jpg"

    def test_empty_variant_list_removes_all(self):
        handler, repo, product_id, _ = _setup()
        handler.handle(UpdateProduct(product_id=product_id, variants=[]))
        assert repo.get_by_id(product_id).variants == []

    def test_variant_list_replaces_collection_with_fresh_ids(self):
        handler, repo, product_id, _ = _setup()
        old_ids = {v.id for v in repo.get_by_id(product_id).variants}

        handler.handle(
            UpdateProduct(
                product_id=product_id,
                variants=[VariantSpec("Verde S", price=18.0, stock=2, image="verde.jpg")],
            )
        )

        variants = repo.get_by_id(product_id).variants
        assert len(variants) == 1
        assert variants[0].id not in old_ids
        assert str(variants[0].name) == "Verde S"
        assert variants[0].price == 18.0
        assert variants[0].image == "verde.jpg"

    def test_replacement_variants_fall_back_to_updated_product_values(self):
        handler, repo, product_id, _ = _setup()
        handler.handle(
            UpdateProduct(product_id=product_id, price=5.0, stock=2, variants=[VariantSpec("X")])
        )
        variant = repo.get_by_id(product_id).variants[0]
        assert variant.price == 5.0
        assert variant.stock == 2
