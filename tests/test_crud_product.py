"""Tests for the product data-access functions."""

import pytest
from sqlalchemy.exc import SQLAlchemyError

import models
import schemas
from crud import product as crud_product


class TestProductCrud:
    """crud.product against a real session."""

    def test_create_assigns_id_and_persists(self, db):
        created = crud_product.create_product(db, schemas.ProductCreate(name="Pen", price=10))

        assert created.id is not None
        assert db.query(models.Product).count() == 1

    def test_get_products_returns_all_rows_in_id_order(self, db):
        for name in ("B", "A", "C"):
            crud_product.create_product(db, schemas.ProductCreate(name=name, price=1))

        rows = crud_product.get_products(db)

        assert [r.name for r in rows] == ["B", "A", "C"]

    def test_update_missing_product_returns_none(self, db):
        result = crud_product.update_product(db, 7, schemas.ProductUpdate(name="X", price=1))

        assert result is None
        assert db.query(models.Product).count() == 0

    def test_update_overwrites_in_place(self, db):
        created = crud_product.create_product(db, schemas.ProductCreate(name="Pen", price=10))

        updated = crud_product.update_product(db, created.id, schemas.ProductUpdate(name="Marker", price=12.5))

        assert updated.id == created.id
        assert updated.name == "Marker"
        assert float(updated.price) == 12.5

    def test_delete_reports_whether_a_row_was_removed(self, db):
        created = crud_product.create_product(db, schemas.ProductCreate(name="Pen", price=10))

        assert crud_product.delete_product(db, created.id) is True
        assert crud_product.delete_product(db, created.id) is False
        assert crud_product.get_product(db, created.id) is None


class TestProductSchemas:
    """Validation rules on request bodies."""

    @pytest.mark.parametrize("price", [0, -1, float("inf"), float("nan")])
    def test_non_positive_or_non_finite_price_is_rejected(self, price):
        with pytest.raises(ValueError):
            schemas.ProductCreate(name="Pen", price=price)

    def test_blank_name_is_rejected(self):
        with pytest.raises(ValueError):
            schemas.ProductCreate(name=" \t ", price=1)

    def test_name_is_stripped(self):
        assert schemas.ProductCreate(name=" Pen ", price=1).name == "Pen"


class TestProductCrudFailures:
    """Failed statements roll the session back and re-raise."""

    def test_failed_delete_rolls_back(self, db, engine, monkeypatch):
        rollbacks = []
        original_rollback = db.rollback

        def counting_rollback():
            rollbacks.append(True)
            original_rollback()

        monkeypatch.setattr(db, "rollback", counting_rollback)
        models.Product.__table__.drop(bind=engine)

        with pytest.raises(SQLAlchemyError):
            crud_product.delete_product(db, 1)

        assert rollbacks == [True]


class TestProductSchemaLimits:
    """Bounds that keep prices and names storable."""

    @pytest.mark.parametrize("price", [0.001, 100000000])
    def test_price_out_of_range(self, price):
        with pytest.raises(ValueError):
            schemas.ProductCreate(name="Pen", price=price)

    def test_long_name_after_trimming(self):
        with pytest.raises(ValueError):
            schemas.ProductCreate(name="x" * 256, price=1)
        assert schemas.ProductCreate(name=" " * 300 + "Pen", price=1).name == "Pen"
