"""
Tests for the entity access wrappers.
"""
import pytest
from sqlalchemy.exc import SQLAlchemyError

from services import store


class TestCrud:
    def test_create_and_get(self, db):
        created = store.create(db, store.CATEGORIES, {"name": "Books", "id": 42, "created_at": "ignored"})
        assert created.success
        assert created.id != 42
        fetched = store.get(db, store.CATEGORIES, created.id)
        assert fetched.success
        assert fetched.data["name"] == "Books"
        assert fetched.data["created_at"] is not None

    def test_get_missing_is_successful_empty_read(self, db):
        result = store.get(db, store.SHOPS, 123)
        assert result.success
        assert result.data is None

    def test_get_all_with_filters(self, db, shop):
        store.create(db, store.SHOPS, {"name": "Other", "owner": "O", "email": "o@x.com", "phone": "1"})
        assert len(store.get_all(db, store.SHOPS).records) == 2
        only = store.get_all(db, store.SHOPS, category_id=shop["category_id"]).records
        assert [s["id"] for s in only] == [shop["id"]]

    def test_numeric_columns_come_back_as_float(self, db, offer):
        record = store.get(db, store.OFFERS, offer["id"]).data
        assert record["original_price"] == 100.0
        assert isinstance(record["discounted_price"], float)

    def test_update_ignores_unknown_fields(self, db, category):
        result = store.update(db, store.CATEGORIES, category["id"], {"name": "Gadgets", "bogus": 1})
        assert result.success
        assert result.data["name"] == "Gadgets"

    def test_update_missing(self, db):
        result = store.update(db, store.FLOORS, 5, {"name": "Roof"})
        assert not result.success
        assert result.error == "Floor not found"

    def test_delete(self, db, category):
        assert store.delete(db, store.CATEGORIES, category["id"]).success
        assert store.get(db, store.CATEGORIES, category["id"]).data is None
        assert not store.delete(db, store.CATEGORIES, category["id"]).success

    def test_unknown_collection(self, db):
        with pytest.raises(ValueError):
            store.get_all(db, "widgets")


class TestFailures:
    """Database errors become failed results, never exceptions."""

    def test_create_failure_is_reported(self, db, monkeypatch):
        def boom():
            raise SQLAlchemyError("disk full")

        monkeypatch.setattr(db, "commit", boom)
        result = store.create(db, store.CATEGORIES, {"name": "Books"})
        assert not result.success
        assert result.error == "Failed to create categories record"

    def test_constraint_violation(self, db):
        result = store.create(db, store.OFFERS, {
            "title": "Orphan",
            "shop_id": 999,
            "original_price": 10,
            "discounted_price": 5,
            "start_date": None,
            "end_date": None,
        })
        assert not result.success
