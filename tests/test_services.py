"""
Tests for delete policies and demo data seeding.
"""
from datetime import date

import pytest

from services import references, store
from services.offers import OfferStatus, offer_status
from services.seed import SeedError, clear_data, seed_data


class TestDeleteShop:
    def test_restrict_blocks_when_offers_exist(self, db, shop, offer):
        with pytest.raises(references.ReferenceConflict) as excinfo:
            references.delete_shop(db, shop["id"], policy="restrict")
        assert str(excinfo.value) == "Shop still has 1 offer and 0 products; delete them first"
        assert store.get(db, store.SHOPS, shop["id"]).data is not None

    def test_cascade_removes_dependents(self, db, shop, offer, product):
        result = references.delete_shop(db, shop["id"], policy="cascade")
        assert result.success
        assert store.get(db, store.SHOPS, shop["id"]).data is None
        assert store.get(db, store.OFFERS, offer["id"]).data is None
        assert store.get(db, store.PRODUCTS, product["id"]).data is None

    def test_policy_defaults_to_settings(self, db, delete_policy, shop, product):
        delete_policy("restrict")
        with pytest.raises(references.ReferenceConflict):
            references.delete_shop(db, shop["id"])


class TestDeleteLabels:
    """Categories and floors never block a delete."""

    def test_delete_category_clears_references(self, db, shop, product, category):
        assert references.delete_category(db, category["id"]).success
        assert store.get(db, store.SHOPS, shop["id"]).data["category_id"] is None
        assert store.get(db, store.PRODUCTS, product["id"]).data["category_id"] is None

    def test_delete_floor_keeps_shops(self, db, shop, floor):
        assert references.delete_floor(db, floor["id"]).success
        remaining = store.get(db, store.SHOPS, shop["id"]).data
        assert remaining["floor_id"] is None
        assert remaining["category_id"] == shop["category_id"]


class TestSeed:
    def test_seed_empty_database(self, db):
        seeded = seed_data(db, today=date(2024, 6, 15))
        assert seeded[store.SHOPS] == len(store.get_all(db, store.SHOPS).records)

        levels = sorted(f["level"] for f in store.get_all(db, store.FLOORS).records)
        assert levels[0] == -1

        statuses = {offer_status(o, date(2024, 6, 15)) for o in store.get_all(db, store.OFFERS).records}
        assert {OfferStatus.ACTIVE, OfferStatus.UPCOMING, OfferStatus.EXPIRED} <= statuses

    def test_seed_refuses_existing_data(self, db, category):
        with pytest.raises(SeedError) as excinfo:
            seed_data(db)
        assert "Found 1 categories, 0 shops, and 0 offers" in str(excinfo.value)

    def test_force_replaces_existing_data(self, db, category):
        seed_data(db, force=True)
        names = [c["name"] for c in store.get_all(db, store.CATEGORIES).records]
        assert "Electronics" not in names

    def test_clear(self, db, offer, product):
        assert clear_data(db) == 5
        assert store.get_all(db, store.SHOPS).records == []
