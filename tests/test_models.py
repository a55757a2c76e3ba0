import pytest
from datetime import date, datetime
from sqlalchemy.exc import IntegrityError

from models import Category, Floor, Offer, Product, ProductUpdate, Shop, User


class TestCategory:
    """Test cases for Category model"""

    def test_category_defaults(self, db):
        category = Category(name="Books")
        db.add(category)
        db.commit()
        db.refresh(category)

        assert category.id is not None
        assert category.is_active is True
        assert category.product_count == 0
        assert isinstance(category.created_at, datetime)


class TestFloor:
    def test_negative_level(self, db):
        floor = Floor(name="Basement", level=-1)
        db.add(floor)
        db.commit()
        assert db.get(Floor, floor.id).level == -1


class TestShop:
    """Test cases for Shop model"""

    def test_shop_relationships(self, db):
        category = Category(name="Food")
        floor = Floor(name="Food Court", level=4)
        db.add_all([category, floor])
        db.commit()

        shop = Shop(name="Spice Route", owner="Arjun", email="s@x.com", phone="1",
                    category_id=category.id, floor_id=floor.id)
        db.add(shop)
        db.commit()
        db.refresh(shop)

        assert shop.category.name == "Food"
        assert shop.floor.level == 4
        assert shop.is_active is True

    def test_updated_at_changes(self, db):
        shop = Shop(name="Kiosk", owner="Kim", email="k@x.com", phone="2")
        db.add(shop)
        db.commit()
        first = shop.updated_at

        shop.name = "Kiosk Two"
        db.commit()
        db.refresh(shop)
        assert shop.updated_at >= first


class TestOffer:
    def test_offer_requires_existing_shop(self, db):
        offer = Offer(title="Orphan", shop_id=42, original_price=10, discounted_price=5,
                      start_date=date(2024, 1, 1), end_date=date(2024, 1, 2))
        db.add(offer)
        with pytest.raises(IntegrityError):
            db.commit()
        db.rollback()

    def test_offer_features_json(self, db):
        shop = Shop(name="Kiosk", owner="Kim", email="k@x.com", phone="2")
        db.add(shop)
        db.commit()
        offer = Offer(title="Deal", shop_id=shop.id, original_price=10, discounted_price=5,
                      start_date=date(2024, 1, 1), end_date=date(2024, 1, 2), features=["Free Delivery"])
        db.add(offer)
        db.commit()
        db.refresh(offer)

        assert offer.features == ["Free Delivery"]
        assert offer.shop.name == "Kiosk"
        assert offer.is_active is True


class TestProductUpdate:
    def test_defaults(self, db):
        shop = Shop(name="Kiosk", owner="Kim", email="k@x.com", phone="2")
        db.add(shop)
        db.commit()
        offer = Offer(title="Deal", shop_id=shop.id, original_price=10, discounted_price=5,
                      start_date=date(2024, 1, 1), end_date=date(2024, 1, 2))
        db.add(offer)
        db.commit()

        update = ProductUpdate(offer_id=offer.id, updated_info={"title": "Better title"})
        db.add(update)
        db.commit()
        db.refresh(update)

        assert update.status == "pending_review"
        assert update.updated_by == "consumer"


class TestProduct:
    def test_product_without_shop(self, db):
        product = Product(name="Loose Item", price=3)
        db.add(product)
        db.commit()
        assert product.id is not None
        assert product.shop_id is None


class TestUser:
    def test_email_unique(self, db):
        db.add(User(email="a@example.com", password_hash="x"))
        db.commit()
        db.add(User(email="a@example.com", password_hash="y"))
        with pytest.raises(IntegrityError):
            db.commit()
        db.rollback()

    def test_user_default_values(self, db):
        user = User(email="b@example.com", password_hash="x")
        db.add(user)
        db.commit()
        assert user.is_admin is False
