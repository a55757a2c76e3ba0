"""Demo marketplace data for a fresh database.

Everything goes through the store wrappers, so seeded records look exactly
like records created from the admin forms. Seeding refuses to run on top of
existing data unless asked to clear it first.
"""
import logging
from datetime import date, timedelta
from typing import Dict, Optional

from sqlalchemy.orm import Session

from services import store

logger = logging.getLogger(__name__)

# Dependents before the records they point at
CLEAR_ORDER = (
    store.PRODUCT_UPDATES,
    store.OFFERS,
    store.PRODUCTS,
    store.SHOPS,
    store.FLOORS,
    store.CATEGORIES,
)

CATEGORIES = [
    {"name": "Fashion & Apparel", "description": "Clothing, accessories, and fashion items", "icon": "shirt", "color": "#e91e63"},
    {"name": "Electronics & Gadgets", "description": "Technology products and accessories", "icon": "laptop", "color": "#2196f3"},
    {"name": "Food & Beverages", "description": "Food products, beverages, and culinary items", "icon": "utensils", "color": "#ff9800"},
    {"name": "Beauty & Wellness", "description": "Beauty products, skincare, and wellness items", "icon": "spa", "color": "#9c27b0"},
    {"name": "Handicrafts & Artisans", "description": "Handmade items and artisanal products", "icon": "palette", "color": "#795548"},
    {"name": "Agricultural Products", "description": "Fresh produce, grains, and farming products", "icon": "leaf", "color": "#4caf50"},
]

FLOORS = [
    {"level": -1, "name": "Lower Ground", "description": "Parking access and quick-service counters"},
    {"level": 0, "name": "Ground Floor", "description": "Entrance plaza and help desk"},
    {"level": 1, "name": "Main Marketplace", "description": "Popular merchant counters and featured products"},
    {"level": 2, "name": "Fashion District", "description": "Fashion, beauty, and lifestyle merchant counters"},
    {"level": 3, "name": "Tech Hub", "description": "Electronics, gadgets, and digital services"},
    {"level": 4, "name": "Food Court", "description": "Food, beverages, and culinary merchant counters"},
]

SHOPS = [
    {
        "name": "TechTrend Mobile Store",
        "description": "Latest smartphones, tablets, and mobile accessories with expert consultation",
        "owner": "Sarah Johnson",
        "email": "techtrend@supermall.com",
        "phone": "+1-555-0101",
        "category": "Electronics & Gadgets",
        "floor": 3,
        "shop_number": "TH-01",
        "rating": 4.6,
        "business_hours": "9:00 AM - 8:00 PM",
    },
    {
        "name": "Fashion Forward Boutique",
        "description": "Trendy fashion items and personalized styling services",
        "owner": "Maria Rodriguez",
        "email": "fashionforward@supermall.com",
        "phone": "+1-555-0102",
        "category": "Fashion & Apparel",
        "floor": 2,
        "shop_number": "FD-01",
        "rating": 4.4,
        "business_hours": "10:00 AM - 7:00 PM",
    },
    {
        "name": "Spice Route Kitchen",
        "description": "Regional dishes and freshly ground spice blends",
        "owner": "Arjun Mehta",
        "email": "spiceroute@supermall.com",
        "phone": "+1-555-0401",
        "category": "Food & Beverages",
        "floor": 4,
        "shop_number": "FC-01",
        "rating": 4.7,
        "business_hours": "11:00 AM - 10:00 PM",
    },
    {
        "name": "Glow Beauty Bar",
        "description": "Skincare, cosmetics, and express beauty treatments",
        "owner": "Emily Chen",
        "email": "glow@supermall.com",
        "phone": "+1-555-0202",
        "category": "Beauty & Wellness",
        "floor": 2,
        "shop_number": "FD-02",
        "rating": 4.2,
        "business_hours": "10:00 AM - 8:00 PM",
    },
    {
        "name": "Craft Corner Studio",
        "description": "Pottery, woodwork, and handmade gifts from local artisans",
        "owner": "Lakshmi Devi",
        "email": "craftcorner@supermall.com",
        "phone": "+1-555-0103",
        "category": "Handicrafts & Artisans",
        "floor": 1,
        "shop_number": "MM-03",
        "rating": 4.8,
        "business_hours": "10:00 AM - 6:00 PM",
    },
    {
        "name": "Organic Farm Fresh",
        "description": "Seasonal produce straight from partner farms",
        "owner": "Ramesh Patel",
        "email": "farmfresh@supermall.com",
        "phone": "+1-555-0001",
        "category": "Agricultural Products",
        "floor": -1,
        "shop_number": "LG-01",
        "rating": 4.5,
        "business_hours": "7:00 AM - 7:00 PM",
    },
]

# Offsets in days from the seeding date, so the demo always has live offers
OFFERS = [
    {
        "title": "Latest Smartphone - 15% Off",
        "description": "Brand new smartphones with extended warranty and free accessories",
        "shop": "TechTrend Mobile Store",
        "original_price": 999.00,
        "discounted_price": 849.15,
        "starts": -30,
        "ends": 60,
        "features": ["Latest Model", "Extended Warranty", "Free Accessories"],
    },
    {
        "title": "Mobile Repair Service - 20% Off",
        "description": "Professional mobile repair services with quick turnaround",
        "shop": "TechTrend Mobile Store",
        "original_price": 100.00,
        "discounted_price": 80.00,
        "starts": -90,
        "ends": -1,
        "features": ["Professional Repair", "Free Diagnosis"],
    },
    {
        "title": "Personal Styling Session - 25% Off",
        "description": "Professional styling consultation and wardrobe makeover",
        "shop": "Fashion Forward Boutique",
        "original_price": 200.00,
        "discounted_price": 150.00,
        "starts": -7,
        "ends": 30,
        "features": ["Style Consultation", "Wardrobe Planning"],
    },
    {
        "title": "Family Thali Platter",
        "description": "Four-course platter for the whole family",
        "shop": "Spice Route Kitchen",
        "original_price": 60.00,
        "discounted_price": 45.00,
        "starts": 5,
        "ends": 35,
        "features": ["Serves Four", "Vegetarian Options"],
    },
    {
        "title": "Hand-thrown Pottery Set",
        "description": "Set of four glazed bowls made in the studio",
        "shop": "Craft Corner Studio",
        "original_price": 80.00,
        "discounted_price": 60.00,
        "starts": 0,
        "ends": 14,
        "features": ["Handmade", "Food Safe Glaze"],
    },
]

PRODUCTS = [
    {"name": "iPhone 15", "description": "Latest Apple smartphone with advanced features", "price": 999.00,
     "shop": "TechTrend Mobile Store", "category": "Electronics & Gadgets"},
    {"name": "Handmade Ceramic Mug", "description": "Beautifully crafted ceramic mug by local artisans", "price": 25.00,
     "shop": "Craft Corner Studio", "category": "Handicrafts & Artisans"},
    {"name": "Organic Vegetable Basket", "description": "Fresh organic vegetables delivered weekly", "price": 40.00,
     "shop": "Organic Farm Fresh", "category": "Agricultural Products"},
    {"name": "Vitamin C Serum", "description": "Brightening serum for daily use", "price": 32.50,
     "shop": "Glow Beauty Bar", "category": "Beauty & Wellness"},
    {"name": "Linen Summer Shirt", "description": "Breathable linen shirt in six colours", "price": 55.00,
     "shop": "Fashion Forward Boutique", "category": "Fashion & Apparel"},
]


class SeedError(Exception):
    pass


def existing_counts(db: Session) -> Dict[str, int]:
    counts = {}
    for collection in (store.CATEGORIES, store.SHOPS, store.OFFERS):
        result = store.get_all(db, collection)
        if not result.success:
            raise SeedError(result.error)
        counts[collection] = len(result.records)
    return counts


def clear_data(db: Session) -> int:
    """Delete every marketplace record; returns how many were removed."""
    logger.info("Starting SuperMall data clearing process")
    deleted = 0
    for collection in CLEAR_ORDER:
        result = store.get_all(db, collection)
        if not result.success:
            raise SeedError(result.error)
        for record in result.records:
            removed = store.delete(db, collection, record["id"])
            if not removed.success:
                raise SeedError(removed.error)
        deleted += len(result.records)
        logger.info("Cleared %s records from %s", len(result.records), collection)
    logger.info("Data clearing completed, %s records deleted", deleted)
    return deleted


def _create(db: Session, collection: str, record: dict) -> int:
    result = store.create(db, collection, record)
    if not result.success:
        raise SeedError(result.error)
    return result.id


def seed_data(db: Session, force: bool = False, today: Optional[date] = None) -> Dict[str, int]:
    """Load the demo marketplace and return how many records of each kind were added.

    Raises ``SeedError`` when data already exists and ``force`` is not set.
    """
    counts = existing_counts(db)
    if any(counts.values()):
        if not force:
            raise SeedError(
                f"Data already exists! Found {counts[store.CATEGORIES]} categories, "
                f"{counts[store.SHOPS]} shops, and {counts[store.OFFERS]} offers. Please clear data first."
            )
        clear_data(db)

    today = today or date.today()
    logger.info("Starting SuperMall data seeding")

    category_ids = {}
    for category in CATEGORIES:
        category_ids[category["name"]] = _create(db, store.CATEGORIES, category)

    floor_ids = {}
    for floor in FLOORS:
        floor_ids[floor["level"]] = _create(db, store.FLOORS, floor)

    shop_ids = {}
    for shop in SHOPS:
        record = {key: value for key, value in shop.items() if key not in ("category", "floor")}
        record["category_id"] = category_ids[shop["category"]]
        record["floor_id"] = floor_ids[shop["floor"]]
        shop_ids[shop["name"]] = _create(db, store.SHOPS, record)

    for offer in OFFERS:
        record = {key: value for key, value in offer.items() if key not in ("shop", "starts", "ends")}
        record["shop_id"] = shop_ids[offer["shop"]]
        record["start_date"] = today + timedelta(days=offer["starts"])
        record["end_date"] = today + timedelta(days=offer["ends"])
        _create(db, store.OFFERS, record)

    for product in PRODUCTS:
        record = {key: value for key, value in product.items() if key not in ("shop", "category")}
        record["shop_id"] = shop_ids[product["shop"]]
        record["category_id"] = category_ids[product["category"]]
        _create(db, store.PRODUCTS, record)

    seeded = {
        store.CATEGORIES: len(CATEGORIES),
        store.FLOORS: len(FLOORS),
        store.SHOPS: len(SHOPS),
        store.OFFERS: len(OFFERS),
        store.PRODUCTS: len(PRODUCTS),
    }
    logger.info("SuperMall data seeding completed: %s", seeded)
    return seeded
