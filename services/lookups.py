"""Render-time joins from id references to display names."""
from typing import Any, Dict, Iterable, List, Mapping

Record = Mapping[str, Any]


def index_by_id(records: Iterable[Record]) -> Dict[Any, Record]:
    return {record["id"]: record for record in records if record.get("id") is not None}


def join_shops(shops: Iterable[Record], categories: Iterable[Record], floors: Iterable[Record]) -> List[dict]:
    by_category = index_by_id(categories)
    by_floor = index_by_id(floors)
    joined = []
    for shop in shops:
        record = dict(shop)
        category = by_category.get(shop.get("category_id"))
        floor = by_floor.get(shop.get("floor_id"))
        record["category_name"] = category.get("name") if category else None
        record["floor_name"] = floor.get("name") if floor else None
        record["floor_level"] = floor.get("level") if floor else None
        joined.append(record)
    return joined


def join_offers(offers: Iterable[Record], shops: Iterable[Record]) -> List[dict]:
    by_shop = index_by_id(shops)
    joined = []
    for offer in offers:
        record = dict(offer)
        shop = by_shop.get(offer.get("shop_id"))
        record["shop_name"] = shop.get("name") if shop else None
        joined.append(record)
    return joined


def join_products(products: Iterable[Record], shops: Iterable[Record], categories: Iterable[Record]) -> List[dict]:
    by_shop = index_by_id(shops)
    by_category = index_by_id(categories)
    joined = []
    for product in products:
        record = dict(product)
        shop = by_shop.get(product.get("shop_id"))
        category = by_category.get(product.get("category_id"))
        record["shop_name"] = shop.get("name") if shop else None
        record["category_name"] = category.get("name") if category else None
        joined.append(record)
    return joined
