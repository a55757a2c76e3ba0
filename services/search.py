"""Header search across shops, products and offers.

Results keep the order records were added to the index (shops, then
products, then offers); there is no relevance ranking.
"""
from typing import Any, Dict, List, Mapping, Optional, Sequence

from core.navigation import Navigation, Screen, navigate

Record = Mapping[str, Any]

SHOP = "shop"
PRODUCT = "product"
OFFER = "offer"


def _tag(record: Record, kind: str, label_field: str, category: Optional[str], shop: Optional[str]) -> dict:
    item = dict(record)
    item["type"] = kind
    item["label"] = record.get(label_field)
    item["category"] = category
    item["shop"] = shop
    return item


def build_search_index(
    shops: Sequence[Record],
    products: Sequence[Record],
    offers: Sequence[Record],
) -> List[dict]:
    """Flatten the three collections into one list tagged with ``type``.

    Records are expected to carry joined display names (``category_name``,
    ``shop_name``) from the lookup layer.
    """
    index: List[dict] = []
    index.extend(_tag(shop, SHOP, "name", shop.get("category_name"), shop.get("name")) for shop in shops)
    index.extend(
        _tag(product, PRODUCT, "name", product.get("category_name"), product.get("shop_name"))
        for product in products
    )
    index.extend(_tag(offer, OFFER, "title", None, offer.get("shop_name")) for offer in offers)
    return index


def _contains(value: Any, needle: str) -> bool:
    return isinstance(value, str) and needle in value.lower()


def global_search(index: Sequence[Dict[str, Any]], query: str) -> List[Dict[str, Any]]:
    # Blank queries show nothing; otherwise the query is matched as typed, spaces included
    if not (query or "").strip():
        return []
    needle = query.lower()
    return [
        item
        for item in index
        if _contains(item.get("label"), needle)
        or _contains(item.get("category"), needle)
        or _contains(item.get("shop"), needle)
    ]


def navigation_for(item: Record) -> Navigation:
    kind = item.get("type")
    if kind == SHOP:
        return navigate(Screen.SHOP_DETAILS, {"shop_id": item["id"]})
    if kind == PRODUCT:
        return navigate(Screen.PRODUCT_DETAILS, {"product_id": item["id"]})
    if kind == OFFER:
        return navigate(Screen.OFFERS, {"offer_id": item["id"]})
    raise ValueError(f"Unknown search result type: {kind}")
