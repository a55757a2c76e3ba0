"""Search / filter / sort pipeline shared by every list view.

A view hands over the full collection it read from the store (already
joined with display names) plus the query parameters from the request, and
gets back a new ordered list. Filters and the search are ANDed predicates;
sorting runs once on the filtered result. Aggregate statistics are a
separate derivation over the unfiltered collection.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from services.offers import OfferStatus, calculate_discount, offer_status

Record = Mapping[str, Any]

ALL = "ALL"
ACTIVE = "ACTIVE"
INACTIVE = "INACTIVE"


def _number(value: Any) -> float:
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float, Decimal)):
        return float(value)
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ("" if value is None else str(value))


def _text_key(field_name: str) -> Callable[[Record], Tuple[str, str]]:
    # casefold first so "Apple" < "banana", raw value breaks ties deterministically
    def key(record: Record) -> Tuple[str, str]:
        value = _text(record.get(field_name))
        return value.casefold(), value
    return key


def _number_key(field_name: str) -> Callable[[Record], float]:
    def key(record: Record) -> float:
        return _number(record.get(field_name))
    return key


def _discount_key(record: Record) -> float:
    if record.get("discount_percentage") is not None:
        return _number(record.get("discount_percentage"))
    return calculate_discount(record.get("original_price"), record.get("discounted_price")) or 0.0


def _created_key(record: Record) -> str:
    value = record.get("created_at")
    return value.isoformat() if hasattr(value, "isoformat") else _text(value)


@dataclass(frozen=True)
class SortKey:
    key: Callable[[Record], Any]
    descending: bool = False


SORT_KEYS: Dict[str, SortKey] = {
    "name_asc": SortKey(_text_key("name")),
    "name_desc": SortKey(_text_key("name"), descending=True),
    "title_asc": SortKey(_text_key("title")),
    "price_asc": SortKey(_number_key("price")),
    "price_desc": SortKey(_number_key("price"), descending=True),
    "original_price_asc": SortKey(_number_key("original_price")),
    "original_price_desc": SortKey(_number_key("original_price"), descending=True),
    "discount_desc": SortKey(_discount_key, descending=True),
    "floor_asc": SortKey(_number_key("floor_level")),
    "level_asc": SortKey(_number_key("level")),
    "rating_desc": SortKey(_number_key("rating"), descending=True),
    "created_desc": SortKey(_created_key, descending=True),
}


@dataclass(frozen=True)
class EntityView:
    """How one entity type is searched, filtered and sorted."""

    name: str
    search_fields: Tuple[str, ...]
    filter_fields: Mapping[str, str] = field(default_factory=dict)
    sort_keys: Tuple[str, ...] = ()
    # Public sort name -> key in SORT_KEYS, when a view exposes a key under another name
    sort_aliases: Mapping[str, str] = field(default_factory=dict)
    default_sort: Optional[str] = None
    active_default: bool = False
    status_fn: Optional[Callable[[Record, Any], str]] = None
    statuses: Tuple[str, ...] = (ALL, ACTIVE, INACTIVE)

    def status_of(self, record: Record, now: Any = None) -> str:
        if self.status_fn is not None:
            return self.status_fn(record, now)
        is_active = record.get("is_active")
        if is_active is None:
            is_active = self.active_default
        return ACTIVE if is_active else INACTIVE

    def resolve_sort(self, sort: Optional[str]) -> Optional[SortKey]:
        name = sort or self.default_sort
        if not name:
            return None
        if name not in self.sort_keys:
            raise ValueError(f"Unsupported sort '{name}' for {self.name}")
        return SORT_KEYS[self.sort_aliases.get(name, name)]


@dataclass
class PipelineQuery:
    search: str = ""
    filters: Dict[str, Optional[str]] = field(default_factory=dict)
    status: str = ALL
    sort: Optional[str] = None


def _offer_status(record: Record, now: Any = None) -> str:
    return offer_status(record, now).value


SHOP_VIEW = EntityView(
    name="shops",
    search_fields=("name", "description", "owner"),
    filter_fields={"category": "category_id", "floor": "floor_id"},
    sort_keys=("name_asc", "name_desc", "floor_asc", "rating_desc", "created_desc"),
    active_default=True,
)

OFFER_VIEW = EntityView(
    name="offers",
    search_fields=("title", "description", "shop_name"),
    filter_fields={"shop": "shop_id"},
    sort_keys=("discount_desc", "created_desc", "price_asc", "price_desc", "name_asc"),
    sort_aliases={"price_asc": "original_price_asc", "price_desc": "original_price_desc", "name_asc": "title_asc"},
    status_fn=_offer_status,
    statuses=(ALL,) + tuple(status.value for status in OfferStatus),
)

CATEGORY_VIEW = EntityView(
    name="categories",
    search_fields=("name", "description"),
    sort_keys=("name_asc", "name_desc", "created_desc"),
)

FLOOR_VIEW = EntityView(
    name="floors",
    search_fields=("name", "description"),
    sort_keys=("level_asc", "name_asc", "created_desc"),
    default_sort="level_asc",
)

PRODUCT_VIEW = EntityView(
    name="products",
    search_fields=("name", "description"),
    filter_fields={"category": "category_id", "shop": "shop_id"},
    sort_keys=("name_asc", "name_desc", "price_asc", "price_desc"),
)


def is_disabled(selection: Optional[str]) -> bool:
    return selection is None or str(selection).strip() == "" or str(selection).strip().upper() == ALL


def matches_search(record: Record, fields: Iterable[str], search: str) -> bool:
    needle = (search or "").strip().lower()
    if not needle:
        return True
    for name in fields:
        value = record.get(name)
        if isinstance(value, str) and needle in value.lower():
            return True
    return False


def matches_filter(record: Record, field_name: str, selection: Optional[str]) -> bool:
    if is_disabled(selection):
        return True
    value = record.get(field_name)
    if value is None:
        return False
    return str(value) == str(selection).strip()


def matches_status(record: Record, view: EntityView, status: Optional[str], now: Any = None) -> bool:
    if is_disabled(status):
        return True
    return view.status_of(record, now) == str(status).strip().upper()


def sort_records(records: Sequence[Record], sort_key: Optional[SortKey]) -> List[Record]:
    if sort_key is None:
        return list(records)
    return sorted(records, key=sort_key.key, reverse=sort_key.descending)


def run_pipeline(records: Sequence[Record], view: EntityView, query: PipelineQuery, now: Any = None) -> List[Record]:
    """Filter, search and sort ``records`` for ``view``; the input is left untouched."""
    unknown = [name for name in query.filters if name not in view.filter_fields]
    if unknown:
        raise ValueError(f"Unsupported filter '{unknown[0]}' for {view.name}")
    if not is_disabled(query.status) and str(query.status).strip().upper() not in view.statuses:
        raise ValueError(f"Unsupported status '{query.status}' for {view.name}")
    sort_key = view.resolve_sort(query.sort)

    selected = [
        record
        for record in records
        if matches_search(record, view.search_fields, query.search)
        and matches_status(record, view, query.status, now)
        and all(
            matches_filter(record, view.filter_fields[name], selection)
            for name, selection in query.filters.items()
        )
    ]
    return sort_records(selected, sort_key)


# Aggregate statistics, always over the unfiltered collection


def _active_counts(records: Sequence[Record], view: EntityView) -> Tuple[int, int]:
    active = sum(1 for record in records if view.status_of(record) == ACTIVE)
    return active, len(records) - active


def shop_stats(shops: Sequence[Record]) -> dict:
    active, inactive = _active_counts(shops, SHOP_VIEW)
    categories = {shop.get("category_id") for shop in shops if shop.get("category_id") is not None}
    return {"total": len(shops), "active": active, "inactive": inactive, "categories": len(categories)}


def offer_stats(offers: Sequence[Record], now: Any = None) -> dict:
    counts = {status: 0 for status in OfferStatus}
    for offer in offers:
        counts[offer_status(offer, now)] += 1
    discounts = [_discount_key(offer) for offer in offers]
    total_discount = round(sum(discounts), 2)
    return {
        "total": len(offers),
        "active": counts[OfferStatus.ACTIVE],
        "upcoming": counts[OfferStatus.UPCOMING],
        "expired": counts[OfferStatus.EXPIRED],
        "inactive": counts[OfferStatus.INACTIVE],
        "total_discount": total_discount,
        "average_discount": round(total_discount / len(offers), 2) if offers else 0.0,
    }


def category_stats(categories: Sequence[Record]) -> dict:
    active, inactive = _active_counts(categories, CATEGORY_VIEW)
    products = sum(int(_number(category.get("product_count"))) for category in categories)
    return {"total": len(categories), "active": active, "inactive": inactive, "products": products}


def floor_stats(floors: Sequence[Record]) -> dict:
    active, inactive = _active_counts(floors, FLOOR_VIEW)
    stores = sum(int(_number(floor.get("store_count"))) for floor in floors)
    return {"total": len(floors), "active": active, "inactive": inactive, "stores": stores}


def floor_shop_stats(shops: Sequence[Record]) -> dict:
    return {
        "total_shops": len(shops),
        "categories": len({shop.get("category_id") for shop in shops}),
        "rated_shops": sum(1 for shop in shops if shop.get("rating")),
    }
