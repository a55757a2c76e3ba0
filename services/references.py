"""What deleting a record does to the records that point at it.

Shops own offers and products: with the ``restrict`` policy a shop that
still has either cannot be deleted, with ``cascade`` they are deleted first.
Categories and floors are only labels on shops and products, so deleting one
clears the reference and never blocks.
"""
import logging
from typing import Optional

from sqlalchemy.orm import Session

from core.config import settings
from services import store
from services.store import StoreResult

logger = logging.getLogger(__name__)

RESTRICT = "restrict"
CASCADE = "cascade"


class ReferenceConflict(Exception):
    pass


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'' if count == 1 else 's'}"


def delete_shop(db: Session, shop_id: int, policy: Optional[str] = None) -> StoreResult:
    policy = (policy or settings.DELETE_POLICY).lower()
    offers = store.get_all(db, store.OFFERS, shop_id=shop_id)
    products = store.get_all(db, store.PRODUCTS, shop_id=shop_id)
    for result in (offers, products):
        if not result.success:
            return result

    if offers.records or products.records:
        if policy != CASCADE:
            raise ReferenceConflict(
                f"Shop still has {_plural(len(offers.records), 'offer')} and "
                f"{_plural(len(products.records), 'product')}; delete them first"
            )
        logger.info(
            "Cascading delete of shop %s to %s offers and %s products",
            shop_id, len(offers.records), len(products.records),
        )
        for collection, result in ((store.OFFERS, offers), (store.PRODUCTS, products)):
            for record in result.records:
                removed = store.delete(db, collection, record["id"])
                if not removed.success:
                    return removed

    return store.delete(db, store.SHOPS, shop_id)


def _clear_reference(db: Session, collection: str, field: str, record_id: int) -> StoreResult:
    dependents = store.get_all(db, collection, **{field: record_id})
    if not dependents.success:
        return dependents
    for record in dependents.records:
        cleared = store.update(db, collection, record["id"], {field: None})
        if not cleared.success:
            return cleared
    if dependents.records:
        logger.info("Cleared %s on %s %s", field, len(dependents.records), collection)
    return StoreResult(success=True)


def delete_category(db: Session, category_id: int) -> StoreResult:
    for collection in (store.SHOPS, store.PRODUCTS):
        cleared = _clear_reference(db, collection, "category_id", category_id)
        if not cleared.success:
            return cleared
    return store.delete(db, store.CATEGORIES, category_id)


def delete_floor(db: Session, floor_id: int) -> StoreResult:
    cleared = _clear_reference(db, store.SHOPS, "floor_id", floor_id)
    if not cleared.success:
        return cleared
    return store.delete(db, store.FLOORS, floor_id)
