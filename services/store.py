"""Entity access wrappers: one create/read/update/delete surface per collection.

Every call returns a ``StoreResult`` instead of raising, mirroring how the
storefront consumes its document store: ``success`` plus either the payload
or a human-readable ``error``. Records travel as plain dicts.
"""
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional, Type

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.db import Base
from models.category import Category
from models.floor import Floor
from models.offer import Offer
from models.product import Product
from models.product_update import ProductUpdate
from models.shop import Shop

logger = logging.getLogger(__name__)

CATEGORIES = "categories"
FLOORS = "floors"
SHOPS = "shops"
OFFERS = "offers"
PRODUCTS = "products"
PRODUCT_UPDATES = "product_updates"

COLLECTIONS: Dict[str, Type[Base]] = {
    CATEGORIES: Category,
    FLOORS: Floor,
    SHOPS: Shop,
    OFFERS: Offer,
    PRODUCTS: Product,
    PRODUCT_UPDATES: ProductUpdate,
}

# Stamped by the model defaults, never taken from callers
_READ_ONLY = ("id", "created_at", "updated_at")


@dataclass
class StoreResult:
    success: bool
    id: Optional[int] = None
    data: Optional[dict] = None
    records: List[dict] = field(default_factory=list)
    error: Optional[str] = None

    @classmethod
    def failed(cls, error: str) -> "StoreResult":
        return cls(success=False, error=error)


def _model(collection: str) -> Type[Base]:
    try:
        return COLLECTIONS[collection]
    except KeyError:
        raise ValueError(f"Unknown collection: {collection}")


def _plain(value: Any) -> Any:
    # Numeric columns come back as Decimal, records carry floats
    return float(value) if isinstance(value, Decimal) else value


def to_record(obj: Base) -> dict:
    mapper = inspect(obj).mapper
    return {attr.key: _plain(getattr(obj, attr.key)) for attr in mapper.column_attrs}


def _writable(model: Type[Base], values: Dict[str, Any]) -> Dict[str, Any]:
    columns = {attr.key for attr in inspect(model).column_attrs}
    return {key: value for key, value in values.items() if key in columns and key not in _READ_ONLY}


def create(db: Session, collection: str, record: Dict[str, Any]) -> StoreResult:
    model = _model(collection)
    logger.info("Creating %s record: %s", collection, record.get("name") or record.get("title") or "")
    try:
        obj = model(**_writable(model, record))
        db.add(obj)
        db.commit()
        db.refresh(obj)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Error creating %s record: %s", collection, e)
        return StoreResult.failed(f"Failed to create {collection} record")
    logger.info("Created %s record with id %s", collection, obj.id)
    return StoreResult(success=True, id=obj.id, data=to_record(obj))


def get(db: Session, collection: str, record_id: int) -> StoreResult:
    """Fetch one record; a missing id is a successful read with ``data=None``."""
    model = _model(collection)
    try:
        obj = db.get(model, record_id)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Error fetching %s/%s: %s", collection, record_id, e)
        return StoreResult.failed(f"Failed to load {collection} record")
    return StoreResult(success=True, id=record_id, data=to_record(obj) if obj is not None else None)


def get_all(db: Session, collection: str, **filters: Any) -> StoreResult:
    model = _model(collection)
    logger.debug("Fetching all %s %s", collection, filters or "")
    try:
        query = db.query(model)
        for name, value in filters.items():
            query = query.filter(getattr(model, name) == value)
        records = [to_record(obj) for obj in query.order_by(model.id).all()]
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Error fetching %s: %s", collection, e)
        return StoreResult.failed(f"Failed to load {collection}")
    logger.debug("Fetched %s %s", len(records), collection)
    return StoreResult(success=True, records=records)


def update(db: Session, collection: str, record_id: int, partial: Dict[str, Any]) -> StoreResult:
    model = _model(collection)
    logger.info("Updating %s/%s", collection, record_id)
    try:
        obj = db.get(model, record_id)
        if obj is None:
            return StoreResult.failed(f"{model.__name__} not found")
        for key, value in _writable(model, partial).items():
            setattr(obj, key, value)
        db.commit()
        db.refresh(obj)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Error updating %s/%s: %s", collection, record_id, e)
        return StoreResult.failed(f"Failed to update {collection} record")
    return StoreResult(success=True, id=record_id, data=to_record(obj))


def delete(db: Session, collection: str, record_id: int) -> StoreResult:
    model = _model(collection)
    logger.info("Deleting %s/%s", collection, record_id)
    try:
        obj = db.get(model, record_id)
        if obj is None:
            return StoreResult.failed(f"{model.__name__} not found")
        db.delete(obj)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Error deleting %s/%s: %s", collection, record_id, e)
        return StoreResult.failed(f"Failed to delete {collection} record")
    return StoreResult(success=True, id=record_id)
