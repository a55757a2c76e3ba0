from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy.orm import Session

from core.db import get_db
from models.user import User
from routes.auth import require_admin
from routes.common import derive, ensure_deleted, load, load_one, submit
from schemas.offer import ShopDetailsOut
from schemas.shop import ShopCreate, ShopUpdate, ShopOut, ShopListOut
from services import references, store
from services.forms import EntityForm
from services.lookups import join_offers, join_shops
from services.offers import annotate_offer
from services.pipeline import OFFER_VIEW, SHOP_VIEW, shop_stats

router = APIRouter(prefix="/shops", tags=["shops"])


def _reference_exists(collection: str, field: str, label: str):
    def check(db: Session, data: BaseModel) -> Optional[str]:
        record_id = getattr(data, field)
        if record_id is None:
            return None
        found = store.get(db, collection, record_id)
        if found.success and found.data is None:
            return f"{label} not found"
        return None
    return check


SHOP_CHECKS = [
    _reference_exists(store.CATEGORIES, "category_id", "Category"),
    _reference_exists(store.FLOORS, "floor_id", "Floor"),
]


def _joined_shop(db: Session, shop: dict) -> dict:
    return join_shops([shop], load(db, store.CATEGORIES), load(db, store.FLOORS))[0]


@router.get("/", response_model=ShopListOut)
def list_shops(
    search: Optional[str] = None,
    category: Optional[str] = None,
    floor: Optional[str] = None,
    status: Optional[str] = None,
    sort: Optional[str] = None,
    db: Session = Depends(get_db),
):
    shops = join_shops(load(db, store.SHOPS), load(db, store.CATEGORIES), load(db, store.FLOORS))
    return {
        "shops": derive(
            shops, SHOP_VIEW, search=search, filters={"category": category, "floor": floor},
            status_filter=status, sort=sort,
        ),
        "stats": shop_stats(shops),
    }


@router.get("/{shop_id}", response_model=ShopDetailsOut)
def get_shop(shop_id: int, db: Session = Depends(get_db)):
    shop = _joined_shop(db, load_one(db, store.SHOPS, shop_id, "Shop"))
    offers = [annotate_offer(offer) for offer in join_offers(load(db, store.OFFERS, shop_id=shop_id), [shop])]
    return {"shop": shop, "offers": derive(offers, OFFER_VIEW, sort="created_desc")}


@router.post("/", response_model=ShopOut, status_code=201)
def create_shop(data: ShopCreate, db: Session = Depends(get_db), _: User = Depends(require_admin)):
    result = submit(db, EntityForm(store.SHOPS, ShopCreate, checks=SHOP_CHECKS), data.model_dump())
    return _joined_shop(db, result.data)


@router.patch("/{shop_id}", response_model=ShopOut)
def update_shop(shop_id: int, data: ShopUpdate, db: Session = Depends(get_db), _: User = Depends(require_admin)):
    shop = load_one(db, store.SHOPS, shop_id, "Shop")
    form = EntityForm(store.SHOPS, ShopCreate, initial=shop, checks=SHOP_CHECKS)
    result = submit(db, form, data.model_dump(exclude_unset=True))
    return _joined_shop(db, result.data)


@router.delete("/{shop_id}", status_code=204)
def delete_shop(shop_id: int, db: Session = Depends(get_db), _: User = Depends(require_admin)):
    load_one(db, store.SHOPS, shop_id, "Shop")
    try:
        result = references.delete_shop(db, shop_id)
    except references.ReferenceConflict as e:
        raise HTTPException(status_code=409, detail=str(e))
    ensure_deleted(result)
    return None
