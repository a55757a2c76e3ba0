from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel
from sqlalchemy.orm import Session

from core.db import get_db
from models.user import User
from routes.auth import require_admin
from routes.common import derive, ensure_deleted, load, load_one, submit
from schemas.offer import (
    OfferCreate,
    OfferUpdate,
    OfferOut,
    OfferListOut,
    ComparedOffer,
    DiscountRequest,
    DiscountOut,
)
from schemas.product_update import ProductInfo, ProductUpdateOut
from services import store
from services.forms import EntityForm
from services.lookups import index_by_id, join_offers, join_shops
from services.offers import annotate_offer, calculate_discount
from services.pipeline import OFFER_VIEW, offer_stats

router = APIRouter(prefix="/offers", tags=["offers"])


def _shop_exists(db: Session, data: BaseModel) -> Optional[str]:
    found = store.get(db, store.SHOPS, data.shop_id)
    if found.success and found.data is None:
        return "Selected shop does not exist"
    return None


def _annotated(db: Session, offers: List[dict]) -> List[dict]:
    return [annotate_offer(offer) for offer in join_offers(offers, load(db, store.SHOPS))]


@router.get("/", response_model=OfferListOut)
def list_offers(
    search: Optional[str] = None,
    shop: Optional[str] = None,
    status: Optional[str] = None,
    sort: Optional[str] = None,
    db: Session = Depends(get_db),
):
    offers = _annotated(db, load(db, store.OFFERS))
    return {
        "offers": derive(offers, OFFER_VIEW, search=search, filters={"shop": shop}, status_filter=status, sort=sort),
        "stats": offer_stats(offers),
    }


@router.get("/compare", response_model=List[ComparedOffer])
def compare_offers(ids: List[int] = Query(default=[]), db: Session = Depends(get_db)):
    """Side-by-side view of the picked offers, in the order they were picked."""
    if not ids:
        return []
    shops = join_shops(load(db, store.SHOPS), load(db, store.CATEGORIES), load(db, store.FLOORS))
    shops_by_id = index_by_id(shops)
    offers_by_id = index_by_id(annotate_offer(offer) for offer in join_offers(load(db, store.OFFERS), shops))
    compared = []
    for offer_id in ids:
        offer = offers_by_id.get(offer_id)
        if offer is not None:
            compared.append({**offer, "shop": shops_by_id.get(offer["shop_id"])})
    return compared


@router.post("/discount", response_model=DiscountOut)
def preview_discount(data: DiscountRequest):
    return {"discount_percentage": calculate_discount(data.original_price, data.discounted_price)}


@router.get("/{offer_id}", response_model=OfferOut)
def get_offer(offer_id: int, db: Session = Depends(get_db)):
    return _annotated(db, [load_one(db, store.OFFERS, offer_id, "Offer")])[0]


@router.post("/{offer_id}/info-updates", response_model=ProductUpdateOut, status_code=201)
def submit_info_update(offer_id: int, data: ProductInfo, db: Session = Depends(get_db)):
    load_one(db, store.OFFERS, offer_id, "Offer")
    result = store.create(db, store.PRODUCT_UPDATES, {
        "offer_id": offer_id,
        "updated_info": data.model_dump(exclude_none=True),
        "updated_by": "consumer",
        "update_type": "product_information",
        "status": "pending_review",
    })
    if not result.success:
        raise HTTPException(status_code=400, detail="Failed to submit product update. Please try again.")
    return result.data


@router.get("/{offer_id}/info-updates", response_model=List[ProductUpdateOut])
def list_info_updates(offer_id: int, db: Session = Depends(get_db), _: User = Depends(require_admin)):
    load_one(db, store.OFFERS, offer_id, "Offer")
    return load(db, store.PRODUCT_UPDATES, offer_id=offer_id)


@router.post("/", response_model=OfferOut, status_code=201)
def create_offer(data: OfferCreate, db: Session = Depends(get_db), _: User = Depends(require_admin)):
    result = submit(db, EntityForm(store.OFFERS, OfferCreate, checks=[_shop_exists]), data.model_dump())
    return _annotated(db, [result.data])[0]


@router.patch("/{offer_id}", response_model=OfferOut)
def update_offer(offer_id: int, data: OfferUpdate, db: Session = Depends(get_db), _: User = Depends(require_admin)):
    offer = load_one(db, store.OFFERS, offer_id, "Offer")
    form = EntityForm(store.OFFERS, OfferCreate, initial=offer, checks=[_shop_exists])
    result = submit(db, form, data.model_dump(exclude_unset=True))
    return _annotated(db, [result.data])[0]


@router.delete("/{offer_id}", status_code=204)
def delete_offer(offer_id: int, db: Session = Depends(get_db), _: User = Depends(require_admin)):
    load_one(db, store.OFFERS, offer_id, "Offer")
    ensure_deleted(store.delete(db, store.OFFERS, offer_id))
    return None
