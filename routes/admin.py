import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from core.db import get_db
from models.user import User
from routes.auth import require_admin
from routes.common import derive, load
from schemas.admin import ClearOut, DashboardOut, SeedOut, SeedRequest
from schemas.floor import CategoryFloorOverview
from services import seed as seeding
from services import store
from services.offers import annotate_offer
from services.pipeline import CATEGORY_VIEW, FLOOR_VIEW, category_stats, floor_stats, offer_stats, shop_stats

router = APIRouter(prefix="/admin", tags=["admin"])

logger = logging.getLogger(__name__)


@router.get("/dashboard", response_model=DashboardOut)
def dashboard(db: Session = Depends(get_db), _: User = Depends(require_admin)):
    updates = load(db, store.PRODUCT_UPDATES)
    return {
        "shops": shop_stats(load(db, store.SHOPS)),
        "offers": offer_stats([annotate_offer(offer) for offer in load(db, store.OFFERS)]),
        "categories": category_stats(load(db, store.CATEGORIES)),
        "floors": floor_stats(load(db, store.FLOORS)),
        "products": len(load(db, store.PRODUCTS)),
        "pending_updates": sum(1 for update in updates if update.get("status") == "pending_review"),
    }


@router.get("/category-floor", response_model=CategoryFloorOverview)
def category_floor_overview(
    search: Optional[str] = None,
    status: Optional[str] = None,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    """Categories and floors filtered by one shared search/status; stats cover everything."""
    categories = load(db, store.CATEGORIES)
    floors = load(db, store.FLOORS)
    return {
        "categories": derive(categories, CATEGORY_VIEW, search=search, status_filter=status, sort="name_asc"),
        "floors": derive(floors, FLOOR_VIEW, search=search, status_filter=status),
        "category_stats": category_stats(categories),
        "floor_stats": floor_stats(floors),
    }


@router.post("/seed", response_model=SeedOut, status_code=201)
def seed(data: SeedRequest, db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    try:
        seeded = seeding.seed_data(db, force=data.force)
    except seeding.SeedError as e:
        logger.warning("Seeding refused for %s: %s", admin.email, e)
        raise HTTPException(status_code=409, detail=str(e))
    return {"status": "ok", "message": "SuperMall data seeded successfully", "seeded": seeded}


@router.delete("/seed", response_model=ClearOut)
def clear(db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    try:
        deleted = seeding.clear_data(db)
    except seeding.SeedError as e:
        raise HTTPException(status_code=500, detail=str(e))
    logger.info("Marketplace data cleared by %s", admin.email)
    return {"status": "ok", "deleted": deleted}
