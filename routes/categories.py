from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.db import get_db
from models.user import User
from routes.auth import require_admin
from routes.common import derive, ensure_deleted, load, load_one, submit
from schemas.category import CategoryCreate, CategoryUpdate, CategoryOut, CategoryStats
from schemas.shop import CategoryShopsOut
from services import references, store
from services.forms import EntityForm
from services.lookups import join_shops
from services.pipeline import CATEGORY_VIEW, SHOP_VIEW, category_stats

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("/", response_model=List[CategoryOut])
def list_categories(
    search: Optional[str] = None,
    status: Optional[str] = None,
    sort: Optional[str] = "name_asc",
    db: Session = Depends(get_db),
):
    return derive(load(db, store.CATEGORIES), CATEGORY_VIEW, search=search, status_filter=status, sort=sort)


@router.get("/stats", response_model=CategoryStats)
def get_category_stats(db: Session = Depends(get_db)):
    return category_stats(load(db, store.CATEGORIES))


@router.get("/{category_id}", response_model=CategoryOut)
def get_category(category_id: int, db: Session = Depends(get_db)):
    return load_one(db, store.CATEGORIES, category_id, "Category")


@router.get("/{category_id}/shops", response_model=CategoryShopsOut)
def list_category_shops(
    category_id: int,
    search: Optional[str] = None,
    floor: Optional[str] = None,
    sort: Optional[str] = "name_asc",
    db: Session = Depends(get_db),
):
    category = load_one(db, store.CATEGORIES, category_id, "Category")
    shops = join_shops(load(db, store.SHOPS, category_id=category_id), [category], load(db, store.FLOORS))
    return {
        "category": category,
        "shops": derive(shops, SHOP_VIEW, search=search, filters={"floor": floor}, sort=sort),
    }


@router.post("/", response_model=CategoryOut, status_code=201)
def create_category(data: CategoryCreate, db: Session = Depends(get_db), _: User = Depends(require_admin)):
    result = submit(db, EntityForm(store.CATEGORIES, CategoryCreate), data.model_dump())
    return result.data


@router.patch("/{category_id}", response_model=CategoryOut)
def update_category(category_id: int, data: CategoryUpdate, db: Session = Depends(get_db), _: User = Depends(require_admin)):
    category = load_one(db, store.CATEGORIES, category_id, "Category")
    result = submit(db, EntityForm(store.CATEGORIES, CategoryCreate, initial=category), data.model_dump(exclude_unset=True))
    return result.data


@router.delete("/{category_id}", status_code=204)
def delete_category(category_id: int, db: Session = Depends(get_db), _: User = Depends(require_admin)):
    load_one(db, store.CATEGORIES, category_id, "Category")
    ensure_deleted(references.delete_category(db, category_id))
    return None
