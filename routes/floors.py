from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.db import get_db
from models.user import User
from routes.auth import require_admin
from routes.common import derive, ensure_deleted, load, load_one, submit
from schemas.floor import FloorCreate, FloorUpdate, FloorOut, FloorStats
from schemas.shop import FloorShopsOut
from services import references, store
from services.forms import EntityForm
from services.lookups import join_shops
from services.pipeline import FLOOR_VIEW, SHOP_VIEW, floor_shop_stats, floor_stats

router = APIRouter(prefix="/floors", tags=["floors"])


@router.get("/", response_model=List[FloorOut])
def list_floors(
    search: Optional[str] = None,
    status: Optional[str] = None,
    sort: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """Floors ordered bottom to top unless another sort is asked for."""
    return derive(load(db, store.FLOORS), FLOOR_VIEW, search=search, status_filter=status, sort=sort)


@router.get("/stats", response_model=FloorStats)
def get_floor_stats(db: Session = Depends(get_db)):
    return floor_stats(load(db, store.FLOORS))


@router.get("/{floor_id}", response_model=FloorOut)
def get_floor(floor_id: int, db: Session = Depends(get_db)):
    return load_one(db, store.FLOORS, floor_id, "Floor")


@router.get("/{floor_id}/shops", response_model=FloorShopsOut)
def list_floor_shops(
    floor_id: int,
    search: Optional[str] = None,
    category: Optional[str] = None,
    sort: Optional[str] = "name_asc",
    db: Session = Depends(get_db),
):
    floor = load_one(db, store.FLOORS, floor_id, "Floor")
    shops = join_shops(load(db, store.SHOPS, floor_id=floor_id), load(db, store.CATEGORIES), [floor])
    return {
        "floor": floor,
        "shops": derive(shops, SHOP_VIEW, search=search, filters={"category": category}, sort=sort),
        # Stats describe the whole floor, not the filtered list
        "stats": floor_shop_stats(shops),
    }


@router.post("/", response_model=FloorOut, status_code=201)
def create_floor(data: FloorCreate, db: Session = Depends(get_db), _: User = Depends(require_admin)):
    result = submit(db, EntityForm(store.FLOORS, FloorCreate), data.model_dump())
    return result.data


@router.patch("/{floor_id}", response_model=FloorOut)
def update_floor(floor_id: int, data: FloorUpdate, db: Session = Depends(get_db), _: User = Depends(require_admin)):
    floor = load_one(db, store.FLOORS, floor_id, "Floor")
    result = submit(db, EntityForm(store.FLOORS, FloorCreate, initial=floor), data.model_dump(exclude_unset=True))
    return result.data


@router.delete("/{floor_id}", status_code=204)
def delete_floor(floor_id: int, db: Session = Depends(get_db), _: User = Depends(require_admin)):
    load_one(db, store.FLOORS, floor_id, "Floor")
    ensure_deleted(references.delete_floor(db, floor_id))
    return None
