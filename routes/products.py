from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.db import get_db
from models.user import User
from routes.auth import require_admin
from routes.common import derive, ensure_deleted, load, load_one, submit
from schemas.product import ProductCreate, ProductUpdate, ProductOut
from services import store
from services.forms import EntityForm
from services.lookups import join_products
from services.pipeline import PRODUCT_VIEW

router = APIRouter(prefix="/products", tags=["products"])


def _joined(db: Session, products: List[dict]) -> List[dict]:
    return join_products(products, load(db, store.SHOPS), load(db, store.CATEGORIES))


@router.get("/", response_model=List[ProductOut])
def list_products(
    search: Optional[str] = None,
    category: Optional[str] = None,
    shop: Optional[str] = None,
    sort: Optional[str] = None,
    db: Session = Depends(get_db),
):
    products = _joined(db, load(db, store.PRODUCTS))
    return derive(products, PRODUCT_VIEW, search=search, filters={"category": category, "shop": shop}, sort=sort)


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: int, db: Session = Depends(get_db)):
    return _joined(db, [load_one(db, store.PRODUCTS, product_id, "Product")])[0]


@router.post("/", response_model=ProductOut, status_code=201)
def create_product(data: ProductCreate, db: Session = Depends(get_db), _: User = Depends(require_admin)):
    result = submit(db, EntityForm(store.PRODUCTS, ProductCreate), data.model_dump())
    return _joined(db, [result.data])[0]


@router.patch("/{product_id}", response_model=ProductOut)
def update_product(product_id: int, data: ProductUpdate, db: Session = Depends(get_db), _: User = Depends(require_admin)):
    product = load_one(db, store.PRODUCTS, product_id, "Product")
    form = EntityForm(store.PRODUCTS, ProductCreate, initial=product)
    result = submit(db, form, data.model_dump(exclude_unset=True))
    return _joined(db, [result.data])[0]


@router.delete("/{product_id}", status_code=204)
def delete_product(product_id: int, db: Session = Depends(get_db), _: User = Depends(require_admin)):
    load_one(db, store.PRODUCTS, product_id, "Product")
    ensure_deleted(store.delete(db, store.PRODUCTS, product_id))
    return None
