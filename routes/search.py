from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.db import get_db
from routes.common import load
from schemas.search import SearchOut
from services import store
from services.lookups import join_offers, join_products, join_shops
from services.search import build_search_index, global_search, navigation_for

router = APIRouter(prefix="/search", tags=["search"])


@router.get("/", response_model=SearchOut)
def search(q: Optional[str] = None, db: Session = Depends(get_db)):
    """Header search over shops, products and offers."""
    query = q or ""
    if not query.strip():
        return {"query": query, "results": []}

    categories = load(db, store.CATEGORIES)
    shops = join_shops(load(db, store.SHOPS), categories, load(db, store.FLOORS))
    products = join_products(load(db, store.PRODUCTS), shops, categories)
    offers = join_offers(load(db, store.OFFERS), shops)

    hits = global_search(build_search_index(shops, products, offers), query)
    return {
        "query": query,
        "results": [
            {
                "id": hit["id"],
                "type": hit["type"],
                "label": hit["label"],
                "category": hit["category"],
                "shop": hit["shop"],
                "navigation": navigation_for(hit),
            }
            for hit in hits
        ],
    }
