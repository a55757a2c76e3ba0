from typing import Dict

from pydantic import BaseModel

from schemas.category import CategoryStats
from schemas.floor import FloorStats
from schemas.offer import OfferStats
from schemas.shop import ShopStats


class DashboardOut(BaseModel):
    shops: ShopStats
    offers: OfferStats
    categories: CategoryStats
    floors: FloorStats
    products: int
    pending_updates: int


class SeedRequest(BaseModel):
    # Clear existing records first instead of refusing
    force: bool = False


class SeedOut(BaseModel):
    status: str
    message: str
    seeded: Dict[str, int]


class ClearOut(BaseModel):
    status: str
    deleted: int
