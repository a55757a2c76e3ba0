from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, model_validator

from schemas.category import CategoryOut
from schemas.floor import FloorOut
from schemas.rules import require_text


class ShopCreate(BaseModel):
    name: Optional[str] = None
    owner: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    description: Optional[str] = None
    category_id: Optional[int] = None
    floor_id: Optional[int] = None
    rating: Optional[float] = None
    shop_number: Optional[str] = None
    business_hours: Optional[str] = None
    is_active: bool = True

    @model_validator(mode="after")
    def check_required(self):
        self.name = require_text(self.name, "Shop name is required")
        self.owner = require_text(self.owner, "Owner name is required")
        self.email = require_text(self.email, "Email is required")
        self.phone = require_text(self.phone, "Phone number is required")
        return self


class ShopUpdate(BaseModel):
    name: Optional[str] = None
    owner: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    description: Optional[str] = None
    category_id: Optional[int] = None
    floor_id: Optional[int] = None
    rating: Optional[float] = None
    shop_number: Optional[str] = None
    business_hours: Optional[str] = None
    is_active: Optional[bool] = None


class ShopOut(BaseModel):
    id: int
    name: str
    owner: str
    email: str
    phone: str
    address: Optional[str] = None
    description: Optional[str] = None
    category_id: Optional[int] = None
    floor_id: Optional[int] = None
    # Joined from the category / floor records at render time
    category_name: Optional[str] = None
    floor_name: Optional[str] = None
    floor_level: Optional[int] = None
    rating: Optional[float] = None
    shop_number: Optional[str] = None
    business_hours: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ShopStats(BaseModel):
    total: int
    active: int
    inactive: int
    categories: int


class ShopListOut(BaseModel):
    shops: List[ShopOut]
    stats: ShopStats


class FloorShopStats(BaseModel):
    total_shops: int
    categories: int
    rated_shops: int


class FloorShopsOut(BaseModel):
    floor: FloorOut
    shops: List[ShopOut]
    stats: FloorShopStats


class CategoryShopsOut(BaseModel):
    category: CategoryOut
    shops: List[ShopOut]
