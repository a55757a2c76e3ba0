from datetime import date, datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from schemas.rules import blank_to_none, require_text
from schemas.shop import ShopOut


class OfferCreate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    shop_id: Optional[int] = None
    original_price: Optional[float] = None
    discounted_price: Optional[float] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    terms: Optional[str] = None
    is_active: bool = True
    features: List[str] = Field(default_factory=list)

    @field_validator("shop_id", "original_price", "discounted_price", "start_date", "end_date", mode="before")
    @classmethod
    def blank_values(cls, v):
        return blank_to_none(v)

    @model_validator(mode="after")
    def check_offer(self):
        self.title = require_text(self.title, "Offer title is required")
        if not self.shop_id:
            raise ValueError("Please select a shop")
        if not self.original_price or not self.discounted_price:
            raise ValueError("Both original and discounted prices are required")
        if self.original_price < 0 or self.discounted_price < 0:
            raise ValueError("Prices must be positive")
        if self.original_price <= self.discounted_price:
            raise ValueError("Discounted price must be less than original price")
        if self.start_date is None or self.end_date is None:
            raise ValueError("Start and end dates are required")
        if self.start_date >= self.end_date:
            raise ValueError("End date must be after start date")
        return self


class OfferUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    shop_id: Optional[int] = None
    original_price: Optional[float] = None
    discounted_price: Optional[float] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    terms: Optional[str] = None
    is_active: Optional[bool] = None
    features: Optional[List[str]] = None


class OfferOut(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    shop_id: int
    shop_name: Optional[str] = None
    original_price: float
    discounted_price: float
    # Derived on every read from the current prices / today's date
    discount_percentage: Optional[float] = None
    status: str
    start_date: date
    end_date: date
    terms: Optional[str] = None
    is_active: bool
    features: List[str] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("features", mode="before")
    @classmethod
    def null_features(cls, v):
        return v or []

    class Config:
        from_attributes = True


class OfferStats(BaseModel):
    total: int
    active: int
    upcoming: int
    expired: int
    inactive: int
    total_discount: float
    average_discount: float


class OfferListOut(BaseModel):
    offers: List[OfferOut]
    stats: OfferStats


class DiscountRequest(BaseModel):
    original_price: Optional[Any] = None
    discounted_price: Optional[Any] = None


class DiscountOut(BaseModel):
    discount_percentage: Optional[float] = None


class ComparedOffer(OfferOut):
    shop: Optional[ShopOut] = None


class ShopDetailsOut(BaseModel):
    shop: ShopOut
    offers: List[OfferOut]
