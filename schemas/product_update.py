from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ProductInfo(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    specifications: Optional[str] = None
    features: Optional[str] = None
    reviews: Optional[str] = None
    availability: str = "in-stock"
    condition: str = "new"


class ProductUpdateOut(BaseModel):
    id: int
    offer_id: int
    updated_info: dict
    updated_by: str
    update_type: str
    status: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
