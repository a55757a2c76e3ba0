from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from schemas.rules import require_text


class ProductCreate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    price: float = Field(0, ge=0)
    image: Optional[str] = None
    shop_id: Optional[int] = None
    category_id: Optional[int] = None

    @model_validator(mode="after")
    def check_name(self):
        self.name = require_text(self.name, "Product name is required")
        return self


class ProductUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    image: Optional[str] = None
    shop_id: Optional[int] = None
    category_id: Optional[int] = None


class ProductOut(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    price: float
    image: Optional[str] = None
    shop_id: Optional[int] = None
    category_id: Optional[int] = None
    shop_name: Optional[str] = None
    category_name: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
