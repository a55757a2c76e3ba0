from datetime import datetime
from typing import Optional

from pydantic import BaseModel, model_validator

from schemas.rules import require_min_length, require_text


class CategoryCreate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    icon: Optional[str] = None
    color: Optional[str] = None
    is_active: bool = True
    product_count: int = 0

    @model_validator(mode="after")
    def check_name(self):
        self.name = require_text(self.name, "Category name is required")
        require_min_length(self.name, 2, "Category name must be at least 2 characters long")
        return self


class CategoryUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    icon: Optional[str] = None
    color: Optional[str] = None
    is_active: Optional[bool] = None
    product_count: Optional[int] = None


class CategoryOut(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    icon: Optional[str] = None
    color: Optional[str] = None
    is_active: bool
    product_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class CategoryStats(BaseModel):
    total: int
    active: int
    inactive: int
    products: int
