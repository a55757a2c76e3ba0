from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, field_validator, model_validator

from schemas.category import CategoryOut, CategoryStats
from schemas.rules import blank_to_none, require_min_length, require_text

MIN_LEVEL = -5
MAX_LEVEL = 50


class FloorCreate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    level: Optional[int] = None
    is_active: bool = True
    store_count: int = 0

    @field_validator("level", mode="before")
    @classmethod
    def blank_level(cls, v):
        return blank_to_none(v)

    @model_validator(mode="after")
    def check_fields(self):
        self.name = require_text(self.name, "Floor name is required")
        require_min_length(self.name, 2, "Floor name must be at least 2 characters long")
        if self.level is None:
            raise ValueError("Floor level is required")
        if not MIN_LEVEL <= self.level <= MAX_LEVEL:
            raise ValueError(f"Floor level must be between {MIN_LEVEL} and {MAX_LEVEL}")
        return self


class FloorUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    level: Optional[int] = None
    is_active: Optional[bool] = None
    store_count: Optional[int] = None


class FloorOut(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    level: int
    is_active: bool
    store_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class FloorStats(BaseModel):
    total: int
    active: int
    inactive: int
    stores: int


class CategoryFloorOverview(BaseModel):
    """Admin category & floor manager: both lists filtered by one query, stats over everything."""

    categories: List[CategoryOut]
    floors: List[FloorOut]
    category_stats: CategoryStats
    floor_stats: FloorStats
