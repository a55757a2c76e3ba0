from typing import List, Optional

from pydantic import BaseModel

from core.navigation import Navigation


class SearchHit(BaseModel):
    id: int
    type: str
    label: Optional[str] = None
    category: Optional[str] = None
    shop: Optional[str] = None
    navigation: Navigation


class SearchOut(BaseModel):
    query: str
    results: List[SearchHit]
