from typing import List

from pydantic import BaseModel, Field


class ScreenOut(BaseModel):
    screen: str
    params: List[str]
    requires_admin: bool


class NavigationRequest(BaseModel):
    screen: str
    params: dict = Field(default_factory=dict)
