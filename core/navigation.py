"""Named screens of the storefront and the typed parameters each one takes.

Navigation is an explicit value: a ``Screen`` plus the params model that
screen declares. There is no shared "current view" object; callers build a
``Navigation`` with ``navigate()`` and hand it to whoever renders it.
"""
from enum import Enum
from typing import Dict, List, Optional, Type

from pydantic import BaseModel, ConfigDict, Field


class Screen(str, Enum):
    HOME = "home"
    CATEGORIES = "categories"
    SHOPS = "shops"
    OFFERS = "offers"
    COMPARE = "compare"
    FLOORS = "floors"
    SHOP_DETAILS = "shopDetails"
    PRODUCTS = "products"
    PRODUCT_DETAILS = "productDetails"
    PRODUCT_UPDATE = "productUpdate"
    SEEDER = "seeder"
    DASHBOARD = "dashboard"
    SHOP_LIST = "shopList"
    SHOP_FORM = "shopForm"
    OFFER_LIST = "offerList"
    OFFER_FORM = "offerForm"
    CATEGORY_FLOOR = "categoryFloor"
    CATEGORY_FORM = "categoryForm"
    FLOOR_FORM = "floorForm"


class NoParams(BaseModel):
    model_config = ConfigDict(extra="forbid")


class CategoryParams(NoParams):
    category_id: Optional[int] = None


class FloorParams(NoParams):
    floor_id: Optional[int] = None


class OffersParams(NoParams):
    offer_id: Optional[int] = None


class CompareParams(NoParams):
    offer_ids: List[int] = Field(default_factory=list)


class ShopDetailsParams(NoParams):
    shop_id: int


class ProductDetailsParams(NoParams):
    product_id: int


class ProductUpdateParams(NoParams):
    offer_id: int


class EditParams(NoParams):
    # Absent for "create", present for "edit"
    entity_id: Optional[int] = None


SCREEN_PARAMS: Dict[Screen, Type[NoParams]] = {
    Screen.HOME: NoParams,
    Screen.CATEGORIES: CategoryParams,
    Screen.SHOPS: NoParams,
    Screen.OFFERS: OffersParams,
    Screen.COMPARE: CompareParams,
    Screen.FLOORS: FloorParams,
    Screen.SHOP_DETAILS: ShopDetailsParams,
    Screen.PRODUCTS: NoParams,
    Screen.PRODUCT_DETAILS: ProductDetailsParams,
    Screen.PRODUCT_UPDATE: ProductUpdateParams,
    Screen.SEEDER: NoParams,
    Screen.DASHBOARD: NoParams,
    Screen.SHOP_LIST: NoParams,
    Screen.SHOP_FORM: EditParams,
    Screen.OFFER_LIST: NoParams,
    Screen.OFFER_FORM: EditParams,
    Screen.CATEGORY_FLOOR: NoParams,
    Screen.CATEGORY_FORM: EditParams,
    Screen.FLOOR_FORM: EditParams,
}

ADMIN_SCREENS = frozenset({
    Screen.SEEDER,
    Screen.DASHBOARD,
    Screen.SHOP_LIST,
    Screen.SHOP_FORM,
    Screen.OFFER_LIST,
    Screen.OFFER_FORM,
    Screen.CATEGORY_FLOOR,
    Screen.CATEGORY_FORM,
    Screen.FLOOR_FORM,
})


class Navigation(BaseModel):
    screen: Screen
    params: dict = Field(default_factory=dict)


def navigate(screen: Screen | str, params: Optional[dict] = None) -> Navigation:
    """Validate ``params`` against the screen's params model.

    Raises ``ValueError`` for an unknown screen and pydantic's
    ``ValidationError`` for params the screen does not accept.
    """
    target = Screen(screen)
    model = SCREEN_PARAMS[target].model_validate(params or {})
    return Navigation(screen=target, params=model.model_dump(exclude_none=True))
