from typing import List

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from core.errors import validation_message
from core.navigation import ADMIN_SCREENS, SCREEN_PARAMS, Navigation, navigate
from schemas.navigation import NavigationRequest, ScreenOut

router = APIRouter(prefix="/navigation", tags=["navigation"])


@router.get("/screens", response_model=List[ScreenOut])
def list_screens():
    return [
        {
            "screen": screen.value,
            "params": list(model.model_fields),
            "requires_admin": screen in ADMIN_SCREENS,
        }
        for screen, model in SCREEN_PARAMS.items()
    ]


@router.post("/", response_model=Navigation)
def resolve_navigation(data: NavigationRequest):
    """Check that a screen exists and accepts the given params."""
    try:
        return navigate(data.screen, data.params)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=validation_message(e))
    except ValueError:
        raise HTTPException(status_code=422, detail=f"Unknown screen: {data.screen}")
