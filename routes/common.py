"""Glue between the routers and the store / pipeline / form services."""
import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from services import store
from services.forms import EntityForm, ErrorKind
from services.pipeline import EntityView, PipelineQuery, run_pipeline
from services.store import StoreResult

logger = logging.getLogger(__name__)


def load(db: Session, collection: str, **filters: Any) -> List[dict]:
    result = store.get_all(db, collection, **filters)
    if not result.success:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=result.error)
    return result.records


def load_one(db: Session, collection: str, record_id: int, label: str) -> dict:
    result = store.get(db, collection, record_id)
    if not result.success:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=result.error)
    if result.data is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{label} not found")
    return result.data


def derive(
    records: Sequence[Mapping[str, Any]],
    view: EntityView,
    search: Optional[str] = None,
    filters: Optional[Dict[str, Optional[str]]] = None,
    status_filter: Optional[str] = None,
    sort: Optional[str] = None,
) -> List[Mapping[str, Any]]:
    query = PipelineQuery(search=search or "", filters=filters or {}, status=status_filter or "ALL", sort=sort)
    try:
        return run_pipeline(records, view, query)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))


def submit(db: Session, form: EntityForm, values: Mapping[str, Any]) -> StoreResult:
    if form.submit(db, values):
        return form.result
    if form.error_kind == ErrorKind.VALIDATION:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=form.error)
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=form.error)


def ensure_deleted(result: StoreResult) -> None:
    if not result.success:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.error or "Failed to delete")
