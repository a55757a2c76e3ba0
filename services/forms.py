"""Create/edit form flow shared by every entity.

A form starts in EDITING. ``submit`` moves it to SUBMITTING, validates the
values with the entity's schema and, only if they pass, issues exactly one
write: an update when the form was opened on an existing record, a create
otherwise. Any failure puts the form back in EDITING with a single error
message and leaves the submitted values untouched. Nothing is retried.
"""
import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Type

from pydantic import BaseModel, ValidationError
from sqlalchemy.orm import Session

from core.errors import validation_message
from services import store
from services.store import StoreResult

logger = logging.getLogger(__name__)

# Extra checks that need the database, e.g. "the selected shop exists"
Check = Callable[[Session, BaseModel], Optional[str]]


class FormState(str, Enum):
    EDITING = "editing"
    SUBMITTING = "submitting"
    SUCCESS = "success"


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    WRITE = "write"


class EntityForm:
    def __init__(
        self,
        collection: str,
        schema: Type[BaseModel],
        initial: Optional[Mapping[str, Any]] = None,
        checks: Optional[List[Check]] = None,
        on_success: Optional[Callable[[StoreResult], None]] = None,
    ):
        self.collection = collection
        self.schema = schema
        self.initial = dict(initial) if initial is not None else None
        self.checks = checks or []
        self.on_success = on_success
        self.state = FormState.EDITING
        self.values: Dict[str, Any] = {}
        self.error: Optional[str] = None
        self.error_kind: Optional[ErrorKind] = None
        self.result: Optional[StoreResult] = None

    @property
    def is_editing(self) -> bool:
        return self.initial is not None

    def _fail(self, kind: ErrorKind, message: str) -> bool:
        self.state = FormState.EDITING
        self.error = message
        self.error_kind = kind
        logger.info("%s form rejected (%s): %s", self.collection, kind.value, message)
        return False

    def submit(self, db: Session, values: Mapping[str, Any]) -> bool:
        self.state = FormState.SUBMITTING
        self.error = None
        self.error_kind = None
        self.values = dict(values)
        logger.info("%s %s form submitted", "Updating" if self.is_editing else "Creating", self.collection)

        merged = {**self.initial, **self.values} if self.is_editing else dict(self.values)
        try:
            validated = self.schema.model_validate(merged)
        except ValidationError as e:
            return self._fail(ErrorKind.VALIDATION, validation_message(e))

        for check in self.checks:
            message = check(db, validated)
            if message:
                return self._fail(ErrorKind.VALIDATION, message)

        payload = validated.model_dump()
        if self.is_editing:
            result = store.update(db, self.collection, self.initial["id"], payload)
        else:
            result = store.create(db, self.collection, payload)

        if not result.success:
            return self._fail(ErrorKind.WRITE, result.error or "Operation failed")

        self.result = result
        self.state = FormState.SUCCESS
        if self.on_success is not None:
            self.on_success(result)
        return True
