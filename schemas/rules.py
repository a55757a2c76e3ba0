"""Validation rules shared by every create and edit path.

Each entity's ``*Create`` schema runs its rules in a fixed order and stops at
the first failure, so the caller always gets exactly one message. Edits are
validated by merging the patch over the stored record and running the same
schema again.
"""
from typing import Any, Optional


def blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def require_text(value: Optional[str], message: str) -> str:
    if value is None or not value.strip():
        raise ValueError(message)
    return value.strip()


def require_min_length(value: str, length: int, message: str) -> str:
    if len(value.strip()) < length:
        raise ValueError(message)
    return value
