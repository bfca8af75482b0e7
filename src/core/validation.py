"""
Input validation for operation payloads.

Partial updates distinguish three states for every optional field:

- UNSET: the field was not submitted, leave the column unchanged.
- CLEAR: the field was submitted as null (or an empty date), set the column to NULL.
- set(value): write the value.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, TypeVar

import pydantic
from pydantic import BaseModel

from core.errors import BadRequestError

ModelT = TypeVar("ModelT", bound=BaseModel)


class _Missing:
    """Marker for a field that was absent from the payload."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


class ChangeKind(str, Enum):
    UNSET = "unset"
    CLEAR = "clear"
    SET = "set"


class FieldChange:
    __slots__ = ("kind", "value")

    def __init__(self, kind: ChangeKind, value: Any = None):
        self.kind = kind
        self.value = value

    @classmethod
    def set(cls, value: Any) -> "FieldChange":
        return cls(ChangeKind.SET, value)

    def apply(self, updates: dict[str, Any], column: str) -> None:
        """Record this change under ``column`` unless it is UNSET."""
        if self.kind is ChangeKind.SET:
            updates[column] = self.value
        elif self.kind is ChangeKind.CLEAR:
            updates[column] = None

    def or_none(self) -> Any:
        """Value to use on insert, where UNSET and CLEAR both mean NULL."""
        return self.value if self.kind is ChangeKind.SET else None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldChange):
            return NotImplemented
        return self.kind is other.kind and self.value == other.value

    def __repr__(self) -> str:
        if self.kind is ChangeKind.SET:
            return f"FieldChange.set({self.value!r})"
        return f"FieldChange.{self.kind.name}"


UNSET = FieldChange(ChangeKind.UNSET)
CLEAR = FieldChange(ChangeKind.CLEAR)


def raw_field(model: BaseModel, name: str) -> Any:
    """Return the submitted value of ``name``, or MISSING if it was not in the payload."""
    if name not in model.model_fields_set:
        return MISSING
    return getattr(model, name)


def optional_change(model: BaseModel, name: str) -> FieldChange:
    raw = raw_field(model, name)
    if raw is MISSING:
        return UNSET
    if raw is None:
        return CLEAR
    return FieldChange.set(raw)


def parse_optional_date(value: Any, field: str) -> FieldChange:
    """Parse an ISO-8601 date or date-time.

    Absent → UNSET, null or empty string → CLEAR. Naive values are taken as UTC.
    """
    if value is MISSING:
        return UNSET
    if value is None or value == "":
        return CLEAR

    if not isinstance(value, str):
        raise BadRequestError(f"Invalid date provided for {field}.")

    raw = value.strip()
    if raw.endswith(("Z", "z")):
        raw = raw[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError as e:
        raise BadRequestError(f"Invalid date provided for {field}.") from e

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return FieldChange.set(parsed)


def parse_input(model_cls: type[ModelT], payload: Any) -> ModelT:
    """Validate a raw payload, reporting pydantic errors as BadRequest."""
    if payload is None:
        payload = {}
    try:
        return model_cls.model_validate(payload)
    except pydantic.ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'payload'}: {err['msg']}" for err in e.errors()
        )
        raise BadRequestError(f"Invalid input. {details}") from e
