"""Shared pydantic configuration and the success envelope returned by every operation."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

DataT = TypeVar("DataT")

# Payloads arrive with camelCase keys; snake_case names are accepted too.
INPUT_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)
RECORD_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

# Range of the INTEGER columns that integer inputs are stored in.
INT_COLUMN_MIN = -(2**31)
INT_COLUMN_MAX = 2**31 - 1


class ActionResult(BaseModel, Generic[DataT]):
    success: bool = True
    data: DataT
