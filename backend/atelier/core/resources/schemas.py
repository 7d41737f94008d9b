from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


T = TypeVar("T")


class CamelModel(BaseModel):
    """Wire models use camelCase names; Python code uses snake_case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


def round_cents(value: float | None) -> float | None:
    """Round to the two decimal places numeric columns store."""
    return None if value is None else round(value, 2)


class Page(CamelModel, Generic[T]):
    result: list[T]
    total: int
