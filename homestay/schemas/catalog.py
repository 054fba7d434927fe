from __future__ import annotations

import math
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


class SortOption(StrEnum):
    most_rated = "most-rated"
    least_rated = "least-rated"
    highest_rating = "highest-rating"
    lowest_rating = "lowest-rating"
    price_low_high = "price-low-high"
    price_high_low = "price-high-low"


class CatalogItem(BaseModel):
    """Place listing as returned by the backend; missing or null numbers count as 0."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int | str
    name: str | None = None
    address: str | None = None
    description: str | None = None
    category: str | None = None
    price: float = Field(default=0, ge=0)
    rating: float = Field(default=0, ge=0, le=5)
    num_of_rating: int = Field(default=0, ge=0)
    max_guests: int = Field(default=1, ge=1)

    @field_validator("price", "rating", "num_of_rating", "max_guests", mode="before")
    @classmethod
    def _null_is_default(cls, value, info: ValidationInfo):
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


def _parse_number(value: str) -> float | None:
    try:
        number = float(value)
    except ValueError:
        return None
    return None if math.isnan(number) else number


class FilterCriteria(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    search_term: str | None = None
    category: str | None = None
    price_min: float | None = None
    price_max: float | None = None
    min_rating: float | None = None
    min_guests: int | None = None

    @field_validator("*", mode="before")
    @classmethod
    def _blank_is_unset(cls, value):
        # Form inputs send "" for untouched fields
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("price_min", "price_max", "min_rating", "min_guests", mode="before")
    @classmethod
    def _unparseable_is_unset(cls, value, info: ValidationInfo):
        # A number the form can't parse drops that filter instead of failing the query
        if not isinstance(value, str):
            return value
        number = _parse_number(value.strip())
        if number is not None and info.field_name == "min_guests":
            return int(number)
        return number

    def is_empty(self) -> bool:
        return all(v is None for v in self.model_dump().values())


class CatalogPage(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    items: list[CatalogItem]
    total_items: int
    total_pages: int
    page: int = 1
    page_size: int | None = None


class CatalogQueryRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    items: list[CatalogItem] = []
    criteria: FilterCriteria = FilterCriteria()
    sort: str | None = None
    page: int | None = Field(default=None, ge=1)
    page_size: int | None = Field(default=None, ge=1)
