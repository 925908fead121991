"""
Pydantic schema definitions for the cat catalog.

The ``Cat`` model carries everything a catalog card needs. Request
models validate incoming payloads for add and update, and the view
models (``CatPage``, ``CatalogView``) bundle a page of cards with the
pagination, filter and sort state so that clients can render the list
and its controls from a single response.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator
from typing_extensions import Literal

SortField = Literal["name", "age"]
SortDirection = Literal["asc", "desc"]
Gender = Literal["M", "F"]

# Path segments under /api/cats that would shadow a cat of the same name.
RESERVED_NAMES = frozenset({"selected", "selection", "statistics", "operation-logs", "generation"})


def check_name(name: Optional[str]) -> Optional[str]:
    if name is not None and name.strip().lower() in RESERVED_NAMES:
        raise ValueError(f"{name!r} is a reserved name")
    return name


class Cat(BaseModel):
    """A single cat record.

    ``id`` is the unique identifier, while ``name`` doubles as the
    secondary key used by selection and by the update navigation path.
    """

    id: str
    name: str
    age: int = Field(ge=0)
    breed: str = ""
    gender: Optional[Gender] = None
    weight: Optional[float] = None
    description: str = ""
    image: str = ""


class CreateCatRequest(BaseModel):
    name: str = Field(min_length=1)
    age: int = Field(ge=0)
    breed: str = ""
    gender: Optional[Gender] = None
    weight: Optional[float] = Field(default=None, gt=0)
    description: str = ""
    image: str = ""

    @field_validator("name")
    @classmethod
    def reject_reserved_name(cls, name):
        return check_name(name)


class UpdateCatRequest(BaseModel):
    """Partial update; fields left as ``None`` keep their current value."""

    name: Optional[str] = Field(default=None, min_length=1)
    age: Optional[int] = Field(default=None, ge=0)
    breed: Optional[str] = None
    gender: Optional[Gender] = None
    weight: Optional[float] = Field(default=None, gt=0)
    description: Optional[str] = None
    image: Optional[str] = None

    @field_validator("name")
    @classmethod
    def reject_reserved_name(cls, name):
        return check_name(name)


class SortConfig(BaseModel):
    field: SortField
    direction: SortDirection = "asc"


class FilterState(BaseModel):
    search_term: str = ""
    min_age: Optional[int] = None
    max_age: Optional[int] = None


class CatPage(BaseModel):
    """One page of records plus the metadata needed to render pagination."""

    page: int
    page_size: int
    total: int
    total_pages: int
    items: List[Cat]


class CatCard(BaseModel):
    cat: Cat
    selected: bool = False


class CatalogView(BaseModel):
    """Everything the list screen renders, computed by the controller."""

    page: int
    page_size: int
    total: int
    total_pages: int
    items: List[CatCard]
    filter: FilterState
    sort: Optional[SortConfig] = None
    selected: Optional[Cat] = None
    generating: bool = False


class CatStatistics(BaseModel):
    count: int = 0
    mean_age: float = 0.0
    median_age: float = 0.0
    min_age: int = 0
    max_age: int = 0
    mean_weight: Optional[float] = None
    age_groups: dict = Field(default_factory=dict)
    genders: dict = Field(default_factory=dict)
