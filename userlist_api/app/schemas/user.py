"""
Pydantic models for the user list API.

Request models (``PageRequest``, ``SearchRequest``) carry the paging
parameters and normalise them instead of rejecting bad values: a
negative page becomes ``0``, a non‑positive size becomes the default
and an oversized one is capped.  Response models use snake_case
attributes in Python and camelCase keys on the wire.
"""

import math
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.config import settings


class UserRead(BaseModel):
    """A single name together with its position in the full list."""

    name: str = Field(..., examples=["Alice"])
    index: int = Field(..., examples=[0], description="Zero‑based position in the loaded list")

    model_config = ConfigDict(frozen=True)


class PageRequest(BaseModel):
    """Paging parameters for list, letter and search queries."""

    page: int = 0
    size: int = Field(default_factory=lambda: settings.default_page_size)

    @field_validator("page")
    @classmethod
    def clamp_page(cls, v: int) -> int:
        return max(0, v)

    @field_validator("size")
    @classmethod
    def clamp_size(cls, v: int) -> int:
        if v <= 0:
            return settings.default_page_size
        return min(v, settings.max_page_size)


class SearchRequest(PageRequest):
    """Paging parameters plus a substring query.

    ``None`` is accepted and treated like an empty query; surrounding
    whitespace is stripped.
    """

    query: str = ""

    @field_validator("query", mode="before")
    @classmethod
    def strip_query(cls, v: Optional[str]) -> str:
        return (v or "").strip()


class UserPage(BaseModel):
    """One page of users plus pagination metadata."""

    items: List[UserRead]
    total_count: int = Field(..., alias="totalCount")
    page: int
    page_size: int = Field(..., alias="pageSize")
    total_pages: int = Field(..., alias="totalPages")
    has_next: bool = Field(..., alias="hasNext")
    has_previous: bool = Field(..., alias="hasPrevious")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def build(cls, items: List[UserRead], total_count: int, page: int, page_size: int) -> "UserPage":
        """Derive ``totalPages``, ``hasNext`` and ``hasPrevious``.

        ``page_size`` must be positive; request models guarantee this.
        """
        total_pages = math.ceil(total_count / page_size)
        return cls(
            items=items,
            total_count=total_count,
            page=page,
            page_size=page_size,
            total_pages=total_pages,
            has_next=page < total_pages - 1,
            has_previous=page > 0,
        )


class AllUsersResponse(BaseModel):
    users: List[UserRead]
    total_count: int = Field(..., alias="totalCount")

    model_config = ConfigDict(populate_by_name=True)


class AlphabetBucket(BaseModel):
    """Contiguous run of names sharing an upper‑cased first letter.

    ``start_index`` and ``end_index`` are both inclusive.
    """

    letter: str = Field(..., examples=["A"])
    count: int
    start_index: int = Field(..., alias="startIndex")
    end_index: int = Field(..., alias="endIndex")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class AlphabetSummary(BaseModel):
    alphabet_info: List[AlphabetBucket] = Field(..., alias="alphabetInfo")
    total_letters: int = Field(..., alias="totalLetters")
    total_count: int = Field(..., alias="totalCount")

    model_config = ConfigDict(populate_by_name=True)
