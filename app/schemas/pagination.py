"""
app/schemas/pagination.py

Purpose: Pagination window

- Resolves optional page/limit input into concrete values
- Defaults: page 1, limit 10
- Clamps both to a minimum of 1
- Derives the skip offset for the store query
"""

from pydantic import BaseModel, Field
from typing import Optional

from utils.constants import DEFAULT_LIMIT, DEFAULT_PAGE, MIN_LIMIT, MIN_PAGE


class Pagination(BaseModel):
    """
    A (page, limit) pair with 1-based pages.
    """
    page: int = Field(default=DEFAULT_PAGE, ge=MIN_PAGE)
    limit: int = Field(default=DEFAULT_LIMIT, ge=MIN_LIMIT)

    @classmethod
    def resolve(cls, page: Optional[int] = None, limit: Optional[int] = None) -> "Pagination":
        """
        Builds a window from raw client input.

        Absent values (None or 0) fall back to the defaults; negative
        values are clamped to the minimum.
        """
        page = page or DEFAULT_PAGE
        limit = limit or DEFAULT_LIMIT
        return cls(page=max(page, MIN_PAGE), limit=max(limit, MIN_LIMIT))

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit
