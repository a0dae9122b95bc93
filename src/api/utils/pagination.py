"""
Query-string pagination.

Callers may page with `page` + `per_page` or with `limit` + `offset`.
"""

from typing import Optional

from fastapi import Query
from pydantic import BaseModel

DEFAULT_LIMIT = 20
MAX_LIMIT = 100


class PageParams(BaseModel):
    limit: int
    offset: int


def resolve_page(
    limit: Optional[int], offset: Optional[int], page: Optional[int], per_page: Optional[int]
) -> PageParams:
    """Normalise either pagination style into limit/offset"""
    if page is not None:
        # per_page only counts together with page
        limit = per_page
        offset = (max(page, 1) - 1) * _clamp_limit(per_page)

    return PageParams(limit=_clamp_limit(limit), offset=max(offset or 0, 0))


def _clamp_limit(limit: Optional[int]) -> int:
    if limit is None or limit < 1:
        return DEFAULT_LIMIT
    return min(limit, MAX_LIMIT)


async def page_params(
    limit: Optional[int] = Query(None),
    offset: Optional[int] = Query(None),
    page: Optional[int] = Query(None),
    per_page: Optional[int] = Query(None),
) -> PageParams:
    return resolve_page(limit, offset, page, per_page)
