# fixup/core/pagination.py
import re
from typing import Optional

from fastapi import HTTPException, Query

from fixup.core.config import settings

MSG_INVALID_PAGE = "Invalid page parameter"
MSG_INVALID_PER_PAGE = "Invalid per_page parameter"

MAX_INT64 = 2**63 - 1
INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_int64(value: Optional[str]) -> Optional[int]:
    # ascii digits only, no whitespace or underscores, must fit a signed 64-bit int
    if value is None or not INT_PATTERN.fullmatch(value):
        return None
    number = int(value)
    if not -MAX_INT64 - 1 <= number <= MAX_INT64:
        return None
    return number


def parse_limit_and_offset(page_param, per_page_param, max_per_page: int, default_per_page: int):
    """Turn raw ``page``/``per_page`` query values into ``(limit, offset)``.

    ``page`` is required and 1-based. A missing, zero or too large ``per_page``
    falls back to ``default_per_page``; a negative or non-numeric one is rejected.
    """
    page = parse_int64(page_param)
    if page is None:
        raise HTTPException(status_code=400, detail=MSG_INVALID_PAGE)

    per_page = 0
    if per_page_param not in (None, ""):
        per_page = parse_int64(per_page_param)
        if per_page is None or per_page < 0:
            raise HTTPException(status_code=400, detail=MSG_INVALID_PER_PAGE)

    if per_page == 0 or per_page > max_per_page:
        per_page = default_per_page

    if page < 1:
        raise HTTPException(status_code=400, detail=MSG_INVALID_PAGE)

    offset = per_page * (page - 1)
    if offset > MAX_INT64:
        raise HTTPException(status_code=400, detail=MSG_INVALID_PAGE)

    return per_page, offset


class Pagination:
    def __init__(self, limit: int, offset: int):
        self.limit = limit
        self.offset = offset


def get_pagination(
    page: Optional[str] = Query(None),
    per_page: Optional[str] = Query(None),
) -> Pagination:
    limit, offset = parse_limit_and_offset(
        page,
        per_page,
        settings.pagination.max_per_page,
        settings.pagination.default_per_page,
    )
    return Pagination(limit, offset)
