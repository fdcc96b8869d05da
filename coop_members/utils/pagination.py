"""페이지네이션 유틸리티 모듈.

Pagination utility module for SQLAlchemy async queries.
Provides a generic paginate function and a Page response model
for consistent pagination across list operations.
"""

from math import ceil
from typing import Any, Sequence

from pydantic import BaseModel
from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from coop_members.config import settings


class Page(BaseModel):
    """페이지네이션 결과 모델.

    Pagination result model for typed responses.

    Attributes:
        items: 현재 페이지 항목 목록 (Items for the current page)
        total: 전체 항목 수 (Total count across all pages)
        page: 현재 페이지 번호 (Current page number, 1-based)
        per_page: 페이지당 항목 수 (Items per page)
        pages: 전체 페이지 수 (Total number of pages)
    """

    items: list[Any]
    total: int
    page: int
    per_page: int
    pages: int

    @classmethod
    def build(cls, items: list[Any], total: int, page: int, per_page: int) -> "Page":
        """전체 페이지 수를 계산하여 Page를 생성합니다 (Build a Page, computing page count)."""
        pages: int = ceil(total / per_page) if per_page > 0 else 0
        return cls(items=items, total=total, page=page, per_page=per_page, pages=pages)


def normalize_page_params(page: int | None, per_page: int | None) -> tuple[int, int]:
    """요청된 페이지 값을 허용 범위로 보정합니다.

    Clamp requested page parameters into the allowed range.
    page < 1 becomes 1; per_page falls back to DEFAULT_PAGE_SIZE and is capped
    at MAX_PAGE_SIZE.

    Returns:
        tuple[int, int]: (page, per_page)
    """
    safe_page: int = page if page is not None and page >= 1 else 1
    safe_per_page: int = per_page if per_page is not None and per_page >= 1 else settings.DEFAULT_PAGE_SIZE
    return safe_page, min(safe_per_page, settings.MAX_PAGE_SIZE)


async def paginate(
    db: AsyncSession,
    query: Select[Any],
    page: int = 1,
    per_page: int = 20,
) -> tuple[Sequence[Any], int]:
    """SQLAlchemy 쿼리에 대한 페이지네이션을 수행합니다.

    Execute a paginated SQLAlchemy query, returning items and total count.
    Runs two queries: one for the total count (via subquery) and one for
    the actual page of results with OFFSET/LIMIT.

    Args:
        db: 비동기 DB 세션 (Async database session)
        query: SQLAlchemy Select 쿼리 (Base query to paginate)
        page: 요청 페이지 번호, 1부터 시작 (Page number, 1-indexed, default: 1)
        per_page: 페이지당 항목 수 (Items per page, default: 20)

    Returns:
        tuple[Sequence[Any], int]: (항목 목록, 전체 개수) 튜플
    """
    # 전체 개수 조회 — 서브쿼리로 감싸서 COUNT 실행 (Count total via subquery)
    count_query = select(func.count()).select_from(query.subquery())
    total: int = (await db.execute(count_query)).scalar() or 0

    # 페이지 항목 조회 — OFFSET/LIMIT 적용 (Fetch page items with offset/limit)
    offset: int = (page - 1) * per_page
    result = await db.execute(query.offset(offset).limit(per_page))
    items: Sequence[Any] = result.scalars().all()

    return items, total
