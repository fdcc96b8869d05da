"""조합원 레포지토리 — 조합원 CRUD, 페이지 조회 및 일괄 삽입 쿼리.

Cooperated Repository — CRUD, paged listing and batch insert queries for
cooperated members.
"""

from typing import Any, Sequence

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from coop_members.models.cooperated import Cooperated
from coop_members.repositories.base import BaseRepository
from coop_members.utils.pagination import paginate


class CooperatedRepository(BaseRepository[Cooperated]):
    """조합원 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the cooperateds table.
    """

    def __init__(self) -> None:
        super().__init__(Cooperated)

    async def get_by_document(
        self,
        db: AsyncSession,
        document: str,
        include_deleted: bool = False,
    ) -> Cooperated | None:
        """정규화된 문서 번호로 조합원을 조회합니다.

        Retrieve a member by its normalized document number.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            document: 숫자만 남긴 문서 번호 (Digits-only document)
            include_deleted: 소프트 삭제 행 포함 여부 (Include soft-deleted rows)

        Returns:
            Cooperated | None: 조합원 또는 None (Member or None)
        """
        return await self.get_one(db, {"document": document}, include_deleted=include_deleted)

    async def get_existing_documents(
        self,
        db: AsyncSession,
        documents: list[str],
    ) -> set[str]:
        """이미 등록된 문서 번호 집합을 반환합니다 (소프트 삭제 행 포함).

        Return which of the given documents are already taken, soft-deleted
        rows included since the unique index covers them.
        """
        if not documents:
            return set()
        result = await db.execute(
            select(Cooperated.document).where(Cooperated.document.in_(documents))
        )
        return set(result.scalars().all())

    async def get_page(
        self,
        db: AsyncSession,
        page: int,
        per_page: int,
    ) -> tuple[Sequence[Cooperated], int]:
        """생성 순으로 정렬된 조합원 페이지를 조회합니다.

        Retrieve one page of live members ordered by creation time.

        Returns:
            tuple[Sequence[Cooperated], int]: (조합원 목록, 전체 개수)
        """
        query: Select = self.base_query().order_by(
            Cooperated.created_at.asc(), Cooperated.id.asc()
        )
        return await paginate(db, query, page, per_page)

    async def add_all(
        self,
        db: AsyncSession,
        rows: list[dict[str, Any]],
    ) -> list[Cooperated]:
        """여러 조합원을 한 행씩 추가하고 flush 합니다.

        Insert members one row at a time, flushing after each so a constraint
        violation surfaces at the offending row. Transaction control is left
        to the caller.
        """
        created: list[Cooperated] = []
        for row in rows:
            db_obj: Cooperated = Cooperated(**row)
            db.add(db_obj)
            await db.flush()
            created.append(db_obj)
        return created


# 싱글턴 인스턴스 — Singleton instance
cooperated_repository: CooperatedRepository = CooperatedRepository()
