"""세션 레포지토리 — 인증 세션 쿼리.

Session Repository — Queries for authenticated user sessions.
"""

from datetime import datetime, timezone
from typing import Sequence
from uuid import UUID

from sqlalchemy import Select
from sqlalchemy.ext.asyncio import AsyncSession

from coop_members.models.session import Session
from coop_members.repositories.base import BaseRepository


class SessionRepository(BaseRepository[Session]):
    """세션 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the sessions table.
    """

    def __init__(self) -> None:
        super().__init__(Session)

    async def soft_delete_by_user(
        self,
        db: AsyncSession,
        user_id: UUID,
        exclude_id: UUID | None = None,
    ) -> int:
        """사용자의 활성 세션을 일괄 종료합니다.

        Stamp deleted_at on every active session of a user, optionally
        keeping one session alive.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user_id: 사용자 ID (User UUID)
            exclude_id: 유지할 세션 ID (Session to keep, optional)

        Returns:
            int: 종료된 세션 수 (Number of sessions ended)
        """
        query: Select = self.base_query().where(Session.user_id == user_id)
        if exclude_id is not None:
            query = query.where(Session.id != exclude_id)

        sessions: Sequence[Session] = (await db.execute(query)).scalars().all()
        now: datetime = datetime.now(timezone.utc)
        for session in sessions:
            session.deleted_at = now

        await db.flush()
        return len(sessions)


# 싱글턴 인스턴스 — Singleton instance
session_repository: SessionRepository = SessionRepository()
