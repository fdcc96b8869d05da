"""세션 서비스 — 인증 세션 기록 관리.

Session Service — Bookkeeping for authenticated user sessions.
Issuing credentials is out of scope; this service only records, looks up
and ends sessions.
"""

from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from coop_members.models.session import Session
from coop_members.models.user import User
from coop_members.repositories.session_repository import session_repository
from coop_members.repositories.user_repository import user_repository
from coop_members.schemas.session import SessionResponse
from coop_members.utils.exceptions import NotFoundError


class SessionService:
    """세션 관련 비즈니스 로직을 처리하는 서비스.

    Service handling session business logic.
    """

    def _to_response(self, session: Session, user: User) -> SessionResponse:
        return SessionResponse(
            id=str(session.id),
            user_id=str(session.user_id),
            user_email=user.email,
            created_at=session.created_at,
        )

    async def create(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> SessionResponse:
        """사용자의 새 세션을 기록합니다.

        Record a new session for a user.

        Raises:
            NotFoundError: 사용자를 찾을 수 없을 때 (User not found)
        """
        user: User | None = await user_repository.get_by_id(db, user_id)
        if user is None:
            raise NotFoundError("User not found")

        session: Session = await session_repository.create(db, {"user_id": user.id})
        return self._to_response(session, user)

    async def find_one(
        self,
        db: AsyncSession,
        fields: dict[str, Any],
    ) -> SessionResponse | None:
        """조건에 맞는 활성 세션을 조회합니다 (Find the first active session matching the fields)."""
        session: Session | None = await session_repository.get_one(db, fields)
        if session is None:
            return None
        return self._to_response(session, session.user)

    async def soft_delete(
        self,
        db: AsyncSession,
        session_id: UUID,
    ) -> None:
        """세션을 종료합니다 (End a session; unknown ids are ignored)."""
        await session_repository.soft_delete(db, session_id)

    async def soft_delete_by_user(
        self,
        db: AsyncSession,
        user_id: UUID,
        exclude_id: UUID | None = None,
    ) -> int:
        """사용자의 다른 세션을 모두 종료합니다.

        End every active session of a user except ``exclude_id``.

        Returns:
            int: 종료된 세션 수 (Number of sessions ended)
        """
        return await session_repository.soft_delete_by_user(db, user_id, exclude_id)


# 싱글턴 인스턴스 — Singleton instance
session_service: SessionService = SessionService()
