"""세션 서비스 테스트.

Session service tests — Create, lookup with eager-loaded user and string ids, soft delete.
"""

import uuid

import pytest
from fastapi import HTTPException

from coop_members.services.session_service import session_service


class TestSessionService:
    """세션 서비스 테스트."""

    async def test_create_session(self, db, user):
        """세션 생성."""
        session = await session_service.create(db, user.id)
        assert session.user_id == str(user.id)
        assert session.user_email == "member@coop.test"

    async def test_create_for_unknown_user(self, db, user):
        """존재하지 않는 사용자면 404."""
        with pytest.raises(HTTPException) as exc:
            await session_service.create(db, uuid.uuid4())
        assert exc.value.status_code == 404

    async def test_find_one_loads_user(self, db, user):
        """조회 시 사용자 정보 포함."""
        created = await session_service.create(db, user.id)
        found = await session_service.find_one(db, {"id": uuid.UUID(created.id)})
        assert found is not None
        assert found.user_email == user.email

    async def test_soft_delete(self, db, user):
        """종료된 세션은 조회되지 않음."""
        created = await session_service.create(db, user.id)
        await session_service.soft_delete(db, uuid.UUID(created.id))
        assert await session_service.find_one(db, {"id": uuid.UUID(created.id)}) is None

    async def test_soft_delete_by_user_keeps_current(self, db, user):
        """현재 세션을 제외한 나머지 세션 종료."""
        keep = await session_service.create(db, user.id)
        await session_service.create(db, user.id)
        await session_service.create(db, user.id)

        ended = await session_service.soft_delete_by_user(db, user.id, exclude_id=uuid.UUID(keep.id))
        assert ended == 2

        remaining = await session_service.find_one(db, {"user_id": user.id})
        assert remaining is not None
        assert remaining.id == keep.id

    async def test_soft_delete_by_user_all(self, db, user):
        """제외 없이 모든 세션 종료."""
        await session_service.create(db, user.id)
        await session_service.create(db, user.id)
        assert await session_service.soft_delete_by_user(db, user.id) == 2
        assert await session_service.find_one(db, {"user_id": user.id}) is None

    async def test_find_one_by_string_ids(self, db, user):
        """문자열 세션/사용자 ID로 조회."""
        created = await session_service.create(db, user.id)
        found = await session_service.find_one(db, {"id": created.id, "user_id": str(user.id)})
        assert found is not None
        assert found.id == created.id

    async def test_find_one_malformed_id(self, db, user):
        """UUID 형식이 아닌 ID는 일치 없음, 관계 키는 무시."""
        await session_service.create(db, user.id)
        assert await session_service.find_one(db, {"id": "not-a-uuid"}) is None
        found = await session_service.find_one(db, {"user": "ignored", "user_id": user.id})
        assert found is not None
