"""조합원 일괄 등록 테스트.

Cooperated bulk insert tests — All-or-nothing semantics and row validation.
"""

import uuid

import pytest
from fastapi import HTTPException
from sqlalchemy import func, select

from coop_members.models.cooperated import Cooperated
from coop_members.repositories.cooperated_repository import cooperated_repository
from coop_members.schemas.cooperated import CooperatedCreate
from coop_members.services.cooperated_service import cooperated_service

from tests.conftest import member_payload


async def _count(db) -> int:
    return (await db.execute(select(func.count()).select_from(Cooperated))).scalar() or 0


class TestCreateBulk:
    """일괄 등록 테스트."""

    async def test_bulk_inserts_all(self, db, org, other_org):
        """모든 행을 등록하고 커밋."""
        items = [
            CooperatedCreate(**member_payload(org, document="111.111.111-11")),
            CooperatedCreate(**member_payload(org, document="222.222.222-22")),
            CooperatedCreate(**member_payload(other_org, document="333.333.333-33")),
        ]
        inserted = await cooperated_service.create_bulk(db, items)
        assert inserted == 3
        assert await _count(db) == 3

        stored = await cooperated_service.find_one(db, {"document": "33333333333"})
        assert stored is not None
        assert stored.organization_id == str(other_org.id)

    async def test_bulk_empty_is_noop(self, db, org):
        """빈 목록은 아무것도 하지 않음."""
        assert await cooperated_service.create_bulk(db, []) == 0
        assert await _count(db) == 0

    async def test_bulk_rejects_duplicate_in_batch(self, db, org):
        """배치 내 중복 문서 번호는 전체 거부."""
        items = [
            CooperatedCreate(**member_payload(org, document="12345")),
            CooperatedCreate(**member_payload(org, document="1-2-3-4-5")),
        ]
        with pytest.raises(HTTPException) as exc:
            await cooperated_service.create_bulk(db, items)
        assert exc.value.status_code == 422
        assert exc.value.detail == "row 1: document already exists"
        assert await _count(db) == 0

    async def test_bulk_rejects_existing_document(self, db, org):
        """이미 등록된 문서 번호가 있으면 전체 거부."""
        await cooperated_service.create(db, CooperatedCreate(**member_payload(org, document="777")))
        await db.commit()

        items = [
            CooperatedCreate(**member_payload(org, document="888")),
            CooperatedCreate(**member_payload(org, document="7.7.7")),
        ]
        with pytest.raises(HTTPException) as exc:
            await cooperated_service.create_bulk(db, items)
        assert exc.value.status_code == 422
        assert await _count(db) == 1

    async def test_bulk_rejects_unknown_organization(self, db, org):
        """존재하지 않는 조직이 있으면 전체 거부."""
        items = [
            CooperatedCreate(**member_payload(org, document="100")),
            CooperatedCreate(**member_payload(org, document="200", organization=str(uuid.uuid4()))),
        ]
        with pytest.raises(HTTPException) as exc:
            await cooperated_service.create_bulk(db, items)
        assert exc.value.detail == "row 1: organization of provided organization is not found"
        assert await _count(db) == 0

    async def test_bulk_rejects_empty_fields(self, db, org):
        """문서/조직 누락 행이 있으면 전체 거부."""
        with pytest.raises(HTTPException) as exc:
            await cooperated_service.create_bulk(
                db, [CooperatedCreate(**member_payload(org, document=None))]
            )
        assert exc.value.detail == "row 0: document should not be empty"

        with pytest.raises(HTTPException) as exc:
            await cooperated_service.create_bulk(
                db, [CooperatedCreate(**member_payload(org, organization=""))]
            )
        assert exc.value.detail == "row 0: organization should not be empty"

    async def test_bulk_rolls_back_on_integrity_error(self, db, org, monkeypatch):
        """삽입 중 제약 위반 시 앞서 삽입된 행까지 롤백."""
        await cooperated_service.create(db, CooperatedCreate(**member_payload(org, document="999")))
        await db.commit()

        # 사전 중복 검사를 건너뛰어 고유 인덱스 위반을 삽입 단계에서 발생시킴
        async def _nothing_taken(db, documents):
            return set()

        monkeypatch.setattr(cooperated_repository, "get_existing_documents", _nothing_taken)

        items = [
            CooperatedCreate(**member_payload(org, document="101")),
            CooperatedCreate(**member_payload(org, document="102")),
            CooperatedCreate(**member_payload(org, document="999")),
        ]
        with pytest.raises(HTTPException) as exc:
            await cooperated_service.create_bulk(db, items)
        assert exc.value.status_code == 422
        assert exc.value.detail == "document already exists"

        assert await _count(db) == 1
        assert await cooperated_service.find_one(db, {"document": "101"}) is None

    async def test_bulk_rejects_soft_deleted_document(self, db, org):
        """삭제된 조합원의 문서 번호도 일괄 등록에서 거부."""
        created = await cooperated_service.create(db, CooperatedCreate(**member_payload(org, document="444")))
        await cooperated_service.soft_delete(db, uuid.UUID(created.id))
        await db.commit()

        items = [
            CooperatedCreate(**member_payload(org, document="555")),
            CooperatedCreate(**member_payload(org, document="4-4-4")),
        ]
        with pytest.raises(HTTPException) as exc:
            await cooperated_service.create_bulk(db, items)
        assert exc.value.status_code == 422
        assert exc.value.detail == "document already exists: 444"
        assert await _count(db) == 1
