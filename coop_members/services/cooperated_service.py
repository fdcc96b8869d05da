"""조합원 서비스 — 조합원 CRUD, 문서 검증 및 일괄 등록 비즈니스 로직.

Cooperated Service — Business logic for cooperated members.
Handles creation with document/organization validation, paged listing,
lookup, partial update, soft delete, document validation, and the
all-or-nothing bulk insert.

Documents are always stored digits only; every entry point that accepts a
document normalizes it first.
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from coop_members.models.cooperated import Cooperated
from coop_members.models.organization import Organization
from coop_members.repositories.cooperated_repository import cooperated_repository
from coop_members.schemas.cooperated import (
    CooperatedCreate,
    CooperatedResponse,
    CooperatedUpdate,
    DocumentValidationResponse,
)
from coop_members.services.organization_service import organization_service
from coop_members.utils.document import normalize_document
from coop_members.utils.exceptions import NotFoundError, UnprocessableError
from coop_members.utils.pagination import Page, normalize_page_params

logger = logging.getLogger(__name__)

DOCUMENT_EMPTY: str = "document should not be empty"
ORGANIZATION_EMPTY: str = "organization should not be empty"
DOCUMENT_EXISTS: str = "document already exists"
ORGANIZATION_NOT_FOUND: str = "organization of provided organization is not found"

# 문서 검증 실패 본문 — Body returned when a document lookup misses
COOPERATED_NOT_FOUND: dict[str, Any] = {"status": 404, "errors": "cooperatedNotFound"}


class CooperatedService:
    """조합원 관련 비즈니스 로직을 처리하는 서비스.

    Service handling cooperated member business logic.
    """

    def _to_response(self, cooperated: Cooperated) -> CooperatedResponse:
        """조합원 모델을 응답 스키마로 변환합니다 (Convert a Cooperated model to its response)."""
        return CooperatedResponse(
            id=str(cooperated.id),
            organization_id=str(cooperated.organization_id),
            first_name=cooperated.first_name,
            last_name=cooperated.last_name,
            email=cooperated.email,
            phone=cooperated.phone,
            document=cooperated.document,
            created_at=cooperated.created_at,
        )

    def _require_document(self, document: str | None) -> str:
        """문서 번호 필수 확인 후 정규화 — 숫자가 하나도 없으면 빈 값으로 간주.

        Require a document and return it normalized. A value without any
        digit counts as empty.
        """
        normalized: str = normalize_document(document or "")
        if not normalized:
            raise UnprocessableError(DOCUMENT_EMPTY)
        return normalized

    async def _resolve_organization(
        self,
        db: AsyncSession,
        organization: str | None,
    ) -> Organization:
        """조직 참조를 확인하고 조직을 반환합니다.

        Resolve an organization reference or raise 422.
        """
        if not organization:
            raise UnprocessableError(ORGANIZATION_EMPTY)
        org: Organization | None = await organization_service.find_one(db, organization)
        if org is None:
            raise UnprocessableError(ORGANIZATION_NOT_FOUND)
        return org

    async def create(
        self,
        db: AsyncSession,
        data: CooperatedCreate,
    ) -> CooperatedResponse:
        """새 조합원을 등록합니다.

        Create a new cooperated member.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 조합원 생성 데이터 (Member creation data)

        Returns:
            CooperatedResponse: 생성된 조합원 응답 (Created member response)

        Raises:
            UnprocessableError: 문서/조직 누락, 문서 중복, 조직 없음
                                (Missing document or organization, duplicate
                                document, unknown organization)
        """
        document: str = self._require_document(data.document)
        if not data.organization:
            raise UnprocessableError(ORGANIZATION_EMPTY)

        # 문서 중복 확인 — 소프트 삭제된 행도 고유 인덱스에 포함
        # Duplicate check; soft-deleted rows still hold the unique index
        existing: Cooperated | None = await cooperated_repository.get_by_document(
            db, document, include_deleted=True
        )
        if existing is not None:
            raise UnprocessableError(DOCUMENT_EXISTS)

        org: Organization = await self._resolve_organization(db, data.organization)

        cooperated: Cooperated = await cooperated_repository.create(
            db,
            {
                "organization_id": org.id,
                "first_name": data.first_name,
                "last_name": data.last_name,
                "email": data.email,
                "phone": data.phone,
                "document": document,
            },
        )
        return self._to_response(cooperated)

    async def find_page(
        self,
        db: AsyncSession,
        page: int | None = 1,
        limit: int | None = None,
    ) -> Page:
        """조합원 목록을 페이지 단위로 조회합니다 (전체 개수 포함).

        List live members one page at a time, with total count metadata.
        """
        safe_page, per_page = normalize_page_params(page, limit)
        items, total = await cooperated_repository.get_page(db, safe_page, per_page)
        return Page.build(
            [self._to_response(c) for c in items], total, safe_page, per_page
        )

    async def find_many_with_pagination(
        self,
        db: AsyncSession,
        page: int | None = 1,
        limit: int | None = None,
    ) -> list[CooperatedResponse]:
        """조합원 목록을 페이지 단위로 조회합니다.

        Return the members of one page: skip (page - 1) * limit, take limit.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            page: 페이지 번호, 1부터 시작 (Page number, 1-based)
            limit: 페이지 크기, 최대 MAX_PAGE_SIZE (Page size, capped at MAX_PAGE_SIZE)

        Returns:
            list[CooperatedResponse]: 조합원 목록 (Members on the page)
        """
        result: Page = await self.find_page(db, page, limit)
        return result.items

    async def find_one(
        self,
        db: AsyncSession,
        fields: dict[str, Any],
    ) -> CooperatedResponse | None:
        """조건에 맞는 조합원 한 명을 조회합니다.

        Retrieve the first live member matching every given field.
        Keys that are not columns are ignored; a malformed id matches nothing.
        """
        cooperated: Cooperated | None = await cooperated_repository.get_one(db, fields)
        if cooperated is None:
            return None
        return self._to_response(cooperated)

    async def update(
        self,
        db: AsyncSession,
        cooperated_id: UUID,
        data: CooperatedUpdate,
    ) -> CooperatedResponse:
        """조합원 정보를 수정합니다.

        Partially update a live member. A new document is normalized and
        checked for uniqueness; a new organization must exist.

        Raises:
            NotFoundError: 조합원을 찾을 수 없을 때 (Member not found)
            UnprocessableError: 문서 중복 또는 조직 없음 (Duplicate document or unknown organization)
        """
        current: Cooperated | None = await cooperated_repository.get_by_id(db, cooperated_id)
        if current is None:
            raise NotFoundError("Cooperated not found")

        update_data: dict[str, Any] = data.model_dump(exclude_unset=True)

        if "document" in update_data:
            document: str = self._require_document(update_data["document"])
            other: Cooperated | None = await cooperated_repository.get_by_document(
                db, document, include_deleted=True
            )
            if other is not None and other.id != cooperated_id:
                raise UnprocessableError(DOCUMENT_EXISTS)
            update_data["document"] = document

        if "organization" in update_data:
            org: Organization = await self._resolve_organization(
                db, update_data.pop("organization")
            )
            update_data["organization_id"] = org.id

        updated: Cooperated | None = await cooperated_repository.update(
            db, cooperated_id, update_data
        )
        if updated is None:
            raise NotFoundError("Cooperated not found")

        return self._to_response(updated)

    async def soft_delete(
        self,
        db: AsyncSession,
        cooperated_id: UUID,
    ) -> None:
        """조합원을 소프트 삭제합니다 — 없는 ID는 무시.

        Soft-delete a member; an unknown id is a no-op.
        """
        await cooperated_repository.soft_delete(db, cooperated_id)

    async def validate_document(
        self,
        db: AsyncSession,
        document: str,
    ) -> DocumentValidationResponse:
        """문서 번호로 조합원을 확인하고 연락처 요약을 반환합니다.

        Look up a live member by document and return a contact summary.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            document: 문서 번호, 구두점 허용 (Document, punctuation allowed)

        Returns:
            DocumentValidationResponse: 이름/문서/이메일/전화 요약 (Contact summary)

        Raises:
            NotFoundError: {"status": 404, "errors": "cooperatedNotFound"}
        """
        cooperated: Cooperated | None = await cooperated_repository.get_by_document(
            db, normalize_document(document or "")
        )
        if cooperated is None:
            raise NotFoundError(dict(COOPERATED_NOT_FOUND))

        name: str = " ".join(
            part for part in (cooperated.first_name, cooperated.last_name) if part
        )
        return DocumentValidationResponse(
            name=name,
            document=cooperated.document or "",
            email=cooperated.email or "",
            phone=cooperated.phone or "",
        )

    async def create_bulk(
        self,
        db: AsyncSession,
        items: list[CooperatedCreate],
    ) -> int:
        """여러 조합원을 하나의 트랜잭션으로 등록합니다.

        Insert many members in one transaction: every row is validated up
        front, then inserted row by row and committed together. Any failure
        rolls the whole batch back.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            items: 조합원 생성 데이터 목록 (Member creation payloads)

        Returns:
            int: 등록된 조합원 수 (Number of members inserted)

        Raises:
            UnprocessableError: 행 검증 실패 또는 문서 중복
                                (A row failed validation or a document is taken)
        """
        if not items:
            return 0

        rows: list[dict[str, Any]] = []
        seen: set[str] = set()
        organizations: dict[str, Organization] = {}

        for index, item in enumerate(items):
            try:
                document: str = self._require_document(item.document)
                if not item.organization:
                    raise UnprocessableError(ORGANIZATION_EMPTY)
                if document in seen:
                    raise UnprocessableError(DOCUMENT_EXISTS)
                if item.organization not in organizations:
                    organizations[item.organization] = await self._resolve_organization(
                        db, item.organization
                    )
            except UnprocessableError as exc:
                raise UnprocessableError(f"row {index}: {exc.detail}") from exc

            seen.add(document)
            rows.append(
                {
                    "organization_id": organizations[item.organization].id,
                    "first_name": item.first_name,
                    "last_name": item.last_name,
                    "email": item.email,
                    "phone": item.phone,
                    "document": document,
                }
            )

        taken: set[str] = await cooperated_repository.get_existing_documents(db, list(seen))
        if taken:
            raise UnprocessableError(f"{DOCUMENT_EXISTS}: {', '.join(sorted(taken))}")

        try:
            await cooperated_repository.add_all(db, rows)
            await db.commit()
        except IntegrityError as exc:
            await db.rollback()
            logger.warning("Bulk insert of %d members rolled back: %s", len(rows), exc.orig)
            raise UnprocessableError(DOCUMENT_EXISTS) from exc
        except SQLAlchemyError:
            await db.rollback()
            logger.exception("Bulk insert of %d members rolled back", len(rows))
            raise

        logger.info("Bulk inserted %d members", len(rows))
        return len(rows)


# 싱글턴 인스턴스 — Singleton instance
cooperated_service: CooperatedService = CooperatedService()
