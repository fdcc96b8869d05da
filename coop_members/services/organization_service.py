"""조직 서비스 — 조직 조회.

Organization Service — Organization lookup used by member operations.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from coop_members.models.organization import Organization
from coop_members.repositories.organization_repository import organization_repository


class OrganizationService:
    """조직 조회를 처리하는 서비스.

    Service resolving organization references.
    """

    async def find_one(
        self,
        db: AsyncSession,
        organization_id: UUID | str,
    ) -> Organization | None:
        """ID로 조직을 조회합니다.

        Retrieve an organization by id. A malformed id resolves to None,
        same as an unknown one.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            organization_id: 조직 UUID 또는 UUID 문자열 (Organization UUID or its string form)

        Returns:
            Organization | None: 조직 또는 None (Organization or None)
        """
        if not isinstance(organization_id, UUID):
            try:
                organization_id = UUID(str(organization_id))
            except ValueError:
                return None

        return await organization_repository.get_by_id(db, organization_id)


# 싱글턴 인스턴스 — Singleton instance
organization_service: OrganizationService = OrganizationService()
