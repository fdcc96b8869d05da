"""조직 레포지토리 — 조직 조회 쿼리.

Organization Repository — Lookup queries for organizations.
Extends BaseRepository with the Organization model.
"""

from coop_members.models.organization import Organization
from coop_members.repositories.base import BaseRepository


class OrganizationRepository(BaseRepository[Organization]):
    """조직 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the organizations table.
    Inherits generic CRUD from BaseRepository.
    """

    def __init__(self) -> None:
        super().__init__(Organization)


# 싱글턴 인스턴스 — Singleton instance
organization_repository: OrganizationRepository = OrganizationRepository()
