"""사용자 레포지토리 — 사용자 조회 쿼리.

User Repository — Lookup queries for users.
"""

from coop_members.models.user import User
from coop_members.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """사용자 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the users table.
    """

    def __init__(self) -> None:
        super().__init__(User)


# 싱글턴 인스턴스 — Singleton instance
user_repository: UserRepository = UserRepository()
