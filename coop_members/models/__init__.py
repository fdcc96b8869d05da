"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for Alembic migrations and
relationship resolution.

Modules:
    organization: 조직 (Organization)
    user: 사용자 (User)
    cooperated: 조합원 (Cooperated members)
    session: 인증 세션 (Authenticated sessions)
"""

from coop_members.models.organization import Organization
from coop_members.models.user import User
from coop_members.models.cooperated import Cooperated
from coop_members.models.session import Session

__all__ = [
    "Organization",
    "User",
    "Cooperated",
    "Session",
]
