"""사용자 SQLAlchemy ORM 모델 정의.

User SQLAlchemy ORM model definition.
Users own authenticated sessions; credentials and issuance live elsewhere.

Tables:
    - users: 사용자 계정 (User accounts)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Boolean, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from coop_members.database import Base


class User(Base):
    """사용자 모델 — 시스템 사용자 계정 정보.

    User model — System user account information.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        email: 이메일, 전역 고유 (Email address, globally unique)
        first_name: 이름 (Given name)
        last_name: 성 (Family name)
        is_active: 활성 상태 (Active status)
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last update timestamp)

    Relationships:
        sessions: 인증 세션 목록 (Authenticated sessions, cascade delete)
    """

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    first_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # 관계 — Relationships
    sessions = relationship("Session", back_populates="user", cascade="all, delete-orphan")
