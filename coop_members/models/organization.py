"""조직 SQLAlchemy ORM 모델 정의.

Organization SQLAlchemy ORM model definition.
The organization is the tenant every cooperated member belongs to.

Tables:
    - organizations: 최상위 테넌트 (Top-level tenant)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Boolean, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from coop_members.database import Base


class Organization(Base):
    """조직(테넌트) 모델 — 시스템의 최상위 엔티티.

    Organization (tenant) model — Top-level entity in the system.
    Cooperated members are scoped under an organization.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        name: 조직 이름 (Organization name)
        is_active: 활성 상태 (Active status flag)
        created_at: 생성 일시 UTC (Creation timestamp in UTC)
        updated_at: 수정 일시 UTC (Last update timestamp in UTC)

    Relationships:
        cooperateds: 소속 조합원 목록 (Members of this organization, cascade delete)
    """

    __tablename__ = "organizations"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 조직 이름 — Organization display name (max 255 chars, required)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # 관계 — Relationships (cascade: 조직 삭제 시 조합원 일괄 삭제)
    cooperateds = relationship("Cooperated", back_populates="organization", cascade="all, delete-orphan")
