"""조합원(Cooperated) SQLAlchemy ORM 모델 정의.

Cooperated (member) SQLAlchemy ORM model definition.
A cooperated member belongs to exactly one organization and is identified
by a digits-only document number that is unique across the whole table.

Tables:
    - cooperateds: 조합원 (Organization members, soft-deletable)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from coop_members.database import Base


class Cooperated(Base):
    """조합원 모델.

    Cooperated member model.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        organization_id: 소속 조직 FK (Parent organization foreign key)
        first_name: 이름 (Given name)
        last_name: 성 (Family name)
        email: 이메일 (Email address, optional)
        phone: 전화번호 (Phone number, optional)
        document: 숫자만 남긴 신분 문서 번호 (Identity document, digits only, unique)
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last update timestamp)
        deleted_at: 소프트 삭제 일시, NULL이면 활성 (Soft-delete timestamp; NULL = live)
    """

    __tablename__ = "cooperateds"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 소속 조직 FK — Parent organization (CASCADE: 조직 삭제 시 조합원도 삭제)
    organization_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False, index=True)
    first_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    # 문서 번호 — 고유 인덱스, 소프트 삭제된 행도 포함 (Unique index, soft-deleted rows included)
    document: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    # 관계 — Relationships
    organization = relationship("Organization", back_populates="cooperateds")
