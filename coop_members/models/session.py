"""세션 모델 — 인증된 사용자 세션 추적.

Session model — Tracks authenticated user sessions.
Each session is bound to a user, which is always loaded with it.
Ending a session stamps deleted_at instead of removing the row.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from coop_members.database import Base


class Session(Base):
    """세션 테이블.

    Authenticated session table.

    Attributes:
        id: 고유 식별자 (Primary key UUID)
        user_id: 소유 사용자 ID (Owner user UUID)
        created_at: 생성 일시 (Creation timestamp)
        deleted_at: 종료 일시, NULL이면 활성 (End timestamp; NULL = active)
    """

    __tablename__ = "sessions"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    # selectin: 세션 조회 시 사용자를 항상 함께 로드 (User is always loaded with the session)
    user = relationship("User", back_populates="sessions", lazy="selectin")
