"""세션 관련 Pydantic 응답 스키마 정의.

Session Pydantic response schema definitions.
"""

from datetime import datetime

from pydantic import BaseModel


class SessionResponse(BaseModel):
    """세션 응답 스키마.

    Session response schema with the owning user's email.
    """

    id: str  # 세션 UUID 문자열 (Session UUID as string)
    user_id: str  # 사용자 UUID 문자열 (User UUID as string)
    user_email: str  # 사용자 이메일 — 즉시 로드된 값 (Eager-loaded user email)
    created_at: datetime
