"""조합원 관련 Pydantic 요청/응답 스키마 정의.

Cooperated (member) Pydantic request/response schema definitions.
Create payloads accept empty document / organization values so the service
can report them with its own business-validation messages.
"""

from datetime import datetime

from pydantic import BaseModel


class CooperatedCreate(BaseModel):
    """조합원 생성 요청 스키마.

    Cooperated creation request schema (single and bulk create).

    Attributes:
        first_name: 이름 (Given name)
        last_name: 성 (Family name)
        email: 이메일 (Email, optional)
        phone: 전화번호 (Phone, optional)
        document: 문서 번호, 서버에서 숫자만 남김 (Document, normalized to digits server-side)
        organization: 소속 조직 UUID 문자열 (Organization UUID as string)
    """

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    document: str | None = None  # "123.456.789-00" 형태 허용 (Punctuation allowed)
    organization: str | None = None


class CooperatedUpdate(BaseModel):
    """조합원 수정 요청 스키마 (부분 업데이트).

    Cooperated update request schema (partial update).
    Only provided fields are updated; omitted fields remain unchanged.
    """

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    document: str | None = None
    organization: str | None = None


class CooperatedResponse(BaseModel):
    """조합원 응답 스키마.

    Cooperated response schema.
    """

    id: str  # 조합원 UUID 문자열 (Member UUID as string)
    organization_id: str  # 소속 조직 UUID 문자열 (Organization UUID as string)
    first_name: str | None
    last_name: str | None
    email: str | None
    phone: str | None
    document: str  # 숫자만 (Digits only)
    created_at: datetime


class DocumentValidationResponse(BaseModel):
    """문서 번호 검증 응답 스키마.

    Response of a document validation lookup. Missing values are empty strings.

    Attributes:
        name: 이름과 성을 공백으로 연결 (First and last name joined by a space)
        document: 정규화된 문서 번호 (Normalized document)
        email: 이메일 (Email)
        phone: 전화번호 (Phone)
    """

    name: str = ""
    document: str = ""
    email: str = ""
    phone: str = ""
