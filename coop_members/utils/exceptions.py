"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses for common error patterns
so services can raise without specifying status codes at each call site.

Usage:
    from coop_members.utils.exceptions import NotFoundError, UnprocessableError
    raise NotFoundError("Session not found")
    raise UnprocessableError("document already exists")
"""

from typing import Any

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    404 Not Found exception.
    The detail may be a plain message or a structured error body.

    Args:
        detail: 오류 메시지 또는 본문 (Error message or body, default: "Resource not found")
    """

    def __init__(self, detail: str | dict[str, Any] = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class UnprocessableError(HTTPException):
    """422 Unprocessable Entity 예외 — 비즈니스 검증 실패 시 사용.

    422 Unprocessable Entity exception.
    Raised when a member payload is well-formed but fails business validation
    (empty document, document already registered, unknown organization).

    Args:
        detail: 오류 메시지 (Error message, default: "Unprocessable entity")
    """

    def __init__(self, detail: str = "Unprocessable entity") -> None:
        super().__init__(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=detail)
