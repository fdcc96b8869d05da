"""Axiom API 로깅 미들웨어.

Axiom API logging middleware.
Sends one structured event per request to Axiom: method, path, route
template, masked body, status code and error reason. Document numbers are
personal data and are masked together with secrets.
"""

import json
import logging
import re
import time
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from axiom_py import Client as AxiomClient

from coop_members.config import settings

logger = logging.getLogger(__name__)

# 마스킹 대상 필드 패턴 — Fields to mask in request/response bodies
_SENSITIVE_KEYS = re.compile(
    r"(password|secret|token|authorization|api_key|apikey|credential|document)",
    re.IGNORECASE,
)

# 로깅 제외 경로 — Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}

# 목록 본문은 앞부분만 기록 — Only the head of a list body is logged
_MAX_LIST_ITEMS = 20


def mask_sensitive(data: Any, depth: int = 0) -> Any:
    """민감 필드 자동 마스킹 — Recursively mask sensitive fields in dicts/lists.

    Lists keep their first 20 items and nesting below depth 5 is elided.
    """
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            k: "***" if _SENSITIVE_KEYS.search(str(k)) else mask_sensitive(v, depth + 1)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [mask_sensitive(item, depth + 1) for item in data[:_MAX_LIST_ITEMS]]
    return data


def _truncate(value: Any, max_len: int = 2000) -> Any:
    if isinstance(value, str) and len(value) > max_len:
        return value[:max_len] + "...(truncated)"
    return value


async def _read_error(response: Response) -> tuple[Response, str]:
    """에러 응답 본문에서 사유를 꺼내고, 소비한 본문으로 응답을 다시 만듭니다.

    Drain an error response, return a rebuilt response and the reason
    (``detail`` when the body is JSON, JSON-encoded when it is structured).
    """
    body = b""
    async for chunk in response.body_iterator:
        body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")

    try:
        data = json.loads(body)
        detail = data.get("detail", data) if isinstance(data, dict) else data
        reason = detail if isinstance(detail, str) else json.dumps(detail)
    except (json.JSONDecodeError, UnicodeDecodeError):
        reason = body.decode("utf-8", errors="replace")

    rebuilt = Response(
        content=body,
        status_code=response.status_code,
        headers=dict(response.headers),
        media_type=response.media_type,
    )
    return rebuilt, reason[:500]


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청/응답을 Axiom에 로깅하는 미들웨어.

    Middleware that logs API requests and responses to Axiom.
    Passes requests straight through when Axiom is not configured.

    Path parameters are not logged separately: member ids already appear in
    ``path``, and ``route`` carries the template to group events by.
    """

    def __init__(self, app: Any, client: AxiomClient | None = None) -> None:
        super().__init__(app)
        self._client: AxiomClient | None = client
        self._dataset: str = settings.AXIOM_DATASET

        if self._client is None and settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in _SKIP_PATHS or not self._client:
            return await call_next(request)

        start_time = time.time()
        event: dict[str, Any] = {
            "service": settings.APP_NAME,
            "method": request.method,
            "path": request.url.path,
            "status_code": 500,
        }
        if request.query_params:
            event["query_params"] = mask_sensitive(dict(request.query_params))

        if request.method in ("POST", "PUT", "PATCH"):
            try:
                body_bytes = await request.body()
                if body_bytes:
                    payload = json.loads(body_bytes)
                    # 일괄 등록 — bulk payloads record their full size
                    if isinstance(payload, list):
                        event["items"] = len(payload)
                    event["request_body"] = _truncate(mask_sensitive(payload))
            except (json.JSONDecodeError, UnicodeDecodeError):
                event["request_body"] = "(non-json body)"

        try:
            response = await call_next(request)
            event["status_code"] = response.status_code
            if response.status_code >= 400:
                response, event["error"] = await _read_error(response)
        except Exception as exc:
            event["error"] = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            route = request.scope.get("route")
            if route is not None:
                event["route"] = route.path
            event["duration_ms"] = round((time.time() - start_time) * 1000, 2)

            try:
                self._client.ingest_events(self._dataset, [event])
            except Exception:
                logger.warning(
                    "Axiom ingest failed for %s %s", request.method, request.url.path, exc_info=True
                )

        return response
