"""FastAPI 애플리케이션 엔트리포인트 — 미들웨어 및 헬스 체크 등록.

FastAPI application entry point — Middleware and health check registration.
Member and session operations are exposed as services; the HTTP surface
here is limited to operational endpoints.
"""

import logging

from fastapi import FastAPI

from coop_members.config import settings
from coop_members.middleware.axiom_logging import AxiomLoggingMiddleware

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Axiom API 로깅 미들웨어 — Axiom API request/response logging
app.add_middleware(AxiomLoggingMiddleware)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트.

    Health check endpoint for load balancers and monitoring.
    """
    return {"status": "ok"}
