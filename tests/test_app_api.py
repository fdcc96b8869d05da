"""애플리케이션 및 로깅 미들웨어 테스트.

Application and logging middleware tests — Health check, sensitive-field
masking, and the Axiom event shape for error responses.
"""

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from coop_members.middleware.axiom_logging import AxiomLoggingMiddleware, mask_sensitive
from coop_members.utils.exceptions import NotFoundError


class _RecordingAxiom:
    """ingest_events 호출을 기록하는 Axiom 클라이언트 대역."""

    def __init__(self) -> None:
        self.events: list[dict] = []

    def ingest_events(self, dataset: str, events: list[dict]) -> None:
        self.events.extend(events)


def _app_with(client: _RecordingAxiom) -> FastAPI:
    app = FastAPI()
    app.add_middleware(AxiomLoggingMiddleware, client=client)

    @app.post("/members/validate")
    async def validate(payload: dict) -> dict:
        raise NotFoundError({"status": 404, "errors": "cooperatedNotFound"})

    @app.post("/members")
    async def create(payload: dict) -> dict:
        return {"ok": True}

    return app


class TestHealth:
    """헬스 체크 테스트."""

    async def test_health(self, client: AsyncClient):
        res = await client.get("/health")
        assert res.status_code == 200
        assert res.json() == {"status": "ok"}


class TestMasking:
    """민감 필드 마스킹 테스트."""

    def test_masks_document_and_secrets(self):
        data = {
            "first_name": "Ana",
            "document": "123.456.789-09",
            "nested": {"api_key": "k", "phone": "1"},
        }
        masked = mask_sensitive(data)
        assert masked["first_name"] == "Ana"
        assert masked["document"] == "***"
        assert masked["nested"] == {"api_key": "***", "phone": "1"}

    def test_truncates_long_lists(self):
        masked = mask_sensitive([{"document": str(i)} for i in range(50)])
        assert len(masked) == 20
        assert all(item["document"] == "***" for item in masked)


class TestAxiomLogging:
    """Axiom 로깅 미들웨어 테스트."""

    async def test_logs_error_detail(self):
        """에러 응답의 사유가 로그에 포함됨."""
        recorder = _RecordingAxiom()
        transport = ASGITransport(app=_app_with(recorder))
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            res = await ac.post("/members/validate", json={"document": "000"})

        assert res.status_code == 404
        assert res.json()["detail"] == {"status": 404, "errors": "cooperatedNotFound"}

        event = recorder.events[0]
        assert event["status_code"] == 404
        assert event["request_body"] == {"document": "***"}
        assert "cooperatedNotFound" in event["error"]

    async def test_logs_success_without_error(self):
        """성공 응답은 error 필드 없이 기록."""
        recorder = _RecordingAxiom()
        transport = ASGITransport(app=_app_with(recorder))
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            res = await ac.post("/members", json={"first_name": "Ana"})

        assert res.status_code == 200
        event = recorder.events[0]
        assert event["method"] == "POST"
        assert event["path"] == "/members"
        assert "error" not in event

    async def test_logs_route_and_bulk_size(self):
        """라우트 템플릿과 일괄 요청 건수를 기록."""
        recorder = _RecordingAxiom()
        app = FastAPI()
        app.add_middleware(AxiomLoggingMiddleware, client=recorder)

        @app.post("/organizations/{organization_id}/members/bulk")
        async def bulk(organization_id: str, payload: list[dict]) -> dict:
            return {"inserted": len(payload)}

        rows = [{"document": str(i)} for i in range(25)]
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            res = await ac.post("/organizations/abc/members/bulk", json=rows)

        assert res.status_code == 200
        event = recorder.events[0]
        assert event["route"] == "/organizations/{organization_id}/members/bulk"
        assert event["path"] == "/organizations/abc/members/bulk"
        assert event["items"] == 25
        assert len(event["request_body"]) == 20
