"""Tests for /api/ai/* endpoints."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest
from fastapi import FastAPI

from material_ai.api.errors import register_exception_handlers
from material_ai.api.middleware.rate_limit import setup_rate_limiting
from material_ai.api.routers.ai import router as ai_router
from material_ai.services import AnalysisService, SuggestionService


def _build_app(assistant_config, data_store, llm_client=None):
    app = FastAPI()
    setup_rate_limiting(app)
    register_exception_handlers(app)
    suggestion_service = SuggestionService(assistant_config, data_store, llm_client)
    app.state.data_store = data_store
    app.state.llm_client = llm_client
    app.state.suggestion_service = suggestion_service
    app.state.analysis_service = AnalysisService(assistant_config, data_store, suggestion_service)
    app.include_router(ai_router)
    return app


@pytest.fixture
def app(assistant_config, data_store):
    return _build_app(assistant_config, data_store)


@pytest.fixture
def client(app):
    transport = httpx.ASGITransport(app=app)
    return httpx.AsyncClient(transport=transport, base_url="http://test")


class TestStatus:
    @pytest.mark.asyncio
    async def test_local_only(self, client):
        async with client:
            resp = await client.get("/api/ai/status")
        assert resp.json() == {"modelEnabled": False, "model": None}

    @pytest.mark.asyncio
    async def test_with_model(self, assistant_config, data_store, mock_llm_client):
        app = _build_app(assistant_config, data_store, mock_llm_client)
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            resp = await client.get("/api/ai/status")
        assert resp.json() == {"modelEnabled": True, "model": "test-model"}


class TestSuggestions:
    @pytest.mark.asyncio
    async def test_material_type(self, client):
        async with client:
            resp = await client.post(
                "/api/ai/suggestions",
                json={"field": "materialType", "context": {"description": "cement"}},
            )
        assert resp.status_code == 200
        assert resp.json() == {"suggestions": ["ZCHM", "ZCEM"]}

    @pytest.mark.asyncio
    async def test_unknown_field_is_empty(self, client):
        async with client:
            resp = await client.post("/api/ai/suggestions", json={"field": "plantCode"})
        assert resp.status_code == 200
        assert resp.json() == {"suggestions": []}

    @pytest.mark.asyncio
    async def test_missing_field_is_422(self, client):
        async with client:
            resp = await client.post("/api/ai/suggestions", json={"context": {}})
        assert resp.status_code == 422
        assert resp.json()["error_code"] == "validation_error"

    @pytest.mark.asyncio
    async def test_malformed_json_is_422(self, client):
        async with client:
            resp = await client.post(
                "/api/ai/suggestions",
                content=b"{not json",
                headers={"Content-Type": "application/json"},
            )
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_service_failure_is_500(self, client, app):
        with patch.object(
            app.state.suggestion_service, "suggest", AsyncMock(side_effect=RuntimeError("boom"))
        ):
            async with client:
                resp = await client.post("/api/ai/suggestions", json={"field": "materialType"})
        assert resp.status_code == 500
        assert resp.json() == {"detail": "Failed to get suggestions", "error_code": "internal_error"}

    @pytest.mark.asyncio
    async def test_rate_limited(self, client):
        async with client:
            for _ in range(60):
                await client.post("/api/ai/suggestions", json={"field": "plantCode"})
            resp = await client.post("/api/ai/suggestions", json={"field": "plantCode"})
        assert resp.status_code == 429
        assert resp.json()["error_code"] == "rate_limited"


class TestAnalyze:
    @pytest.mark.asyncio
    async def test_camel_case_response(self, client):
        async with client:
            resp = await client.post(
                "/api/ai/analyze",
                json={
                    "material": "S15",
                    "materialDescription": "Portland Cement",
                    "materialType": "ZCEM",
                    "materialGroup": "48ABC (PORTLAND CEMENT)",
                },
            )
        assert resp.status_code == 200
        body = resp.json()
        assert set(body["suggestions"]) == {
            "baseUnitOfMeasure",
            "materialType",
            "industrySector",
            "materialGroup",
        }
        assert body["duplicates"] == []
        assert body["riskScore"] == 15
        assert body["validations"][0]["field"] == "material"

    @pytest.mark.asyncio
    async def test_empty_body_is_accepted(self, client):
        async with client:
            resp = await client.post("/api/ai/analyze", json={})
        assert resp.status_code == 200
        assert resp.json()["riskScore"] == 0

    @pytest.mark.asyncio
    async def test_failure_is_500(self, client, app):
        with patch.object(
            app.state.analysis_service, "analyze", AsyncMock(side_effect=RuntimeError("boom"))
        ):
            async with client:
                resp = await client.post("/api/ai/analyze", json={})
        assert resp.status_code == 500
        assert resp.json()["detail"] == "Failed to analyze material entry"


class TestEntryAnalysis:
    @pytest.mark.asyncio
    async def test_duplicate_detected(self, client):
        async with client:
            resp = await client.post(
                "/api/ai/entry-analysis",
                json={"materialCode": "CEM002", "description": "Portland Cement 50kg", "vendorId": "200003"},
            )
        body = resp.json()
        assert resp.status_code == 200
        assert body["duplicates"][0]["matchType"] == "exact"
        assert body["duplicates"][0]["material"]["materialCode"] == "CEM001"
        assert body["riskScore"] == 20


class TestDuplicatesAndLinkage:
    @pytest.mark.asyncio
    async def test_duplicates(self, client):
        async with client:
            resp = await client.post("/api/ai/duplicates", json={"description": "10mm Steel Rod"})
        assert len(resp.json()) == 2

    @pytest.mark.asyncio
    async def test_linkage_warning(self, client):
        async with client:
            resp = await client.post(
                "/api/ai/linkage", json={"vendorId": "200001", "manufacturerId": "200102"}
            )
        body = resp.json()
        assert body["status"] == "warning"
        assert body["field"] == "linkage"
