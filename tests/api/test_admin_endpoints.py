"""Tests for /api/admin/* endpoints."""

import json

import httpx
import pytest
from fastapi import FastAPI

from material_ai.api.errors import register_exception_handlers
from material_ai.api.middleware.rate_limit import setup_rate_limiting
from material_ai.api.routers.admin import router as admin_router
from material_ai.importer import DataImporter


@pytest.fixture
def app(data_store):
    app = FastAPI()
    setup_rate_limiting(app)
    register_exception_handlers(app)
    app.state.data_store = data_store
    app.state.importer = DataImporter(data_store)
    app.include_router(admin_router)
    return app


@pytest.fixture
def client(app):
    transport = httpx.ASGITransport(app=app)
    return httpx.AsyncClient(transport=transport, base_url="http://test")


MATERIALS_CSV = b"materialCode,description,unit\nVAL100,Gate Valve 4 inch,EA\nVAL200,Ball Valve 2 inch,EA\n"


class TestImport:
    @pytest.mark.asyncio
    async def test_csv_materials(self, client, data_store):
        async with client:
            resp = await client.post(
                "/api/admin/import/materials",
                files={"file": ("materials.csv", MATERIALS_CSV, "text/csv")},
            )
        assert resp.status_code == 200
        assert resp.json() == {
            "success": True,
            "message": "Materials imported successfully",
            "recordsImported": 2,
            "errors": [],
        }
        assert data_store.client_counts()["materials"] == 2

    @pytest.mark.asyncio
    async def test_json_vendors(self, client, data_store):
        vendors = [{"id": "200900", "name": "Valve World", "category": ["VALVES"]}]
        async with client:
            resp = await client.post(
                "/api/admin/import/vendors",
                files={"file": ("vendors.json", json.dumps(vendors).encode(), "application/json")},
            )
        assert resp.status_code == 200
        assert data_store.client_counts()["vendors"] == 1

    @pytest.mark.asyncio
    async def test_row_errors_reject_import(self, client, data_store):
        content = b"materialCode,description\nVAL100,Gate Valve\nVAL200,\n"
        async with client:
            resp = await client.post(
                "/api/admin/import/materials",
                files={"file": ("materials.csv", content, "text/csv")},
            )
        assert resp.status_code == 422
        body = resp.json()
        assert body["error_code"] == "import_failed"
        assert body["errors"][0]["row"] == 2
        assert data_store.client_counts()["materials"] == 0

    @pytest.mark.asyncio
    async def test_stray_comma_rejects_import(self, client, data_store):
        content = b"materialCode,description,unit\nSTL9,Steel Rod, 10mm,KG\n"
        async with client:
            resp = await client.post(
                "/api/admin/import/materials",
                files={"file": ("materials.csv", content, "text/csv")},
            )
        assert resp.status_code == 422
        body = resp.json()
        assert body["error_code"] == "import_failed"
        assert body["errors"][0]["row"] == 1
        assert data_store.client_counts()["materials"] == 0

    @pytest.mark.asyncio
    async def test_unsupported_file_type(self, client):
        async with client:
            resp = await client.post(
                "/api/admin/import/materials",
                files={"file": ("materials.xlsx", b"PK", "application/octet-stream")},
            )
        assert resp.status_code == 415
        assert resp.json()["error_code"] == "unsupported_media_type"

    @pytest.mark.asyncio
    async def test_unknown_data_type(self, client):
        async with client:
            resp = await client.post(
                "/api/admin/import/plants",
                files={"file": ("plants.csv", b"code\nP001\n", "text/csv")},
            )
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_missing_file(self, client):
        async with client:
            resp = await client.post("/api/admin/import/materials")
        assert resp.status_code == 422


class TestDataSource:
    @pytest.mark.asyncio
    async def test_status(self, client):
        async with client:
            resp = await client.get("/api/admin/data-source")
        assert resp.json() == {
            "useRealData": False,
            "sources": {"materials": "mock", "vendors": "mock", "manufacturers": "mock"},
            "clientCounts": {"materials": 0, "vendors": 0, "manufacturers": 0},
        }

    @pytest.mark.asyncio
    async def test_toggle_after_import(self, client):
        async with client:
            await client.post(
                "/api/admin/import/materials",
                files={"file": ("materials.csv", MATERIALS_CSV, "text/csv")},
            )
            resp = await client.post("/api/admin/data-source", json={"useRealData": True})
        body = resp.json()
        assert body["useRealData"] is True
        assert body["sources"]["materials"] == "client"
        assert body["sources"]["vendors"] == "mock"
