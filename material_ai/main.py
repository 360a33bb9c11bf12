"""FastAPI application entrypoint for the material master assistant."""

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

from material_ai.logging_config import setup_logging

# Configure logging before anything else
setup_logging()
logger = logging.getLogger(__name__)

from fastapi import FastAPI
from fastapi.responses import FileResponse
from starlette.requests import Request

from material_ai.api.errors import register_exception_handlers
from material_ai.api.middleware.rate_limit import setup_rate_limiting
from material_ai.api.routers import admin, ai, dashboard, lookups
from material_ai.config import Config
from material_ai.data.store import DataStore
from material_ai.importer import DataImporter
from material_ai.llm.client import LLMClient
from material_ai.services import AnalysisService, SuggestionService

FRONTEND_DIR = Path(__file__).parent / "frontend"


@asynccontextmanager
async def lifespan(app: FastAPI):
    config = Config.load()

    data_store = DataStore(use_real_data=config.assistant.use_real_data)

    # External model is optional; without a key suggestions stay local
    llm_client = None
    if config.llm.is_available():
        llm_client = LLMClient(config.llm)
        logger.info("Model suggestions enabled (model=%s)", config.llm.model)
    else:
        logger.info("No model API key configured, using local suggestions only")

    if config.assistant.material_code_rule is None:
        logger.info(
            "No material code rule forced: analyze uses 8 alphanumerics, entry analysis uses ABC123"
        )
    else:
        logger.info("Material code rule forced to %s", config.assistant.material_code_rule)

    suggestion_service = SuggestionService(config.assistant, data_store, llm_client)

    app.state.config = config
    app.state.data_store = data_store
    app.state.llm_client = llm_client
    app.state.suggestion_service = suggestion_service
    app.state.analysis_service = AnalysisService(config.assistant, data_store, suggestion_service)
    app.state.importer = DataImporter(data_store)

    yield

    if llm_client is not None:
        await llm_client.close()


app = FastAPI(title="Material Master Assistant", lifespan=lifespan)
setup_rate_limiting(app)
register_exception_handlers(app)

cors_origins = os.getenv("CORS_ALLOWED_ORIGINS", "")
if cors_origins:
    from fastapi.middleware.cors import CORSMiddleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in cors_origins.split(",")],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.middleware("http")
async def add_api_version_header(request: Request, call_next):
    response = await call_next(request)
    if request.url.path.startswith("/api/"):
        response.headers["X-API-Version"] = "1"
    return response


app.include_router(ai.router)
app.include_router(admin.router)
app.include_router(dashboard.router)
app.include_router(lookups.router)


@app.get("/")
async def root():
    return FileResponse(FRONTEND_DIR / "index.html")


@app.get("/health")
async def health():
    return {"status": "healthy"}
