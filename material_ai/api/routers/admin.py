"""Admin endpoints: client data import and data-source toggle.

Endpoints:
    POST /api/admin/import/{data_type}   Upload a .csv or .json file of materials, vendors or manufacturers
    GET  /api/admin/data-source          Current data source and client record counts
    POST /api/admin/data-source          Switch between mock and imported client data
"""

import logging

from fastapi import APIRouter, File, Request, UploadFile

from material_ai.api.middleware.rate_limit import limiter
from material_ai.data.store import DataStore
from material_ai.importer import parse_upload
from material_ai.models.errors import ErrorResponse
from material_ai.models.imports import DataSourceStatus, DataSourceUpdateRequest, DataType, ImportResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["admin"])


def _data_source_status(store: DataStore) -> DataSourceStatus:
    return DataSourceStatus(
        use_real_data=store.use_real_data,
        sources=store.snapshot().sources,
        client_counts=store.client_counts(),
    )


@router.post(
    "/import/{data_type}",
    response_model=ImportResult,
    responses={415: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
@limiter.limit("10/minute")
async def import_data(request: Request, data_type: DataType, file: UploadFile = File(...)):
    """Replace the client list for data_type with the uploaded records.

    Malformed files and invalid rows are rejected as a whole (422) and
    leave the current client data untouched.
    """
    content = await file.read()
    rows = parse_upload(file.filename or "", content)
    result = request.app.state.importer.import_rows(data_type, rows)
    logger.info("Imported %d %s from %s", result.records_imported, data_type, file.filename)
    return result


@router.get("/data-source", response_model=DataSourceStatus)
async def get_data_source(request: Request):
    return _data_source_status(request.app.state.data_store)


@router.post("/data-source", response_model=DataSourceStatus)
async def set_data_source(request: Request, body: DataSourceUpdateRequest):
    store: DataStore = request.app.state.data_store
    store.set_use_real_data(body.use_real_data)
    return _data_source_status(store)
