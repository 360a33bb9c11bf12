"""AI assistance endpoints: field suggestions, entry analysis, duplicates, linkage."""

import logging
from typing import List

from fastapi import APIRouter, HTTPException, Request

from material_ai.api.middleware.rate_limit import limiter
from material_ai.models.analysis import (
    AIAnalysis,
    AnalyzeRequest,
    AnalyzeResponse,
    DuplicateMatch,
    DuplicateSearchRequest,
    LinkageRequest,
    MaterialDraft,
    SuggestionRequest,
    SuggestionResponse,
    ValidationResult,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ai", tags=["ai"])


@router.get("/status")
async def ai_status(request: Request):
    """Report whether suggestions are refined by an external model."""
    service = request.app.state.suggestion_service
    llm_client = getattr(request.app.state, "llm_client", None)
    return {
        "modelEnabled": service.model_enabled,
        "model": llm_client.model if llm_client is not None else None,
    }


@router.post("/suggestions", response_model=SuggestionResponse)
@limiter.limit("60/minute")
async def get_suggestions(request: Request, body: SuggestionRequest):
    """Up to two suggested values for one form field."""
    service = request.app.state.suggestion_service
    try:
        suggestions = await service.suggest(body.field, body.context)
    except Exception as exc:
        logger.exception("Error in suggestions for field %s", body.field)
        raise HTTPException(status_code=500, detail="Failed to get suggestions") from exc
    return SuggestionResponse(suggestions=suggestions)


@router.post("/analyze", response_model=AnalyzeResponse)
@limiter.limit("30/minute")
async def analyze(request: Request, body: AnalyzeRequest):
    """SAP entry form analysis: suggestions for four fields, warnings and risk score."""
    service = request.app.state.analysis_service
    try:
        return await service.analyze(body)
    except Exception as exc:
        logger.exception("Error in material analysis")
        raise HTTPException(status_code=500, detail="Failed to analyze material entry") from exc


@router.post("/entry-analysis", response_model=AIAnalysis)
@limiter.limit("60/minute")
async def analyze_entry(request: Request, body: MaterialDraft):
    """Quick-entry form analysis including duplicate detection."""
    service = request.app.state.analysis_service
    try:
        return await service.analyze_entry(body)
    except Exception as exc:
        logger.exception("Error in entry analysis")
        raise HTTPException(status_code=500, detail="Failed to analyze material entry") from exc


@router.post("/duplicates", response_model=List[DuplicateMatch])
@limiter.limit("60/minute")
async def find_duplicates(request: Request, body: DuplicateSearchRequest):
    return request.app.state.analysis_service.find_duplicates(body.description)


@router.post("/linkage", response_model=ValidationResult)
async def check_linkage(request: Request, body: LinkageRequest):
    return request.app.state.analysis_service.check_linkage(body.vendor_id, body.manufacturer_id)
