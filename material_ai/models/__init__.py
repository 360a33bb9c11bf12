"""Pydantic models for the material master assistant."""

from material_ai.models.analysis import (
    AIAnalysis,
    AnalyzeRequest,
    AnalyzeResponse,
    DuplicateMatch,
    MaterialDraft,
    SuggestionContext,
    SuggestionRequest,
    SuggestionResponse,
    ValidationResult,
)
from material_ai.models.material import Manufacturer, Material, MaterialStatus, Vendor

__all__ = [
    "AIAnalysis",
    "AnalyzeRequest",
    "AnalyzeResponse",
    "DuplicateMatch",
    "Manufacturer",
    "Material",
    "MaterialDraft",
    "MaterialStatus",
    "SuggestionContext",
    "SuggestionRequest",
    "SuggestionResponse",
    "ValidationResult",
    "Vendor",
]
