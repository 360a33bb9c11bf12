"""Suggestion, validation, duplicate and risk services."""

from material_ai.services.analysis import AnalysisService
from material_ai.services.suggestion_service import SuggestionService

__all__ = ["AnalysisService", "SuggestionService"]
