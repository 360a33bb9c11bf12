"""Material entry analysis: suggestions, validations, duplicates and risk."""

from __future__ import annotations

import asyncio
import logging

from material_ai.config import AssistantConfig
from material_ai.data.store import DataStore
from material_ai.models.analysis import (
    AIAnalysis,
    AnalyzeRequest,
    AnalyzeResponse,
    DuplicateMatch,
    MaterialDraft,
    SuggestionContext,
    ValidationResult,
)
from material_ai.services.duplicates import detect_duplicates
from material_ai.services.linkage import validate_vendor_manufacturer_link
from material_ai.services.risk import risk_from_validations
from material_ai.services.suggestion_service import SuggestionService, simulate_latency
from material_ai.services.suggestions import ANALYSIS_FIELDS, VENDOR_ID
from material_ai.services.validators import (
    ABC123_RULE,
    SAP8_RULE,
    resolve_code_rule,
    validate_analysis_entry,
    validate_fields,
)

logger = logging.getLogger(__name__)

ENTRY_SUGGESTION_FIELDS = ANALYSIS_FIELDS + (VENDOR_ID,)


class AnalysisService:
    """Combines the individual checks into the two analysis flavours.

    ``analyze`` backs the SAP entry form: four concurrent field suggestions,
    format warnings and a risk score, never duplicates. ``analyze_entry``
    backs the quick-entry form and adds duplicate detection and the
    vendor-manufacturer link check.
    """

    def __init__(
        self,
        config: AssistantConfig,
        data_store: DataStore,
        suggestion_service: SuggestionService,
    ) -> None:
        self._config = config
        self._data_store = data_store
        self._suggestions = suggestion_service

    async def analyze(self, entry: AnalyzeRequest) -> AnalyzeResponse:
        await simulate_latency(
            self._config,
            self._config.analysis_delay_min_ms,
            self._config.analysis_delay_max_ms,
        )
        context = SuggestionContext(
            description=entry.description_text,
            material_type=entry.material_type,
            material_code=entry.material,
        )

        try:
            results = await asyncio.gather(
                *(self._suggestions.suggest(field, context) for field in ANALYSIS_FIELDS)
            )
            suggestions = dict(zip(ANALYSIS_FIELDS, results))
        except Exception:
            logger.exception("Suggestion fan-out failed, computing fallback suggestions")
            suggestions = {
                field: self._suggestions.local(field, context, use_code_hint=True)
                for field in ANALYSIS_FIELDS
            }

        code_rule = resolve_code_rule(self._config.material_code_rule, SAP8_RULE)
        validations = validate_analysis_entry(entry, suggestions, code_rule)
        return AnalyzeResponse(
            suggestions=suggestions,
            validations=validations,
            risk_score=risk_from_validations(validations),
            duplicates=[],
        )

    async def analyze_entry(self, draft: MaterialDraft) -> AIAnalysis:
        data = self._data_store.snapshot()

        duplicates = detect_duplicates(
            draft.description, data.materials, threshold=self._config.duplicate_threshold
        )

        code_rule = resolve_code_rule(self._config.material_code_rule, ABC123_RULE)
        validations = validate_fields(draft, data, code_rule)
        if draft.vendor_id and draft.manufacturer_id:
            validations.append(
                validate_vendor_manufacturer_link(draft.vendor_id, draft.manufacturer_id, data)
            )

        context = SuggestionContext(
            description=draft.description,
            material_type=draft.material_type,
            material_code=draft.material_code,
            category=draft.category,
        )
        suggestions = {field: self._suggestions.local(field, context) for field in ENTRY_SUGGESTION_FIELDS}

        return AIAnalysis(
            duplicates=duplicates,
            validations=validations,
            suggestions=suggestions,
            risk_score=risk_from_validations(validations, duplicate_count=len(duplicates)),
        )

    def find_duplicates(self, description: str) -> list[DuplicateMatch]:
        data = self._data_store.snapshot()
        return detect_duplicates(description, data.materials, threshold=self._config.duplicate_threshold)

    def check_linkage(self, vendor_id: str, manufacturer_id: str) -> ValidationResult:
        return validate_vendor_manufacturer_link(vendor_id, manufacturer_id, self._data_store.snapshot())
