"""Field suggestion service: local keyword scoring with optional model refinement."""

from __future__ import annotations

import asyncio
import logging
import random
from typing import Optional

from material_ai.config import AssistantConfig
from material_ai.data.store import DataStore
from material_ai.exceptions import LLMError
from material_ai.llm.client import LLMClient
from material_ai.llm.parser import filter_against_local, parse_ai_response
from material_ai.llm.prompts import SYSTEM_PROMPT_SUGGESTIONS, build_field_prompt
from material_ai.models.analysis import SuggestionContext
from material_ai.services.suggestions import ANALYSIS_FIELDS, get_local_suggestions

logger = logging.getLogger(__name__)


async def simulate_latency(config: AssistantConfig, min_ms: int, max_ms: int) -> None:
    """Artificial 'AI thinking' pause; skipped when latency simulation is off."""
    if not config.simulate_latency or max_ms <= 0:
        return
    await asyncio.sleep(random.uniform(min_ms, max_ms) / 1000)


class SuggestionService:
    """Produces up to two suggested values for one form field."""

    def __init__(
        self,
        config: AssistantConfig,
        data_store: DataStore,
        llm_client: Optional[LLMClient] = None,
    ) -> None:
        self._config = config
        self._data_store = data_store
        self._llm_client = llm_client

    @property
    def model_enabled(self) -> bool:
        return self._llm_client is not None

    def local(self, field: str, context: SuggestionContext, use_code_hint: bool = False) -> list[str]:
        """Suggestions from the static tables only, no delay and no model call."""
        return get_local_suggestions(
            field,
            context,
            vendors=self._data_store.snapshot().vendors,
            defaults_on_empty=self._config.suggestion_defaults_on_empty,
            use_code_hint=use_code_hint,
        )

    async def suggest(self, field: str, context: SuggestionContext) -> list[str]:
        """Local suggestions, narrowed by the external model when one is configured.

        Any model failure is logged and the local suggestions are returned
        unchanged.
        """
        await simulate_latency(
            self._config,
            self._config.suggestion_delay_min_ms,
            self._config.suggestion_delay_max_ms,
        )
        local_suggestions = self.local(field, context)

        if self._llm_client is None or field not in ANALYSIS_FIELDS:
            return local_suggestions

        try:
            return await self._model_suggestions(field, context, local_suggestions)
        except LLMError as exc:
            logger.warning("Model suggestions failed for %s, using local: %s", field, exc)
        except Exception:
            logger.exception("Unexpected error from model suggestions for %s, using local", field)
        return local_suggestions

    async def _model_suggestions(
        self,
        field: str,
        context: SuggestionContext,
        local_suggestions: list[str],
    ) -> list[str]:
        prompt = build_field_prompt(field, context)
        reply = await self._llm_client.chat(
            [{"role": "user", "content": prompt}],
            SYSTEM_PROMPT_SUGGESTIONS,
        )
        ai_suggestions = parse_ai_response(reply, field)
        return filter_against_local(ai_suggestions, local_suggestions)
