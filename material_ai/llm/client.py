"""Async client for an OpenAI-compatible chat completion API."""

from __future__ import annotations

import logging

from openai import APIConnectionError, APIStatusError, APITimeoutError, AsyncOpenAI, RateLimitError

from material_ai.config import LLMConfig
from material_ai.exceptions import LLMConnectionError, LLMRateLimitError, LLMResponseError

logger = logging.getLogger(__name__)


class LLMClient:
    """Non-streaming chat client used to refine field suggestions."""

    def __init__(self, config: LLMConfig) -> None:
        client_kwargs = {"api_key": config.api_key, "base_url": config.base_url}
        if config.timeout_seconds is not None:
            client_kwargs["timeout"] = float(config.timeout_seconds)
        self._client = AsyncOpenAI(**client_kwargs)
        self._model = config.model
        self._max_tokens = config.max_tokens
        self._temperature = config.temperature

    @property
    def model(self) -> str:
        return self._model

    async def chat(self, messages: list[dict[str, str]], system_prompt: str) -> str:
        """Chat completion. Returns the full reply text.

        Raises:
            LLMConnectionError: On network/API connection issues or timeouts.
            LLMRateLimitError: When the API rate limit is hit.
            LLMResponseError: On any other error status (auth, bad request, ...).
        """
        full_messages = [{"role": "system", "content": system_prompt}] + messages
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=full_messages,
                max_tokens=self._max_tokens,
                temperature=self._temperature,
                stream=False,
            )
            return response.choices[0].message.content or ""
        except RateLimitError as exc:
            logger.warning("Model API rate limit hit: %s", exc)
            raise LLMRateLimitError(str(exc)) from exc
        except (APIConnectionError, APITimeoutError) as exc:
            logger.error("Model API connection error: %s", exc)
            raise LLMConnectionError(str(exc)) from exc
        except APIStatusError as exc:
            logger.error("Model API returned status %s: %s", exc.status_code, exc)
            raise LLMResponseError(str(exc)) from exc

    async def close(self) -> None:
        """Shutdown the underlying httpx client."""
        await self._client.close()
