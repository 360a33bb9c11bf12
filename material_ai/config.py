"""
Configuration Management Module

Responsibilities:
1. Read the external-model (OpenAI-compatible) credentials from environment variables
2. Read assistant behaviour switches (simulated latency, data source, open rule choices)
3. Config validation and defaults

Environment Variables:
    OPENAI_API_KEY      - API key; when empty the external-model path is disabled
    OPENAI_BASE_URL     - API base URL (default: https://api.openai.com/v1)
    OPENAI_MODEL        - Model name (default: gpt-4o)
    ASSISTANT_*         - see AssistantConfig
"""

from typing import Literal, Optional

from pydantic import Field, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from material_ai.exceptions import ConfigError


class LLMConfig(BaseSettings):
    """External model API configuration.

    Loaded once at process start from environment variables (OPENAI_*)
    or a .env file. An empty api_key silently disables the model path.
    """

    model_config = SettingsConfigDict(
        env_prefix="OPENAI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_key: str = Field(default="", description="API key")
    base_url: str = Field(default="https://api.openai.com/v1", description="API base URL")
    model: str = Field(default="gpt-4o", description="Chat model name")
    temperature: float = Field(default=0.1, ge=0.0, le=2.0)
    max_tokens: int = Field(default=100, ge=1, le=4096)
    timeout_seconds: Optional[float] = Field(
        default=None,
        description="Request timeout; None keeps the HTTP client default",
    )

    def is_available(self) -> bool:
        """Check if the API key is configured."""
        return bool(self.api_key)


class AssistantConfig(BaseSettings):
    """Assistant behaviour configuration."""

    model_config = SettingsConfigDict(
        env_prefix="ASSISTANT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    simulate_latency: bool = Field(True, description="Insert artificial 'thinking' delays")
    suggestion_delay_min_ms: int = Field(1000, ge=0)
    suggestion_delay_max_ms: int = Field(2000, ge=0)
    analysis_delay_min_ms: int = Field(3000, ge=0)
    analysis_delay_max_ms: int = Field(5000, ge=0)

    use_real_data: bool = Field(False, description="Start with imported client data enabled")

    material_code_rule: Optional[Literal["sap8", "abc123"]] = Field(
        None,
        description="Force one material code rule on every path; unset keeps each path's own rule",
    )
    suggestion_defaults_on_empty: bool = Field(
        False,
        description="Return fixed default codes when no keyword matches",
    )
    duplicate_threshold: float = Field(0.7, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def validate_delay_ranges(self) -> "AssistantConfig":
        if self.suggestion_delay_min_ms > self.suggestion_delay_max_ms:
            raise ValueError("suggestion_delay_min_ms must not exceed suggestion_delay_max_ms")
        if self.analysis_delay_min_ms > self.analysis_delay_max_ms:
            raise ValueError("analysis_delay_min_ms must not exceed analysis_delay_max_ms")
        return self


class Config:
    """Main Config Class - Factory Pattern (NOT Singleton).

    Built once in the app lifespan and stored on app.state; tests build
    their own instances.
    """

    def __init__(self, llm: LLMConfig, assistant: AssistantConfig):
        self.llm = llm
        self.assistant = assistant

    @classmethod
    def load(cls) -> "Config":
        """Factory method to load config from the environment (.env included).

        Raises:
            ConfigError: If an environment value is invalid.
        """
        try:
            return cls(llm=LLMConfig(), assistant=AssistantConfig())
        except ValidationError as exc:
            raise ConfigError(f"Invalid configuration: {exc}") from exc

