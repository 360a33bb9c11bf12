"""Tests for material_ai/config.py"""

import pytest
from pydantic import ValidationError

from material_ai.config import AssistantConfig, Config, LLMConfig
from material_ai.exceptions import ConfigError


class TestLLMConfig:
    def test_defaults(self):
        config = LLMConfig(_env_file=None, api_key="")
        assert config.model == "gpt-4o"
        assert config.temperature == 0.1
        assert config.max_tokens == 100
        assert config.timeout_seconds is None
        assert not config.is_available()

    def test_available_with_key(self):
        assert LLMConfig(_env_file=None, api_key="sk-test").is_available()

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "env-key")
        monkeypatch.setenv("OPENAI_MODEL", "gpt-4o-mini")
        config = LLMConfig(_env_file=None)
        assert config.api_key == "env-key"
        assert config.model == "gpt-4o-mini"

    def test_temperature_bounds(self):
        with pytest.raises(ValidationError):
            LLMConfig(_env_file=None, temperature=3.0)


class TestAssistantConfig:
    def test_defaults(self, monkeypatch):
        for name in ("SIMULATE_LATENCY", "USE_REAL_DATA", "MATERIAL_CODE_RULE"):
            monkeypatch.delenv(f"ASSISTANT_{name}", raising=False)
        config = AssistantConfig(_env_file=None)
        assert config.simulate_latency is True
        assert (config.suggestion_delay_min_ms, config.suggestion_delay_max_ms) == (1000, 2000)
        assert (config.analysis_delay_min_ms, config.analysis_delay_max_ms) == (3000, 5000)
        assert config.use_real_data is False
        assert config.material_code_rule is None
        assert config.suggestion_defaults_on_empty is False
        assert config.duplicate_threshold == 0.7

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("ASSISTANT_MATERIAL_CODE_RULE", "sap8")
        monkeypatch.setenv("ASSISTANT_SIMULATE_LATENCY", "false")
        config = AssistantConfig(_env_file=None)
        assert config.material_code_rule == "sap8"
        assert config.simulate_latency is False

    def test_unknown_code_rule(self):
        with pytest.raises(ValidationError):
            AssistantConfig(_env_file=None, material_code_rule="iso")

    def test_inverted_delay_range(self):
        with pytest.raises(ValidationError, match="must not exceed"):
            AssistantConfig(_env_file=None, suggestion_delay_min_ms=3000, suggestion_delay_max_ms=1000)


class TestConfigLoad:
    def test_load(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "env-key")
        config = Config.load()
        assert config.llm.api_key == "env-key"
        assert isinstance(config.assistant, AssistantConfig)

    def test_invalid_environment_raises_config_error(self, monkeypatch):
        monkeypatch.setenv("ASSISTANT_DUPLICATE_THRESHOLD", "5")
        with pytest.raises(ConfigError, match="Invalid configuration"):
            Config.load()
