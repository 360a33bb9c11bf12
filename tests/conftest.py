"""Shared fixtures for material assistant tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from material_ai.config import AssistantConfig, LLMConfig
from material_ai.data.store import DataStore
from material_ai.models.material import Manufacturer, Material, Vendor
from material_ai.services import AnalysisService, SuggestionService

# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def assistant_config() -> AssistantConfig:
    """Assistant config with artificial delays switched off."""
    return AssistantConfig(_env_file=None, simulate_latency=False)


@pytest.fixture
def llm_config() -> LLMConfig:
    return LLMConfig(
        _env_file=None,
        api_key="test-key",
        base_url="https://api.test.com",
        model="test-model",
    )


# ============================================================================
# Data Fixtures
# ============================================================================


@pytest.fixture
def data_store() -> DataStore:
    """Store serving the built-in mock data."""
    return DataStore()


@pytest.fixture
def client_materials() -> list[Material]:
    return [
        Material(id="client_1", material_code="VAL100", description="Gate Valve 4 inch"),
        Material(id="client_2", material_code="VAL200", description="Ball Valve 2 inch"),
    ]


@pytest.fixture
def client_vendors() -> list[Vendor]:
    return [
        Vendor(id="200900", name="Valve World", category=["VALVES"], linked_manufacturers=["300900"]),
        Vendor(id="100900", name="Cheap Valves", category=["VALVES"]),
    ]


@pytest.fixture
def client_manufacturers() -> list[Manufacturer]:
    return [Manufacturer(id="300900", name="ValveCorp", linked_vendors=["200900"])]


# ============================================================================
# Service Fixtures
# ============================================================================


@pytest.fixture
def mock_llm_client():
    client = MagicMock()
    client.model = "test-model"
    client.chat = AsyncMock(return_value="ZCEM\nZCHM")
    client.close = AsyncMock()
    return client


@pytest.fixture
def suggestion_service(assistant_config, data_store) -> SuggestionService:
    return SuggestionService(assistant_config, data_store)


@pytest.fixture
def analysis_service(assistant_config, data_store, suggestion_service) -> AnalysisService:
    return AnalysisService(assistant_config, data_store, suggestion_service)
