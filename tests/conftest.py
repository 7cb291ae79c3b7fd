"""Test fixtures for the Akkuea curation service."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from akkuea_curation.curation.types import CurationResult, ProviderConfig
from akkuea_curation.resources.store import InMemoryResourceStore


@pytest.fixture
def provider_config() -> ProviderConfig:
    """xAI config with an API key set."""
    return ProviderConfig(
        provider="xai",
        api_key="test-key",
        base_url="https://api.x.ai/v1",
        model="grok-3-mini",
        timeout_s=12.0,
    )


@pytest.fixture
def unconfigured_config() -> ProviderConfig:
    """xAI config without an API key."""
    return ProviderConfig(provider="xai", api_key="")


@pytest.fixture
def mock_gateway() -> MagicMock:
    """Gateway stub that approves everything it is asked about."""
    gateway = MagicMock()
    gateway.classify = AsyncMock(return_value=CurationResult.approved("Looks educational"))
    gateway.aclose = AsyncMock()
    return gateway


@pytest.fixture
def store() -> InMemoryResourceStore:
    return InMemoryResourceStore()
