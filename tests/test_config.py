"""Settings tests."""

import pytest

from akkuea_curation.config import Settings
from akkuea_curation.curation.types import ProviderConfig


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "CURATION_PROVIDER",
        "XAI_API_KEY",
        "XAI_BASE_URL",
        "XAI_MODEL",
        "CURATION_TIMEOUT_S",
        "ALLOWED_ORIGINS",
        "SUPABASE_URL",
        "SUPABASE_SERVICE_KEY",
        "SUPABASE_SERVICE_ROLE_KEY",
    ):
        monkeypatch.delenv(name, raising=False)


def test_curation_defaults():
    """Provider defaults: xai, no key, public xAI endpoint, grok-3-mini, 12s."""
    s = Settings(_env_file=None)
    assert s.curation_provider == "xai"
    assert s.xai_api_key == ""
    assert s.xai_base_url == "https://api.x.ai/v1"
    assert s.xai_model == "grok-3-mini"
    assert s.curation_timeout_s == 12.0


def test_curation_settings_from_env(monkeypatch):
    """Provider settings come from the environment."""
    monkeypatch.setenv("CURATION_PROVIDER", "grok")
    monkeypatch.setenv("XAI_API_KEY", "xai-secret")
    monkeypatch.setenv("XAI_MODEL", "grok-3")

    config = ProviderConfig.from_settings(Settings(_env_file=None))

    assert config.provider == "grok"
    assert config.api_key == "xai-secret"
    assert config.model == "grok-3"
    assert config.has_api_key


def test_allowed_origins_from_string():
    """allowed_origins should be parsed from a comma-separated string."""
    s = Settings(_env_file=None, allowed_origins="http://localhost:3000,https://akkuea.com")
    assert s.allowed_origins == ["http://localhost:3000", "https://akkuea.com"]


def test_allowed_origins_from_string_with_spaces():
    """Spaces around origins should be stripped."""
    s = Settings(_env_file=None, allowed_origins="http://a.com , https://b.com , http://c.com")
    assert s.allowed_origins == ["http://a.com", "https://b.com", "http://c.com"]


def test_service_role_key_wins():
    """SUPABASE_SERVICE_ROLE_KEY takes precedence over SUPABASE_SERVICE_KEY."""
    s = Settings(
        _env_file=None,
        supabase_url="https://db.test",
        supabase_service_key="old",
        supabase_service_role_key="new",
    )
    assert s.supabase_service_key == "new"
    assert s.supabase_configured


def test_supabase_not_configured_by_default():
    assert not Settings(_env_file=None).supabase_configured
