"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from timechimp_mcp import config
from timechimp_mcp.config import Settings, load_settings


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "load_dotenv", lambda: None)
    for name in (
        "TIMECHIMP_API_KEY", "TIMECHIMP_BASE_URL", "TIMECHIMP_API_VERSION",
        "TIMECHIMP_HOST", "TIMECHIMP_PORT", "TIMECHIMP_LOG_JSON", "TIMECHIMP_VERBOSE",
    ):
        monkeypatch.delenv(name, raising=False)


class TestLoadSettings:
    def test_defaults(self) -> None:
        settings = load_settings()
        assert settings.api_key is None
        assert settings.base_url == "https://v2.api.timechimp.com"
        assert settings.api_version == "2.0"
        assert settings.port == 8000
        assert settings.log_json is False

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TIMECHIMP_API_KEY", "secret")
        monkeypatch.setenv("TIMECHIMP_PORT", "9001")
        monkeypatch.setenv("TIMECHIMP_LOG_JSON", "true")
        settings = load_settings()
        assert settings.api_key == "secret"
        assert settings.port == 9001
        assert settings.log_json is True

    def test_blank_key_is_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TIMECHIMP_API_KEY", "")
        assert load_settings().api_key is None

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            Settings().api_key = "x"  # type: ignore[misc]
