"""Shared configuration for the TimeChimp MCP server."""
import os
from dotenv import load_dotenv
from pydantic import BaseModel

BASE_URL = "https://v2.api.timechimp.com"
API_VERSION = "2.0"

_TRUTHY = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    model_config = {"frozen": True}

    api_key: str | None = None
    base_url: str = BASE_URL
    api_version: str = API_VERSION
    host: str = "0.0.0.0"
    port: int = 8000
    log_json: bool = False
    verbose: bool = False


def _flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


def load_settings() -> Settings:
    """Read settings from the environment (and a .env file, if present)."""
    load_dotenv()
    return Settings(
        api_key=os.getenv("TIMECHIMP_API_KEY") or None,
        base_url=os.getenv("TIMECHIMP_BASE_URL", BASE_URL),
        api_version=os.getenv("TIMECHIMP_API_VERSION", API_VERSION),
        host=os.getenv("TIMECHIMP_HOST", "0.0.0.0"),
        port=int(os.getenv("TIMECHIMP_PORT", "8000")),
        log_json=_flag("TIMECHIMP_LOG_JSON"),
        verbose=_flag("TIMECHIMP_VERBOSE"),
    )
