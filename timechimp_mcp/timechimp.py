"""Authenticated requests against the TimeChimp v2 API."""
import httpx
import structlog

from .config import Settings
from .errors import ConfigurationError, ProtocolError, TransportError, UpstreamError

log = structlog.get_logger(__name__)


class TimechimpClient:
    """Issues exactly one request per call. No retries, no timeout."""

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self.settings = settings
        self._transport = transport

    def headers(self, extra: dict | None = None) -> dict:
        headers = dict(extra or {})
        # Fixed headers go last so callers can add to them but never drop them.
        headers.update({
            "api-key": self.settings.api_key,
            "Content-Type": "application/json",
            "Accept": "application/json",
            "api-version": self.settings.api_version,
        })
        return headers

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: list[tuple[str, str]] | None = None,
        json=None,
        headers: dict | None = None,
    ):
        if not self.settings.api_key:
            raise ConfigurationError("TIMECHIMP_API_KEY environment variable is required")

        log.debug("timechimp.request", method=method, path=path, params=params)
        async with httpx.AsyncClient(
            base_url=self.settings.base_url,
            headers=self.headers(headers),
            timeout=None,
            transport=self._transport,
        ) as client:
            try:
                r = await client.request(method, path, params=params or None, json=json)
            except httpx.InvalidURL as e:
                # Built from caller arguments (an id with control characters, say).
                raise ProtocolError(f"Invalid request URL for {path!r}: {e}") from e
            except httpx.HTTPError as e:
                raise TransportError(path, str(e) or type(e).__name__) from e

        log.debug("timechimp.response", method=method, path=path, status=r.status_code)
        if not r.is_success:
            raise UpstreamError(path, r.status_code, r.reason_phrase, r.text)
        if not r.content:
            return None
        try:
            return r.json()
        except ValueError as e:
            raise TransportError(path, f"invalid JSON in response: {e}") from e
