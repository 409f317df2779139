"""Failure taxonomy for tool calls."""


class TimechimpError(Exception):
    kind = "internal"


class ConfigurationError(TimechimpError):
    """Server is missing configuration it needs for every call (API key)."""

    kind = "configuration"


class ProtocolError(TimechimpError):
    """Caller mistake: unknown tool or a missing required argument."""

    kind = "protocol"


class UpstreamError(TimechimpError):
    """TimeChimp answered with a non-success status."""

    kind = "upstream"

    def __init__(self, endpoint: str, status_code: int, reason: str, body: str):
        self.endpoint = endpoint
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(f"TimeChimp API error: {status_code} {reason} - {body}")


class TransportError(TimechimpError):
    """No response reached us (DNS, connection refused, reset, ...)."""

    kind = "transport"

    def __init__(self, endpoint: str, cause: str):
        self.endpoint = endpoint
        self.cause = cause
        super().__init__(f"Request failed: {cause}")
