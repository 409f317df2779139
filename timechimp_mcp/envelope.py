"""Uniform result envelope returned by every tool call."""
import json
from typing import Any

from pydantic import BaseModel

from .errors import TimechimpError


class ToolResult(BaseModel):
    model_config = {"frozen": True}

    ok: bool
    payload: Any = None
    error_kind: str | None = None
    message: str | None = None

    @classmethod
    def success(cls, payload: Any) -> "ToolResult":
        return cls(ok=True, payload=payload)

    @classmethod
    def failure(cls, error: TimechimpError, endpoint: str | None = None) -> "ToolResult":
        """Wrap a classified failure; ``endpoint`` is e.g. ``"GET /projects/7"``."""
        message = f"Error calling {endpoint}: {error}" if endpoint else str(error)
        return cls(ok=False, error_kind=error.kind, message=message)

    def text(self) -> str:
        if not self.ok:
            return self.message or ""
        if isinstance(self.payload, str):
            return self.payload
        return json.dumps(self.payload, indent=2)

    def to_content(self) -> dict:
        """MCP ``tools/call`` result shape."""
        return {
            "content": [{"type": "text", "text": self.text()}],
            "isError": not self.ok,
        }
