from typing import Any

from fastapi import APIRouter, Body, Request

from .dispatcher import Dispatcher
from .schemas import tool_schemas

router = APIRouter()


@router.get("/tools")
async def list_tools():
    return {"tools": tool_schemas()}


@router.post("/tools/{name}")
async def call_tool(name: str, request: Request, arguments: dict[str, Any] | None = Body(None)):
    """Run one tool. Failures come back as ``isError``, never as HTTP errors."""
    dispatcher: Dispatcher = request.app.state.dispatcher
    result = await dispatcher.dispatch(name, arguments or {})
    return {**result.to_content(), "result": result.model_dump()}
