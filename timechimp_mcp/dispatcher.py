"""Turns a tool call (name + argument bag) into one TimeChimp request."""
from collections.abc import Mapping

import structlog

from .envelope import ToolResult
from .errors import ProtocolError, TimechimpError
from .operations import (
    CATALOG,
    BulkStatusOperation,
    CreateOperation,
    DeleteOperation,
    GetOperation,
    HistoryOperation,
    ListOperation,
    Operation,
    UpdateOperation,
)
from .query import build_filter_expression, build_query_params, set_param, text_arg
from .timechimp import TimechimpClient

log = structlog.get_logger(__name__)


class Request:
    """What a handler decided to send. ``endpoint`` is used in error messages."""

    def __init__(self, method: str, path: str, params=None, body=None, confirmation: str | None = None):
        self.method = method
        self.path = path
        self.params = params
        self.body = body
        self.confirmation = confirmation

    @property
    def endpoint(self) -> str:
        return f"{self.method} {self.path}"


def require_id(op: Operation, args: Mapping):
    value = args.get("id")
    if value is None or value == "":
        raise ProtocolError(f"Missing required argument 'id' for {op.name}")
    return value


def select_body(fields: tuple[str, ...], args: Mapping) -> dict:
    # Absent fields stay absent so TimeChimp applies its defaults.
    return {f: args[f] for f in fields if f in args}


def list_request(op: ListOperation, args: Mapping) -> Request:
    params = build_query_params(args)
    if op.default_orderby and not text_arg(args, "orderby"):
        params.append(("$orderby", op.default_orderby))
    expression = build_filter_expression(args)
    if expression:
        set_param(params, "$filter", expression)
    return Request("GET", op.path, params=params)


def get_request(op: GetOperation, args: Mapping) -> Request:
    path = f"{op.path}/{require_id(op, args)}"
    if op.suffix:
        path = f"{path}/{op.suffix}"
    expand = text_arg(args, "expand") if op.expand else None
    params = [("$expand", expand)] if expand else []
    return Request("GET", path, params=params)


def create_request(op: CreateOperation, args: Mapping) -> Request:
    return Request("POST", op.path, body=select_body(op.body_fields, args))


def update_request(op: UpdateOperation, args: Mapping) -> Request:
    path = f"{op.path}/{require_id(op, args)}"
    return Request("PUT", path, body=select_body(op.body_fields, args))


def delete_request(op: DeleteOperation, args: Mapping) -> Request:
    id_ = require_id(op, args)
    return Request(
        "DELETE", f"{op.path}/{id_}",
        confirmation=f"{op.label} {id_} deleted successfully",
    )


def bulk_status_request(op: BulkStatusOperation, args: Mapping) -> Request:
    return Request("PUT", f"{op.path}/{op.sub_path}", body=select_body(op.body_fields, args))


def history_request(op: HistoryOperation, args: Mapping) -> Request:
    path = f"{op.path}/{require_id(op, args)}/statusHistory"
    return Request("GET", path, params=build_query_params(args))


HANDLERS = {
    ListOperation: list_request,
    GetOperation: get_request,
    CreateOperation: create_request,
    UpdateOperation: update_request,
    DeleteOperation: delete_request,
    BulkStatusOperation: bulk_status_request,
    HistoryOperation: history_request,
}


class Dispatcher:
    """Stateless apart from the read-only catalog and client settings."""

    def __init__(self, client: TimechimpClient, catalog: Mapping[str, Operation] = CATALOG):
        self.client = client
        self.catalog = catalog

    def build_request(self, name: str, args: Mapping) -> Request:
        op = self.catalog.get(name)
        if op is None:
            raise ProtocolError(f"Unknown tool: {name}")
        return HANDLERS[type(op)](op, args)

    async def dispatch(self, name: str, args: Mapping | None = None) -> ToolResult:
        args = args or {}
        request = None
        try:
            request = self.build_request(name, args)
            data = await self.client.request(
                request.method, request.path, params=request.params, json=request.body,
            )
        except TimechimpError as e:
            endpoint = request.endpoint if request else None
            log.warning("tool.failed", tool=name, kind=e.kind, endpoint=endpoint, error=str(e))
            return ToolResult.failure(e, endpoint)

        if request.confirmation:
            return ToolResult.success(request.confirmation)
        return ToolResult.success(data)
