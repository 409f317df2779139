"""JSON input schemas advertised to tool-calling clients.

Derived from the operation registry. These are hints for the caller; the
dispatcher does not validate against them and leaves deep validation to
TimeChimp.
"""
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

STATUSES = ["Open", "PendingApproval", "Approved", "Invoiced", "WrittenOff", "Rejected"]
REFERENCE = {
    "type": "object",
    "properties": {"id": {"type": "number"}},
    "required": ["id"],
}
REFERENCE_LIST = {"type": "array", "items": REFERENCE}

PAGINATION = {
    "top": {
        "type": "number",
        "description": "Maximum number of records to return (1-10000, default: 100)",
        "minimum": 1,
        "maximum": 10000,
    },
    "skip": {
        "type": "number",
        "description": "Number of records to skip for pagination (default: 0)",
        "minimum": 0,
    },
    "count": {
        "type": "boolean",
        "description": "Whether to include the total count of results (default: true)",
    },
    "expand": {
        "type": "string",
        "description": 'Comma-delimited list of properties to expand (e.g., "customer,tasks")',
    },
    "filter": {"type": "string", "description": "OData filter expression"},
    "orderby": {
        "type": "string",
        "description": 'OData orderby expression (e.g., "name desc" or "modifiedOn desc")',
    },
}

FILTERS = {
    "active_only": {"type": "boolean", "description": "Only return active records (default: false)"},
    "user_id": {"type": "number", "description": "Filter by user ID"},
    "project_id": {"type": "number", "description": "Filter by project ID"},
    "customer_id": {"type": "number", "description": "Filter by customer ID"},
    "from_date": {"type": "string", "description": "Start date for filtering (YYYY-MM-DD format)"},
    "to_date": {"type": "string", "description": "End date for filtering (YYYY-MM-DD format)"},
}

# Anything not listed is advertised as an untyped property.
FIELDS = {
    "name": {"type": "string"},
    "active": {"type": "boolean"},
    "code": {"type": "string"},
    "notes": {"type": "string"},
    "color": {"type": "string"},
    "startDate": {"type": "string", "description": "YYYY-MM-DD"},
    "endDate": {"type": "string", "description": "YYYY-MM-DD"},
    "date": {"type": "string", "description": "YYYY-MM-DD"},
    "invoicing": {"type": "object"},
    "budget": {"type": "object"},
    "customer": REFERENCE,
    "project": REFERENCE,
    "product": REFERENCE,
    "user": REFERENCE,
    "vehicle": REFERENCE,
    "vatRate": REFERENCE,
    "mainProject": REFERENCE,
    "subprojects": REFERENCE_LIST,
    "managers": REFERENCE_LIST,
    "tags": REFERENCE_LIST,
    "customers": REFERENCE_LIST,
    "contacts": REFERENCE_LIST,
    "projectTasks": {"type": "array", "items": {"type": "object"}},
    "projectUsers": {"type": "array", "items": {"type": "object"}},
    "contracts": {"type": "array", "items": {"type": "object"}},
    "userName": {"type": "string", "description": "Email address of the user"},
    "displayName": {"type": "string"},
    "language": {"type": "string", "enum": ["en", "nl", "de", "pl", "fr", "es"]},
    "role": REFERENCE,
    "sendInvitation": {"type": "boolean"},
    "employeeNumber": {"type": "string"},
    "badgeNumber": {"type": "string"},
    "citizenServiceNumber": {"type": "string"},
    "jobTitle": {"type": "string"},
    "email": {"type": "string"},
    "phone": {"type": "string"},
    "website": {"type": "string"},
    "useForInvoicing": {"type": "boolean"},
    "relationId": {"type": "string"},
    "address": {"type": "object"},
    "invoiceAddress": {"type": "object"},
    "paymentPeriod": {"type": "number"},
    "hourlyRate": {"type": "number"},
    "mileageRate": {"type": "number"},
    "iban": {"type": "string"},
    "bic": {"type": "string"},
    "vatNumber": {"type": "string"},
    "kvkNumber": {"type": "string"},
    "prospect": {"type": "boolean"},
    "quantity": {"type": "number", "minimum": 0},
    "rate": {"type": "number", "minimum": 0},
    "billable": {"type": "boolean"},
    "fromAddress": {"type": "string"},
    "toAddress": {"type": "string"},
    "distance": {"type": "number"},
    "type": {"type": "string"},
    "message": {"type": "string", "description": "Status history message"},
    "status": {"type": "string", "enum": STATUSES},
    "clientStatus": {"type": "string", "enum": STATUSES},
    "expenses": {**REFERENCE_LIST, "maxItems": 100},
    "mileages": {**REFERENCE_LIST, "maxItems": 100},
}

ID = {"type": "number", "description": "Unique identifier"}


def input_schema(op: Operation) -> dict:
    properties: dict = {}
    required: list[str] = []

    if isinstance(op, ListOperation):
        properties.update({k: PAGINATION[k] for k in ("top", "skip", "count", "expand")})
        properties.update({k: FILTERS[k] for k in op.filters})
        properties.update({k: PAGINATION[k] for k in ("filter", "orderby")})
    elif isinstance(op, HistoryOperation):
        properties["id"] = ID
        properties.update(PAGINATION)
        required = ["id"]
    elif isinstance(op, (GetOperation, DeleteOperation)):
        properties["id"] = ID
        if isinstance(op, GetOperation) and op.expand:
            properties["expand"] = PAGINATION["expand"]
        required = ["id"]
    elif isinstance(op, (CreateOperation, UpdateOperation, BulkStatusOperation)):
        if isinstance(op, UpdateOperation):
            properties["id"] = ID
        properties.update({f: FIELDS.get(f, {}) for f in op.body_fields})
        required = list(op.required)

    schema = {"type": "object", "properties": properties, "additionalProperties": False}
    if required:
        schema["required"] = required
    return schema


def tool_schemas() -> list[dict]:
    return [
        {"name": op.name, "description": op.description, "inputSchema": input_schema(op)}
        for op in CATALOG.values()
    ]
