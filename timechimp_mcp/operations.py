"""Typed registry of the TimeChimp tools.

Each tool name maps to one immutable descriptor. The descriptor's class
says which request shape the dispatcher builds; its fields say where the
request goes and which arguments end up in it.
"""
from types import MappingProxyType

from pydantic import BaseModel


class Operation(BaseModel):
    model_config = {"frozen": True}

    name: str
    path: str
    description: str


class ListOperation(Operation):
    # Convenience filters advertised in the tool schema.
    filters: tuple[str, ...] = ()
    default_orderby: str | None = None


class GetOperation(Operation):
    suffix: str | None = None
    expand: bool = True


class CreateOperation(Operation):
    body_fields: tuple[str, ...]
    required: tuple[str, ...] = ()


class UpdateOperation(Operation):
    body_fields: tuple[str, ...]
    required: tuple[str, ...] = ()


class DeleteOperation(Operation):
    label: str


class BulkStatusOperation(Operation):
    sub_path: str
    body_fields: tuple[str, ...]
    required: tuple[str, ...] = ()


class HistoryOperation(Operation):
    pass


DATE_FILTERS = ("from_date", "to_date")

PROJECT_FIELDS = (
    "name", "active", "code", "notes", "color", "startDate", "endDate",
    "invoicing", "budget", "customer", "mainProject", "subprojects",
    "managers", "tags", "projectTasks", "projectUsers",
)
USER_CREATE_FIELDS = ("userName", "displayName", "language", "role", "sendInvitation", "contracts")
USER_UPDATE_FIELDS = (
    "displayName", "language", "employeeNumber", "badgeNumber",
    "citizenServiceNumber", "role", "tags", "contracts",
)
CONTACT_FIELDS = ("name", "jobTitle", "email", "phone", "useForInvoicing", "active", "customers")
CUSTOMER_FIELDS = (
    "name", "active", "relationId", "address", "phone", "email", "website",
    "paymentPeriod", "hourlyRate", "mileageRate", "iban", "bic", "vatNumber",
    "kvkNumber", "invoiceAddress", "notes", "prospect", "vatRate", "tags",
    "contacts",
)
EXPENSE_FIELDS = (
    "date", "notes", "quantity", "rate", "billable", "customer", "project",
    "product", "user", "vatRate",
)
MILEAGE_FIELDS = (
    "date", "fromAddress", "toAddress", "notes", "distance", "billable",
    "type", "customer", "project", "vehicle", "user",
)


def _read_tools(plural: str, singular: str, path: str, filters: tuple[str, ...], what: str) -> list[Operation]:
    return [
        ListOperation(
            name=f"get_{plural}", path=path, filters=filters,
            description=f"Retrieve all {what} from TimeChimp",
        ),
        GetOperation(
            name=f"get_{singular}_by_id", path=path,
            description=f"Get a specific {singular.replace('_', ' ')} by ID",
        ),
    ]


def _write_tools(
    singular: str,
    path: str,
    fields: tuple[str, ...],
    create_required: tuple[str, ...],
    update_required: tuple[str, ...],
    label: str | None,
    article: str = "a",
) -> list[Operation]:
    noun = singular.replace("_", " ")
    tools: list[Operation] = [
        CreateOperation(
            name=f"create_{singular}", path=path, body_fields=fields,
            required=create_required, description=f"Create a new {noun}",
        ),
        UpdateOperation(
            name=f"update_{singular}", path=path, body_fields=fields,
            required=update_required, description=f"Update an existing {noun}",
        ),
    ]
    if label:
        tools.append(DeleteOperation(
            name=f"delete_{singular}", path=path, label=label,
            description=f"Delete {article} {noun}",
        ))
    return tools


def _approval_tools(singular: str, path: str, targets: str, noun: str, article: str = "a") -> list[Operation]:
    return [
        BulkStatusOperation(
            name=f"update_{singular}_status", path=path, sub_path="status",
            body_fields=("message", targets, "status"),
            required=(targets, "status"),
            description=f"Update the status of {noun} (internal approval/invoicing status)",
        ),
        BulkStatusOperation(
            name=f"update_{singular}_client_status", path=path, sub_path="clientStatus",
            body_fields=("clientStatus", "message", targets),
            required=("clientStatus", targets),
            description=f"Update the client status of {noun} (external approval/invoicing status)",
        ),
        HistoryOperation(
            name=f"get_{singular}_status_history", path=path,
            description=f"Query status history modification records of {article} {singular}",
        ),
    ]


def _build_catalog() -> dict[str, Operation]:
    tools: list[Operation] = []

    tools += _read_tools("projects", "project", "/projects", ("active_only",), "projects")
    tools += _write_tools(
        "project", "/projects", PROJECT_FIELDS,
        create_required=("name", "projectTasks", "projectUsers"),
        update_required=("id", "name", "invoicing", "budget", "projectTasks", "projectUsers"),
        label="Project",
    )
    tools.append(GetOperation(
        name="get_project_insights", path="/projects", suffix="insights", expand=False,
        description="Get project insights including hours, budget, costs, and revenue data",
    ))

    tools += _read_tools("users", "user", "/users", ("active_only",), "users")
    tools.append(CreateOperation(
        name="create_user", path="/users", body_fields=USER_CREATE_FIELDS,
        required=("userName", "displayName"),
        description="Create a new user (note: adding users can result in additional invoice and extra cost)",
    ))
    tools.append(UpdateOperation(
        name="update_user", path="/users", body_fields=USER_UPDATE_FIELDS,
        required=("id", "displayName"), description="Update an existing user",
    ))

    tools += _read_tools(
        "time_entries", "time_entry", "/times",
        ("user_id", "project_id") + DATE_FILTERS, "time entries",
    )

    tools += _read_tools("contacts", "contact", "/contacts", ("active_only",), "contacts")
    tools += _write_tools(
        "contact", "/contacts", CONTACT_FIELDS,
        create_required=("name",), update_required=("id", "name"), label="Contact",
    )

    tools += _read_tools("customers", "customer", "/customers", ("active_only",), "customers")
    tools += _write_tools(
        "customer", "/customers", CUSTOMER_FIELDS,
        create_required=("name",), update_required=("id", "name"), label="Customer",
    )

    tools += _read_tools("tasks", "task", "/tasks", ("active_only", "project_id"), "tasks")
    tools += _read_tools("invoices", "invoice", "/invoices", ("customer_id",) + DATE_FILTERS, "invoices")

    tools += _read_tools(
        "expenses", "expense", "/expenses",
        ("user_id", "project_id", "customer_id") + DATE_FILTERS, "expenses",
    )
    tools += _write_tools(
        "expense", "/expenses", EXPENSE_FIELDS,
        create_required=("rate", "user"), update_required=("id", "rate", "user"),
        label="Expense", article="an",
    )
    tools += _approval_tools("expense", "/expenses", "expenses", "expenses", article="an")

    tools += _read_tools(
        "mileage", "mileage", "/mileage",
        ("user_id", "project_id", "customer_id") + DATE_FILTERS, "mileage entries",
    )
    tools += _write_tools(
        "mileage", "/mileage", MILEAGE_FIELDS,
        create_required=("distance", "type", "user"),
        update_required=("id", "distance", "type", "user"),
        label="Mileage",
    )
    tools += _approval_tools("mileage", "/mileage", "mileages", "mileage entries")

    tools += _read_tools(
        "mileage_vehicles", "mileage_vehicle", "/mileageVehicles", ("active_only",), "mileage vehicles",
    )
    tools += _read_tools("tags", "tag", "/tags", ("active_only",), "tags")

    return {tool.name: tool for tool in tools}


CATALOG = MappingProxyType(_build_catalog())
