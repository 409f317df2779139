"""OData query string helpers shared by the list-style tools."""

Params = list[tuple[str, str]]


def _render(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def text_arg(args: dict, key: str) -> str | None:
    # OData expressions must be strings; anything else is dropped, not rejected.
    value = args.get(key)
    if isinstance(value, str) and value:
        return value
    return None


def build_query_params(args: dict) -> Params:
    """Pagination, expansion, ordering and raw filter options.

    ``top`` and ``skip`` are dropped when falsy, so ``skip=0`` never reaches
    the wire (TimeChimp's default is 0 anyway). ``count`` is sent whenever it
    was given, including ``False``. Range checks on ``top`` are left to
    TimeChimp.
    """
    params: Params = []
    if args.get("top"):
        params.append(("$top", _render(args["top"])))
    if args.get("skip"):
        params.append(("$skip", _render(args["skip"])))
    if args.get("count") is not None:
        params.append(("$count", _render(args["count"])))
    for key in ("expand", "orderby", "filter"):
        value = text_arg(args, key)
        if value:
            params.append((f"${key}", value))
    return params


def build_filter_expression(args: dict) -> str:
    """AND together the convenience filters and the raw ``filter`` argument.

    Values are interpolated as given; nothing is quoted or escaped.
    """
    fragments = []
    if args.get("active_only"):
        fragments.append("active eq true")
    if args.get("user_id"):
        fragments.append(f"user/id eq {args['user_id']}")
    if args.get("project_id"):
        fragments.append(f"project/id eq {args['project_id']}")
    if args.get("customer_id"):
        fragments.append(f"customer/id eq {args['customer_id']}")
    if args.get("from_date"):
        fragments.append(f"date ge {args['from_date']}")
    if args.get("to_date"):
        fragments.append(f"date le {args['to_date']}")
    raw = text_arg(args, "filter")
    if raw:
        fragments.append(raw)
    return " and ".join(fragments)


def set_param(params: Params, key: str, value: str) -> None:
    """Replace ``key`` in place if present, otherwise append it."""
    for i, (existing, _) in enumerate(params):
        if existing == key:
            params[i] = (key, value)
            return
    params.append((key, value))
