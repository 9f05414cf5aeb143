"""Lower API type expressions to EmmyLua type syntax.

Type expressions are either a plain name (``"uint"``, ``"LuaEntity"``) or a
dict tagged by ``complex_type``. Anonymous ``table`` types get a name from
the naming context and their ``---@class`` declaration is deferred to the
session's table buffer, once per name.
"""

from __future__ import annotations

import io
import logging
from typing import Any, Callable

from .descriptions import extend_string
from .errors import UnknownComplexTypeError
from .naming import TableName, sort_by_order
from .session import GenerationSession

logger = logging.getLogger(__name__)

APPLIES_TO = "Applies to"
APPLIES_TO_FILTER = "Applies to filter"


def format_type(
    session: GenerationSession,
    api_type: Any,
    context: TableName,
    add_doc_links: bool = False,
) -> str:
    """Return the EmmyLua rendering of a type expression.

    With ``add_doc_links`` the top-level type names become markdown links,
    for use inside descriptions.
    """
    wrap: Callable[[str], str] = session.resolver.resolve if add_doc_links else (lambda name: name)

    if api_type is None:
        return "any"

    if isinstance(api_type, str):
        elem_type = session.index.table_or_array_types.get(api_type)
        if elem_type is not None:
            # Both the concept and table<int,elem>: named fields or array form
            value_type = format_type(
                session, elem_type,
                TableName(f"{api_type}_elem", session.view_documentation(api_type)),
            )
            return f"{wrap(api_type)}<{wrap('int')},{value_type}>"
        return wrap(api_type)

    complex_type = api_type.get("complex_type")
    if complex_type == "array":
        return format_type(session, api_type["value"], context) + "[]"
    if complex_type == "dictionary":
        key = format_type(session, api_type["key"], context.suffixed("_key"))
        value = format_type(session, api_type["value"], context.suffixed("_value"))
        return f"{wrap('table')}<{key},{value}>"
    if complex_type == "variant":
        return "|".join(
            format_type(session, option, context.suffixed(f".{i}"))
            for i, option in enumerate(api_type["options"])
        )
    if complex_type == "LuaLazyLoadedValue":
        value = format_type(session, api_type["value"], context)
        return f"{wrap('LuaLazyLoadedValue')}<{value},nil>"
    if complex_type == "LuaCustomTable":
        key = format_type(session, api_type["key"], context.suffixed("_key"))
        value = format_type(session, api_type["value"], context.suffixed("_value"))
        return f"{wrap('LuaCustomTable')}<{key},{value}>"
    if complex_type == "table":
        if context.name in session.emitted_tables:
            return context.name
        session.emitted_tables[context.name] = None
        return add_table_type(session, session.tables, api_type, context.name, context.link)
    if complex_type == "function":
        params = ",".join(
            f"param{i}:{format_type(session, param, context.suffixed(f'_param{i}'))}"
            for i, param in enumerate(api_type["parameters"], start=1)
        )
        return f"fun({params})"

    raise UnknownComplexTypeError(complex_type)


def _merge_parameters(type_data: dict[str, Any], applies_to: str) -> list[dict[str, Any]]:
    """Combine fixed fields with variant group fields into one ordered list."""
    merged: dict[str, dict[str, Any]] = {}
    for parameter in sort_by_order(type_data.get("parameters") or []):
        merged[parameter["name"]] = {
            "name": parameter["name"],
            "type": parameter["type"],
            "description": parameter.get("description", ""),
            "optional": parameter.get("optional", False),
        }

    for group in sort_by_order(type_data.get("variant_parameter_groups") or []):
        for parameter in sort_by_order(group["parameters"]):
            optional = parameter.get("optional", False)
            group_description = (
                f'{applies_to} **"{group["name"]}"**: '
                f'{"(optional)" if optional else "(required)"}'
                + extend_string(parameter.get("description"), pre="\n")
            )
            existing = merged.get(parameter["name"])
            if existing is not None:
                existing["description"] = (
                    extend_string(existing["description"], post="\n\n") + group_description
                )
            else:
                merged[parameter["name"]] = {
                    "name": parameter["name"],
                    "type": parameter["type"],
                    "description": group_description,
                    "optional": optional,
                }
    return list(merged.values())


def add_table_type(
    session: GenerationSession,
    output: io.StringIO,
    type_data: dict[str, Any],
    table_class_name: str,
    view_documentation_link: str,
    applies_to: str = APPLIES_TO,
) -> str:
    """Write a ``---@class`` with one ``---@field`` per table field; return the class name.

    The declaration is built separately and written in one piece, so nested
    tables deferred while formatting its fields never land inside it.
    """
    declaration = io.StringIO()
    declaration.write(session.describe(view_documentation_link))
    declaration.write(f"---@class {table_class_name}\n")

    for parameter in _merge_parameters(type_data, applies_to):
        declaration.write(session.describe(
            extend_string(parameter["description"], post="\n\n") + view_documentation_link
        ))
        field_type = format_type(
            session, parameter["type"],
            TableName(f"{table_class_name}.{parameter['name']}", view_documentation_link),
        )
        nullable = "|nil" if parameter["optional"] else ""
        declaration.write(f"---@field {parameter['name']} {field_type}{nullable}\n")

    output.write(declaration.getvalue())
    logger.debug("Declared table %s", table_class_name)
    return table_class_name
