"""Emit the EmmyLua declarations for each kind of API entity.

Each ``emit_*`` function writes one section of the stub file to ``output``.
Anonymous tables met along the way go to the session's deferred buffer.
"""

from __future__ import annotations

import io
import logging
from typing import Any, Callable

from .descriptions import extend_string, preprocess_description
from .errors import UnknownConceptCategoryError, UnknownOperatorError
from .index import DEFINES_ROOT
from .naming import TableName, escape_lua_keyword, sort_by_order, to_lua_ident
from .session import GenerationSession
from .typeformat import APPLIES_TO_FILTER, add_table_type, format_type

logger = logging.getLogger(__name__)

ALLOWED_OPERATORS = frozenset({"index", "length", "call"})

# operator name -> (Lua metamethod, anchor on the documentation page)
_ATTRIBUTE_OPERATORS: dict[str, tuple[str, str]] = {
    "index": ("__index", "operator%20[]"),
    "length": ("__len", "operator%20#"),
}
_CALL_OPERATOR = ("__call", "operator%20()")


# ---------------------------------------------------------------------------
# Builtins, defines, events
# ---------------------------------------------------------------------------

def emit_builtins(session: GenerationSession, output: io.StringIO, docs: dict[str, Any]) -> None:
    for builtin in docs["builtin_types"]:
        if builtin["name"] in session.config.known_builtins:
            continue
        output.write(session.describe(
            extend_string(builtin.get("description"), post="\n\n")
            + session.view_documentation(builtin["name"])
        ))
        output.write(f"---@class {builtin['name']}:number\n")


def _emit_define(
    session: GenerationSession, output: io.StringIO, define: dict[str, Any], prefix: str,
) -> None:
    name = f"{prefix}{define['name']}"
    output.write(session.describe(
        extend_string(define.get("description"), post="\n\n") + session.view_documentation(name)
    ))
    output.write(f"---@class {name}\n{name}={{\n")
    for value in define.get("values") or []:
        output.write(session.describe(
            extend_string(value.get("description"), post="\n\n")
            + session.view_documentation(f"{name}.{value['name']}")
        ))
        output.write(f"{to_lua_ident(value['name'])}=0,\n")
    output.write("}\n")
    for subkey in define.get("subkeys") or []:
        _emit_define(session, output, subkey, f"{name}.")


def emit_defines(session: GenerationSession, output: io.StringIO, docs: dict[str, Any]) -> None:
    output.write(session.describe(session.view_documentation(DEFINES_ROOT)))
    output.write(f"---@class {DEFINES_ROOT}\n{DEFINES_ROOT}={{}}\n")
    for define in docs["defines"]:
        _emit_define(session, output, define, f"{DEFINES_ROOT}.")


def emit_events(session: GenerationSession, output: io.StringIO, docs: dict[str, Any]) -> None:
    for event in docs["events"]:
        link = session.view_documentation(event["name"])
        output.write(session.describe_entity(event, link))
        output.write(f"---@class {event['name']}\n")
        for param in event.get("data") or []:
            output.write(session.describe(extend_string(param.get("description"), post="\n\n") + link))
            field_type = format_type(session, param["type"], TableName(f"{event['name']}.{param['name']}", link))
            nullable = "|nil" if param.get("optional") else ""
            output.write(f"---@field {param['name']} {field_type}{nullable}\n")


# ---------------------------------------------------------------------------
# Classes and struct concepts
# ---------------------------------------------------------------------------

def _param_or_return(
    session: GenerationSession, api_type: Any, description: str | None, context: TableName,
) -> str:
    formatted = format_type(session, api_type, context)
    if not description:
        return f"{formatted}\n"
    if "\n" not in description:
        return f"{formatted}@{preprocess_description(session.resolver, description)}\n"
    return f"{formatted}@\n{session.describe(description)}"


class _ClassEmitter:
    """Writes one class, or one struct concept, and its method table."""

    def __init__(self, session: GenerationSession, output: io.StringIO, aclass: dict[str, Any], is_struct: bool) -> None:
        self.session = session
        self.output = output
        self.aclass = aclass
        self.name = aclass["name"]
        self.is_struct = is_struct

    def member_link(self, member: str) -> str:
        return self.session.view_documentation(f"{self.name}::{member}")

    def emit(self) -> None:
        session, output, aclass = self.session, self.output, self.aclass
        operators = aclass.get("operators") or []
        if not self.is_struct:
            for operator in operators:
                if operator["name"] not in ALLOWED_OPERATORS:
                    raise UnknownOperatorError(self.name, operator["name"])

        global_object = session.index.globals.get(self.name)
        description = aclass.get("description", "")
        needs_label = bool(description) or aclass.get("notes") is not None
        output.write(session.describe_entity(
            aclass, session.view_documentation(self.name),
            extend_string(
                global_object and global_object.get("description"),
                pre="**Global Description:**\n",
                post=("\n\n**Class Description:**\n" if needs_label else "\n\n") + description,
                fallback=description,
            ),
        ))

        base_classes = aclass.get("base_classes")
        if self.is_struct or not base_classes:
            output.write(f"---@class {self.name}\n")
        else:
            output.write(f"---@class {self.name}:{','.join(base_classes)}\n")

        for attribute in aclass.get("attributes") or []:
            self.add_attribute(attribute)

        if self.is_struct:
            return

        for operator in operators:
            if operator["name"] in _ATTRIBUTE_OPERATORS:
                self.add_attribute(operator, *_ATTRIBUTE_OPERATORS[operator["name"]])

        if global_object is not None:
            output.write(f"{global_object['name']}={{\n")
        else:
            output.write(f"local {to_lua_ident(self.name)}={{\n")
        for method in aclass.get("methods") or []:
            if method.get("takes_table"):
                self.add_method_taking_table(method)
            else:
                self.add_regular_method(method)
        for operator in operators:
            if operator["name"] == "call":
                self.add_regular_method(operator, *_CALL_OPERATOR)
        output.write("}\n")

    def add_attribute(self, attribute: dict[str, Any], lua_name: str | None = None, html_name: str | None = None) -> None:
        name = lua_name or attribute["name"]
        link = self.member_link(html_name or name)
        access = ("R" if attribute.get("read") else "") + ("W" if attribute.get("write") else "")
        self.output.write(self.session.describe_entity(
            attribute, link,
            f"[{access}]" + extend_string(attribute.get("description"), pre="\n"),
        ))
        field_type = format_type(self.session, attribute.get("type"), TableName(f"{self.name}.{name}", link))
        self.output.write(f"---@field {name} {field_type}\n")

    def add_method_description(self, method: dict[str, Any], html_name: str | None = None) -> None:
        self.output.write(self.session.describe_entity(method, self.member_link(html_name or method["name"])))

    def add_return(self, method: dict[str, Any]) -> None:
        if method.get("return_type"):
            context = TableName(f"{self.name}.{method['name']}_return", self.member_link(method["name"]))
            self.output.write("---@return " + _param_or_return(
                self.session, method["return_type"], method.get("return_description"), context,
            ))

    def add_regular_method(self, method: dict[str, Any], lua_name: str | None = None, html_name: str | None = None) -> None:
        session, output = self.session, self.output
        method_name = method["name"]
        link = self.member_link(method_name)
        self.add_method_description(method, html_name)

        params = sort_by_order(method.get("parameters") or [])
        for param in params:
            marker = "? " if param.get("optional") else " "
            output.write(f"---@param {escape_lua_keyword(param['name'])}{marker}")
            output.write(_param_or_return(
                session, param["type"], param.get("description"),
                TableName(f"{self.name}.{method_name}.{param['name']}", link),
            ))

        variadic_type = method.get("variadic_type")
        if variadic_type:
            vararg = format_type(session, variadic_type, TableName(f"{self.name}.{method_name}_vararg", link))
            output.write(f"---@vararg {vararg}\n")
            variadic_description = method.get("variadic_description")
            if variadic_description:
                separator = "\n\n" if "\n" in variadic_description else ""
                output.write(session.describe(f"\n**vararg**: {separator}{variadic_description}"))

        self.add_return(method)

        arg_names = [escape_lua_keyword(p["name"]) for p in params]
        if variadic_type:
            arg_names.append("...")
        output.write(f"{lua_name or method_name}=function({','.join(arg_names)})end,\n")

    def add_method_taking_table(self, method: dict[str, Any]) -> None:
        param_class_name = f"{self.name}.{method['name']}_param"
        add_table_type(self.session, self.output, method, param_class_name, self.member_link(method["name"]))
        self.output.write("\n")
        self.add_method_description(method)
        marker = "? " if method.get("table_is_optional") else " "
        self.output.write(f"---@param param{marker}{param_class_name}\n")
        self.add_return(method)
        self.output.write(f"{method['name']}=function(param)end,\n")


def add_class(session: GenerationSession, output: io.StringIO, aclass: dict[str, Any], is_struct: bool = False) -> None:
    _ClassEmitter(session, output, aclass, is_struct).emit()


def emit_classes(session: GenerationSession, output: io.StringIO, docs: dict[str, Any]) -> None:
    for aclass in docs["classes"]:
        add_class(session, output, aclass)


# ---------------------------------------------------------------------------
# Concepts
# ---------------------------------------------------------------------------

def _add_identification(session: GenerationSession, output: io.StringIO, concept: dict[str, Any]) -> None:
    name = concept["name"]
    link = session.view_documentation(name)
    options = sort_by_order(concept["options"])

    def context(option: dict[str, Any]) -> TableName:
        return TableName(f"{name}.{option['order']}", link)

    ways = "".join(
        f"\n- {format_type(session, option['type'], context(option), add_doc_links=True)}"
        + extend_string(option.get("description"), pre=": ")
        for option in options
    )
    output.write(session.describe_entity(
        concept, link,
        extend_string(concept.get("description"), post="\n\n")
        + "May be specified in one of the following ways:" + ways,
    ))
    alternatives = "|".join(format_type(session, option["type"], context(option)) for option in options)
    output.write(f"---@alias {name} {alternatives}\n")


def _add_concept(session: GenerationSession, output: io.StringIO, concept: dict[str, Any]) -> None:
    output.write(session.describe_entity(concept, session.view_documentation(concept["name"])))
    output.write(f"---@class {concept['name']}\n")


def _add_struct(session: GenerationSession, output: io.StringIO, concept: dict[str, Any]) -> None:
    add_class(session, output, concept, is_struct=True)


def _add_flag(session: GenerationSession, output: io.StringIO, concept: dict[str, Any]) -> None:
    link = session.view_documentation(concept["name"])
    output.write(session.describe_entity(concept, link))
    output.write(f"---@class {concept['name']}\n")
    for option in concept["options"]:
        output.write(session.describe(extend_string(option.get("description"), post="\n\n") + link))
        output.write(f"---@field {option['name']} boolean|nil\n")


def _add_table(session: GenerationSession, output: io.StringIO, concept: dict[str, Any]) -> None:
    add_table_type(session, output, concept, concept["name"], session.view_documentation(concept["name"]))


def _add_union(session: GenerationSession, output: io.StringIO, concept: dict[str, Any]) -> None:
    values = "".join(
        f'\n- "{option["name"]}"' + extend_string(option.get("description"), pre=" - ")
        for option in sort_by_order(concept["options"])
    )
    output.write(session.describe_entity(
        concept, session.view_documentation(concept["name"]),
        extend_string(concept.get("description"), post="\n\n") + "Possible values are:" + values,
    ))
    output.write(f"---@class {concept['name']}\n")


def _add_filter(session: GenerationSession, output: io.StringIO, concept: dict[str, Any]) -> None:
    add_table_type(
        session, output, concept, concept["name"],
        session.view_documentation(concept["name"]), APPLIES_TO_FILTER,
    )


_CONCEPT_EMITTERS: dict[str, Callable[[GenerationSession, io.StringIO, dict[str, Any]], None]] = {
    "identification": _add_identification,
    "concept": _add_concept,
    "struct": _add_struct,
    "flag": _add_flag,
    "table": _add_table,
    "table_or_array": _add_table,
    "union": _add_union,
    "filter": _add_filter,
}


def emit_concept(session: GenerationSession, output: io.StringIO, concept: dict[str, Any]) -> None:
    emitter = _CONCEPT_EMITTERS.get(concept.get("category"))
    if emitter is None:
        raise UnknownConceptCategoryError(concept["name"], concept.get("category"))
    emitter(session, output, concept)


def emit_concepts(session: GenerationSession, output: io.StringIO, docs: dict[str, Any]) -> None:
    for concept in docs["concepts"]:
        emit_concept(session, output, concept)
    logger.debug("Emitted %d concepts", len(docs["concepts"]))
