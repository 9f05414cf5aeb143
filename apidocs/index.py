"""Lookup tables built once from a validated API document."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from .errors import ComplexGlobalTypeError
from .naming import sort_by_order

logger = logging.getLogger(__name__)

DEFINES_ROOT = "defines"


@dataclass
class ApiIndex:
    """Read-only name lookups over the document.

    All maps are plain dicts so iteration follows document order;
    ``defines`` is used as an insertion-ordered set.
    """

    classes: dict[str, dict[str, Any]] = field(default_factory=dict)
    events: dict[str, dict[str, Any]] = field(default_factory=dict)
    concepts: dict[str, dict[str, Any]] = field(default_factory=dict)
    builtins: dict[str, dict[str, Any]] = field(default_factory=dict)
    globals: dict[str, dict[str, Any]] = field(default_factory=dict)
    table_or_array_types: dict[str, Any] = field(default_factory=dict)
    defines: dict[str, None] = field(default_factory=dict)


def _global_type_name(global_object: dict[str, Any]) -> str:
    api_type = global_object["type"]
    if not isinstance(api_type, str):
        raise ComplexGlobalTypeError(global_object["name"])
    return api_type


def _add_define(defines: dict[str, None], define: dict[str, Any], prefix: str) -> None:
    name = f"{prefix}{define['name']}"
    defines[name] = None
    child_prefix = f"{name}."
    for value in define.get("values") or []:
        defines[f"{child_prefix}{value['name']}"] = None
    for subkey in define.get("subkeys") or []:
        _add_define(defines, subkey, child_prefix)


def build_index(docs: dict[str, Any]) -> ApiIndex:
    """Build all lookup tables from the document."""
    index = ApiIndex(
        classes={c["name"]: c for c in docs["classes"]},
        events={e["name"]: e for e in docs["events"]},
        concepts={c["name"]: c for c in docs["concepts"]},
        builtins={b["name"]: b for b in docs["builtin_types"]},
    )

    # Element type of a table_or_array concept is the type of its first field
    for concept in docs["concepts"]:
        if concept.get("category") == "table_or_array" and concept.get("parameters"):
            first = sort_by_order(concept["parameters"])[0]
            index.table_or_array_types[concept["name"]] = first["type"]

    for global_object in docs["global_objects"]:
        index.globals[_global_type_name(global_object)] = global_object

    index.defines[DEFINES_ROOT] = None
    for define in docs["defines"]:
        _add_define(index.defines, define, f"{DEFINES_ROOT}.")

    logger.debug(
        "Indexed %d classes, %d events, %d concepts, %d builtins, %d globals, %d defines",
        len(index.classes), len(index.events), len(index.concepts),
        len(index.builtins), len(index.globals), len(index.defines),
    )
    return index
