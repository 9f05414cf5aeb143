"""Names for generated Lua declarations.

Covers two things:
  - Lua identifiers: keyword escaping and sanitizing arbitrary names
  - Naming contexts for anonymous nested tables, which have no name in the
    API document and get one derived from where they appear:

      Class.method.param           table-typed method parameter
      Class.method_return          table-typed return value
      Class.method_vararg          table-typed variadic parameter
      Class.method_param           table argument of a takes_table method
      Event.field / Concept.field  table-typed field
      <ctx>_key / <ctx>_value      dictionary and LuaCustomTable slots
      <ctx>.N                      N-th (zero based) variant option
      <ctx>_paramN                 N-th (one based) function parameter
      Identification.ORDER         identification option
      Concept_elem                 element type of a table_or_array concept
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable

LUA_KEYWORDS = frozenset({
    "and", "break", "do", "else", "elseif", "end", "false", "for",
    "function", "goto", "if", "in", "local", "nil", "not", "or", "repeat",
    "return", "then", "true", "until", "while",
})


def escape_lua_keyword(name: str) -> str:
    """Append an underscore to names that are Lua keywords."""
    return f"{name}_" if name in LUA_KEYWORDS else name


def to_lua_ident(name: str) -> str:
    """Turn an arbitrary name into a valid Lua identifier."""
    name = re.sub(r"[^a-zA-Z0-9]", "_", name)
    name = re.sub(r"^([0-9])", r"_\1", name)
    return escape_lua_keyword(name)


def sort_by_order(items: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
    """Return items sorted by their "order" key; ties keep input order."""
    return sorted(items, key=lambda item: item["order"])


@dataclass(frozen=True)
class TableName:
    """Naming context: the name a nested anonymous table would get, and its doc link."""

    name: str
    link: str

    def suffixed(self, suffix: str) -> TableName:
        return TableName(self.name + suffix, self.link)
