"""Generator configuration."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_API_BASE = "https://lua-api.factorio.com/latest/"

# Builtins the language server already ships definitions for
DEFAULT_KNOWN_BUILTINS = frozenset({"string", "boolean", "table"})


@dataclass(frozen=True)
class GeneratorConfig:
    runtime_api_base: str = DEFAULT_API_BASE
    known_builtins: frozenset[str] = DEFAULT_KNOWN_BUILTINS
