"""Shared fixtures: a small runtime API document covering every entity kind."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from apidocs.config import GeneratorConfig
from apidocs.session import GenerationSession

API_BASE = "https://lua-api.factorio.com/latest/"


_DOCS: dict[str, Any] = {
    "application": "factorio",
    "stage": "runtime",
    "application_version": "1.1.60",
    "api_version": 1,
    "builtin_types": [
        {"name": "string", "order": 0, "description": "Text."},
        {"name": "boolean", "order": 1, "description": "True or false."},
        {"name": "table", "order": 2, "description": "A Lua table."},
        {"name": "float", "order": 3, "description": "A 32-bit floating point number."},
        {"name": "double", "order": 4, "description": ""},
        {"name": "int", "order": 5, "description": "A 32-bit signed integer."},
        {"name": "uint", "order": 6, "description": "A 32-bit unsigned integer."},
    ],
    "global_objects": [
        {"name": "game", "order": 0, "type": "LuaGameScript", "description": "The main scenario interface."},
    ],
    "defines": [
        {
            "name": "direction",
            "order": 0,
            "description": "Eight compass directions.",
            "values": [
                {"name": "north", "order": 0, "description": "Up."},
                {"name": "end", "order": 1, "description": ""},
            ],
        },
        {
            "name": "inventory",
            "order": 1,
            "description": "",
            "subkeys": [
                {
                    "name": "chest",
                    "order": 0,
                    "description": "",
                    "values": [{"name": "main", "order": 0, "description": ""}],
                },
            ],
        },
    ],
    "events": [
        {
            "name": "on_tick",
            "order": 0,
            "description": "Called every tick.",
            "data": [
                {"name": "tick", "order": 0, "type": "uint", "description": "Current tick.", "optional": False},
                {"name": "player_index", "order": 1, "type": "uint", "description": "", "optional": True},
            ],
        },
    ],
    "classes": [
        {
            "name": "LuaGameScript",
            "order": 0,
            "description": "Main toplevel type.",
            "notes": ["Accessible through `game`."],
            "attributes": [
                {"name": "tick", "order": 0, "type": "uint", "description": "Current tick.", "read": True, "write": False},
                {
                    "name": "players",
                    "order": 1,
                    "type": {"complex_type": "LuaCustomTable", "key": "uint", "value": "LuaPlayer"},
                    "description": "",
                    "read": True,
                    "write": False,
                },
            ],
            "methods": [
                {
                    "name": "print",
                    "order": 0,
                    "description": "Print text to the console.",
                    "parameters": [
                        {"name": "color", "order": 1, "type": "Color", "description": "", "optional": True},
                        {"name": "message", "order": 0, "type": "string", "description": "Text to print.", "optional": False},
                    ],
                },
                {
                    "name": "create_entity",
                    "order": 1,
                    "description": "Create an entity.",
                    "takes_table": True,
                    "table_is_optional": False,
                    "parameters": [
                        {"name": "name", "order": 0, "type": "string", "description": "Prototype name.", "optional": False},
                        {"name": "position", "order": 1, "type": "Position", "description": "", "optional": False},
                    ],
                    "variant_parameter_groups": [
                        {
                            "name": "car",
                            "order": 1,
                            "parameters": [
                                {"name": "speed", "order": 0, "type": "float", "description": "Car speed.", "optional": True},
                            ],
                        },
                        {
                            "name": "projectile",
                            "order": 0,
                            "parameters": [
                                {"name": "speed", "order": 0, "type": "float", "description": "Projectile speed.", "optional": False},
                                {"name": "target", "order": 1, "type": "LuaPlayer", "description": "", "optional": False},
                            ],
                        },
                    ],
                    "return_type": "LuaPlayer",
                    "return_description": "The created entity.",
                },
                {
                    "name": "get_surface",
                    "order": 2,
                    "description": "",
                    "parameters": [
                        {"name": "end", "order": 0, "type": "SurfaceIdentification", "description": "", "optional": False},
                    ],
                    "variadic_type": "string",
                    "variadic_description": "Extra names.",
                },
            ],
            "operators": [],
        },
        {
            "name": "LuaPlayer",
            "order": 1,
            "description": "A player.",
            "base_classes": ["LuaControl"],
            "see_also": ["on_tick", "defines.direction"],
            "attributes": [
                {
                    "name": "color",
                    "order": 0,
                    "type": "Color",
                    "description": "Player color.\nSee [Color](Color).",
                    "read": True,
                    "write": True,
                    "subclasses": ["character", "spidertron", "car"],
                },
            ],
            "methods": [],
            "operators": [
                {"name": "index", "order": 0, "type": "LuaPlayer", "description": "Index access.", "read": True, "write": False},
                {"name": "length", "order": 1, "type": "uint", "description": "", "read": True, "write": False},
                {
                    "name": "call",
                    "order": 2,
                    "description": "Call the player.",
                    "parameters": [{"name": "n", "order": 0, "type": "uint", "description": "", "optional": False}],
                    "return_type": "boolean",
                },
            ],
        },
        {
            "name": "LuaControl",
            "order": 2,
            "description": "",
            "attributes": [],
            "methods": [],
            "operators": [],
        },
    ],
    "concepts": [
        {
            "name": "Position",
            "order": 0,
            "category": "table_or_array",
            "description": "A position.",
            "parameters": [
                {"name": "y", "order": 1, "type": "double", "description": "", "optional": False},
                {"name": "x", "order": 0, "type": "double", "description": "", "optional": False},
            ],
        },
        {
            "name": "Color",
            "order": 1,
            "category": "table",
            "description": "RGBA color.",
            "parameters": [
                {"name": "r", "order": 0, "type": "float", "description": "Red.", "optional": True},
            ],
        },
        {
            "name": "SurfaceIdentification",
            "order": 2,
            "category": "identification",
            "description": "A surface may be specified by",
            "options": [
                {"order": 1, "type": "string", "description": "The surface name."},
                {"order": 0, "type": "uint", "description": "The surface index."},
            ],
        },
        {
            "name": "MouseButtonFlags",
            "order": 3,
            "category": "flag",
            "description": "Mouse buttons.",
            "options": [
                {"name": "left", "order": 0, "description": "Left button."},
                {"name": "right", "order": 1, "description": ""},
            ],
        },
        {
            "name": "Alignment",
            "order": 4,
            "category": "union",
            "description": "Text alignment.",
            "options": [
                {"name": "right", "order": 1, "description": ""},
                {"name": "left", "order": 0, "description": "Left aligned."},
            ],
        },
        {
            "name": "Tags",
            "order": 5,
            "category": "concept",
            "description": "Arbitrary data.",
        },
        {
            "name": "BoundingBox",
            "order": 6,
            "category": "struct",
            "description": "Two corners.",
            "attributes": [
                {"name": "left_top", "order": 0, "type": "Position", "description": "", "read": True, "write": True},
            ],
        },
        {
            "name": "ItemPrototypeFilters",
            "order": 7,
            "category": "filter",
            "description": "",
            "parameters": [
                {"name": "filter", "order": 0, "type": "string", "description": "Filter kind.", "optional": False},
            ],
            "variant_parameter_groups": [
                {
                    "name": "type",
                    "order": 0,
                    "parameters": [
                        {"name": "type", "order": 0, "type": "string", "description": "", "optional": False},
                    ],
                },
            ],
        },
    ],
}


def make_docs() -> dict[str, Any]:
    """Return a fresh deep copy of the sample document."""
    return copy.deepcopy(_DOCS)


@pytest.fixture
def docs() -> dict[str, Any]:
    return make_docs()


@pytest.fixture
def session(docs) -> GenerationSession:
    return GenerationSession.create(docs, GeneratorConfig())
