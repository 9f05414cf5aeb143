"""Assemble the stub file and write it out.

Runs every section emitter against one GenerationSession and renders the
sections, in fixed order, through templates/runtime-api.lua.j2.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Any

import jinja2

from .config import GeneratorConfig
from .emitters import emit_builtins, emit_classes, emit_concepts, emit_defines, emit_events
from .session import GenerationSession

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "runtime-api.lua.j2"
OUTPUT_DIR = Path(__file__).parent.parent / "generated"
OUTPUT_NAME = "runtime-api.lua"

# Template variable -> emitter, in output order
_SECTIONS = (
    ("builtins", emit_builtins),
    ("defines", emit_defines),
    ("events", emit_events),
    ("classes", emit_classes),
    ("concepts", emit_concepts),
)


def _environment() -> jinja2.Environment:
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )


def build_sections(session: GenerationSession, docs: dict[str, Any]) -> dict[str, str]:
    """Run all emitters; the deferred tables are collected last."""
    sections: dict[str, str] = {}
    for name, emit in _SECTIONS:
        output = io.StringIO()
        emit(session, output, docs)
        sections[name] = output.getvalue()
        logger.debug("Section %s: %d chars", name, len(sections[name]))
    sections["tables"] = session.tables.getvalue()
    logger.debug("Deferred %d table declarations", len(session.emitted_tables))
    return sections


def generate(docs: dict[str, Any], config: GeneratorConfig | None = None, custom: str = "") -> str:
    """Generate the complete stub file text for a validated document.

    ``custom`` is a hand-written Lua appendix inserted verbatim before the
    deferred table declarations.
    """
    session = GenerationSession.create(docs, config)
    sections = build_sections(session, docs)
    template = _environment().get_template(TEMPLATE_NAME)
    return template.render(custom=custom, **sections)


def write_output(text: str, output_path: Path | None = None) -> Path:
    """Write generated text, creating the output directory if needed."""
    output_path = output_path or OUTPUT_DIR / OUTPUT_NAME
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text, encoding="utf-8")
    return output_path
