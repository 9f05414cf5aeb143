"""Build the ``---`` doc comment blocks attached to every declaration."""

from __future__ import annotations

import re
from typing import Any

from .references import ReferenceResolver

_CODE_FENCE_RE = re.compile(r"(```.*?```)", re.DOTALL)
_SINGLE_NEWLINE_RE = re.compile(r"(?<=[^\n])\n(?=[^\n])")

COMMENT_PREFIX = "---"


def extend_string(text: str | None, pre: str = "", post: str = "", fallback: str = "") -> str:
    """Wrap text in pre/post, or return fallback when text is empty."""
    if not text:
        return fallback
    return f"{pre}{text}{post}"


def join_or(names: list[str]) -> str:
    """Join names as "a, b or c"."""
    if len(names) == 1:
        return names[0]
    return f"{', '.join(names[:-1])} or {names[-1]}"


def preprocess_description(resolver: ReferenceResolver, description: str) -> str:
    """Force hard line breaks and resolve links, leaving code fences untouched.

    Markdown joins single newlines into one paragraph; two trailing spaces
    keep them as line breaks.
    """
    parts = _CODE_FENCE_RE.split(description)
    # split() with one capture group alternates prose, fence, prose, ...
    for i in range(0, len(parts), 2):
        prose = _SINGLE_NEWLINE_RE.sub("  \n", parts[i])
        parts[i] = resolver.resolve_all_links(prose)
    return "".join(parts)


def convert_description(resolver: ReferenceResolver, description: str | None) -> str:
    """Render a description as ``---`` comment lines, one per line of text."""
    if not description:
        return ""
    text = preprocess_description(resolver, description)
    return COMMENT_PREFIX + text.replace("\n", f"\n{COMMENT_PREFIX}") + "\n"


def format_entire_description(
    resolver: ReferenceResolver,
    obj: dict[str, Any],
    view_documentation_link: str,
    description: str | None = None,
) -> str:
    """Assemble description, notes, doc link, examples, subclass restriction and see-also.

    ``description`` replaces the entity's own description when given.
    """
    notes = obj.get("notes")
    examples = obj.get("examples")
    subclasses = obj.get("subclasses")
    see_also = obj.get("see_also")

    parts = [
        description if description is not None else obj.get("description"),
        notes and "\n\n".join(f"**Note:** {note}" for note in notes),
        view_documentation_link,
        examples and "\n\n".join(f"### Example\n{example}" for example in examples),
        subclasses and f"_Can only be used if this is {join_or(subclasses)}_",
        see_also and "### See also\n" + "\n".join(
            f"- {resolver.resolve(reference)}" for reference in see_also
        ),
    ]
    return "\n\n".join(part for part in parts if part)
