"""Resolve cross-references to links into the online API documentation.

Routing, first match wins:
  builtin name        -> Builtin-Types.html#name
  class name          -> Name.html
  event name          -> events.html#name
  define path         -> defines.html#path
  Owner::member       -> Owner.html#Owner.member (class) or
                         Concepts.html#Owner.member (concept)
  ...Filters          -> Event-Filters.html#name (Lua prefix) or
                         Concepts.html#name (concept)
  concept name        -> Concepts.html#name
Anything else raises UnresolvedReferenceError.
"""

from __future__ import annotations

import re

from .errors import UnresolvedReferenceError
from .index import ApiIndex

_MEMBER_RE = re.compile(r"^(.*?)::(.*)$")
_FILTERS_RE = re.compile(r"Filters$")
_LINK_RE = re.compile(r"\[(.+?)\]\((.+?)\)")
_ABSOLUTE_RE = re.compile(r"^https?://")
_PAGE_RE = re.compile(r"\.html($|#)")

VIEW_DOCUMENTATION = "View documentation"


class ReferenceResolver:
    def __init__(self, index: ApiIndex, api_base: str) -> None:
        self.index = index
        self.api_base = api_base

    def relative_link(self, reference: str) -> str:
        """Return the documentation path for a reference, relative to the API base."""
        index = self.index
        if reference in index.builtins:
            return f"Builtin-Types.html#{reference}"
        if reference in index.classes:
            return f"{reference}.html"
        if reference in index.events:
            return f"events.html#{reference}"
        if reference in index.defines:
            return f"defines.html#{reference}"

        match = _MEMBER_RE.match(reference)
        if match:
            owner, member = match.groups()
            if owner in index.classes:
                return f"{owner}.html#{owner}.{member}"
            if owner in index.concepts:
                return f"Concepts.html#{owner}.{member}"
            raise UnresolvedReferenceError(reference)

        if _FILTERS_RE.search(reference):
            if reference.startswith("Lua"):
                return f"Event-Filters.html#{reference}"
            # Non-event filters are ordinary concepts
            if reference in index.concepts:
                return f"Concepts.html#{reference}"
            raise UnresolvedReferenceError(reference)

        if reference in index.concepts:
            return f"Concepts.html#{reference}"
        raise UnresolvedReferenceError(reference)

    def url(self, reference: str) -> str:
        return self.api_base + self.relative_link(reference)

    def resolve(self, reference: str, display_name: str | None = None) -> str:
        """Return a markdown link for the reference."""
        return f"[{display_name or reference}]({self.url(reference)})"

    def view_documentation(self, reference: str) -> str:
        return self.resolve(reference, VIEW_DOCUMENTATION)

    def resolve_all_links(self, text: str) -> str:
        """Rewrite every markdown link in text to an absolute documentation link."""

        def replace(match: re.Match[str]) -> str:
            display_name, link = match.groups()
            if _ABSOLUTE_RE.match(link):
                return match.group(0)
            if _PAGE_RE.search(link):
                return f"[{display_name}]({self.api_base}{link})"
            return self.resolve(link, display_name)

        return _LINK_RE.sub(replace, text)
