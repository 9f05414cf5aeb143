"""State owned by a single generation run."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import Any

from .config import GeneratorConfig
from .descriptions import convert_description, format_entire_description
from .index import ApiIndex, build_index
from .references import ReferenceResolver


@dataclass
class GenerationSession:
    """Index, resolver, and the deferred table declarations of one run.

    ``tables`` collects declarations of anonymous nested tables, written
    after everything else; ``emitted_tables`` is the insertion-ordered set
    of names already declared there.
    """

    config: GeneratorConfig
    index: ApiIndex
    resolver: ReferenceResolver
    tables: io.StringIO = field(default_factory=io.StringIO)
    emitted_tables: dict[str, None] = field(default_factory=dict)

    @classmethod
    def create(cls, docs: dict[str, Any], config: GeneratorConfig | None = None) -> GenerationSession:
        config = config or GeneratorConfig()
        index = build_index(docs)
        return cls(config, index, ReferenceResolver(index, config.runtime_api_base))

    def view_documentation(self, reference: str) -> str:
        return self.resolver.view_documentation(reference)

    def describe(self, description: str | None) -> str:
        return convert_description(self.resolver, description)

    def describe_entity(
        self, obj: dict[str, Any], view_documentation_link: str, description: str | None = None,
    ) -> str:
        return self.describe(
            format_entire_description(self.resolver, obj, view_documentation_link, description)
        )
