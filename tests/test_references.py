"""Tests for cross-reference resolution."""

import pytest

from apidocs.errors import UnresolvedReferenceError
from apidocs.index import build_index
from apidocs.references import ReferenceResolver

from conftest import API_BASE


@pytest.fixture
def resolver(docs):
    return ReferenceResolver(build_index(docs), API_BASE)


class TestRelativeLink:
    """Test routing of each reference category."""

    def test_builtin(self, resolver):
        assert resolver.relative_link("float") == "Builtin-Types.html#float"

    def test_class(self, resolver):
        assert resolver.relative_link("LuaPlayer") == "LuaPlayer.html"

    def test_event(self, resolver):
        assert resolver.relative_link("on_tick") == "events.html#on_tick"

    def test_define_root(self, resolver):
        assert resolver.relative_link("defines") == "defines.html#defines"

    def test_define_value(self, resolver):
        assert resolver.relative_link("defines.direction.north") == "defines.html#defines.direction.north"

    def test_class_member(self, resolver):
        assert resolver.relative_link("LuaPlayer::color") == "LuaPlayer.html#LuaPlayer.color"

    def test_concept_member(self, resolver):
        assert resolver.relative_link("BoundingBox::left_top") == "Concepts.html#BoundingBox.left_top"

    def test_member_of_unknown_owner(self, resolver):
        with pytest.raises(UnresolvedReferenceError) as exc:
            resolver.relative_link("LuaNothing::foo")
        assert exc.value.reference == "LuaNothing::foo"

    def test_event_filters(self, resolver):
        assert resolver.relative_link("LuaEntityClonedEventFilters") == "Event-Filters.html#LuaEntityClonedEventFilters"

    def test_concept_filters(self, resolver):
        assert resolver.relative_link("ItemPrototypeFilters") == "Concepts.html#ItemPrototypeFilters"

    def test_unknown_filters(self, resolver):
        with pytest.raises(UnresolvedReferenceError):
            resolver.relative_link("RecipePrototypeFilters")

    def test_concept(self, resolver):
        assert resolver.relative_link("Color") == "Concepts.html#Color"

    def test_unknown(self, resolver):
        with pytest.raises(UnresolvedReferenceError):
            resolver.relative_link("SomethingElse")


class TestResolve:
    def test_markdown_link(self, resolver):
        assert resolver.resolve("LuaPlayer") == f"[LuaPlayer]({API_BASE}LuaPlayer.html)"

    def test_display_name(self, resolver):
        assert resolver.resolve("Color", "colour") == f"[colour]({API_BASE}Concepts.html#Color)"

    def test_view_documentation(self, resolver):
        assert resolver.view_documentation("on_tick") == f"[View documentation]({API_BASE}events.html#on_tick)"

    def test_custom_api_base(self, docs):
        resolver = ReferenceResolver(build_index(docs), "https://example.com/1.1/")
        assert resolver.url("float") == "https://example.com/1.1/Builtin-Types.html#float"


class TestResolveAllLinks:
    def test_absolute_link_unchanged(self, resolver):
        text = "See [the wiki](https://wiki.factorio.com/Console)."
        assert resolver.resolve_all_links(text) == text

    def test_page_link_prefixed(self, resolver):
        text = "Read [data lifecycle](Data-Lifecycle.html)."
        assert resolver.resolve_all_links(text) == f"Read [data lifecycle]({API_BASE}Data-Lifecycle.html)."

    def test_page_anchor_prefixed(self, resolver):
        text = "[x](Classes.html#top)"
        assert resolver.resolve_all_links(text) == f"[x]({API_BASE}Classes.html#top)"

    def test_internal_reference(self, resolver):
        text = "Uses [LuaPlayer::color](LuaPlayer::color) and [tick](on_tick)."
        assert resolver.resolve_all_links(text) == (
            f"Uses [LuaPlayer::color]({API_BASE}LuaPlayer.html#LuaPlayer.color)"
            f" and [tick]({API_BASE}events.html#on_tick)."
        )

    def test_unresolved_internal_reference(self, resolver):
        with pytest.raises(UnresolvedReferenceError):
            resolver.resolve_all_links("Broken [link](NoSuchThing).")
