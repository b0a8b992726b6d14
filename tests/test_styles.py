"""
Style table tests

Tests style resolution and the scoped style table.
"""

import threading

import pytest

from clansi.lib.markup import clansify
from clansi.lib.styles import (
    DEFAULT_STYLES,
    style_resolve,
    styles_bind,
    styles_extend,
    styles_get,
    styles_set,
)
from clansi.models.markup import k


class TestResolve:
    """Test style -> directive expansion"""

    def test_compound_style(self):
        assert style_resolve("protected") == ["green", "bright"]

    def test_scalar_style_becomes_singleton(self):
        assert style_resolve("line") == ["blue"]

    def test_plain_directive(self):
        assert style_resolve("red") == ["red"]

    def test_unknown_name_passes_through(self):
        assert style_resolve("no-such-style") == ["no-such-style"]

    def test_explicit_table(self):
        assert style_resolve("x", {"x": ["cyan", "underline"]}) == ["cyan", "underline"]


class TestScopedTable:
    """Test binding and extending the style table"""

    def test_default_table(self):
        assert styles_get() == DEFAULT_STYLES

    def test_bind_replaces(self):
        with styles_bind({"warning": "yellow"}):
            assert style_resolve("warning") == ["yellow"]
            assert style_resolve("protected") == ["protected"]
        assert style_resolve("protected") == ["green", "bright"]

    def test_bind_merge(self):
        with styles_bind({"warning": ["yellow", "bright"]}, merge=True) as table:
            assert table["protected"] == ["green", "bright"]
            assert style_resolve("warning") == ["yellow", "bright"]
        assert style_resolve("warning") == ["warning"]

    def test_bind_restored_after_exception(self):
        with pytest.raises(KeyError):
            with styles_bind({}):
                raise KeyError("boom")
        assert styles_get() == DEFAULT_STYLES

    def test_extend_hyphenates(self):
        styles_extend(error_line=["red", "underline"])
        assert style_resolve("error-line") == ["red", "underline"]
        assert style_resolve("protected") == ["green", "bright"]

    def test_set_copies(self):
        table = {"hint": "cyan"}
        styles_set(table)
        table["hint"] = "red"
        assert style_resolve("hint") == ["cyan"]

    def test_default_not_mutated(self):
        styles_extend(extra="red")
        assert "extra" not in DEFAULT_STYLES

    def test_set_seen_by_new_thread(self):
        """The root table reaches threads started afterwards"""
        seen = {}
        styles_set({"hint": "cyan"})

        thread = threading.Thread(target=lambda: seen.update(worker=style_resolve("hint")))
        thread.start()
        thread.join(5)

        assert seen == {"worker": ["cyan"]}

    def test_bind_not_seen_by_other_thread(self):
        seen = {}
        with styles_bind({"hint": "cyan"}):
            thread = threading.Thread(target=lambda: seen.update(worker=style_resolve("hint")))
            thread.start()
            thread.join(5)
        assert seen == {"worker": ["hint"]}

    def test_extend_mapping_keeps_underscores(self):
        styles_extend({"my_style": "cyan"})
        assert style_resolve("my_style") == ["cyan"]


class TestLenientValues:
    """Test style values that are not plain names"""

    def test_directive_value(self):
        styles_extend(warn=k.red)
        assert style_resolve("warn") == ["red"]
        assert clansify(k.warn, "x") == "\x1b[0m\x1b[31mx\x1b[0m"

    def test_directive_list(self):
        styles_extend(loud=[k.red, "bright"])
        assert style_resolve("loud") == ["red", "bright"]

    def test_scalar_value(self):
        styles_extend(odd=42)
        assert style_resolve("odd") == ["42"]
        assert clansify(k.odd, "x") == "\x1b[0m\x1b[0mx\x1b[0m"

    def test_mapping_value(self):
        styles_extend(odd={"a": 1})
        assert clansify(k.odd, "x") == "\x1b[0m\x1b[0mx\x1b[0m"
