"""
Style sheet tests

Tests loading YAML style sheets and merging them into the style table.
"""

import pytest

from clansi.lib.codes import ANSI_CODES, ansi
from clansi.lib.markup import clansify
from clansi.lib.styles import style_resolve
from clansi.lib.stylesheet import StyleSheet, StyleSheetError
from clansi.models.markup import k


@pytest.fixture
def codes_snapshot():
    saved = dict(ANSI_CODES)
    yield
    ANSI_CODES.clear()
    ANSI_CODES.update(saved)


def sheet_write(tmp_path, text, name="styles.yaml"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


class TestLoading:
    """Test reading and validating sheets"""

    def test_styles_section(self, tmp_path):
        path = sheet_write(tmp_path, "styles:\n  warning: [yellow, bright]\n  hint: cyan\n")
        sheet = StyleSheet(path)
        assert sheet.styles == {"warning": ["yellow", "bright"], "hint": "cyan"}
        assert sheet.codes == {}

    def test_plain_mapping(self, tmp_path):
        path = sheet_write(tmp_path, "error: [red, underline]\n")
        assert StyleSheet(path).styles == {"error": ["red", "underline"]}

    def test_empty_file(self, tmp_path):
        sheet = StyleSheet(sheet_write(tmp_path, ""))
        assert sheet.styles == {}

    def test_codes_section(self, tmp_path):
        path = sheet_write(tmp_path, 'codes:\n  bg-bright-black: "[100m"\nstyles:\n  dim: bg-bright-black\n')
        sheet = StyleSheet(path)
        assert sheet.codes == {"bg-bright-black": "[100m"}
        assert sheet.styles == {"dim": "bg-bright-black"}

    def test_missing_file(self, tmp_path):
        with pytest.raises(StyleSheetError, match="not found"):
            StyleSheet(tmp_path / "nope.yaml")

    def test_parse_error(self, tmp_path):
        path = sheet_write(tmp_path, "styles: [unclosed\n")
        with pytest.raises(StyleSheetError, match="Failed to parse"):
            StyleSheet(path)

    def test_top_level_list(self, tmp_path):
        path = sheet_write(tmp_path, "- red\n- blue\n")
        with pytest.raises(StyleSheetError, match="mapping"):
            StyleSheet(path)

    def test_bad_style_value(self, tmp_path):
        path = sheet_write(tmp_path, "styles:\n  warning: 3\n")
        with pytest.raises(StyleSheetError, match="warning"):
            StyleSheet(path)

    def test_bad_code_value(self, tmp_path):
        path = sheet_write(tmp_path, "codes:\n  odd: 3\n")
        with pytest.raises(StyleSheetError, match="odd"):
            StyleSheet(path)


class TestMerging:
    """Test installing sheets into the current context"""

    def test_unknown_list(self, tmp_path):
        path = sheet_write(tmp_path, "styles:\n  a: [red, purple]\n  b: protected\n")
        assert StyleSheet(path).unknown_list() == ["purple", "protected"]

    def test_merge_overlays(self, tmp_path):
        path = sheet_write(tmp_path, "styles:\n  warning: [yellow, bright]\n  doc: cyan\n")
        StyleSheet(path).styles_merge()
        assert style_resolve("warning") == ["yellow", "bright"]
        assert style_resolve("doc") == ["cyan"]
        assert style_resolve("protected") == ["green", "bright"]

    def test_merge_registers_codes(self, tmp_path, codes_snapshot):
        path = sheet_write(tmp_path, 'codes:\n  bg-bright-black: "[100m"\nstyles:\n  dim: bg-bright-black\n')
        StyleSheet(path).styles_merge()
        assert ansi("bg-bright-black") == "\x1b[100m"
        assert clansify(k.dim, "x") == "\x1b[0m\x1b[100mx\x1b[0m"

    def test_underscores_kept(self, tmp_path):
        path = sheet_write(tmp_path, "styles:\n  my_style: red\n")
        StyleSheet(path).styles_merge()
        assert style_resolve("my_style") == ["red"]


class TestBinding:
    """Test installing a sheet for one block only"""

    def test_bind_scopes_codes_and_styles(self, tmp_path):
        path = sheet_write(tmp_path, 'codes:\n  bg-bright-black: "[100m"\nstyles:\n  dim: bg-bright-black\n')
        sheet = StyleSheet(path)

        with sheet.bind():
            assert clansify(k.dim, "x") == "\x1b[0m\x1b[100mx\x1b[0m"
            assert style_resolve("protected") == ["green", "bright"]

        assert "bg-bright-black" not in ANSI_CODES
        assert style_resolve("dim") == ["dim"]

    def test_bind_restored_after_exception(self, tmp_path):
        sheet = StyleSheet(sheet_write(tmp_path, "styles:\n  hint: cyan\n"))
        with pytest.raises(RuntimeError):
            with sheet.bind():
                raise RuntimeError("boom")
        assert style_resolve("hint") == ["hint"]

    def test_unknown_list_sees_bound_codes(self, tmp_path):
        first = StyleSheet(sheet_write(tmp_path, 'codes:\n  extra: "[100m"\n', name="codes.yaml"))
        second = StyleSheet(sheet_write(tmp_path, "styles:\n  dim: extra\n"))
        assert second.unknown_list() == ["extra"]
        with first.bind():
            assert second.unknown_list() == []
