"""
Tests for output format backends.
"""

import pytest

from chatgradient.color import RGBColor
from chatgradient.errors import InvalidArgument
from chatgradient.render import (
    StyleFlags,
    StyleBackend,
    LegacyBackend,
    SectionBackend,
    MiniMessageBackend,
    AnsiBackend,
    get_backend,
    backend_names,
)
from chatgradient.ui.colors import strip_ansi

ORANGE = RGBColor(255, 165, 0)
BOLD = StyleFlags(bold=True)
ITALIC = StyleFlags(italic=True)


class TestRegistry:
    """Tests for get_backend() and backend_names()."""

    def test_builtin_names(self):
        assert backend_names() == ["ansi", "legacy", "minimessage", "section"]

    def test_default_is_legacy(self):
        assert isinstance(get_backend(), LegacyBackend)

    def test_lookup_by_name(self):
        assert isinstance(get_backend("minimessage"), MiniMessageBackend)

    def test_instance_passthrough(self):
        backend = AnsiBackend()
        assert get_backend(backend) is backend

    def test_unknown_name_raises(self):
        with pytest.raises(InvalidArgument, match="Available"):
            get_backend("bbcode")


class TestStyleFlags:
    def test_default_is_falsy(self):
        assert not StyleFlags()

    def test_any_flag_is_truthy(self):
        assert BOLD
        assert ITALIC


class TestLegacyBackend:
    """Tests for '&x&R&R&G&G&B&B' chat codes."""

    def test_color_token(self):
        assert LegacyBackend().color_token(ORANGE) == "&x&f&f&a&5&0&0"

    def test_plain_unit(self):
        backend = LegacyBackend()
        assert backend.styled_unit("A", backend.color_token(ORANGE)) == "&x&f&f&a&5&0&0A"

    def test_decorations_follow_color(self):
        """Color codes reset formatting in chat, so &l/&o must come after."""
        backend = LegacyBackend()
        token = backend.color_token(ORANGE)
        assert backend.styled_unit("A", token, BOLD) == token + "&lA"
        assert backend.styled_unit("A", token, StyleFlags(True, True)) == token + "&l&oA"

    def test_concat_no_separator(self):
        assert LegacyBackend().concat(["a", "b", "c"]) == "abc"


class TestSectionBackend:
    def test_uses_section_sign(self):
        assert SectionBackend().color_token(RGBColor(0, 0, 255)) == "§x§0§0§0§0§f§f"

    def test_italic(self):
        backend = SectionBackend()
        assert backend.styled_unit("z", "", ITALIC) == "§oz"


class TestMiniMessageBackend:
    """Tests for MiniMessage tag output."""

    def test_closed_color_tag(self):
        backend = MiniMessageBackend()
        token = backend.color_token(ORANGE)
        assert backend.styled_unit("A", token) == "<#ffa500>A</#ffa500>"

    def test_bold_italic_nested_inside_color(self):
        backend = MiniMessageBackend()
        token = backend.color_token(ORANGE)
        result = backend.styled_unit("A", token, StyleFlags(True, True))
        assert result == "<#ffa500><b><i>A</i></b></#ffa500>"

    def test_escapes_tag_open(self):
        backend = MiniMessageBackend()
        assert backend.styled_unit("<", "#000000") == "<#000000>\\<</#000000>"


class TestAnsiBackend:
    """Tests for truecolor terminal preview output."""

    def test_color_token(self):
        assert AnsiBackend().color_token(ORANGE) == "\x1b[38;2;255;165;0m"

    def test_no_trailing_reset(self):
        backend = AnsiBackend()
        out = backend.concat([backend.styled_unit("A", backend.color_token(ORANGE))])
        assert not out.endswith("\x1b[0m")
        assert strip_ansi(out) == "A"

    def test_bold(self):
        backend = AnsiBackend()
        assert backend.styled_unit("A", "", BOLD) == "\x1b[1mA"


class TestCustomBackend:
    def test_base_class_is_abstract(self):
        with pytest.raises(NotImplementedError):
            StyleBackend().color_token(ORANGE)
