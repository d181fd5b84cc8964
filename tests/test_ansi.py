"""Tests for ansi.py module."""

import pytest

from colorside import ansi
from colorside.exceptions import InvalidColorError
from colorside.models import Layer


class TestCodes:
    """Tests for 16-color code generation."""

    @pytest.mark.parametrize(
        ("name", "layer", "bright", "expected"),
        [
            ("black", Layer.FOREGROUND, False, "\x1b[30m"),
            ("white", Layer.FOREGROUND, False, "\x1b[37m"),
            ("red", Layer.FOREGROUND, True, "\x1b[91m"),
            ("green", Layer.BACKGROUND, False, "\x1b[42m"),
            ("cyan", Layer.BACKGROUND, True, "\x1b[106m"),
        ],
    )
    def test_code(self, name, layer, bright, expected):
        """Test codes for each layer and intensity."""
        assert ansi.code(name, layer, bright=bright) == expected

    def test_code_is_case_insensitive(self):
        """Test color names are matched case-insensitively."""
        assert ansi.code("Blue") == "\x1b[34m"

    def test_unknown_color_raises(self):
        """Test an unknown name raises InvalidColorError."""
        with pytest.raises(InvalidColorError) as exc_info:
            ansi.code("purple")
        assert "purple" in str(exc_info.value)

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("red", "\x1b[31m"), ("red_bright", "\x1b[91m"), ("redBright", "\x1b[91m")],
    )
    def test_parse_style_name(self, name, expected):
        """Test plain, snake-case bright and camel-case bright names."""
        assert ansi.parse_style_name(name) == expected

    def test_parse_style_name_background(self):
        """Test style names on the background layer."""
        assert ansi.parse_style_name("yellow_bright", Layer.BACKGROUND) == "\x1b[103m"


class TestPainter:
    """Tests for named-color painters."""

    def test_attribute_access(self):
        """Test painter.<color>(text) wraps text and resets."""
        fg = ansi.Painter(Layer.FOREGROUND)
        assert fg.red("alert") == "\x1b[31malert\x1b[0m"

    def test_bright_painter(self):
        """Test the bright sub-painter uses the 9x codes."""
        fg = ansi.Painter(Layer.FOREGROUND)
        assert fg.bright.green("ok") == "\x1b[92mok\x1b[0m"

    def test_background_painter(self):
        """Test background painters use the 4x and 10x codes."""
        bg = ansi.Painter(Layer.BACKGROUND)
        assert bg.blue(" ") == "\x1b[44m \x1b[0m"
        assert bg.bright.blue(" ") == "\x1b[104m \x1b[0m"

    def test_bright_painter_has_no_nested_bright(self):
        """Test only the base painter exposes a bright variant."""
        assert ansi.Painter().bright.bright is None

    def test_unknown_attribute_raises(self):
        """Test unknown colors raise AttributeError."""
        with pytest.raises(AttributeError):
            ansi.Painter().purple("x")

    def test_paint_by_name(self):
        """Test paint() accepts a color name."""
        assert ansi.Painter().paint("magenta", "m") == "\x1b[35mm\x1b[0m"


class TestFormatting:
    """Tests for text formatting helpers."""

    def test_bold(self):
        """Test bold wraps text and resets."""
        assert ansi.bold("b") == "\x1b[1mb\x1b[0m"

    def test_underline(self):
        """Test underline wraps text and resets."""
        assert ansi.underline("u") == "\x1b[4mu\x1b[0m"

    def test_strip_ansi(self):
        """Test escape sequences are removed and text is kept."""
        styled = "\x1b[38;5;196mred\x1b[0m and \x1b[1mbold\x1b[0m"
        assert ansi.strip_ansi(styled) == "red and bold"
