"""Fixed ANSI SGR codes and named-color painters.

Every painter wraps its text in the color code followed by ``RESET`` so a
styled fragment never bleeds into whatever is printed after it.
"""

import re
from enum import Enum

from colorside.exceptions import InvalidColorError
from colorside.models import Layer

ESC = "\x1b"
RESET = f"{ESC}[0m"
BOLD = f"{ESC}[1m"
UNDERLINE = f"{ESC}[4m"

# CSI sequences: ESC [ params final-byte
_CSI_PATTERN = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]")


class ColorName(str, Enum):
    """The eight standard ANSI colors, valued by their SGR offset."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"

    @property
    def offset(self) -> int:
        return list(ColorName).index(self)

    @classmethod
    def parse(cls, name: "str | ColorName") -> "ColorName":
        try:
            return cls(name.lower() if isinstance(name, str) else name)
        except ValueError:
            raise InvalidColorError(f"Unknown color name: '{name}'") from None


def code(name: str | ColorName, layer: Layer = Layer.FOREGROUND, *, bright: bool = False) -> str:
    """Return the 16-color SGR code for a named color.

    Args:
        name: One of the eight ANSI color names.
        layer: Foreground (``3x``/``9x``) or background (``4x``/``10x``).
        bright: Use the bright variant.

    Returns:
        The escape sequence, e.g. ``ESC[91m`` for bright red text.

    Raises:
        InvalidColorError: If the name is not a known color.

    """
    offset = ColorName.parse(name).offset
    if layer is Layer.FOREGROUND:
        base = 90 if bright else 30
    else:
        base = 100 if bright else 40
    return f"{ESC}[{base + offset}m"


def parse_style_name(name: str, layer: Layer = Layer.FOREGROUND) -> str:
    """Return the code for a name such as ``"red"`` or ``"red_bright"``.

    The camel-case form ``"redBright"`` is accepted as well.
    """
    lowered = name.lower()
    for suffix in ("_bright", "bright"):
        if lowered.endswith(suffix) and lowered != suffix:
            return code(lowered[: -len(suffix)], layer, bright=True)
    return code(lowered, layer)


def strip_ansi(text: str) -> str:
    """Remove every CSI escape sequence from text."""
    return _CSI_PATTERN.sub("", text)


def bold(text: str) -> str:
    return f"{BOLD}{text}{RESET}"


def underline(text: str) -> str:
    return f"{UNDERLINE}{text}{RESET}"


class Painter:
    """Callable namespace of named-color wrappers for one layer.

    Example:
        >>> fg = Painter(Layer.FOREGROUND)
        >>> fg.red("alert") == "\\x1b[31malert\\x1b[0m"
        True
        >>> fg.bright.red("alert") == "\\x1b[91malert\\x1b[0m"
        True

    """

    def __init__(self, layer: Layer = Layer.FOREGROUND, *, bright: bool = False) -> None:
        self.layer = layer
        self.is_bright = bright
        self.bright: Painter | None = None if bright else Painter(layer, bright=True)

    def paint(self, name: str | ColorName, text: str) -> str:
        return f"{code(name, self.layer, bright=self.is_bright)}{text}{RESET}"

    def __getattr__(self, name: str):
        # Only reached for attributes not set in __init__
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            color = ColorName.parse(name)
        except InvalidColorError:
            raise AttributeError(name) from None
        return lambda text: self.paint(color, text)

    def __repr__(self) -> str:
        return f"Painter(layer={self.layer.name}, bright={self.is_bright})"


# Codes used by the default prompt theme
FG_BLUE = code(ColorName.BLUE)
FG_CYAN = code(ColorName.CYAN)
FG_BRIGHT_GREEN = code(ColorName.GREEN, bright=True)
FG_BRIGHT_RED = code(ColorName.RED, bright=True)
FG_BRIGHT_CYAN = code(ColorName.CYAN, bright=True)
