"""Quantize 24-bit colors onto the 256-color terminal palette.

The 256-color palette is laid out as 16 legacy colors, a 6x6x6 RGB cube
(indices 16-231) and a 24-step grayscale ramp (indices 232-255). Colors
whose channels are nearly equal are mapped onto the grayscale ramp, which
is finer than the cube's gray diagonal; everything else goes to the cube.
The legacy colors 0-15 are never produced because their actual RGB values
depend on the terminal's theme.

All rounding here is half-up, done in integer arithmetic; ``round`` would
round half to even.
"""

import re
from collections.abc import Sequence

from colorside.ansi import ESC, RESET
from colorside.exceptions import InvalidColorError
from colorside.log import ic
from colorside.models import Color, Layer

_HEX_PATTERN = re.compile(r"[0-9a-fA-F]{6}")

# Channels whose spread is within this threshold count as gray
GRAY_THRESHOLD = 10

CUBE_OFFSET = 16
RAMP_OFFSET = 232
CUBE_BLACK = 16
CUBE_WHITE = 231

# Channel levels of the xterm color cube and the 16 legacy colors
_CUBE_LEVELS = (0, 95, 135, 175, 215, 255)
_LEGACY_COLORS = (
    (0, 0, 0), (128, 0, 0), (0, 128, 0), (128, 128, 0),
    (0, 0, 128), (128, 0, 128), (0, 128, 128), (192, 192, 192),
    (128, 128, 128), (255, 0, 0), (0, 255, 0), (255, 255, 0),
    (0, 0, 255), (255, 0, 255), (0, 255, 255), (255, 255, 255),
)

ColorLike = str | Color | Sequence[int]


def _round_div(numerator: int, denominator: int) -> int:
    """Return ``numerator / denominator`` rounded half-up (towards +inf)."""
    return (2 * numerator + denominator) // (2 * denominator)


def parse_hex(value: ColorLike) -> Color:
    """Parse a color given as ``#rrggbb``, ``rrggbb`` or an RGB triple.

    Args:
        value: Six hex digits with an optional leading ``#`` (any case),
            a ``Color``, or a sequence of three ints in 0-255.

    Returns:
        The parsed color.

    Raises:
        InvalidColorError: If the value is malformed.

    """
    if isinstance(value, Color):
        return value
    if isinstance(value, str):
        digits = value[1:] if value.startswith("#") else value
        if not _HEX_PATTERN.fullmatch(digits):
            raise InvalidColorError(f"Invalid hex color: '{value}' (expected 6 hex digits, optionally prefixed with '#')")
        return Color(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    channels = tuple(value)
    if len(channels) != 3 or not all(isinstance(c, int) and 0 <= c <= 255 for c in channels):
        raise InvalidColorError(f"Invalid RGB color: {value!r} (expected three ints in 0-255)")
    return Color(*channels)


def is_gray(color: Color) -> bool:
    return max(color) - min(color) <= GRAY_THRESHOLD


def _gray_index(color: Color) -> int:
    gray = _round_div(sum(color), 3)
    if gray <= 8:
        return CUBE_BLACK
    if gray >= 248:
        return CUBE_WHITE
    # Levels 243-247 round past the last ramp step
    return min(255, RAMP_OFFSET + _round_div(gray - 8, 10))


def _cube_step(channel: int) -> int:
    return min(5, max(0, _round_div(channel - 55, 40)))


def palette_index(color: ColorLike) -> int:
    """Return the 256-color palette index closest to a color.

    Args:
        color: Any value accepted by ``parse_hex``.

    Returns:
        An index in 16-231 (color cube) or 232-255 (grayscale ramp).

    Raises:
        InvalidColorError: If the color is malformed.

    """
    rgb = parse_hex(color)
    if is_gray(rgb):
        index = _gray_index(rgb)
    else:
        r, g, b = (_cube_step(c) for c in rgb)
        index = CUBE_OFFSET + 36 * r + 6 * g + b
    ic(rgb, index)
    return index


def palette_rgb(index: int) -> Color:
    """Return the standard xterm RGB value of a palette index.

    Args:
        index: A palette index in 0-255.

    Returns:
        The color the index displays as on a default xterm palette.

    Raises:
        InvalidColorError: If the index is outside 0-255.

    """
    if not 0 <= index <= 255:
        raise InvalidColorError(f"Palette index out of range: {index}")
    if index < CUBE_OFFSET:
        return Color(*_LEGACY_COLORS[index])
    if index < RAMP_OFFSET:
        offset = index - CUBE_OFFSET
        return Color(_CUBE_LEVELS[offset // 36], _CUBE_LEVELS[offset // 6 % 6], _CUBE_LEVELS[offset % 6])
    level = 8 + 10 * (index - RAMP_OFFSET)
    return Color(level, level, level)


def escape(color: ColorLike, layer: Layer = Layer.FOREGROUND) -> str:
    """Return the SGR sequence selecting a color's palette index.

    Args:
        color: Any value accepted by ``parse_hex``.
        layer: Foreground (``38``) or background (``48``).

    Returns:
        ``ESC[38;5;{index}m`` or ``ESC[48;5;{index}m``.

    """
    return f"{ESC}[{layer.value};5;{palette_index(color)}m"


def wrap(color: ColorLike, text: str, layer: Layer = Layer.FOREGROUND) -> str:
    """Color text and reset afterwards, whatever the text contains."""
    return f"{escape(color, layer)}{text}{RESET}"


def fg_code(color: ColorLike) -> str:
    return escape(color, Layer.FOREGROUND)


def bg_code(color: ColorLike) -> str:
    return escape(color, Layer.BACKGROUND)


def fg(color: ColorLike, text: str) -> str:
    return wrap(color, text, Layer.FOREGROUND)


def bg(color: ColorLike, text: str) -> str:
    return wrap(color, text, Layer.BACKGROUND)
