"""Prompt glyphs and translation of ANSI codes into questionary styles.

Themes carry raw ANSI escape codes. questionary renders through
prompt_toolkit, which takes style strings (``"fg:#ff87d7 bold"``) instead,
so the codes are translated here before a theme reaches the engine.
"""

import re
from typing import TYPE_CHECKING

from questionary import Style

from colorside.ansi256 import palette_rgb

if TYPE_CHECKING:
    from colorside.theme import PromptTheme

# Icon prefixes for prompts
QMARK = "?"
DONE_MARK = "✓"
ERROR_MARK = "✗"
POINTER = "❯"

_SGR_PATTERN = re.compile(r"\x1b\[([0-9;]*)m")

_ANSI_NAMES = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "gray")
_ANSI_BRIGHT_NAMES = (
    "brightblack", "brightred", "brightgreen", "brightyellow",
    "brightblue", "brightmagenta", "brightcyan", "white",
)

# Fixed entries not driven by a theme
BASE_STYLE_RULES = [
    ("separator", "fg:#6c6c6c"),  # Gray separator
    ("instruction", "fg:#6c6c6c italic"),  # Gray italic instructions
    ("selected", "fg:#87d787"),  # Green for selected items
    ("text", ""),  # Default text
    ("disabled", "fg:#585858 italic"),  # Dark gray disabled items
]


def _extended_color(params: list[int]) -> tuple[str, int] | None:
    """Decode a ``5;n`` or ``2;r;g;b`` tail; return (``#rrggbb``, params consumed)."""
    if len(params) >= 2 and params[0] == 5 and 0 <= params[1] <= 255:
        return palette_rgb(params[1]).to_hex(), 2
    if len(params) >= 4 and params[0] == 2 and all(0 <= p <= 255 for p in params[1:4]):
        r, g, b = params[1:4]
        return f"#{r:02x}{g:02x}{b:02x}", 4
    return None


def sgr_to_style(codes: str) -> str:
    """Translate ANSI SGR sequences into a prompt_toolkit style string.

    Args:
        codes: One or more escape sequences, e.g. ``"\\x1b[91m\\x1b[1m"``.
            Text between sequences is ignored.

    Returns:
        The equivalent style string, e.g. ``"fg:ansibrightred bold"``; a
        reset clears everything set before it.

    """
    attrs: list[str] = []
    fg: str | None = None
    bg: str | None = None

    for match in _SGR_PATTERN.finditer(codes):
        params = [int(p) if p else 0 for p in match.group(1).split(";")]
        i = 0
        while i < len(params):
            p = params[i]
            i += 1
            if p == 0:
                attrs, fg, bg = [], None, None
            elif p == 1:
                attrs.append("bold")
            elif p == 3:
                attrs.append("italic")
            elif p == 4:
                attrs.append("underline")
            elif 30 <= p <= 37:
                fg = f"ansi{_ANSI_NAMES[p - 30]}"
            elif 90 <= p <= 97:
                fg = f"ansi{_ANSI_BRIGHT_NAMES[p - 90]}"
            elif 40 <= p <= 47:
                bg = f"ansi{_ANSI_NAMES[p - 40]}"
            elif 100 <= p <= 107:
                bg = f"ansi{_ANSI_BRIGHT_NAMES[p - 100]}"
            elif p in (38, 48):
                decoded = _extended_color(params[i:])
                if decoded is None:
                    break
                color, consumed = decoded
                i += consumed
                if p == 38:
                    fg = color
                else:
                    bg = color

    parts = []
    if fg:
        parts.append(f"fg:{fg}")
    if bg:
        parts.append(f"bg:{bg}")
    parts.extend(dict.fromkeys(attrs))
    return " ".join(parts)


def build_style(theme: "PromptTheme") -> Style:
    """Build the questionary style for a resolved theme.

    Args:
        theme: The theme of the prompt about to be asked.

    Returns:
        A questionary ``Style`` mapping the theme's colors onto the style
        classes questionary renders with.

    """
    highlight = sgr_to_style(theme.highlight_color)
    return Style(
        [
            *BASE_STYLE_RULES,
            ("qmark", sgr_to_style(theme.prefix_color)),
            ("question", sgr_to_style(theme.message_color) or "bold"),
            ("answer", sgr_to_style(theme.answer_color)),
            ("pointer", f"{highlight} bold".strip()),
            ("highlighted", highlight),
            ("validation-toolbar", f"bg:default {sgr_to_style(theme.error_color)}".strip()),
        ]
    )
