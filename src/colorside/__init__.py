"""colorside: terminal colors and themed interactive prompts.

This package maps 24-bit colors onto the 256-color terminal palette and
wraps questionary prompts in a per-call theme.

Example usage:
    from colorside import ColorSide, ansi256

    print(ansi256.fg("#ff8700", "orange text"))

    side = ColorSide("en")
    side.use(side.input)
    name = side.input.readtext("Your name", message_color=side.input.styles(fg="cyan"))
"""

__version__ = "0.1.0"

from colorside import ansi256
from colorside.ansi import RESET, Painter, strip_ansi
from colorside.cli import cli
from colorside.engine import PromptEngine, PromptRequest, QuestionaryEngine
from colorside.exceptions import ColorSideError, InvalidColorError, ModuleNotActivatedError
from colorside.models import Choice, Color, Layer, Locale, Prefix, PromptKind, PromptOptions, SelectColor
from colorside.rand import Random
from colorside.side import ColorSide
from colorside.theme import PromptTheme, resolve_theme

__all__ = [
    # Version
    "__version__",
    # Main CLI
    "cli",
    # Classes
    "ColorSide",
    "Random",
    "Painter",
    # Color quantization
    "ansi256",
    "RESET",
    "strip_ansi",
    # Theming
    "Choice",
    "Color",
    "Layer",
    "Locale",
    "Prefix",
    "PromptKind",
    "PromptOptions",
    "PromptTheme",
    "SelectColor",
    "resolve_theme",
    # Engines
    "PromptEngine",
    "PromptRequest",
    "QuestionaryEngine",
    # Exceptions
    "ColorSideError",
    "InvalidColorError",
    "ModuleNotActivatedError",
]
