"""Rich console utilities for styled terminal output.

This module provides the shared Rich consoles, the status helpers used by
the command-line interface, and ``ConsoleModule``, the activation-gated
console of a ``ColorSide`` instance.
"""

from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

from colorside.exceptions import ModuleNotActivatedError

# Custom theme with consistent colors
_THEME = Theme(
    {
        "info": "cyan",
        "success": "green",
        "warning": "bright_yellow",
        "error": "bright_red",
        "fatal": "black on bright_red",
        "highlight": "cyan bold",
        "muted": "dim",
    }
)

# Shared console instances
console = Console(theme=_THEME)
err_console = Console(theme=_THEME, stderr=True)


def info(message: str) -> None:
    """Print an informational message.

    Args:
        message: The message to display.

    """
    console.print(f"[info]ℹ[/info] {message}")


def success(message: str) -> None:
    """Print a success message.

    Args:
        message: The message to display.

    """
    console.print(f"[success]✓[/success] {message}")


def warning(message: str) -> None:
    """Print a warning message.

    Args:
        message: The message to display.

    """
    console.print(f"[warning]⚠[/warning] {message}")


def error(message: str) -> None:
    """Print an error message.

    Args:
        message: The message to display.

    """
    console.print(f"[error]✗[/error] {message}")


def highlight(text: str) -> str:
    """Return text wrapped in highlight markup.

    Args:
        text: The text to highlight.

    Returns:
        Text wrapped in Rich markup for highlighting.

    """
    return f"[highlight]{text}[/highlight]"


def format_args(args: tuple[Any, ...], style: str = "") -> Text:
    """Join arguments with spaces, keeping any ANSI styling they carry."""
    return Text.from_ansi(" ".join(str(arg) for arg in args), style=style)


class ConsoleModule:
    """Console output gated behind activation.

    While frozen, output is queued instead of written so it cannot tear
    through an interactive prompt; ``unfreeze`` writes the queue in order.

    Attributes:
        activated: Whether ``activate`` has been called.

    """

    def __init__(self, out: Console | None = None, err: Console | None = None) -> None:
        self.activated: bool = False
        self._out: Console = out or console
        self._err: Console = err or err_console
        self._frozen: bool = False
        self._pending: list[tuple[Console, Text]] = []

    def activate(self) -> None:
        self.activated = True

    def _check_activation(self) -> None:
        if not self.activated:
            raise ModuleNotActivatedError("console")

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def _emit(self, target: Console, text: Text) -> None:
        if self._frozen:
            self._pending.append((target, text))
        else:
            target.print(text, soft_wrap=True)

    def log(self, *args: Any) -> None:
        self._check_activation()
        self._emit(self._out, format_args(args))

    def warn(self, *args: Any) -> None:
        self._check_activation()
        self._emit(self._err, format_args(args, style="warning"))

    def error(self, *args: Any) -> None:
        self._check_activation()
        self._emit(self._err, format_args(args, style="error"))

    def fatal(self, *args: Any) -> None:
        self._check_activation()
        self._emit(self._err, format_args(args, style="fatal"))

    def clear(self) -> None:
        self._check_activation()
        self._out.clear()

    def freeze(self) -> None:
        """Start queueing output."""
        self._check_activation()
        self._frozen = True

    def unfreeze(self) -> None:
        """Stop queueing and write everything queued while frozen."""
        self._frozen = False
        pending, self._pending = self._pending, []
        for target, text in pending:
            target.print(text, soft_wrap=True)

    @contextmanager
    def frozen(self) -> Generator[None, None, None]:
        """Queue output for the duration of the block.

        Used around prompts, so it does not require activation. A freeze
        already in place when the block starts is left in place.

        Yields:
            None

        """
        was_frozen = self._frozen
        self._frozen = True
        try:
            yield
        finally:
            if not was_frozen:
                self.unfreeze()
