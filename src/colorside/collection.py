"""Labeled-line collection module.

Lines are recorded under an id so they can be replaced later. Without
cursor movement the replacement is printed as a new line rather than
redrawn in place.
"""

from rich.console import Console

from colorside.console import console, format_args
from colorside.exceptions import ModuleNotActivatedError


class CollectionModule:
    """Activation-gated collection of labeled output lines."""

    def __init__(self, out: Console | None = None) -> None:
        self.activated: bool = False
        self._out: Console = out or console
        self._lines: dict[str, str] = {}

    def activate(self) -> None:
        self.activated = True

    def _check_activation(self) -> None:
        if not self.activated:
            raise ModuleNotActivatedError("collection")

    def set(self, line_id: str, message: str) -> None:
        """Record a line under an id and print it."""
        self._check_activation()
        self._lines[line_id] = message
        self._out.print(format_args((message,)), soft_wrap=True)

    def edit(self, line_id: str, message: str) -> None:
        """Replace a recorded line and print the new text.

        Raises:
            KeyError: If nothing was recorded under ``line_id``.

        """
        self._check_activation()
        if line_id not in self._lines:
            raise KeyError(f"No collection line with id '{line_id}'")
        self._lines[line_id] = message
        self._out.print(format_args((message,)), soft_wrap=True)

    def get(self, line_id: str) -> str | None:
        self._check_activation()
        return self._lines.get(line_id)
