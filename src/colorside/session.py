"""Interrupt handling for interactive input sessions.

An interrupt while a prompt is on screen must not leave styled output
behind, so the guard resets the terminal and ends the process at once.
The handler is installed once per session instead of once per prompt.
"""

import signal
import sys
import threading
from typing import Any, TextIO

from colorside.ansi import RESET
from colorside.log import ic

# Exit status used after a user interrupt
INTERRUPT_EXIT_CODE = 0


class InterruptGuard:
    """Owns the SIGINT handler for the lifetime of an input session.

    Attributes:
        stream: Where the reset code is written on interrupt.
        installed: Whether the handler is currently registered.

    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream: TextIO | None = stream
        self.installed: bool = False
        self._previous: Any = None

    def install(self) -> None:
        """Register the SIGINT handler; repeated calls are no-ops.

        Signal handlers can only be set from the main thread. Elsewhere the
        guard stays uninstalled and interrupts surfacing as
        ``KeyboardInterrupt`` are still routed through ``abort``.
        """
        if self.installed:
            return
        if threading.current_thread() is not threading.main_thread():
            ic("interrupt guard not installed outside the main thread")
            return
        self._previous = signal.signal(signal.SIGINT, self._handle)
        self.installed = True

    def uninstall(self) -> None:
        """Restore the handler that was active before ``install``."""
        if not self.installed:
            return
        signal.signal(signal.SIGINT, self._previous if self._previous is not None else signal.default_int_handler)
        self._previous = None
        self.installed = False

    def _handle(self, signum: int, frame: object) -> None:
        self.abort()

    def abort(self) -> None:
        """Reset the terminal and terminate the process."""
        stream = self.stream or sys.stdout
        stream.write(RESET + "\n")
        stream.flush()
        sys.exit(INTERRUPT_EXIT_CODE)

    def __enter__(self) -> "InterruptGuard":
        self.install()
        return self

    def __exit__(self, exc_type: type | None, exc_val: Exception | None, exc_tb: object) -> None:
        self.uninstall()
