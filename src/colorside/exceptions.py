"""Custom exceptions for colorside.

This module defines the exception hierarchy used throughout the package
to provide meaningful error messages and proper error handling.
"""


class ColorSideError(Exception):
    """Base exception for all colorside errors.

    All custom exceptions in this package inherit from this class,
    allowing callers to catch all colorside errors with a single
    except clause if desired.
    """

    pass


class ModuleNotActivatedError(ColorSideError, RuntimeError):
    """Raised when a module operation is called before ``ColorSide.use()``.

    This is a programming error and is never retried:
    - The console module was not activated before logging
    - The collection module was not activated before ``set``/``edit``
    - The input module was not activated before prompting
    """

    def __init__(self, module: str) -> None:
        super().__init__(f"{module.capitalize()} module not activated")
        self.module = module


class InvalidColorError(ColorSideError, ValueError):
    """Raised when a color value cannot be interpreted.

    This can occur when:
    - A hex string has the wrong length or non-hex characters
    - An RGB tuple has channels outside 0-255
    - A named color is not one of the eight ANSI colors
    """

    pass
