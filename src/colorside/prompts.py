"""Themed interactive prompts.

This module provides ``InputModule``, which resolves a theme for each
prompt kind, asks the prompt engine and leaves the terminal unstyled
afterwards.
"""

import sys
from collections.abc import Callable, Iterable, Mapping
from typing import Any, TextIO

import click

from colorside.ansi import RESET, parse_style_name
from colorside.console import ConsoleModule
from colorside.engine import PromptEngine, PromptRequest, QuestionaryEngine
from colorside.exceptions import ModuleNotActivatedError
from colorside.log import ic
from colorside.models import Choice, Layer, Locale, PromptKind, PromptOptions, build_choices
from colorside.session import InterruptGuard
from colorside.theme import resolve_theme
from colorside.validation import (
    TextValidator,
    numeric_validator,
    parse_number,
    selection_validator,
    text_validator,
)

ChoiceLike = Choice | Mapping[str, Any] | str


def _to_number(value: Any) -> Any:
    number = parse_number(str(value))
    return value if number is None else number


class InputModule:
    """Activation-gated interactive input.

    Style keyword arguments accepted by every prompt operation are the
    fields of ``PromptOptions``: ``message_color``, ``input_color``,
    ``prefix`` (omit for the default glyph, ``None`` for no prefix, or a
    string), ``prefix_color``, ``finish_prefix``, ``instructions`` and
    ``select_colors``.

    Attributes:
        locale: Locale of built-in messages and instructions.
        activated: Whether ``activate`` has been called.

    """

    def __init__(
        self,
        locale: Locale | str = Locale.EN,
        *,
        console: ConsoleModule | None = None,
        engine: PromptEngine | None = None,
        guard: InterruptGuard | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self.locale: Locale = Locale.parse(locale)
        self.activated: bool = False
        self._console = console or ConsoleModule()
        self._engine: PromptEngine = engine or QuestionaryEngine()
        self._guard = guard or InterruptGuard(stream)
        self._stream = stream

    def activate(self) -> "InputModule":
        """Enable the module and install the interrupt guard for the session."""
        self.activated = True
        self._guard.install()
        return self

    def close(self) -> None:
        """Tear down the interrupt guard; the module stays activated."""
        self._guard.uninstall()

    def __enter__(self) -> "InputModule":
        return self.activate()

    def __exit__(self, exc_type: type | None, exc_val: Exception | None, exc_tb: object) -> None:
        self.close()

    def _check_activation(self) -> None:
        if not self.activated:
            raise ModuleNotActivatedError("input")

    def _write_reset(self) -> None:
        stream = self._stream or sys.stdout
        stream.write(RESET)
        stream.flush()

    def styles(self, fg: str | None = None, bg: str | None = None) -> str:
        """Return the codes for named colors such as ``"red"`` or ``"red_bright"``.

        Args:
            fg: Foreground color name.
            bg: Background color name.

        Returns:
            The concatenated escape codes (empty when neither is given).

        Raises:
            InvalidColorError: If a name is not a known color.

        """
        self._check_activation()
        codes = []
        if fg:
            codes.append(parse_style_name(fg, Layer.FOREGROUND))
        if bg:
            codes.append(parse_style_name(bg, Layer.BACKGROUND))
        return "".join(codes)

    def readline(self, prompt: str, style: str | None = None) -> str:
        """Read one raw line of input.

        Args:
            prompt: Text shown before the cursor.
            style: Escape codes applied to the prompt text.

        Returns:
            The line entered, without the trailing newline.

        """
        self._check_activation()
        styled = f"{style}{prompt}{RESET}" if style else prompt
        return click.prompt(styled, default="", show_default=False, prompt_suffix="")

    def _request(self, kind: PromptKind, message: Any, style: dict[str, Any], **config: Any) -> PromptRequest:
        self._check_activation()
        theme = resolve_theme(kind, PromptOptions.build(message, **style), self.locale)
        return PromptRequest(kind=kind, theme=theme, **config)

    def _ask(self, request: PromptRequest) -> Any:
        ic(request.kind, request.default)
        with self._console.frozen():
            try:
                return self._engine.ask(request)
            except KeyboardInterrupt:
                self._guard.abort()
            finally:
                self._write_reset()

    def readtext(self, message: Any, *, default: str | None = None, validate: TextValidator | None = None, **style: Any) -> str:
        request = self._request(
            PromptKind.TEXT,
            message,
            style,
            default=default,
            validate=text_validator(validate, self.locale),
        )
        return self._ask(request)

    def readnumber(
        self,
        message: Any,
        *,
        default: int | float | None = None,
        validate: TextValidator | None = None,
        **style: Any,
    ) -> int | float:
        """Ask for a number.

        Non-numeric answers are rejected before ``validate`` runs; the
        caller's validator receives the raw string.

        Returns:
            The answer as an ``int`` or ``float``.

        """
        request = self._request(
            PromptKind.NUMBER,
            message,
            style,
            default=default,
            validate=numeric_validator(validate, self.locale),
            convert=_to_number,
        )
        return self._ask(request)

    def readconfirm(self, message: Any, *, default: bool = True, **style: Any) -> bool:
        return self._ask(self._request(PromptKind.CONFIRM, message, style, default=default))

    def readlist(self, message: Any, choices: Iterable[ChoiceLike], *, default: Any = None, **style: Any) -> Any:
        """Ask the user to pick one choice.

        Returns:
            The value of the picked choice.

        """
        request = self._request(
            PromptKind.SELECT,
            message,
            style,
            default=default,
            choices=build_choices(choices),
        )
        return self._ask(request)

    def readcheckbox(
        self,
        message: Any,
        choices: Iterable[ChoiceLike],
        *,
        default: Iterable[Any] | None = None,
        validate: Callable[[list[Any]], bool | str] | None = None,
        require_selection: bool = False,
        **style: Any,
    ) -> list[Any]:
        """Ask the user to pick any number of choices.

        Args:
            message: The question text.
            choices: Strings, dicts or ``Choice`` objects.
            default: Values ticked initially.
            validate: Validator given the list of selected values.
            require_selection: Reject an empty selection before ``validate`` runs.
            **style: ``PromptOptions`` fields.

        Returns:
            The values of the ticked choices.

        """
        request = self._request(
            PromptKind.CHECKBOX,
            message,
            style,
            default=tuple(default) if default is not None else None,
            choices=build_choices(choices),
            validate=selection_validator(validate, require_selection=require_selection, locale=self.locale),
        )
        return self._ask(request)

    def readpassword(self, message: Any, *, default: str | None = None, validate: TextValidator | None = None, **style: Any) -> str:
        request = self._request(
            PromptKind.PASSWORD,
            message,
            style,
            default=default,
            validate=text_validator(validate, self.locale),
        )
        return self._ask(request)

    def readtoggle(
        self,
        message: Any,
        *,
        default: bool | None = None,
        active: str = "Yes",
        inactive: str = "No",
        **style: Any,
    ) -> bool:
        request = self._request(
            PromptKind.TOGGLE,
            message,
            style,
            default=default,
            active=active,
            inactive=inactive,
        )
        return self._ask(request)
