"""Prompt engine seam.

The input module hands a ``PromptRequest`` (resolved theme plus prompt
configuration) to a ``PromptEngine`` and gets the answer back. The default
engine is questionary; tests substitute a recording fake.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol

import questionary

from colorside.ansi import strip_ansi
from colorside.log import ic
from colorside.models import Choice, PromptKind
from colorside.styles import POINTER, build_style, sgr_to_style
from colorside.theme import PromptTheme


@dataclass(frozen=True, slots=True)
class PromptRequest:
    """Everything a prompt engine needs to ask one question.

    Attributes:
        kind: The prompt kind.
        theme: The resolved theme.
        default: Default answer (a list of values for checkboxes).
        choices: Choices for select and checkbox prompts.
        validate: Validator returning ``True`` or an error message.
        convert: Applied to the engine's raw answer before returning it.
        active: Label of the ``True`` side of a toggle.
        inactive: Label of the ``False`` side of a toggle.

    """

    kind: PromptKind
    theme: PromptTheme
    default: Any = None
    choices: tuple[Choice, ...] = field(default_factory=tuple)
    validate: Callable[[Any], bool | str] | None = None
    convert: Callable[[Any], Any] | None = None
    active: str = "Yes"
    inactive: str = "No"

    @property
    def message(self) -> str:
        return self.theme.message

    def finish(self, answer: Any) -> Any:
        return self.convert(answer) if self.convert is not None else answer


class PromptEngine(Protocol):
    """Renders a themed prompt and returns the resolved answer."""

    def ask(self, request: PromptRequest) -> Any: ...


class QuestionaryEngine:
    """Prompt engine backed by questionary.

    questionary styles its output through prompt_toolkit style classes, so
    theme colors are passed as a ``Style`` and the ANSI-bearing strings are
    stripped to plain text. Two theme features render differently here:

    - questionary shows one prefix for both the idle and the answered
      state, so the idle prefix is used and ``finish_prefix`` has no effect.
    - A choice matched by a ``select_colors`` rule is drawn in the rule
      color at all times, not only while it is highlighted. The pointer
      and the highlighted row of unmatched choices use the default
      highlight color. ``PromptTheme.render_highlight`` keeps the
      highlighted-only semantics for other engines.

    Attributes:
        patch_stdout: Route other writes to stdout above the prompt while
            it is active.

    """

    def __init__(self, *, patch_stdout: bool = True) -> None:
        self.patch_stdout = patch_stdout

    def ask(self, request: PromptRequest) -> Any:
        question = self.build_question(request)
        ic(request.kind, strip_ansi(request.message))
        return request.finish(question.unsafe_ask(patch_stdout=self.patch_stdout))

    def build_question(self, request: PromptRequest) -> questionary.Question:
        """Create the questionary question for a request without asking it."""
        theme = request.theme
        common: dict[str, Any] = {
            "qmark": strip_ansi(theme.prefix_idle),
            "style": build_style(theme),
        }
        message = strip_ansi(theme.message)
        validate = self._themed_validator(request)

        match request.kind:
            case PromptKind.TEXT | PromptKind.NUMBER:
                default = "" if request.default is None else str(request.default)
                return questionary.text(message, default=default, validate=validate, **common)
            case PromptKind.PASSWORD:
                default = "" if request.default is None else str(request.default)
                return questionary.password(message, default=default, validate=validate, **common)
            case PromptKind.CONFIRM:
                default = True if request.default is None else bool(request.default)
                return questionary.confirm(message, default=default, **common)
            case PromptKind.TOGGLE:
                choices = [
                    questionary.Choice(request.active, value=True),
                    questionary.Choice(request.inactive, value=False),
                ]
                default = bool(request.default) if request.default is not None else None
                return questionary.select(
                    message,
                    choices=choices,
                    default=default,
                    pointer=POINTER,
                    instruction=" ",
                    **common,
                )
            case PromptKind.SELECT:
                return questionary.select(
                    message,
                    choices=self._choices(request, checked=()),
                    default=request.default,
                    pointer=POINTER,
                    instruction=self._instruction(theme),
                    **common,
                )
            case PromptKind.CHECKBOX:
                checked = tuple(request.default or ())
                return questionary.checkbox(
                    message,
                    choices=self._choices(request, checked=checked),
                    validate=validate or (lambda _: True),
                    pointer=POINTER,
                    instruction=self._instruction(theme),
                    **common,
                )
            case _:
                raise ValueError(f"Unsupported prompt kind: {request.kind}")

    @staticmethod
    def _instruction(theme: PromptTheme) -> str:
        # questionary substitutes its own help text for None; a blank hides it
        return strip_ansi(theme.instructions) if theme.instructions else " "

    @staticmethod
    def _themed_validator(request: PromptRequest) -> Callable[[Any], bool | str] | None:
        if request.validate is None:
            return None
        validate = request.validate
        theme = request.theme

        def _validate(value: Any) -> bool | str:
            verdict = validate(value)
            if verdict is True:
                return True
            return strip_ansi(theme.render_error(str(verdict)))

        return _validate

    @staticmethod
    def _choices(request: PromptRequest, *, checked: tuple[Any, ...]) -> list[questionary.Choice]:
        theme = request.theme
        choices = []
        for choice in request.choices:
            title: Any = choice.title
            rule_color = theme.highlight_color_for(choice.value)
            if rule_color != theme.highlight_color:
                title = [(sgr_to_style(rule_color), choice.title)]
            disabled = choice.disabled
            if disabled is True:
                disabled = theme.disabled_label
            elif isinstance(disabled, str):
                disabled = theme.render_disabled(disabled)
            choices.append(
                questionary.Choice(
                    title,
                    value=choice.value,
                    disabled=disabled or None,
                    checked=choice.checked or choice.value in checked,
                    description=choice.description,
                )
            )
        return choices
