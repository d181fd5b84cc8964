"""Prompt theme resolution.

Every prompt kind goes through ``resolve_theme``, which merges the
caller's ``PromptOptions`` with the fixed defaults into a ``PromptTheme``.
The theme is renderer-agnostic: it holds plain ANSI strings and rendering
methods, and the prompt engine adapter decides how to present them.
"""

from dataclasses import dataclass
from typing import Any

from colorside.ansi import BOLD, FG_BLUE, FG_BRIGHT_GREEN, FG_BRIGHT_RED, FG_CYAN, RESET
from colorside.messages import messages_for
from colorside.models import Locale, PrefixMode, PromptKind, PromptOptions, SelectColor
from colorside.styles import DONE_MARK, ERROR_MARK, QMARK

DEFAULT_PREFIX_COLOR = FG_BLUE
DEFAULT_ANSWER_COLOR = FG_CYAN
DEFAULT_HIGHLIGHT_COLOR = FG_CYAN
ERROR_COLOR = FG_BRIGHT_RED
DONE_COLOR = f"{FG_BRIGHT_GREEN}{BOLD}"


def paint(color: str, text: str) -> str:
    """Wrap text in a color code, or return it unchanged for no color."""
    return f"{color}{text}{RESET}" if color else text


@dataclass(frozen=True, slots=True)
class PromptTheme:
    """A fully resolved theme for one prompt invocation.

    Attributes:
        kind: The prompt kind the theme was resolved for.
        locale: Locale of the built-in strings.
        message: The rendered message.
        prefix_idle: Prefix shown while the prompt is waiting for input.
        prefix_done: Prefix shown once the prompt is answered.
        instructions: Help line for choice prompts, ``None`` for none.
        message_color: ANSI code of the message (may be empty).
        prefix_color: ANSI code of the idle prefix (empty for no prefix).
        answer_color: ANSI code of the submitted answer.
        error_color: ANSI code of validation errors.
        highlight_color: ANSI code of the highlighted choice when no rule matches.
        select_colors: Ordered highlight rules.
        disabled_label: Locale label for disabled choices.

    """

    kind: PromptKind
    locale: Locale
    message: str
    prefix_idle: str
    prefix_done: str
    instructions: str | None
    message_color: str
    prefix_color: str
    answer_color: str
    error_color: str
    highlight_color: str
    select_colors: tuple[SelectColor, ...]
    disabled_label: str

    def render_error(self, text: str) -> str:
        return f"{self.error_color}{BOLD}{ERROR_MARK}{RESET}{self.error_color} {text}{RESET}"

    def render_answer(self, text: str) -> str:
        return f"{self.answer_color}{text}{RESET}"

    def highlight_color_for(self, value: Any) -> str:
        """Return the color of the first rule containing ``value``."""
        for rule in self.select_colors:
            if any(value == key for key in rule.keys):
                return rule.color
        return self.highlight_color

    def render_highlight(self, text: str, value: Any = None) -> str:
        """Render the highlighted choice.

        Args:
            text: The choice title.
            value: The choice value used to match highlight rules; the
                title is matched when no value is given.

        """
        key = text if value is None else value
        return f"{self.highlight_color_for(key)}{text}{RESET}"

    def render_disabled(self, text: str) -> str:
        return text.replace("disabled", self.disabled_label)


def _resolve_prefix(options: PromptOptions) -> tuple[str, str]:
    match options.prefix.mode:
        case PrefixMode.DEFAULT:
            return paint(DEFAULT_PREFIX_COLOR, QMARK), DEFAULT_PREFIX_COLOR
        case PrefixMode.NONE:
            return "", ""
        case _:
            color = options.prefix_color or DEFAULT_PREFIX_COLOR
            return paint(color, options.prefix.text), color


def _resolve_instructions(kind: PromptKind, options: PromptOptions, locale: Locale) -> str | None:
    if not kind.has_choices or options.instructions is False:
        return None
    if isinstance(options.instructions, str):
        return options.instructions
    messages = messages_for(locale)
    if kind is PromptKind.CHECKBOX:
        return messages.checkbox_instructions
    return messages.select_instructions


def resolve_theme(kind: PromptKind, options: PromptOptions, locale: Locale | str) -> PromptTheme:
    """Merge per-call overrides with the defaults for one prompt kind.

    Args:
        kind: The prompt kind being themed.
        options: The caller's style overrides.
        locale: Locale of the instructions and the disabled label.

    Returns:
        The resolved theme, with every field concrete.

    """
    locale = Locale.parse(locale)
    prefix_idle, prefix_color = _resolve_prefix(options)

    return PromptTheme(
        kind=kind,
        locale=locale,
        message=paint(options.message_color, options.message),
        prefix_idle=prefix_idle,
        prefix_done=paint(DONE_COLOR, DONE_MARK) if options.finish_prefix else "",
        instructions=_resolve_instructions(kind, options, locale),
        message_color=options.message_color,
        prefix_color=prefix_color,
        answer_color=options.input_color or DEFAULT_ANSWER_COLOR,
        error_color=ERROR_COLOR,
        highlight_color=DEFAULT_HIGHLIGHT_COLOR,
        select_colors=options.select_colors if kind.has_choices else (),
        disabled_label=messages_for(locale).disabled,
    )
