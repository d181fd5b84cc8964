"""Data models for colorside.

This module provides the type-safe data structures shared by the color
layer and the prompt theming layer.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, NamedTuple


class Color(NamedTuple):
    """A 24-bit RGB color.

    Attributes:
        r: Red channel (0-255).
        g: Green channel (0-255).
        b: Blue channel (0-255).

    """

    r: int
    g: int
    b: int

    def to_hex(self) -> str:
        """Return the color as a ``#rrggbb`` string."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


class Layer(str, Enum):
    """Which part of a character cell a color applies to.

    The value is the SGR selector used for indexed and true colors.
    """

    FOREGROUND = "38"
    BACKGROUND = "48"


class Locale(str, Enum):
    """Languages for the built-in user-facing strings."""

    EN = "en"
    RU = "ru"

    @classmethod
    def parse(cls, token: "str | Locale | None") -> "Locale":
        """Resolve a locale token case-insensitively.

        ``"ru"`` selects Russian; anything else falls back to English.
        """
        if isinstance(token, Locale):
            return token
        if token and token.strip().lower() == cls.RU.value:
            return cls.RU
        return cls.EN


class PromptKind(str, Enum):
    """Interactive prompt kinds supported by the input module."""

    TEXT = "text"
    NUMBER = "number"
    CONFIRM = "confirm"
    SELECT = "select"
    CHECKBOX = "checkbox"
    PASSWORD = "password"
    TOGGLE = "toggle"

    @property
    def has_choices(self) -> bool:
        return self in (PromptKind.SELECT, PromptKind.CHECKBOX)


class PrefixMode(Enum):
    DEFAULT = "default"
    NONE = "none"
    CUSTOM = "custom"


@dataclass(frozen=True, slots=True)
class Prefix:
    """The glyph printed in front of a prompt message.

    A prefix is one of three distinct states, each rendering differently:
    the default glyph, no prefix at all, or caller-supplied text.

    Attributes:
        mode: Which of the three states this prefix is in.
        text: The custom text (only meaningful for ``PrefixMode.CUSTOM``).

    """

    mode: PrefixMode = PrefixMode.DEFAULT
    text: str = ""

    @classmethod
    def default(cls) -> "Prefix":
        return cls(PrefixMode.DEFAULT)

    @classmethod
    def none(cls) -> "Prefix":
        return cls(PrefixMode.NONE)

    @classmethod
    def custom(cls, text: str) -> "Prefix":
        return cls(PrefixMode.CUSTOM, text)

    @classmethod
    def coerce(cls, value: "Prefix | str | None") -> "Prefix":
        """Build a prefix from the public call-site form.

        Args:
            value: A ``Prefix``, a custom string, or ``None`` for no prefix.

        Returns:
            The equivalent tagged prefix.

        """
        if isinstance(value, Prefix):
            return value
        if value is None:
            return cls.none()
        return cls.custom(str(value))


@dataclass(frozen=True, slots=True)
class SelectColor:
    """Highlight rule for choice lists.

    Attributes:
        keys: Choice values the rule applies to, matched by equality.
        color: ANSI escape code used when one of ``keys`` is highlighted.

    """

    keys: tuple[Any, ...]
    color: str

    @classmethod
    def build(cls, rule: "SelectColor | Mapping[str, Any]") -> "SelectColor":
        if isinstance(rule, SelectColor):
            return rule
        return cls(keys=tuple(rule.get("keys") or ()), color=rule.get("color") or "")


@dataclass(frozen=True, slots=True)
class Choice:
    """One entry of a select or checkbox list.

    Attributes:
        value: The value returned when the choice is picked.
        name: Display title; defaults to ``str(value)``.
        description: Optional help text shown under the list.
        checked: Initially ticked (checkbox only).
        disabled: ``True`` or a reason string to make the entry unselectable.

    """

    value: Any
    name: str | None = None
    description: str | None = None
    checked: bool = False
    disabled: bool | str = False

    @property
    def title(self) -> str:
        return self.name if self.name is not None else str(self.value)

    @classmethod
    def build(cls, choice: "Choice | Mapping[str, Any] | str") -> "Choice":
        """Coerce a string, dict or ``Choice`` into a ``Choice``."""
        if isinstance(choice, Choice):
            return choice
        if isinstance(choice, Mapping):
            value = choice.get("value", choice.get("name"))
            return cls(
                value=value,
                name=choice.get("name"),
                description=choice.get("description"),
                checked=bool(choice.get("checked", False)),
                disabled=choice.get("disabled") or False,
            )
        return cls(value=choice)


def build_choices(choices: Iterable["Choice | Mapping[str, Any] | str"]) -> tuple[Choice, ...]:
    return tuple(Choice.build(c) for c in choices)


@dataclass(frozen=True, slots=True)
class PromptOptions:
    """Per-call style overrides for a themed prompt.

    Attributes:
        message: The question text.
        message_color: ANSI code for the message, empty for none.
        input_color: ANSI code for the submitted answer, empty for the default.
        prefix: Three-state prefix (default glyph, none, custom text).
        prefix_color: ANSI code for a custom prefix, empty for the default.
        finish_prefix: Show the checkmark once the prompt is answered.
            ``QuestionaryEngine`` ignores it and keeps the idle prefix.
        instructions: ``True`` for the locale default, ``False`` to hide
            them, or a custom string.
        select_colors: Ordered highlight rules for choice lists.

    """

    message: str
    message_color: str = ""
    input_color: str = ""
    prefix: Prefix = field(default_factory=Prefix.default)
    prefix_color: str = ""
    finish_prefix: bool = True
    instructions: bool | str = True
    select_colors: tuple[SelectColor, ...] = ()

    @classmethod
    def build(cls, message: Any, **overrides: Any) -> "PromptOptions":
        """Create options from loosely typed call-site arguments.

        Args:
            message: The question text (converted with ``str``).
            **overrides: Any ``PromptOptions`` field. ``prefix`` accepts a
                ``Prefix``, a string or ``None``; ``select_colors`` accepts
                ``SelectColor`` objects or ``{"keys": ..., "color": ...}`` dicts.

        Returns:
            The normalized options.

        """
        if "prefix" in overrides:
            overrides["prefix"] = Prefix.coerce(overrides["prefix"])
        if "select_colors" in overrides:
            overrides["select_colors"] = tuple(SelectColor.build(r) for r in overrides["select_colors"] or ())
        if "instructions" in overrides and overrides["instructions"] is None:
            overrides["instructions"] = True
        for name in ("message_color", "input_color", "prefix_color"):
            if name in overrides and overrides[name] is None:
                overrides[name] = ""
        return cls(message=str(message), **overrides)
