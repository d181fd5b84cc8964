"""Validators composed ahead of caller-supplied validation.

Validators follow the questionary convention: they return ``True`` when
the answer is acceptable and an error message string otherwise.
"""

import math
from collections.abc import Callable, Sequence
from typing import Any

from colorside.messages import messages_for
from colorside.models import Locale

Verdict = bool | str
TextValidator = Callable[[str], Verdict]
SelectionValidator = Callable[[list[Any]], Verdict]


def parse_number(text: str) -> int | float | None:
    """Parse an answer as a number.

    Args:
        text: The raw answer.

    Returns:
        An ``int`` for integral literals, a ``float`` for other finite
        numbers, or ``None`` when the text is not a number.

    """
    stripped = text.strip()
    # int() and float() also accept digit separators
    if not stripped or "_" in stripped:
        return None
    try:
        return int(stripped)
    except ValueError:
        pass
    try:
        number = float(stripped)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def normalize_verdict(verdict: Any, locale: Locale) -> Verdict:
    """Map a caller verdict onto ``True`` or a locale-aware message."""
    if verdict is True:
        return True
    if verdict is False or verdict is None or verdict == "":
        return messages_for(locale).invalid
    return str(verdict)


def text_validator(validate: TextValidator | None, locale: Locale) -> TextValidator | None:
    if validate is None:
        return None

    def _validate(value: str) -> Verdict:
        return normalize_verdict(validate(value), locale)

    return _validate


def numeric_validator(validate: TextValidator | None, locale: Locale) -> TextValidator:
    """Reject non-numeric answers before the caller's validator runs.

    Args:
        validate: Optional caller validator, given the raw string.
        locale: Locale of the "must be numeric" message.

    Returns:
        A validator suitable for a text prompt.

    """
    numeric_message = messages_for(locale).numeric

    def _validate(value: str) -> Verdict:
        if parse_number(value) is None:
            return numeric_message
        if validate is not None:
            return normalize_verdict(validate(value), locale)
        return True

    return _validate


def selection_validator(
    validate: SelectionValidator | None,
    *,
    require_selection: bool,
    locale: Locale,
) -> SelectionValidator:
    """Optionally reject an empty selection before the caller's validator runs.

    Args:
        validate: Optional caller validator, given the selected values.
        require_selection: Fail when nothing is selected.
        locale: Locale of the "select at least one" message.

    Returns:
        A validator suitable for a checkbox prompt.

    """
    required_message = messages_for(locale).require_selection

    def _validate(values: Sequence[Any]) -> Verdict:
        if require_selection and len(values) == 0:
            return required_message
        if validate is not None:
            return normalize_verdict(validate(list(values)), locale)
        return True

    return _validate
