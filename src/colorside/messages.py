"""Built-in user-facing strings for each supported locale."""

from dataclasses import dataclass

from colorside.ansi import FG_BRIGHT_CYAN, RESET
from colorside.models import Locale


@dataclass(frozen=True, slots=True)
class Messages:
    numeric: str
    select_instructions: str
    checkbox_instructions: str
    require_selection: str
    disabled: str
    invalid: str


def _key(text: str) -> str:
    return f"{FG_BRIGHT_CYAN}{text}{RESET}"


_A_KEY = _key("'a'")


_MESSAGES = {
    Locale.EN: Messages(
        numeric="Please provide a valid numeric value",
        select_instructions="(Use arrow keys to navigate)",
        checkbox_instructions="(Use arrow keys to move, <space> to select, <a> to toggle, <i> to invert)",
        require_selection="Select at least one option",
        disabled="disabled",
        invalid="Invalid input",
    ),
    Locale.RU: Messages(
        numeric="Разрешено вводить только число",
        select_instructions="(Стрелки вверх/вниз для навигации)",
        checkbox_instructions=(
            f"(Используйте {_key('стрелки вверх/вниз')} для перемещения, "
            f"{_key('пробел')} для выбора элемента, "
            f"нажмите {_A_KEY} чтобы выделить всё, "
            f"{_key('ENTER')} для продолжения)"
        ),
        require_selection="Выберите хотя бы один вариант",
        disabled="отключено",
        invalid="Некорректный ввод",
    ),
}


def messages_for(locale: Locale | str | None) -> Messages:
    return _MESSAGES[Locale.parse(locale)]
