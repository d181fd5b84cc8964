"""ColorSide facade class.

This module provides the ColorSide class, the main entry point bundling
the named-color painters with the console, collection and input modules.
"""

from colorside import ansi
from colorside.ansi import Painter
from colorside.collection import CollectionModule
from colorside.console import ConsoleModule
from colorside.engine import PromptEngine
from colorside.models import Layer, Locale
from colorside.prompts import InputModule

Module = ConsoleModule | CollectionModule | InputModule


class _Format:
    bold = staticmethod(ansi.bold)
    underline = staticmethod(ansi.underline)


class ColorSide:
    """Terminal coloring and themed prompts for one locale.

    Modules start deactivated; pass one to ``use`` before calling it.
    Used as a context manager, leaving the block ends the input session.

    Attributes:
        locale: Locale of the input module's built-in strings.
        console: Console output module.
        collection: Labeled-line collection module.
        input: Interactive input module.
        fg: Foreground painters (``fg.red(text)``, ``fg.bright.red(text)``).
        bg: Background painters.
        format: ``bold`` and ``underline`` wrappers.

    """

    def __init__(self, lang: Locale | str = Locale.EN, *, engine: PromptEngine | None = None) -> None:
        """Initialize ColorSide for a locale.

        Args:
            lang: Locale token; ``"ru"`` (any case) selects Russian,
                anything else English.
            engine: Prompt engine for the input module; questionary by default.

        """
        self.locale: Locale = Locale.parse(lang)
        self.console = ConsoleModule()
        self.collection = CollectionModule()
        self.input = InputModule(self.locale, console=self.console, engine=engine)
        self.fg = Painter(Layer.FOREGROUND)
        self.bg = Painter(Layer.BACKGROUND)
        self.format = _Format()

    def use(self, module: Module) -> Module:
        """Activate one of this instance's modules.

        Args:
            module: ``self.console``, ``self.collection`` or ``self.input``.

        Returns:
            The activated module.

        Raises:
            ValueError: If the module belongs to another instance.

        """
        if module is not self.console and module is not self.collection and module is not self.input:
            raise ValueError("Module does not belong to this ColorSide instance")
        module.activate()
        return module

    def __enter__(self) -> "ColorSide":
        return self

    def __exit__(self, exc_type: type | None, exc_val: Exception | None, exc_tb: object) -> None:
        self.input.close()

    def __repr__(self) -> str:
        return f"ColorSide(locale={self.locale.value!r})"
