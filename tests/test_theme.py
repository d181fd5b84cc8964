"""Tests for theme.py module."""

import dataclasses

import pytest

from colorside.ansi import RESET
from colorside.models import Locale, Prefix, PromptKind, PromptOptions, SelectColor
from colorside.theme import resolve_theme

MAGENTA = "\x1b[35m"
YELLOW = "\x1b[33m"
ORANGE = "\x1b[38;5;208m"


def _theme(kind=PromptKind.TEXT, locale="en", **overrides):
    return resolve_theme(kind, PromptOptions.build("Question?", **overrides), locale)


class TestPrefixResolution:
    """Tests for the three prefix states."""

    def test_omitted_prefix_uses_default_glyph(self):
        """Test an omitted prefix renders the blue question mark."""
        assert _theme().prefix_idle == "\x1b[34m?\x1b[0m"

    def test_none_prefix_renders_nothing(self):
        """Test prefix=None renders an empty prefix."""
        theme = _theme(prefix=None)
        assert theme.prefix_idle == ""
        assert theme.prefix_color == ""

    def test_custom_prefix_uses_given_color(self):
        """Test a custom prefix is wrapped in the given prefix color."""
        assert _theme(prefix=">>", prefix_color=MAGENTA).prefix_idle == f"{MAGENTA}>>{RESET}"

    def test_custom_prefix_without_color_uses_default_color(self):
        """Test a custom prefix falls back to the default prefix color."""
        assert _theme(prefix=">>").prefix_idle == "\x1b[34m>>\x1b[0m"

    def test_explicit_tagged_prefix(self):
        """Test Prefix objects are honored as given."""
        assert _theme(prefix=Prefix.default()).prefix_idle == _theme().prefix_idle
        assert _theme(prefix=Prefix.none()).prefix_idle == ""
        assert _theme(prefix=Prefix.custom("!")).prefix_idle == "\x1b[34m!\x1b[0m"

    def test_prefix_color_ignored_for_default_glyph(self):
        """Test prefix_color only applies to custom prefixes."""
        assert _theme(prefix_color=MAGENTA).prefix_idle == "\x1b[34m?\x1b[0m"


class TestDoneIndicator:
    """Tests for the answered-state checkmark."""

    def test_checkmark_shown_by_default(self):
        """Test the checkmark is shown unless disabled."""
        assert _theme().prefix_done == "\x1b[92m\x1b[1m✓\x1b[0m"

    def test_checkmark_can_be_hidden(self):
        """Test finish_prefix=False hides the checkmark."""
        assert _theme(finish_prefix=False).prefix_done == ""

    @pytest.mark.parametrize("kind", list(PromptKind))
    def test_flag_honored_for_every_kind(self, kind):
        """Test every prompt kind honors finish_prefix."""
        assert _theme(kind, finish_prefix=False).prefix_done == ""


class TestInstructions:
    """Tests for instruction resolution."""

    def test_select_default_english(self):
        """Test the English select instructions."""
        assert _theme(PromptKind.SELECT).instructions == "(Use arrow keys to navigate)"

    def test_select_default_russian(self):
        """Test the Russian select instructions."""
        assert _theme(PromptKind.SELECT, "ru").instructions == "(Стрелки вверх/вниз для навигации)"

    def test_checkbox_default_english(self):
        """Test the English checkbox instructions mention selecting."""
        assert "<space> to select" in _theme(PromptKind.CHECKBOX).instructions

    def test_checkbox_default_russian_is_styled_and_reset(self):
        """Test the Russian checkbox instructions color keys and reset them."""
        instructions = _theme(PromptKind.CHECKBOX, "ru").instructions
        assert "пробел" in instructions
        assert instructions.count("\x1b[96m") == instructions.count(RESET)

    def test_disabled_instructions(self):
        """Test instructions=False suppresses them."""
        assert _theme(PromptKind.SELECT, instructions=False).instructions is None

    def test_custom_instructions(self):
        """Test a custom instruction string is used verbatim."""
        assert _theme(PromptKind.CHECKBOX, instructions="pick some").instructions == "pick some"

    @pytest.mark.parametrize("kind", [PromptKind.TEXT, PromptKind.NUMBER, PromptKind.CONFIRM, PromptKind.PASSWORD, PromptKind.TOGGLE])
    def test_non_choice_prompts_have_no_instructions(self, kind):
        """Test only choice prompts carry instructions."""
        assert _theme(kind).instructions is None


class TestRenderers:
    """Tests for theme rendering methods."""

    def test_message_with_color(self):
        """Test a colored message is reset after the text."""
        assert _theme(message_color=YELLOW).message == f"{YELLOW}Question?{RESET}"

    def test_message_without_color(self):
        """Test a message without color is left plain."""
        assert _theme().message == "Question?"

    def test_render_error(self):
        """Test errors get the cross glyph and the error color."""
        assert _theme().render_error("boom") == "\x1b[91m\x1b[1m✗\x1b[0m\x1b[91m boom\x1b[0m"

    def test_render_answer_default_color(self):
        """Test answers default to cyan."""
        assert _theme().render_answer("42") == "\x1b[36m42\x1b[0m"

    def test_render_answer_input_color(self):
        """Test answers use the caller's input color."""
        assert _theme(input_color=ORANGE).render_answer("42") == f"{ORANGE}42{RESET}"

    def test_highlight_first_matching_rule_wins(self):
        """Test rules are scanned in order."""
        theme = _theme(
            PromptKind.SELECT,
            select_colors=[
                {"keys": ["a", "b"], "color": MAGENTA},
                {"keys": ["b"], "color": YELLOW},
            ],
        )
        assert theme.render_highlight("b") == f"{MAGENTA}b{RESET}"

    def test_highlight_falls_back_to_default(self):
        """Test unmatched choices use the default highlight color."""
        theme = _theme(PromptKind.SELECT, select_colors=[SelectColor(("a",), MAGENTA)])
        assert theme.render_highlight("z") == "\x1b[36mz\x1b[0m"

    def test_highlight_matches_value_when_given(self):
        """Test rules match the choice value rather than its title."""
        theme = _theme(PromptKind.SELECT, select_colors=[SelectColor((1,), MAGENTA)])
        assert theme.render_highlight("One", value=1) == f"{MAGENTA}One{RESET}"
        assert theme.render_highlight("One", value=2) == "\x1b[36mOne\x1b[0m"

    def test_highlight_matches_unhashable_values(self):
        """Test dict and list values are matched against rule keys."""
        theme = _theme(PromptKind.SELECT, select_colors=[{"keys": [{"id": 1}, [2, 3]], "color": MAGENTA}])
        assert theme.highlight_color_for({"id": 1}) == MAGENTA
        assert theme.highlight_color_for([2, 3]) == MAGENTA
        assert theme.highlight_color_for({"id": 9}) == "\x1b[36m"

    def test_highlight_rules_dropped_for_non_choice_prompts(self):
        """Test highlight rules only apply to choice prompts."""
        theme = _theme(PromptKind.TEXT, select_colors=[SelectColor(("a",), MAGENTA)])
        assert theme.select_colors == ()

    def test_render_disabled_russian(self):
        """Test the disabled label is translated."""
        assert _theme(PromptKind.SELECT, "ru").render_disabled("(disabled)") == "(отключено)"
        assert _theme(PromptKind.SELECT, "en").render_disabled("(disabled)") == "(disabled)"

    def test_every_colored_string_is_reset(self):
        """Test no resolved string leaves a color open."""
        theme = _theme(
            PromptKind.CHECKBOX,
            "ru",
            message_color=YELLOW,
            prefix="»",
            prefix_color=MAGENTA,
        )
        for value in (theme.message, theme.prefix_idle, theme.prefix_done, theme.render_error("e"), theme.render_answer("a"), theme.render_highlight("h")):
            assert "\x1b[" in value
            assert value.endswith(RESET)


class TestLocaleSwitch:
    """Tests for locale-dependent theme fields."""

    def test_locale_changes_only_locale_fields(self):
        """Test ru and en themes differ only in locale-dependent fields."""
        en = _theme(PromptKind.SELECT, "en", message_color=YELLOW)
        ru = _theme(PromptKind.SELECT, "ru", message_color=YELLOW)

        assert en.instructions != ru.instructions
        assert en.disabled_label != ru.disabled_label
        assert dataclasses.replace(ru, locale=Locale.EN, instructions=en.instructions, disabled_label=en.disabled_label) == en

    @pytest.mark.parametrize("token", ["RU", "Ru", " ru "])
    def test_locale_token_is_case_insensitive(self, token):
        """Test ru is recognized in any case."""
        assert _theme(locale=token).locale is Locale.RU

    @pytest.mark.parametrize("token", ["en", "de", "", None])
    def test_other_tokens_fall_back_to_english(self, token):
        """Test unknown locales fall back to English."""
        assert _theme(locale=token).locale is Locale.EN
