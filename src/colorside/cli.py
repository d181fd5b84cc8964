#!/usr/bin/env python
"""Command-line interface for colorside.

This module provides the main CLI entry point: inspecting how a hex color
maps onto the 256-color palette, and a walk through every themed prompt.
"""

import sys

import click

from colorside import __version__, ansi256, console
from colorside.exceptions import ColorSideError, InvalidColorError
from colorside.log import ic
from colorside.models import Choice, Layer, SelectColor
from colorside.side import ColorSide


def show_color(hex_color: str, *, background: bool, text: str | None) -> None:
    """Print the palette index, escape code and a sample for a color.

    Args:
        hex_color: Color as ``#rrggbb`` or ``rrggbb``.
        background: Inspect the background layer instead of the foreground.
        text: Sample text to wrap; a blank swatch is used when omitted.

    Raises:
        click.ClickException: If the color is malformed.

    """
    layer = Layer.BACKGROUND if background else Layer.FOREGROUND
    try:
        color = ansi256.parse_hex(hex_color)
        index = ansi256.palette_index(color)
        code = ansi256.escape(color, layer)
    except InvalidColorError as e:
        raise click.ClickException(str(e)) from None

    sample = text if text is not None else ("      " if background else "██████")
    console.info(f"{color.to_hex()} → palette index {console.highlight(str(index))}")
    console.info(f"escape: {console.highlight(repr(code))}")
    click.echo(ansi256.wrap(color, sample, layer))


def run_demo(side: ColorSide) -> None:
    """Ask one prompt of every kind and report the answers.

    Args:
        side: ColorSide instance whose locale the prompts use.

    """
    side.use(side.console)
    with side.use(side.input):
        name = side.input.readtext(
            "Project name",
            default="demo",
            validate=lambda value: bool(value.strip()),
            message_color=ansi256.fg_code("#ffaf00"),
        )
        workers = side.input.readnumber(
            "Worker count",
            default=4,
            validate=lambda value: float(value) > 0 or "Must be positive",
            prefix="#",
            prefix_color=ansi256.fg_code("#5fafff"),
        )
        level = side.input.readlist(
            "Log level",
            ["debug", "info", "warning", Choice("trace", disabled=True)],
            default="info",
            select_colors=[SelectColor(("warning",), ansi256.fg_code("#ffd700"))],
        )
        features = side.input.readcheckbox(
            "Features",
            ["colors", "prompts", "collection"],
            default=["colors"],
            require_selection=True,
        )
        token = side.input.readpassword("Token", prefix=None)
        verbose = side.input.readtoggle("Verbose output", default=False, active="On", inactive="Off")
        proceed = side.input.readconfirm("Save these settings", finish_prefix=False)

    answers = {
        "name": name,
        "workers": workers,
        "level": level,
        "features": features,
        "token": "*" * len(token),
        "verbose": verbose,
        "proceed": proceed,
    }
    ic(answers)
    for label, value in answers.items():
        side.console.log(f"{side.fg.cyan(label)}: {value}")


@click.command(help="Quantize colors to the 256-color palette and try themed prompts")
@click.option("--version", "-v", required=False, is_flag=True, help="print version")
@click.option("--debug", required=False, is_flag=True, envvar="COLORSIDE_DEBUG", help="print debug information")
@click.option("--lang", required=False, default="en", envvar="COLORSIDE_LANG", show_default=True, help="locale of prompt messages")
@click.option("--hex", "hex_color", required=False, help="color to inspect, e.g. '#ff8700'")
@click.option("--background", required=False, is_flag=True, help="inspect the background layer")
@click.option("--text", required=False, help="sample text to color")
@click.option("--demo", required=False, is_flag=True, help="walk through every prompt kind")
def cli(
    version: bool,
    debug: bool,
    lang: str,
    hex_color: str | None,
    background: bool,
    text: str | None,
    demo: bool,
) -> None:
    """Process CLI arguments and execute the appropriate action.

    Args:
        version: Print version and exit.
        debug: Enable debug output.
        lang: Locale token for prompt messages.
        hex_color: Color to inspect.
        background: Inspect the background layer.
        text: Sample text to color.
        demo: Run the interactive prompt demo.

    """
    if debug:
        ic.enable()

    if version:
        click.echo(__version__)
        return

    if hex_color:
        show_color(hex_color, background=background, text=text)
        return

    if background or text is not None:
        console.warning("--background and --text only apply together with --hex")

    if demo:
        try:
            with ColorSide(lang) as side:
                run_demo(side)
        except ColorSideError as e:
            console.error(f"Demo failed: {e}")
            sys.exit(1)
        console.success("All prompts answered")
        return

    click.echo(click.get_current_context().get_help())


if __name__ == "__main__":
    cli()
