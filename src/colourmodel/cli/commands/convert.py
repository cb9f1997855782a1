"""Inspection and conversion commands."""

import sys

import click

from colourmodel.cli.decorators import handle_command_errors, pass_config
from colourmodel.colour import ColourModel
from colourmodel.conversions import hsv_to_hex, luma
from colourmodel.exceptions import collect_errors
from colourmodel.models import ColourConfig


def _tone(colour: ColourModel, config: ColourConfig) -> str:
    if colour.is_light(threshold=config.light_threshold):
        return "light"
    if colour.is_dark(threshold=config.dark_threshold):
        return "dark"
    # Only reachable when the two thresholds differ
    return "mid"


def _display_colour(colour: ColourModel, config: ColourConfig) -> None:
    rgb = colour.get_rgb()
    hsl = colour.get_hsl()
    click.echo(str(colour))
    click.echo(f"  rgb:  {rgb.r}, {rgb.g}, {rgb.b}")
    click.echo(f"  hsl:  {hsl.h:.1f}, {hsl.s:.4f}, {hsl.l:.4f}")
    click.echo(f"  luma: {luma(colour.get_hex()):.1f}")
    click.echo(f"  tone: {_tone(colour, config)}")


@click.command(name="info")
@click.argument("colours", nargs=-1, required=True)
@pass_config
def info(config: ColourConfig, colours: tuple[str, ...]):
    """Show the RGB, HSL and luma of one or more HEX colours."""
    collector = collect_errors("inspect colours")

    for value in colours:
        with collector.try_operation(value):
            colour = ColourModel(value)
            _display_colour(colour, config)

    if collector.has_errors:
        click.echo(collector.get_summary(), err=True)
        sys.exit(1)


@click.command(name="hsv")
@click.argument("hue", type=float)
@click.argument("saturation", type=float)
@click.argument("value", type=float)
@handle_command_errors("convert HSV")
def hsv(hue: float, saturation: float, value: float):
    """Convert HSV (each component 0-1) to HEX."""
    click.echo("#" + hsv_to_hex([hue, saturation, value]))
