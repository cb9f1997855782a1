"""Channel editing command."""

import logging

import click

from colourmodel.cli.decorators import handle_command_errors
from colourmodel.colour import ColourModel
from colourmodel.models import Channel

logger = logging.getLogger(__name__)


@click.command(name="set")
@click.argument("colour")
@click.argument("channel")
@click.argument("value", type=float)
@click.option("--details", is_flag=True, help="Also print the resulting RGB and HSL")
@handle_command_errors("set channel")
def set_channel(colour: str, channel: str, value: float, details: bool):
    """
    Set one CHANNEL of COLOUR to VALUE and print the result.

    \b
    Channels (aliases in brackets):
      red (r), green (g), blue (b)          0-255
      hue (h)                               0-360
      saturation (s), lightness (light, l)  0-1
    """
    model = ColourModel(colour)
    resolved = Channel.parse(channel)
    logger.info(f"Setting {resolved.value} of {model} to {value}")

    model.set_channel(resolved, value)

    click.echo(str(model))
    if details:
        rgb = model.get_rgb()
        hsl = model.get_hsl()
        click.echo(f"  rgb: {rgb.r}, {rgb.g}, {rgb.b}")
        click.echo(f"  hsl: {hsl.h:.1f}, {hsl.s:.4f}, {hsl.l:.4f}")
