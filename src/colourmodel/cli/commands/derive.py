"""Commands that derive a new colour from a base colour."""

from typing import Optional

import click

from colourmodel.cli.decorators import handle_command_errors, pass_config
from colourmodel.colour import ColourModel
from colourmodel.models import ColourConfig


def _resolve_amount(amount: Optional[float], halfway: bool, config: ColourConfig) -> Optional[float]:
    """--halfway wins, then an explicit --amount, then the configured default."""
    if halfway:
        return None
    if amount is None:
        return config.default_adjust
    return amount


_amount_option = click.option(
    "--amount", "-a", type=float, default=None,
    help="Lightness change in percentage points (default: from config, 10)",
)
_halfway_option = click.option(
    "--halfway", is_flag=True,
    help="Move halfway towards black/white instead of by a fixed amount",
)


@click.command(name="darken")
@click.argument("colour")
@_amount_option
@_halfway_option
@pass_config
@handle_command_errors("darken colour")
def darken(config: ColourConfig, colour: str, amount: Optional[float], halfway: bool):
    """Print a darker shade of COLOUR."""
    click.echo("#" + ColourModel(colour).darken(_resolve_amount(amount, halfway, config)))


@click.command(name="lighten")
@click.argument("colour")
@_amount_option
@_halfway_option
@pass_config
@handle_command_errors("lighten colour")
def lighten(config: ColourConfig, colour: str, amount: Optional[float], halfway: bool):
    """Print a lighter shade of COLOUR."""
    click.echo("#" + ColourModel(colour).lighten(_resolve_amount(amount, halfway, config)))


@click.command(name="mix")
@click.argument("colour")
@click.argument("other")
@click.option(
    "--amount", "-a", type=float, default=0.0,
    help="Bias from -100 (only OTHER) to 100 (only COLOUR), default 0",
)
@handle_command_errors("mix colours")
def mix(colour: str, other: str, amount: float):
    """Print the blend of COLOUR and OTHER."""
    click.echo("#" + ColourModel(colour).mix(other, amount))


@click.command(name="complement")
@click.argument("colour")
@handle_command_errors("complement colour")
def complement(colour: str):
    """Print the complementary colour of COLOUR."""
    click.echo("#" + ColourModel(colour).complementary())


@click.command(name="gradient")
@click.argument("colour")
@_amount_option
@_halfway_option
@click.option("--css", is_flag=True, help="Print cross-browser CSS declarations")
@click.option(
    "--vintage/--no-vintage", default=None,
    help="Include vendor prefixes for obsolete browsers (default: from config)",
)
@click.option("--prefix", type=str, default=None, help="Text before every CSS line")
@click.option("--suffix", type=str, default=None, help="Text after every CSS line")
@pass_config
@handle_command_errors("build gradient")
def gradient(
    config: ColourConfig,
    colour: str,
    amount: Optional[float],
    halfway: bool,
    css: bool,
    vintage: Optional[bool],
    prefix: Optional[str],
    suffix: Optional[str],
):
    """Print a light/dark gradient pair for COLOUR."""
    model = ColourModel(colour)
    amount = _resolve_amount(amount, halfway, config)

    if css:
        block = model.get_css_gradient(
            amount,
            vintage_browsers=config.vintage_browsers if vintage is None else vintage,
            suffix=config.css_suffix if suffix is None else suffix,
            prefix=config.css_prefix if prefix is None else prefix,
        )
        click.echo(block, nl=False)
        return

    pair = model.make_gradient(amount)
    click.echo(f"light: #{pair.light}")
    click.echo(f"dark:  #{pair.dark}")
