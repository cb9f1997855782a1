"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from colourmodel import __version__
from colourmodel.cli.decorators import echo_error
from colourmodel.exceptions import ErrorContext
from colourmodel.models import ColourConfig

from .commands import complement, darken, gradient, hsv, info, lighten, mix, set_channel

logger = logging.getLogger(__name__)

_installed_handlers: list[logging.Handler] = []


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, log everything at DEBUG level
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setLevel(level)
    stream_handler.setFormatter(formatter)
    _installed_handlers.append(stream_handler)

    root_level = level
    if log_file:
        file_level = logging.DEBUG if debug else getattr(logging, log_level.upper())
        # Keeps last 5 files, max 10MB each
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(formatter)
        _installed_handlers.append(file_handler)
        root_level = min(level, file_level)

    root_logger.setLevel(root_level)
    for handler in _installed_handlers:
        root_logger.addHandler(handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_file}")


@click.group()
@click.pass_context
@click.version_option(version=__version__, prog_name="colourmodel")
@click.option(
    '--config',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file (default: ~/.colourmodel/config.json)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug logging'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Also write logs to this file'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(
    ctx,
    config_path: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    Colour model converter - HEX, RGB, HSL and HSV conversions and shades.

    \b
    Examples:
      # Show all representations of a colour
      colourmodel info '#336699'

      # Darker and lighter shades
      colourmodel darken 336699
      colourmodel lighten 336699 --halfway

      # Blend two colours, biased towards the first
      colourmodel mix ffffff ff0000 --amount 50

      # CSS gradient block
      colourmodel gradient 336699 --css --vintage

      # Change one channel
      colourmodel set 336699 hue 0
    """
    setup_logging(verbose, debug, log_file, log_level)

    with ErrorContext("load configuration", logger_instance=logger, re_raise=False) as loading:
        ctx.obj = ColourConfig.load_or_default(config_path)

    if loading.error:
        echo_error(loading.error)
        sys.exit(1)


cli.add_command(info)
cli.add_command(hsv)
cli.add_command(darken)
cli.add_command(lighten)
cli.add_command(mix)
cli.add_command(complement)
cli.add_command(gradient)
cli.add_command(set_channel)

if __name__ == "__main__":
    cli()
