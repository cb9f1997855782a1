"""Decorators for CLI commands."""

import logging
import sys
from functools import wraps

import click

from colourmodel.exceptions import ColourModelError, format_error_for_display
from colourmodel.exceptions import handle_errors as _handle_errors
from colourmodel.models import ColourConfig

pass_config = click.make_pass_decorator(ColourConfig, ensure=True)
"""Pass the ColourConfig loaded by the root command (defaults if absent)."""


def echo_error(error: Exception) -> None:
    """Print an error and its recovery hint to stderr."""
    user_message, recovery_hint = format_error_for_display(error)
    click.echo(f"ERROR: {user_message}", err=True)
    if recovery_hint:
        click.echo(recovery_hint, err=True)


def handle_command_errors(operation_name: str):
    """
    Decorator for CLI commands that wraps the centralized error handler.

    Library errors are logged, printed without a traceback and turned
    into exit code 1. Anything else propagates to click.

    Example:
        @click.command()
        @click.argument("colour")
        @handle_command_errors("darken colour")
        def darken(colour):
            ...
    """
    def decorator(func):
        logged = _handle_errors(operation_name=operation_name, log_level=logging.DEBUG)(func)

        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return logged(*args, **kwargs)
            except ColourModelError as e:
                echo_error(e)
                sys.exit(1)
        return wrapper
    return decorator
