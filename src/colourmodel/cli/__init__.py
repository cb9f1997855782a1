"""Command-line interface for colourmodel."""

from .main import cli

__all__ = ["cli"]
