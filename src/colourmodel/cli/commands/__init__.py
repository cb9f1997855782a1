"""CLI commands for colourmodel."""

from .convert import hsv, info
from .derive import complement, darken, gradient, lighten, mix
from .edit import set_channel

__all__ = ["complement", "darken", "gradient", "hsv", "info", "lighten", "mix", "set_channel"]
