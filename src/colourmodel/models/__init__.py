"""Data models for colourmodel."""

from .color import HSL, HSV, RGB, Gradient
from .config import ColourConfig
from .enums import Channel

__all__ = [
    # Enums
    "Channel",
    "ColourConfig",
    # Models
    "Gradient",
    "HSL",
    "HSV",
    "RGB",
]
