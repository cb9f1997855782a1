"""colourmodel: HEX/RGB/HSL/HSV colour conversion and manipulation."""

__version__ = "0.1.0"

from .colour import DEFAULT_ADJUST, ColourModel
from .conversions import (
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsv_to_hex,
    luma,
    normalize_hex,
    rgb_to_hex,
)
from .exceptions import ColourModelError, InvalidArgumentError, InvalidFormatError
from .models import HSL, HSV, RGB, Channel, Gradient

__all__ = [
    "DEFAULT_ADJUST",
    "HSL",
    "HSV",
    "RGB",
    "Channel",
    "ColourModel",
    "ColourModelError",
    "Gradient",
    "InvalidArgumentError",
    "InvalidFormatError",
    "hex_to_hsl",
    "hex_to_rgb",
    "hsl_to_hex",
    "hsv_to_hex",
    "luma",
    "normalize_hex",
    "rgb_to_hex",
]
