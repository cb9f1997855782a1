"""Conversions between HEX, RGB, HSL and HSV colour representations.

HEX strings are normalised to 6 lowercase digits without a leading '#'.
Structured arguments may be given as the pydantic models from
`colourmodel.models` or as plain mappings with case-insensitive keys:

    >>> rgb_to_hex({"R": 255, "G": 128, "B": 0})
    'ff8000'
    >>> hex_to_rgb("#abc").to_rgb_tuple()
    (170, 187, 204)

Float to byte conversions in `hsl_to_hex` and `hsv_to_hex` round half-up.
"""

import math
from collections.abc import Mapping
from typing import Any, TypeVar, Union

from pydantic import BaseModel, ValidationError

from colourmodel.exceptions import InvalidArgumentError, InvalidFormatError, wrap_validation_error
from colourmodel.models.color import HSL, HSV, RGB

M = TypeVar("M", bound=BaseModel)

HexLike = str
RGBLike = Union[RGB, Mapping[str, Any]]
HSLLike = Union[HSL, Mapping[str, Any]]

_HEX_DIGITS = frozenset("0123456789abcdef")


def normalize_hex(value: str) -> str:
    """Return the canonical 6-digit lowercase form of a HEX colour.

    An optional leading '#' is stripped and 3-digit shorthand is
    expanded by doubling each digit ('abc' -> 'aabbcc').

    Raises:
        InvalidFormatError: If the value is not 3 or 6 hex digits
    """
    if not isinstance(value, str):
        raise InvalidFormatError(value, "must be a string")

    colour = value.strip().lower()
    if colour.startswith("#"):
        colour = colour[1:]

    if len(colour) == 3:
        colour = "".join(digit * 2 for digit in colour)
    elif len(colour) != 6:
        raise InvalidFormatError(value)

    if not set(colour) <= _HEX_DIGITS:
        raise InvalidFormatError(value, "contains non-hexadecimal characters")

    return colour


def _coerce(model_type: type[M], value: Any, kind: str) -> M:
    """Validate a model instance or mapping into `model_type`."""
    if isinstance(value, model_type):
        return value
    if not isinstance(value, Mapping):
        raise InvalidArgumentError(
            kind,
            f"expected a mapping or {model_type.__name__}, got {type(value).__name__}",
            value=value,
        )
    data = {str(key).lower(): item for key, item in value.items()}
    try:
        return model_type.model_validate(data)
    except ValidationError as e:
        raise wrap_validation_error(e, kind, value) from e


def _to_byte(fraction: float) -> int:
    """Scale a 0-1 fraction to 0-255, rounding half-up.

    Values are trimmed to 9 decimal places first so that float noise
    such as 76.49999999999999 still rounds to 77.
    """
    return int(math.floor(round(fraction * 255, 9) + 0.5))


def _hue_to_channel(v1: float, v2: float, h: float) -> float:
    """Evaluate one RGB channel for a hue fraction offset."""
    if h < 0:
        h += 1
    if h > 1:
        h -= 1

    if 6 * h < 1:
        return v1 + (v2 - v1) * 6 * h
    if 2 * h < 1:
        return v2
    if 3 * h < 2:
        return v1 + (v2 - v1) * ((2 / 3) - h) * 6
    return v1


def hex_to_rgb(colour: HexLike) -> RGB:
    """Given a HEX string returns the RGB equivalent.

    Raises:
        InvalidFormatError: If the HEX string is malformed
    """
    colour = normalize_hex(colour)
    return RGB(
        r=int(colour[0:2], 16),
        g=int(colour[2:4], 16),
        b=int(colour[4:6], 16),
    )


def rgb_to_hex(rgb: RGBLike) -> str:
    """Given an RGB value returns the equivalent 6-digit HEX string.

    Raises:
        InvalidArgumentError: If a channel is missing or out of range
    """
    rgb = _coerce(RGB, rgb, "RGB")
    return f"{rgb.r:02x}{rgb.g:02x}{rgb.b:02x}"


def hex_to_hsl(colour: HexLike) -> HSL:
    """Given a HEX string returns the HSL equivalent.

    Hue is returned in degrees, saturation and lightness as 0-1 fractions.

    Raises:
        InvalidFormatError: If the HEX string is malformed
    """
    rgb = hex_to_rgb(colour)

    r = rgb.r / 255
    g = rgb.g / 255
    b = rgb.b / 255

    lo = min(r, g, b)
    hi = max(r, g, b)
    delta = hi - lo

    lightness = (hi + lo) / 2

    if delta == 0:
        # Achromatic
        hue = 0.0
        saturation = 0.0
    else:
        if lightness < 0.5:
            saturation = delta / (hi + lo)
        else:
            saturation = delta / (2 - hi - lo)

        del_r = (((hi - r) / 6) + (delta / 2)) / delta
        del_g = (((hi - g) / 6) + (delta / 2)) / delta
        del_b = (((hi - b) / 6) + (delta / 2)) / delta

        if r == hi:
            hue = del_b - del_g
        elif g == hi:
            hue = (1 / 3) + del_r - del_b
        else:
            hue = (2 / 3) + del_g - del_r

        if hue < 0:
            hue += 1
        if hue > 1:
            hue -= 1

    return HSL(h=hue * 360, s=saturation, l=lightness)


def hsl_to_hex(hsl: HSLLike) -> str:
    """Given an HSL value returns the equivalent HEX string.

    Raises:
        InvalidArgumentError: If h, s or l is missing or out of range
    """
    hsl = _coerce(HSL, hsl, "HSL")
    hue, saturation, lightness = hsl.h / 360, hsl.s, hsl.l

    if saturation == 0:
        r = g = b = _to_byte(lightness)
    else:
        if lightness < 0.5:
            temp2 = lightness * (1 + saturation)
        else:
            temp2 = (lightness + saturation) - (saturation * lightness)

        temp1 = 2 * lightness - temp2

        r = _to_byte(_hue_to_channel(temp1, temp2, hue + (1 / 3)))
        g = _to_byte(_hue_to_channel(temp1, temp2, hue))
        b = _to_byte(_hue_to_channel(temp1, temp2, hue - (1 / 3)))

    return f"{r:02x}{g:02x}{b:02x}"


def hsv_to_hex(hsv: Any) -> str:
    """Given [h, s, v] with every component in 0-1 returns the HEX string.

    Also accepts an HSV model or a mapping with h/s/v keys. A hue of
    exactly 1 lands in the last sector of the colour wheel.

    Raises:
        InvalidArgumentError: On wrong arity or a component outside 0-1
    """
    if isinstance(hsv, (HSV, Mapping)):
        model = _coerce(HSV, hsv, "HSV")
    else:
        if isinstance(hsv, (str, bytes)):
            raise InvalidArgumentError("HSV", "expected a sequence of three numbers", value=hsv)
        try:
            components = list(hsv)
        except TypeError as e:
            raise InvalidArgumentError("HSV", "expected a sequence of three numbers", value=hsv) from e
        if len(components) != 3:
            raise InvalidArgumentError(
                "HSV", f"expected exactly 3 components, got {len(components)}", value=hsv
            )
        model = _coerce(HSV, dict(zip("hsv", components)), "HSV")

    h, s, v = model.h * 6, model.s, model.v
    sector = math.floor(h)
    frac = h - sector

    m = v * (1 - s)
    n = v * (1 - s * frac)
    k = v * (1 - s * (1 - frac))

    sectors = (
        (v, k, m),
        (n, v, m),
        (m, v, k),
        (m, n, v),
        (k, m, v),
        (v, m, n),
    )
    # h == 1 gives sector 6, which shares the last row
    r, g, b = sectors[min(sector, 5)]

    return f"{_to_byte(r):02x}{_to_byte(g):02x}{_to_byte(b):02x}"


def luma(colour: HexLike) -> float:
    """Perceived brightness (0-255) using the 299/587/114 per mille weights."""
    rgb = hex_to_rgb(colour)
    return (rgb.r * 299 + rgb.g * 587 + rgb.b * 114) / 1000
