"""ColourModel: a HEX colour with cached RGB and HSL views."""

import logging
from typing import Optional

from pydantic import BaseModel, ValidationError

from colourmodel.conversions import (
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    luma,
    normalize_hex,
    rgb_to_hex,
)
from colourmodel.css import format_css_gradient
from colourmodel.exceptions import InvalidArgumentError, wrap_validation_error
from colourmodel.models import HSL, RGB, Channel, Gradient

logger = logging.getLogger(__name__)

DEFAULT_ADJUST = 10
"""Percentage points used by darken/lighten/gradient for subtle shades.

Pass None instead to move halfway to black (darken) or white (lighten).
"""

DEFAULT_THRESHOLD = 130


def _channel_property(channel: Channel) -> property:
    def getter(self: "ColourModel") -> float:
        return self.get_channel(channel)

    def setter(self: "ColourModel", value: float) -> None:
        self.set_channel(channel, value)

    return property(getter, setter, doc=f"The {channel.value} channel.")


class ColourModel:
    """
    A single colour held as HEX, RGB and HSL at once.

    The three representations are always kept consistent. Derivations
    (darken, lighten, mix, complementary, ...) return new HEX strings and
    never modify the instance. Channel setters do modify it: the new value
    is written to its own representation, HEX is rebuilt from that, and the
    remaining representation is rebuilt from HEX.

    Instances are not thread-safe; share them between threads only with
    external locking.

    Example:
        >>> colour = ColourModel("#336699")
        >>> colour.darken()
        '264d73'
        >>> colour.hue = 0
        >>> str(colour)
        '#993333'
    """

    red = _channel_property(Channel.RED)
    green = _channel_property(Channel.GREEN)
    blue = _channel_property(Channel.BLUE)
    hue = _channel_property(Channel.HUE)
    saturation = _channel_property(Channel.SATURATION)
    lightness = _channel_property(Channel.LIGHTNESS)

    def __init__(self, colour: str):
        """
        Create a colour from a HEX string.

        Args:
            colour: 3 or 6 hex digits, with or without a leading '#'

        Raises:
            InvalidFormatError: If the string is not a valid HEX colour
        """
        colour = normalize_hex(colour)

        self._hex: str = colour
        self._rgb: RGB = hex_to_rgb(colour)
        self._hsl: HSL = hex_to_hsl(colour)

    def __str__(self) -> str:
        return "#" + self._hex

    def __repr__(self) -> str:
        return f"{type(self).__name__}('#{self._hex}')"

    # ====================
    # = Representations  =
    # ====================

    def get_hex(self) -> str:
        """Return the colour as 6 lowercase hex digits without '#'."""
        return self._hex

    def get_rgb(self) -> RGB:
        """Return the cached RGB value."""
        return self._rgb

    def get_hsl(self) -> HSL:
        """Return the cached HSL value."""
        return self._hsl

    # ====================
    # = Channel access   =
    # ====================

    def get_channel(self, channel: "Channel | str") -> float:
        """Read one channel; names such as 'r' or 'light' are accepted."""
        channel = Channel.parse(channel)
        source = self._rgb if channel.is_rgb else self._hsl
        return getattr(source, channel.field)

    def set_channel(self, channel: "Channel | str", value: float) -> None:
        """
        Write one channel and recompute the other representations.

        RGB channels cascade RGB -> HEX -> HSL, HSL channels cascade
        HSL -> HEX -> RGB.

        Raises:
            InvalidArgumentError: If the value is out of range for the channel
                (the instance is left unchanged)
        """
        channel = Channel.parse(channel)

        if channel.is_rgb:
            rgb = _replace_field(self._rgb, channel, value, "RGB")
            hex_value = rgb_to_hex(rgb)
            hsl = hex_to_hsl(hex_value)
        else:
            hsl = _replace_field(self._hsl, channel, value, "HSL")
            hex_value = hsl_to_hex(hsl)
            rgb = hex_to_rgb(hex_value)

        logger.debug(f"Set {channel.value}={value}: #{self._hex} -> #{hex_value}")
        self._rgb, self._hex, self._hsl = rgb, hex_value, hsl

    # ====================
    # = Derived colours  =
    # ====================

    def darken(self, amount: Optional[float] = DEFAULT_ADJUST) -> str:
        """
        Return a darker HEX colour.

        Args:
            amount: Percentage points to take off the lightness. None
                returns the colour halfway between this one and black.
        """
        return hsl_to_hex(_darken(self._hsl, amount))

    def lighten(self, amount: Optional[float] = DEFAULT_ADJUST) -> str:
        """
        Return a lighter HEX colour.

        Args:
            amount: Percentage points to add to the lightness. None
                returns the colour halfway between this one and white.
        """
        return hsl_to_hex(_lighten(self._hsl, amount))

    def mix(self, hex2: str, amount: float = 0) -> str:
        """
        Blend this colour with another.

        Args:
            hex2: The colour to mix with
            amount: Bias from -100 (only hex2) through 0 (equal parts)
                to +100 (only this colour)

        Raises:
            InvalidFormatError: If hex2 is not a valid HEX colour
            InvalidArgumentError: If amount is outside -100..100
        """
        if not -100 <= amount <= 100:
            raise InvalidArgumentError("mix amount", "must be between -100 and 100", value=amount)

        other = hex_to_rgb(hex2)
        ratio1 = (amount + 100) / 100
        ratio2 = 2 - ratio1

        # Channels are truncated, so an even 0/255 blend gives 7f
        mixed = RGB(
            r=int((self._rgb.r * ratio1 + other.r * ratio2) / 2),
            g=int((self._rgb.g * ratio1 + other.g * ratio2) / 2),
            b=int((self._rgb.b * ratio1 + other.b * ratio2) / 2),
        )
        return rgb_to_hex(mixed)

    def complementary(self) -> str:
        """Return the colour on the opposite side of the colour wheel."""
        hue = self._hsl.h
        hue += -180 if hue > 180 else 180
        return hsl_to_hex(self._hsl.model_copy(update={"h": hue}))

    def make_gradient(self, amount: Optional[float] = DEFAULT_ADJUST) -> Gradient:
        """
        Return two shades suitable for a gradient.

        A light colour is kept as the light end and darkened for the dark
        end; any other colour is kept as the dark end and lightened.
        """
        if self.is_light():
            gradient = Gradient(light=self._hex, dark=self.darken(amount))
        else:
            gradient = Gradient(light=self.lighten(amount), dark=self._hex)
        logger.debug(f"Gradient for #{self._hex}: {gradient.light} -> {gradient.dark}")
        return gradient

    def get_css_gradient(
        self,
        amount: Optional[float] = DEFAULT_ADJUST,
        vintage_browsers: bool = False,
        suffix: str = "",
        prefix: str = "",
    ) -> str:
        """
        Return the cross-browser CSS3 gradient for this colour.

        Args:
            amount: Percentage to lighten/darken the second shade by
            vintage_browsers: Include vendor prefixes for long-obsolete browsers
            suffix: Suffix for every line
            prefix: Prefix for every line
        """
        return format_css_gradient(
            self._hex,
            self.make_gradient(amount),
            vintage_browsers=vintage_browsers,
            suffix=suffix,
            prefix=prefix,
        )

    # ====================
    # = Classification   =
    # ====================

    def is_light(self, colour: Optional[str] = None, threshold: float = DEFAULT_THRESHOLD) -> bool:
        """True if the luma of `colour` (default: this colour) is above `threshold`."""
        return luma(self._hex if colour is None else colour) > threshold

    def is_dark(self, colour: Optional[str] = None, threshold: float = DEFAULT_THRESHOLD) -> bool:
        """True if the luma of `colour` (default: this colour) is at or below `threshold`."""
        return luma(self._hex if colour is None else colour) <= threshold


def _replace_field(model: BaseModel, channel: Channel, value: float, kind: str) -> BaseModel:
    """Return a validated copy of `model` with one channel replaced."""
    data = model.model_dump()
    data[channel.field] = value
    try:
        return type(model).model_validate(data)
    except ValidationError as e:
        raise wrap_validation_error(e, kind, value) from e


def _darken(hsl: HSL, amount: Optional[float]) -> HSL:
    if amount is None:
        lightness = hsl.l / 2
    else:
        lightness = _clamp((hsl.l * 100 - amount) / 100)
    return hsl.model_copy(update={"l": lightness})


def _lighten(hsl: HSL, amount: Optional[float]) -> HSL:
    if amount is None:
        lightness = hsl.l + (1 - hsl.l) / 2
    else:
        lightness = _clamp((hsl.l * 100 + amount) / 100)
    return hsl.model_copy(update={"l": lightness})


def _clamp(value: float) -> float:
    return min(max(value, 0.0), 1.0)
