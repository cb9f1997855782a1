"""Enumerations for colourmodel."""

from enum import Enum

from colourmodel.exceptions import InvalidArgumentError


class Channel(str, Enum):
    """A single mutable component of a ColourModel."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    HUE = "hue"
    SATURATION = "saturation"
    LIGHTNESS = "lightness"

    @property
    def is_rgb(self) -> bool:
        """True for channels stored on the RGB side."""
        return self in (Channel.RED, Channel.GREEN, Channel.BLUE)

    @property
    def is_hsl(self) -> bool:
        """True for channels stored on the HSL side."""
        return not self.is_rgb

    @property
    def field(self) -> str:
        """Field name on the RGB or HSL model."""
        return self.value[0]

    @classmethod
    def parse(cls, name: "str | Channel") -> "Channel":
        """Resolve a channel from its name or one of its short aliases.

        Accepts red/r, green/g, blue/b, hue/h, saturation/s and
        lightness/light/l, case-insensitively.

        Raises:
            InvalidArgumentError: If the name matches no channel
        """
        if isinstance(name, Channel):
            return name
        channel = _ALIASES.get(str(name).strip().lower())
        if channel is None:
            raise InvalidArgumentError(
                "channel",
                f"unknown channel name (expected one of: {', '.join(sorted(_ALIASES))})",
                value=name,
            )
        return channel


_ALIASES: dict[str, Channel] = {
    "red": Channel.RED,
    "r": Channel.RED,
    "green": Channel.GREEN,
    "g": Channel.GREEN,
    "blue": Channel.BLUE,
    "b": Channel.BLUE,
    "hue": Channel.HUE,
    "h": Channel.HUE,
    "saturation": Channel.SATURATION,
    "s": Channel.SATURATION,
    "lightness": Channel.LIGHTNESS,
    "light": Channel.LIGHTNESS,
    "l": Channel.LIGHTNESS,
}
