"""Colour value models for the RGB, HSL and HSV representations."""

from numbers import Real
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _require_number(v: Any) -> Any:
    """Reject booleans and strings, which pydantic would otherwise coerce."""
    if isinstance(v, bool) or not isinstance(v, Real):
        raise ValueError(f"must be a number, not {type(v).__name__}")
    return v


class RGB(BaseModel):
    """Standard 8-bit RGB colour.

    The model is frozen; channel mutations on a ColourModel build a
    new instance so the range checks run again.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")

    @field_validator("r", "g", "b", mode="before")
    @classmethod
    def validate_number(cls, v: Any) -> Any:
        return _require_number(v)

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)


class HSL(BaseModel):
    """Hue/Saturation/Lightness colour.

    Hue is in degrees. 360 is accepted and behaves as 0, since rotating
    a hue of exactly 180 degrees lands there.
    """

    model_config = ConfigDict(frozen=True)

    h: float = Field(ge=0, le=360, description="Hue in degrees (0-360)")
    s: float = Field(ge=0, le=1, description="Saturation (0-1)")
    l: float = Field(ge=0, le=1, description="Lightness (0-1)")  # noqa: E741

    @field_validator("h", "s", "l", mode="before")
    @classmethod
    def validate_number(cls, v: Any) -> Any:
        return _require_number(v)

    def to_hsl_tuple(self) -> tuple[float, float, float]:
        """Convert to HSL tuple."""
        return (self.h, self.s, self.l)


class HSV(BaseModel):
    """Hue/Saturation/Value colour with every component as a 0-1 fraction."""

    model_config = ConfigDict(frozen=True)

    h: float = Field(ge=0, le=1, description="Hue as a fraction of a full turn (0-1)")
    s: float = Field(ge=0, le=1, description="Saturation (0-1)")
    v: float = Field(ge=0, le=1, description="Value (0-1)")

    @field_validator("h", "s", "v", mode="before")
    @classmethod
    def validate_number(cls, v: Any) -> Any:
        return _require_number(v)


class Gradient(BaseModel):
    """A light/dark pair of HEX colours for building a gradient."""

    model_config = ConfigDict(frozen=True)

    light: str = Field(description="Lighter end, 6-digit HEX without '#'")
    dark: str = Field(description="Darker end, 6-digit HEX without '#'")
