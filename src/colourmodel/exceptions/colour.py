"""Colour value exceptions.

This module defines exceptions for invalid colour input:
- ColourError: Base class for colour value errors
- InvalidFormatError: A HEX string is malformed
- InvalidArgumentError: A structured RGB/HSL/HSV argument is incomplete or out of range

Both concrete errors also derive from ValueError, so callers that only
know about the builtin still catch them.
"""

from typing import Any, Optional

from .base import ColourModelError


class ColourError(ColourModelError, ValueError):
    """A colour value could not be parsed or converted."""
    pass


class InvalidFormatError(ColourError):
    """HEX colour string has the wrong number of digits or non-hex characters."""

    def __init__(self, value: Any, reason: str = "needs to be 6 or 3 digits long"):
        """
        Initialize invalid format error.

        Args:
            value: The rejected input
            reason: Why the value was rejected
        """
        super().__init__(
            user_message=f"HEX colour {value!r} {reason}",
            technical_message=f"Bad colour format: {value!r} ({reason})",
            recoverable=True,
            recovery_hint="Use 3 or 6 hexadecimal digits, with or without a leading '#', e.g. '#336699' or 'abc'",
        )
        self.value = value
        self.reason = reason


class InvalidArgumentError(ColourError):
    """A structured colour argument is missing a field or holds an invalid value."""

    def __init__(
        self,
        kind: str,
        error_msg: str,
        value: Any = None,
        field: Optional[str] = None,
    ):
        """
        Initialize invalid argument error.

        Args:
            kind: Which representation was expected (e.g. "RGB", "HSL", "HSV")
            error_msg: Why the argument is invalid
            value: The rejected input (optional)
            field: The offending field, when a single one is known
        """
        if field:
            user_msg = f"Param was not a valid {kind} value: '{field}' {error_msg}"
        else:
            user_msg = f"Param was not a valid {kind} value: {error_msg}"

        recovery = None
        if kind == "RGB":
            recovery = "Provide integer r, g and b channels between 0 and 255"
        elif kind == "HSL":
            recovery = "Provide h (0-360), s (0-1) and l (0-1)"
        elif kind == "HSV":
            recovery = "Provide exactly three components [h, s, v], each between 0 and 1"

        super().__init__(
            user_message=user_msg,
            technical_message=f"Invalid {kind} argument {value!r}: {error_msg}",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.kind = kind
        self.field = field
        self.value = value
