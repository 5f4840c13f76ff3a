"""sRGB color value type and transfer functions.

Public API:
    Color(r, g, b) / Color.new(r, g, b)   -> Color (OutOfRangeError)
    Color.from_hex("#3b82f6")               -> Color (InvalidFormatError)
    Color.as_color(value)                   -> Color from Color | hex | (r, g, b)
    color.to_hex()                          -> "#rrggbb" (always lowercase)
    srgb_to_linear(v) / linear_to_srgb(v)   -> piecewise sRGB transfer (0-1 floats)

``LINEAR_LUT`` holds the decoded value of every 8-bit channel so the OKLCH
transform and the WCAG luminance share the exact same linear values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple, Union
import re

from .errors import InvalidFormatError, OutOfRangeError

__all__ = [
    "Color",
    "ColorLike",
    "srgb_to_linear",
    "linear_to_srgb",
    "LINEAR_LUT",
]

_HEX_RE = re.compile(r"#?(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


def srgb_to_linear(value: float) -> float:
    """Decode one gamma-encoded sRGB channel in [0, 1]."""
    if value <= 0.04045:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4


def linear_to_srgb(value: float) -> float:
    """Encode one linear channel; values outside [0, 1] are extrapolated, not clamped."""
    if value <= 0.0031308:
        return value * 12.92
    return 1.055 * value ** (1 / 2.4) - 0.055


LINEAR_LUT: Tuple[float, ...] = tuple(srgb_to_linear(i / 255.0) for i in range(256))


def _check_channel(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise OutOfRangeError(f"channel {name} must be an integer, got {value!r}")
    if not 0 <= value <= 255:
        raise OutOfRangeError(f"channel {name} must be in [0, 255], got {value}")
    return value


@dataclass(frozen=True)
class Color:
    """Immutable 8-bit sRGB color."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        _check_channel("r", self.r)
        _check_channel("g", self.g)
        _check_channel("b", self.b)

    @classmethod
    def new(cls, r: int, g: int, b: int) -> "Color":
        return cls(r, g, b)

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        """Parse ``#RGB`` or ``#RRGGBB`` (case-insensitive, ``#`` optional).

        Shorthand expands by duplicating each digit (``#abc`` -> ``#aabbcc``).
        Raises InvalidFormatError for any other input.
        """
        if not isinstance(text, str) or not _HEX_RE.fullmatch(text):
            raise InvalidFormatError(f"Color must be a #RGB or #RRGGBB hex string: {text!r}")
        digits = text.lstrip("#")
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    @classmethod
    def as_color(cls, value: "ColorLike") -> "Color":
        if isinstance(value, Color):
            return value
        if isinstance(value, str):
            return cls.from_hex(value)
        if isinstance(value, (tuple, list)) and len(value) == 3:
            return cls(*value)
        raise InvalidFormatError(f"Cannot interpret {value!r} as a color")

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def to_tuple(self) -> Tuple[int, int, int]:
        return self.r, self.g, self.b

    def linear(self) -> Tuple[float, float, float]:
        """Linear-light channels in [0, 1] (piecewise sRGB decode)."""
        return LINEAR_LUT[self.r], LINEAR_LUT[self.g], LINEAR_LUT[self.b]

    def __str__(self) -> str:
        return self.to_hex()


ColorLike = Union[Color, str, Sequence[int]]
