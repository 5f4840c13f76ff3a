"""Exception types raised by the perceptual engine.

Every kernel function either returns a valid value or raises one of the
errors below. They all derive from ``ValueError`` so callers that already
guard hex parsing with ``except ValueError`` keep working.
"""

from __future__ import annotations

__all__ = [
    "PerceptualError",
    "InvalidFormatError",
    "OutOfRangeError",
    "LengthMismatchError",
    "EmptyInputError",
]


class PerceptualError(ValueError):
    """Base class for all engine errors."""


class InvalidFormatError(PerceptualError):
    """Raised for a malformed hex string or an unknown symbolic argument."""


class OutOfRangeError(PerceptualError):
    """Raised when a channel or OKLCH component is outside its domain."""


class LengthMismatchError(PerceptualError):
    """Raised when batch foreground/background sequences differ in length."""

    def __init__(self, fg_len: int, bg_len: int):
        super().__init__(
            f"foreground and background sequences must have the same length "
            f"(got {fg_len} and {bg_len})"
        )
        self.fg_len = fg_len
        self.bg_len = bg_len


class EmptyInputError(PerceptualError):
    """Raised when an operation that needs at least one item receives none."""
