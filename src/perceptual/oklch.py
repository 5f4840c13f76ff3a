"""OKLab / OKLCH color space.

Forward transform (sRGB -> OKLCH):
  1. piecewise sRGB decode per channel
  2. linear RGB -> LMS (3x3 matrix)
  3. cube root per LMS channel
  4. LMS' -> Lab (3x3 matrix)
  5. (a, b) -> (C, H) with H = atan2(b, a) in degrees, normalized to [0, 360)

The inverse runs every step backwards and rounds each channel to the nearest
integer. Matrices are Björn Ottosson's published OKLab matrices.

Colors whose projection leaves the sRGB cube are not clamped silently:
``to_color`` raises OutOfRangeError and ``map_to_gamut`` pulls chroma down at
constant lightness and hue until the projection fits.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union
import logging
import math
import sys

from config.settings import GAMUT_MAX_ITERATIONS

from .color import Color, linear_to_srgb
from .errors import InvalidFormatError, OutOfRangeError

_logger = logging.getLogger(__name__)

__all__ = [
    "OKLab",
    "OKLCH",
    "HuePath",
    "normalize_hue",
    "GAMUT_COEFFICIENTS",
]

Matrix3 = Tuple[Tuple[float, float, float], ...]

RGB_TO_LMS: Matrix3 = (
    (0.4122214708, 0.5363325363, 0.0514459929),
    (0.2119034982, 0.6806995451, 0.1073969566),
    (0.0883024619, 0.2817188376, 0.6299787005),
)

LMS_TO_LAB: Matrix3 = (
    (0.2104542553, 0.7936177850, -0.0040720468),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
)

LAB_TO_LMS: Matrix3 = (
    (1.0, 0.3963377774, 0.2158037573),
    (1.0, -0.1055613458, -0.0638541728),
    (1.0, -0.0894841775, -1.2914855480),
)

LMS_TO_RGB: Matrix3 = (
    (4.0767416621, -3.3077115913, 0.2309699292),
    (-1.2684380046, 2.6097574011, -0.3413193965),
    (-0.0041960863, -0.7034186147, 1.7076147010),
)

# (hue, (a, b)) every 30 degrees: max chroma ~= a * L * (1 - L) + b
GAMUT_COEFFICIENTS: Tuple[Tuple[int, Tuple[float, float]], ...] = (
    (0, (0.28, 0.02)),  # red
    (30, (0.30, 0.02)),  # orange
    (60, (0.32, 0.02)),  # yellow
    (90, (0.24, 0.02)),  # yellow-green
    (120, (0.22, 0.02)),  # green
    (150, (0.18, 0.02)),  # cyan-green
    (180, (0.16, 0.02)),  # cyan
    (210, (0.14, 0.02)),  # blue-cyan
    (240, (0.16, 0.02)),  # blue
    (270, (0.20, 0.02)),  # violet
    (300, (0.24, 0.02)),  # magenta
    (330, (0.26, 0.02)),  # red-magenta
)
_GAMUT_HUE_STEP = 30.0


def _apply(m: Matrix3, x: float, y: float, z: float) -> Tuple[float, float, float]:
    return (
        m[0][0] * x + m[0][1] * y + m[0][2] * z,
        m[1][0] * x + m[1][1] * y + m[1][2] * z,
        m[2][0] * x + m[2][1] * y + m[2][2] * z,
    )


def _cbrt(v: float) -> float:
    return math.copysign(abs(v) ** (1.0 / 3.0), v)


def _clamp(v: float, lo: float = 0.0, hi: float = 1.0) -> float:
    return max(lo, min(hi, v))


def normalize_hue(h: float) -> float:
    """Wrap a hue angle into [0, 360)."""
    h = h % 360.0
    # tiny negative inputs wrap to exactly 360.0 after rounding
    return 0.0 if h >= 360.0 else h


def _round_channel(v: float) -> int:
    return int(round(v))


def _in_cube(channels: Tuple[float, float, float]) -> bool:
    # huge chroma overflows the cubes to inf, and the matrix turns inf - inf into nan
    return all(math.isfinite(v) and 0 <= _round_channel(v) <= 255 for v in channels)


class HuePath(str, Enum):
    """Direction used when interpolating hue around the circle."""

    SHORTER = "shorter"
    LONGER = "longer"
    INCREASING = "increasing"
    DECREASING = "decreasing"

    @classmethod
    def coerce(cls, value: Union["HuePath", str]) -> "HuePath":
        if isinstance(value, HuePath):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise InvalidFormatError(f"Unknown hue interpolation path: {value!r}") from None


@dataclass(frozen=True)
class OKLab:
    l: float
    a: float
    b: float

    @classmethod
    def from_color(cls, color: Color) -> "OKLab":
        r, g, b = color.linear()
        lms = _apply(RGB_TO_LMS, r, g, b)
        l_, m_, s_ = (_cbrt(v) for v in lms)
        return cls(*_apply(LMS_TO_LAB, l_, m_, s_))

    def to_linear_rgb(self) -> Tuple[float, float, float]:
        l_, m_, s_ = _apply(LAB_TO_LMS, self.l, self.a, self.b)
        return _apply(LMS_TO_RGB, l_ * l_ * l_, m_ * m_ * m_, s_ * s_ * s_)

    def to_rgb(self) -> Tuple[float, float, float]:
        """Unrounded sRGB projection on the 0-255 scale (may leave the cube)."""
        r, g, b = self.to_linear_rgb()
        return linear_to_srgb(r) * 255.0, linear_to_srgb(g) * 255.0, linear_to_srgb(b) * 255.0

    def to_color(self) -> Color:
        rgb = self.to_rgb()
        if not _in_cube(rgb):
            raise OutOfRangeError(
                f"OKLab({self.l:.4f}, {self.a:.4g}, {self.b:.4g}) projects outside sRGB: "
                f"({rgb[0]:.1f}, {rgb[1]:.1f}, {rgb[2]:.1f}); map it to the gamut first"
            )
        return Color(*(_round_channel(v) for v in rgb))

    def distance(self, other: "OKLab") -> float:
        return math.hypot(self.l - other.l, self.a - other.a, self.b - other.b)


@dataclass(frozen=True)
class OKLCH:
    """Polar OKLab color: lightness [0, 1], chroma >= 0, hue [0, 360).

    Direct construction validates L and C and wraps H. Every derived color
    (``lighten``, ``saturate``, ``interpolate`` ...) is clamped instead, so
    algebra never raises for finite arguments.
    """

    l: float
    c: float
    h: float = 0.0

    def __post_init__(self) -> None:
        for name in ("l", "c", "h"):
            if not math.isfinite(getattr(self, name)):
                raise OutOfRangeError(f"OKLCH component {name} must be finite")
        if not 0.0 <= self.l <= 1.0:
            raise OutOfRangeError(f"Lightness must be in [0, 1], got {self.l}")
        if self.c < 0.0:
            raise OutOfRangeError(f"Chroma must be >= 0, got {self.c}")
        object.__setattr__(self, "h", normalize_hue(self.h))

    @classmethod
    def _clamped(cls, l: float, c: float, h: float) -> "OKLCH":
        # saturate() can push a huge chroma past the float range
        return cls(_clamp(l), _clamp(c, 0.0, sys.float_info.max), h)

    # --- Conversion -------------------------------------------------------
    @classmethod
    def from_color(cls, color: Color) -> "OKLCH":
        lab = OKLab.from_color(color)
        c = math.hypot(lab.a, lab.b)
        h = math.degrees(math.atan2(lab.b, lab.a))
        # white/black land a few ulps outside [0, 1]
        return cls._clamped(lab.l, c, h)

    @classmethod
    def from_hex(cls, text: str) -> "OKLCH":
        return cls.from_color(Color.from_hex(text))

    def to_oklab(self) -> OKLab:
        rad = math.radians(self.h)
        return OKLab(self.l, self.c * math.cos(rad), self.c * math.sin(rad))

    def to_rgb(self) -> Tuple[float, float, float]:
        return self.to_oklab().to_rgb()

    def in_gamut(self) -> bool:
        """True when every rounded channel of the sRGB projection is in [0, 255]."""
        return _in_cube(self.to_rgb())

    def to_color(self) -> Color:
        return self.to_oklab().to_color()

    def to_hex(self) -> str:
        return self.to_color().to_hex()

    def to_css(self) -> str:
        return f"oklch({self.l:.3f} {self.c:.4f} {self.h:.1f})"

    # --- Algebra ----------------------------------------------------------
    def with_lightness(self, l: float) -> "OKLCH":
        return self._clamped(l, self.c, self.h)

    def with_chroma(self, c: float) -> "OKLCH":
        return self._clamped(self.l, c, self.h)

    def with_hue(self, h: float) -> "OKLCH":
        return self._clamped(self.l, self.c, h)

    def lighten(self, delta: float) -> "OKLCH":
        return self._clamped(self.l + delta, self.c, self.h)

    def darken(self, delta: float) -> "OKLCH":
        return self._clamped(self.l - delta, self.c, self.h)

    def saturate(self, factor: float) -> "OKLCH":
        return self._clamped(self.l, self.c * factor, self.h)

    def desaturate(self, factor: float) -> "OKLCH":
        if factor == 0:
            raise OutOfRangeError("desaturate factor must be non-zero")
        return self._clamped(self.l, self.c / factor, self.h)

    def rotate_hue(self, degrees: float) -> "OKLCH":
        return self._clamped(self.l, self.c, self.h + degrees)

    def delta_e(self, other: "OKLCH") -> float:
        """Euclidean distance between the two colors' OKLab coordinates."""
        return self.to_oklab().distance(other.to_oklab())

    def is_similar_to(self, other: "OKLCH", threshold: float = 0.02) -> bool:
        return self.delta_e(other) < threshold

    def estimate_max_chroma(self) -> float:
        """Fast parabolic estimate of the largest sRGB chroma at this L and H.

        ``a * L * (1 - L) + b`` with (a, b) interpolated linearly between the
        two ``GAMUT_COEFFICIENTS`` rows around H (330 wraps back to 0). Cheap
        enough for per-frame use; ``map_to_gamut`` is the exact version.
        """
        idx = int(self.h // _GAMUT_HUE_STEP) % len(GAMUT_COEFFICIENTS)
        lower_h, (a0, b0) = GAMUT_COEFFICIENTS[idx]
        _, (a1, b1) = GAMUT_COEFFICIENTS[(idx + 1) % len(GAMUT_COEFFICIENTS)]
        t = (self.h - lower_h) / _GAMUT_HUE_STEP
        a = a0 + t * (a1 - a0)
        b = b0 + t * (b1 - b0)
        return a * self.l * (1.0 - self.l) + b

    def approx_in_gamut(self) -> bool:
        """Estimate-based gamut check with 10% tolerance; black and white need C < 0.001."""
        if self.l <= 0.0 or self.l >= 1.0:
            return self.c < 0.001
        return self.c <= self.estimate_max_chroma() * 1.1

    def clamp_to_gamut(self) -> "OKLCH":
        """Cap chroma at ``estimate_max_chroma()``, keeping L and H."""
        max_c = self.estimate_max_chroma()
        if self.c <= max_c:
            return self
        return OKLCH(self.l, max_c, self.h)

    def map_to_gamut(self, max_iterations: int = GAMUT_MAX_ITERATIONS) -> "OKLCH":
        """Reduce chroma until the sRGB projection fits, keeping L and H.

        Bisection over [0, C] with a fixed number of steps. Chroma 0 is a neutral
        gray, which is always inside the cube, so the result is always
        representable.
        """
        if self.in_gamut():
            return self
        low, high = 0.0, self.c
        best = OKLCH(self.l, 0.0, self.h)
        for _ in range(max_iterations):
            mid = (low + high) / 2.0
            candidate = OKLCH(self.l, mid, self.h)
            if candidate.in_gamut():
                best = candidate
                low = mid
            else:
                high = mid
        _logger.debug(
            "gamut mapped L=%.4f H=%.2f chroma %.5f -> %.5f (%d iterations)",
            self.l,
            self.h,
            self.c,
            best.c,
            max_iterations,
        )
        return best

    @staticmethod
    def interpolate(
        a: "OKLCH", b: "OKLCH", t: float, path: Union[HuePath, str] = HuePath.SHORTER
    ) -> "OKLCH":
        """Blend two colors; ``t`` is clamped to [0, 1].

        L and C interpolate linearly. Hue follows ``path``: ``shorter`` (the
        default) takes the arc <= 180 degrees, ``longer`` the complementary
        arc, ``increasing`` / ``decreasing`` force the direction.
        """
        path = HuePath.coerce(path)
        t = _clamp(t)
        diff = b.h - a.h
        if path is HuePath.SHORTER:
            if diff > 180.0:
                diff -= 360.0
            elif diff < -180.0:
                diff += 360.0
        elif path is HuePath.LONGER:
            if 0.0 < diff < 180.0:
                diff -= 360.0
            elif -180.0 < diff <= 0.0:
                diff += 360.0
        elif path is HuePath.INCREASING:
            if diff < 0.0:
                diff += 360.0
        elif diff > 0.0:
            diff -= 360.0
        return OKLCH._clamped(a.l + t * (b.l - a.l), a.c + t * (b.c - a.c), a.h + t * diff)
