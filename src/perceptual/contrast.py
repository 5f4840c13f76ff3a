"""Contrast metrics: WCAG 2.1 ratio and APCA-W3 lightness contrast (Lc).

Public API:
- relative_luminance(color) -> float
- WCAGMetric.evaluate(fg, bg) -> ContrastResult (ratio in [1, 21])
- WCAGMetric.passes(ratio, level, is_large_text) -> bool
- APCAMetric.evaluate(fg, bg) -> ContrastResult (Lc, roughly [-108, 106])
- <metric>.evaluate_batch(fgs, bgs) -> list[ContrastResult]

Metrics are stateless; every method is a classmethod or staticmethod, so
``WCAGMetric.evaluate(fg, bg)`` and ``WCAG.evaluate(fg, bg)`` are the same call.

APCA constants are the APCA-W3 0.0.98G-4g reference values. They are
load-bearing for conformance and must not be rounded or re-derived.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, List, Optional, Tuple, Union

from .batch import evaluate_pairs
from .color import LINEAR_LUT, Color, ColorLike
from .errors import InvalidFormatError

__all__ = [
    "Polarity",
    "ContrastResult",
    "WCAGLevel",
    "ContrastMetric",
    "WCAGMetric",
    "APCAMetric",
    "WCAG",
    "APCA",
    "relative_luminance",
    "WCAG_REQUIREMENTS",
    "APCA_MIN_BODY",
    "APCA_MIN_LARGE",
]


class Polarity(IntEnum):
    DARK_ON_LIGHT = 1
    LIGHT_ON_DARK = -1
    NOT_APPLICABLE = 0


@dataclass(frozen=True)
class ContrastResult:
    value: float
    polarity: Polarity = Polarity.NOT_APPLICABLE

    @property
    def magnitude(self) -> float:
        return abs(self.value)


class WCAGLevel(str, Enum):
    AA = "AA"
    AAA = "AAA"

    @classmethod
    def coerce(cls, value: Union["WCAGLevel", str]) -> "WCAGLevel":
        if isinstance(value, WCAGLevel):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            raise InvalidFormatError(f"Unknown WCAG level: {value!r}") from None


# (level, is_large_text) -> minimum ratio
WCAG_REQUIREMENTS = {
    (WCAGLevel.AA, False): 4.5,
    (WCAGLevel.AA, True): 3.0,
    (WCAGLevel.AAA, False): 7.0,
    (WCAGLevel.AAA, True): 4.5,
}

# APCA-W3 0.0.98G-4g
_MAIN_TRC = 2.4
_S_R_CO = 0.2126729
_S_G_CO = 0.7151522
_S_B_CO = 0.0721750
_NORM_BG = 0.56
_NORM_TXT = 0.57
_REV_TXT = 0.62
_REV_BG = 0.65
_BLK_THRS = 0.022
_BLK_CLMP = 1.414
_SCALE_BOW = 1.14
_SCALE_WOB = 1.14
_LO_BOW_OFFSET = 0.027
_LO_WOB_OFFSET = 0.027
_LO_CLIP = 0.1
_DELTA_Y_MIN = 0.0005

# Minimum |Lc| for body text and for large / bold text
APCA_MIN_BODY = 60.0
APCA_MIN_LARGE = 45.0

# APCA uses a plain power curve, not the piecewise sRGB decode
_APCA_LUT: Tuple[float, ...] = tuple((i / 255.0) ** _MAIN_TRC for i in range(256))


def relative_luminance(color: ColorLike) -> float:
    c = Color.as_color(color)
    # Rec. 709 coefficients used by WCAG
    return 0.2126 * LINEAR_LUT[c.r] + 0.7152 * LINEAR_LUT[c.g] + 0.0722 * LINEAR_LUT[c.b]


class ContrastMetric:
    """Base for stateless contrast metrics.

    Subclasses provide ``evaluate(foreground, background)`` as a classmethod.
    """

    name = ""
    version = ""

    @classmethod
    def evaluate_batch(
        cls,
        foregrounds: Iterable[ColorLike],
        backgrounds: Iterable[ColorLike],
        *,
        max_workers: Optional[int] = None,
    ) -> List[ContrastResult]:
        """Evaluate pairs by index; raises LengthMismatchError on unequal lengths."""
        return evaluate_pairs(
            cls.evaluate, foregrounds, backgrounds, max_workers=max_workers  # type: ignore[attr-defined]
        )


class WCAGMetric(ContrastMetric):
    name = "WCAG 2.1"
    version = "2.1"

    @classmethod
    def evaluate(cls, foreground: ColorLike, background: ColorLike) -> ContrastResult:
        fg_lum = relative_luminance(foreground)
        bg_lum = relative_luminance(background)
        lighter = max(fg_lum, bg_lum)
        darker = min(fg_lum, bg_lum)
        polarity = Polarity.DARK_ON_LIGHT if fg_lum < bg_lum else Polarity.LIGHT_ON_DARK
        return ContrastResult((lighter + 0.05) / (darker + 0.05), polarity)

    @staticmethod
    def requirement(level: Union[WCAGLevel, str], is_large_text: bool = False) -> float:
        return WCAG_REQUIREMENTS[(WCAGLevel.coerce(level), bool(is_large_text))]

    @staticmethod
    def passes(
        ratio: float, level: Union[WCAGLevel, str] = WCAGLevel.AA, is_large_text: bool = False
    ) -> bool:
        return ratio >= WCAGMetric.requirement(level, is_large_text)

    @staticmethod
    def level(ratio: float, is_large_text: bool = False) -> Optional[WCAGLevel]:
        """Highest level the ratio satisfies, or None when it fails AA."""
        for lvl in (WCAGLevel.AAA, WCAGLevel.AA):
            if WCAGMetric.passes(ratio, lvl, is_large_text):
                return lvl
        return None

    @staticmethod
    def is_large_text(font_size_px: float, font_weight: int = 400) -> bool:
        # 18pt regular or 14pt bold, expressed in CSS pixels
        return font_size_px >= 24.0 or (font_size_px >= 18.66 and font_weight >= 700)


def _soft_clamp(y: float) -> float:
    if y <= _BLK_THRS:
        return y + (_BLK_THRS - y) ** _BLK_CLMP
    return y


class APCAMetric(ContrastMetric):
    name = "APCA-W3"
    version = "0.0.98G-4g"

    @staticmethod
    def screen_luminance(color: ColorLike) -> float:
        """APCA screen luminance Y before the black soft clamp."""
        c = Color.as_color(color)
        return _S_R_CO * _APCA_LUT[c.r] + _S_G_CO * _APCA_LUT[c.g] + _S_B_CO * _APCA_LUT[c.b]

    @classmethod
    def evaluate(cls, foreground: ColorLike, background: ColorLike) -> ContrastResult:
        """Lc of ``foreground`` text on ``background``.

        Positive values mean dark text on a light background, negative values
        light text on a dark background. Contrast below the low clip collapses
        to 0 while keeping the luminance-derived polarity; pairs whose
        luminances are closer than deltaYmin are NOT_APPLICABLE.
        """
        text_y = _soft_clamp(cls.screen_luminance(foreground))
        back_y = _soft_clamp(cls.screen_luminance(background))
        if abs(back_y - text_y) < _DELTA_Y_MIN:
            return ContrastResult(0.0, Polarity.NOT_APPLICABLE)

        if back_y > text_y:
            sapc = (back_y**_NORM_BG - text_y**_NORM_TXT) * _SCALE_BOW
            output = 0.0 if sapc < _LO_CLIP else sapc - _LO_BOW_OFFSET
            polarity = Polarity.DARK_ON_LIGHT
        else:
            sapc = (back_y**_REV_BG - text_y**_REV_TXT) * _SCALE_WOB
            output = 0.0 if sapc > -_LO_CLIP else sapc + _LO_WOB_OFFSET
            polarity = Polarity.LIGHT_ON_DARK
        return ContrastResult(output * 100.0, polarity)

    @staticmethod
    def passes(lc: float, is_large_text: bool = False) -> bool:
        return abs(lc) >= (APCA_MIN_LARGE if is_large_text else APCA_MIN_BODY)


WCAG = WCAGMetric()
APCA = APCAMetric()
