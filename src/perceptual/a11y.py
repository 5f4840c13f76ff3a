"""Accessibility validation built on the contrast metrics.

Public API:
- validate_contrast(fg, bg) -> ContrastValidation
- batch_validate_contrast(fgs, bgs) -> list[ContrastValidation]
- passes_wcag_aa(fg, bg) -> bool
- validate_pairs(pairs, level="AA", is_large_text=False) -> list[str]

Colors may be a ``Color``, a hex string, an (r, g, b) tuple or an ``OKLCH``
token. OKLCH tokens are gamut mapped before measuring, so a token that sits
slightly outside sRGB is judged by the color it will actually render as.

The ``pairs`` parameter uses tuples of (foreground, background, label).
Unparseable colors are reported as failures instead of raising, so a single
bad token does not hide the rest.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union
import logging

from .batch import evaluate_pairs
from .color import Color, ColorLike
from .contrast import APCAMetric, WCAGLevel, WCAGMetric
from .errors import PerceptualError
from .oklch import OKLCH

_logger = logging.getLogger(__name__)

__all__ = [
    "ContrastValidation",
    "validate_contrast",
    "batch_validate_contrast",
    "passes_wcag_aa",
    "validate_pairs",
]

TokenLike = Union[ColorLike, OKLCH]


@dataclass(frozen=True)
class ContrastValidation:
    wcag_ratio: float
    apca_lc: float
    wcag_normal_level: Optional[WCAGLevel]
    wcag_large_level: Optional[WCAGLevel]
    apca_body_pass: bool
    apca_large_pass: bool

    @property
    def passes_aa(self) -> bool:
        return self.wcag_normal_level is not None


def _resolve(value: TokenLike) -> Color:
    if isinstance(value, OKLCH):
        return value.map_to_gamut().to_color()
    return Color.as_color(value)


def validate_contrast(foreground: TokenLike, background: TokenLike) -> ContrastValidation:
    fg = _resolve(foreground)
    bg = _resolve(background)
    ratio = WCAGMetric.evaluate(fg, bg).value
    lc = APCAMetric.evaluate(fg, bg).value
    return ContrastValidation(
        wcag_ratio=ratio,
        apca_lc=lc,
        wcag_normal_level=WCAGMetric.level(ratio, False),
        wcag_large_level=WCAGMetric.level(ratio, True),
        apca_body_pass=APCAMetric.passes(lc, False),
        apca_large_pass=APCAMetric.passes(lc, True),
    )


def batch_validate_contrast(
    foregrounds: Iterable[TokenLike],
    backgrounds: Iterable[TokenLike],
    *,
    max_workers: Optional[int] = None,
) -> List[ContrastValidation]:
    """Validate pairs by index; raises LengthMismatchError on unequal lengths."""
    return evaluate_pairs(validate_contrast, foregrounds, backgrounds, max_workers=max_workers)


def passes_wcag_aa(foreground: TokenLike, background: TokenLike) -> bool:
    """Shortcut for normal-size text at AA (ratio >= 4.5)."""
    return WCAGMetric.passes(WCAGMetric.evaluate(_resolve(foreground), _resolve(background)).value)


def validate_pairs(
    pairs: Iterable[Tuple[TokenLike, TokenLike, str]],
    *,
    level: Union[WCAGLevel, str] = WCAGLevel.AA,
    is_large_text: bool = False,
) -> List[str]:
    """Validate labelled foreground/background pairs against a WCAG level.

    Returns
    -------
    list[str]
        A list of failure messages (empty if all pass).
    """
    threshold = WCAGMetric.requirement(level, is_large_text)
    failures: List[str] = []
    checked = 0
    for fg_value, bg_value, label in pairs:
        checked += 1
        try:
            fg = _resolve(fg_value)
            bg = _resolve(bg_value)
        except PerceptualError as exc:
            failures.append(f"[format-error] {label}: {exc}")
            continue
        ratio = WCAGMetric.evaluate(fg, bg).value
        if ratio < threshold:
            failures.append(
                f"[contrast-fail] {label}: ratio={ratio:.2f} < {threshold} (fg={fg} bg={bg})"
            )
    _logger.debug("validated %d contrast pairs, %d failing", checked, len(failures))
    return failures
