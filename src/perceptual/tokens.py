"""State token derivation.

Given a base OKLCH color, produces the color each interaction state should
render with by applying that state's metadata shifts:

  lightness : base.l + lightness_shift, clamped to [0, 1]
  chroma    : base.c + chroma_shift, clamped to [0, DERIVED_MAX_CHROMA]
  hue       : unchanged

Results are gamut mapped by default so they always convert back to a valid
``Color``. Opacity and animation are left to the consuming adapter.
"""

from __future__ import annotations

from functools import partial
from typing import Dict, Iterable, List, Optional, Union

from config.settings import DERIVED_MAX_CHROMA

from .batch import evaluate_each
from .oklch import OKLCH
from .ui_state import UIState, coerce_state, get_state_metadata

__all__ = [
    "DERIVABLE_STATES",
    "derive_token_for_state",
    "derive_state_tokens",
    "batch_derive_tokens",
]

DERIVABLE_STATES = (
    UIState.IDLE,
    UIState.HOVERED,
    UIState.ACTIVE,
    UIState.FOCUSED,
    UIState.DISABLED,
    UIState.LOADING,
)


def derive_token_for_state(
    base: OKLCH, state: Union[UIState, int], *, gamut_map: bool = True
) -> OKLCH:
    meta = get_state_metadata(state)
    chroma = min(DERIVED_MAX_CHROMA, max(0.0, base.c + meta.chroma_shift))
    derived = base.lighten(meta.lightness_shift).with_chroma(chroma)
    return derived.map_to_gamut() if gamut_map else derived


def derive_state_tokens(
    base: OKLCH,
    states: Iterable[Union[UIState, int]] = DERIVABLE_STATES,
    *,
    gamut_map: bool = True,
) -> Dict[UIState, OKLCH]:
    """Derive one token per state, keyed by the resolved ``UIState``."""
    return {
        coerce_state(s): derive_token_for_state(base, s, gamut_map=gamut_map) for s in states
    }


def batch_derive_tokens(
    bases: Iterable[OKLCH],
    states: Iterable[Union[UIState, int]] = DERIVABLE_STATES,
    *,
    gamut_map: bool = True,
    max_workers: Optional[int] = None,
) -> List[Dict[UIState, OKLCH]]:
    """``derive_state_tokens`` for every base color, in input order."""
    # unknown states fail before any base is derived
    resolved = tuple(coerce_state(s) for s in states)
    derive = partial(derive_state_tokens, states=resolved, gamut_map=gamut_map)
    return evaluate_each(derive, bases, max_workers=max_workers)
