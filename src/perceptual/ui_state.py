"""UI interaction state resolution.

Components receive several independent interaction flags (disabled, loading,
pressed, focused, hovered ...) but can only render one token set. The flags
are resolved through a fixed priority order:

    DISABLED > LOADING > ERROR > SUCCESS > ACTIVE > FOCUSED > HOVERED > IDLE

``UIState`` values *are* the priority ranks, so resolution and combination are
plain integer comparisons and the metadata table is a tuple indexed by rank.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Tuple, Union

from .errors import EmptyInputError, OutOfRangeError

__all__ = [
    "UIState",
    "AnimationLevel",
    "StateMetadata",
    "determine_ui_state",
    "get_state_metadata",
    "get_state_priority",
    "combine_states",
    "coerce_state",
]


class UIState(IntEnum):
    IDLE = 0
    HOVERED = 1
    FOCUSED = 2
    ACTIVE = 3
    SUCCESS = 4
    ERROR = 5
    LOADING = 6
    DISABLED = 7

    @property
    def priority(self) -> int:
        return int(self)

    @property
    def metadata(self) -> "StateMetadata":
        return _METADATA[self]


class AnimationLevel(IntEnum):
    NONE = 0
    SUBTLE = 1
    MEDIUM = 2
    PROMINENT = 3


@dataclass(frozen=True)
class StateMetadata:
    """Perceptual adjustments a state applies to its base tokens.

    Attributes
    ----------
    lightness_shift: float
        Added to OKLCH lightness, in [-1, 1].
    chroma_shift: float
        Added to OKLCH chroma, in [-1, 1].
    opacity: float
        Opacity multiplier in [0, 1].
    animation: AnimationLevel
        Strength of the transition into the state.
    focus_indicator: bool
        Whether a focus ring must be drawn.
    """

    lightness_shift: float
    chroma_shift: float
    opacity: float
    animation: AnimationLevel
    focus_indicator: bool = False


# Indexed by UIState rank
_METADATA: Tuple[StateMetadata, ...] = (
    StateMetadata(0.0, 0.0, 1.0, AnimationLevel.NONE),  # IDLE
    StateMetadata(0.05, 0.02, 1.0, AnimationLevel.SUBTLE),  # HOVERED
    StateMetadata(0.0, 0.0, 1.0, AnimationLevel.SUBTLE, focus_indicator=True),  # FOCUSED
    StateMetadata(-0.08, 0.03, 1.0, AnimationLevel.MEDIUM),  # ACTIVE
    StateMetadata(0.0, 0.05, 1.0, AnimationLevel.SUBTLE),  # SUCCESS
    StateMetadata(0.0, 0.1, 1.0, AnimationLevel.MEDIUM),  # ERROR
    StateMetadata(0.0, -0.05, 0.7, AnimationLevel.PROMINENT),  # LOADING
    StateMetadata(0.2, -0.1, 0.5, AnimationLevel.NONE),  # DISABLED
)


def coerce_state(state: Union[UIState, int]) -> UIState:
    if isinstance(state, UIState):
        return state
    if isinstance(state, bool):
        raise OutOfRangeError(f"UI state must be a UIState or rank, got {state!r}")
    try:
        return UIState(state)
    except ValueError:
        raise OutOfRangeError(f"Unknown UI state: {state!r}") from None


def determine_ui_state(
    disabled: bool = False,
    loading: bool = False,
    active: bool = False,
    focused: bool = False,
    hovered: bool = False,
    *,
    error: bool = False,
    success: bool = False,
) -> UIState:
    """Return the highest-priority state whose flag is set (IDLE when none is)."""
    flags = (
        (disabled, UIState.DISABLED),
        (loading, UIState.LOADING),
        (error, UIState.ERROR),
        (success, UIState.SUCCESS),
        (active, UIState.ACTIVE),
        (focused, UIState.FOCUSED),
        (hovered, UIState.HOVERED),
    )
    for flag, state in flags:
        if flag:
            return state
    return UIState.IDLE


def get_state_metadata(state: Union[UIState, int]) -> StateMetadata:
    return _METADATA[coerce_state(state)]


def get_state_priority(state: Union[UIState, int]) -> int:
    return coerce_state(state).priority


def combine_states(states: Iterable[Union[UIState, int]]) -> UIState:
    """Return the highest-priority state; raises EmptyInputError for no states."""
    resolved = [coerce_state(s) for s in states]
    if not resolved:
        raise EmptyInputError("combine_states requires at least one state")
    return max(resolved)
