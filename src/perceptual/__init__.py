"""Perceptual engine public API.

Pure, deterministic color and interaction-state kernel consumed by the UI
adapter layer once per render:

- sRGB <-> OKLCH conversion, gamut mapping and color algebra
- WCAG 2.1 and APCA-W3 contrast, single pair and batch
- priority resolution of interaction flags into a single ``UIState``

Design Principles:
- Every type is an immutable value object; no module holds mutable state.
- No DOM, CSS class or component-prop knowledge; adapters map results to styles.
- Prefer namespaced access for less common helpers (e.g. ``perceptual.oklch.normalize_hue``).
"""

from .errors import (  # noqa: F401
    PerceptualError,
    InvalidFormatError,
    OutOfRangeError,
    LengthMismatchError,
    EmptyInputError,
)
from .color import Color, srgb_to_linear, linear_to_srgb  # noqa: F401
from .oklch import OKLab, OKLCH, HuePath  # noqa: F401
from .contrast import (  # noqa: F401
    Polarity,
    ContrastResult,
    WCAGLevel,
    WCAGMetric,
    APCAMetric,
    WCAG,
    APCA,
    relative_luminance,
)
from .ui_state import (  # noqa: F401
    UIState,
    AnimationLevel,
    StateMetadata,
    determine_ui_state,
    get_state_metadata,
    get_state_priority,
    combine_states,
)
from .tokens import derive_token_for_state, derive_state_tokens, batch_derive_tokens  # noqa: F401
from .a11y import (  # noqa: F401
    ContrastValidation,
    validate_contrast,
    batch_validate_contrast,
    passes_wcag_aa,
    validate_pairs,
)

__version__ = "0.1.0"

__all__ = [
    "PerceptualError",
    "InvalidFormatError",
    "OutOfRangeError",
    "LengthMismatchError",
    "EmptyInputError",
    "Color",
    "srgb_to_linear",
    "linear_to_srgb",
    "OKLab",
    "OKLCH",
    "HuePath",
    "Polarity",
    "ContrastResult",
    "WCAGLevel",
    "WCAGMetric",
    "APCAMetric",
    "WCAG",
    "APCA",
    "relative_luminance",
    "UIState",
    "AnimationLevel",
    "StateMetadata",
    "determine_ui_state",
    "get_state_metadata",
    "get_state_priority",
    "combine_states",
    "derive_token_for_state",
    "derive_state_tokens",
    "batch_derive_tokens",
    "ContrastValidation",
    "validate_contrast",
    "batch_validate_contrast",
    "passes_wcag_aa",
    "validate_pairs",
]
