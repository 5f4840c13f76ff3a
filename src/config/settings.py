"""Global configuration and constants for the perceptual engine."""

from __future__ import annotations

import os
from typing import Final

# Bisection steps used when pulling an out-of-gamut OKLCH color back into sRGB.
# 20 halvings of a chroma span <= 0.5 leave < 1e-6 of residual chroma.
GAMUT_MAX_ITERATIONS: Final = int(os.environ.get("PERCEPTUAL_GAMUT_ITERATIONS", "20"))

# Batch contrast evaluation stays on the calling thread unless this is > 1
BATCH_MAX_WORKERS: Final = int(os.environ.get("PERCEPTUAL_BATCH_WORKERS", "1"))
BATCH_PARALLEL_MIN_SIZE: Final = 64  # pairs

# Upper chroma bound applied when deriving state tokens
DERIVED_MAX_CHROMA: Final = 0.4
