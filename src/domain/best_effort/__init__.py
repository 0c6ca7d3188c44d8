"""Best-effort scanning and aerobic capacity estimation."""

from .aerobic import estimate
from .window import (
    MAX_PLAUSIBLE_DISTANCE_M,
    TEST_DURATION_SECONDS,
    describe_defect,
    find_best_effort,
    pick_best,
)

__all__ = [
    "MAX_PLAUSIBLE_DISTANCE_M",
    "TEST_DURATION_SECONDS",
    "describe_defect",
    "estimate",
    "find_best_effort",
    "pick_best",
]
