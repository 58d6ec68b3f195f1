"""
Decay module for tier aging.

Provides:
- Effective age calculation (access and importance slow aging)
- Single-step tier transitions
"""

from memory_consolidator.decay.tiers import (
    DecayResult,
    decay,
    effective_age_days,
    next_tier,
)

__all__ = [
    "DecayResult",
    "decay",
    "effective_age_days",
    "next_tier",
]
