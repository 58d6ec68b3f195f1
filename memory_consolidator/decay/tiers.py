"""
Tier decay: age memories from HOT towards ARCHIVE.

Effective age discounts raw age for frequent access and scales it down for
important memories:

    effective_age = (age_days - min(access_count * 0.5, 5)) / (1 + importance * 2)

A memory moves at most one tier per call, even when its effective age is past
several thresholds.
"""

import logging
from datetime import datetime

import numpy as np
from pydantic import BaseModel

from memory_consolidator.config import ConfigLike, ConsolidateConfig
from memory_consolidator.models.base import Memory, MemoryTier, ensure_utc, utcnow

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 86_400.0
MAX_ACCESS_BOOST_DAYS = 5.0


class DecayResult(BaseModel):
    """Result of the decay phase."""

    memories: list[Memory]
    changed: int = 0


def effective_age_days(memory: Memory, now: datetime | None = None) -> float:
    """
    Age of a memory in days, discounted for access and importance.

    Importance of -0.5 zeroes the divisor; the result then follows IEEE
    semantics (inf or nan) instead of raising.
    """
    now = ensure_utc(now or utcnow())
    age_days = (now - memory.created_at).total_seconds() / SECONDS_PER_DAY

    # Frequent access slows decay
    access_boost = min(memory.access_count * 0.5, MAX_ACCESS_BOOST_DAYS)
    # High importance slows decay (1x to 3x)
    importance_multiplier = 1.0 + memory.importance * 2.0

    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(age_days - access_boost) / importance_multiplier)


def next_tier(memory: Memory, effective_age: float, config: ConsolidateConfig) -> MemoryTier:
    """Tier the memory should move to, one step at most."""
    thresholds = {
        MemoryTier.HOT: config.hot_days,
        MemoryTier.WARM: config.warm_days,
        MemoryTier.COLD: config.cold_days,
    }
    threshold = thresholds.get(memory.tier)
    if threshold is not None and effective_age > threshold:
        return memory.tier.next()
    return memory.tier


def decay(
    memories: list[Memory],
    config: ConfigLike = None,
    *,
    now: datetime | None = None,
) -> DecayResult:
    """
    Run the decay phase.

    Args:
        memories: Memories to age (not modified)
        config: Config or overrides for hot_days / warm_days / cold_days
        now: Reference time (defaults to current UTC time)

    Returns:
        DecayResult with unchanged memories passed through as-is and changed
        memories replaced by copies
    """
    cfg = ConsolidateConfig.resolve(config)
    now = ensure_utc(now or utcnow())

    updated: list[Memory] = []
    changed = 0
    for memory in memories:
        tier = next_tier(memory, effective_age_days(memory, now), cfg)
        if tier != memory.tier:
            changed += 1
            updated.append(memory.evolve(tier=tier))
        else:
            updated.append(memory)

    logger.debug(f"Decay moved {changed}/{len(memories)} memories down a tier")
    return DecayResult(memories=updated, changed=changed)
