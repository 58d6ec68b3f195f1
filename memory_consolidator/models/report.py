"""
Before/after report produced by a consolidation run.
"""

from collections import Counter
from collections.abc import Iterable
from datetime import datetime

from pydantic import BaseModel, Field

from memory_consolidator.models.base import Memory, MemoryTier, utcnow


class TierSnapshot(BaseModel):
    """Record counts per tier at one point of a run."""

    total: int = 0
    by_tier: dict[MemoryTier, int] = Field(
        default_factory=lambda: {tier: 0 for tier in MemoryTier}
    )

    @classmethod
    def of(cls, memories: Iterable[Memory]) -> "TierSnapshot":
        counts = Counter(memory.tier for memory in memories)
        return cls(
            total=sum(counts.values()),
            by_tier={tier: counts.get(tier, 0) for tier in MemoryTier},
        )


class ConsolidationReport(BaseModel):
    """Result summary of a consolidation run."""

    timestamp: datetime = Field(default_factory=utcnow, description="When the run completed")
    duration_ms: float = Field(default=0.0, description="Elapsed wall-clock time", ge=0.0)

    before: TierSnapshot = Field(default_factory=TierSnapshot)
    after: TierSnapshot = Field(default_factory=TierSnapshot)

    # Phase counters
    decayed: int = 0
    deduplicated: int = 0
    clusters_found: int = 0
    summarized: int = 0
    archived: int = 0

    def summary(self) -> str:
        """One-line description for logs."""
        return (
            f"{self.before.total} -> {self.after.total} memories in {self.duration_ms:.1f}ms "
            f"(decayed={self.decayed}, deduplicated={self.deduplicated}, "
            f"clusters={self.clusters_found}, summarized={self.summarized}, "
            f"archived={self.archived})"
        )
