"""
Memory record model and storage tiers.

Records are immutable values: every transformation returns either the same
instance or a new copy with the changed fields.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator
from ulid import ULID


CONSOLIDATED_TAG = "consolidated"


def utcnow() -> datetime:
    """Get current UTC time (timezone-aware)."""
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Interpret naive datetimes as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class MemoryTier(str, Enum):
    """Storage tiers, ordered from most to least recent."""

    HOT = "hot"
    WARM = "warm"
    COLD = "cold"
    ARCHIVE = "archive"

    @property
    def rank(self) -> int:
        """Position in the hot → archive ordering (0-3)."""
        return _TIER_ORDER.index(self)

    def next(self) -> "MemoryTier":
        """The following tier. Archive is terminal."""
        return _TIER_ORDER[min(self.rank + 1, len(_TIER_ORDER) - 1)]


_TIER_ORDER: tuple[MemoryTier, ...] = (
    MemoryTier.HOT,
    MemoryTier.WARM,
    MemoryTier.COLD,
    MemoryTier.ARCHIVE,
)


def merge_tags(tags: list[str], extra: tuple[str, ...] | list[str]) -> list[str]:
    """Union two tag lists, keeping first-seen order."""
    return list(dict.fromkeys([*tags, *extra]))


class Memory(BaseModel):
    """
    A single memory record from the host knowledge store.

    The model is frozen. Use ``evolve``, ``with_tags`` and ``with_metadata``
    to derive changed copies.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(
        default_factory=lambda: str(ULID()),
        description="Unique memory identifier (ULID for time-ordering)",
    )
    content: str = Field(description="The memory text body")
    embedding: list[float] = Field(
        default_factory=list,
        description="Embedding vector produced by the host application",
    )
    tags: list[str] = Field(default_factory=list, description="Insertion-ordered tags")
    importance: float = Field(
        default=0.5,
        description="Importance, expected in 0-1 but not enforced",
    )
    tier: MemoryTier = Field(default=MemoryTier.HOT)

    created_at: datetime = Field(default_factory=utcnow)
    last_accessed_at: datetime = Field(default_factory=utcnow)
    access_count: int = Field(default=0, description="Number of times accessed", ge=0)

    source: str | None = Field(default=None, description="Where the memory came from")
    metadata: dict[str, Any] | None = Field(default=None)

    @field_validator("embedding", mode="before")
    @classmethod
    def _coerce_embedding(cls, value: Any) -> Any:
        if isinstance(value, np.ndarray):
            return value.astype(float).ravel().tolist()
        return value

    @field_validator("tags")
    @classmethod
    def _dedupe_tags(cls, value: list[str]) -> list[str]:
        return list(dict.fromkeys(value))

    @field_validator("created_at", "last_accessed_at")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)

    @property
    def score(self) -> float:
        """Ranking used to pick which of several similar memories survives."""
        return self.importance + self.access_count * 0.1

    def evolve(self, **changes: Any) -> "Memory":
        """Return a copy with the given fields replaced."""
        if "tags" in changes:
            changes["tags"] = merge_tags([], changes["tags"])
        return self.model_copy(update=changes)

    def with_tags(self, *tags: str) -> "Memory":
        """Return a copy with ``tags`` added (existing order kept)."""
        return self.evolve(tags=merge_tags(self.tags, tags))

    def with_metadata(self, **entries: Any) -> "Memory":
        """Return a copy with metadata extended by ``entries``."""
        return self.evolve(metadata={**(self.metadata or {}), **entries})

    def __str__(self) -> str:
        return f"{self.tier.value}[{self.id[:8]}]: {self.content[:50]}"
