"""
Near-duplicate removal by embedding similarity.
"""

import logging

from pydantic import BaseModel

from memory_consolidator.models.base import Memory
from memory_consolidator.similarity import cosine_similarity

logger = logging.getLogger(__name__)

DEFAULT_DEDUPLICATE_THRESHOLD = 0.92


class DedupResult(BaseModel):
    """Result of deduplication."""

    memories: list[Memory]
    removed: int = 0


def deduplicate(
    memories: list[Memory],
    threshold: float = DEFAULT_DEDUPLICATE_THRESHOLD,
) -> DedupResult:
    """
    Remove near-duplicate memories.

    Pairs are compared greedily in input order. When two memories are more
    similar than ``threshold`` the one with the lower ``Memory.score`` is
    dropped; on a tie the earlier memory is kept. Once the outer memory is
    dropped it is not compared any further.
    """
    if len(memories) < 2:
        return DedupResult(memories=list(memories), removed=0)

    removed: set[int] = set()

    for i, first in enumerate(memories):
        if i in removed:
            continue
        for j in range(i + 1, len(memories)):
            if j in removed:
                continue
            second = memories[j]
            if cosine_similarity(first.embedding, second.embedding) <= threshold:
                continue

            if first.score >= second.score:
                removed.add(j)
            else:
                removed.add(i)
                break

    logger.debug(f"Dedup removed {len(removed)}/{len(memories)} memories")
    return DedupResult(
        memories=[m for idx, m in enumerate(memories) if idx not in removed],
        removed=len(removed),
    )
