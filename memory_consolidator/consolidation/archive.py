"""
Compaction of ARCHIVE-tier content.
"""

import logging

from pydantic import BaseModel

from memory_consolidator.models.base import CONSOLIDATED_TAG, Memory, MemoryTier

logger = logging.getLogger(__name__)

DEFAULT_TRUNCATE_LENGTH = 200
ELLIPSIS = "..."


class ArchiveResult(BaseModel):
    """Result of archive compaction."""

    memories: list[Memory]
    changed: int = 0


def should_truncate(memory: Memory, truncate_length: float) -> bool:
    """Archived, too long, and not a consolidated summary."""
    return (
        memory.tier == MemoryTier.ARCHIVE
        and len(memory.content) > truncate_length
        and CONSOLIDATED_TAG not in memory.tags
    )


def archive(
    memories: list[Memory],
    truncate_length: float = DEFAULT_TRUNCATE_LENGTH,
) -> ArchiveResult:
    """
    Truncate long ARCHIVE-tier content to ``truncate_length`` characters.

    A length of 0 or less disables the phase. Truncated memories record
    ``truncated`` and ``originalLength`` in their metadata.
    """
    if truncate_length <= 0:
        return ArchiveResult(memories=list(memories), changed=0)

    updated: list[Memory] = []
    changed = 0
    for memory in memories:
        if not should_truncate(memory, truncate_length):
            updated.append(memory)
            continue

        changed += 1
        truncated = memory.evolve(content=memory.content[:int(truncate_length)] + ELLIPSIS)
        updated.append(
            truncated.with_metadata(truncated=True, originalLength=len(memory.content))
        )

    logger.debug(f"Archive truncated {changed} memories")
    return ArchiveResult(memories=updated, changed=changed)
