"""
Cluster merging through an external summarizer.

Each cluster collapses into its highest-scoring member, whose content is
replaced by the summary. Summarizer failures are contained per cluster.
"""

import logging
from datetime import datetime

from pydantic import BaseModel

from memory_consolidator.models.base import CONSOLIDATED_TAG, Memory, ensure_utc, utcnow
from memory_consolidator.summarizer import BaseSummarizer

logger = logging.getLogger(__name__)

MIN_SUMMARY_LENGTH = 10


class MergeResult(BaseModel):
    """Result of merging clusters."""

    memories: list[Memory]
    merged: int = 0


def select_representative(memories: list[Memory], group: list[int]) -> int:
    """Index of the best-scored member; the first one wins a tie."""
    return max(group, key=lambda idx: memories[idx].score)


def is_usable_summary(summary: object) -> bool:
    """Reject empty or suspiciously short summarizer output."""
    return isinstance(summary, str) and len(summary) >= MIN_SUMMARY_LENGTH


def merge_cluster(
    memories: list[Memory],
    group: list[int],
    best: int,
    summary: str,
    now: datetime,
) -> Memory:
    """Build the representative memory that replaces a whole cluster."""
    return (
        memories[best].evolve(
            content=summary,
            importance=max(memories[idx].importance for idx in group),
        )
        .with_tags(CONSOLIDATED_TAG)
        .with_metadata(consolidatedFrom=len(group), consolidatedAt=now.isoformat())
    )


async def summarize_clusters(
    memories: list[Memory],
    clusters: list[list[int]],
    summarizer: BaseSummarizer,
    *,
    now: datetime | None = None,
) -> MergeResult:
    """
    Summarize and collapse clusters, one at a time in cluster order.

    Args:
        memories: Working collection the cluster indices refer to
        clusters: Disjoint index groups from ``cluster``
        summarizer: Summarizer capability
        now: Timestamp recorded as ``consolidatedAt`` (defaults to the time
            of the merge)

    Returns:
        MergeResult with the surviving memories (original order) and the
        number of memories folded into representatives
    """
    fixed_now = ensure_utc(now) if now is not None else None
    result = list(memories)
    to_remove: set[int] = set()
    merged = 0

    for group in clusters:
        texts = [memories[idx].content for idx in group]
        try:
            summary = await summarizer.summarize(texts)
        except Exception as e:
            logger.warning(f"Summarizer failed for cluster of {len(group)}, skipping: {e}")
            continue

        if not is_usable_summary(summary):
            logger.warning(
                f"Summarizer returned unusable output for cluster of {len(group)}, skipping"
            )
            continue

        best = select_representative(memories, group)
        stamp = fixed_now or utcnow()
        result[best] = merge_cluster(memories, group, best, summary, stamp)
        to_remove.update(idx for idx in group if idx != best)
        merged += len(group) - 1

    return MergeResult(
        memories=[m for idx, m in enumerate(result) if idx not in to_remove],
        merged=merged,
    )
