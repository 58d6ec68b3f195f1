"""
Consolidation pipeline.

Runs, in order:
1. Decay    - age memories through tiers
2. Dedup    - drop near-identical memories
3. Cluster  - group related WARM/COLD memories (summarizer only)
4. Merge    - collapse each cluster into one memory (summarizer only)
5. Archive  - truncate long ARCHIVE content

The pipeline is stateless: the input list and its memories are never modified.
"""

import logging
import time
from collections.abc import Sequence
from datetime import datetime

from pydantic import BaseModel

from memory_consolidator.config import ConfigLike, ConsolidateConfig
from memory_consolidator.consolidation.archive import ArchiveResult, archive
from memory_consolidator.consolidation.clustering import cluster
from memory_consolidator.consolidation.dedup import DedupResult, deduplicate
from memory_consolidator.consolidation.forget import DEFAULT_FORGET_THRESHOLD, ForgetResult, forget
from memory_consolidator.consolidation.merger import summarize_clusters
from memory_consolidator.decay.tiers import DecayResult, decay
from memory_consolidator.models.base import Memory, ensure_utc, utcnow
from memory_consolidator.models.report import ConsolidationReport, TierSnapshot
from memory_consolidator.summarizer import BaseSummarizer

logger = logging.getLogger(__name__)


class ConsolidationResult(BaseModel):
    """Consolidated memories plus the run report."""

    memories: list[Memory]
    report: ConsolidationReport


async def consolidate(
    memories: Sequence[Memory],
    config: ConfigLike = None,
    summarizer: BaseSummarizer | None = None,
    *,
    now: datetime | None = None,
) -> ConsolidationResult:
    """
    Run the full consolidation pipeline on a set of memories.

    Without a summarizer only decay, dedup and archive run. With one, WARM/COLD
    clusters are also summarized; a failing summarizer only leaves its cluster
    unmerged.

    Args:
        memories: Snapshot of memories (not modified)
        config: ConsolidateConfig or a mapping of overrides
        summarizer: Optional summarizer enabling cluster merging
        now: Reference time for decay and the ``consolidatedAt`` stamp of
            merged memories; when omitted, decay uses the start of the run
            and merges are stamped when they happen

    Returns:
        ConsolidationResult with the new memory list and report
    """
    cfg = ConsolidateConfig.resolve(config)
    started = time.perf_counter()
    reference = ensure_utc(now or utcnow())
    before = TierSnapshot.of(memories)

    current = list(memories)

    decay_result = decay(current, cfg, now=reference)
    current = decay_result.memories

    dedup_result = deduplicate(current, cfg.deduplicate_threshold)
    current = dedup_result.memories

    clusters_found = 0
    summarized = 0
    if summarizer is not None:
        clusters = cluster(current, cfg)
        clusters_found = len(clusters)
        if clusters:
            merge_result = await summarize_clusters(current, clusters, summarizer, now=now)
            current = merge_result.memories
            summarized = merge_result.merged

    archive_result = archive(current, cfg.archive_truncate_length)
    current = archive_result.memories

    report = ConsolidationReport(
        timestamp=utcnow(),
        duration_ms=(time.perf_counter() - started) * 1000.0,
        before=before,
        after=TierSnapshot.of(current),
        decayed=decay_result.changed,
        deduplicated=dedup_result.removed,
        clusters_found=clusters_found,
        summarized=summarized,
        archived=archive_result.changed,
    )
    logger.info(f"Consolidation complete: {report.summary()}")

    return ConsolidationResult(memories=current, report=report)


class Consolidator:
    """
    Reusable consolidation runner.

    Holds a config and an optional summarizer so a host application can run
    the pipeline, or any single phase, with the same settings.
    """

    def __init__(
        self,
        config: ConfigLike = None,
        summarizer: BaseSummarizer | None = None,
    ):
        self.config = ConsolidateConfig.resolve(config)
        self.summarizer = summarizer

    async def run(
        self,
        memories: Sequence[Memory],
        *,
        now: datetime | None = None,
    ) -> ConsolidationResult:
        """Run the full pipeline."""
        return await consolidate(memories, self.config, self.summarizer, now=now)

    def decay(self, memories: list[Memory], *, now: datetime | None = None) -> DecayResult:
        return decay(memories, self.config, now=now)

    def deduplicate(self, memories: list[Memory]) -> DedupResult:
        return deduplicate(memories, self.config.deduplicate_threshold)

    def cluster(self, memories: list[Memory]) -> list[list[int]]:
        return cluster(memories, self.config)

    def archive(self, memories: list[Memory]) -> ArchiveResult:
        return archive(memories, self.config.archive_truncate_length)

    def forget(
        self,
        memories: list[Memory],
        query_embedding: Sequence[float],
        threshold: float = DEFAULT_FORGET_THRESHOLD,
    ) -> ForgetResult:
        """Forget memories matching a query (not part of ``run``)."""
        return forget(memories, query_embedding, threshold)

    @property
    def can_summarize(self) -> bool:
        """Whether runs will cluster and merge."""
        return self.summarizer is not None
