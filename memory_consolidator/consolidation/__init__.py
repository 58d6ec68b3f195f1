"""
Consolidation module for the memory pipeline.

Provides:
- Near-duplicate removal
- Clustering of related WARM/COLD memories
- Cluster merging through a summarizer
- ARCHIVE content compaction
- Semantic forgetting
- The full pipeline and a reusable runner
"""

from memory_consolidator.consolidation.archive import ArchiveResult, archive
from memory_consolidator.consolidation.clustering import cluster
from memory_consolidator.consolidation.dedup import DedupResult, deduplicate
from memory_consolidator.consolidation.forget import ForgetResult, forget
from memory_consolidator.consolidation.merger import (
    MIN_SUMMARY_LENGTH,
    MergeResult,
    summarize_clusters,
)
from memory_consolidator.consolidation.pipeline import (
    ConsolidationResult,
    Consolidator,
    consolidate,
)

__all__ = [
    # Phases
    "deduplicate",
    "DedupResult",
    "cluster",
    "summarize_clusters",
    "MergeResult",
    "MIN_SUMMARY_LENGTH",
    "archive",
    "ArchiveResult",
    "forget",
    "ForgetResult",
    # Pipeline
    "consolidate",
    "Consolidator",
    "ConsolidationResult",
]
