"""
Memory Consolidator - Stateless consolidation for AI agent memory stores

Takes a snapshot of memory records and returns a consolidated set plus a
before/after report:
- Tier decay (hot → warm → cold → archive) slowed by access and importance
- Near-duplicate removal by embedding similarity
- Clustering and LLM summarization of related memories
- Compaction of archived content
- Semantic forgetting by query embedding

Quick Start:
    from memory_consolidator import consolidate

    result = await consolidate(memories)
    print(result.report.summary())

    # With a summarizer, related WARM/COLD memories are merged
    result = await consolidate(memories, {"hotDays": 3}, my_summarizer)
"""

from memory_consolidator.config import ConsolidateConfig
from memory_consolidator.models.base import CONSOLIDATED_TAG, Memory, MemoryTier
from memory_consolidator.models.report import ConsolidationReport, TierSnapshot
from memory_consolidator.similarity import cosine_similarity
from memory_consolidator.summarizer import (
    BaseSummarizer,
    CallableSummarizer,
    PromptSummarizer,
)
from memory_consolidator.decay.tiers import DecayResult, decay, effective_age_days
from memory_consolidator.consolidation import (
    ArchiveResult,
    ConsolidationResult,
    Consolidator,
    DedupResult,
    ForgetResult,
    MergeResult,
    archive,
    cluster,
    consolidate,
    deduplicate,
    forget,
    summarize_clusters,
)

__version__ = "0.1.0"

__all__ = [
    # Main entry points
    "consolidate",
    "Consolidator",
    "ConsolidationResult",

    # Individual phases
    "decay",
    "deduplicate",
    "cluster",
    "summarize_clusters",
    "archive",
    "forget",
    "cosine_similarity",
    "effective_age_days",

    # Phase results
    "DecayResult",
    "DedupResult",
    "MergeResult",
    "ArchiveResult",
    "ForgetResult",

    # Configuration
    "ConsolidateConfig",

    # Models
    "Memory",
    "MemoryTier",
    "CONSOLIDATED_TAG",
    "TierSnapshot",
    "ConsolidationReport",

    # Summarizers
    "BaseSummarizer",
    "CallableSummarizer",
    "PromptSummarizer",
]
