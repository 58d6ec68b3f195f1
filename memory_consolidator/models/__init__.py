"""
Data models for the memory consolidator.

- Memory: immutable memory record
- MemoryTier: hot → warm → cold → archive
- TierSnapshot, ConsolidationReport: run reporting
"""

from memory_consolidator.models.base import (
    CONSOLIDATED_TAG,
    Memory,
    MemoryTier,
    ensure_utc,
    merge_tags,
    utcnow,
)
from memory_consolidator.models.report import ConsolidationReport, TierSnapshot

__all__ = [
    # Records
    "Memory",
    "MemoryTier",
    "CONSOLIDATED_TAG",
    "merge_tags",
    # Time
    "utcnow",
    "ensure_utc",
    # Reporting
    "TierSnapshot",
    "ConsolidationReport",
]
