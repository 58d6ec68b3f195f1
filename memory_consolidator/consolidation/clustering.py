"""
Seed-based grouping of related WARM/COLD memories.
"""

import logging

from memory_consolidator.config import ConfigLike, ConsolidateConfig
from memory_consolidator.models.base import Memory, MemoryTier
from memory_consolidator.similarity import cosine_similarity

logger = logging.getLogger(__name__)

CLUSTERABLE_TIERS = frozenset({MemoryTier.WARM, MemoryTier.COLD})


def cluster(memories: list[Memory], config: ConfigLike = None) -> list[list[int]]:
    """
    Find clusters of similar WARM/COLD memories.

    Each unassigned candidate in turn seeds a group and pulls in every other
    unassigned candidate whose similarity *to the seed* reaches
    ``cluster_threshold``. Groups smaller than ``min_cluster_size`` are
    dissolved so their members stay available to later seeds. The result
    depends on input order.

    Returns:
        Disjoint lists of indices into ``memories``, seed first
    """
    cfg = ConsolidateConfig.resolve(config)
    candidates = [i for i, m in enumerate(memories) if m.tier in CLUSTERABLE_TIERS]

    if len(candidates) < cfg.min_cluster_size:
        return []

    assigned: set[int] = set()
    clusters: list[list[int]] = []

    for seed in candidates:
        if seed in assigned:
            continue
        group = [seed]
        assigned.add(seed)

        for other in candidates:
            if other in assigned:
                continue
            similarity = cosine_similarity(memories[seed].embedding, memories[other].embedding)
            if similarity >= cfg.cluster_threshold:
                group.append(other)
                assigned.add(other)

        if len(group) >= cfg.min_cluster_size:
            clusters.append(group)
        else:
            assigned.difference_update(group)

    logger.debug(f"Found {len(clusters)} clusters among {len(candidates)} candidates")
    return clusters
