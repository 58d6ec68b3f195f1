"""
Semantic forgetting: drop memories close to a query embedding.
"""

import logging
from collections.abc import Sequence

import numpy as np
from pydantic import BaseModel

from memory_consolidator.models.base import Memory
from memory_consolidator.similarity import cosine_similarity

logger = logging.getLogger(__name__)

DEFAULT_FORGET_THRESHOLD = 0.7


class ForgetResult(BaseModel):
    """Result of a forget operation."""

    memories: list[Memory]
    forgotten: int = 0


def forget(
    memories: list[Memory],
    query_embedding: Sequence[float] | np.ndarray,
    threshold: float = DEFAULT_FORGET_THRESHOLD,
) -> ForgetResult:
    """
    Forget memories matching a semantic query.

    Returns the survivors: memories whose similarity to ``query_embedding``
    is strictly below ``threshold``.
    """
    survivors = [
        m for m in memories if cosine_similarity(m.embedding, query_embedding) < threshold
    ]
    forgotten = len(memories) - len(survivors)

    logger.debug(f"Forgot {forgotten}/{len(memories)} memories")
    return ForgetResult(memories=survivors, forgotten=forgotten)
