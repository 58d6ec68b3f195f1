"""
Configuration for the consolidation pipeline.

Every field is optional and independently defaulted. Values are type-checked
but not range-checked: out-of-range thresholds are accepted and produce
degenerate but well-defined behavior.
"""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field


class ConsolidateConfig(BaseModel):
    """Thresholds for every consolidation phase."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    # Deduplication
    deduplicate_threshold: float = Field(
        default=0.92,
        alias="deduplicateThreshold",
        description="Cosine similarity above which two memories are duplicates",
    )

    # Clustering
    cluster_threshold: float = Field(
        default=0.78,
        alias="clusterThreshold",
        description="Cosine similarity to a seed required to join its cluster",
    )
    min_cluster_size: float = Field(
        default=3,
        alias="minClusterSize",
        description="Minimum members before a cluster is summarized",
    )

    # Tier decay (days of effective age)
    hot_days: float = Field(default=7, alias="hotDays", description="HOT → WARM after")
    warm_days: float = Field(default=30, alias="warmDays", description="WARM → COLD after")
    cold_days: float = Field(default=365, alias="coldDays", description="COLD → ARCHIVE after")

    # Archive compaction
    archive_truncate_length: float = Field(
        default=200,
        alias="archiveTruncateLength",
        description="Truncate ARCHIVE content to this many characters (<= 0 disables)",
    )

    @classmethod
    def resolve(cls, value: "ConfigLike" = None) -> "ConsolidateConfig":
        """
        Build a config from None, an existing config, or a mapping of overrides.

        Mapping keys may use field names or their camelCase aliases. Unknown
        keys raise ``pydantic.ValidationError``.
        """
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        return cls.model_validate(dict(value))

    @classmethod
    def from_file(cls, path: Path) -> "ConsolidateConfig":
        """Load configuration from a JSON file."""
        path = Path(path)
        if path.suffix != ".json":
            raise ValueError(f"Unsupported config file format: {path.suffix}")

        with open(path) as f:
            data = json.load(f)
        return cls.model_validate(data)

    def to_file(self, path: Path) -> None:
        """Save configuration to a JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.model_dump(), f, indent=2)


ConfigLike = Union[ConsolidateConfig, Mapping[str, Any], None]
