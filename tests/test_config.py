"""
Tests for consolidation configuration.
"""

import pytest
from pydantic import ValidationError

from memory_consolidator.config import ConsolidateConfig


class TestConsolidateConfig:
    """Tests for ConsolidateConfig."""

    def test_defaults(self):
        """Documented defaults."""
        config = ConsolidateConfig()

        assert config.deduplicate_threshold == 0.92
        assert config.cluster_threshold == 0.78
        assert config.min_cluster_size == 3
        assert config.hot_days == 7
        assert config.warm_days == 30
        assert config.cold_days == 365
        assert config.archive_truncate_length == 200

    def test_resolve_none(self):
        """None resolves to defaults."""
        assert ConsolidateConfig.resolve(None) == ConsolidateConfig()

    def test_resolve_instance_passthrough(self):
        """An existing config is returned as-is."""
        config = ConsolidateConfig(hot_days=3)
        assert ConsolidateConfig.resolve(config) is config

    def test_resolve_camel_case_overrides(self):
        """camelCase keys override only the named fields."""
        config = ConsolidateConfig.resolve({"hotDays": 3, "minClusterSize": 5})

        assert config.hot_days == 3
        assert config.min_cluster_size == 5
        assert config.warm_days == 30

    def test_resolve_snake_case_overrides(self):
        """Field names work as override keys too."""
        config = ConsolidateConfig.resolve({"cluster_threshold": 0.5})
        assert config.cluster_threshold == 0.5

    def test_unknown_key_rejected(self):
        """Typos in override keys fail loudly."""
        with pytest.raises(ValidationError):
            ConsolidateConfig.resolve({"hotdays": 3})

    def test_non_numeric_rejected(self):
        """Values must be numeric."""
        with pytest.raises(ValidationError):
            ConsolidateConfig.resolve({"hotDays": "soon"})

    def test_out_of_range_accepted(self):
        """Ranges are not validated."""
        config = ConsolidateConfig.resolve({
            "deduplicateThreshold": -1.0,
            "minClusterSize": 0,
            "archiveTruncateLength": -10,
        })

        assert config.deduplicate_threshold == -1.0
        assert config.min_cluster_size == 0
        assert config.archive_truncate_length == -10

    def test_fractional_counts_accepted(self):
        """Size and length fields take any number."""
        config = ConsolidateConfig.resolve({"minClusterSize": 2.5, "archiveTruncateLength": 150.5})

        assert config.min_cluster_size == 2.5
        assert config.archive_truncate_length == 150.5

    def test_file_round_trip(self, temp_directory):
        """Config saved to JSON loads back identical."""
        path = temp_directory / "nested" / "consolidate.json"
        config = ConsolidateConfig(hot_days=2, cluster_threshold=0.6)

        config.to_file(path)
        loaded = ConsolidateConfig.from_file(path)

        assert loaded == config

    def test_from_file_camel_case(self, temp_directory):
        """JSON files may use camelCase keys."""
        path = temp_directory / "consolidate.json"
        path.write_text('{"warmDays": 14}')

        assert ConsolidateConfig.from_file(path).warm_days == 14

    def test_unsupported_file_format(self, temp_directory):
        """Only JSON is supported."""
        with pytest.raises(ValueError, match="Unsupported config file format"):
            ConsolidateConfig.from_file(temp_directory / "config.yaml")
