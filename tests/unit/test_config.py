"""Unit tests for settings."""

import pytest
from pydantic import ValidationError

from kgexplorer.config import Settings, settings


class TestSettings:
    """Tests for Settings."""

    def test_global_instance(self) -> None:
        """Test the module-level settings instance."""
        assert isinstance(settings, Settings)

    def test_defaults(self) -> None:
        """Test default values."""
        s = Settings(_env_file=None)
        assert s.query_result_limit == 100
        assert s.overview_sample_limit == 2000
        assert s.dataset_url is None

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test values are read from environment variables."""
        monkeypatch.setenv("QUERY_RESULT_LIMIT", "5")
        monkeypatch.setenv("DATASET_URL", "http://example.org/triples.json")
        s = Settings(_env_file=None)
        assert s.query_result_limit == 5
        assert s.dataset_url == "http://example.org/triples.json"

    def test_limit_must_be_positive(self) -> None:
        """Test a zero result limit is rejected."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, query_result_limit=0)
