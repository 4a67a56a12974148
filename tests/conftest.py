"""Pytest configuration and fixtures."""

import json
from pathlib import Path

import pytest

from kgexplorer.config import Settings
from kgexplorer.models import Triple
from kgexplorer.storage import DatasetState


# Test data directory
TEST_FIXTURES_DIR = Path(__file__).parent / "fixtures"
SAMPLE_DATASET = TEST_FIXTURES_DIR / "kg_triples_sample.json"


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with defaults."""
    return Settings(
        dataset_path=str(SAMPLE_DATASET),
        dataset_url=None,
        query_result_limit=100,
        overview_sample_limit=2000,
    )


@pytest.fixture
def sample_triples() -> list[Triple]:
    """Small dataset covering case variants and a malformed record."""
    return [
        Triple(subject="microgravity", predicate="affects", object="bone density", title="Bone loss in orbit"),
        Triple(subject="radiation", predicate="damages", object="DNA"),
        Triple(subject="Microgravity", predicate="reduces", object="muscle mass"),
        Triple(subject="radiation", predicate="affects", object=""),
    ]


@pytest.fixture
def sample_state(sample_triples: list[Triple]) -> DatasetState:
    """Loaded dataset state."""
    return DatasetState(triples=tuple(sample_triples), source="memory")


@pytest.fixture
def dataset_file(tmp_path: Path):
    """Write records to a dataset file and return its path."""

    def write(records) -> Path:
        path = tmp_path / "kg_triples.json"
        path.write_text(json.dumps(records), encoding="utf-8")
        return path

    return write


@pytest.fixture
def sample_dataset_path() -> Path:
    """Path to the sample dataset fixture."""
    return SAMPLE_DATASET
