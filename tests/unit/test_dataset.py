"""Unit tests for dataset loading."""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from kgexplorer.models import Triple
from kgexplorer.storage.dataset import (
    LOAD_FAILURE_MESSAGE,
    DatasetLoader,
    DatasetLoadError,
    DatasetState,
    decode_triples,
)


class TestDecodeTriples:
    """Tests for decoding the JSON document."""

    def test_decode_records(self) -> None:
        """Test records become triples in order."""
        triples = decode_triples([
            {"subject": "a", "predicate": "p", "object": "b", "title": "T", "chunk_id": "c1", "faiss_verified": True},
            {"subject": "c", "predicate": "q", "object": "d"},
        ])
        assert triples == (
            Triple(subject="a", predicate="p", object="b", title="T", chunk_id="c1", faiss_verified=True),
            Triple(subject="c", predicate="q", object="d"),
        )

    def test_missing_fields_become_empty(self) -> None:
        """Test missing or null parts are kept as empty strings."""
        (triple,) = decode_triples([{"subject": "a", "predicate": None}])
        assert triple.predicate == ""
        assert triple.object == ""
        assert not triple.is_complete

    def test_not_an_array(self) -> None:
        """Test a non-array document is rejected."""
        with pytest.raises(DatasetLoadError, match="JSON array"):
            decode_triples({"subject": "a"})

    def test_non_object_record(self) -> None:
        """Test a non-object record is rejected."""
        with pytest.raises(DatasetLoadError, match="record 1"):
            decode_triples([{"subject": "a"}, "oops"])


class TestDatasetLoaderFile:
    """Tests for loading from disk."""

    @pytest.mark.asyncio
    async def test_load_file(self, dataset_file) -> None:
        """Test loading a valid file."""
        path = dataset_file([{"subject": "a", "predicate": "p", "object": "b"}])
        triples = await DatasetLoader(path=path).load()
        assert triples == (Triple(subject="a", predicate="p", object="b"),)

    @pytest.mark.asyncio
    async def test_load_sample_fixture(self, sample_dataset_path: Path) -> None:
        """Test loading the bundled sample."""
        triples = await DatasetLoader(path=sample_dataset_path).load()
        assert len(triples) == 4
        assert triples[0].subject == "microgravity"

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing file raises DatasetLoadError."""
        loader = DatasetLoader(path=tmp_path / "absent.json")
        with pytest.raises(DatasetLoadError, match="Cannot read"):
            await loader.load()

    @pytest.mark.asyncio
    async def test_invalid_json(self, tmp_path: Path) -> None:
        """Test malformed JSON raises DatasetLoadError."""
        path = tmp_path / "broken.json"
        path.write_text("[{not json", encoding="utf-8")
        with pytest.raises(DatasetLoadError, match="Invalid JSON"):
            await DatasetLoader(path=path).load()

    @pytest.mark.asyncio
    async def test_invalid_utf8(self, tmp_path: Path) -> None:
        """Test undecodable bytes fail the load instead of escaping."""
        path = tmp_path / "latin.json"
        path.write_bytes(b'[{"subject": "\xff\xfe", "predicate": "p", "object": "o"}]')
        loader = DatasetLoader(path=path)

        with pytest.raises(DatasetLoadError, match="Cannot read"):
            await loader.load()

        state = await loader.load_state()
        assert not state.loaded
        assert state.triples == ()

    @pytest.mark.asyncio
    async def test_deeply_nested_json(self, tmp_path: Path) -> None:
        """Test nesting beyond the decoder's recursion limit fails the load."""
        path = tmp_path / "nested.json"
        path.write_text("[" * 200_000 + "]" * 200_000, encoding="utf-8")

        state = await DatasetLoader(path=path).load_state()
        assert not state.loaded
        assert state.triples == ()

    @pytest.mark.asyncio
    async def test_load_state_success(self, dataset_file) -> None:
        """Test a successful load produces a loaded state."""
        path = dataset_file([{"subject": "a", "predicate": "p", "object": "b"}])
        state = await DatasetLoader(path=path).load_state()
        assert state.loaded
        assert len(state.triples) == 1
        assert state.source == str(path)

    @pytest.mark.asyncio
    async def test_load_state_failure(self, tmp_path: Path) -> None:
        """Test a failed load produces an empty failed state."""
        state = await DatasetLoader(path=tmp_path / "absent.json").load_state()
        assert not state.loaded
        assert state.triples == ()
        assert state.error == LOAD_FAILURE_MESSAGE


class TestDatasetLoaderUrl:
    """Tests for fetching over HTTP."""

    @staticmethod
    def _mock_client(response: MagicMock | None = None, error: Exception | None = None) -> MagicMock:
        client = MagicMock()
        client.__aenter__ = AsyncMock(return_value=client)
        client.__aexit__ = AsyncMock(return_value=False)
        if error is not None:
            client.get = AsyncMock(side_effect=error)
        else:
            client.get = AsyncMock(return_value=response)
        return client

    @pytest.mark.asyncio
    async def test_fetch_url(self) -> None:
        """Test the dataset is fetched when a URL is configured."""
        response = MagicMock()
        response.raise_for_status = MagicMock()
        response.json = MagicMock(return_value=[{"subject": "a", "predicate": "p", "object": "b"}])
        client = self._mock_client(response=response)

        with patch("kgexplorer.storage.dataset.httpx.AsyncClient", return_value=client):
            loader = DatasetLoader(url="http://example.org/kg_triples_validated.json")
            triples = await loader.load()

        assert len(triples) == 1
        client.get.assert_awaited_once_with("http://example.org/kg_triples_validated.json")

    @pytest.mark.asyncio
    async def test_fetch_http_error(self) -> None:
        """Test network failures become DatasetLoadError."""
        client = self._mock_client(error=httpx.ConnectError("refused"))

        with patch("kgexplorer.storage.dataset.httpx.AsyncClient", return_value=client):
            loader = DatasetLoader(url="http://example.org/data.json")
            with pytest.raises(DatasetLoadError, match="Cannot fetch"):
                await loader.load()

    @pytest.mark.asyncio
    async def test_fetch_bad_json(self) -> None:
        """Test an undecodable body becomes DatasetLoadError."""
        response = MagicMock()
        response.raise_for_status = MagicMock()
        response.json = MagicMock(side_effect=ValueError("Expecting value"))
        client = self._mock_client(response=response)

        with patch("kgexplorer.storage.dataset.httpx.AsyncClient", return_value=client):
            loader = DatasetLoader(url="http://example.org/data.json")
            state = await loader.load_state()

        assert not state.loaded
        assert state.triples == ()


class TestDatasetState:
    """Tests for DatasetState."""

    def test_failed_state(self) -> None:
        """Test the failed constructor."""
        state = DatasetState.failed("data.json")
        assert not state.loaded
        assert state.error == LOAD_FAILURE_MESSAGE
        assert state.source == "data.json"

    def test_loaded_state(self, sample_state: DatasetState) -> None:
        """Test a populated state."""
        assert sample_state.loaded
        assert len(sample_state.triples) == 4
