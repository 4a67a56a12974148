"""Loading the triple dataset document.

The dataset is a JSON array of triple records, read once per process from
a local file or fetched from a URL. Loading either yields the complete
collection or fails; a partially decoded dataset is never exposed.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import aiofiles
import httpx

from kgexplorer.config import settings
from kgexplorer.models import Triple

logger = logging.getLogger(__name__)

LOAD_FAILURE_MESSAGE = "Failed to load triples dataset."


class DatasetLoadError(Exception):
    """The dataset could not be fetched or decoded."""


@dataclass
class DatasetState:
    """Dataset held for the application's lifetime.

    Either loaded (triples set, error None) or failed (no triples, error set).
    """

    triples: tuple[Triple, ...] = field(default_factory=tuple)
    source: str | None = None
    error: str | None = None

    @property
    def loaded(self) -> bool:
        return self.error is None

    @classmethod
    def failed(cls, source: str | None, message: str = LOAD_FAILURE_MESSAGE) -> "DatasetState":
        return cls(triples=(), source=source, error=message)


def decode_triples(data: Any) -> tuple[Triple, ...]:
    """Turn a decoded JSON document into triples.

    Records are not validated beyond being objects; incomplete triples
    are kept and skipped later by graph projection.
    """
    if not isinstance(data, list):
        raise DatasetLoadError(f"Dataset must be a JSON array, got {type(data).__name__}")

    triples = []
    for index, record in enumerate(data):
        if not isinstance(record, dict):
            raise DatasetLoadError(f"Dataset record {index} is not an object")
        triples.append(Triple.from_dict(record))
    return tuple(triples)


class DatasetLoader:
    """Reads the triple dataset from disk or over HTTP."""

    def __init__(
        self,
        path: str | Path | None = None,
        url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self.path = Path(path or settings.dataset_path)
        self.url = url if url is not None else settings.dataset_url
        self.timeout = timeout or settings.dataset_timeout

    @property
    def source(self) -> str:
        return self.url or str(self.path)

    async def load(self) -> tuple[Triple, ...]:
        """Load and decode the dataset. Raises DatasetLoadError."""
        if self.url:
            data = await self._fetch()
        else:
            data = await self._read()

        triples = decode_triples(data)
        logger.info(f"Loaded {len(triples)} triples from {self.source}")
        return triples

    async def _read(self) -> Any:
        try:
            async with aiofiles.open(self.path, encoding="utf-8") as f:
                content = await f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise DatasetLoadError(f"Cannot read {self.path}: {e}") from e

        try:
            return json.loads(content)
        except (json.JSONDecodeError, RecursionError) as e:
            raise DatasetLoadError(f"Invalid JSON in {self.path}: {e}") from e

    async def _fetch(self) -> Any:
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(self.url)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPError as e:
            raise DatasetLoadError(f"Cannot fetch {self.url}: {e}") from e
        except (ValueError, RecursionError) as e:
            raise DatasetLoadError(f"Invalid JSON from {self.url}: {e}") from e

    async def load_state(self) -> DatasetState:
        """Load the dataset, turning failures into a failed state."""
        try:
            triples = await self.load()
        except DatasetLoadError as e:
            logger.error(f"Dataset load failed: {e}")
            return DatasetState.failed(self.source)
        return DatasetState(triples=triples, source=self.source)
