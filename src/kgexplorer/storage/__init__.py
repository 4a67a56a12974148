"""Storage layer for kgexplorer."""

from kgexplorer.storage.dataset import (
    LOAD_FAILURE_MESSAGE,
    DatasetLoader,
    DatasetLoadError,
    DatasetState,
    decode_triples,
)

__all__ = [
    "DatasetLoader",
    "DatasetLoadError",
    "DatasetState",
    "LOAD_FAILURE_MESSAGE",
    "decode_triples",
]
