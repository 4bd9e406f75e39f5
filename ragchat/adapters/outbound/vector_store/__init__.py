"""JSON-snapshot vector store."""

from .backends import InMemoryBackend, JsonFileBackend, SnapshotBackend
from .json_store import JsonVectorStore

__all__ = ["InMemoryBackend", "JsonFileBackend", "JsonVectorStore", "SnapshotBackend"]
