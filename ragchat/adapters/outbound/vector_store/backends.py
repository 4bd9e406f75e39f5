"""Snapshot backends for the JSON vector store.

A backend stores one snapshot of the whole collection:

    {
        "documents": [{"id": ..., "title": ..., "source": ..., "content": ..., "embedding": [...]}],
        "embeddingIndex": [["<id>", [...]], ...],
        "savedAt": "2025-01-01T00:00:00+00:00"
    }

``embeddingIndex`` duplicates the document embeddings and is never read back
as authoritative.
"""

import copy
import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from ....core.domain.exceptions import (
    VectorStoreCorruptError,
    VectorStoreError,
    VectorStorePersistenceError,
)

logger = logging.getLogger(__name__)

Snapshot = dict[str, Any]


class SnapshotBackend(ABC):
    """Where the vector store keeps its snapshot."""

    @abstractmethod
    def load(self) -> Snapshot | None:
        """Return the stored snapshot, or None if nothing was ever saved.

        Raises:
            VectorStoreCorruptError: If a snapshot exists but cannot be parsed.
        """
        ...

    @abstractmethod
    def save(self, snapshot: Snapshot) -> None:
        """Replace the stored snapshot.

        Raises:
            VectorStorePersistenceError: If the snapshot cannot be written.
        """
        ...

    @abstractmethod
    def describe(self) -> str: ...


def _validate(snapshot: Any, origin: str) -> Snapshot:
    if not isinstance(snapshot, dict) or not isinstance(snapshot.get("documents", []), list):
        raise VectorStoreCorruptError(
            "Vector store snapshot has an unexpected layout",
            context={"origin": origin},
        )
    return snapshot


class JsonFileBackend(SnapshotBackend):
    """Pretty-printed JSON file, fully rewritten on every save."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> Snapshot | None:
        if not self.path.exists():
            return None

        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise VectorStoreError(
                f"Failed to read vector store file {self.path}",
                cause=e,
                context={"path": str(self.path)},
            ) from e

        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise VectorStoreCorruptError(
                f"Vector store file {self.path} is not valid JSON",
                cause=e,
                context={"path": str(self.path)},
            ) from e

        return _validate(data, str(self.path))

    def save(self, snapshot: Snapshot) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(snapshot, indent=2, ensure_ascii=False), encoding="utf-8")
        except (OSError, TypeError, ValueError) as e:
            raise VectorStorePersistenceError(
                f"Failed to write vector store file {self.path}",
                cause=e,
                context={"path": str(self.path)},
            ) from e

    def describe(self) -> str:
        return str(self.path)


class InMemoryBackend(SnapshotBackend):
    """Keeps the snapshot in process memory. Nothing touches disk."""

    def __init__(self, snapshot: Snapshot | None = None) -> None:
        self.snapshot = copy.deepcopy(snapshot) if snapshot is not None else None
        self.save_count = 0

    def load(self) -> Snapshot | None:
        if self.snapshot is None:
            return None
        return _validate(copy.deepcopy(self.snapshot), "memory")

    def save(self, snapshot: Snapshot) -> None:
        self.snapshot = copy.deepcopy(snapshot)
        self.save_count += 1

    def describe(self) -> str:
        return "memory"
