"""InMemorySnapshotStore -- dict-backed SnapshotStore and backend factory.

Public API:
    InMemorySnapshotStore: SnapshotStore kept in process memory.
    create_snapshot_store: Factory for creating snapshot stores.
"""

from __future__ import annotations

import threading
from typing import Any

from ..editor import GraphDocument


def _check_name(name: str) -> None:
    if not isinstance(name, str) or not name.strip():
        raise ValueError("Graph name cannot be empty")


class InMemorySnapshotStore:
    """Dict-based SnapshotStore for tests and short-lived sessions.

    Documents are immutable, so they are stored and returned as-is.
    Thread-safe via a reentrant lock.

    Args:
        store_id: Human-readable identifier for this store instance.
    """

    def __init__(self, store_id: str = "in_memory") -> None:
        self._store_id = store_id
        self._documents: dict[str, GraphDocument] = {}
        self._lock = threading.RLock()

    @property
    def store_id(self) -> str:
        return self._store_id

    def save(self, name: str, document: GraphDocument) -> None:
        _check_name(name)
        with self._lock:
            self._documents[name] = document

    def load(self, name: str) -> GraphDocument | None:
        with self._lock:
            return self._documents.get(name)

    def list_names(self) -> list[str]:
        with self._lock:
            return sorted(self._documents)

    def delete(self, name: str) -> bool:
        with self._lock:
            return self._documents.pop(name, None) is not None

    def close(self) -> None:
        with self._lock:
            self._documents.clear()


def create_snapshot_store(backend: str = "memory", **kwargs: Any) -> Any:
    """Create a snapshot store.

    Args:
        backend: ``"kuzu"`` (on-disk) or ``"memory"`` (testing).
        **kwargs: Backend-specific configuration.

    Returns:
        A SnapshotStore implementation.

    Raises:
        ValueError: If *backend* is unrecognised.
    """
    if backend == "kuzu":
        from .kuzu_store import KuzuSnapshotStore

        return KuzuSnapshotStore(
            db_path=kwargs["db_path"],
            store_id=kwargs.get("store_id"),
        )
    elif backend == "memory":
        return InMemorySnapshotStore(
            store_id=kwargs.get("store_id", "in_memory"),
        )
    else:
        raise ValueError(
            f"Unknown backend: {backend!r}.  "
            f"Choose from: 'kuzu', 'memory'"
        )


__all__ = ["InMemorySnapshotStore", "create_snapshot_store"]
