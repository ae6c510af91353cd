"""SnapshotStore protocol -- the common interface of graph document stores.

Public API:
    SnapshotStore: Runtime-checkable protocol defining the store contract.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..editor import GraphDocument


@runtime_checkable
class SnapshotStore(Protocol):
    """Common interface for keeping named graph documents.

    Every concrete implementation (Kuzu, in-memory) must satisfy this
    protocol so host applications can swap backends without changes.
    Stores only hold documents; analysis always runs on a loaded snapshot.
    """

    # ── identity ──────────────────────────────────────────────

    @property
    def store_id(self) -> str:
        """Unique identifier for this store instance."""
        ...

    # ── document operations ───────────────────────────────────

    def save(self, name: str, document: GraphDocument) -> None:
        """Store *document* under *name*, replacing any previous version.

        Raises:
            ValueError: If *name* is empty.
        """
        ...

    def load(self, name: str) -> GraphDocument | None:
        """Return the document saved under *name*, or None."""
        ...

    def list_names(self) -> list[str]:
        """Names of all saved documents, sorted."""
        ...

    def delete(self, name: str) -> bool:
        """Delete a document. Returns True if it existed."""
        ...

    # ── lifecycle ─────────────────────────────────────────────

    def close(self) -> None:
        """Release resources held by the store."""
        ...


__all__ = ["SnapshotStore"]
