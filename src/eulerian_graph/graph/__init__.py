"""Graph types and snapshot stores.

Public API:
    GraphNode: Immutable graph node.
    GraphEdge: Immutable undirected edge.
    Connection: One side of an edge in an adjacency structure.
    AdjacencyStructure: Ordered label -> connections mapping.
    SnapshotStore: Protocol all document stores implement.
    InMemorySnapshotStore: Dict-based store for testing.
    KuzuSnapshotStore: Kuzu-backed on-disk store.
    create_snapshot_store: Factory for creating snapshot stores.
"""

from __future__ import annotations

from .types import (
    AdjacencyStructure,
    Connection,
    GraphEdge,
    GraphNode,
    coerce_edge,
    coerce_edges,
    coerce_node,
    coerce_nodes,
)
from .protocol import SnapshotStore
from .memory_store import InMemorySnapshotStore, create_snapshot_store
from .kuzu_store import KuzuSnapshotStore

__all__ = [
    "GraphNode",
    "GraphEdge",
    "Connection",
    "AdjacencyStructure",
    "coerce_node",
    "coerce_nodes",
    "coerce_edge",
    "coerce_edges",
    "SnapshotStore",
    "InMemorySnapshotStore",
    "KuzuSnapshotStore",
    "create_snapshot_store",
]
