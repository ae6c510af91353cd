"""eulerian-graph-lib: Eulerian circuit analysis for undirected multigraphs."""

__version__ = "0.1.0"

from .analyzer import (
    AnalysisResult,
    CycleResult,
    EulerianAnalyzer,
    analyze,
    connection_summary,
)
from .circuit import EdgeOrder, EdgeTraversal, EulerianCircuit, find_circuit
from .diagnostics import (
    GraphStatus,
    build_adjacency,
    graph_status,
    has_eulerian_circuit,
    is_connected,
    odd_degree_nodes,
    zero_degree_nodes,
)
from .editor import (
    GraphDocument,
    add_node,
    connect,
    move_node,
    remove_edge,
    remove_node,
    rename_node,
)
from .exceptions import (
    DuplicateLabelError,
    DuplicateNodeError,
    EdgeNotFoundError,
    EulerianGraphError,
    InvalidGraphInputError,
    NodeNotFoundError,
)
from .graph import (
    Connection,
    GraphEdge,
    GraphNode,
    InMemorySnapshotStore,
    KuzuSnapshotStore,
    SnapshotStore,
    create_snapshot_store,
)

__all__ = [
    # Graph model & diagnostics
    "GraphNode",
    "GraphEdge",
    "Connection",
    "GraphStatus",
    "build_adjacency",
    "odd_degree_nodes",
    "zero_degree_nodes",
    "is_connected",
    "has_eulerian_circuit",
    "graph_status",
    # Circuit construction
    "EdgeTraversal",
    "EdgeOrder",
    "EulerianCircuit",
    "find_circuit",
    # Reporting
    "EulerianAnalyzer",
    "AnalysisResult",
    "CycleResult",
    "connection_summary",
    "analyze",
    # Document editing
    "GraphDocument",
    "add_node",
    "rename_node",
    "move_node",
    "remove_node",
    "connect",
    "remove_edge",
    # Snapshot stores
    "SnapshotStore",
    "InMemorySnapshotStore",
    "KuzuSnapshotStore",
    "create_snapshot_store",
    # Exceptions
    "EulerianGraphError",
    "InvalidGraphInputError",
    "DuplicateLabelError",
    "DuplicateNodeError",
    "NodeNotFoundError",
    "EdgeNotFoundError",
]
