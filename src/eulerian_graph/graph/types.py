"""Graph data structures shared by the analysis core and the snapshot stores.

Public API:
    GraphNode: Immutable node with identity, label and editor position.
    GraphEdge: Immutable undirected edge between two node ids.
    Connection: One side of an edge as seen from one of its endpoints.
    AdjacencyStructure: Ordered mapping of node label to its connections.
    coerce_nodes: Normalise raw node records into GraphNode tuples.
    coerce_edges: Normalise raw edge records into GraphEdge tuples.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Union

from ..exceptions import InvalidGraphInputError


@dataclass(frozen=True)
class GraphNode:
    """An immutable node in an editable graph.

    Attributes:
        node_id: Opaque unique identifier assigned by the host application.
        label: Human-readable name, unique among the nodes of a graph.
        x: Horizontal editor position (ignored by the analysis).
        y: Vertical editor position (ignored by the analysis).
    """

    node_id: str
    label: str
    x: float = 0.0
    y: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.node_id, "label": self.label, "x": self.x, "y": self.y}


@dataclass(frozen=True)
class GraphEdge:
    """An immutable undirected edge.

    ``source_id == target_id`` denotes a self-loop.  Several edges may join
    the same pair of nodes; they are told apart by ``edge_id``.

    Attributes:
        edge_id: Unique identifier for the edge.
        source_id: Node ID of the endpoint the edge was drawn from.
        target_id: Node ID of the endpoint the edge was drawn to.
    """

    edge_id: str
    source_id: str
    target_id: str

    @property
    def is_self_loop(self) -> bool:
        return self.source_id == self.target_id

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.edge_id, "sourceId": self.source_id, "targetId": self.target_id}


@dataclass(frozen=True)
class Connection:
    """One adjacency entry: an edge seen from one of its endpoints.

    Attributes:
        neighbor_label: Label of the node reached by walking this entry.
        edge_id: Identifier of the underlying edge.
        source_id: Source node ID of the underlying edge.
        target_id: Target node ID of the underlying edge.
        forward: True when walking this entry goes from the edge's source
            endpoint to its target endpoint.
    """

    neighbor_label: str
    edge_id: str
    source_id: str
    target_id: str
    forward: bool = True


AdjacencyStructure = dict[str, list[Connection]]

NodeInput = Union[GraphNode, Mapping[str, Any]]
EdgeInput = Union[GraphEdge, Mapping[str, Any]]


def _pick(record: Mapping[str, Any], *keys: str) -> Any:
    """Return the first non-None value among *keys*, or None."""
    for key in keys:
        value = record.get(key)
        if value is not None:
            return value
    return None


def coerce_node(record: NodeInput) -> GraphNode:
    """Turn a GraphNode or a ``{"id", "label", ...}`` mapping into a GraphNode.

    Raises:
        InvalidGraphInputError: If the id or label is missing, or the label
            is not a string.
    """
    if isinstance(record, GraphNode):
        node = record
    elif isinstance(record, Mapping):
        node_id = _pick(record, "id", "node_id")
        if node_id is None:
            raise InvalidGraphInputError(f"Node record has no id: {record!r}")
        label = record.get("label")
        if label is None:
            raise InvalidGraphInputError(f"Node {node_id!r} has no label")
        node = GraphNode(
            node_id=node_id,
            label=label,
            x=record.get("x") or 0.0,
            y=record.get("y") or 0.0,
        )
    else:
        raise InvalidGraphInputError(
            f"Expected GraphNode or mapping, got {type(record).__name__}"
        )

    if not isinstance(node.label, str):
        raise InvalidGraphInputError(
            f"Node {node.node_id!r} label must be a string, got {type(node.label).__name__}"
        )
    return node


def coerce_edge(record: EdgeInput) -> GraphEdge:
    """Turn a GraphEdge or a ``{"id", "sourceId", "targetId"}`` mapping into a GraphEdge.

    Raises:
        InvalidGraphInputError: If any of the three id fields is missing.
    """
    if isinstance(record, GraphEdge):
        edge = record
    elif isinstance(record, Mapping):
        edge = GraphEdge(
            edge_id=_pick(record, "id", "edge_id"),
            source_id=_pick(record, "sourceId", "source_id"),
            target_id=_pick(record, "targetId", "target_id"),
        )
    else:
        raise InvalidGraphInputError(
            f"Expected GraphEdge or mapping, got {type(record).__name__}"
        )

    if edge.edge_id is None:
        raise InvalidGraphInputError(f"Edge record has no id: {record!r}")
    if edge.source_id is None or edge.target_id is None:
        raise InvalidGraphInputError(f"Edge {edge.edge_id!r} is missing an endpoint id")
    return edge


def coerce_nodes(nodes: Iterable[NodeInput] | None) -> tuple[GraphNode, ...]:
    """Normalise a node collection; ``None`` is treated as empty."""
    if nodes is None:
        return ()
    return tuple(coerce_node(n) for n in nodes)


def coerce_edges(edges: Iterable[EdgeInput] | None) -> tuple[GraphEdge, ...]:
    """Normalise an edge collection; ``None`` is treated as empty."""
    if edges is None:
        return ()
    return tuple(coerce_edge(e) for e in edges)


__all__ = [
    "GraphNode",
    "GraphEdge",
    "Connection",
    "AdjacencyStructure",
    "NodeInput",
    "EdgeInput",
    "coerce_node",
    "coerce_edge",
    "coerce_nodes",
    "coerce_edges",
]
