"""Pure editing operations for graph documents.

A GraphDocument is an immutable snapshot of the nodes and edges a user is
editing.  Every operation takes a document and returns a new one, so a host
application keeps its own state and hands snapshots straight to the
analysis functions.

Public API:
    GraphDocument: Immutable nodes + edges snapshot.
    add_node, rename_node, move_node, remove_node: Node edits.
    connect, remove_edge: Edge edits.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Any

from .exceptions import (
    DuplicateLabelError,
    DuplicateNodeError,
    EdgeNotFoundError,
    InvalidGraphInputError,
    NodeNotFoundError,
)
from .graph.types import (
    EdgeInput,
    GraphEdge,
    GraphNode,
    NodeInput,
    coerce_edges,
    coerce_nodes,
)


@dataclass(frozen=True)
class GraphDocument:
    """An immutable graph snapshot.

    Attributes:
        nodes: Nodes in creation order.
        edges: Edges in creation order.
    """

    nodes: tuple[GraphNode, ...] = ()
    edges: tuple[GraphEdge, ...] = ()

    @classmethod
    def from_snapshot(
        cls,
        nodes: Iterable[NodeInput] | None,
        edges: Iterable[EdgeInput] | None,
    ) -> GraphDocument:
        return cls(nodes=coerce_nodes(nodes), edges=coerce_edges(edges))

    def get_node(self, node_id: str) -> GraphNode | None:
        return next((n for n in self.nodes if n.node_id == node_id), None)

    def get_edge(self, edge_id: str) -> GraphEdge | None:
        return next((e for e in self.edges if e.edge_id == edge_id), None)

    def label_exists(self, label: str, exclude_node_id: str | None = None) -> bool:
        return any(
            n.label == label and n.node_id != exclude_node_id for n in self.nodes
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }


def _new_id() -> str:
    return uuid.uuid4().hex


def _require_node(doc: GraphDocument, node_id: str) -> GraphNode:
    node = doc.get_node(node_id)
    if node is None:
        raise NodeNotFoundError(f"Node not found: {node_id}")
    return node


def _check_label(label: str) -> None:
    if not isinstance(label, str) or not label.strip():
        raise InvalidGraphInputError("Node label cannot be empty")


def add_node(
    doc: GraphDocument,
    label: str | None = None,
    x: float = 0.0,
    y: float = 0.0,
    node_id: str | None = None,
) -> GraphDocument:
    """Append a node.

    Without an explicit *label* the node is named ``N<k>``, where k is the
    smallest free number from ``count + 1`` upward.

    Raises:
        InvalidGraphInputError: If *label* is blank.
        DuplicateLabelError: If another node already uses the label.
        DuplicateNodeError: If *node_id* is already taken.
    """
    if node_id is not None and doc.get_node(node_id) is not None:
        raise DuplicateNodeError(f"Node id already exists: {node_id}")
    if label is None:
        k = len(doc.nodes) + 1
        while doc.label_exists(f"N{k}"):
            k += 1
        label = f"N{k}"
    _check_label(label)
    if doc.label_exists(label):
        raise DuplicateLabelError(f'Node "{label}" already exists')

    node = GraphNode(node_id=node_id or _new_id(), label=label, x=x, y=y)
    return replace(doc, nodes=doc.nodes + (node,))


def rename_node(doc: GraphDocument, node_id: str, label: str) -> GraphDocument:
    """Give an existing node a new, unique label.

    Raises:
        NodeNotFoundError: If *node_id* is unknown.
        InvalidGraphInputError: If *label* is blank.
        DuplicateLabelError: If a different node already uses the label.
    """
    _require_node(doc, node_id)
    _check_label(label)
    if doc.label_exists(label, exclude_node_id=node_id):
        raise DuplicateLabelError(f'Node "{label}" already exists')

    nodes = tuple(
        replace(n, label=label) if n.node_id == node_id else n for n in doc.nodes
    )
    return replace(doc, nodes=nodes)


def move_node(doc: GraphDocument, node_id: str, x: float, y: float) -> GraphDocument:
    _require_node(doc, node_id)
    nodes = tuple(
        replace(n, x=x, y=y) if n.node_id == node_id else n for n in doc.nodes
    )
    return replace(doc, nodes=nodes)


def remove_node(doc: GraphDocument, node_id: str) -> GraphDocument:
    """Delete a node together with every edge touching it."""
    _require_node(doc, node_id)
    return GraphDocument(
        nodes=tuple(n for n in doc.nodes if n.node_id != node_id),
        edges=tuple(
            e for e in doc.edges
            if e.source_id != node_id and e.target_id != node_id
        ),
    )


def connect(
    doc: GraphDocument,
    source_id: str,
    target_id: str,
    edge_id: str | None = None,
    allow_parallel: bool = False,
) -> GraphDocument:
    """Join two distinct nodes with an edge.

    Connecting a node to itself, or a pair that is already connected in
    either direction, returns *doc* unchanged.  Pass ``allow_parallel=True``
    to add a further edge between an already connected pair.

    Raises:
        NodeNotFoundError: If either endpoint is unknown.
    """
    _require_node(doc, source_id)
    _require_node(doc, target_id)

    if source_id == target_id:
        return doc

    if not allow_parallel:
        for e in doc.edges:
            if {e.source_id, e.target_id} == {source_id, target_id}:
                return doc

    edge = GraphEdge(edge_id=edge_id or _new_id(), source_id=source_id, target_id=target_id)
    return replace(doc, edges=doc.edges + (edge,))


def remove_edge(doc: GraphDocument, edge_id: str) -> GraphDocument:
    if doc.get_edge(edge_id) is None:
        raise EdgeNotFoundError(f"Edge not found: {edge_id}")
    return replace(doc, edges=tuple(e for e in doc.edges if e.edge_id != edge_id))


__all__ = [
    "GraphDocument",
    "add_node",
    "rename_node",
    "move_node",
    "remove_node",
    "connect",
    "remove_edge",
]
