"""Graph model construction and degree/connectivity diagnostics.

Builds the label-keyed adjacency structure of an undirected multigraph and
derives the facts that decide Eulerian-circuit eligibility.

Public API:
    build_adjacency(nodes, edges) -> AdjacencyStructure
    odd_degree_nodes(adjacency) -> list[str]
    zero_degree_nodes(adjacency) -> list[str]
    is_connected(adjacency) -> bool
    has_eulerian_circuit(nodes, edges) -> bool
    graph_status(nodes, edges) -> GraphStatus
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import asdict, dataclass
from typing import Any

from .graph.types import (
    AdjacencyStructure,
    Connection,
    EdgeInput,
    GraphEdge,
    GraphNode,
    NodeInput,
    coerce_edges,
    coerce_nodes,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GraphStatus:
    """Read-only diagnostic snapshot of a graph.

    Attributes:
        has_eulerian_circuit: Whether the graph qualifies for a circuit.
        odd_degree_nodes: Labels with odd degree, in node order.
        zero_degree_nodes: Labels with no incident edge, in node order.
        is_connected: Whether all degree-positive nodes are mutually reachable.
        node_count: Number of nodes supplied.
        edge_count: Number of edges supplied (including dropped ones).
    """

    has_eulerian_circuit: bool
    odd_degree_nodes: tuple[str, ...] = ()
    zero_degree_nodes: tuple[str, ...] = ()
    is_connected: bool = True
    node_count: int = 0
    edge_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["odd_degree_nodes"] = list(self.odd_degree_nodes)
        data["zero_degree_nodes"] = list(self.zero_degree_nodes)
        return data


def adjacency_for(
    nodes: tuple[GraphNode, ...],
    edges: tuple[GraphEdge, ...],
) -> AdjacencyStructure:
    """Adjacency structure for already-coerced nodes and edges."""
    if not nodes:
        return {}

    adjacency: AdjacencyStructure = {node.label: [] for node in nodes}
    id_to_label = {node.node_id: node.label for node in nodes}

    for edge in edges:
        source_label = id_to_label.get(edge.source_id)
        target_label = id_to_label.get(edge.target_id)
        # An empty label counts as unresolved, like an unknown id.
        if not source_label or not target_label:
            logger.debug("Skipping edge %s with unresolved endpoint", edge.edge_id)
            continue

        adjacency[source_label].append(
            Connection(target_label, edge.edge_id, edge.source_id, edge.target_id, True)
        )
        adjacency[target_label].append(
            Connection(source_label, edge.edge_id, edge.source_id, edge.target_id, False)
        )

    return adjacency


def build_adjacency(
    nodes: Iterable[NodeInput] | None,
    edges: Iterable[EdgeInput] | None,
) -> AdjacencyStructure:
    """Build the adjacency structure of an undirected multigraph.

    Every node label gets a (possibly empty) connection list, in node input
    order.  Each edge whose endpoints both resolve to known node ids adds two
    entries, one under each endpoint; a self-loop adds both entries under the
    same label.  Edges with an unknown endpoint are dropped without error.

    Args:
        nodes: Node records (GraphNode or ``{"id", "label"}`` mappings).
        edges: Edge records (GraphEdge or ``{"id", "sourceId", "targetId"}``).

    Returns:
        Mapping of label to connections; empty when there are no nodes.

    Raises:
        InvalidGraphInputError: If a record lacks a required id field.
    """
    return adjacency_for(coerce_nodes(nodes), coerce_edges(edges))


def odd_degree_nodes(adjacency: AdjacencyStructure) -> list[str]:
    """Labels whose connection count is odd, in adjacency order."""
    return [label for label, conns in adjacency.items() if len(conns) % 2 != 0]


def zero_degree_nodes(adjacency: AdjacencyStructure) -> list[str]:
    """Labels with no connections, in adjacency order."""
    return [label for label, conns in adjacency.items() if not conns]


def is_connected(adjacency: AdjacencyStructure) -> bool:
    """Check that every degree-positive node is reachable from the first one.

    Isolated nodes are ignored.  A graph without any edge is vacuously
    connected.
    """
    with_edges = [label for label, conns in adjacency.items() if conns]
    if not with_edges:
        return True

    visited: set[str] = set()
    stack = [with_edges[0]]
    while stack:
        label = stack.pop()
        if label in visited:
            continue
        visited.add(label)
        for conn in adjacency[label]:
            if conn.neighbor_label not in visited:
                stack.append(conn.neighbor_label)

    return len(visited) == len(with_edges)


def circuit_eligible(
    nodes: tuple[GraphNode, ...],
    edges: tuple[GraphEdge, ...],
    adjacency: AdjacencyStructure,
) -> bool:
    """Eligibility check over a prebuilt adjacency structure."""
    if not nodes or not edges:
        return False

    # An isolated node disqualifies the graph even when the remaining
    # nodes would admit a circuit.
    if zero_degree_nodes(adjacency):
        return False

    if odd_degree_nodes(adjacency):
        return False

    return is_connected(adjacency)


def has_eulerian_circuit(
    nodes: Iterable[NodeInput] | None,
    edges: Iterable[EdgeInput] | None,
) -> bool:
    """Return True if the graph admits an Eulerian circuit.

    Requires at least one node and one edge, no zero-degree node, even
    degree everywhere and a connected degree-positive subgraph.  The
    zero-degree rule is stricter than the textbook criterion: a single
    isolated node makes the whole graph ineligible.
    """
    node_list = coerce_nodes(nodes)
    edge_list = coerce_edges(edges)
    return circuit_eligible(node_list, edge_list, adjacency_for(node_list, edge_list))


def graph_status(
    nodes: Iterable[NodeInput] | None,
    edges: Iterable[EdgeInput] | None,
) -> GraphStatus:
    """Bundle eligibility, degree lists, connectivity and input counts."""
    node_list = coerce_nodes(nodes)
    edge_list = coerce_edges(edges)
    adjacency = adjacency_for(node_list, edge_list)

    status = GraphStatus(
        has_eulerian_circuit=circuit_eligible(node_list, edge_list, adjacency),
        odd_degree_nodes=tuple(odd_degree_nodes(adjacency)),
        zero_degree_nodes=tuple(zero_degree_nodes(adjacency)),
        is_connected=is_connected(adjacency),
        node_count=len(node_list),
        edge_count=len(edge_list),
    )
    logger.debug("Graph status: %s", status)
    return status


__all__ = [
    "GraphStatus",
    "build_adjacency",
    "odd_degree_nodes",
    "zero_degree_nodes",
    "is_connected",
    "has_eulerian_circuit",
    "graph_status",
]
