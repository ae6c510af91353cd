"""Eulerian circuit construction using Hierholzer's algorithm.

The circuit is built by extracting a closed tour from the start node and
then scanning the path left to right, splicing in a sub-tour wherever the
scanned node still has unused edges.  Tie-breaking is always "first unused
connection in adjacency order", so the output is fully determined by the
order of the input nodes and edges.

The path is kept as an index-linked list and each node's connection list is
walked with a cursor that skips consumed edges, so splicing never shifts
elements and the whole construction stays linear in the graph size.

Public API:
    EdgeTraversal: One step of a circuit.
    EdgeOrder: 1-based position of an edge in a circuit.
    EulerianCircuit: Closed label path with its parallel edge path.
    find_circuit(nodes, edges) -> EulerianCircuit | None
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from .diagnostics import adjacency_for, circuit_eligible
from .graph.types import (
    AdjacencyStructure,
    Connection,
    EdgeInput,
    NodeInput,
    coerce_edges,
    coerce_nodes,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EdgeTraversal:
    """One edge as walked by a circuit.

    Attributes:
        edge_id: Identifier of the traversed edge.
        from_label: Label of the node the step leaves.
        to_label: Label of the node the step reaches.
        source_id: Source node ID of the edge as drawn.
        target_id: Target node ID of the edge as drawn.
        forward: True when the edge was walked source -> target.
    """

    edge_id: str
    from_label: str
    to_label: str
    source_id: str
    target_id: str
    forward: bool = True


@dataclass(frozen=True)
class EdgeOrder:
    """Position of an edge in a circuit (1-based) with its traversal detail."""

    order: int
    traversal: EdgeTraversal


@dataclass(frozen=True)
class EulerianCircuit:
    """A closed walk that uses every edge exactly once.

    Attributes:
        label_path: Node labels in walk order; first and last are equal and
            the length is ``len(edge_path) + 1``.
        edge_path: Edge ids in walk order; ``edge_path[i]`` joins
            ``label_path[i]`` and ``label_path[i + 1]``.
        traversals: Per-step detail, parallel to ``edge_path``.
    """

    label_path: tuple[str, ...]
    edge_path: tuple[str, ...]
    traversals: tuple[EdgeTraversal, ...]

    @property
    def start_label(self) -> str:
        return self.label_path[0]

    @property
    def edge_count(self) -> int:
        return len(self.edge_path)

    def edge_order_map(self) -> dict[str, EdgeOrder]:
        """Map each edge id to its 1-based position in the walk."""
        return {
            step.edge_id: EdgeOrder(order=i + 1, traversal=step)
            for i, step in enumerate(self.traversals)
        }


class _Walker:
    """Working state for one circuit construction.

    The caller's adjacency lists are only read.  Consumed edges are tracked
    by id, and ``_cursors`` remembers how far each list has been exhausted.
    """

    def __init__(self, adjacency: AdjacencyStructure) -> None:
        self._adjacency = adjacency
        self._consumed: set[str] = set()
        self._cursors: dict[str, int] = dict.fromkeys(adjacency, 0)

    def next_connection(self, label: str) -> Connection | None:
        """First connection of *label* whose edge has not been used yet."""
        conns = self._adjacency[label]
        i = self._cursors[label]
        while i < len(conns) and conns[i].edge_id in self._consumed:
            i += 1
        self._cursors[label] = i
        return conns[i] if i < len(conns) else None

    def extract_tour(self, start: str) -> list[EdgeTraversal]:
        """Walk unused edges from *start* until the current node runs dry.

        With every degree even the walk always ends back at *start*.
        """
        steps: list[EdgeTraversal] = []
        current = start
        while True:
            conn = self.next_connection(current)
            if conn is None:
                break
            # Consuming by id retires both adjacency entries of the edge,
            # including the second side of a self-loop.
            self._consumed.add(conn.edge_id)
            steps.append(
                EdgeTraversal(
                    edge_id=conn.edge_id,
                    from_label=current,
                    to_label=conn.neighbor_label,
                    source_id=conn.source_id,
                    target_id=conn.target_id,
                    forward=conn.forward,
                )
            )
            current = conn.neighbor_label
        return steps

    def build(self, start: str) -> EulerianCircuit:
        # Entry i holds a label, the step leaving it, and the index of the
        # following entry (-1 at the end of the path).
        labels: list[str] = [start]
        steps: list[EdgeTraversal | None] = [None]
        following: list[int] = [-1]

        cursor = 0
        while cursor != -1:
            label = labels[cursor]
            if self.next_connection(label) is None:
                cursor = following[cursor]
                continue

            tour = self.extract_tour(label)
            tail_step = steps[cursor]
            tail_next = following[cursor]

            steps[cursor] = tour[0]
            prev = cursor
            for i, step in enumerate(tour):
                idx = len(labels)
                labels.append(step.to_label)
                steps.append(tour[i + 1] if i + 1 < len(tour) else tail_step)
                following.append(-1)
                following[prev] = idx
                prev = idx
            following[prev] = tail_next
            # Stay on the same entry: it may still have unused edges.

        label_path: list[str] = []
        traversals: list[EdgeTraversal] = []
        idx = 0
        while idx != -1:
            label_path.append(labels[idx])
            if steps[idx] is not None:
                traversals.append(steps[idx])
            idx = following[idx]

        return EulerianCircuit(
            label_path=tuple(label_path),
            edge_path=tuple(step.edge_id for step in traversals),
            traversals=tuple(traversals),
        )


def find_circuit(
    nodes: Iterable[NodeInput] | None,
    edges: Iterable[EdgeInput] | None,
) -> EulerianCircuit | None:
    """Construct an Eulerian circuit, or return None when none exists.

    The walk starts at the first node (in input order) that has an edge and
    always takes the first unused connection of the current node.

    Args:
        nodes: Node records (GraphNode or ``{"id", "label"}`` mappings).
        edges: Edge records (GraphEdge or ``{"id", "sourceId", "targetId"}``).

    Returns:
        The circuit, or None if the graph is not eligible.
    """
    node_list = coerce_nodes(nodes)
    edge_list = coerce_edges(edges)
    adjacency = adjacency_for(node_list, edge_list)

    if not circuit_eligible(node_list, edge_list, adjacency):
        return None

    start = next((label for label, conns in adjacency.items() if conns), None)
    if start is None:
        return None

    circuit = _Walker(adjacency).build(start)
    logger.debug(
        "Eulerian circuit from %s covers %d edges", start, circuit.edge_count
    )
    return circuit


__all__ = ["EdgeTraversal", "EdgeOrder", "EulerianCircuit", "find_circuit"]
