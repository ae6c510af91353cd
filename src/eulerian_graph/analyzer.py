"""Analysis reporter: structural summary plus circuit result.

Composes the diagnostics and the circuit constructor into a single
deterministic report.  Nothing here performs I/O; showing the summary to a
user is left to the caller.

Public API:
    CycleResult: Circuit plus its per-edge order map.
    AnalysisResult: Summary text, optional cycle result and status.
    EulerianAnalyzer: Facade exposing the whole analysis surface.
    connection_summary(nodes, edges) -> str
    analyze(nodes, edges) -> AnalysisResult
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from . import circuit as circuit_mod
from . import diagnostics
from .circuit import EdgeOrder, EulerianCircuit
from .diagnostics import GraphStatus
from .graph.types import (
    AdjacencyStructure,
    EdgeInput,
    GraphEdge,
    GraphNode,
    NodeInput,
    coerce_edges,
    coerce_nodes,
)

logger = logging.getLogger(__name__)

DEFAULT_PATH_SEPARATOR = " → "
DEFAULT_ISOLATED_TEXT = "no nodes"


@dataclass(frozen=True)
class CycleResult:
    """Machine-usable circuit result.

    Attributes:
        circuit: The constructed Eulerian circuit.
        edge_order_map: Edge id -> 1-based position and traversal detail.
    """

    circuit: EulerianCircuit
    edge_order_map: dict[str, EdgeOrder] = field(default_factory=dict)

    @classmethod
    def from_circuit(cls, circuit: EulerianCircuit) -> CycleResult:
        return cls(circuit=circuit, edge_order_map=circuit.edge_order_map())

    @property
    def label_path(self) -> tuple[str, ...]:
        return self.circuit.label_path

    @property
    def edge_path(self) -> tuple[str, ...]:
        return self.circuit.edge_path


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of :meth:`EulerianAnalyzer.analyze`.

    Attributes:
        summary: Human-readable connection listing and status narrative.
        cycle: Circuit result, or None when the graph has no circuit.
        status: Diagnostic snapshot the narrative was derived from.
    """

    summary: str
    cycle: CycleResult | None
    status: GraphStatus


class EulerianAnalyzer:
    """Stateless facade over diagnostics, circuit construction and reporting.

    Holds formatting options only.  Every method works on the snapshot it is
    given, so the same instance may be shared freely.

    Args:
        path_separator: Text placed between labels of a reported circuit.
        isolated_text: Text shown for a node without neighbors.
    """

    def __init__(
        self,
        path_separator: str = DEFAULT_PATH_SEPARATOR,
        isolated_text: str = DEFAULT_ISOLATED_TEXT,
    ) -> None:
        self.path_separator = path_separator
        self.isolated_text = isolated_text

    # ── diagnostics ──────────────────────────────────────────

    def build_adjacency(
        self,
        nodes: Iterable[NodeInput] | None,
        edges: Iterable[EdgeInput] | None,
    ) -> AdjacencyStructure:
        return diagnostics.build_adjacency(nodes, edges)

    def has_eulerian_circuit(
        self,
        nodes: Iterable[NodeInput] | None,
        edges: Iterable[EdgeInput] | None,
    ) -> bool:
        return diagnostics.has_eulerian_circuit(nodes, edges)

    def odd_degree_nodes(
        self,
        nodes: Iterable[NodeInput] | None,
        edges: Iterable[EdgeInput] | None,
    ) -> list[str]:
        """Labels of odd-degree nodes, in node input order."""
        return diagnostics.odd_degree_nodes(diagnostics.build_adjacency(nodes, edges))

    def zero_degree_nodes(
        self,
        nodes: Iterable[NodeInput] | None,
        edges: Iterable[EdgeInput] | None,
    ) -> list[str]:
        """Labels of isolated nodes, in node input order."""
        return diagnostics.zero_degree_nodes(diagnostics.build_adjacency(nodes, edges))

    def status(
        self,
        nodes: Iterable[NodeInput] | None,
        edges: Iterable[EdgeInput] | None,
    ) -> GraphStatus:
        return diagnostics.graph_status(nodes, edges)

    # ── circuit ──────────────────────────────────────────────

    def find_circuit(
        self,
        nodes: Iterable[NodeInput] | None,
        edges: Iterable[EdgeInput] | None,
    ) -> EulerianCircuit | None:
        return circuit_mod.find_circuit(nodes, edges)

    # ── reporting ────────────────────────────────────────────

    def connection_summary(
        self,
        nodes: Iterable[NodeInput] | None,
        edges: Iterable[EdgeInput] | None,
    ) -> str:
        """List each node with its sorted, de-duplicated neighbor labels.

        Parallel edges collapse into one neighbor here; the circuit still
        treats them as separate edges.
        """
        return self._connection_summary(coerce_nodes(nodes), coerce_edges(edges))

    def analyze(
        self,
        nodes: Iterable[NodeInput] | None,
        edges: Iterable[EdgeInput] | None,
    ) -> AnalysisResult:
        """Produce the textual summary and, when one exists, the circuit.

        Args:
            nodes: Node records (GraphNode or ``{"id", "label"}`` mappings).
            edges: Edge records (GraphEdge or
                ``{"id", "sourceId", "targetId"}`` mappings).

        Returns:
            AnalysisResult with summary text, optional CycleResult and the
            diagnostic status.

        Raises:
            InvalidGraphInputError: If a record lacks a required id field.
        """
        node_list = coerce_nodes(nodes)
        edge_list = coerce_edges(edges)
        logger.debug(
            "Analyzing graph with %d nodes and %d edges", len(node_list), len(edge_list)
        )

        status = diagnostics.graph_status(node_list, edge_list)
        cycle: CycleResult | None = None

        if status.has_eulerian_circuit:
            status_text = "This graph contains an Eulerian circuit.\n"
            found = circuit_mod.find_circuit(node_list, edge_list)
            if found is not None:
                path_text = self.path_separator.join(found.label_path)
                logger.debug("Circuit found: %s", path_text)
                status_text += f"Eulerian circuit found: {path_text}\n"
                cycle = CycleResult.from_circuit(found)
        else:
            status_text = self._ineligible_text(node_list, edge_list, status)

        summary = f"{self._connection_summary(node_list, edge_list)}\n{status_text}"
        return AnalysisResult(summary=summary, cycle=cycle, status=status)

    # ── private helpers ──────────────────────────────────────

    def _connection_summary(
        self,
        nodes: tuple[GraphNode, ...],
        edges: tuple[GraphEdge, ...],
    ) -> str:
        neighbors: dict[str, set[str]] = {node.label: set() for node in nodes}
        id_to_label = {node.node_id: node.label for node in nodes}

        for edge in edges:
            a = id_to_label.get(edge.source_id)
            b = id_to_label.get(edge.target_id)
            if not a or not b:
                continue
            neighbors[a].add(b)
            neighbors[b].add(a)

        lines = ["Graph connections:"]
        for label, linked in neighbors.items():
            text = ", ".join(sorted(linked)) if linked else self.isolated_text
            lines.append(f"{label} is connected to: {text}")
        return "\n".join(lines) + "\n"

    @staticmethod
    def _ineligible_text(
        nodes: tuple[GraphNode, ...],
        edges: tuple[GraphEdge, ...],
        status: GraphStatus,
    ) -> str:
        """Explain why there is no circuit, reporting only the first reason."""
        if not nodes:
            return "The graph is empty.\n"
        if not edges:
            return "The graph has no edges.\n"
        if status.zero_degree_nodes:
            return f"Nodes without connections: {', '.join(status.zero_degree_nodes)}.\n"
        if status.odd_degree_nodes:
            return f"Nodes with odd degree: {', '.join(status.odd_degree_nodes)}.\n"
        return "The graph is not connected.\n"


_default_analyzer = EulerianAnalyzer()


def connection_summary(
    nodes: Iterable[NodeInput] | None,
    edges: Iterable[EdgeInput] | None,
) -> str:
    """Module-level shortcut for :meth:`EulerianAnalyzer.connection_summary`."""
    return _default_analyzer.connection_summary(nodes, edges)


def analyze(
    nodes: Iterable[NodeInput] | None,
    edges: Iterable[EdgeInput] | None,
) -> AnalysisResult:
    """Module-level shortcut for :meth:`EulerianAnalyzer.analyze`."""
    return _default_analyzer.analyze(nodes, edges)


__all__ = [
    "CycleResult",
    "AnalysisResult",
    "EulerianAnalyzer",
    "connection_summary",
    "analyze",
]
