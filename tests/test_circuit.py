"""Tests for Eulerian circuit construction.

Test categories:
- TestKnownCircuits: exact paths for small graphs, including splicing
- TestMultigraphCases: self-loops and parallel edges
- TestCircuitInvariants: closure, coverage and adjacency on generated graphs
- TestNoCircuit: ineligible and malformed input
- TestEdgeOrderMap: 1-based positions with traversal detail
"""

from __future__ import annotations

import random

import pytest
from conftest import make_edges, make_nodes

from eulerian_graph import (
    EdgeOrder,
    EulerianCircuit,
    GraphEdge,
    GraphNode,
    InvalidGraphInputError,
    find_circuit,
)


def assert_valid_circuit(circuit, nodes, edges):
    """Check the circuit invariants against the raw input."""
    label_of = {n["id"]: n["label"] for n in nodes}
    by_id = {e["id"]: e for e in edges}

    assert sorted(circuit.edge_path) == sorted(by_id)
    assert len(circuit.label_path) == len(edges) + 1
    assert circuit.label_path[0] == circuit.label_path[-1]
    assert len(circuit.traversals) == len(circuit.edge_path)

    for i, edge_id in enumerate(circuit.edge_path):
        edge = by_id[edge_id]
        step = circuit.traversals[i]
        ends = {label_of[edge["sourceId"]], label_of[edge["targetId"]]}
        assert {circuit.label_path[i], circuit.label_path[i + 1]} == ends
        assert step.edge_id == edge_id
        assert step.from_label == circuit.label_path[i]
        assert step.to_label == circuit.label_path[i + 1]
        if step.forward:
            assert label_of[edge["sourceId"]] == step.from_label
        else:
            assert label_of[edge["targetId"]] == step.from_label


def random_eulerian_graph(rng, node_count, extra_steps):
    """Closed random walk touching every node; always has a circuit."""
    labels = [f"N{i}" for i in range(node_count)]
    walk = labels[:]
    rng.shuffle(walk)
    walk += [rng.choice(labels) for _ in range(extra_steps)]
    walk.append(walk[0])
    return make_nodes(*labels), make_edges(*zip(walk, walk[1:]))


class TestKnownCircuits:
    """Deterministic output for fixed input order."""

    def test_triangle(self, triangle):
        circuit = find_circuit(*triangle)
        assert isinstance(circuit, EulerianCircuit)
        assert circuit.label_path == ("A", "B", "C", "A")
        assert circuit.edge_path == ("e1", "e2", "e3")
        assert circuit.start_label == "A"
        assert circuit.edge_count == 3

    def test_single_tour_through_hub(self, bowtie):
        circuit = find_circuit(*bowtie)
        assert circuit.label_path == ("A", "B", "C", "A", "D", "E", "A")
        assert circuit.edge_path == ("e1", "e2", "e3", "e4", "e5", "e6")

    def test_sub_tour_spliced_in_place(self, bowtie):
        nodes, edges = bowtie
        # Starting at B closes the first tour before A's second loop is used.
        nodes = [nodes[1], nodes[0]] + nodes[2:]
        circuit = find_circuit(nodes, edges)
        assert circuit.label_path == ("B", "A", "D", "E", "A", "C", "B")
        assert circuit.edge_path == ("e1", "e4", "e5", "e6", "e3", "e2")
        assert_valid_circuit(circuit, nodes, edges)

    def test_start_is_first_node_with_edges(self, triangle):
        nodes, edges = triangle
        reordered = [nodes[2], nodes[0], nodes[1]]
        circuit = find_circuit(reordered, edges)
        assert circuit.start_label == "C"
        assert circuit.label_path == ("C", "B", "A", "C")

    def test_traversal_direction(self, bowtie):
        nodes, edges = bowtie
        nodes = [nodes[1], nodes[0]] + nodes[2:]
        circuit = find_circuit(nodes, edges)
        e3 = circuit.traversals[4]
        assert e3.edge_id == "e3"
        assert (e3.from_label, e3.to_label) == ("A", "C")
        # e3 was drawn C -> A and walked the other way.
        assert e3.forward is False
        assert (e3.source_id, e3.target_id) == ("id-C", "id-A")

    def test_accepts_dataclasses(self):
        nodes = [GraphNode("a", "A"), GraphNode("b", "B"), GraphNode("c", "C")]
        edges = [GraphEdge("x", "a", "b"), GraphEdge("y", "b", "c"), GraphEdge("z", "c", "a")]
        circuit = find_circuit(nodes, edges)
        assert circuit.label_path == ("A", "B", "C", "A")
        assert circuit.edge_path == ("x", "y", "z")


class TestMultigraphCases:
    """Self-loops and parallel edges are consumed exactly once each."""

    def test_single_self_loop(self):
        circuit = find_circuit(make_nodes("A"), make_edges(("A", "A")))
        assert circuit.label_path == ("A", "A")
        assert circuit.edge_path == ("e1",)
        assert circuit.traversals[0].forward is True

    def test_parallel_edges_both_used(self):
        nodes = make_nodes("A", "B")
        edges = make_edges(("A", "B"), ("A", "B"))
        circuit = find_circuit(nodes, edges)
        assert circuit.label_path == ("A", "B", "A")
        assert circuit.edge_path == ("e1", "e2")
        assert [t.forward for t in circuit.traversals] == [True, False]

    def test_self_loop_inside_cycle(self):
        nodes = make_nodes("A", "B")
        edges = make_edges(("A", "B"), ("B", "B"), ("B", "A"))
        circuit = find_circuit(nodes, edges)
        assert circuit.label_path == ("A", "B", "B", "A")
        assert circuit.edge_path == ("e1", "e2", "e3")
        assert_valid_circuit(circuit, nodes, edges)

    def test_several_self_loops_on_one_node(self):
        nodes = make_nodes("A")
        edges = make_edges(("A", "A"), ("A", "A"), ("A", "A"))
        circuit = find_circuit(nodes, edges)
        assert circuit.label_path == ("A", "A", "A", "A")
        assert circuit.edge_path == ("e1", "e2", "e3")


class TestCircuitInvariants:
    """Generated Eulerian graphs always yield a valid circuit."""

    @pytest.mark.parametrize("seed", range(20))
    def test_random_graphs(self, seed):
        rng = random.Random(seed)
        nodes, edges = random_eulerian_graph(rng, rng.randint(1, 12), rng.randint(0, 40))
        circuit = find_circuit(nodes, edges)
        assert circuit is not None
        assert_valid_circuit(circuit, nodes, edges)

    def test_repeatable(self):
        rng = random.Random(7)
        nodes, edges = random_eulerian_graph(rng, 10, 30)
        assert find_circuit(nodes, edges) == find_circuit(nodes, edges)

    def test_large_graph(self):
        rng = random.Random(42)
        nodes, edges = random_eulerian_graph(rng, 2000, 20000)
        circuit = find_circuit(nodes, edges)
        assert_valid_circuit(circuit, nodes, edges)

    def test_inputs_not_mutated(self, bowtie):
        nodes, edges = bowtie
        snapshot = ([dict(n) for n in nodes], [dict(e) for e in edges])
        find_circuit(nodes, edges)
        assert (nodes, edges) == snapshot


class TestNoCircuit:
    """Ineligible graphs yield None; malformed input raises."""

    def test_empty_graph(self):
        assert find_circuit([], []) is None
        assert find_circuit(None, None) is None

    def test_odd_degree(self):
        assert find_circuit(make_nodes("A", "B"), make_edges(("A", "B"))) is None

    def test_isolated_node(self, triangle):
        nodes, edges = triangle
        assert find_circuit(nodes + make_nodes("D"), edges) is None

    def test_disconnected(self, two_squares):
        assert find_circuit(*two_squares) is None

    def test_malformed_edge(self, triangle):
        nodes, _ = triangle
        with pytest.raises(InvalidGraphInputError):
            find_circuit(nodes, [{"sourceId": "id-A", "targetId": "id-B"}])


class TestEdgeOrderMap:
    """Derived edge -> position view."""

    def test_positions_are_one_based(self, triangle):
        order = find_circuit(*triangle).edge_order_map()
        assert {k: v.order for k, v in order.items()} == {"e1": 1, "e2": 2, "e3": 3}

    def test_entries_carry_traversal(self, triangle):
        order = find_circuit(*triangle).edge_order_map()
        entry = order["e3"]
        assert isinstance(entry, EdgeOrder)
        assert (entry.traversal.from_label, entry.traversal.to_label) == ("C", "A")
        assert entry.traversal.forward is True
