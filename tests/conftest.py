"""Pytest configuration and fixtures for eulerian-graph-lib tests."""

import shutil

import pytest


def make_nodes(*labels):
    """Nodes as the editor sends them: id derived from the label."""
    return [{"id": f"id-{label}", "label": label, "x": 0, "y": 0} for label in labels]


def make_edges(*pairs):
    """Edges e1, e2, ... between label pairs, in the given order."""
    return [
        {"id": f"e{i}", "sourceId": f"id-{a}", "targetId": f"id-{b}"}
        for i, (a, b) in enumerate(pairs, start=1)
    ]


@pytest.fixture
def triangle():
    """A -- B -- C -- A."""
    return make_nodes("A", "B", "C"), make_edges(("A", "B"), ("B", "C"), ("C", "A"))


@pytest.fixture
def bowtie():
    """Two triangles sharing node A: A-B-C-A and A-D-E-A."""
    return (
        make_nodes("A", "B", "C", "D", "E"),
        make_edges(("A", "B"), ("B", "C"), ("C", "A"), ("A", "D"), ("D", "E"), ("E", "A")),
    )


@pytest.fixture
def two_squares():
    """Two disjoint 4-cycles: A-B-C-D-A and W-X-Y-Z-W."""
    return (
        make_nodes("A", "B", "C", "D", "W", "X", "Y", "Z"),
        make_edges(
            ("A", "B"), ("B", "C"), ("C", "D"), ("D", "A"),
            ("W", "X"), ("X", "Y"), ("Y", "Z"), ("Z", "W"),
        ),
    )


@pytest.fixture
def storage_path(tmp_path):
    """Provide an isolated directory for on-disk snapshot stores."""
    path = tmp_path / "snapshots"
    path.mkdir(parents=True, exist_ok=True)
    yield path
    if path.exists():
        shutil.rmtree(path, ignore_errors=True)
