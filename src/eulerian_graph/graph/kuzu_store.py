"""KuzuSnapshotStore -- Kuzu-backed implementation of the SnapshotStore protocol.

Each saved document becomes one ``EditorGraph`` row, one ``EditorNode`` row
per node and one ``CONNECTS`` relationship per edge.  A ``position`` column
keeps the original node and edge order, which the analysis depends on.

Public API:
    KuzuSnapshotStore: Concrete SnapshotStore implementation backed by Kuzu.
"""

from __future__ import annotations

import logging
import uuid
from pathlib import Path
from typing import Any

import kuzu

from ..editor import GraphDocument
from .memory_store import _check_name
from .types import GraphEdge, GraphNode

logger = logging.getLogger(__name__)

_SCHEMA = (
    "CREATE NODE TABLE IF NOT EXISTS EditorGraph(name STRING, PRIMARY KEY(name))",
    "CREATE NODE TABLE IF NOT EXISTS EditorNode("
    "key STRING, graph_name STRING, node_id STRING, label STRING, "
    "x DOUBLE, y DOUBLE, position INT64, PRIMARY KEY(key))",
    "CREATE REL TABLE IF NOT EXISTS CONNECTS("
    "FROM EditorNode TO EditorNode, edge_id STRING, graph_name STRING, position INT64)",
)


class KuzuSnapshotStore:
    """Kuzu graph database implementation of the SnapshotStore protocol.

    Node and edge ids are stored as strings, so they load back as strings.
    All Cypher queries use parameterised bindings to prevent injection.

    Args:
        db_path: Filesystem path for the Kuzu database.
        store_id: Optional human-readable identifier; auto-generated if None.
    """

    # ── construction / lifecycle ──────────────────────────────

    def __init__(self, db_path: Path | str, store_id: str | None = None) -> None:
        self._db_path = Path(db_path)
        self._store_id = store_id or f"kuzu-{uuid.uuid4().hex[:8]}"
        self._db = kuzu.Database(str(self._db_path))
        self._conn = kuzu.Connection(self._db)

        for ddl in _SCHEMA:
            self._conn.execute(ddl)

    @property
    def store_id(self) -> str:
        return self._store_id

    def close(self) -> None:
        """Release Kuzu resources."""
        self._conn = None  # type: ignore[assignment]
        self._db = None  # type: ignore[assignment]

    # ── document operations ───────────────────────────────────

    def save(self, name: str, document: GraphDocument) -> None:
        """Store *document* under *name*, replacing any previous version.

        The replacement runs in a single transaction: if any write fails the
        previous version is kept and the error propagates.  Edges whose
        endpoints are not both among the document's nodes cannot be stored as
        relationships and are skipped with a warning.
        """
        _check_name(name)

        self._conn.execute("BEGIN TRANSACTION")
        try:
            skipped = self._write(name, document)
            self._conn.execute("COMMIT")
        except Exception:
            self._rollback(name)
            raise

        if skipped:
            logger.warning(
                "Graph %s: skipped %d edge(s) with unknown endpoints", name, skipped
            )
        logger.debug(
            "Saved graph %s (%d nodes, %d edges)",
            name, len(document.nodes), len(document.edges) - skipped,
        )

    def load(self, name: str) -> GraphDocument | None:
        """Return the document saved under *name*, or None."""
        if not self._exists(name):
            return None

        nodes: list[GraphNode] = []
        result = self._conn.execute(
            "MATCH (n:EditorNode) WHERE n.graph_name = $g "
            "RETURN n.node_id, n.label, n.x, n.y ORDER BY n.position",
            {"g": name},
        )
        while result.has_next():
            node_id, label, x, y = result.get_next()
            nodes.append(GraphNode(node_id=node_id, label=label, x=x, y=y))

        edges: list[GraphEdge] = []
        result = self._conn.execute(
            "MATCH (a:EditorNode)-[e:CONNECTS]->(b:EditorNode) "
            "WHERE e.graph_name = $g "
            "RETURN e.edge_id, a.node_id, b.node_id ORDER BY e.position",
            {"g": name},
        )
        while result.has_next():
            edge_id, source_id, target_id = result.get_next()
            edges.append(GraphEdge(edge_id=edge_id, source_id=source_id, target_id=target_id))

        return GraphDocument(nodes=tuple(nodes), edges=tuple(edges))

    def list_names(self) -> list[str]:
        result = self._conn.execute("MATCH (g:EditorGraph) RETURN g.name ORDER BY g.name")
        names: list[str] = []
        while result.has_next():
            names.append(result.get_next()[0])
        return names

    def delete(self, name: str) -> bool:
        """Delete a document and all of its nodes and edges."""
        if not self._exists(name):
            return False

        self._delete_rows(name)
        return True

    # ── private helpers ───────────────────────────────────────

    def _write(self, name: str, document: GraphDocument) -> int:
        """Replace the rows of *name*; return the number of skipped edges."""
        self._delete_rows(name)
        self._conn.execute("CREATE (:EditorGraph {name: $name})", {"name": name})

        keys: dict[str, str] = {}
        for pos, node in enumerate(document.nodes):
            key = self._node_key(name, node.node_id)
            keys[str(node.node_id)] = key
            self._conn.execute(
                "CREATE (:EditorNode {key: $key, graph_name: $g, node_id: $nid, "
                "label: $label, x: $x, y: $y, position: $pos})",
                {
                    "key": key,
                    "g": name,
                    "nid": str(node.node_id),
                    "label": node.label,
                    "x": float(node.x),
                    "y": float(node.y),
                    "pos": pos,
                },
            )

        skipped = 0
        for pos, edge in enumerate(document.edges):
            src_key = keys.get(str(edge.source_id))
            tgt_key = keys.get(str(edge.target_id))
            if src_key is None or tgt_key is None:
                skipped += 1
                continue
            self._conn.execute(
                "MATCH (a:EditorNode), (b:EditorNode) "
                "WHERE a.key = $a AND b.key = $b "
                "CREATE (a)-[:CONNECTS {edge_id: $eid, graph_name: $g, position: $pos}]->(b)",
                {
                    "a": src_key,
                    "b": tgt_key,
                    "eid": str(edge.edge_id),
                    "g": name,
                    "pos": pos,
                },
            )
        return skipped

    def _delete_rows(self, name: str) -> None:
        self._conn.execute(
            "MATCH (n:EditorNode) WHERE n.graph_name = $g DETACH DELETE n",
            {"g": name},
        )
        self._conn.execute(
            "MATCH (g:EditorGraph) WHERE g.name = $g DELETE g",
            {"g": name},
        )

    def _rollback(self, name: str) -> None:
        try:
            self._conn.execute("ROLLBACK")
        except RuntimeError:
            # Kuzu may already have aborted the transaction on the failed query.
            logger.debug("Graph %s: no open transaction to roll back", name)
        logger.error("Graph %s: save failed, previous version kept", name)

    def _exists(self, name: str) -> bool:
        result = self._conn.execute(
            "MATCH (g:EditorGraph) WHERE g.name = $g RETURN g.name",
            {"g": name},
        )
        return result.has_next()

    @staticmethod
    def _node_key(graph_name: str, node_id: Any) -> str:
        """Primary key of a node row; node ids only need to be unique per graph."""
        return f"{graph_name}\x1f{node_id}"


__all__ = ["KuzuSnapshotStore"]
