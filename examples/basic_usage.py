"""Basic usage example for eulerian-graph-lib."""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


from eulerian_graph import (
    EulerianAnalyzer,
    GraphDocument,
    add_node,
    connect,
    create_snapshot_store,
)


def main():
    print("=" * 60)
    print("eulerian-graph-lib - Basic Usage Example")
    print("=" * 60)

    # 1. Build a graph document
    print("\n1. Building a bowtie graph...")
    doc = GraphDocument()
    for label in ["A", "B", "C", "D", "E"]:
        doc = add_node(doc, label, node_id=label.lower())
    for source, target in [("b", "a"), ("a", "c"), ("c", "b"), ("a", "d"), ("d", "e"), ("e", "a")]:
        doc = connect(doc, source, target)
    print(f"   Nodes: {len(doc.nodes)}, Edges: {len(doc.edges)}")

    # 2. Analyze it
    print("\n2. Analyzing...")
    analyzer = EulerianAnalyzer()
    result = analyzer.analyze(doc.nodes, doc.edges)
    print(result.summary)

    if result.cycle:
        print("   Edge order:")
        for edge_id, entry in result.cycle.edge_order_map.items():
            step = entry.traversal
            print(f"   {entry.order}. {step.from_label} -> {step.to_label} ({edge_id[:8]})")

    # 3. Break the circuit with an isolated node
    print("\n3. Adding an isolated node...")
    broken = add_node(doc, "F")
    print(analyzer.analyze(broken.nodes, broken.edges).summary)

    # 4. Keep both versions in a snapshot store
    print("\n4. Saving snapshots...")
    store = create_snapshot_store("memory")
    store.save("bowtie", doc)
    store.save("bowtie-broken", broken)
    print(f"   Saved: {', '.join(store.list_names())}")
    store.close()

    print("\n" + "=" * 60)
    print("Example completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
