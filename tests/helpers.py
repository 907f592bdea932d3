"""Graph builders and assertions shared across test modules."""

from __future__ import annotations

from collections.abc import Iterable

from ugraph.domain.graph import GraphStore

TRIANGLE = [("a", "b"), ("b", "c"), ("c", "a")]
TWO_TRIANGLES = [*TRIANGLE, ("d", "e"), ("e", "f"), ("f", "d"), ("c", "d")]
SQUARE = [("a", "b"), ("b", "c"), ("c", "d"), ("d", "a")]
# Two triangles sharing node c.
BOWTIE = [("a", "b"), ("b", "c"), ("c", "a"), ("c", "d"), ("d", "e"), ("e", "c")]


def make_graph(edges: Iterable[tuple[str, str]] = (), nodes: Iterable[str] = ()) -> GraphStore:
    """Build a graph from node ids and edges, adding endpoints on demand."""
    g = GraphStore()
    for node in nodes:
        g.add_node(node)
    for u, v in edges:
        for endpoint in (u, v):
            if not g.has_node(endpoint):
                g.add_node(endpoint)
        g.add_edge(u, v)
    return g


def snapshot(g: GraphStore) -> tuple[dict[str, list[str]], int]:
    """Capture every adjacency list (order included) and the edge count."""
    return {node: g.neighbors(node) for node in g.node_ids()}, g.size()


def assert_euler_circuit(g: GraphStore, circuit: list[str]) -> None:
    """Replay *circuit* on a clone, consuming one edge per step."""
    assert len(circuit) == g.size() + 1
    assert circuit[0] == circuit[-1]
    replay = g.clone()
    for u, v in zip(circuit, circuit[1:], strict=False):
        replay.remove_edge(u, v)  # raises NoSuchEdgeError if reused
    assert replay.size() == 0
