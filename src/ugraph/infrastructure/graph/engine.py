"""Conversion between GraphStore and NetworkX multigraphs.

``nx.MultiGraph`` is the only NetworkX type that preserves both parallel
edges and self-loops, so it is the export target. Degree semantics differ:
NetworkX counts a loop twice, GraphStore once. Only structure is carried
across, never degree values.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

import networkx as nx

from ugraph.domain.graph import GraphStore
from ugraph.domain.ids import normalize_id

if TYPE_CHECKING:
    from collections.abc import Hashable

_NxGraph: TypeAlias = "nx.Graph[Hashable]"


def to_networkx(graph: GraphStore) -> nx.MultiGraph[str]:
    """Build a MultiGraph with one NetworkX edge per logical edge.

    Node payloads are exposed as the ``value`` node attribute.
    """
    g: nx.MultiGraph[str] = nx.MultiGraph()
    with graph.exclusive():
        for node_id in graph.node_ids():
            g.add_node(node_id, value=graph.node_value(node_id))
        g.add_edges_from(graph.edges())
    return g


def from_networkx(g: _NxGraph) -> GraphStore:
    """Build a GraphStore from an undirected NetworkX graph.

    Node ids are string-normalized and the ``value`` node attribute (if
    any) becomes the node payload. Parallel edges of a MultiGraph are kept.

    Raises:
        ValueError: If *g* is directed, or two NetworkX nodes normalize
            to the same id.
    """
    if g.is_directed():
        msg = "Directed graphs are not supported; convert with g.to_undirected() first"
        raise ValueError(msg)

    store = GraphStore()
    for node, attrs in g.nodes(data=True):
        if store.has_node(node):
            msg = f"NetworkX nodes collide on normalized id '{normalize_id(node)}'"
            raise ValueError(msg)
        store.add_node(node, attrs.get("value"))
    for u, v in g.edges():
        store.add_edge(u, v)
    return store
