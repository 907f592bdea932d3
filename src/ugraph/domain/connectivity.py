"""Connectivity — component partitioning and bridge testing.

Stateless functions over a :class:`GraphStore`. Traversal uses an explicit
stack, so depth is bounded by memory rather than the interpreter's
recursion limit.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ugraph.domain.errors import NoSuchEdgeError
from ugraph.domain.ids import normalize_pair

if TYPE_CHECKING:
    from ugraph.domain.graph import GraphStore

logger = logging.getLogger(__name__)


def connected_components(graph: GraphStore) -> list[list[str]]:
    """Partition the node ids into connected components.

    Components are discovered by depth-first traversal from each unvisited
    node in ``graph.node_ids()`` order. Within a component, ids appear in
    visit order. A node with no edges forms its own component.
    """
    components: list[list[str]] = []
    visited: set[str] = set()

    with graph.exclusive():
        for root in graph.node_ids():
            if root in visited:
                continue
            visited.add(root)
            component = [root]
            stack = [root]
            while stack:
                current = stack.pop()
                for neighbor in graph.neighbors(current):
                    if neighbor not in visited:
                        visited.add(neighbor)
                        component.append(neighbor)
                        stack.append(neighbor)
            components.append(component)

    return components


def count_components(graph: GraphStore) -> int:
    """Return the number of connected components (0 for an empty graph)."""
    return len(connected_components(graph))


def is_bridge(graph: GraphStore, u: Any, v: Any) -> bool:
    """Return whether removing one (u, v) edge increases the component count.

    The edge is removed and restored inside a single locked scope, so the
    graph (adjacency order included) is unchanged when this returns.
    Loops and edges with a parallel twin are never bridges.

    Raises:
        UnknownNodeError: If either endpoint is absent.
        NoSuchEdgeError: If the endpoints are not adjacent.
    """
    u, v = normalize_pair(u, v)
    with graph.exclusive():
        if not graph.is_adjacent(u, v):
            raise NoSuchEdgeError(u, v)
        before = count_components(graph)
        with graph.edge_removed(u, v):
            after = count_components(graph)

    bridge = after > before
    logger.debug("Edge %s-%s bridge=%s (%d -> %d components)", u, v, bridge, before, after)
    return bridge
