"""GraphStore — node/edge storage and every direct mutation.

Adjacency is an ordered list, not a set: a parallel edge repeats the
neighbor and a self-loop records the node in its own list exactly once
(a loop adds 1 to the degree, not 2).

INVARIANT: for u != v, occurrences of v in adj(u) == occurrences of u in adj(v).
INVARIANT: a failed operation leaves the store unchanged.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Generator, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

from ugraph.domain.errors import DuplicateNodeError, NoSuchEdgeError, UnknownNodeError
from ugraph.domain.ids import normalize_id, normalize_pair

logger = logging.getLogger(__name__)


@dataclass
class Node:
    """A vertex with an optional payload and its ordered adjacency list."""

    id: str
    value: Any = None
    adjacency: list[str] = field(default_factory=list)


class GraphStore:
    """Undirected multigraph with string-normalized node ids.

    Every public operation runs under a re-entrant lock owned by the
    store, so callers that need several operations to appear atomic can
    wrap them in :meth:`exclusive`.

    Usage::

        g = GraphStore()
        g.add_node("a")
        g.add_node("b")
        g.add_edge("a", "b")
        g.degree("a")  # 1
    """

    def __init__(self, clone_of: GraphStore | None = None) -> None:
        self._nodes: dict[str, Node] = {}
        self._edge_count = 0
        self._lock = threading.RLock()

        if clone_of is not None:
            with clone_of.exclusive():
                for node_id, node in clone_of._nodes.items():
                    self._nodes[node_id] = Node(
                        id=node.id,
                        value=node.value,
                        adjacency=list(node.adjacency),
                    )
                self._edge_count = clone_of._edge_count

    def __repr__(self) -> str:
        return f"GraphStore(order={self.order()}, size={self.size()})"

    def __len__(self) -> int:
        return self.order()

    def __contains__(self, node_id: object) -> bool:
        return self.has_node(node_id)

    def __iter__(self) -> Iterator[str]:
        return iter(self.node_ids())

    # ------------------------------------------------------------------
    # Locking
    # ------------------------------------------------------------------

    @contextmanager
    def exclusive(self) -> Generator[GraphStore]:
        """Hold the store lock for the duration of the block."""
        with self._lock:
            yield self

    # ------------------------------------------------------------------
    # Validation helpers
    # ------------------------------------------------------------------

    def _require(self, node_id: str) -> Node:
        node = self._nodes.get(node_id)
        if node is None:
            raise UnknownNodeError(node_id)
        return node

    def _require_edge(self, u: str, v: str) -> tuple[Node, Node]:
        node_u = self._require(u)
        node_v = self._require(v)
        if v not in node_u.adjacency:
            raise NoSuchEdgeError(u, v)
        return node_u, node_v

    def _detach(self, u: str, v: str) -> tuple[int, int]:
        """Remove one (u, v) edge and return the adjacency positions it held.

        Caller must have validated the edge and hold the lock.
        """
        node_u = self._nodes[u]
        i = node_u.adjacency.index(v)
        del node_u.adjacency[i]
        j = -1
        if u != v:
            node_v = self._nodes[v]
            j = node_v.adjacency.index(u)
            del node_v.adjacency[j]
        self._edge_count -= 1
        return i, j

    def _attach(self, u: str, v: str, i: int, j: int) -> None:
        """Re-insert a detached edge at the positions :meth:`_detach` returned."""
        self._nodes[u].adjacency.insert(i, v)
        if u != v:
            self._nodes[v].adjacency.insert(j, u)
        self._edge_count += 1

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_node(self, node_id: Any, value: Any = None) -> str:
        """Insert a node with empty adjacency. Returns the normalized id."""
        key = normalize_id(node_id)
        with self._lock:
            if key in self._nodes:
                raise DuplicateNodeError(key)
            self._nodes[key] = Node(id=key, value=value)
        logger.debug("Added node %s", key)
        return key

    def add_edge(self, u: Any, v: Any) -> None:
        """Add an undirected edge; repeated pairs create parallel edges."""
        u, v = normalize_pair(u, v)
        with self._lock:
            node_u = self._require(u)
            node_v = self._require(v)
            node_u.adjacency.append(v)
            # A loop is recorded once in its own adjacency
            if u != v:
                node_v.adjacency.append(u)
            self._edge_count += 1
        logger.debug("Added edge %s-%s", u, v)

    def remove_edge(self, u: Any, v: Any) -> None:
        """Remove one (u, v) edge, the first occurrence on each side."""
        u, v = normalize_pair(u, v)
        with self._lock:
            self._require_edge(u, v)
            self._detach(u, v)
        logger.debug("Removed edge %s-%s", u, v)

    def remove_node(self, node_id: Any) -> None:
        """Remove a node and every edge incident to it, loops included."""
        key = normalize_id(node_id)
        with self._lock:
            node = self._require(key)
            # Walk from the end; each removal shrinks the list underneath us.
            while node.adjacency:
                self._detach(key, node.adjacency[-1])
            del self._nodes[key]
        logger.debug("Removed node %s", key)

    def set_node_value(self, node_id: Any, value: Any) -> None:
        key = normalize_id(node_id)
        with self._lock:
            self._require(key).value = value

    @contextmanager
    def edge_removed(self, u: Any, v: Any) -> Generator[GraphStore]:
        """Temporarily remove one (u, v) edge for the duration of the block.

        The edge is restored at the exact adjacency positions it came from,
        so adjacency order and size are identical afterwards even if the
        block raises. The block must not mutate the store.
        """
        u, v = normalize_pair(u, v)
        with self._lock:
            self._require_edge(u, v)
            i, j = self._detach(u, v)
            try:
                yield self
            finally:
                self._attach(u, v, i, j)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has_node(self, node_id: Any) -> bool:
        return normalize_id(node_id) in self._nodes

    def is_adjacent(self, u: Any, v: Any) -> bool:
        """Return whether v occurs at least once in u's adjacency."""
        u, v = normalize_pair(u, v)
        with self._lock:
            node_u = self._require(u)
            self._require(v)
            return v in node_u.adjacency

    def neighbors(self, node_id: Any) -> list[str]:
        """Return a copy of the node's adjacency list, in insertion order."""
        key = normalize_id(node_id)
        with self._lock:
            return list(self._require(key).adjacency)

    def node_value(self, node_id: Any) -> Any:
        key = normalize_id(node_id)
        with self._lock:
            return self._require(key).value

    def degree(self, node_id: Any) -> int:
        """Length of the adjacency list; a loop contributes 1."""
        key = normalize_id(node_id)
        with self._lock:
            return len(self._require(key).adjacency)

    def order(self) -> int:
        """Number of nodes."""
        return len(self._nodes)

    def size(self) -> int:
        """Number of edges."""
        return self._edge_count

    def node_ids(self) -> list[str]:
        with self._lock:
            return list(self._nodes)

    def edges(self) -> list[tuple[str, str]]:
        """Every logical edge once, as ``(u, v)`` pairs.

        Each node's adjacency is scanned in node order; an entry v of u is
        emitted when v has not been scanned yet, or when v == u.
        """
        with self._lock:
            result: list[tuple[str, str]] = []
            seen: set[str] = set()
            for node_id, node in self._nodes.items():
                for neighbor in node.adjacency:
                    if neighbor == node_id or neighbor not in seen:
                        result.append((node_id, neighbor))
                seen.add(node_id)
            return result

    def clone(self) -> GraphStore:
        """Deep structural copy; no adjacency list is shared."""
        return GraphStore(clone_of=self)

    def describe(self) -> str:
        """Human-readable dump of the adjacency lists and summary counts."""
        from ugraph.domain.connectivity import count_components

        with self._lock:
            lines = [
                f"Size: {self.size()}; Order: {self.order()}; "
                f"Components: {count_components(self)}"
            ]
            for node_id, node in self._nodes.items():
                lines.append(f"Adjacent to node {node_id}: {', '.join(node.adjacency)}")
            return "\n".join(lines)
