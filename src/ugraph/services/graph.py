"""GraphService — ServiceResult facade over a single GraphStore.

Domain operations raise :class:`GraphError`; this layer converts them into
``ServiceResult(ok=False)`` so the CLI (or any value-oriented caller) never
handles exceptions for expected failures.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import networkx as nx
import structlog

from ugraph.domain.connectivity import connected_components, is_bridge
from ugraph.domain.errors import GraphError
from ugraph.domain.euler import build_euler_circuit
from ugraph.domain.graph import GraphStore
from ugraph.domain.ids import normalize_id, normalize_pair
from ugraph.infrastructure.graph.engine import from_networkx, to_networkx
from ugraph.services.result import ServiceResult

log = structlog.get_logger(__name__)

_PLAIN_VALUE_TYPES = (str, int, float, bool, type(None))


def _plain_value(value: Any) -> Any:
    """Return *value* if JSON-friendly, otherwise its repr."""
    if isinstance(value, _PLAIN_VALUE_TYPES):
        return value
    return repr(value)


class GraphService:
    """Graph mutations and analysis returning ServiceResult."""

    def __init__(self, graph: GraphStore | None = None) -> None:
        self._graph = graph if graph is not None else GraphStore()

    @property
    def graph(self) -> GraphStore:
        return self._graph

    @classmethod
    def from_networkx(cls, g: nx.Graph[Any]) -> GraphService:
        """Wrap a GraphStore built from an undirected NetworkX graph.

        Raises:
            ValueError: If *g* is directed or its ids collide once normalized.
        """
        return cls(from_networkx(g))

    def to_networkx(self) -> nx.MultiGraph[str]:
        """Export the held graph as a NetworkX MultiGraph."""
        return to_networkx(self._graph)

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------

    def _failure(self, op: str, exc: GraphError) -> ServiceResult:
        log.debug("graph.op_failed", op=op, code=exc.code, message=exc.message)
        return ServiceResult.failure(op, exc)

    def _counts(self) -> dict[str, int]:
        return {"order": self._graph.order(), "size": self._graph.size()}

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def load(
        self,
        nodes: Iterable[Any] = (),
        edges: Iterable[tuple[Any, Any]] = (),
    ) -> ServiceResult:
        """Add *nodes* and *edges*, creating missing edge endpoints.

        Nodes that already exist are left untouched.
        """
        g = self._graph
        added: list[str] = []
        with g.exclusive():
            for node_id in nodes:
                if not g.has_node(node_id):
                    added.append(g.add_node(node_id))
            edge_count = 0
            for u, v in edges:
                for endpoint in (u, v):
                    if not g.has_node(endpoint):
                        added.append(g.add_node(endpoint))
                g.add_edge(u, v)
                edge_count += 1
        return ServiceResult(
            ok=True,
            op="load",
            data={"nodes_added": len(added), "edges_added": edge_count, **self._counts()},
        )

    def add_node(self, node_id: Any, value: Any = None) -> ServiceResult:
        try:
            key = self._graph.add_node(node_id, value)
        except GraphError as exc:
            return self._failure("add_node", exc)
        return ServiceResult(ok=True, op="add_node", data={"id": key, **self._counts()})

    def add_edge(self, u: Any, v: Any) -> ServiceResult:
        try:
            self._graph.add_edge(u, v)
        except GraphError as exc:
            return self._failure("add_edge", exc)
        return ServiceResult(
            ok=True,
            op="add_edge",
            data={"edge": list(normalize_pair(u, v)), **self._counts()},
        )

    def remove_node(self, node_id: Any) -> ServiceResult:
        try:
            self._graph.remove_node(node_id)
        except GraphError as exc:
            return self._failure("remove_node", exc)
        return ServiceResult(
            ok=True,
            op="remove_node",
            data={"id": normalize_id(node_id), **self._counts()},
        )

    def remove_edge(self, u: Any, v: Any) -> ServiceResult:
        try:
            self._graph.remove_edge(u, v)
        except GraphError as exc:
            return self._failure("remove_edge", exc)
        return ServiceResult(
            ok=True,
            op="remove_edge",
            data={"edge": list(normalize_pair(u, v)), **self._counts()},
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def neighbors(self, node_id: Any) -> ServiceResult:
        try:
            items = self._graph.neighbors(node_id)
        except GraphError as exc:
            return self._failure("neighbors", exc)
        return ServiceResult(
            ok=True,
            op="neighbors",
            data={"id": normalize_id(node_id), "count": len(items), "items": items},
        )

    def degree(self, node_id: Any) -> ServiceResult:
        try:
            degree = self._graph.degree(node_id)
        except GraphError as exc:
            return self._failure("degree", exc)
        return ServiceResult(
            ok=True,
            op="degree",
            data={"id": normalize_id(node_id), "degree": degree},
        )

    def components(self) -> ServiceResult:
        """Partition the graph into connected components, largest first."""
        parts = connected_components(self._graph)
        items = [
            {"component_id": index, "size": len(members), "members": members}
            for index, members in enumerate(sorted(parts, key=len, reverse=True))
        ]
        return ServiceResult(
            ok=True,
            op="components",
            data={"count": len(items), "components": items},
            meta=self._counts(),
        )

    def bridge(self, u: Any, v: Any) -> ServiceResult:
        try:
            verdict = is_bridge(self._graph, u, v)
        except GraphError as exc:
            return self._failure("bridge", exc)
        return ServiceResult(
            ok=True,
            op="bridge",
            data={"edge": list(normalize_pair(u, v)), "is_bridge": verdict},
        )

    def euler_circuit(self, start_node: Any = None) -> ServiceResult:
        try:
            circuit = build_euler_circuit(self._graph, start_node)
        except GraphError as exc:
            return self._failure("euler_circuit", exc)
        return ServiceResult(
            ok=True,
            op="euler_circuit",
            data={
                "start": circuit[0],
                "length": len(circuit),
                "size": self._graph.size(),
                "circuit": circuit,
            },
        )

    def inspect(self, *, max_nodes: int = 50) -> ServiceResult:
        """Diagnostic dump: summary counts plus per-node adjacency.

        Loop totals come from the NetworkX export, which keeps one edge per
        loop regardless of how GraphStore counts loop degree.

        At most *max_nodes* nodes are listed; a warning reports the rest.
        """
        g = self._graph
        warnings: list[str] = []
        with g.exclusive():
            node_ids = g.node_ids()
            if len(node_ids) > max_nodes:
                warnings.append(f"Showing {max_nodes} of {len(node_ids)} nodes")
                node_ids = node_ids[:max_nodes]
            items = [
                {
                    "id": node_id,
                    "value": _plain_value(g.node_value(node_id)),
                    "degree": g.degree(node_id),
                    "adjacency": g.neighbors(node_id),
                }
                for node_id in node_ids
            ]
            data = {
                **self._counts(),
                "components": len(connected_components(g)),
                "self_loops": nx.number_of_selfloops(to_networkx(g)),
                "count": len(items),
                "items": items,
            }
        return ServiceResult(ok=True, op="inspect", data=data, warnings=warnings)
