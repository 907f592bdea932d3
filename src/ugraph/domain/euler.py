"""Euler circuits via Fleury's algorithm.

An Euler circuit exists iff the graph is connected and every node has even
degree. A loop counts 1 toward degree, so each node must also have even
degree with its loops left out. Fleury's algorithm walks the graph consuming
one edge per step and only crosses a bridge when no other edge is left at
the current node.

Consumed edges are removed from a disposable working copy. Bridge status is
always evaluated against that working copy, i.e. against the edges not yet
walked. Evaluating it against the untouched input graph instead would make
every verdict constant for the whole walk and can strand the walk at a
node whose remaining edges were already consumed.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ugraph.domain.connectivity import count_components, is_bridge
from ugraph.domain.errors import (
    EulerCircuitError,
    NotConnectedError,
    OddDegreeError,
    UnknownNodeError,
    UnpairedLoopError,
)
from ugraph.domain.ids import normalize_id

if TYPE_CHECKING:
    from ugraph.domain.graph import GraphStore

logger = logging.getLogger(__name__)


def _loop_count(graph: GraphStore, node_id: str) -> int:
    return graph.neighbors(node_id).count(node_id)


def check_euler_preconditions(graph: GraphStore) -> None:
    """Raise if *graph* cannot contain an Euler circuit.

    Raises:
        NotConnectedError: Component count is not exactly 1.
        OddDegreeError: One or more nodes have odd degree.
        UnpairedLoopError: A node has odd degree once its loops are
            excluded, i.e. it carries an odd number of loops.
    """
    with graph.exclusive():
        components = count_components(graph)
        if components != 1:
            raise NotConnectedError(components)
        odd = [node_id for node_id in graph.node_ids() if graph.degree(node_id) % 2 != 0]
        if odd:
            raise OddDegreeError(odd)
        unpaired = [
            node_id
            for node_id in graph.node_ids()
            if (graph.degree(node_id) - _loop_count(graph, node_id)) % 2 != 0
        ]
        if unpaired:
            raise UnpairedLoopError(unpaired)


def has_euler_circuit(graph: GraphStore) -> bool:
    """Non-raising form of :func:`check_euler_preconditions`."""
    try:
        check_euler_preconditions(graph)
    except EulerCircuitError:
        return False
    return True


def _next_node(working: GraphStore, current: str) -> str:
    """Pick the neighbor to walk to from *current*.

    First neighbor, in adjacency order, whose edge is not a bridge of the
    working graph; the first neighbor if every candidate is a bridge.
    """
    candidates = working.neighbors(current)
    if not candidates:
        raise EulerCircuitError(
            f"Walk stranded at '{current}' with {working.size()} edges left",
            node_id=current,
            remaining=working.size(),
        )
    if len(candidates) == 1:
        return candidates[0]

    checked: set[str] = set()
    for candidate in candidates:
        if candidate in checked:
            continue
        checked.add(candidate)
        if not is_bridge(working, current, candidate):
            return candidate
    return candidates[0]


def build_euler_circuit(graph: GraphStore, start_node: Any = None) -> list[str]:
    """Construct an Euler circuit with Fleury's algorithm.

    Args:
        graph: Graph to traverse. It is never mutated.
        start_node: Node to start and end at. Defaults to the first node
            in ``graph.node_ids()``.

    Returns:
        The closed walk as node ids; ``len == graph.size() + 1`` and the
        first and last entries are equal.

    Raises:
        NotConnectedError: Component count is not exactly 1.
        OddDegreeError: One or more nodes have odd degree.
        UnpairedLoopError: A node carries an odd number of loops.
        UnknownNodeError: *start_node* is given but absent.
    """
    with graph.exclusive():
        check_euler_preconditions(graph)
        if start_node is None:
            current = graph.node_ids()[0]
        else:
            current = normalize_id(start_node)
            if not graph.has_node(current):
                raise UnknownNodeError(current)
        working = graph.clone()

    circuit = [current]
    while working.size() > 0:
        following = _next_node(working, current)
        working.remove_edge(current, following)
        circuit.append(following)
        current = following

    logger.debug("Euler circuit of %d edges from %s", len(circuit) - 1, circuit[0])
    return circuit
