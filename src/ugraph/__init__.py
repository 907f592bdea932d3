"""ugraph — in-memory undirected graph engine.

Nodes, parallel edges and self-loops; component counting, bridge
detection, and Euler circuits via Fleury's algorithm.
"""

from ugraph.domain.connectivity import connected_components, count_components, is_bridge
from ugraph.domain.errors import (
    DuplicateNodeError,
    EulerCircuitError,
    GraphError,
    NoSuchEdgeError,
    NotConnectedError,
    OddDegreeError,
    UnknownNodeError,
    UnpairedLoopError,
)
from ugraph.domain.euler import build_euler_circuit, has_euler_circuit
from ugraph.domain.graph import GraphStore, Node
from ugraph.domain.ids import normalize_id

__version__ = "0.1.0"

__all__ = [
    "DuplicateNodeError",
    "EulerCircuitError",
    "GraphError",
    "GraphStore",
    "NoSuchEdgeError",
    "Node",
    "NotConnectedError",
    "OddDegreeError",
    "UnknownNodeError",
    "UnpairedLoopError",
    "build_euler_circuit",
    "connected_components",
    "count_components",
    "has_euler_circuit",
    "is_bridge",
    "normalize_id",
]
