"""Graph error taxonomy.

Every failure is local and recoverable: operations validate their
preconditions before mutating, so a raised error leaves the graph as it
was. The service layer maps ``code`` onto ``ServiceError.code``.
"""

from __future__ import annotations

from typing import Any, ClassVar


class GraphError(Exception):
    """Base class for all graph engine errors."""

    code: ClassVar[str] = "GRAPH_ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = detail

    def __str__(self) -> str:
        return self.message


class DuplicateNodeError(GraphError, ValueError):
    """A node with the same normalized id already exists."""

    code = "DUPLICATE_NODE"

    def __init__(self, node_id: str) -> None:
        super().__init__(f"Node '{node_id}' already exists", node_id=node_id)


class UnknownNodeError(GraphError, LookupError):
    """An operation referenced a node id that is not in the graph."""

    code = "UNKNOWN_NODE"

    def __init__(self, node_id: str) -> None:
        super().__init__(f"Node '{node_id}' does not exist", node_id=node_id)


class NoSuchEdgeError(GraphError, LookupError):
    """An operation referenced a pair of nodes that are not adjacent."""

    code = "NO_SUCH_EDGE"

    def __init__(self, u: str, v: str) -> None:
        super().__init__(f"No edge between '{u}' and '{v}'", edge=[u, v])


class EulerCircuitError(GraphError, ValueError):
    """The graph does not satisfy the Euler circuit existence conditions."""

    code = "NO_EULER_CIRCUIT"


class NotConnectedError(EulerCircuitError):
    """The graph does not consist of exactly one component."""

    code = "NOT_CONNECTED"

    def __init__(self, components: int) -> None:
        super().__init__(
            f"Graph is not connected ({components} components)",
            components=components,
        )


class OddDegreeError(EulerCircuitError):
    """At least one node has odd degree."""

    code = "ODD_DEGREE"

    def __init__(self, nodes: list[str]) -> None:
        super().__init__(
            f"Not all nodes have even degree: {', '.join(nodes)}",
            nodes=nodes,
        )


class UnpairedLoopError(EulerCircuitError):
    """At least one node has odd degree once its loops are excluded.

    A loop adds 1 to its node's degree but is walked as a closed step, so
    even degree alone does not guarantee a circuit when loops are present.
    """

    code = "UNPAIRED_LOOP"

    def __init__(self, nodes: list[str]) -> None:
        super().__init__(
            f"Not all nodes have even degree without their loops: {', '.join(nodes)}",
            nodes=nodes,
        )
