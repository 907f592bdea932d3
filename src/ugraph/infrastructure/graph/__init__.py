"""NetworkX interop for :class:`ugraph.domain.graph.GraphStore`."""

from ugraph.infrastructure.graph.engine import from_networkx, to_networkx

__all__ = ["from_networkx", "to_networkx"]
