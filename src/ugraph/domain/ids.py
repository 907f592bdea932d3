"""Node identifier normalization.

Every caller-supplied identifier is coerced to its string form before
lookup, so ``1`` and ``"1"`` always name the same node.
"""

from __future__ import annotations

from typing import Any


def normalize_id(node_id: Any) -> str:
    """Return the canonical string form of *node_id*."""
    if isinstance(node_id, str):
        return node_id
    return str(node_id)


def normalize_pair(u: Any, v: Any) -> tuple[str, str]:
    """Normalize both endpoints of an edge."""
    return normalize_id(u), normalize_id(v)
