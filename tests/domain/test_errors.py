"""Tests for the graph error taxonomy."""

import pytest

from ugraph.domain.errors import (
    DuplicateNodeError,
    GraphError,
    NoSuchEdgeError,
    NotConnectedError,
    OddDegreeError,
    UnknownNodeError,
    UnpairedLoopError,
)


class TestErrorCodes:
    @pytest.mark.parametrize(
        ("exc", "code"),
        [
            (DuplicateNodeError("a"), "DUPLICATE_NODE"),
            (UnknownNodeError("a"), "UNKNOWN_NODE"),
            (NoSuchEdgeError("a", "b"), "NO_SUCH_EDGE"),
            (NotConnectedError(2), "NOT_CONNECTED"),
            (OddDegreeError(["a"]), "ODD_DEGREE"),
            (UnpairedLoopError(["a"]), "UNPAIRED_LOOP"),
        ],
    )
    def test_codes(self, exc: GraphError, code: str) -> None:
        assert exc.code == code
        assert isinstance(exc, GraphError)


class TestErrorPayload:
    def test_message_is_str(self) -> None:
        assert str(UnknownNodeError("x")) == "Node 'x' does not exist"

    def test_edge_detail(self) -> None:
        assert NoSuchEdgeError("a", "b").detail == {"edge": ["a", "b"]}

    def test_builtin_bases(self) -> None:
        assert isinstance(UnknownNodeError("x"), LookupError)
        assert isinstance(NoSuchEdgeError("a", "b"), LookupError)
        assert isinstance(DuplicateNodeError("x"), ValueError)
        assert isinstance(OddDegreeError(["x"]), ValueError)

    def test_unpaired_loop_message(self) -> None:
        exc = UnpairedLoopError(["a", "d"])
        assert exc.message == "Not all nodes have even degree without their loops: a, d"
        assert exc.detail == {"nodes": ["a", "d"]}
