"""Shared pytest fixtures for ugraph tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from tests.helpers import BOWTIE, SQUARE, TRIANGLE, TWO_TRIANGLES, make_graph
from ugraph.domain.graph import GraphStore


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def triangle() -> GraphStore:
    """Nodes a, b, c; edges a-b, b-c, c-a."""
    return make_graph(TRIANGLE)


@pytest.fixture
def two_triangles() -> GraphStore:
    """Triangles a-b-c and d-e-f joined by the single edge c-d."""
    return make_graph(TWO_TRIANGLES)


@pytest.fixture
def square() -> GraphStore:
    """Cycle a-b-c-d-a."""
    return make_graph(SQUARE)


@pytest.fixture
def bowtie() -> GraphStore:
    return make_graph(BOWTIE)


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp dir with no UGRAPH_* env leaking in.

    Use via ``@pytest.mark.usefixtures("_isolated_config")``.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("UGRAPH_CONFIG", raising=False)
    monkeypatch.delenv("UGRAPH_CLI__EDGE_SEPARATOR", raising=False)
    monkeypatch.delenv("UGRAPH_INSPECT__MAX_NODES", raising=False)
