"""Tests for the euler command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from ugraph.cli import cli

_SQUARE = ["a:b", "b:c", "c:d", "d:a"]


@pytest.mark.usefixtures("_isolated_config")
class TestEulerCommand:
    def test_square(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "euler", *_SQUARE])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["data"]["circuit"] == ["a", "b", "c", "d", "a"]
        assert data["data"]["length"] == 5

    def test_start_option(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "euler", *_SQUARE, "--start", "c"])
        assert result.exit_code == 0
        assert result.output.strip() == "c b a d c"

    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["euler", *_SQUARE])
        assert result.exit_code == 0
        assert "a → b → c → d → a" in result.output

    def test_odd_degree(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "euler", "a:b", "b:c"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["ok"] is False
        assert data["error"]["code"] == "ODD_DEGREE"

    def test_not_connected(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "euler", *_SQUARE, "-n", "x"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "NOT_CONNECTED"

    def test_unknown_start(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "euler", *_SQUARE, "--start", "zzz"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "UNKNOWN_NODE"

    def test_unpaired_loops(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "euler", "c:a", "a:a", "c:d", "d:d"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["error"]["code"] == "UNPAIRED_LOOP"
        assert data["error"]["detail"]["nodes"] == ["a", "d"]
