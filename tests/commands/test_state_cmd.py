"""Tests for the state command group."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from rangectl.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestStateCommands:
    def test_get(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            ["-q", "state", "get", "--rule", "+1m", "--from", "2014-06-01", "--to", "2014-06-30"],
        )
        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "__daterange": "+1m",
            "from": "2014-06-01",
            "to": "2014-06-30",
        }

    def test_get_custom_field_names(self, cli_runner: CliRunner, tmp_path) -> None:
        (tmp_path / "rangectl.toml").write_text('[state]\nrule_field = "period"\n')
        result = cli_runner.invoke(cli, ["-q", "state", "get", "--rule", "+0"])
        assert json.loads(result.output) == {"period": "+0"}

    def test_merge(self, cli_runner: CliRunner) -> None:
        blob = json.dumps({"__daterange": "+3m", "foo": 1})
        result = cli_runner.invoke(
            cli,
            ["--json", "state", "merge", blob, "--rule", "+1m", "--from", "2014-08-01", "--to", "2014-08-31"],
        )
        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert data["changed"] is True
        assert data["state"]["from"] == "2014-07-01"
        assert data["remaining"] == {"foo": "1"}

    def test_merge_no_change(self, cli_runner: CliRunner) -> None:
        blob = json.dumps({"__daterange": "+1m"})
        result = cli_runner.invoke(cli, ["--json", "state", "merge", blob, "--rule", "+1m"])
        assert json.loads(result.output)["data"]["changed"] is False

    def test_merge_inverted_range(self, cli_runner: CliRunner) -> None:
        blob = json.dumps({"from": "2014-09-01", "to": "2014-08-01"})
        result = cli_runner.invoke(cli, ["--json", "state", "merge", blob, "--rule", "+0"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "INVALID_RANGE"

    def test_merge_invalid_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["state", "merge", "{oops", "--rule", "+1m"])
        assert result.exit_code == 2
        assert "not valid JSON" in result.output

    def test_merge_not_an_object(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["state", "merge", "[1, 2]", "--rule", "+1m"])
        assert result.exit_code == 2
        assert "must be a JSON object" in result.output
