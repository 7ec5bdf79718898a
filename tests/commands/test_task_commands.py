"""Tests for the task CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from tasker.cli import cli
from tasker.output.renderers import NO_PENDING_MESSAGE, NO_TASKS_MESSAGE


def _add(runner: CliRunner, *titles: str) -> None:
    for title in titles:
        result = runner.invoke(cli, ["add", title])
        assert result.exit_code == 0, result.output


@pytest.mark.usefixtures("_isolated_root")
class TestDefaultCommand:
    def test_no_tasks_message(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        assert NO_PENDING_MESSAGE in result.output

    def test_lists_pending_only(self, cli_runner: CliRunner) -> None:
        _add(cli_runner, "open", "closed")
        cli_runner.invoke(cli, ["done", "closed"])
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["1: open"]

    def test_json(self, cli_runner: CliRunner) -> None:
        _add(cli_runner, "open")
        data = json.loads(cli_runner.invoke(cli, ["--json"]).output)
        assert data["ok"] is True
        assert data["data"]["selector"] == "pending"
        assert data["data"]["count"] == 1


@pytest.mark.usefixtures("_isolated_root")
class TestAddCommand:
    def test_add(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "add", "buy milk"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["op"] == "add_task"
        assert data["data"]["title"] == "buy milk"
        assert data["data"]["done"] is False

    def test_alias(self, cli_runner: CliRunner) -> None:
        assert cli_runner.invoke(cli, ["a", "buy milk"]).exit_code == 0
        result = cli_runner.invoke(cli, ["all"])
        assert "1: buy milk" in result.output

    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["add", "buy milk"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "OK  add_task"
        assert lines[2:] == ["  title: buy milk", "  done: False"]

    def test_empty_title_error_line(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["add", ""])
        assert result.exit_code == 1
        assert result.output == "ERROR  add_task: Please enter a task\n"

    def test_missing_title_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "add"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["error"]["code"] == "VALIDATION_FAILED"

    def test_empty_title_leaves_store_unchanged(self, cli_runner: CliRunner) -> None:
        assert cli_runner.invoke(cli, ["add", ""]).exit_code == 1
        result = cli_runner.invoke(cli, ["all"])
        assert NO_TASKS_MESSAGE in result.output


@pytest.mark.usefixtures("_isolated_root")
class TestListCommands:
    def test_all_empty(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["all"])
        assert result.exit_code == 0
        assert NO_TASKS_MESSAGE in result.output

    def test_all_in_order(self, cli_runner: CliRunner) -> None:
        _add(cli_runner, "first", "second")
        cli_runner.invoke(cli, ["done", "second"])
        result = cli_runner.invoke(cli, ["l"])
        assert result.output.splitlines() == ["1: first", "2: second"]

    def test_finished(self, cli_runner: CliRunner) -> None:
        _add(cli_runner, "a", "b")
        cli_runner.invoke(cli, ["d", "b"])
        result = cli_runner.invoke(cli, ["f"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["1: b"]

    def test_finished_empty(self, cli_runner: CliRunner) -> None:
        _add(cli_runner, "a")
        result = cli_runner.invoke(cli, ["finished"])
        assert result.exit_code == 0
        assert NO_TASKS_MESSAGE in result.output

    def test_empty_notice_on_stderr(self, cli_runner: CliRunner) -> None:
        for command in ("all", "finished"):
            result = cli_runner.invoke(cli, [command])
            assert result.exit_code == 0
            assert result.stdout == ""
            assert result.stderr == f"{NO_TASKS_MESSAGE}\n"

    def test_empty_pending_on_stdout(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [])
        assert result.stdout == f"{NO_PENDING_MESSAGE}\n"
        assert result.stderr == ""

    def test_empty_json_stays_on_stdout(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "finished"])
        assert json.loads(result.stdout)["data"]["count"] == 0

    def test_quiet_titles(self, cli_runner: CliRunner) -> None:
        _add(cli_runner, "a", "b")
        result = cli_runner.invoke(cli, ["-q", "all"])
        assert result.output.splitlines() == ["a", "b"]


@pytest.mark.usefixtures("_isolated_root")
class TestDoneCommand:
    def test_done(self, cli_runner: CliRunner) -> None:
        _add(cli_runner, "buy milk")
        result = cli_runner.invoke(cli, ["--json", "done", "buy milk"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["data"]["done"] is True

    def test_done_twice(self, cli_runner: CliRunner) -> None:
        _add(cli_runner, "buy milk")
        assert cli_runner.invoke(cli, ["done", "buy milk"]).exit_code == 0
        assert cli_runner.invoke(cli, ["done", "buy milk"]).exit_code == 0

    def test_not_found(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "done", "ghost"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["ok"] is False
        assert data["error"]["code"] == "NOT_FOUND"


@pytest.mark.usefixtures("_isolated_root")
class TestRmCommand:
    def test_rm(self, cli_runner: CliRunner) -> None:
        _add(cli_runner, "buy milk")
        result = cli_runner.invoke(cli, ["rm", "buy milk"])
        assert result.exit_code == 0
        assert NO_TASKS_MESSAGE in cli_runner.invoke(cli, ["all"]).output

    def test_not_found(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "rm", "nonexistent"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["error"]["code"] == "NOT_FOUND"

    def test_not_found_human(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["rm", "nonexistent"])
        assert result.exit_code == 1
        assert "ERROR" in result.output
        assert "nonexistent" in result.output


class TestStoreConfiguration:
    def test_store_created_under_root(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        _add(cli_runner, "x")
        assert (tmp_path / ".tasker" / "tasker.db").exists()

    def test_url_from_config_file(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        db = tmp_path / "data" / "mine.db"
        (tmp_path / "tasker.toml").write_text(f'[store]\nurl = "sqlite:///{db}"\n')
        monkeypatch.chdir(tmp_path)
        _add(cli_runner, "x")
        assert db.exists()
        assert not (tmp_path / ".tasker").exists()

    def test_unreachable_store_exits_nonzero(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("TASKER_STORE__URL", f"sqlite:///{blocker / 'x' / 'tasker.db'}")
        result = cli_runner.invoke(cli, ["all"])
        assert result.exit_code == 1

    def test_sql_echo_keeps_stdout_clean(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "tasker.toml").write_text("[store]\necho = true\n")
        monkeypatch.chdir(tmp_path)
        result = cli_runner.invoke(cli, ["--json", "add", "buy milk"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["title"] == "buy milk"
        assert "INSERT INTO tasks" in result.stderr
