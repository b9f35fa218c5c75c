# tests/test_main.py

from __future__ import annotations

import json

import pytest

from todo_cli.cli import main as cli_main


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch) -> None:
    # setup_logging() replaces root handlers; keep pytest's capture intact.
    monkeypatch.setattr(cli_main, "setup_logging", lambda **_: None)


def test_add_list_round_trip(settings, capsys) -> None:
    rc = cli_main.main(["add", "Write report", "Quarterly", "2024-05-01 09:30", "work"], settings=settings)
    assert rc == 0
    assert capsys.readouterr().out.strip() == "Task 'Write report' added successfully"

    data = json.loads(settings.tasks_path.read_text("utf-8"))
    assert data["Write report"]["status"] == "Active"

    assert cli_main.main(["list"], settings=settings) == 0
    assert capsys.readouterr().out.startswith("Write report: Quarterly (on) - work - 2024-05-01 09:30:00")


def test_errors_go_to_stderr_with_status_1(settings, capsys) -> None:
    assert cli_main.main(["done", "Missing"], settings=settings) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.strip() == "Error: Task with title 'Missing' not found"


def test_duplicate_add_reports_error(settings, capsys) -> None:
    argv = ["add", "t", "d", "2024-05-01 09:30", "c"]
    assert cli_main.main(argv, settings=settings) == 0
    assert cli_main.main(argv, settings=settings) == 1
    assert "Error: Task with title 't' already exists" in capsys.readouterr().err


def test_bad_predicate_is_reported_not_empty(settings, capsys) -> None:
    assert cli_main.main(["select", "not a predicate"], settings=settings) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.strip() == "Error filtering tasks: Invalid predicate format"


def test_file_option_overrides_settings(settings, tmp_path, capsys) -> None:
    other = tmp_path / "nested" / "other.json"
    rc = cli_main.main(["--file", str(other), "add", "t", "d", "2024-05-01 09:30", "c"], settings=settings)
    assert rc == 0
    assert other.exists()
    assert not settings.tasks_path.exists()


def test_update_reads_stdin(settings, monkeypatch, capsys) -> None:
    cli_main.main(["add", "t", "old", "2024-05-01 09:30", "c"], settings=settings)
    answers = iter(["new description", "", "", "d"])
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(answers))

    assert cli_main.main(["update", "t"], settings=settings) == 0
    out = capsys.readouterr().out
    assert "Updating task: t" in out
    assert "Task 't' updated successfully" in out

    data = json.loads(settings.tasks_path.read_text("utf-8"))
    assert data["t"]["description"] == "new description"
    assert data["t"]["status"] == "Done"


def test_unexpected_error_is_internal_error(settings, monkeypatch, capsys) -> None:
    def boom(**_kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(cli_main, "create_initial_state", boom)
    assert cli_main.main(["list"], settings=settings) == 1
    assert "Internal error" in capsys.readouterr().err


def test_missing_command_is_usage_error(settings) -> None:
    with pytest.raises(SystemExit) as exc:
        cli_main.main([], settings=settings)
    assert exc.value.code == 2
