# tests/test_config.py

from __future__ import annotations

from pathlib import Path

from todo_cli.config import Settings


def _clear_env(monkeypatch) -> None:
    for name in ("APP_NAME", "LOG_LEVEL", "LOG_FILE", "DATA_DIR", "TASKS_PATH"):
        monkeypatch.delenv(f"TODO_{name}", raising=False)


def test_defaults(monkeypatch) -> None:
    _clear_env(monkeypatch)
    s = Settings.from_env()
    assert s.app_name == "todo"
    assert s.log_level == "WARNING"
    assert s.log_file is None
    assert s.data_dir == Path(".")
    assert s.tasks_path == Path("tasks.json")


def test_tasks_path_follows_data_dir(monkeypatch, tmp_path: Path) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("TODO_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TODO_LOG_LEVEL", "debug")
    s = Settings.from_env()
    assert s.tasks_path == tmp_path / "tasks.json"
    assert s.log_level == "DEBUG"


def test_explicit_paths(monkeypatch, tmp_path: Path) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("TODO_TASKS_PATH", str(tmp_path / "mine.json"))
    monkeypatch.setenv("TODO_LOG_FILE", str(tmp_path / "todo.log"))
    monkeypatch.setenv("TODO_APP_NAME", "   ")
    s = Settings.from_env()
    assert s.tasks_path == tmp_path / "mine.json"
    assert s.log_file == tmp_path / "todo.log"
    assert s.app_name == "todo"
