# tests/test_commands.py

from __future__ import annotations

from datetime import date

from task_keeper.cli.commands import INVALID_COMMAND, CommandRegistry, registry
from task_keeper.connectors.console_connector import run_console_loop
from task_keeper.core.state import AppState

from .fakes import ScriptedConsole


def _run(state: AppState, *answers: str) -> ScriptedConsole:
    console = ScriptedConsole(answers)
    run_console_loop(state, ask=console.ask, emit=console.emit)
    return console


def test_registry_routes_exact_case_sensitive_words(state: AppState) -> None:
    reg = CommandRegistry()
    called = {"ping": 0}

    def ping(state, ask, emit):
        called["ping"] += 1
        return "pong"

    reg.register("ping", ping, "ping")

    assert reg.handle(state, "ping", ask=input, emit=print) == "pong"
    assert reg.handle(state, "ping extra words", ask=input, emit=print) == "pong"
    assert reg.handle(state, "Ping", ask=input, emit=print) == INVALID_COMMAND
    assert reg.handle(state, "", ask=input, emit=print) == INVALID_COMMAND
    assert called["ping"] == 2


def test_help_lists_commands() -> None:
    text = registry.build_help()
    for name in ("add", "view", "remove", "update", "exit"):
        assert f"  {name} - " in text


def test_view_empty(state: AppState) -> None:
    console = _run(state, "view", "exit")
    assert "No tasks yet." in console.lines


def test_invalid_command_reprompts(state: AppState) -> None:
    console = _run(state, "bogus", "EXIT", "exit")
    assert console.lines.count("Invalid command.") == 2
    assert console.prompts.count("Enter command: ") == 3


def test_add_then_view_pay_rent(state: AppState) -> None:
    console = _run(state, "add", "Pay rent", "Monthly rent", "1", "2020-01-01", "view", "exit")

    assert "Task added!" in console.lines
    out = console.output
    assert "ID: 1" in out
    assert "Title: Pay rent" in out
    assert "Description: Monthly rent" in out
    assert "Priority: 1" in out
    assert "Due Date: Wed Jan 01 2020" in out
    assert "Completed: No" in out

    (task,) = state.task_store.list_tasks()
    assert task.due_date == date(2020, 1, 1)


def test_add_reprompts_on_bad_priority_and_date(state: AppState) -> None:
    console = _run(state, "add", "t", "d", "abc", "5", "2", "01/02/2030", "2030-02-01", "exit")

    assert "Task added!" in console.lines
    assert sum(1 for line in console.lines if line.startswith("Invalid input:")) == 3
    (task,) = state.task_store.list_tasks()
    assert task.priority == 2
    assert task.due_date == date(2030, 2, 1)


def test_update_flow(state: AppState) -> None:
    console = _run(
        state,
        "add", "a", "", "1", "2030-01-01",
        "update", "1", "priority", "2",
        "update", "1", "priority", "abc",
        "update", "1", "due_date", "2031-01-01",
        "update", "9", "title", "x",
        "update", "8", "owner", "me",
        "update", "1", "completed", "true",
        "exit",
    )

    assert console.lines.count("Task updated!") == 2
    assert any(line.startswith("Task not updated:") for line in console.lines)
    assert "Due date updates are not supported." in console.lines
    assert "No task with ID 9." in console.lines
    assert "No task with ID 8." in console.lines

    (task,) = state.task_store.list_tasks()
    assert task.priority == 2
    assert task.completed is True
    assert task.due_date == date(2030, 1, 1)


def test_remove_flow(state: AppState) -> None:
    console = _run(
        state,
        "add", "a", "", "3", "2030-01-01",
        "remove", "x", "9",
        "remove", "1",
        "view",
        "exit",
    )

    assert "No task with ID 9." in console.lines
    assert "Task removed!" in console.lines
    assert console.lines[-1] == "No tasks yet."


def test_eof_mid_command_ends_loop(state: AppState) -> None:
    console = _run(state, "add", "only a title")
    assert "Task added!" not in console.lines
    assert state.task_store.list_tasks() == []


def test_handler_crash_is_reported_and_loop_continues(state: AppState, monkeypatch) -> None:
    def boom():
        raise RuntimeError("boom")

    monkeypatch.setattr(state.task_store, "list_tasks", boom)
    console = _run(state, "view", "bogus", "exit")

    assert "Internal error while handling a command." in console.lines
    assert "Invalid command." in console.lines
