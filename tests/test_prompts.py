import io

import readchar
import typer
from rich.console import Console

from gitgrab.core.prompts import TerminalPrompter
from gitgrab.core.validation import validate_folder_name


def keys(monkeypatch, *pressed) -> None:
    it = iter(pressed)
    monkeypatch.setattr(readchar, "readkey", lambda: next(it))


CHOICES = [("a - first", "a"), ("b - second", "b"), ("c - third", "c")]


def test_select_many_space_toggles(monkeypatch, rec_console) -> None:
    keys(monkeypatch, " ", readchar.key.DOWN, readchar.key.DOWN, " ", readchar.key.ENTER)
    assert TerminalPrompter(console=rec_console).select_many("pick", CHOICES) == ["a", "c"]


def test_select_many_toggle_all_and_wrap(monkeypatch, rec_console) -> None:
    keys(monkeypatch, "a", readchar.key.UP, " ", readchar.key.ENTER)
    assert TerminalPrompter(console=rec_console).select_many("pick", CHOICES) == ["a", "b"]


def test_select_many_escape_selects_nothing(monkeypatch, rec_console) -> None:
    keys(monkeypatch, " ", readchar.key.ESC)
    assert TerminalPrompter(console=rec_console).select_many("pick", CHOICES) == []


def test_select_many_without_choices(rec_console) -> None:
    assert TerminalPrompter(console=rec_console).select_many("pick", []) == []


def test_ask_repeats_until_valid(monkeypatch, rec_console) -> None:
    answers = iter(["", "a/b", "good"])
    monkeypatch.setattr(typer, "prompt", lambda *a, **kw: next(answers))
    assert TerminalPrompter(console=rec_console).ask("name?", validate=validate_folder_name) == "good"
    text = rec_console.export_text()
    assert "Folder name cannot be empty" in text
    assert "path separators" in text


def test_confirm_delegates_to_typer(monkeypatch, rec_console) -> None:
    seen = {}

    def fake_confirm(message, default):
        seen.update(message=message, default=default)
        return False

    monkeypatch.setattr(typer, "confirm", fake_confirm)
    assert TerminalPrompter(console=rec_console).confirm("clear?", default=True) is False
    assert seen == {"message": "clear?", "default": True}


def test_select_many_renders_bracketed_labels(monkeypatch) -> None:
    out = Console(file=io.StringIO(), force_terminal=True, width=120)
    keys(monkeypatch, " ", readchar.key.ENTER)
    choices = [("weird - uses [/] and [bold] literally", "w")]
    assert TerminalPrompter(console=out).select_many("pick [x]", choices) == ["w"]
