"""Tests for the CLI runner and its command parsing."""

import io

import pytest
from rich.console import Console

from chatuix.cli.configuration import DEFAULT_THEME, load_theme
from chatuix.cli.runner import parse_command, run_cli


def _scripted_console(lines):
    """A recording console whose input() replays `lines`."""
    console = Console(record=True, file=io.StringIO(), width=120)
    feed = iter(lines)
    console.input = lambda *args, **kwargs: next(feed)
    return console


@pytest.mark.unit
def test_can_import() -> None:
    """Ensure the CLI runner can be imported."""
    assert callable(run_cli)


@pytest.mark.unit
@pytest.mark.parametrize(
    "line, kind, action, payload",
    [
        ("", "quit", "", None),
        ("   ", "quit", "", None),
        ("/context", "context", "", None),
        ("/help", "help", "", None),
        ("/action show_table", "action", "show_table", None),
        ("/action set_num1 42", "action", "set_num1", {"value": "42"}),
        (
            '/action submit_signup {"name": "Ann"}',
            "action",
            "submit_signup",
            {"name": "Ann"},
        ),
        ("show me a chart", "text", "", None),
    ],
)
def test_parse_command(line, kind, action, payload) -> None:
    """Lines map to text, action and meta commands."""
    command = parse_command(line)
    assert command.kind == kind
    assert command.action == action
    assert command.payload == payload


@pytest.mark.unit
def test_parse_command_text_is_stripped() -> None:
    """Free text keeps its words without surrounding spaces."""
    assert parse_command("  Show Me A Table ").text == "Show Me A Table"


@pytest.mark.unit
@pytest.mark.parametrize("line", ["/action", "/action x {bad json"])
def test_parse_command_errors(line) -> None:
    """Missing names and invalid JSON are reported as ValueError."""
    with pytest.raises(ValueError):
        parse_command(line)


@pytest.mark.unit
def test_run_cli_calculator_session() -> None:
    """A scripted calculator conversation renders the result and exits."""
    console = _scripted_console(
        [
            "calculator",
            "/action set_num1 2",
            "/action set_num2 5",
            "/action calculate_add",
            "/context",
            "/action x {oops",
            "",
        ]
    )
    session = run_cli(console=console)

    assert session.turns == 4
    assert session.messages[-1].content == "Result: 2 + 5 = 7"
    out = console.export_text()
    assert "Hello! I'm ChatUIX" in out
    assert "Here's a simple calculator" in out
    assert "Result: 2 + 5 = 7" in out
    assert "Calculation Result" in out
    assert "Invalid JSON payload" in out
    assert "Session ended after 4 turns" in out


@pytest.mark.unit
def test_run_cli_shows_fallback_on_failure() -> None:
    """Failed turns print the fixed error reply."""
    console = _scripted_console(['/action select_time {"value": "10:00"}', ""])
    session = run_cli(console=console, greeting=False)
    assert session.messages[-1].content == "An error occurred processing your request."
    assert "An error occurred processing your request." in console.export_text()


@pytest.mark.unit
def test_load_theme_defaults() -> None:
    """No path, or a missing file, gives the default theme."""
    assert load_theme() == DEFAULT_THEME
    assert load_theme("/nonexistent/theme.yml") == DEFAULT_THEME


@pytest.mark.unit
def test_load_theme_merges_over_defaults(tmp_path) -> None:
    """YAML theme entries override defaults and gaps are filled."""
    path = tmp_path / "theme.yml"
    path.write_text("theme:\n  assistant: bold magenta\n", encoding="utf-8")
    theme = load_theme(str(path))
    assert theme["assistant"] == "bold magenta"
    assert theme["error"] == DEFAULT_THEME["error"]


@pytest.mark.unit
def test_load_theme_skips_unknown_roles_and_bad_styles(tmp_path) -> None:
    """Only known roles with parseable rich styles override the defaults."""
    path = tmp_path / "theme.yml"
    path.write_text(
        "theme:\n"
        "  assistant: italic yellow\n"
        "  error: not-a-colour\n"
        "  banner: bold\n"
        "  info: 3\n",
        encoding="utf-8",
    )
    theme = load_theme(str(path))
    assert theme == {**DEFAULT_THEME, "assistant": "italic yellow"}


@pytest.mark.unit
@pytest.mark.parametrize("text", ["- a\n- b\n", "theme: [bold]\n", "theme: {a: [\n"])
def test_load_theme_malformed_file_gives_defaults(tmp_path, text) -> None:
    """Files that aren't a theme mapping, or aren't YAML, fall back to defaults."""
    path = tmp_path / "theme.yml"
    path.write_text(text, encoding="utf-8")
    assert load_theme(str(path)) == DEFAULT_THEME
