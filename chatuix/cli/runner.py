"""CLI runner for ChatUIX."""

from __future__ import annotations

import json
from typing import Any, NamedTuple, Optional

from loguru import logger
from rich.console import Console
from rich.pretty import Pretty

from chatuix.cli.configuration import load_theme
from chatuix.cli.render import render_components
from chatuix.core.messages import Message
from chatuix.core.session import ChatSession, TurnResult
from chatuix.utils.misc import make_human_readable_values

HELP_TEXT = (
    "Type a message, or:\n"
    "  /action <name> [value | json]   trigger a widget action\n"
    "  /context                        show the conversation context\n"
    "  (empty line)                    quit"
)


class Command(NamedTuple):
    """A parsed line of user input."""

    kind: str  # "text" | "action" | "context" | "help" | "quit"
    text: str = ""
    action: str = ""
    payload: Any = None


def parse_command(line: str) -> Command:
    """Parse one input line.

    ``/action name 3`` sends ``{"value": "3"}``; ``/action name {...}`` sends
    the JSON as-is; ``/action name`` sends no payload.

    Raises:
        ValueError: If the action name is missing or the JSON is invalid.
    """
    stripped = line.strip()
    if not stripped:
        return Command(kind="quit")
    if stripped in {"/context", "/ctx"}:
        return Command(kind="context")
    if stripped in {"/help", "/?"}:
        return Command(kind="help")
    if stripped == "/action" or stripped.startswith("/action "):
        parts = stripped.split(maxsplit=2)
        if len(parts) < 2:
            raise ValueError("Usage: /action <name> [value | json]")
        name = parts[1]
        rest = parts[2].strip() if len(parts) > 2 else ""
        payload: Any = None
        if rest.startswith("{") or rest.startswith("["):
            try:
                payload = json.loads(rest)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON payload: {e}") from e
        elif rest:
            payload = {"value": rest}
        return Command(kind="action", action=name, payload=payload)
    return Command(kind="text", text=stripped)


def _render_message(message: Message, console: Console, theme: dict[str, str]) -> None:
    """Print an assistant message and its components."""
    console.print()
    console.print(message.content, style=theme["assistant"], markup=False)
    for renderable in render_components(message.components or [], theme):
        console.print(renderable)


def _render_turn(
    result: Optional[TurnResult], console: Console, theme: dict[str, str]
) -> None:
    if result is None:
        return
    if result.failed:
        console.print()
        console.print(result.message.content, style=theme["error"], markup=False)
        return
    _render_message(result.message, console, theme)


def run_cli(
    custom_theme_path: Optional[str] = None,
    greeting: bool = True,
    console: Optional[Console] = None,
) -> ChatSession:
    """Run the CLI interaction loop and return the finished session."""
    console = console or Console()
    theme = load_theme(custom_theme_path)
    session = ChatSession.create(greeting=greeting)

    console.rule("ChatUIX", style=theme["intro"])
    console.print(HELP_TEXT, style=theme["info"], markup=False)
    for message in session.messages:
        _render_message(message, console, theme)

    while True:
        console.print()
        console.print("you>", style=theme["user-prompt"], end=" ")
        line = console.input()

        try:
            command = parse_command(line)
        except ValueError as e:
            console.print(str(e), style=theme["error"], markup=False)
            continue

        if command.kind == "quit":
            break
        if command.kind == "help":
            console.print(HELP_TEXT, style=theme["info"], markup=False)
        elif command.kind == "context":
            console.print(Pretty(make_human_readable_values(session.context)))
        elif command.kind == "action":
            logger.debug(f"CLI action '{command.action}' with {command.payload!r}")
            _render_turn(
                session.send_action(command.action, command.payload), console, theme
            )
        else:
            _render_turn(session.send_text(command.text), console, theme)

    console.rule(f"Session ended after {session.turns} turns", style=theme["outtro"])
    return session
