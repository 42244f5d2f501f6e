"""Markdown renderings of components and transcripts for the chatbot."""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from chatuix.core.components import (
    Button,
    Card,
    Chart,
    Form,
    Input,
    ItemList,
    Select,
    Table,
    UIComponent,
)
from chatuix.core.messages import Message
from chatuix.utils.misc import format_number

BAR_WIDTH = 20


def _cell(value: str) -> str:
    return str(value).replace("|", "\\|").replace("\n", " ")


def table_markdown(component: Table) -> str:
    """Render a table as a markdown pipe table."""
    lines = []
    if component.caption:
        lines.append(f"**{component.caption}**\n")
    lines.append("| " + " | ".join(_cell(h) for h in component.headers) + " |")
    lines.append("|" + "---|" * len(component.headers))
    for row in component.rows:
        lines.append("| " + " | ".join(_cell(c) for c in row) + " |")
    return "\n".join(lines)


def chart_markdown(component: Chart) -> str:
    """Render a chart as text bars in a code block."""
    values = [float(p.value) for p in component.data]
    peak = max((abs(v) for v in values), default=0.0) or 1.0
    width = max((len(p.name) for p in component.data), default=0)
    bars = [
        f"{p.name:<{width}} {'█' * max(1, round(abs(v) / peak * BAR_WIDTH))}"
        f" {format_number(v)}"
        for p, v in zip(component.data, values)
    ]
    title = f"**{component.title or 'Chart'}** ({component.chart_type} chart)"
    return title + "\n```\n" + "\n".join(bars) + "\n```"


def card_markdown(component: Card) -> str:
    """Render a card as a block quote."""
    body = [f"> **{component.title}**", ">"]
    body.extend(f"> {line}" if line else ">" for line in component.content.split("\n"))
    if component.actions:
        labels = " · ".join(f"`{a.label}`" for a in component.actions)
        body.extend([">", f"> {labels}"])
    return "\n".join(body)


def list_markdown(component: ItemList) -> str:
    """Render a bulleted or numbered list."""
    if component.ordered:
        return "\n".join(f"{i}. {item}" for i, item in enumerate(component.items, 1))
    return "\n".join(f"- {item}" for item in component.items)


def component_markdown(component: UIComponent) -> str:
    """Render any component for the transcript.

    Interactive components only get a short hint here; their controls are
    drawn under the chat.
    """
    if isinstance(component, Table):
        return table_markdown(component)
    if isinstance(component, Chart):
        return chart_markdown(component)
    if isinstance(component, Card):
        return card_markdown(component)
    if isinstance(component, ItemList):
        return list_markdown(component)
    if isinstance(component, Button):
        return f"🔘 *{component.label}*"
    if isinstance(component, Input):
        return f"✏️ *{component.label}*"
    if isinstance(component, Select):
        return f"🔽 *{component.label}*"
    if isinstance(component, Form):
        names = ", ".join(f.label for f in component.fields)
        return f"📝 *Form: {names}*"
    raise TypeError(f"Unsupported component: {type(component).__name__}")


def message_markdown(message: Message) -> str:
    """Render a message's prose followed by its components."""
    parts = [message.content]
    parts.extend(component_markdown(c) for c in message.components or [])
    return "\n\n".join(parts)


def to_chatbot_messages(messages: Sequence[Message]) -> List[Dict[str, Any]]:
    """Convert a transcript into the chatbot's role/content message dicts."""
    return [{"role": m.role, "content": message_markdown(m)} for m in messages]
