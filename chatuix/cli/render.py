"""Rich renderables for UI components shown in the terminal."""

from __future__ import annotations

from typing import Iterable, List

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table as RichTable
from rich.text import Text

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
from chatuix.utils.misc import format_number

BAR_WIDTH = 30


def _action_hint(action: str, payload_hint: str = "", style: str = "cyan") -> Text:
    hint = f"/action {action}" + (f" {payload_hint}" if payload_hint else "")
    return Text(f"  → {hint}", style=style)


def render_table(component: Table) -> RenderableType:
    """Render a table component."""
    table = RichTable(title=component.caption, show_lines=False)
    for header in component.headers:
        table.add_column(header)
    for row in component.rows:
        table.add_row(*row)
    return table


def render_chart(component: Chart) -> RenderableType:
    """Render a chart as horizontal text bars scaled to the largest value."""
    values = [float(p.value) for p in component.data]
    peak = max((abs(v) for v in values), default=0.0) or 1.0
    lines: List[Text] = []
    for point, value in zip(component.data, values):
        bar = "█" * max(1, round(abs(value) / peak * BAR_WIDTH))
        lines.append(Text(f"{point.name:>8} {bar} {format_number(value)}"))
    title = f"{component.title or 'Chart'} ({component.chart_type})"
    return Panel(Group(*lines), title=title, expand=False)


def render_card(component: Card, action_style: str = "cyan") -> RenderableType:
    """Render a card with its action hints."""
    body: List[RenderableType] = [Text(component.content)]
    for action in component.actions or []:
        body.append(Text(f"[{action.label}]", style="bold"))
        body.append(_action_hint(action.action, style=action_style))
    return Panel(Group(*body), title=component.title, expand=False)


def render_list(component: ItemList) -> RenderableType:
    """Render a bulleted or numbered list."""
    lines = [
        Text(f"{i}. {item}" if component.ordered else f"• {item}")
        for i, item in enumerate(component.items, start=1)
    ]
    return Group(*lines)


def render_select(component: Select, action_style: str = "cyan") -> RenderableType:
    """Render a select as an option list and the command that submits it."""
    lines: List[RenderableType] = [Text(component.label, style="bold")]
    for option in component.options:
        lines.append(Text(f"  {option.value:<12} {option.label}"))
    lines.append(_action_hint(component.action, '{"value": "<option>"}', action_style))
    return Group(*lines)


def render_input(component: Input, action_style: str = "cyan") -> RenderableType:
    """Render a single input prompt."""
    placeholder = f" (e.g. {component.placeholder})" if component.placeholder else ""
    return Group(
        Text(f"{component.label}{placeholder}", style="bold"),
        _action_hint(component.action, '{"value": "<text>"}', action_style),
    )


def render_form(component: Form, action_style: str = "cyan") -> RenderableType:
    """Render a form's fields and the command that submits it."""
    lines: List[RenderableType] = []
    for field in component.fields:
        placeholder = f" (e.g. {field.placeholder})" if field.placeholder else ""
        lines.append(Text(f"{field.label} [{field.name}: {field.type}]{placeholder}"))
    fields_hint = "{" + ", ".join(f'"{f.name}": "..."' for f in component.fields) + "}"
    lines.append(Text(f"[{component.submit_label}]", style="bold"))
    lines.append(_action_hint(component.action, fields_hint, action_style))
    return Panel(Group(*lines), title="Form", expand=False)


def render_button(component: Button, action_style: str = "cyan") -> RenderableType:
    """Render a button label and its command."""
    style = "bold red" if component.variant == "danger" else "bold"
    return Group(
        Text(f"[{component.label}]", style=style),
        _action_hint(component.action, style=action_style),
    )


def render_component(component: UIComponent, theme: dict) -> RenderableType:
    """Render any component variant."""
    action_style = theme.get("action", "cyan")
    if isinstance(component, Table):
        return render_table(component)
    if isinstance(component, Chart):
        return render_chart(component)
    if isinstance(component, Card):
        return render_card(component, action_style)
    if isinstance(component, ItemList):
        return render_list(component)
    if isinstance(component, Select):
        return render_select(component, action_style)
    if isinstance(component, Input):
        return render_input(component, action_style)
    if isinstance(component, Form):
        return render_form(component, action_style)
    if isinstance(component, Button):
        return render_button(component, action_style)
    raise TypeError(f"Unsupported component: {type(component).__name__}")


def render_components(
    components: Iterable[UIComponent], theme: dict
) -> List[RenderableType]:
    """Render components in order."""
    return [render_component(c, theme) for c in components]
