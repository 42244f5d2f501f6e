"""Tests for rich rendering of components."""

import io

import pytest
from rich.console import Console

from chatuix.cli.configuration import DEFAULT_THEME
from chatuix.cli.render import render_component, render_components
from chatuix.core.dispatcher import dispatch


def _text(renderables) -> str:
    console = Console(record=True, file=io.StringIO(), width=120)
    for r in renderables:
        console.print(r)
    return console.export_text()


@pytest.mark.unit
@pytest.mark.parametrize(
    "text, expected",
    [
        ("show me a table", ["Product A", "Units Sold", "Q4 2024 Sales Performance"]),
        ("bar chart", ["Monthly Revenue 2024", "█", "6000"]),
        ("product cards", ["Premium Plan", "/action learn_more_premium"]),
        ("survey", ["How would you rate", "/action submit_rating", "Excellent"]),
        ("sign up", ["Full Name", "[name: text]", "/action submit_signup"]),
        ("hello", ["[📋 Show Data Table]", "/action show_table"]),
    ],
)
def test_text_replies_render(text, expected) -> None:
    """Every component of the canned replies renders to readable text."""
    reply = dispatch([{"role": "user", "content": text}], {})
    out = _text(render_components(reply.components, DEFAULT_THEME))
    for snippet in expected:
        assert snippet in out


@pytest.mark.unit
def test_plan_list_renders_bullets() -> None:
    """Lists render one bullet per item."""
    reply = dispatch([], {}, "learn_more_basic")
    out = _text(render_components(reply.components, DEFAULT_THEME))
    assert "• 10GB storage" in out
    assert "/action buy_basic" in out


@pytest.mark.unit
def test_unknown_component_type() -> None:
    """Objects that are not components are rejected."""
    with pytest.raises(TypeError):
        render_component(object(), DEFAULT_THEME)
