"""Tests for free-text routing in the dispatcher."""

import pytest

from chatuix.core.components import Button, Card, Chart, Form, Input, Select, Table
from chatuix.core.constants import ERROR_REPLY
from chatuix.core.dispatcher import EmptyHistoryError, dispatch, respond
from chatuix.core.dispatcher.text_replies import TEXT_RULES
from chatuix.core.messages import Message


@pytest.mark.unit
def test_default_reply_offers_three_quick_actions(history) -> None:
    """Text with no keyword gets the quick-action buttons and the same context."""
    ctx = {"foo": 1}
    reply = dispatch(history("hello there"), ctx)

    assert reply.content.startswith("I can help you with various interactive UI")
    assert [c.action for c in reply.components] == [
        "show_table",
        "show_chart",
        "show_form",
    ]
    assert all(isinstance(c, Button) for c in reply.components)
    assert reply.context == ctx


@pytest.mark.unit
@pytest.mark.parametrize(
    "text, expected_type",
    [
        ("please register me", Form),
        ("give me some data", Table),
        ("visualize this", Chart),
        ("show product cards", Card),
        ("I want to give feedback", Select),
        ("open the calculator", Input),
        ("book an appointment", Select),
    ],
)
def test_keywords_route_to_their_reply(history, text, expected_type) -> None:
    """Each keyword set picks its reply."""
    reply = dispatch(history(text), {})
    assert isinstance(reply.components[0], expected_type)


@pytest.mark.unit
def test_matching_is_case_insensitive(history) -> None:
    """Upper-case keywords still match."""
    reply = dispatch(history("SHOW ME A CHART"), {})
    assert isinstance(reply.components[0], Chart)


@pytest.mark.unit
def test_earlier_rule_wins(history) -> None:
    """When table and chart keywords both appear, the table rule wins."""
    reply = dispatch(history("a chart and a table"), {})
    assert isinstance(reply.components[0], Table)
    assert reply.components[0].caption == "Q4 2024 Sales Performance"


@pytest.mark.unit
def test_substring_matching(history) -> None:
    """Keywords match inside longer words ("information" contains "form")."""
    reply = dispatch(history("any information about charts?"), {})
    assert isinstance(reply.components[0], Form)
    assert reply.context == {"formType": "signup"}


@pytest.mark.unit
def test_only_last_message_is_read(history) -> None:
    """Earlier messages don't influence routing."""
    reply = dispatch(history("show me a table", "hi"), {})
    assert isinstance(reply.components[0], Button)


@pytest.mark.unit
def test_history_of_message_models() -> None:
    """History may hold `Message` models as well as dicts."""
    reply = dispatch([Message.user("Chart please")], {})
    assert isinstance(reply.components[0], Chart)


@pytest.mark.unit
@pytest.mark.parametrize(
    "text, chart_type",
    [("show a pie chart", "pie"), ("line graph", "line"), ("a chart", "bar")],
)
def test_chart_type_follows_text(history, text, chart_type) -> None:
    """'pie' or 'line' in the text picks the chart type, otherwise bar."""
    reply = dispatch(history(text), {})
    chart = reply.components[0]
    assert chart.chart_type == chart_type
    assert reply.content == (
        f"Here's a {chart_type} chart visualizing monthly revenue data:"
    )
    assert [p.value for p in chart.data] == [4000, 3000, 5000, 4500, 6000, 5500]


@pytest.mark.unit
def test_signup_form_fields(history) -> None:
    """The signup form asks for name, email and password."""
    reply = dispatch(history("sign up form"), {"keep": True})
    form = reply.components[0]
    assert [f.name for f in form.fields] == ["name", "email", "password"]
    assert form.action == "submit_signup"
    assert form.submit_label == "Sign Up"
    assert reply.context == {"keep": True, "formType": "signup"}


@pytest.mark.unit
def test_calculator_resets_operands(history) -> None:
    """Starting the calculator replaces any earlier operands."""
    reply = dispatch(history("calculate"), {"calculator": {"num1": 9}})
    assert reply.context == {"calculator": {}}
    types = [c.type for c in reply.components]
    assert types == ["input", "input", "button", "button"]


@pytest.mark.unit
def test_booking_starts_at_step_one(history) -> None:
    """The booking wizard starts at step 1 with five dates."""
    reply = dispatch(history("schedule a meeting"), {})
    assert reply.context == {"bookingFlow": {"step": 1}}
    assert len(reply.components[0].options) == 5
    assert reply.components[0].action == "select_date"


@pytest.mark.unit
def test_feedback_offers_rating_and_comment(history) -> None:
    """The survey has a five-option rating select and a comment input."""
    reply = dispatch(history("quick survey"), {})
    select, comment = reply.components
    assert [o.value for o in select.options] == ["5", "4", "3", "2", "1"]
    assert select.action == "submit_rating"
    assert comment.action == "submit_comment"


@pytest.mark.unit
def test_rules_are_in_priority_order() -> None:
    """Seven keyword rules are checked before the default reply."""
    assert len(TEXT_RULES) == 7


@pytest.mark.unit
def test_empty_history_raises_and_respond_falls_back() -> None:
    """Text mode needs a message; the boundary turns that into the fallback."""
    with pytest.raises(EmptyHistoryError):
        dispatch([], {})

    reply = respond([], {"a": 1})
    assert reply.failed
    assert reply.content == ERROR_REPLY
    assert reply.components == []


@pytest.mark.unit
def test_dispatch_is_deterministic(history) -> None:
    """Identical inputs give identical outputs."""
    ctx = {"calculator": {"num1": 1.0}}
    first = dispatch(history("show product cards"), ctx)
    second = dispatch(history("show product cards"), ctx)
    assert first == second
    assert first.to_dict() == second.to_dict()


@pytest.mark.unit
def test_input_context_is_not_mutated(history) -> None:
    """The context passed in is left as it was."""
    ctx = {"bookingFlow": {"step": 3}}
    dispatch(history("booking please"), ctx)
    assert ctx == {"bookingFlow": {"step": 3}}
