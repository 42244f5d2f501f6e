"""Tests for the ChatSession shell."""

import pytest

from chatuix.core.components import Chart, Input
from chatuix.core.constants import ERROR_REPLY, GREETING_MSG
from chatuix.core.session import ChatSession


@pytest.mark.unit
def test_create_seeds_greeting() -> None:
    """New sessions start with the assistant greeting and an empty context."""
    session = ChatSession.create()
    assert len(session.messages) == 1
    assert session.messages[0].role == "assistant"
    assert session.messages[0].content == GREETING_MSG
    assert session.context == {}
    assert session.turns == 0


@pytest.mark.unit
def test_create_without_greeting() -> None:
    """The greeting can be left out."""
    assert ChatSession.create(greeting=False).messages == []


@pytest.mark.unit
@pytest.mark.parametrize("text", ["", "   ", "\n"])
def test_blank_text_is_ignored(text) -> None:
    """Blank input adds nothing to the transcript."""
    session = ChatSession.create()
    assert session.send_text(text) is None
    assert len(session.messages) == 1


@pytest.mark.unit
def test_send_text_appends_user_and_reply() -> None:
    """A text turn appends the user message then the assistant reply."""
    session = ChatSession.create()
    result = session.send_text("Show me a chart")
    assert result is not None
    assert not result.failed
    assert [m.role for m in session.messages] == ["assistant", "user", "assistant"]
    assert session.messages[1].content == "Show me a chart"
    assert result.message is session.messages[-1]
    assert isinstance(session.latest_components()[0], Chart)
    assert session.turns == 1


@pytest.mark.unit
def test_send_action_labels_user_message() -> None:
    """Actions are recorded as readable user messages."""
    session = ChatSession.create()
    session.send_action("show_table")
    session.send_action("set_num1", {"value": "4"})
    users = [m.content for m in session.messages if m.role == "user"]
    assert users == [
        "Action: show_table",
        'Action: set_num1 with data: {"value":"4"}',
    ]
    assert session.context == {"calculator": {"num1": 4.0}}


@pytest.mark.unit
def test_send_action_labels_empty_form_as_data() -> None:
    """An empty mapping is still shown as submitted data."""
    session = ChatSession.create(greeting=False)
    session.send_action("submit_contact", {})
    assert session.messages[0].content == "Action: submit_contact with data: {}"
    assert session.messages[1].content == (
        'Action "submit_contact" received! Data: {}'
    )


@pytest.mark.unit
def test_calculator_conversation() -> None:
    """Context carries the operands from turn to turn."""
    session = ChatSession.create()
    session.send_text("calculator")
    assert isinstance(session.latest_components()[0], Input)
    session.send_action("set_num1", {"value": "3"})
    session.send_action("set_num2", {"value": "4"})
    result = session.send_action("calculate_add")
    assert result.message.content == "Result: 3 + 4 = 7"
    assert session.turns == 4


@pytest.mark.unit
def test_failed_turn_keeps_context() -> None:
    """The fallback reply is appended and the prior context is kept."""
    session = ChatSession.create(context={"calculator": {"num1": 1.0}})
    result = session.send_action("select_time", {"value": "10:00"})
    assert result.failed
    assert result.message.content == ERROR_REPLY
    assert result.message.components == []
    assert session.context == {"calculator": {"num1": 1.0}}
    assert session.latest_components() == []


@pytest.mark.unit
def test_to_dict() -> None:
    """The export carries transcript, context and turn count."""
    session = ChatSession.create()
    session.send_text("book an appointment")
    data = session.to_dict()
    assert data["sessionId"] == session.session_id
    assert data["turns"] == 1
    assert data["context"] == {"bookingFlow": {"step": 1}}
    assert data["messages"][-1]["components"][0]["type"] == "select"
    assert set(data["messages"][0]) == {"id", "role", "content", "timestamp"}
