"""Tests for the stateless chat endpoint."""

import pytest

from chatuix.core.constants import ERROR_REPLY


@pytest.mark.unit
def test_can_import_api() -> None:
    """Ensure the main API module and FastAPI app can be imported."""
    import chatuix.api.main as m

    assert m.app


@pytest.mark.unit
def test_health(client) -> None:
    """Health check responds ok."""
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


@pytest.mark.unit
def test_text_turn(client) -> None:
    """Free text gets a reply with components in camelCase wire form."""
    r = client.post(
        "/api/chat",
        json={"messages": [{"role": "user", "content": "pie chart please"}]},
    )
    assert r.status_code == 200
    body = r.json()
    assert body["content"] == "Here's a pie chart visualizing monthly revenue data:"
    chart = body["components"][0]
    assert chart["type"] == "chart"
    assert chart["chartType"] == "pie"
    assert body["context"] == {}


@pytest.mark.unit
def test_action_turn_with_action_data(client) -> None:
    """Action data is read from ``actionData`` and context is carried."""
    r = client.post(
        "/api/chat",
        json={
            "messages": [],
            "context": {"calculator": {"num2": 2}},
            "action": "set_num1",
            "actionData": {"value": "7"},
        },
    )
    assert r.status_code == 200
    body = r.json()
    assert body["content"] == "First number set to 7. Now enter the second number."
    assert body["context"] == {"calculator": {"num2": 2, "num1": 7.0}}
    assert "components" not in body


@pytest.mark.unit
def test_unknown_action_echo(client) -> None:
    """Unknown actions are acknowledged, not rejected."""
    r = client.post(
        "/api/chat",
        json={"messages": [], "action": "unknown_action", "actionData": {"foo": 1}},
    )
    assert r.status_code == 200
    assert r.json()["content"] == 'Action "unknown_action" received! Data: {"foo":1}'


@pytest.mark.unit
def test_nan_operand_is_null_on_the_wire(client) -> None:
    """Non-finite numbers in the context are sent as null."""
    r = client.post(
        "/api/chat",
        json={"messages": [], "action": "set_num1", "actionData": {"value": "abc"}},
    )
    assert r.status_code == 200
    assert r.json()["context"] == {"calculator": {"num1": None}}


@pytest.mark.unit
def test_nan_operand_calculates_as_zero_over_the_wire(client) -> None:
    """The null context sent back for an unparsed operand reads as 0."""
    ctx = client.post(
        "/api/chat",
        json={"messages": [], "action": "set_num1", "actionData": {"value": "abc"}},
    ).json()["context"]
    ctx = client.post(
        "/api/chat",
        json={
            "messages": [],
            "action": "set_num2",
            "actionData": {"value": "4"},
            "context": ctx,
        },
    ).json()["context"]
    r = client.post(
        "/api/chat",
        json={"messages": [], "action": "calculate_add", "context": ctx},
    )
    assert r.json()["content"] == "Result: 0 + 4 = 4"


@pytest.mark.unit
@pytest.mark.parametrize(
    "body",
    [
        {"messages": [], "context": {}},
        {"messages": "nope"},
        {"messages": [], "action": "select_time", "actionData": {"value": "10:00"}},
        {"messages": [], "action": "submit_signup", "actionData": {"name": "Ann"}},
    ],
)
def test_failures_get_fallback_reply(client, body) -> None:
    """Any processing failure returns the fixed reply with status 500."""
    r = client.post("/api/chat", json=body)
    assert r.status_code == 500
    assert r.json() == {"content": ERROR_REPLY, "components": []}


@pytest.mark.unit
def test_malformed_json_gets_fallback_reply(client) -> None:
    """A body that isn't JSON is handled like any other failure."""
    r = client.post(
        "/api/chat",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 500
    assert r.json()["content"] == ERROR_REPLY


@pytest.mark.unit
def test_snake_case_body_is_accepted(client) -> None:
    """Request bodies validate by field name as well as by wire name."""
    r = client.post(
        "/api/chat",
        json={"messages": [], "action": "show_table", "action_data": None},
    )
    assert r.status_code == 200
    assert r.json()["components"][0]["type"] == "table"
