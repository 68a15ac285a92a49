"""Tests for the HTTP boundary."""

from fastapi.testclient import TestClient

from clawbot.api.app import (
    AGENT_FAILURE,
    app,
)

client = TestClient(app)


def test_health() -> None:
    """Liveness probe answers ok."""

    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_chat_backfills_ids_and_timestamps() -> None:
    """A minimal payload returns a full turn; memory is omitted when absent."""

    response = client.post(
        "/chat", json={"messages": [{"role": "user", "content": "Compare market trends"}]}
    )
    assert response.status_code == 200
    body = response.json()
    assert body["intent"] == "research"
    assert body["message"]["role"] == "assistant"
    assert body["message"]["id"]
    assert body["message"]["createdAt"]
    assert "memory" not in body
    assert [tool["name"] for tool in body["tools"]] == ["Signal Scan", "Trend Pulse"]
    assert all(task["status"] == "pending" for task in body["tasks"])
    assert len(body["reasoning"]) == 3


def test_chat_includes_memory() -> None:
    """Extracted facts are returned with their confidence."""

    payload = {
        "messages": [
            {"id": "m-1", "role": "user", "content": "My name is Ada Lovelace", "createdAt": "x"},
        ]
    }
    body = client.post("/chat", json=payload).json()
    assert body["memory"][0]["summary"] == "User is Ada Lovelace"
    assert body["memory"][0]["confidence"] == 0.7


def test_chat_failures_are_opaque() -> None:
    """Bad payloads and histories without a user message share one error body."""

    payloads = [
        {"messages": []},
        {"messages": [{"role": "assistant", "content": "hello"}]},
        {"messages": [{"role": "robot", "content": "beep"}]},
        {"nothing": True},
    ]
    for payload in payloads:
        response = client.post("/chat", json=payload)
        assert response.status_code == 500
        assert response.json() == {"error": AGENT_FAILURE}


def test_list_tools() -> None:
    """The tool catalog exposes every built-in tool."""

    tools = client.get("/tools").json()["tools"]
    for name in ("Signal Scan", "Trend Pulse", "Strategy Weave", "Build Accelerator"):
        assert name in tools
