"""
HTTP gateway tests.
"""

import pytest
from fastapi.testclient import TestClient

from bhabhi_engine.engine import BhabhiEngine
from bhabhi_engine.main import create_app
from bhabhi_engine.rules import create_rules

ROOM = "12036@g.us"


@pytest.fixture
def client():
    app = create_app(engine=BhabhiEngine(rules=create_rules(seed=5)), bot_id="999@s.whatsapp.net")
    return TestClient(app)


def post(client, text, participant=None, push_name=None):
    response = client.post("/messages", json={
        "room_id": ROOM,
        "text": text,
        "participant": participant,
        "push_name": push_name,
    })
    assert response.status_code == 200
    return response.json()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "rooms": 0}


def test_non_command_not_handled(client):
    body = post(client, "good morning", "111@s.whatsapp.net")
    assert body == {"handled": False, "messages": []}


def test_game_over_http(client):
    assert post(client, "!bhabhi new")["handled"]
    post(client, "!join", "111@s.whatsapp.net", "alice")
    body = post(client, "!join", "222@s.whatsapp.net", "bob")
    assert body["messages"][0]["mentions"] == ["111@s.whatsapp.net", "222@s.whatsapp.net"]

    body = post(client, "!bdeal")
    kinds = [m["kind"] for m in body["messages"]]
    assert kinds.count("direct") == 2
    assert body["messages"][-1]["kind"] == "room"
    assert body["messages"][-1]["to"] == ROOM

    response = client.get(f"/games/{ROOM}", params={"viewer": "111@s.whatsapp.net"})
    assert response.status_code == 200
    state = response.json()
    assert state["phase"] == "playing"
    assert len(state["players"][0]["hand"]) == 26
    assert "hand" not in state["players"][1]
    assert state["players"][1]["hand_count"] == 26


def test_missing_game_is_404(client):
    assert client.get("/games/nowhere").status_code == 404


def test_invalid_body_rejected(client):
    response = client.post("/messages", json={"text": "!join"})
    assert response.status_code == 422


def test_long_chat_text_not_handled(client):
    body = post(client, "a" * 5000, "111@s.whatsapp.net")
    assert body == {"handled": False, "messages": []}


def test_long_display_name_can_join(client):
    post(client, "!bhabhi new")
    body = post(client, "!join", "111@s.whatsapp.net", "x" * 65)
    assert body["handled"]
    assert body["messages"][0]["text"].startswith("Joined!")

    state = client.get(f"/games/{ROOM}").json()
    assert state["players"][0]["name"] == "x" * 64


def test_deal_dms_carry_room_fallback(client):
    post(client, "!bhabhi new")
    post(client, "!join", "111@s.whatsapp.net", "alice")
    post(client, "!join", "222@s.whatsapp.net", "bob")

    messages = post(client, "!bdeal")["messages"]
    direct = [m for m in messages if m["kind"] == "direct"]
    assert [m["to"] for m in direct] == ["111@s.whatsapp.net", "222@s.whatsapp.net"]
    for m in direct:
        assert m["fallback"]["kind"] == "room"
        assert m["fallback"]["to"] == ROOM
        assert m["fallback"]["mentions"] == [m["to"]]
        assert m["fallback"]["text"].startswith("⚠️ Could not DM @")

    # Delivery is up to the bridge, so the room is not told it happened
    assert not any(m["text"].startswith("✅ DM sent") for m in messages)
    assert all(m["fallback"] is None for m in messages if m["kind"] == "room")


def test_hand_dm_carries_room_fallback(client):
    post(client, "!bhabhi new")
    post(client, "!join", "111@s.whatsapp.net", "alice")
    post(client, "!join", "222@s.whatsapp.net", "bob")
    post(client, "!bdeal")

    messages = post(client, "!hand", "222@s.whatsapp.net")["messages"]
    assert len(messages) == 1
    assert messages[0]["kind"] == "direct"
    assert messages[0]["text"].startswith("Your hand:")
    assert messages[0]["fallback"]["text"].endswith('then send "!hand" again.')


def test_game_log_exposed(client):
    post(client, "!bhabhi new")
    post(client, "!join", "111@s.whatsapp.net", "alice")
    post(client, "!join", "222@s.whatsapp.net", "bob")
    post(client, "!bdeal")

    state = client.get(f"/games/{ROOM}").json()
    assert len(state["log"]) == 1
    assert state["log"][0].startswith("Dealt 2 players")
