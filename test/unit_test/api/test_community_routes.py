import random
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient
from starlette.websockets import WebSocketDisconnect

from khet_mitra.core.security import create_access_token
from khet_mitra.models.chatroom import ChatroomJoinResponse, ChatroomMessage, ChatroomUser
from khet_mitra.services.soil_sensor import SoilSensorSimulator

ROUTES = "khet_mitra.api.rest_routes"


def chatroom_message(text: str) -> ChatroomMessage:
    return ChatroomMessage(
        room_id="satara-maharashtra-india",
        user_id="user-2",
        user=ChatroomUser(name="Anil", avatar="https://avatar.vercel.sh/Anil.png"),
        text=text,
    )


@pytest.mark.asyncio
async def test_join_chatroom(client):
    joined = ChatroomJoinResponse(
        room_id="satara-maharashtra-india",
        location="Satara, Maharashtra, India",
        messages=[chatroom_message("Namaste")],
    )
    with patch(f"{ROUTES}.chatroom.join_chatroom", new=AsyncMock(return_value=joined)) as join:
        response = await client.post(
            "/chatroom/join", json={"latitude": 17.68, "longitude": 74.01}
        )
    assert response.status_code == 200
    assert response.json()["room_id"] == "satara-maharashtra-india"
    assert response.json()["messages"][0]["text"] == "Namaste"
    join.assert_awaited_once_with(17.68, 74.01)


@pytest.mark.asyncio
async def test_get_chatroom_messages(client):
    with patch(
        f"{ROUTES}.chatroom.get_latest_chatroom_messages",
        new=AsyncMock(return_value=[chatroom_message("a"), chatroom_message("b")]),
    ) as latest:
        response = await client.get("/chatroom/satara-maharashtra-india/messages")
    assert [m["text"] for m in response.json()] == ["a", "b"]
    latest.assert_awaited_once_with("satara-maharashtra-india", limit=50)


@pytest.mark.asyncio
async def test_post_chatroom_message(client, user):
    with patch(
        f"{ROUTES}.chatroom.post_chatroom_message",
        new=AsyncMock(return_value=chatroom_message("Good rain today")),
    ) as post:
        response = await client.post(
            "/chatroom/satara-maharashtra-india/messages", json={"text": "Good rain today"}
        )
    assert response.status_code == 201
    post.assert_awaited_once_with("satara-maharashtra-india", user, "Good rain today")


def test_chatroom_websocket_rejects_bad_token():
    from khet_mitra.main import app

    client = TestClient(app)
    with pytest.raises(WebSocketDisconnect):
        with client.websocket_connect("/chatroom/ws/satara?token=not-a-token") as websocket:
            websocket.receive_text()


def test_chatroom_websocket_accepts_valid_token():
    from khet_mitra.main import app

    token = create_access_token({"sub": "user-1"})
    client = TestClient(app)
    with client.websocket_connect(f"/chatroom/ws/satara?token={token}") as websocket:
        websocket.send_text("ping")


@pytest.mark.asyncio
async def test_languages(anon_client):
    response = await anon_client.get("/i18n/languages")
    assert response.status_code == 200
    codes = [item["code"] for item in response.json()]
    assert len(codes) == 13
    assert codes[:2] == ["en", "hi"]
    assert response.json()[0]["label"] == "English"


@pytest.mark.asyncio
async def test_namespace_translations(anon_client):
    response = await anon_client.get("/i18n/hi/sidebar")
    assert response.status_code == 200
    assert response.json()["marketplace"] == "बाज़ार"


@pytest.mark.asyncio
async def test_namespace_falls_back_to_english(anon_client):
    response = await anon_client.get("/i18n/ta/header")
    assert response.json()["logout"] == "Logout"


@pytest.mark.asyncio
async def test_menu_route(anon_client):
    response = await anon_client.get(
        "/navigation/menu", params={"language": "en", "path": "/my-poll"}
    )
    assert response.status_code == 200
    assert response.json()[-1] == {"href": "/my-poll", "label": "My Poll", "active": True}


@pytest.mark.asyncio
async def test_dashboard_uses_user_name_and_language(client, user):
    response = await client.get("/navigation/dashboard")
    assert response.status_code == 200
    assert response.json()["welcome"] == f"Welcome, {user.name}!"

    response = await client.get("/navigation/dashboard", params={"language": "hi"})
    assert response.json()["welcome"] == f"स्वागत है, {user.name}!"


@pytest.mark.asyncio
async def test_marketplace_products(anon_client):
    response = await anon_client.get("/marketplace/products")
    assert response.status_code == 200
    assert response.json()[1] == {
        "name_key": "basmatiRice",
        "name": "Basmati Rice",
        "price": "32.00",
        "unit": "quintal",
        "image_id": "rice-paddy",
    }


@pytest.mark.asyncio
async def test_my_poll_connect_and_read(client):
    simulator = SoilSensorSimulator(random.Random(7))
    simulator.rng.random = lambda: 0.9
    with patch(f"{ROUTES}.my_poll.simulator", simulator):
        connected = await client.post("/my-poll/connect")
        readings = await client.get("/my-poll/readings")

    assert connected.json()["status"] == "online"
    assert connected.json()["readings"]["nitrogen"] == 30
    assert readings.json()["readings"]["nitrogen"] == 31


@pytest.mark.asyncio
async def test_health_and_root(anon_client):
    assert (await anon_client.get("/health")).json() == {"status": "ok"}
    assert "Khet-Mitra" in (await anon_client.get("/")).json()["message"]
