"""Integration tests for the Telegram webhook endpoint."""

from typing import Any

import pytest
from httpx import AsyncClient

from api.middleware.cors import CORS_HEADERS
from domain.services import replies
from tests.factories import FakeGateway, make_post, make_profile

WEBHOOK = "/telegram-bot"
CHAT_ID = 5550001
SENDER_ID = 777001


def _update(text: str | None = None, sender: dict[str, Any] | None = None) -> dict[str, Any]:
    message: dict[str, Any] = {
        "message_id": 1,
        "date": 1733054400,
        "chat": {"id": CHAT_ID, "type": "private"},
        "from": sender if sender is not None else {"id": SENDER_ID, "username": "jdoe", "first_name": "Jane"},
    }
    if text is not None:
        message["text"] = text
    return {"update_id": 1, "message": message}


class TestPreflight:
    @pytest.mark.asyncio
    async def test_options_returns_empty_200_with_cors(self, client: AsyncClient) -> None:
        response = await client.options(WEBHOOK)

        assert response.status_code == 200
        assert response.content == b""
        for name, value in CORS_HEADERS.items():
            assert response.headers[name] == value

    @pytest.mark.asyncio
    async def test_options_ignores_body(self, client: AsyncClient) -> None:
        response = await client.request("OPTIONS", WEBHOOK, content=b"{not json")

        assert response.status_code == 200
        assert response.content == b""


class TestMalformedPayload:
    @pytest.mark.asyncio
    async def test_invalid_json_returns_500(self, bot_client: AsyncClient, gateway: FakeGateway) -> None:
        response = await bot_client.post(
            WEBHOOK, content=b"{not json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 500
        assert response.json()["error"] == "Internal server error"
        assert response.headers["access-control-allow-origin"] == "*"
        assert gateway.sent == []

    @pytest.mark.asyncio
    async def test_message_without_chat_returns_500(self, bot_client: AsyncClient) -> None:
        response = await bot_client.post(WEBHOOK, json={"message": {"text": "/help"}})

        assert response.status_code == 500
        assert "error" in response.json()

    @pytest.mark.asyncio
    async def test_text_with_chat_missing_id_returns_500(self, bot_client: AsyncClient) -> None:
        response = await bot_client.post(WEBHOOK, json={"message": {"chat": {}, "text": "/help"}})

        assert response.status_code == 500

    @pytest.mark.asyncio
    async def test_non_object_body_returns_500(self, bot_client: AsyncClient) -> None:
        response = await bot_client.post(WEBHOOK, json=["/help"])

        assert response.status_code == 500


class TestAcknowledgment:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "message",
        [
            {"chat": {"id": CHAT_ID}},
            {"chat": {}},
            {"message_id": 3},
        ],
    )
    async def test_textless_message_with_partial_chat(
        self, bot_client: AsyncClient, gateway: FakeGateway, message: dict[str, Any]
    ) -> None:
        response = await bot_client.post(WEBHOOK, json={"update_id": 3, "message": message})

        assert response.status_code == 200
        assert response.json() == {"ok": True}
        assert gateway.sent == []

    @pytest.mark.asyncio
    async def test_update_without_message(self, bot_client: AsyncClient, gateway: FakeGateway) -> None:
        response = await bot_client.post(WEBHOOK, json={"update_id": 2})

        assert response.status_code == 200
        assert response.json() == {"ok": True}
        assert gateway.sent == []

    @pytest.mark.asyncio
    async def test_message_without_text(self, bot_client: AsyncClient, gateway: FakeGateway) -> None:
        response = await bot_client.post(WEBHOOK, json=_update(text=None))

        assert response.status_code == 200
        assert response.json() == {"ok": True}
        assert gateway.sent == []

    @pytest.mark.asyncio
    async def test_ack_carries_cors_headers(self, bot_client: AsyncClient) -> None:
        response = await bot_client.post(WEBHOOK, json=_update("/help"))

        assert response.headers["access-control-allow-origin"] == "*"

    @pytest.mark.asyncio
    async def test_delivery_failure_still_acknowledged(self, bot_client: AsyncClient, gateway: FakeGateway) -> None:
        gateway.fail = True

        response = await bot_client.post(WEBHOOK, json=_update("/start"))

        assert response.status_code == 200
        assert response.json() == {"ok": True}
        assert len(gateway.sent) == 1


class TestCommands:
    @pytest.mark.asyncio
    async def test_chat_without_type_is_answered(self, bot_client: AsyncClient, gateway: FakeGateway) -> None:
        response = await bot_client.post(
            WEBHOOK, json={"message": {"chat": {"id": CHAT_ID}, "text": "/help"}}
        )

        assert response.json() == {"ok": True}
        assert gateway.texts == [replies.HELP_TEXT]
        assert gateway.sent[0].chat_id == CHAT_ID

    @pytest.mark.asyncio
    async def test_start(self, bot_client: AsyncClient, gateway: FakeGateway) -> None:
        await bot_client.post(WEBHOOK, json=_update("/start"))

        assert gateway.texts == [replies.welcome_text(CHAT_ID)]
        assert gateway.sent[0].chat_id == CHAT_ID

    @pytest.mark.asyncio
    async def test_help(self, bot_client: AsyncClient, gateway: FakeGateway) -> None:
        await bot_client.post(WEBHOOK, json=_update("/help"))

        assert gateway.texts == [replies.HELP_TEXT]

    @pytest.mark.asyncio
    async def test_capitalized_command_is_unknown(self, bot_client: AsyncClient, gateway: FakeGateway) -> None:
        await bot_client.post(WEBHOOK, json=_update("/Posts"))

        assert gateway.texts == [replies.UNKNOWN_COMMAND_TEXT]

    @pytest.mark.asyncio
    async def test_posts_empty_feed(self, bot_client: AsyncClient, gateway: FakeGateway) -> None:
        await bot_client.post(WEBHOOK, json=_update("/posts"))

        assert gateway.texts == [replies.NO_POSTS_TEXT]

    @pytest.mark.asyncio
    async def test_posts_lists_five_newest(self, bot_client: AsyncClient, gateway: FakeGateway, seed) -> None:
        author = make_profile(username="alice")
        await seed(
            author,
            *[make_post(author.id, minutes=i, title=f"post-{i}", likes_count=i) for i in range(6)],
        )

        response = await bot_client.post(WEBHOOK, json=_update("/postsfoo"))

        assert response.json() == {"ok": True}
        [text] = gateway.texts
        assert "<b>1. post-5</b>\nBy @alice\n" in text
        assert "<b>5. post-1</b>" in text
        assert "post-0" not in text
        assert "<b>6." not in text

    @pytest.mark.asyncio
    async def test_profile_unlinked(self, bot_client: AsyncClient, gateway: FakeGateway) -> None:
        await bot_client.post(WEBHOOK, json=_update("/myprofile"))

        assert gateway.texts == [replies.not_linked_text(str(SENDER_ID))]

    @pytest.mark.asyncio
    async def test_profile_linked(self, bot_client: AsyncClient, gateway: FakeGateway, seed) -> None:
        profile = make_profile(username="jdoe", full_name="Jane Doe", telegram_id=str(SENDER_ID))
        await seed(
            profile,
            make_post(profile.id, likes_count=7),
            make_post(profile.id, likes_count=2, status="draft"),
        )

        await bot_client.post(WEBHOOK, json=_update("/myprofile"))

        [text] = gateway.texts
        assert "Username: @jdoe\n" in text
        assert "Name: Jane Doe\n" in text
        assert "Posts: 2\n" in text
        assert "Total Likes: 9\n" in text
        assert text.endswith("Joined: 12/1/2025")

    @pytest.mark.asyncio
    async def test_store_failure_sends_apology_and_acknowledges(
        self, bot_client: AsyncClient, gateway: FakeGateway, engine
    ) -> None:
        async with engine.begin() as conn:
            await conn.exec_driver_sql("DROP TABLE posts")
            await conn.exec_driver_sql("DROP TABLE profiles")

        posts_response = await bot_client.post(WEBHOOK, json=_update("/posts"))
        profile_response = await bot_client.post(WEBHOOK, json=_update("/myprofile"))

        assert posts_response.status_code == 200
        assert profile_response.status_code == 200
        assert gateway.texts == [replies.POSTS_ERROR_TEXT, replies.PROFILE_ERROR_TEXT]
