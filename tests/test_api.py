"""
Social API — HTTP Endpoint Tests
==================================

What:  Tests for the route handlers, status codes and empty-body failures.
How:   HTTPX AsyncClient over ASGITransport against a fresh SQLite database.

What we test:
    ✅ Register / login outcomes (200, 400, 401)
    ✅ Message create boundaries and the 200-empty-body not-found answers
    ✅ Non-numeric path parameters and malformed bodies → 400
    ✅ Out-of-range or non-integer ids and timestamps → 400
    ✅ Storage failures collapse into the endpoint's ordinary failure outcome
    ✅ The full register → post → list → patch → delete → get scenario
"""

import pytest
from unittest.mock import AsyncMock, patch

from social_api.exceptions import DatabaseError
from social_api.services.account_service import account_service
from social_api.services.message_service import message_service


async def register(client, username="alice", password="pass1"):
    return await client.post("/register", json={"username": username, "password": password})


async def post_message(client, text="hi", posted_by=1, epoch=1000):
    return await client.post(
        "/messages",
        json={"posted_by": posted_by, "message_text": text, "time_posted_epoch": epoch},
    )


class TestAccountEndpoints:

    @pytest.mark.asyncio
    async def test_register_success(self, test_client):
        response = await register(test_client)

        assert response.status_code == 200
        body = response.json()
        assert body["account_id"] > 0
        assert body["username"] == "alice"
        assert body["password"] == "pass1"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"username": "", "password": "pass1"},
            {"username": "   ", "password": "pass1"},
            {"username": "bob", "password": "abc"},
            {"password": "pass1"},
        ],
    )
    async def test_register_invalid(self, test_client, payload):
        response = await test_client.post("/register", json=payload)

        assert response.status_code == 400
        assert response.content == b""

    @pytest.mark.asyncio
    async def test_register_duplicate(self, test_client):
        await register(test_client)

        response = await register(test_client, password="another")

        assert response.status_code == 400
        assert response.content == b""

    @pytest.mark.asyncio
    async def test_login_success(self, test_client):
        created = (await register(test_client)).json()

        response = await test_client.post(
            "/login", json={"username": "alice", "password": "pass1"}
        )

        assert response.status_code == 200
        assert response.json() == created

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"username": "alice", "password": "wrong"},
            {"username": "nobody", "password": "pass1"},
        ],
    )
    async def test_login_failure_is_indistinguishable(self, test_client, payload):
        await register(test_client)

        response = await test_client.post("/login", json=payload)

        assert response.status_code == 401
        assert response.content == b""

    @pytest.mark.asyncio
    async def test_register_storage_failure_is_400(self, test_client):
        with patch.object(
            account_service.store, "username_exists", AsyncMock(side_effect=DatabaseError())
        ):
            response = await register(test_client)

        assert response.status_code == 400
        assert response.content == b""


class TestMessageEndpoints:

    @pytest.mark.asyncio
    async def test_create_boundaries(self, test_client):
        accepted = await post_message(test_client, text="x" * 255)
        rejected = await post_message(test_client, text="x" * 256)

        assert accepted.status_code == 200
        assert accepted.json()["message_id"] > 0
        assert rejected.status_code == 400
        assert rejected.content == b""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"posted_by": 1, "message_text": "", "time_posted_epoch": 1},
            {"posted_by": 1, "message_text": "  ", "time_posted_epoch": 1},
            {"posted_by": 0, "message_text": "hi", "time_posted_epoch": 1},
            {"posted_by": -1, "message_text": "hi", "time_posted_epoch": 1},
        ],
    )
    async def test_create_invalid(self, test_client, payload):
        response = await test_client.post("/messages", json=payload)

        assert response.status_code == 400
        assert response.content == b""

    @pytest.mark.asyncio
    async def test_get_missing_message_is_empty_200(self, test_client):
        response = await test_client.get("/messages/999")

        assert response.status_code == 200
        assert response.content == b""

    @pytest.mark.asyncio
    async def test_delete_twice(self, test_client):
        created = (await post_message(test_client)).json()
        path = f"/messages/{created['message_id']}"

        first = await test_client.delete(path)
        second = await test_client.delete(path)

        assert first.status_code == 200
        assert first.json() == created
        assert second.status_code == 200
        assert second.content == b""

    @pytest.mark.asyncio
    async def test_patch_missing_message(self, test_client):
        response = await test_client.patch("/messages/999", json={"message_text": "bye"})

        assert response.status_code == 400
        assert response.content == b""

    @pytest.mark.asyncio
    async def test_patch_invalid_text_keeps_original(self, test_client):
        created = (await post_message(test_client)).json()
        path = f"/messages/{created['message_id']}"

        response = await test_client.patch(path, json={"message_text": "   "})

        assert response.status_code == 400
        assert (await test_client.get(path)).json()["message_text"] == "hi"

    @pytest.mark.asyncio
    async def test_account_messages_empty_is_array(self, test_client):
        response = await test_client.get("/accounts/42/messages")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_account_messages_filters_by_author(self, test_client):
        await post_message(test_client, text="one", posted_by=1)
        await post_message(test_client, text="two", posted_by=2)

        response = await test_client.get("/accounts/2/messages")

        assert [m["message_text"] for m in response.json()] == ["two"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method, path",
        [
            ("GET", "/messages/abc"),
            ("DELETE", "/messages/abc"),
            ("PATCH", "/messages/abc"),
            ("GET", "/accounts/abc/messages"),
        ],
    )
    async def test_non_numeric_path_is_400(self, test_client, method, path):
        response = await test_client.request(method, path)

        assert response.status_code == 400
        assert response.content == b""

    @pytest.mark.asyncio
    async def test_malformed_json_is_400(self, test_client):
        response = await test_client.post(
            "/messages",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method, path",
        [
            ("GET", "/messages/99999999999999999999"),
            ("DELETE", "/messages/9223372036854775808"),
            ("PATCH", "/messages/-9223372036854775809"),
            ("GET", "/accounts/99999999999999999999/messages"),
        ],
    )
    async def test_out_of_range_path_id_is_400(self, test_client, method, path):
        response = await test_client.request(method, path, json={"message_text": "x"})

        assert response.status_code == 400
        assert response.content == b""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "field, value",
        [
            ("posted_by", 2**63),
            ("time_posted_epoch", -(2**63) - 1),
            ("posted_by", True),
            ("time_posted_epoch", 1.5),
        ],
    )
    async def test_body_integers_are_strict_and_bounded(self, test_client, field, value):
        payload = {"posted_by": 1, "message_text": "hi", "time_posted_epoch": 1000}
        payload[field] = value

        response = await test_client.post("/messages", json=payload)

        assert response.status_code == 400
        assert response.content == b""
        assert (await test_client.get("/messages")).json() == []

    @pytest.mark.asyncio
    async def test_largest_epoch_is_stored(self, test_client):
        response = await post_message(test_client, epoch=2**63 - 1)

        assert response.status_code == 200
        assert response.json()["time_posted_epoch"] == 2**63 - 1

    @pytest.mark.asyncio
    async def test_list_storage_failure_is_empty_array(self, test_client):
        await post_message(test_client)

        with patch.object(
            message_service.store, "list_all", AsyncMock(side_effect=DatabaseError())
        ):
            response = await test_client.get("/messages")

        assert response.status_code == 200
        assert response.json() == []


class TestEndToEnd:

    @pytest.mark.asyncio
    async def test_alice_scenario(self, test_client):
        account = await register(test_client, "alice", "pass1")
        assert account.status_code == 200
        assert account.json()["account_id"] == 1

        posted = await post_message(test_client, text="hi", posted_by=1, epoch=1000)
        assert posted.status_code == 200
        message = posted.json()
        assert message == {
            "message_id": 1,
            "posted_by": 1,
            "message_text": "hi",
            "time_posted_epoch": 1000,
        }

        listed = await test_client.get("/messages")
        assert message in listed.json()

        patched = await test_client.patch("/messages/1", json={"message_text": "bye"})
        assert patched.status_code == 200
        assert patched.json()["message_text"] == "bye"
        assert (await test_client.get("/messages/1")).json()["message_text"] == "bye"

        deleted = await test_client.delete("/messages/1")
        assert deleted.status_code == 200
        assert deleted.json()["message_text"] == "bye"

        gone = await test_client.get("/messages/1")
        assert gone.status_code == 200
        assert gone.content == b""


class TestServiceEndpoints:

    @pytest.mark.asyncio
    async def test_health(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["database"] == "connected"

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, test_client):
        response = await test_client.get("/messages", headers={"X-Request-ID": "abc12345"})

        assert response.headers["X-Request-ID"] == "abc12345"
