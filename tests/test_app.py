"""
Lambda Hubs API — Application-Level Tests
===========================================

Wiring that spans route groups: the root page, health check, request IDs,
and full request flows against a real SQLite-backed service.
"""

import logging

import pytest

from hubs_api.config import Settings
from hubs_api.main import create_app
from hubs_api.middleware.logging import level_for_status
from hubs_api.middleware.request_id import REQUEST_ID_HEADER


class TestRootAndMiddleware:

    @pytest.mark.asyncio
    async def test_hubs_welcome_page(self, hubs_client):
        response = await hubs_client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "<h2>Lambda Hubs API</h2>" in response.text
        assert "Welcome to the Lambda Hubs API" in response.text

    @pytest.mark.asyncio
    async def test_shelter_welcome_page(self, shelter_client):
        response = await shelter_client.get("/")

        assert response.status_code == 200
        assert "Lambda Animal Shelter API" in response.text

    @pytest.mark.asyncio
    async def test_request_id_is_generated(self, hubs_client):
        response = await hubs_client.get("/")

        assert response.headers[REQUEST_ID_HEADER]

    @pytest.mark.asyncio
    async def test_request_id_is_echoed(self, hubs_client):
        response = await hubs_client.get("/", headers={REQUEST_ID_HEADER: "trace-123"})

        assert response.headers[REQUEST_ID_HEADER] == "trace-123"

    @pytest.mark.asyncio
    async def test_unknown_path_is_404(self, hubs_client):
        response = await hubs_client.get("/api/nothing")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_malformed_json_is_400(self, hubs_client, mock_hub_service):
        response = await hubs_client.post(
            "/api/hubs",
            content=b'{"name": ',
            headers={"content-type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request"
        mock_hub_service.add.assert_not_awaited()

    @pytest.mark.parametrize(
        "status,level",
        [(200, logging.INFO), (201, logging.INFO), (404, logging.WARNING), (500, logging.ERROR)],
    )
    def test_access_log_level_follows_status(self, status, level):
        assert level_for_status(status) == level


class TestHealth:

    @pytest.mark.asyncio
    async def test_without_engine_reports_unhealthy(self, hubs_client):
        response = await hubs_client.get("/health")

        assert response.status_code == 503
        body = response.json()
        assert body["status"] == "unhealthy"
        assert body["database"] == "disconnected"

    @pytest.mark.asyncio
    async def test_with_engine_reports_healthy(self, hubs_e2e_client):
        response = await hubs_e2e_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
        assert body["version"] == "1.0.0"


class TestVariantSelection:

    def test_default_variant_is_hubs(self):
        app = create_app(Settings(database_url="sqlite+aiosqlite:///:memory:"))

        assert app.title == "Lambda Hubs API"

    def test_shelter_variant(self):
        app = create_app(
            Settings(database_url="sqlite+aiosqlite:///:memory:", api_variant="SHELTER")
        )

        assert app.title == "Lambda Animal Shelter API"

    def test_unknown_variant_is_rejected(self):
        with pytest.raises(ValueError):
            Settings(api_variant="zoo")


class TestHubsEndToEnd:

    @pytest.mark.asyncio
    async def test_missing_hub(self, hubs_e2e_client):
        response = await hubs_e2e_client.get("/api/hubs/999")

        assert response.status_code == 404
        assert response.json() == {"message": "Hub not found"}

    @pytest.mark.asyncio
    async def test_hub_and_message_lifecycle(self, hubs_e2e_client):
        for name in ("one", "two", "three"):
            created = await hubs_e2e_client.post("/api/hubs", json={"name": name})
            assert created.status_code == 201

        # No messages yet
        empty = await hubs_e2e_client.get("/api/hubs/3/messages")
        assert empty.status_code == 404
        assert empty.json() == {"message": "No messages for this hub"}

        posted = await hubs_e2e_client.post(
            "/api/hubs/3/messages", json={"from": "frodo", "text": "hi"}
        )
        assert posted.status_code == 201
        message = posted.json()
        assert message["hub_id"] == 3
        assert message["sender"] == "frodo"

        # Same message through the alias prefix and the direct lookup
        listed = await hubs_e2e_client.get("/repos/3/messages")
        assert [m["id"] for m in listed.json()] == [message["id"]]
        direct = await hubs_e2e_client.get(f"/api/messages/{message['id']}")
        assert direct.status_code == 200
        assert direct.json()["text"] == "hi"

        nuked = await hubs_e2e_client.delete("/thing/otherthing/3")
        assert nuked.json() == {"message": "The hub has been nuked"}

        gone = await hubs_e2e_client.get(f"/api/messages/{message['id']}")
        assert gone.status_code == 404
        assert gone.json() == {"success": False, "message": "invalid message id"}

    @pytest.mark.asyncio
    async def test_message_for_missing_hub_is_500_err(self, hubs_e2e_client):
        response = await hubs_e2e_client.post(
            "/api/hubs/404/messages", json={"sender": "frodo", "text": "hi"}
        )

        assert response.status_code == 500
        assert response.json() == {
            "err": {"name": "DatabaseError", "message": "Error adding the message"}
        }

    @pytest.mark.asyncio
    async def test_duplicate_hub_name_is_500(self, hubs_e2e_client):
        await hubs_e2e_client.post("/api/hubs", json={"name": "same"})

        response = await hubs_e2e_client.post("/api/hubs", json={"name": "same"})

        assert response.status_code == 500
        assert response.json() == {"message": "Error adding the hub"}

    @pytest.mark.asyncio
    async def test_list_paging_and_sort(self, hubs_e2e_client):
        for name in ("b", "c", "a"):
            await hubs_e2e_client.post("/api/hubs", json={"name": name})

        response = await hubs_e2e_client.get("/api/hubs?sortby=name&limit=2&page=1")

        assert [h["name"] for h in response.json()] == ["a", "b"]


class TestShelterEndToEnd:

    @pytest.mark.asyncio
    async def test_adopter_and_dogs(self, shelter_e2e_client):
        created = await shelter_e2e_client.post(
            "/api/adopters", json={"name": "Sam", "email": "sam@shire.me"}
        )
        adopter_id = created.json()["id"]

        no_dogs = await shelter_e2e_client.get(f"/i/love/dogs/{adopter_id}/dogs")
        assert no_dogs.status_code == 200
        assert no_dogs.json() == []

        dog = await shelter_e2e_client.post(
            f"/api/adopters/{adopter_id}/dogs", json={"name": "Bill", "weight": 40}
        )
        assert dog.status_code == 201

        fetched = await shelter_e2e_client.get(f"/api/dogs/{dog.json()['id']}")
        assert fetched.json() == {
            "id": dog.json()["id"],
            "name": "Bill",
            "weight": 40.0,
            "adopter_id": adopter_id,
        }

        renamed = await shelter_e2e_client.put(
            f"/api/adopters/{adopter_id}", json={"name": "Samwise"}
        )
        assert renamed.json()["name"] == "Samwise"

        missing = await shelter_e2e_client.get("/api/adopters/999")
        assert missing.status_code == 404
        assert missing.json() == {"message": "invalid id"}


class TestCollectionsWithoutQuery:

    @pytest.mark.asyncio
    async def test_bare_hub_list_returns_every_hub(self, hubs_e2e_client):
        for i in range(25):
            created = await hubs_e2e_client.post("/api/hubs", json={"name": f"hub-{i}"})
            assert created.status_code == 201

        response = await hubs_e2e_client.get("/api/hubs")

        assert response.status_code == 200
        assert len(response.json()) == 25

    @pytest.mark.asyncio
    async def test_bare_adopter_list_returns_every_adopter(self, shelter_e2e_client):
        for i in range(25):
            await shelter_e2e_client.post(
                "/api/adopters", json={"name": f"hobbit-{i}", "email": f"hobbit{i}@shire.me"}
            )

        response = await shelter_e2e_client.get("/api/adopters")

        assert response.status_code == 200
        assert len(response.json()) == 25


OUT_OF_RANGE_IDS = [2**31, 3_000_000_000, 99999999999999999999, -(2**31) - 1]


class TestOutOfRangeIds:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("bad_id", OUT_OF_RANGE_IDS)
    async def test_hub_routes_answer_not_found(self, hubs_e2e_client, bad_id):
        got = await hubs_e2e_client.get(f"/api/hubs/{bad_id}")
        assert got.status_code == 404
        assert got.json() == {"message": "Hub not found"}

        deleted = await hubs_e2e_client.delete(f"/repos/{bad_id}")
        assert deleted.status_code == 404
        assert deleted.json() == {"message": "The hub could not be found"}

        updated = await hubs_e2e_client.put(f"/api/hubs/{bad_id}", json={"name": "x"})
        assert updated.status_code == 404
        assert updated.json() == {"message": "The hub could not be found"}

        messages = await hubs_e2e_client.get(f"/api/hubs/{bad_id}/messages")
        assert messages.status_code == 404
        assert messages.json() == {"message": "No messages for this hub"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("bad_id", OUT_OF_RANGE_IDS)
    async def test_message_lookup_answers_not_found(self, hubs_e2e_client, bad_id):
        response = await hubs_e2e_client.get(f"/api/messages/{bad_id}")

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "invalid message id"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("bad_id", OUT_OF_RANGE_IDS)
    async def test_adopter_routes_answer_not_found(self, shelter_e2e_client, bad_id):
        got = await shelter_e2e_client.get(f"/api/adopters/{bad_id}")
        assert got.status_code == 404
        assert got.json() == {"message": "invalid id"}

        deleted = await shelter_e2e_client.delete(f"/i/love/dogs/{bad_id}")
        assert deleted.status_code == 404
        assert deleted.json() == {"message": "The adopter could not be found"}

        updated = await shelter_e2e_client.put(f"/api/adopters/{bad_id}", json={"name": "x"})
        assert updated.status_code == 404

        dogs = await shelter_e2e_client.get(f"/api/adopters/{bad_id}/dogs")
        assert dogs.status_code == 200
        assert dogs.json() == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("bad_id", OUT_OF_RANGE_IDS)
    async def test_dog_lookup_answers_not_found(self, shelter_e2e_client, bad_id):
        response = await shelter_e2e_client.get(f"/api/dogs/{bad_id}")

        assert response.status_code == 404
        assert response.json() == {"message": "Dog not found"}
