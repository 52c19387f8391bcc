"""
Lambda Hubs API — Messages Route Group Tests
==============================================

GET /api/messages/{id} answers its error paths with the
{"success": false, "message": ...} envelope instead of {"message": ...}.
"""

import pytest

from hubs_api.exceptions import DatabaseError
from tests.factories import make_message


class TestGetMessage:

    @pytest.mark.asyncio
    async def test_found(self, hubs_client, mock_hub_service):
        mock_hub_service.find_message_by_id.return_value = make_message(42, hub_id=3, text="hello")

        response = await hubs_client.get("/api/messages/42")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == 42
        assert body["hub_id"] == 3
        assert body["text"] == "hello"
        mock_hub_service.find_message_by_id.assert_awaited_once_with(42)

    @pytest.mark.asyncio
    async def test_missing_is_404_envelope(self, hubs_client, mock_hub_service):
        mock_hub_service.find_message_by_id.return_value = None

        response = await hubs_client.get("/api/messages/42")

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "invalid message id"}

    @pytest.mark.asyncio
    async def test_failure_is_500_envelope_without_detail(self, hubs_client, mock_hub_service):
        mock_hub_service.find_message_by_id.side_effect = DatabaseError(
            context={"error_type": "OperationalError", "error": "server closed the connection"}
        )

        response = await hubs_client.get("/api/messages/42")

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "message": {"name": "DatabaseError", "message": "Error retrieving the message"},
        }
        assert "server closed" not in response.text

    @pytest.mark.asyncio
    async def test_non_numeric_id_is_400(self, hubs_client, mock_hub_service):
        response = await hubs_client.get("/api/messages/latest")

        assert response.status_code == 400
        mock_hub_service.find_message_by_id.assert_not_awaited()
