"""Integration tests for the purchase API.

Run with: pytest tests/test_purchase_api.py -v
"""

import pytest
from rest_framework.test import APIClient

from tickets.handlers import views

PURCHASE_URL = "/api/purchases"
QUOTE_URL = "/api/purchases/quote"


@pytest.fixture(autouse=True)
def use_recording_service(monkeypatch, ticket_service):
    monkeypatch.setattr(views, "get_ticket_service", lambda: ticket_service)


def body(account_id, *tickets):
    return {
        "account_id": account_id,
        "tickets": [{"type": t, "no_of_tickets": n} for t, n in tickets],
    }


class TestPurchase:
    """Tests for POST /api/purchases"""

    def test_valid_purchase_returns_no_content(self, api_client: APIClient, gateway_calls):
        """Given a valid order, reserves, pays and returns 204."""
        response = api_client.post(PURCHASE_URL, body(1, ("ADULT", 2), ("CHILD", 1)))

        assert response.status_code == 204
        assert gateway_calls == [("reserve_seat", 1, 3), ("make_payment", 1, 65)]

    def test_invalid_purchase_returns_bad_request(self, api_client: APIClient, gateway_calls):
        """Given a child alone, returns 400 with the purchase error code."""
        response = api_client.post(PURCHASE_URL, body(1, ("CHILD", 1)))

        assert response.status_code == 400
        assert response.json() == {
            "code": "INVALID_PURCHASE",
            "message": "Invalid ticket purchase",
        }
        assert gateway_calls == []

    def test_rejection_reason_not_exposed(self, api_client: APIClient):
        """The internal rejection reason never reaches the client."""
        response = api_client.post(PURCHASE_URL, body(1, ("ADULT", 1), ("INFANT", 2)))

        assert "INFANTS_EXCEED_ADULTS" not in response.content.decode()

    def test_missing_account_id_is_purchase_error(self, api_client: APIClient):
        """Given no account id, the service rejects the purchase."""
        response = api_client.post(PURCHASE_URL, {"tickets": [{"type": "ADULT", "no_of_tickets": 1}]})

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_PURCHASE"

    def test_negative_count_is_purchase_error(self, api_client: APIClient):
        """Negative counts pass format checks and are rejected by the service."""
        response = api_client.post(PURCHASE_URL, body(1, ("ADULT", -1)))

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_PURCHASE"

    def test_empty_tickets_is_purchase_error(self, api_client: APIClient):
        """An empty ticket list is rejected by the service."""
        response = api_client.post(PURCHASE_URL, body(1))

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_PURCHASE"

    def test_unknown_ticket_type_is_invalid_request(self, api_client: APIClient, gateway_calls):
        """Given an unknown ticket type, returns 400 with field errors."""
        response = api_client.post(PURCHASE_URL, body(1, ("SENIOR", 1)))

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_REQUEST"
        assert "tickets" in response.json()["errors"]
        assert gateway_calls == []

    def test_non_integer_account_is_invalid_request(self, api_client: APIClient):
        """Given a non-numeric account id, returns 400 with field errors."""
        response = api_client.post(PURCHASE_URL, body("abc", ("ADULT", 1)))

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_REQUEST"
        assert "account_id" in response.json()["errors"]


class TestQuote:
    """Tests for POST /api/purchases/quote"""

    def test_quote_returns_totals(self, api_client: APIClient, gateway_calls):
        """Given a valid order, returns totals without reserving or paying."""
        response = api_client.post(
            QUOTE_URL, body(5, ("ADULT", 1), ("INFANT", 1), ("CHILD", 2))
        )

        assert response.status_code == 200
        assert response.json() == {
            "account_id": 5,
            "total_amount": 55,
            "total_seats": 3,
            "tickets": {"adult": 1, "child": 2, "infant": 1},
        }
        assert gateway_calls == []

    def test_quote_over_limit_returns_bad_request(self, api_client: APIClient):
        """Given more than 25 tickets, returns 400."""
        response = api_client.post(QUOTE_URL, body(1, ("ADULT", 20), ("CHILD", 6)))

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_PURCHASE"
