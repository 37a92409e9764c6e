"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from tickets.gateways.interfaces import PaymentGateway, SeatReservationGateway
from tickets.services.ticket_service import TicketService


class RecordingSeatReservationGateway(SeatReservationGateway):
    """Records every reservation into a shared call log."""

    def __init__(self, calls: list) -> None:
        self.calls = calls

    def reserve_seat(self, account_id: int, total_seats: int) -> None:
        self.calls.append(("reserve_seat", account_id, total_seats))


class RecordingPaymentGateway(PaymentGateway):
    """Records every payment into a shared call log."""

    def __init__(self, calls: list) -> None:
        self.calls = calls

    def make_payment(self, account_id: int, total_amount: int) -> None:
        self.calls.append(("make_payment", account_id, total_amount))


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def gateway_calls() -> list:
    return []


@pytest.fixture
def seat_reservation_gateway(gateway_calls) -> RecordingSeatReservationGateway:
    return RecordingSeatReservationGateway(gateway_calls)


@pytest.fixture
def payment_gateway(gateway_calls) -> RecordingPaymentGateway:
    return RecordingPaymentGateway(gateway_calls)


@pytest.fixture
def ticket_service(payment_gateway, seat_reservation_gateway) -> TicketService:
    return TicketService(
        payment_gateway=payment_gateway,
        seat_reservation_gateway=seat_reservation_gateway,
    )
