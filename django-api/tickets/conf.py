"""Build ticket services from Django settings.

Settings are read on every call so overrides in tests take effect.
"""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from tickets.domain import TicketPolicy
from tickets.gateways.interfaces import PaymentGateway, SeatReservationGateway
from tickets.services.ticket_service import TicketService

DEFAULT_GATEWAYS = {
    "payment": "tickets.gateways.logging_gateways.LoggingPaymentGateway",
    "seat_reservation": "tickets.gateways.logging_gateways.LoggingSeatReservationGateway",
}


def get_ticket_policy() -> TicketPolicy:
    overrides = getattr(settings, "TICKET_POLICY", {})
    try:
        return TicketPolicy(**overrides)
    except (TypeError, ValueError) as exc:
        raise ImproperlyConfigured(f"Invalid TICKET_POLICY: {exc}") from exc


def _load_gateway(name: str, interface: type):
    configured = {**DEFAULT_GATEWAYS, **getattr(settings, "TICKET_GATEWAYS", {})}
    try:
        gateway_class = import_string(configured[name])
    except (ImportError, AttributeError, TypeError) as exc:
        raise ImproperlyConfigured(f"Cannot import {name} gateway: {exc}") from exc

    gateway = gateway_class()
    if not isinstance(gateway, interface):
        raise ImproperlyConfigured(
            f"{configured[name]} is not a {interface.__name__}"
        )
    return gateway


def get_ticket_service() -> TicketService:
    """Return a TicketService wired to the configured gateways and policy."""
    return TicketService(
        payment_gateway=_load_gateway("payment", PaymentGateway),
        seat_reservation_gateway=_load_gateway("seat_reservation", SeatReservationGateway),
        policy=get_ticket_policy(),
    )
