from tickets.gateways.interfaces import PaymentGateway, SeatReservationGateway
from tickets.gateways.logging_gateways import LoggingPaymentGateway, LoggingSeatReservationGateway

__all__ = [
    "PaymentGateway",
    "SeatReservationGateway",
    "LoggingPaymentGateway",
    "LoggingSeatReservationGateway",
]
