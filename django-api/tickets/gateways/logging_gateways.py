"""Gateways that accept every call and log it.

Used when no real payment or seat reservation service is configured.
"""

import logging

from tickets.gateways.interfaces import PaymentGateway, SeatReservationGateway

logger = logging.getLogger(__name__)


class LoggingSeatReservationGateway(SeatReservationGateway):
    def reserve_seat(self, account_id: int, total_seats: int) -> None:
        logger.info("Reserved %d seat(s) for account %d", total_seats, account_id)


class LoggingPaymentGateway(PaymentGateway):
    def make_payment(self, account_id: int, total_amount: int) -> None:
        logger.info("Took payment of %d from account %d", total_amount, account_id)
