"""Ticket service - all purchase business logic lives here.

Services:
- Depend only on interfaces (gateways)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or raise domain errors
"""

import logging
from typing import NoReturn

from tickets.domain import (
    AccountId,
    InvalidPurchaseError,
    PurchaseOrder,
    RejectionReason,
    TicketCounts,
    TicketPolicy,
    TicketType,
    TicketTypeRequest,
)
from tickets.gateways.interfaces import PaymentGateway, SeatReservationGateway

logger = logging.getLogger(__name__)


class TicketService:
    """Service for validating, pricing and purchasing tickets."""

    def __init__(
        self,
        payment_gateway: PaymentGateway,
        seat_reservation_gateway: SeatReservationGateway,
        policy: TicketPolicy | None = None,
    ) -> None:
        self._payment_gateway = payment_gateway
        self._seat_reservation_gateway = seat_reservation_gateway
        self._policy = policy or TicketPolicy()

    def purchase_tickets(
        self, account_id: int | None, *ticket_type_requests: TicketTypeRequest | None
    ) -> None:
        """Reserve seats and take payment for a valid purchase.

        Seats are reserved before payment is taken. Gateway errors are not
        caught: if payment fails the reservation stays in place.

        Raises:
            InvalidPurchaseError: If the purchase breaks any purchase rule.
                No gateway is called in that case.
        """
        order = self.price_purchase(account_id, *ticket_type_requests)

        self._seat_reservation_gateway.reserve_seat(
            order.account_id.value, order.total_seats.value
        )
        self._payment_gateway.make_payment(order.account_id.value, order.total_amount.amount)

        logger.info(
            "Purchased tickets for account %d: %d seat(s), amount %s",
            order.account_id.value,
            order.total_seats.value,
            order.total_amount,
        )

    def price_purchase(
        self, account_id: int | None, *ticket_type_requests: TicketTypeRequest | None
    ) -> PurchaseOrder:
        """Validate a purchase and return its totals without side effects.

        Raises:
            InvalidPurchaseError: If the purchase breaks any purchase rule.
        """
        account = self._validate_account_id(account_id)
        requests = self._validate_ticket_requests(account_id, ticket_type_requests)

        counts = TicketCounts.from_requests(requests)
        self._validate_business_rules(account_id, counts)

        return PurchaseOrder(
            account_id=account,
            counts=counts,
            total_amount=self._policy.price(counts),
            total_seats=self._policy.seats(counts),
        )

    def _validate_account_id(self, account_id: int | None) -> AccountId:
        try:
            return AccountId(account_id)  # type: ignore[arg-type]
        except ValueError:
            _reject(RejectionReason.INVALID_ACCOUNT_ID, account_id)

    def _validate_ticket_requests(
        self, account_id: int | None, requests: tuple[TicketTypeRequest | None, ...]
    ) -> list[TicketTypeRequest]:
        if not requests:
            _reject(RejectionReason.NO_TICKET_REQUESTS, account_id)

        valid = []
        for request in requests:
            if request is None:
                _reject(RejectionReason.MISSING_TICKET_REQUEST, account_id)
            if not isinstance(request.ticket_type, TicketType):
                _reject(RejectionReason.UNKNOWN_TICKET_TYPE, account_id)
            count = request.no_of_tickets
            if isinstance(count, bool) or not isinstance(count, int):
                _reject(RejectionReason.INVALID_TICKET_COUNT, account_id)
            if count < 0:
                _reject(RejectionReason.NEGATIVE_TICKET_COUNT, account_id)
            valid.append(request)
        return valid

    def _validate_business_rules(self, account_id: int | None, counts: TicketCounts) -> None:
        if counts.total == 0:
            _reject(RejectionReason.NO_TICKETS, account_id)

        if counts.total > self._policy.max_tickets_per_purchase:
            _reject(RejectionReason.TOO_MANY_TICKETS, account_id)

        if (counts.child > 0 or counts.infant > 0) and counts.adult == 0:
            _reject(RejectionReason.NO_ADULT_PRESENT, account_id)

        # Count comparison only: one adult covers one infant.
        if counts.infant > counts.adult:
            _reject(RejectionReason.INFANTS_EXCEED_ADULTS, account_id)


def _reject(reason: RejectionReason, account_id: object) -> NoReturn:
    logger.warning("Rejected ticket purchase for account %r: %s", account_id, reason.value)
    raise InvalidPurchaseError(reason)
