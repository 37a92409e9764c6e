"""Domain models for a single ticket purchase.

All of these live for one call only; nothing here is persisted.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Self

from tickets.domain.value_objects import AccountId, Money, SeatCount


class TicketType(Enum):
    """Closed set of ticket categories."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"


@dataclass(frozen=True)
class TicketTypeRequest:
    """A request for a number of tickets of one type.

    No validation happens here: a negative count is a purchase failure
    raised by the service, not a construction failure.
    """

    ticket_type: TicketType
    no_of_tickets: int


@dataclass(frozen=True)
class TicketCounts:
    """Requested tickets summed per type."""

    adult: int = 0
    child: int = 0
    infant: int = 0

    @classmethod
    def from_requests(cls, requests: Iterable[TicketTypeRequest]) -> Self:
        adult = child = infant = 0
        for request in requests:
            if request.ticket_type is TicketType.ADULT:
                adult += request.no_of_tickets
            elif request.ticket_type is TicketType.CHILD:
                child += request.no_of_tickets
            else:
                infant += request.no_of_tickets
        return cls(adult=adult, child=child, infant=infant)

    @property
    def total(self) -> int:
        return self.adult + self.child + self.infant


@dataclass(frozen=True)
class PurchaseOrder:
    """A validated and priced purchase, ready to reserve and pay for."""

    account_id: AccountId
    counts: TicketCounts
    total_amount: Money
    total_seats: SeatCount
