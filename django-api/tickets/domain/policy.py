"""Business constants for ticket purchases."""

from dataclasses import dataclass

from tickets.domain.models import TicketCounts
from tickets.domain.value_objects import Money, SeatCount

MAX_TICKETS_PER_PURCHASE = 25
ADULT_TICKET_PRICE = 25
CHILD_TICKET_PRICE = 15
INFANT_TICKET_PRICE = 0


@dataclass(frozen=True)
class TicketPolicy:
    """Purchase limit and per-type prices."""

    max_tickets_per_purchase: int = MAX_TICKETS_PER_PURCHASE
    adult_price: int = ADULT_TICKET_PRICE
    child_price: int = CHILD_TICKET_PRICE
    infant_price: int = INFANT_TICKET_PRICE

    def __post_init__(self) -> None:
        if self.max_tickets_per_purchase < 1:
            raise ValueError("max_tickets_per_purchase must be at least 1")
        for name in ("adult_price", "child_price", "infant_price"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} cannot be negative")

    def price(self, counts: TicketCounts) -> Money:
        """Return the total amount payable for the given counts."""
        total = Money(self.adult_price) * counts.adult
        total += Money(self.child_price) * counts.child
        # Kept explicit so a non-zero infant price only needs a settings change.
        total += Money(self.infant_price) * counts.infant
        return total

    def seats(self, counts: TicketCounts) -> SeatCount:
        """Return the seats to reserve. Infants sit on an adult's lap."""
        return SeatCount(counts.adult + counts.child)
