from tickets.domain.errors import DomainError, ErrorCode, InvalidPurchaseError, RejectionReason
from tickets.domain.models import PurchaseOrder, TicketCounts, TicketType, TicketTypeRequest
from tickets.domain.policy import TicketPolicy
from tickets.domain.value_objects import AccountId, Money, SeatCount

__all__ = [
    "TicketType",
    "TicketTypeRequest",
    "TicketCounts",
    "PurchaseOrder",
    "TicketPolicy",
    "AccountId",
    "Money",
    "SeatCount",
    "DomainError",
    "ErrorCode",
    "InvalidPurchaseError",
    "RejectionReason",
]
