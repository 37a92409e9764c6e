"""Domain error codes for the tickets module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_PURCHASE = "INVALID_PURCHASE"


class RejectionReason(Enum):
    """Which purchase rule was broken. Internal only, never sent to clients."""

    INVALID_ACCOUNT_ID = "INVALID_ACCOUNT_ID"
    NO_TICKET_REQUESTS = "NO_TICKET_REQUESTS"
    MISSING_TICKET_REQUEST = "MISSING_TICKET_REQUEST"
    UNKNOWN_TICKET_TYPE = "UNKNOWN_TICKET_TYPE"
    INVALID_TICKET_COUNT = "INVALID_TICKET_COUNT"
    NEGATIVE_TICKET_COUNT = "NEGATIVE_TICKET_COUNT"
    NO_TICKETS = "NO_TICKETS"
    TOO_MANY_TICKETS = "TOO_MANY_TICKETS"
    NO_ADULT_PRESENT = "NO_ADULT_PRESENT"
    INFANTS_EXCEED_ADULTS = "INFANTS_EXCEED_ADULTS"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str
    detail: str = ""

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidPurchaseError(DomainError):
    """Raised when a ticket purchase breaks any purchase rule."""

    def __init__(self, reason: RejectionReason) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PURCHASE,
            message="Invalid ticket purchase",
            detail=reason.value,
        )

    @property
    def reason(self) -> RejectionReason:
        return RejectionReason(self.detail)
