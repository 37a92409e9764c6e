"""Gateway interfaces for the external collaborators.

Gateways must be swappable; the service never depends on a concrete one.
"""

from abc import ABC, abstractmethod


class SeatReservationGateway(ABC):
    """Interface for the seat reservation service."""

    @abstractmethod
    def reserve_seat(self, account_id: int, total_seats: int) -> None:
        """Reserve total_seats seats for the account.

        May raise any error if the reservation is rejected.
        """
        ...


class PaymentGateway(ABC):
    """Interface for the payment service."""

    @abstractmethod
    def make_payment(self, account_id: int, total_amount: int) -> None:
        """Charge total_amount to the account.

        May raise any error if the payment is rejected.
        """
        ...
