"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AccountId:
    """Identity of the account paying for a purchase."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("AccountId must be an integer")
        if self.value <= 0:
            raise ValueError("AccountId must be positive")


@dataclass(frozen=True)
class Money:
    """Price representation in whole currency units."""

    amount: int

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __add__(self, other: "Money") -> "Money":
        return Money(self.amount + other.amount)

    def __mul__(self, quantity: int) -> "Money":
        return Money(self.amount * quantity)

    def __str__(self) -> str:
        return str(self.amount)


@dataclass(frozen=True)
class SeatCount:
    """Non-negative number of seats."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("SeatCount cannot be negative")
