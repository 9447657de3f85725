"""Collaborator interfaces.

The purchase workflow only talks to payment and seating through these, so
network clients and test doubles are interchangeable.
"""

from abc import ABC, abstractmethod
from typing import Any


class PaymentCollector(ABC):
    """Charges an account."""

    @abstractmethod
    def collect(self, account_id: int, amount: int) -> Any:
        """Charge `amount` (non-negative, whole currency units) to the account.

        The result is collaborator-defined and ignored by the purchase workflow.
        Failures are raised as-is to the caller.
        """
        ...


class SeatAllocator(ABC):
    """Reserves seats for an account."""

    @abstractmethod
    def allocate(self, account_id: int, seat_count: int) -> Any:
        """Reserve `seat_count` (non-negative) seats for the account.

        The result is collaborator-defined and ignored by the purchase workflow.
        Failures are raised as-is to the caller.
        """
        ...
