"""Purchase rejection codes and the error raised for them."""

from enum import Enum


class RejectionReason(Enum):
    """Reasons a purchase can be rejected, with a user-safe message each."""

    INVALID_ACCOUNT = ("invalid-account", "invalid account")
    NO_TICKETS = ("no-tickets", "no tickets requested")
    NEGATIVE_QUANTITY = ("negative-quantity", "negative ticket count")
    TICKET_LIMIT_EXCEEDED = ("ticket-limit-exceeded", "exceeds ticket limit")
    NO_ADULT = ("no-adult", "no adult ticket")
    TOO_MANY_INFANTS = ("too-many-infants", "too many infants")

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message


class InvalidPurchase(Exception):
    """Raised when a purchase breaks a business rule.

    Nothing has been charged or reserved when this is raised.
    """

    def __init__(self, reason: RejectionReason) -> None:
        super().__init__(f"{reason.code}: {reason.message}")
        self.reason = reason

    @property
    def code(self) -> str:
        return self.reason.code

    @property
    def message(self) -> str:
        return self.reason.message
