"""
models.py — Data Models for Ticket Purchases

This module defines the data structures used for ticket purchase requests and
for the validated order that the purchase workflow works on.
It uses Pydantic models to ensure type safety and automatic validation of incoming data.

Models:
    - TicketCategory: The closed set of ticket types and their unit prices.
    - TicketRequest: "N tickets of category C" as requested by the caller.
    - PurchaseOrder: A fully validated purchase, with derived totals.
    - PurchaseRequest: The purchase payload received over the HTTP API.
"""

from enum import Enum
from types import MappingProxyType
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, StrictInt

MAX_TICKETS = 25


class TicketCategory(str, Enum):
    """
    Ticket types that can be purchased.

    The unit price of each category is fixed; see `UNIT_PRICES`.
    """
    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"

    @property
    def price(self) -> int:
        return UNIT_PRICES[self]

    @property
    def takes_seat(self) -> bool:
        # Infants sit on an adult's lap
        return self is not TicketCategory.INFANT


UNIT_PRICES = MappingProxyType({
    TicketCategory.ADULT: 25,
    TicketCategory.CHILD: 15,
    TicketCategory.INFANT: 0,
})


class TicketRequest(BaseModel):
    """
    Represents a request for a number of tickets of a single category.

    Attributes:
        category (TicketCategory): The ticket type.
        quantity (int): Number of tickets. Not constrained here, so that a
            negative count reaches the purchase validator and is rejected there.
            Strict: booleans, floats and strings are not coerced.
    """
    model_config = ConfigDict(frozen=True)

    category: TicketCategory
    quantity: StrictInt


class PurchaseOrder(BaseModel):
    """
    A purchase that has passed every business rule.

    Only `validate_purchase()` builds these; the counts and totals are derived
    from the requests and never stored separately.

    Attributes:
        account_id (int): The purchasing account.
        requests (tuple[TicketRequest, ...]): The requests, in caller order.
    """
    model_config = ConfigDict(frozen=True)

    account_id: int
    requests: tuple[TicketRequest, ...]

    def count(self, category: TicketCategory) -> int:
        """Sum of quantities over all requests of the given category."""
        return sum(r.quantity for r in self.requests if r.category is category)

    @property
    def adult_count(self) -> int:
        return self.count(TicketCategory.ADULT)

    @property
    def child_count(self) -> int:
        return self.count(TicketCategory.CHILD)

    @property
    def infant_count(self) -> int:
        return self.count(TicketCategory.INFANT)

    @property
    def total_tickets(self) -> int:
        return sum(r.quantity for r in self.requests)

    @property
    def total_seats(self) -> int:
        return sum(r.quantity for r in self.requests if r.category.takes_seat)

    @property
    def total_price(self) -> int:
        return sum(r.quantity * r.category.price for r in self.requests)


class PurchaseRequest(BaseModel):
    """
    Represents a ticket purchase submitted over the HTTP API.

    Both fields are optional at the payload level; a missing account or ticket
    list is a business rule violation reported by the validator with its own
    error code rather than a schema error. accountId is strict, so `true`,
    `"42"` or `42.0` are schema errors and never coerced to an account.

    Attributes:
        accountId (Optional[int]): The purchasing account.
        tickets (Optional[List[TicketRequest]]): The requested tickets.
    """
    accountId: Optional[StrictInt] = None
    tickets: Optional[List[TicketRequest]] = None
