"""
workflow.py — Core Purchase Logic

This module contains the decision logic for a ticket purchase and the
orchestration of the two collaborators it depends on.

Workflow Overview:
1. Validate the account and the requested tickets (no side effects)
2. Compute the total price and the number of seats
3. Collect payment via the PaymentCollector
4. Allocate seats via the SeatAllocator

Either every rule passes and both collaborators are called once, in that
order, or an InvalidPurchase is raised and neither is called.
"""

import logging
from typing import Iterable, Optional

from .errors import InvalidPurchase, RejectionReason
from .interfaces import PaymentCollector, SeatAllocator
from .models import MAX_TICKETS, PurchaseOrder, TicketRequest

log = logging.getLogger(__name__)


def validate_purchase(account_id: Optional[int],
                      requests: Optional[Iterable[TicketRequest]]) -> PurchaseOrder:
    """
    Checks a purchase against the business rules and returns the validated order.

    The rules are checked in a fixed order and the first one that fails wins.

    Args:
        account_id (Optional[int]): The purchasing account. Must be a positive integer.
        requests (Optional[Iterable[TicketRequest]]): The requested tickets.
            Requests of the same category are added together.

    Returns:
        PurchaseOrder: The validated order, with totals available as properties.

    Raises:
        InvalidPurchase: With one of the following reasons:
            - INVALID_ACCOUNT: account is missing, not an integer, or not positive.
            - NO_TICKETS: no requests were given, or one of them is None.
            - NEGATIVE_QUANTITY: a request has a negative quantity.
            - TICKET_LIMIT_EXCEEDED: more than MAX_TICKETS tickets, or none at all.
            - NO_ADULT: child or infant tickets without an adult ticket.
            - TOO_MANY_INFANTS: more infants than adults.
    """
    # bool is an int subclass; True is not an account
    if not isinstance(account_id, int) or isinstance(account_id, bool) or account_id <= 0:
        raise InvalidPurchase(RejectionReason.INVALID_ACCOUNT)

    requests = tuple(requests) if requests is not None else ()
    if not requests or any(request is None for request in requests):
        raise InvalidPurchase(RejectionReason.NO_TICKETS)

    if any(request.quantity < 0 for request in requests):
        raise InvalidPurchase(RejectionReason.NEGATIVE_QUANTITY)

    order = PurchaseOrder(account_id=account_id, requests=requests)

    if not 0 < order.total_tickets <= MAX_TICKETS:
        raise InvalidPurchase(RejectionReason.TICKET_LIMIT_EXCEEDED)

    if order.adult_count == 0 and order.child_count + order.infant_count > 0:
        raise InvalidPurchase(RejectionReason.NO_ADULT)

    # One infant per adult lap
    if order.infant_count > order.adult_count:
        raise InvalidPurchase(RejectionReason.TOO_MANY_INFANTS)

    return order


class PurchaseValidator:
    """
    Validates and prices ticket purchases, then charges and seats the account.

    Holds no state besides its two collaborators, so a single instance can
    serve concurrent purchases.
    """

    def __init__(self, payment_collector: PaymentCollector, seat_allocator: SeatAllocator):
        self.payment_collector = payment_collector
        self.seat_allocator = seat_allocator

    def purchase(self, account_id: Optional[int],
                 requests: Optional[Iterable[TicketRequest]]) -> None:
        """
        Executes a complete ticket purchase.

        Args:
            account_id (Optional[int]): The purchasing account.
            requests (Optional[Iterable[TicketRequest]]): The requested tickets.

        Raises:
            InvalidPurchase: If a business rule fails. No collaborator has been called.
            Exception: Whatever the payment collector or seat allocator raises,
                unchanged. If seat allocation fails, payment has already been collected.
        """
        log_prefix = f"[Account: {account_id}]"
        log.info(f"{log_prefix} Ticket purchase received.")

        try:
            order = validate_purchase(account_id, requests)
        except InvalidPurchase as e:
            log.warning(f"{log_prefix} Purchase rejected ({e.code}).")
            raise

        log.info(f"{log_prefix} Purchase valid: {order.total_tickets} tickets, "
                 f"price {order.total_price}, {order.total_seats} seats.")

        self.payment_collector.collect(order.account_id, order.total_price)
        self.seat_allocator.allocate(order.account_id, order.total_seats)

        log.info(f"{log_prefix} Purchase completed.")
