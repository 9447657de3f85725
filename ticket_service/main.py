"""
main.py — FastAPI Entry Point for the Ticket Service

This module provides the REST API interface for cinema ticket purchases.
It is thin glue around the purchase workflow: it parses the payload, wires the
collaborator clients and maps outcomes to HTTP responses.

Responsibilities:
    • Accept ticket purchases via HTTP API
    • Quote a purchase (validation and totals only, nothing is charged)
    • Translate rejections and collaborator failures to HTTP status codes
    • Provide system health information
"""

import grpc
import httpx
from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from .clients import PaymentClient, SeatReservationClient
from .errors import InvalidPurchase
from .interfaces import PaymentCollector, SeatAllocator
from .logging_config import get_logger, setup_logging
from .models import PurchaseRequest
from .workflow import PurchaseValidator, validate_purchase

# Initialization
setup_logging()
log = get_logger(__name__)
app = FastAPI(title="Cinema Ticket Service")


# Collaborator dependencies (overridable in tests)
def get_payment_collector():
    client = PaymentClient()
    try:
        yield client
    finally:
        client.close()


def get_seat_allocator():
    client = SeatReservationClient()
    try:
        yield client
    finally:
        client.close()


@app.exception_handler(InvalidPurchase)
async def invalid_purchase_handler(request: Request, exc: InvalidPurchase):
    """Maps a rejected purchase to 422 with its rejection code."""
    return JSONResponse(
        status_code=422,
        content={"errorCode": exc.code, "message": exc.message},
    )


# API Endpoint: purchase tickets
@app.post("/v1/purchases", status_code=201)
def purchase_tickets(
        purchase: PurchaseRequest,
        payment_collector: PaymentCollector = Depends(get_payment_collector),
        seat_allocator: SeatAllocator = Depends(get_seat_allocator),
):
    """
    Validates a ticket purchase, collects payment and reserves seats.

    Args:
        purchase (PurchaseRequest): The purchase payload.
        payment_collector (PaymentCollector): Payment collaborator.
        seat_allocator (SeatAllocator): Seat reservation collaborator.

    Returns:
        dict: accountId and status "completed".

    Raises:
        InvalidPurchase: Rendered as 422 by `invalid_purchase_handler`.
        HTTPException(402): If the payment was declined.
        HTTPException(502): If a collaborator failed otherwise.
    """
    log_prefix = f"[Account: {purchase.accountId}]"
    validator = PurchaseValidator(payment_collector, seat_allocator)
    try:
        validator.purchase(purchase.accountId, purchase.tickets)
    except httpx.HTTPStatusError as e:
        if e.response.status_code == 402:
            raise HTTPException(
                status_code=402,
                detail={"errorCode": "payment_declined", "message": "Payment declined."},
            )
        log.error(f"{log_prefix} Payment Service failed (HTTP {e.response.status_code}).")
        raise HTTPException(status_code=502, detail="Payment service failure.")
    except httpx.TransportError:
        raise HTTPException(status_code=502, detail="Payment service unavailable.")
    except grpc.RpcError as e:
        # Payment has already been collected at this point
        log.critical(f"{log_prefix} Seats not reserved after payment ({e.code()}). MANUAL ACTION REQUIRED!")
        raise HTTPException(status_code=502, detail="Seat reservation failure.")

    return {"accountId": purchase.accountId, "status": "completed"}


# API Endpoint: quote a purchase
@app.post("/v1/purchases/quote")
def quote_tickets(purchase: PurchaseRequest):
    """
    Validates a purchase and returns its totals without charging or reserving anything.

    Returns:
        dict: accountId, totalTickets, totalPrice and totalSeats.
    """
    order = validate_purchase(purchase.accountId, purchase.tickets)
    return {
        "accountId": order.account_id,
        "totalTickets": order.total_tickets,
        "totalPrice": order.total_price,
        "totalSeats": order.total_seats,
    }


# Health Check Endpoint
@app.get("/health")
def health_check():
    """
    Simple health check endpoint.

    Returns:
        dict: A basic JSON object indicating service availability.
    """
    return {"status": "ok"}
