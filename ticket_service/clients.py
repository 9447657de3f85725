"""
This module provides communication clients for the external systems a ticket purchase depends on:
- Payment Service (REST API)
- Seat Reservation Service (gRPC)
Each class encapsulates its protocol logic, error handling, and connection management.
Errors are logged and re-raised unchanged; the purchase workflow does not interpret them.
"""

import json
import logging
import os

import grpc
import httpx

from .interfaces import PaymentCollector, SeatAllocator

# Service addresses
PAYMENT_SERVICE_URL = os.environ.get("PAYMENT_SERVICE_URL", "http://payment_service:8001")
SEAT_SERVICE_URL = os.environ.get("SEAT_SERVICE_URL", "seat_service:50052")

RESERVE_SEATS_METHOD = "/seating.SeatReservationService/ReserveSeats"

log = logging.getLogger(__name__)


def encode_message(message: dict) -> bytes:
    """Serializes a gRPC message as UTF-8 JSON."""
    return json.dumps(message).encode("utf-8")


def decode_message(data: bytes) -> dict:
    """Deserializes a UTF-8 JSON gRPC message."""
    return json.loads(data.decode("utf-8"))


# --- Payment Client (REST) ---
class PaymentClient(PaymentCollector):
    """
    Client for the Payment Service (REST API).
    Charges ticket purchases to the purchasing account.
    """
    def __init__(self, base_url=PAYMENT_SERVICE_URL, transport=None):
        """
        Initializes the HTTP client with proper timeout configuration.

        Args:
            base_url (str): Base URL of the Payment Service.
            transport (httpx.BaseTransport | None): Optional transport, e.g. for tests.
        """
        timeout_config = httpx.Timeout(5.0, read=8.0)
        self.client = httpx.Client(base_url=base_url, timeout=timeout_config, transport=transport)

    def close(self):
        """Closes the HTTP client session."""
        self.client.close()

    def collect(self, account_id: int, amount: int) -> dict:
        """
        Charges an account via the Payment Service REST API.
        Args:
            account_id (int): The account to charge.
            amount (int): Amount in whole currency units.
        Returns:
            dict: JSON response containing transaction details and status.
        Raises:
            httpx.TransportError: If the service cannot be reached or does not respond in time.
            httpx.HTTPStatusError: If the service returns an error status (4xx or 5xx).
        """
        payload = {"accountId": account_id, "amount": amount}
        try:
            response = self.client.post("/v1/payments", json=payload)
            response.raise_for_status()
            result = response.json()
        except httpx.TransportError as e:
            log.error(f"[Account: {account_id}] Payment Service unreachable: {e!r}")
            raise
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 402:
                log.warning(f"[Account: {account_id}] Payment declined: {e.response.text}")
            else:
                log.error(f"[Account: {account_id}] HTTP error from Payment Service: {e}")
            raise

        log.info(f"[Account: {account_id}] Payment of {amount} collected. (TxID: {result.get('transactionId')})")
        return result


# --- Seat Reservation Client (gRPC) ---
class SeatReservationClient(SeatAllocator):
    """
    Client for the Seat Reservation Service (gRPC).
    Messages are exchanged as JSON, so no generated stubs are required.
    """
    def __init__(self, target=SEAT_SERVICE_URL, channel=None):
        """
        Initializes the gRPC channel and the ReserveSeats callable.

        Args:
            target (str): host:port of the Seat Reservation Service.
            channel (grpc.Channel | None): Optional pre-built channel, e.g. for tests.
        """
        self.channel = channel or grpc.insecure_channel(target)
        self._reserve_seats = self.channel.unary_unary(
            RESERVE_SEATS_METHOD,
            request_serializer=encode_message,
            response_deserializer=decode_message,
        )

    def close(self):
        """Closes the gRPC channel."""
        self.channel.close()

    def allocate(self, account_id: int, seat_count: int) -> dict:
        """
        Sends a ReserveSeats request to the Seat Reservation Service.
        Args:
            account_id (int): The account the seats are reserved for.
            seat_count (int): Number of seats to reserve.
        Returns:
            dict: The reservation result including reservationId.
        Raises:
            grpc.RpcError: If the gRPC call fails or times out.
        """
        request = {"accountId": account_id, "seatCount": seat_count}
        try:
            reservation = self._reserve_seats(request, timeout=5)
        except grpc.RpcError as e:
            log.error(f"[Account: {account_id}] gRPC call to seat service failed: {e.code()} - {e.details()}")
            raise

        log.info(f"[Account: {account_id}] {seat_count} seats reserved. (ID: {reservation.get('reservationId')})")
        return reservation
