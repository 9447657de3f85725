"""
mock_seat_service.py — Mock Implementation of the Seat Reservation Service (gRPC)

This module provides a simulated Seat Reservation Service for local runs of the ticket service.
It serves the `seating.SeatReservationService/ReserveSeats` method with JSON encoded
messages, matching `ticket_service.clients.SeatReservationClient`.

The mock simulates common seating scenarios:
    • Successful reservation of seats
    • Sold out (not enough remaining capacity) → RESOURCE_EXHAUSTED
    • Invalid seat count → INVALID_ARGUMENT

Port:
    Default: 50052 (gRPC)
"""

import logging
import os
import threading
import time
from concurrent import futures

import grpc

from ticket_service.clients import decode_message, encode_message

logging.basicConfig(level=logging.INFO)


class SeatInventory:
    """
    In-memory seat capacity for one screening.

    Reservations for all accounts go through one lock, so concurrent purchases
    can never reserve more seats than exist.
    """

    def __init__(self, capacity: int):
        self.remaining = capacity
        self._lock = threading.Lock()

    def reserve_seats(self, request: dict, context):
        """
        Handles a ReserveSeats call.

        Args:
            request (dict): Contains accountId and seatCount.
            context (grpc.ServicerContext): The gRPC context, used to abort with a status code.

        Returns:
            dict: reservationId, seatCount and the remaining capacity.
        """
        account_id = request["accountId"]
        seat_count = request["seatCount"]
        logging.info(f"[SRS] Reservation request for account {account_id}: {seat_count} seats")

        if seat_count < 0:
            context.abort(grpc.StatusCode.INVALID_ARGUMENT, "seatCount must not be negative")

        with self._lock:
            if seat_count > self.remaining:
                logging.warning(f"[SRS] Only {self.remaining} seats left, {seat_count} requested.")
                context.abort(grpc.StatusCode.RESOURCE_EXHAUSTED, "Not enough seats available")
            self.remaining -= seat_count
            remaining = self.remaining

        reservation_id = f"res-{account_id}-{time.time_ns()}"
        logging.info(f"[SRS] {seat_count} seats reserved for account {account_id}. ID: {reservation_id}")
        return {"reservationId": reservation_id, "seatCount": seat_count, "remaining": remaining}


def build_handler(inventory: SeatInventory) -> grpc.GenericRpcHandler:
    """Builds the generic gRPC handler serving ReserveSeats from the given inventory."""
    return grpc.method_handlers_generic_handler(
        "seating.SeatReservationService",
        {
            "ReserveSeats": grpc.unary_unary_rpc_method_handler(
                inventory.reserve_seats,
                request_deserializer=decode_message,
                response_serializer=encode_message,
            )
        },
    )


def serve():
    capacity = int(os.environ.get("MOCK_SEAT_CAPACITY", "500"))
    server = grpc.server(futures.ThreadPoolExecutor(max_workers=10))
    server.add_generic_rpc_handlers((build_handler(SeatInventory(capacity)),))
    server.add_insecure_port('[::]:50052')
    logging.info(f"Mock Seat Reservation Service (gRPC) starting on port 50052 with {capacity} seats...")
    server.start()
    server.wait_for_termination()


if __name__ == '__main__':
    serve()
