"""Unit tests for the collaborator clients.

The payment client runs against httpx.MockTransport, the seat client against a fake channel.
Run with: pytest tests/test_clients.py -v
"""

import json

import grpc
import httpx
import pytest

from ticket_service.clients import (
    RESERVE_SEATS_METHOD,
    PaymentClient,
    SeatReservationClient,
    decode_message,
    encode_message,
)


class FakeRpcError(grpc.RpcError):
    def code(self):
        return grpc.StatusCode.UNAVAILABLE

    def details(self):
        return "connection refused"


class FakeChannel:
    """Stands in for grpc.Channel; captures the registered method and serializers."""

    def __init__(self, respond):
        self.respond = respond
        self.requests = []
        self.closed = False

    def unary_unary(self, method, request_serializer, response_deserializer):
        self.method = method

        def call(request, timeout=None):
            self.requests.append(request_serializer(request))
            return response_deserializer(self.respond(request))

        return call

    def close(self):
        self.closed = True


def payment_client(handler) -> PaymentClient:
    return PaymentClient(base_url="http://payments", transport=httpx.MockTransport(handler))


class TestPaymentClient:
    """Tests for PaymentClient."""

    def test_collect_posts_account_and_amount(self):
        """collect() posts accountId and amount to /v1/payments."""
        seen = []

        def handler(request):
            seen.append((request.method, request.url.path, json.loads(request.content)))
            return httpx.Response(200, json={"transactionId": "tr_1", "status": "succeeded"})

        result = payment_client(handler).collect(42, 95)

        assert seen == [("POST", "/v1/payments", {"accountId": 42, "amount": 95})]
        assert result["transactionId"] == "tr_1"

    def test_declined_payment_raises_status_error(self):
        """A 402 response is raised as httpx.HTTPStatusError."""
        client = payment_client(lambda request: httpx.Response(402, json={"errorCode": "payment_declined"}))

        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            client.collect(402, 25)

        assert exc_info.value.response.status_code == 402

    def test_transport_error_is_reraised(self):
        """Connection failures propagate as httpx transport errors."""
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(httpx.ConnectError):
            payment_client(handler).collect(42, 25)


class TestSeatReservationClient:
    """Tests for SeatReservationClient."""

    def test_allocate_sends_json_request(self):
        """allocate() calls ReserveSeats with accountId and seatCount."""
        channel = FakeChannel(lambda request: encode_message({"reservationId": "res-1"}))
        client = SeatReservationClient(channel=channel)

        result = client.allocate(42, 5)

        assert channel.method == RESERVE_SEATS_METHOD
        assert [decode_message(r) for r in channel.requests] == [{"accountId": 42, "seatCount": 5}]
        assert result == {"reservationId": "res-1"}

    def test_rpc_error_is_reraised(self):
        """gRPC failures propagate unchanged."""
        def respond(request):
            raise FakeRpcError()

        client = SeatReservationClient(channel=FakeChannel(respond))

        with pytest.raises(FakeRpcError):
            client.allocate(42, 1)

    def test_close_closes_channel(self):
        """close() closes the underlying channel."""
        channel = FakeChannel(lambda request: b"{}")
        SeatReservationClient(channel=channel).close()

        assert channel.closed
