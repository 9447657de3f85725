"""Pytest configuration and shared fixtures."""

import os

import pytest

# Keep the API module from writing a log file into the working directory
os.environ.setdefault("LOG_FILE", "")

from ticket_service.interfaces import PaymentCollector, SeatAllocator  # noqa: E402


class CallLog:
    """Records collaborator calls in the order they happen."""

    def __init__(self):
        self.calls = []


class RecordingPaymentCollector(PaymentCollector):
    def __init__(self, call_log: CallLog, error: Exception | None = None):
        self.call_log = call_log
        self.error = error

    def collect(self, account_id: int, amount: int) -> None:
        self.call_log.calls.append(("collect", account_id, amount))
        if self.error is not None:
            raise self.error


class RecordingSeatAllocator(SeatAllocator):
    def __init__(self, call_log: CallLog, error: Exception | None = None):
        self.call_log = call_log
        self.error = error

    def allocate(self, account_id: int, seat_count: int) -> None:
        self.call_log.calls.append(("allocate", account_id, seat_count))
        if self.error is not None:
            raise self.error


@pytest.fixture
def call_log() -> CallLog:
    return CallLog()


@pytest.fixture
def payment_collector(call_log) -> RecordingPaymentCollector:
    return RecordingPaymentCollector(call_log)


@pytest.fixture
def seat_allocator(call_log) -> RecordingSeatAllocator:
    return RecordingSeatAllocator(call_log)
