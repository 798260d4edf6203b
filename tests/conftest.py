"""Pytest fixtures for the payment request client tests."""

import pytest

from btcpay.clients.mocks.transport import MockTransport
from btcpay.clients.real_http.payment_requests import PaymentRequestsClient


@pytest.fixture
def transport():
    """In-memory transport with no queued responses."""
    return MockTransport()


@pytest.fixture
def client(transport):
    return PaymentRequestsClient(transport)


@pytest.fixture
def payment_request_body():
    return {
        "id": "abc",
        "status": "Pending",
        "amount": 10.5,
        "currency": "USD",
        "title": "Invoice 1",
    }
