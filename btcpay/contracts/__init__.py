"""
Contracts (data models).

Request/response shapes for the Greenfield resources this package covers and
the Transport interface the resource clients talk through. Both the real httpx
transport and the in-memory mock follow these contracts.
"""

from .interfaces import Transport, TransportResponse
from .payment_requests import (
    PaymentRequest,
    PaymentRequestRequest,
    PaymentRequestStatus,
    is_terminal_status,
)

__all__ = [
    "Transport", "TransportResponse",
    "PaymentRequest", "PaymentRequestRequest", "PaymentRequestStatus",
    "is_terminal_status",
]
