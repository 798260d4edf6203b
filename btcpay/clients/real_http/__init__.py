"""
Real HTTP integration clients.

- transport.py: httpx transport scoped to one BTCPay store
- payment_requests.py: the payment requests resource client

Important:
- Resource clients must return data shaped according to btcpay/contracts/*
"""

from .payment_requests import PaymentRequestsClient
from .transport import HTTPTransport

__all__ = ["HTTPTransport", "PaymentRequestsClient"]
