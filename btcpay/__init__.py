"""
Client for the BTCPay Server Greenfield "payment request" resource.

Typical use:

    config = load_btcpay_config()
    async with HTTPTransport.from_config(config) as transport:
        client = PaymentRequestsClient(transport)
        created = await client.create_payment_request(
            PaymentRequestRequest(amount=10.5, currency="USD", title="Invoice 1")
        )
"""

from .clients.real_http import HTTPTransport, PaymentRequestsClient
from .contracts import PaymentRequest, PaymentRequestRequest, PaymentRequestStatus
from .utils import BTCPayConfig, load_btcpay_config

__all__ = [
    "HTTPTransport", "PaymentRequestsClient",
    "PaymentRequest", "PaymentRequestRequest", "PaymentRequestStatus",
    "BTCPayConfig", "load_btcpay_config",
]
