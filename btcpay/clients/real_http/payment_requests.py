"""
Payment requests resource client.

Purpose:
- Creates payment requests on a BTCPay store and fetches them back by id
- Decodes responses into the contracts in btcpay/contracts/payment_requests.py

Implementation notes:
- All HTTP goes through the injected Transport (base URL, auth and timeouts live there)
- The body is read in full while the response is held, then released, then the
  status is classified; nothing is retried here
- Status handling is delegated to btcpay/policy/response_wrappers.py
"""
from __future__ import annotations

import json
import logging
from typing import Optional

from btcpay.contracts.interfaces import Transport
from btcpay.contracts.payment_requests import PaymentRequest, PaymentRequestRequest
from btcpay.policy.response_wrappers import decode_payment_request, ensure_success

logger = logging.getLogger(__name__)

PAYMENT_REQUESTS_PATH = "payment-requests"


class PaymentRequestsClient:
    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    async def create_payment_request(self, request: PaymentRequestRequest) -> PaymentRequest:
        payload = json.dumps(request.to_payload()).encode("utf-8")
        return await self._call("POST", PAYMENT_REQUESTS_PATH, payload)

    async def get_payment_request(self, payment_request_id: str) -> PaymentRequest:
        return await self._call("GET", f"{PAYMENT_REQUESTS_PATH}/{payment_request_id}")

    async def _call(self, method: str, path: str, payload: Optional[bytes] = None) -> PaymentRequest:
        async with self.transport.do_request(method, path, payload) as response:
            body = await response.aread()
            status_code = response.status_code

        logger.debug("%s %s -> %s (%d bytes)", method, path, status_code, len(body))
        return decode_payment_request(ensure_success(status_code, body))
