"""
Mock BTCPay transport.

Purpose:
- Serves queued responses without any network access
- Records every call so tests can assert on method, path and payload
- Tracks whether each response was released by the caller

Queue an Exception instance instead of a response to simulate a transport
failure (connection refused, timeout, ...).
"""

from __future__ import annotations

import json
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, AsyncIterator, List, Optional, Union

from btcpay.contracts.interfaces import Transport


@dataclass
class RecordedCall:
    method: str
    path: str
    body: Optional[bytes]

    def json(self) -> Any:
        return json.loads(self.body) if self.body else None


class MockResponse:
    def __init__(self, status_code: int, body: bytes) -> None:
        self.status_code = status_code
        self._body = body
        self.read = False
        self.closed = False

    async def aread(self) -> bytes:
        self.read = True
        return self._body


QueuedResponse = Union[MockResponse, BaseException]


class MockTransport(Transport):
    def __init__(self) -> None:
        self.calls: List[RecordedCall] = []
        self.served: List[MockResponse] = []
        self._queue: List[QueuedResponse] = []

    def queue(self, status_code: int, body: Union[bytes, str, dict, None] = None) -> MockResponse:
        if body is None:
            raw = b""
        elif isinstance(body, dict):
            raw = json.dumps(body).encode("utf-8")
        elif isinstance(body, str):
            raw = body.encode("utf-8")
        else:
            raw = body
        response = MockResponse(status_code, raw)
        self._queue.append(response)
        return response

    def queue_error(self, error: BaseException) -> None:
        self._queue.append(error)

    @asynccontextmanager
    async def do_request(
        self,
        method: str,
        path: str,
        body: Optional[bytes] = None,
    ) -> AsyncIterator[MockResponse]:
        self.calls.append(RecordedCall(method=method, path=path, body=body))
        if not self._queue:
            raise LookupError(f"No mock response queued for {method} {path}")

        item = self._queue.pop(0)
        if isinstance(item, BaseException):
            raise item

        self.served.append(item)
        try:
            yield item
        finally:
            item.closed = True
