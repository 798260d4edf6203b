"""
Real BTCPay HTTP transport.

Used when a BTCPay Server URL, store id and API key are configured. Resource
clients pass paths relative to the store, e.g. "payment-requests"; this class
turns them into {base_url}/api/v1/stores/{store_id}/payment-requests and adds
the Greenfield "token" authorization header.
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Optional

import httpx

from btcpay.contracts.interfaces import Transport
from btcpay.utils.config_loader import BTCPayConfig

logger = logging.getLogger(__name__)


class HTTPTransport(Transport):
    def __init__(
        self,
        base_url: Optional[str] = None,
        store_id: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout_seconds: float = 20.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = (base_url or os.getenv("BTCPAY_URL", "")).rstrip("/")
        self.store_id = store_id or os.getenv("BTCPAY_STORE_ID", "")
        self.api_key = api_key or os.getenv("BTCPAY_API_KEY", "")
        self.timeout_seconds = timeout_seconds
        self._client = client
        self._owns_client = client is None

    @classmethod
    def from_config(cls, config: BTCPayConfig, client: Optional[httpx.AsyncClient] = None) -> "HTTPTransport":
        return cls(
            base_url=config.base_url,
            store_id=config.store_id,
            api_key=config.api_key,
            timeout_seconds=config.timeout_seconds,
            client=client,
        )

    def store_url(self, path: str) -> str:
        if not self.base_url:
            raise ValueError("BTCPAY_URL is not configured.")
        if not self.store_id:
            raise ValueError("BTCPAY_STORE_ID is not configured.")
        return f"{self.base_url}/api/v1/stores/{self.store_id}/{path.lstrip('/')}"

    def _headers(self, has_body: bool) -> Dict[str, str]:
        headers: Dict[str, str] = {"Accept": "application/json"}
        if has_body:
            headers["Content-Type"] = "application/json"
        if self.api_key:
            headers["Authorization"] = f"token {self.api_key}"
        return headers

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout_seconds)
        return self._client

    @asynccontextmanager
    async def do_request(
        self,
        method: str,
        path: str,
        body: Optional[bytes] = None,
    ) -> AsyncIterator[httpx.Response]:
        url = self.store_url(path)
        client = self._get_client()
        logger.debug("BTCPay %s %s", method, url)
        async with client.stream(method, url, content=body, headers=self._headers(body is not None)) as response:
            yield response

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "HTTPTransport":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
