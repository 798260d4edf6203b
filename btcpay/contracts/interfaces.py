from abc import ABC, abstractmethod
from typing import AsyncContextManager, Optional, Protocol


class TransportResponse(Protocol):
    """The part of an HTTP response the resource clients rely on (httpx.Response fits)."""

    @property
    def status_code(self) -> int: ...

    async def aread(self) -> bytes: ...


class Transport(ABC):
    """Every transport handed to a resource client must implement this interface."""

    @abstractmethod
    def do_request(
        self,
        method: str,
        path: str,
        body: Optional[bytes] = None,
    ) -> AsyncContextManager[TransportResponse]:
        """
        Send `method` to `path` (relative to the store) and yield the response.

        The response is released when the context exits, however it exits.
        Network failures are raised as-is.
        """
