"""
Errors raised by the BTCPay payment request client.

Status errors map one-to-one onto the HTTP codes the Greenfield API uses for
this resource. ResponseDecodeError is kept outside the StatusError branch so a
200 with an unreadable body is never mistaken for a classified failure.

Transport failures are not wrapped here: whatever the transport raises
(httpx.TransportError for the default one) reaches the caller untouched.
"""

from __future__ import annotations

from typing import Optional


class BTCPayError(Exception):
    """Base class for every error raised by this package."""


class StatusError(BTCPayError):
    status_code: int = 0

    def __init__(self, message: str, *, status_code: Optional[int] = None, body: bytes = b"") -> None:
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code
        self.body = body


class AuthenticationError(StatusError):
    """401. The API calls this Unauthorized but it means no or invalid credentials."""

    status_code = 401


class AuthorizationError(StatusError):
    """403. Credentials are valid but lack the permission for this store."""

    status_code = 403


class BadRequestError(StatusError):
    status_code = 400


class NotFoundError(StatusError):
    status_code = 404


class UnexpectedStatusError(StatusError):
    def __init__(self, status_code: int, *, body: bytes = b"") -> None:
        super().__init__(f"response status: {status_code}", status_code=status_code, body=body)


class ResponseDecodeError(BTCPayError):
    def __init__(self, message: str, *, body: bytes = b"") -> None:
        super().__init__(message)
        self.body = body
