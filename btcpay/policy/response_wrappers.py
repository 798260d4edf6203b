"""
Response interpretation shared by the resource clients.

- classify_status: the one status table for the payment request endpoints
- ensure_success: raise the error of a non-success outcome
- decode_payment_request: parse a body into the PaymentRequest contract
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Type

from pydantic import ValidationError

from btcpay.contracts.payment_requests import PaymentRequest
from btcpay.errors import (
    AuthenticationError,
    AuthorizationError,
    BadRequestError,
    NotFoundError,
    ResponseDecodeError,
    StatusError,
    UnexpectedStatusError,
)

_STATUS_ERRORS: Dict[int, Type[StatusError]] = {
    401: AuthenticationError,    # "Unauthorized" in HTTP terms, really unauthenticated
    403: AuthorizationError,
    400: BadRequestError,
    404: NotFoundError,
}

_STATUS_MESSAGES: Dict[int, str] = {
    401: "BTCPay rejected the credentials (unauthenticated).",
    403: "BTCPay credentials lack permission for this resource.",
    400: "BTCPay rejected the request payload.",
    404: "BTCPay resource not found.",
}


class OutcomeKind(str, Enum):
    SUCCESS = "SUCCESS"
    CLASSIFIED_ERROR = "CLASSIFIED_ERROR"
    UNEXPECTED_STATUS = "UNEXPECTED_STATUS"


@dataclass(frozen=True)
class StatusOutcome:
    kind: OutcomeKind
    status_code: int
    body: bytes
    error: Optional[StatusError] = None


def classify_status(status_code: int, body: bytes) -> StatusOutcome:
    if status_code == 200:
        return StatusOutcome(OutcomeKind.SUCCESS, status_code, body)

    error_type = _STATUS_ERRORS.get(status_code)
    if error_type is None:
        return StatusOutcome(
            OutcomeKind.UNEXPECTED_STATUS,
            status_code,
            body,
            UnexpectedStatusError(status_code, body=body),
        )
    return StatusOutcome(
        OutcomeKind.CLASSIFIED_ERROR,
        status_code,
        body,
        error_type(_STATUS_MESSAGES[status_code], body=body),
    )


def ensure_success(status_code: int, body: bytes) -> bytes:
    """Return the body of a 200 response, otherwise raise its StatusError."""
    outcome = classify_status(status_code, body)
    if outcome.error is not None:
        raise outcome.error
    return outcome.body


def decode_payment_request(body: bytes) -> PaymentRequest:
    try:
        data = json.loads(body)
    except (TypeError, ValueError) as exc:
        raise ResponseDecodeError(f"Response body is not valid JSON: {exc}", body=body) from exc

    if not isinstance(data, dict):
        raise ResponseDecodeError(
            f"Expected a JSON object for a payment request, got {type(data).__name__}.",
            body=body,
        )

    try:
        return PaymentRequest.model_validate(data)
    except ValidationError as exc:
        raise ResponseDecodeError(f"Response validation failed: {exc}", body=body) from exc
