"""
Payment request contracts.

Shapes of the Greenfield "payment request" resource:
- PaymentRequestRequest: what we send when creating one
- PaymentRequest: what the server sends back (the request fields plus
  server-assigned metadata)

Field names on the wire are camelCase; Python attributes are snake_case and
either spelling is accepted on construction.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, SerializerFunctionWrapHandler, model_serializer, model_validator


class PaymentRequestStatus(str, Enum):
    PENDING = "Pending"
    COMPLETED = "Completed"
    EXPIRED = "Expired"


_TERMINAL_STATUSES: Dict[PaymentRequestStatus, bool] = {
    PaymentRequestStatus.PENDING: False,
    PaymentRequestStatus.COMPLETED: True,
    PaymentRequestStatus.EXPIRED: True,
}


def is_terminal_status(status: PaymentRequestStatus) -> bool:
    """Return True once the payment request can no longer be paid."""
    return _TERMINAL_STATUSES[PaymentRequestStatus(status)]


_LATEST_EXPIRY = datetime.max.replace(microsecond=0, tzinfo=timezone.utc)
_EARLIEST_EXPIRY = datetime.min.replace(tzinfo=timezone.utc)


class PaymentRequestRequest(BaseModel):
    """Mandatory fields are amount, currency and title."""

    model_config = ConfigDict(populate_by_name=True)

    amount: float
    currency: str                        # ISO 4217 code (BTC, EUR, USD, ...)
    title: str
    allow_custom_payment_amounts: Optional[bool] = Field(default=None, alias="allowCustomPaymentAmounts")
    custom_css_link: Optional[str] = Field(default=None, alias="customCSSLink")      # URI
    description: Optional[str] = None    # HTML
    email: Optional[str] = None
    embedded_css: Optional[str] = Field(default=None, alias="embeddedCSS")           # up to 500 bytes
    expiry_date: Optional[str] = Field(default=None, alias="expiryDate")             # RFC3339

    def set_expiry_days(self, days: int) -> None:
        """Set expiry_date to now + days. Offsets past the datetime range saturate."""
        now = datetime.now(timezone.utc).replace(microsecond=0)
        try:
            expires_at = now + timedelta(days=days)
        except OverflowError:
            expires_at = _LATEST_EXPIRY if days > 0 else _EARLIEST_EXPIRY
        self.expiry_date = expires_at.isoformat()

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready dict using wire names. Unset optional fields are left out."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


_REQUEST_KEYS = frozenset(
    key
    for name, info in PaymentRequestRequest.model_fields.items()
    for key in (name, info.alias)
    if key
)


class PaymentRequest(BaseModel):
    """
    A payment request as stored by the server.

    The creation fields live in `request`; on the wire they sit at the top level
    next to the server fields, so they are lifted in on validation and merged
    back out on serialization.
    """

    model_config = ConfigDict(populate_by_name=True)

    request: PaymentRequestRequest
    archived: bool = False
    created: Optional[str] = None
    id: str
    status: PaymentRequestStatus

    @model_validator(mode="before")
    @classmethod
    def _lift_request_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        # already nested, e.g. PaymentRequest(request=..., id=...)
        if "request" in data and not _REQUEST_KEYS.intersection(data):
            return data
        own: Dict[str, Any] = {}
        request: Dict[str, Any] = {}
        for key, value in data.items():
            if key in _REQUEST_KEYS:
                request[key] = value
            elif key != "request":
                own[key] = value
        own["request"] = request
        return own

    @model_serializer(mode="wrap")
    def _flatten_request_fields(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        request = data.pop("request", None) or {}
        return {**request, **data}

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
