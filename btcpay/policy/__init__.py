"""
Response policy.

How HTTP outcomes from BTCPay are turned into results or errors. Resource
clients must go through these helpers instead of checking status codes
themselves.
"""

from .response_wrappers import (
    OutcomeKind,
    StatusOutcome,
    classify_status,
    decode_payment_request,
    ensure_success,
)

__all__ = [
    "OutcomeKind", "StatusOutcome", "classify_status",
    "decode_payment_request", "ensure_success",
]
