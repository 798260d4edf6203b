import json

import pytest

from btcpay.contracts.payment_requests import PaymentRequestStatus
from btcpay.errors import (
    AuthenticationError,
    AuthorizationError,
    BadRequestError,
    NotFoundError,
    ResponseDecodeError,
    StatusError,
    UnexpectedStatusError,
)
from btcpay.policy.response_wrappers import (
    OutcomeKind,
    classify_status,
    decode_payment_request,
    ensure_success,
)


def test_200_is_success_and_keeps_body():
    outcome = classify_status(200, b"{}")

    assert outcome.kind is OutcomeKind.SUCCESS
    assert outcome.body == b"{}"
    assert outcome.error is None
    assert ensure_success(200, b"{}") == b"{}"


@pytest.mark.parametrize(
    "status_code, error_type",
    [
        (401, AuthenticationError),
        (403, AuthorizationError),
        (400, BadRequestError),
        (404, NotFoundError),
    ],
)
def test_mapped_statuses_are_classified(status_code, error_type):
    outcome = classify_status(status_code, b'{"message": "nope"}')

    assert outcome.kind is OutcomeKind.CLASSIFIED_ERROR
    assert isinstance(outcome.error, error_type)
    assert outcome.error.status_code == status_code
    assert outcome.error.body == b'{"message": "nope"}'

    with pytest.raises(error_type):
        ensure_success(status_code, b"")


def test_401_and_403_are_distinct():
    assert not isinstance(classify_status(401, b"").error, AuthorizationError)
    assert not isinstance(classify_status(403, b"").error, AuthenticationError)


@pytest.mark.parametrize("status_code", [201, 204, 418, 422, 500, 503])
def test_unmapped_statuses_carry_the_code(status_code):
    outcome = classify_status(status_code, b"")

    assert outcome.kind is OutcomeKind.UNEXPECTED_STATUS
    assert isinstance(outcome.error, UnexpectedStatusError)
    assert outcome.error.status_code == status_code
    assert str(status_code) in str(outcome.error)


def test_decode_payment_request(payment_request_body):
    pr = decode_payment_request(json.dumps(payment_request_body).encode())

    assert pr.id == "abc"
    assert pr.status is PaymentRequestStatus.PENDING
    assert pr.request.amount == 10.5


@pytest.mark.parametrize(
    "body",
    [
        b"{not json",
        b"",
        b"[1, 2, 3]",
        b'"just a string"',
        b'{"id": "abc", "status": "Pending"}',
        b'{"id": "abc", "status": "Unknown", "amount": 1, "currency": "USD", "title": "T"}',
        b"\xff\xfe",
    ],
)
def test_decode_failures_raise_response_decode_error(body):
    with pytest.raises(ResponseDecodeError) as exc_info:
        decode_payment_request(body)

    assert not isinstance(exc_info.value, StatusError)
    assert exc_info.value.body == body
