"""Error hierarchy — kinds, status codes and response envelopes.

Tests:
    - Each concrete error carries the right ErrorKind and HTTP status
    - Fixed client-facing messages for invalid input and email conflict
    - Not-found renders no body
    - Persistence errors keep the raw cause out of the envelope
"""

from customer_api.core.errors import (
    ConstraintViolationError, CustomerApiError, CustomerNotFoundError,
    EmailConflictError, ErrorKind, ErrorSeverity, InvalidCustomerError,
    PersistenceError, format_validation_details,
)


def test_error_kind_has_exactly_four_members():
    assert set(ErrorKind) == {
        ErrorKind.INVALID_INPUT,
        ErrorKind.CONFLICT,
        ErrorKind.NOT_FOUND,
        ErrorKind.PERSISTENCE,
    }


def test_invalid_customer_envelope():
    details = [{"field": "email", "message": "Field required", "type": "missing"}]
    body = InvalidCustomerError(details).to_response()
    assert body["error"]["code"] == "INVALID_CUSTOMER"
    assert body["error"]["message"] == "invalid customer"
    assert body["error"]["kind"] == "invalid_input"
    assert body["error"]["details"] == details


def test_email_conflict_is_400_with_fixed_message():
    err = EmailConflictError("a@x.com")
    assert err.http_status == 400
    assert err.kind is ErrorKind.CONFLICT
    assert err.to_response()["error"]["message"] == (
        "a customer with this email already exists"
    )
    assert "details" not in err.to_response()["error"]


def test_not_found_is_404_without_body():
    err = CustomerNotFoundError("123")
    assert err.http_status == 404
    assert err.to_response() is None
    assert err.context.customer_id == "123"


def test_persistence_error_keeps_cause_out_of_response():
    err = PersistenceError("commit", "deadlock detected on relation customers")
    body = err.to_response()
    assert err.http_status == 400
    assert err.severity is ErrorSeverity.CRITICAL
    assert "deadlock" not in str(body)
    assert err.cause.startswith("deadlock")


def test_constraint_violation_is_a_persistence_error():
    err = ConstraintViolationError("insert", "NOT NULL constraint failed")
    assert isinstance(err, PersistenceError)
    assert isinstance(err, CustomerApiError)
    assert err.code == "CONSTRAINT_VIOLATION"
    assert err.kind is ErrorKind.PERSISTENCE


def test_format_validation_details_joins_location():
    details = format_validation_details([
        {"loc": ("body", "email"), "msg": "Field required", "type": "missing"},
    ])
    assert details == [
        {"field": "body.email", "message": "Field required", "type": "missing"},
    ]
