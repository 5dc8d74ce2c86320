"""Domain Types — verifies identity wrapper, redaction constant and operations."""

from uuid import uuid4

from customer_api.core.domain_types import (
    CustomerId, CustomerOperation, REDACTED_PASSWORD,
)


def test_customer_id_wraps_uuid():
    uid = uuid4()
    assert CustomerId(uid) == uid


def test_redacted_password_is_empty():
    assert REDACTED_PASSWORD == ""


def test_operations_cover_crud():
    assert {op.value for op in CustomerOperation} == {
        "list", "get", "create", "update", "delete",
    }
