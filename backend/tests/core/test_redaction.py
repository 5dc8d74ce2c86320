"""Redaction — pure tests for password clearing on egress."""

from uuid import uuid4

from customer_api.core.redaction import redact_customer, redact_customers
from customer_api.schemas.customer import CustomerRead


def _read(password: str = "secret") -> CustomerRead:
    return CustomerRead(
        id=uuid4(), name="Ada", email="ada@example.com", password=password,
    )


def test_redact_clears_password():
    assert redact_customer(_read()).password == ""


def test_redact_does_not_mutate_input():
    original = _read("secret")
    redact_customer(original)
    assert original.password == "secret"


def test_redact_keeps_other_fields():
    original = _read()
    redacted = redact_customer(original)
    assert redacted.id == original.id
    assert redacted.email == original.email


def test_redact_customers_handles_empty_and_many():
    assert redact_customers([]) == []
    assert all(c.password == "" for c in redact_customers([_read(), _read("x")]))
