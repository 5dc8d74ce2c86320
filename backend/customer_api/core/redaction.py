"""Redaction — clears sensitive fields before a customer leaves the system.

Invariants:
    - Every customer returned by the service passes through redact_customer
    - Inputs are never mutated; a redacted copy is returned

Design Decisions:
    - Applied on every egress path, including create/update responses
"""

from collections.abc import Iterable

from customer_api.core.domain_types import REDACTED_PASSWORD
from customer_api.schemas.customer import CustomerRead


def redact_customer(customer: CustomerRead) -> CustomerRead:
    """Return a copy of customer with the password cleared."""
    return customer.model_copy(update={"password": REDACTED_PASSWORD})


def redact_customers(customers: Iterable[CustomerRead]) -> list[CustomerRead]:
    return [redact_customer(c) for c in customers]
