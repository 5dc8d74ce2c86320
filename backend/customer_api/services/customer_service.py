"""Customer Service — validation, email uniqueness, redaction for the customer resource.

Invariants:
    - Each call is one pass of validate → uniqueness-check → mutate → persist → redact
    - Every CustomerRead returned has password == "" (list, get, create, update)
    - id is server-assigned on create; on update the path id wins over the body id
    - At most one customer per email: pre-write lookup + unique index in the store
    - Only CustomerApiError subclasses leave this class; anything else becomes
      PersistenceError with the raw cause logged

Design Decisions:
    - Payload arrives as the decoded JSON mapping: validation happens here, so
      any host (HTTP route, script) gets the same InvalidCustomerError
    - Check and mutation share the repository's session transaction; persist()
      is the single commit point
    - Email comparison is exact-match as stored (no case folding)
"""

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Mapping
from uuid import UUID, uuid4

from pydantic import ValidationError

from customer_api.core.domain_types import CustomerId, CustomerOperation
from customer_api.core.errors import (
    CustomerApiError, CustomerNotFoundError, EmailConflictError,
    InvalidCustomerError, PersistenceError, format_validation_details,
)
from customer_api.core.redaction import redact_customer, redact_customers
from customer_api.core.repository_protocols import CustomerRepository
from customer_api.models.customer import Customer
from customer_api.schemas.customer import CustomerRead, CustomerWrite

logger = logging.getLogger(__name__)

DELETE_CONFIRMATION = "customer deleted successfully"


def parse_customer_payload(payload: Any) -> CustomerWrite:
    """Validate a decoded write payload. Raises InvalidCustomerError."""
    if not isinstance(payload, Mapping):
        raise InvalidCustomerError([
            {"field": "body", "message": "expected a JSON object", "type": "dict_type"},
        ])
    try:
        return CustomerWrite.model_validate(dict(payload))
    except ValidationError as e:
        raise InvalidCustomerError(format_validation_details(e.errors())) from e


class CustomerService:
    """Customer lifecycle over a per-request CustomerRepository."""

    def __init__(self, repository: CustomerRepository):
        self.repository = repository

    async def list_customers(self) -> list[CustomerRead]:
        with self._boundary(CustomerOperation.LIST):
            rows = await self.repository.list_all()
            return redact_customers(CustomerRead.model_validate(r) for r in rows)

    async def get_customer(self, customer_id: UUID) -> CustomerRead:
        with self._boundary(CustomerOperation.GET, customer_id):
            row = await self._require(customer_id)
            return redact_customer(CustomerRead.model_validate(row))

    async def create_customer(self, payload: Mapping[str, Any]) -> CustomerRead:
        """Validate, reject duplicate email, insert under a fresh id."""
        customer = parse_customer_payload(payload)
        with self._boundary(CustomerOperation.CREATE):
            await self._ensure_email_available(customer.email)
            row = Customer(id=uuid4(), **_row_fields(customer))
            await self.repository.insert(row)
            await self.repository.persist()
            logger.info(
                "Customer created",
                extra={"customer_id": str(row.id), "operation": "create"},
            )
            return redact_customer(CustomerRead.model_validate(row))

    async def update_customer(
        self, customer_id: UUID, payload: Mapping[str, Any],
    ) -> CustomerRead:
        """Whole-record replace. Body id is ignored."""
        customer = parse_customer_payload(payload)
        with self._boundary(CustomerOperation.UPDATE, customer_id):
            await self._require(customer_id)
            await self._ensure_email_available(customer.email, exclude_id=customer_id)
            row = Customer(id=customer_id, **_row_fields(customer))
            await self.repository.update(row)
            await self.repository.persist()
            logger.info(
                "Customer updated",
                extra={"customer_id": str(customer_id), "operation": "update"},
            )
            return redact_customer(CustomerRead.model_validate(row))

    async def delete_customer(self, customer_id: UUID) -> str:
        with self._boundary(CustomerOperation.DELETE, customer_id):
            row = await self._require(customer_id)
            await self.repository.delete(row)
            await self.repository.persist()
            logger.info(
                "Customer deleted",
                extra={"customer_id": str(customer_id), "operation": "delete"},
            )
            return DELETE_CONFIRMATION

    async def _require(self, customer_id: UUID) -> Customer:
        row = await self.repository.find_by_id(CustomerId(customer_id))
        if row is None:
            raise CustomerNotFoundError(str(customer_id))
        return row

    async def _ensure_email_available(
        self, email: str, exclude_id: UUID | None = None,
    ) -> None:
        criteria = [Customer.email == email]
        if exclude_id is not None:
            criteria.append(Customer.id != exclude_id)
        if await self.repository.find_one(*criteria) is not None:
            logger.warning(
                "Rejected write: email already in use",
                extra={"customer_id": str(exclude_id) if exclude_id else None},
            )
            raise EmailConflictError(email)

    @contextmanager
    def _boundary(
        self, operation: CustomerOperation, customer_id: UUID | None = None,
    ) -> Iterator[None]:
        try:
            yield
        except CustomerApiError:
            raise
        except Exception as e:
            logger.error(
                f"Unexpected failure during customer {operation.value}: {e}",
                exc_info=True,
                extra={
                    "operation": operation.value,
                    "customer_id": str(customer_id) if customer_id else None,
                },
            )
            raise PersistenceError(operation.value, str(e)) from e


def _row_fields(customer: CustomerWrite) -> dict[str, Any]:
    return customer.model_dump()
