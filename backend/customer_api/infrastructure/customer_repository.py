"""Customer Repository — SQLAlchemy gateway over the customers table.

Invariants:
    - One instance per request, bound to that request's AsyncSession
    - Reads return detached rows (no change tracking leaks to callers)
    - insert/update/delete are pending until persist() commits them
    - All SQLAlchemy exceptions mapped to core/errors.py types; raw driver
      text is logged here and kept only on PersistenceError.cause

Design Decisions:
    - IntegrityError on uq_customers_email → EmailConflictError: the unique
      index is the final arbiter when two writers pass the pre-write lookup
    - flush() after each mutation: constraint failures surface at the call
      that caused them, before persist()
"""

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from customer_api.core.errors import (
    ConstraintViolationError, CustomerNotFoundError, EmailConflictError,
    ErrorContext, PersistenceError,
)
from customer_api.models.customer import Customer, EMAIL_UNIQUE_CONSTRAINT

logger = logging.getLogger(__name__)

_EMAIL_CONSTRAINT_MARKERS = (EMAIL_UNIQUE_CONSTRAINT, "customers.email")

# Row columns copied by update(); id is never among them.
_MUTABLE_COLUMNS = ("name", "email", "password", "phone", "address")


def is_email_conflict(exc: IntegrityError) -> bool:
    """True when the integrity failure came from the email unique index."""
    text = str(exc.orig) if exc.orig is not None else str(exc)
    return any(marker in text for marker in _EMAIL_CONSTRAINT_MARKERS)


class SqlCustomerRepository:
    """CustomerRepository implementation over one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> Sequence[Customer]:
        with self._translate_errors("list_all"):
            result = await self.db.execute(select(Customer))
            rows = result.scalars().all()
        for row in rows:
            self.db.expunge(row)
        return rows

    async def find_by_id(self, customer_id: UUID) -> Customer | None:
        with self._translate_errors("find_by_id"):
            row = await self.db.get(Customer, customer_id)
        return self._detach(row)

    async def find_one(self, *criteria: Any) -> Customer | None:
        """First row matching all criteria, store order. None when no match."""
        with self._translate_errors("find_one"):
            result = await self.db.execute(
                select(Customer).where(*criteria).limit(1),
            )
            row = result.scalars().first()
        return self._detach(row)

    async def insert(self, customer: Customer) -> None:
        with self._translate_errors("insert", customer.email):
            self.db.add(customer)
            await self.db.flush()

    async def update(self, customer: Customer) -> None:
        """Replace the stored row that has customer.id."""
        with self._translate_errors("update", customer.email):
            row = await self.db.get(Customer, customer.id)
            if row is None:
                raise CustomerNotFoundError(str(customer.id))
            for column in _MUTABLE_COLUMNS:
                setattr(row, column, getattr(customer, column))
            await self.db.flush()

    async def delete(self, customer: Customer) -> None:
        with self._translate_errors("delete"):
            row = await self.db.get(Customer, customer.id)
            if row is None:
                raise CustomerNotFoundError(str(customer.id))
            await self.db.delete(row)
            await self.db.flush()

    async def persist(self) -> None:
        """Commit pending mutations as one unit."""
        with self._translate_errors("commit"):
            await self.db.commit()

    def _detach(self, row: Customer | None) -> Customer | None:
        if row is not None:
            self.db.expunge(row)
        return row

    @contextmanager
    def _translate_errors(
        self, operation: str, email: str | None = None,
    ) -> Iterator[None]:
        try:
            yield
        except IntegrityError as e:
            if is_email_conflict(e):
                logger.warning(
                    f"Email unique index rejected {operation}",
                    extra={"operation": operation},
                )
                raise EmailConflictError(
                    email or "", ErrorContext(operation=operation),
                ) from e
            logger.error(
                f"DB integrity error: {e}",
                extra={"operation": operation},
            )
            raise ConstraintViolationError(operation, str(e)) from e
        except SQLAlchemyError as e:
            logger.error(
                f"DB error during {operation}: {e}",
                extra={"operation": operation},
            )
            raise PersistenceError(operation, str(e)) from e
