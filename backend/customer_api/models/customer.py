"""Customer ORM — persists the single resource exposed by the API.

Invariants:
    - id is UUID primary key, generated on insert, never reassigned
    - email is unique (uq_customers_email) — closes the check-then-insert race
    - password is stored as received; redaction happens on egress, not here

Design Decisions:
    - Unique index in the store, not only the pre-write lookup: the service
      translates the IntegrityError into EmailConflictError
    - Profile fields (phone, address) nullable, no cross-field rules
"""

import uuid

from sqlalchemy import String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from customer_api.db.base import Base

EMAIL_UNIQUE_CONSTRAINT = "uq_customers_email"


class Customer(Base):
    """Customer row."""
    __tablename__ = "customers"
    __table_args__ = (
        UniqueConstraint("email", name=EMAIL_UNIQUE_CONSTRAINT),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(254), nullable=False)
    password: Mapped[str] = mapped_column(String(200), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Customer id={self.id} email={self.email!r}>"
