"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO against an AsyncSession
    - Mutations are pending until persist(): one transaction per request
"""

from typing import Any, Protocol, Sequence
from uuid import UUID

from customer_api.core.domain_types import CustomerId


class CustomerLike(Protocol):
    """Structural contract for Customer rows handed across the gateway.

    Avoids coupling the service to the ORM model while giving mypy
    real type information (unlike Any).
    """
    id: UUID
    name: str
    email: str
    password: str
    phone: str | None
    address: str | None


class CustomerRepository(Protocol):
    """Contract for customer persistence — implemented by shell."""
    async def list_all(self) -> Sequence[CustomerLike]: ...
    async def find_by_id(self, customer_id: CustomerId) -> CustomerLike | None: ...
    async def find_one(self, *criteria: Any) -> CustomerLike | None: ...
    async def insert(self, customer: CustomerLike) -> None: ...
    async def update(self, customer: CustomerLike) -> None: ...
    async def delete(self, customer: CustomerLike) -> None: ...
    async def persist(self) -> None: ...
