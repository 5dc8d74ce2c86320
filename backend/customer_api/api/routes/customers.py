"""Customer Routes — HTTP surface of the customer resource.

Invariants:
    - One CustomerService (and one DB session) per request via Depends
    - Request bodies handed to the service as decoded JSON; validation lives there
    - POST answers 201 with a Location header pointing at GET /customers/{id}
    - Responses serialised by alias (camelCase)

Design Decisions:
    - Error mapping is global (api/error_handlers.py): routes never catch
"""

from typing import Any
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from customer_api.infrastructure.customer_repository import SqlCustomerRepository
from customer_api.infrastructure.database import get_db
from customer_api.schemas.customer import CustomerRead, DeleteConfirmation
from customer_api.services.customer_service import CustomerService

router = APIRouter(prefix="/customers", tags=["customers"])


def get_customer_service(db: AsyncSession = Depends(get_db)) -> CustomerService:
    return CustomerService(SqlCustomerRepository(db))


@router.get("", response_model=list[CustomerRead])
async def list_customers(service: CustomerService = Depends(get_customer_service)):
    """All customers, passwords redacted."""
    return await service.list_customers()


@router.get("/{customer_id}", response_model=CustomerRead)
async def get_customer(
    customer_id: UUID, service: CustomerService = Depends(get_customer_service),
):
    return await service.get_customer(customer_id)


@router.post(
    "", response_model=CustomerRead, status_code=status.HTTP_201_CREATED,
)
async def create_customer(
    request: Request,
    response: Response,
    payload: dict[str, Any] = Body(...),
    service: CustomerService = Depends(get_customer_service),
):
    """Create a customer. The server assigns the id."""
    customer = await service.create_customer(payload)
    response.headers["Location"] = str(
        request.url_for("get_customer", customer_id=str(customer.id)),
    )
    return customer


@router.put("/{customer_id}", response_model=CustomerRead)
async def update_customer(
    customer_id: UUID,
    payload: dict[str, Any] = Body(...),
    service: CustomerService = Depends(get_customer_service),
):
    """Replace a customer. The path id wins over any id in the body."""
    return await service.update_customer(customer_id, payload)


@router.delete("/{customer_id}", response_model=DeleteConfirmation)
async def delete_customer(
    customer_id: UUID, service: CustomerService = Depends(get_customer_service),
):
    message = await service.delete_customer(customer_id)
    return DeleteConfirmation(message=message)
