"""Customer Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - Wire keys are lower camelCase; snake_case accepted on input
    - CustomerWrite.name/email/password: required, non-blank (name stripped)
    - CustomerWrite has no id: a body id is dropped like any unknown key
    - CustomerRead always carries a password key (redacted to "" by the service)

Design Decisions:
    - alias_generator=to_camel on a shared base: one casing policy for every schema
    - extra="ignore": unknown payload keys are dropped, not rejected
    - Email exact-match as stored: no case folding in the validator
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for wire schemas — camelCase aliases, populate by field name too."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class CustomerWrite(CamelModel):
    """Create/replace payload."""
    name: str = Field(min_length=1, max_length=200)
    email: str = Field(
        min_length=3, max_length=254, pattern=r"^[^@\s]+@[^@\s]+$",
    )
    password: str = Field(min_length=1, max_length=200)
    phone: str | None = Field(None, max_length=30)
    address: str | None = Field(None, max_length=2000)

    @field_validator("name", "email", "password")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("cannot be empty or whitespace")
        return v

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return v.strip()


class CustomerRead(CamelModel):
    """Customer as returned to callers."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    email: str
    password: str = ""
    phone: str | None = None
    address: str | None = None


class DeleteConfirmation(BaseModel):
    """Body of a successful delete."""
    message: str
