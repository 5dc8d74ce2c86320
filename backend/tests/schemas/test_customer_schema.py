"""Customer schemas — casing policy and field-level validation."""

import pytest
from uuid import uuid4
from pydantic import ValidationError

from customer_api.schemas.customer import CamelModel, CustomerRead, CustomerWrite


def _valid(**overrides) -> dict:
    data = {"name": "Ada", "email": "ada@example.com", "password": "pw"}
    data.update(overrides)
    return data


def test_write_accepts_minimal_payload():
    customer = CustomerWrite.model_validate(_valid())
    assert customer.phone is None
    assert customer.address is None


@pytest.mark.parametrize("field", ["name", "email", "password"])
def test_write_requires_core_fields(field):
    data = _valid()
    del data[field]
    with pytest.raises(ValidationError):
        CustomerWrite.model_validate(data)


@pytest.mark.parametrize("field", ["name", "password"])
def test_write_rejects_blank_values(field):
    with pytest.raises(ValidationError):
        CustomerWrite.model_validate(_valid(**{field: "   "}))


def test_write_rejects_malformed_email():
    with pytest.raises(ValidationError):
        CustomerWrite.model_validate(_valid(email="ada.example.com"))


def test_write_strips_name_but_keeps_email_as_given():
    customer = CustomerWrite.model_validate(_valid(name="  Ada  ", email="Ada@Example.com"))
    assert customer.name == "Ada"
    assert customer.email == "Ada@Example.com"


def test_camel_case_aliases_for_multi_word_fields():
    class _Probe(CamelModel):
        date_of_birth: str

    assert _Probe.model_validate({"dateOfBirth": "1815-12-10"}).date_of_birth == "1815-12-10"
    assert _Probe.model_validate({"date_of_birth": "x"}).model_dump(by_alias=True) == {
        "dateOfBirth": "x",
    }


def test_read_builds_from_orm_attributes():
    class _Row:
        id = uuid4()
        name = "Ada"
        email = "ada@example.com"
        password = "pw"
        phone = None
        address = None

    read = CustomerRead.model_validate(_Row())
    assert read.email == "ada@example.com"
    assert read.password == "pw"
