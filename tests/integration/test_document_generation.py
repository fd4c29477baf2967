"""End-to-end generation of a document with the shipped extractors."""

from __future__ import annotations

import json
from enum import Enum
from typing import Annotated

import pytest
from pydantic import BaseModel, Field, computed_field

from specforge import ExtractionContext, create_generator
from specforge.metadata import (
    PydanticConstraintSource,
    PydanticMetadataSource,
    SerializedNameAnnotationStrategy,
)
from specforge.schema import BodyParameter, Operation, PathItem, Schema

pytestmark = pytest.mark.integration

EXISTING = json.dumps(
    {
        "swagger": "2.0",
        "info": {"title": "Shop", "version": "1.0"},
        "basePath": "/api",
        "paths": {},
    }
)


class Status(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class Address(BaseModel):
    city: str


class Customer(BaseModel):
    id: int = Field(json_schema_extra={"read_only": True})
    name: Annotated[str, Field(min_length=1, max_length=50)]
    email: str = Field(alias="emailAddress", json_schema_extra={"not_blank": True})
    status: Status = Status.ACTIVE
    tags: list[str] = []
    address: Address | None = None

    @computed_field
    @property
    def label(self) -> str:
        """Name shown in listings."""
        return self.name


class CustomerNotFoundError(Exception):
    """No customer has this identifier."""


def get_customer(customer_id: int) -> Customer:
    """
    Get a customer.

    Args:
        customer_id: Identifier of the customer

    Returns:
        The customer

    Raises:
        CustomerNotFoundError:
    """


def create_customer(body: Customer) -> Customer:
    """
    Create a customer.

    @param string $emailAddress Where receipts are sent
    @return Customer The new customer
    """


@pytest.fixture
def generator():
    return create_generator(
        PydanticMetadataSource(Customer),
        constraint_source=PydanticConstraintSource(),
        naming_strategy=SerializedNameAnnotationStrategy(),
    )


def test_generate_document(generator) -> None:
    document = generator.extract(EXISTING)
    context = ExtractionContext(generator, root_schema=document)

    doc_extractor = next(
        registration.extractor
        for registration in generator.registrations
        if hasattr(registration.extractor, "register_exception_response_codes")
    )
    doc_extractor.register_exception_response_codes(CustomerNotFoundError, 404)

    read = generator.extract(get_customer, Operation(operation_id="getCustomer"), context)

    body_schema = generator.extract("Customer", Schema(), context)
    body_schema_definition = document.definitions["Customer"]
    write = Operation(
        operation_id="createCustomer",
        parameters=[BodyParameter(name="body", schema_=body_schema)],
    )
    generator.extract(create_customer, write, context)

    document.paths["/customers/{id}"] = PathItem(get=read)
    document.paths["/customers"] = PathItem(post=write)

    data = json.loads(generator.dump(document))

    assert data["info"] == {"title": "Shop", "version": "1.0"}
    assert data["basePath"] == "/api"

    customer = data["definitions"]["Customer"]
    assert list(customer["properties"]) == [
        "id",
        "name",
        "emailAddress",
        "status",
        "tags",
        "address",
        "label",
    ]
    assert customer["required"] == ["emailAddress", "id", "name"]
    assert customer["properties"]["id"] == {
        "type": "integer",
        "format": "int32",
        "readOnly": True,
        "description": "",
    }
    assert customer["properties"]["name"]["minLength"] == 1
    assert customer["properties"]["name"]["maxLength"] == 50
    assert customer["properties"]["emailAddress"]["format"] == "not empty"
    assert customer["properties"]["status"]["enum"] == ["active", "inactive"]
    assert customer["properties"]["tags"]["items"] == {"type": "string"}
    assert customer["properties"]["address"]["$ref"] == "#/definitions/Address"
    assert customer["properties"]["label"]["readOnly"] is True
    assert customer["properties"]["label"]["description"] == "Name shown in listings."
    assert data["definitions"]["Address"]["required"] == ["city"]

    get_op = data["paths"]["/customers/{id}"]["get"]
    assert get_op["summary"] == "Get a customer."
    assert get_op["responses"]["200"] == {
        "description": "The customer",
        "schema": {"$ref": "#/definitions/Customer"},
    }
    assert get_op["responses"]["404"] == {"description": "No customer has this identifier."}

    post_op = data["paths"]["/customers"]["post"]
    assert post_op["parameters"][0]["in"] == "body"
    assert post_op["parameters"][0]["schema"] == {"$ref": "#/definitions/Customer"}
    assert body_schema_definition.properties["emailAddress"].description == ""


def test_end_to_end_name_and_tags() -> None:
    class Article(BaseModel):
        name: str
        tags: list[str]

    generator = create_generator(PydanticMetadataSource(Article))

    schema = generator.extract(Article, Schema())

    assert list(schema.properties) == ["name", "tags"]
    assert schema.properties["name"].type == "string"
    assert schema.properties["name"].items is None
    assert schema.properties["tags"].type == "array"
    assert schema.properties["tags"].items.type == "string"
