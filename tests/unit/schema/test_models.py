"""Tests for the document records."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from specforge.schema import (
    BodyParameter,
    Operation,
    PathItem,
    PathParameter,
    QueryParameter,
    ReferenceParameter,
    Response,
    Schema,
    Swagger,
)


class TestSchema:
    def test_wire_names(self) -> None:
        schema = Schema(ref="#/definitions/Pet", read_only=True, max_length=3)

        assert schema.model_dump(by_alias=True, exclude_none=True) == {
            "$ref": "#/definitions/Pet",
            "readOnly": True,
            "maxLength": 3,
        }

    def test_parse_wire_names(self) -> None:
        schema = Schema.model_validate(
            {"type": "array", "items": {"$ref": "#/definitions/Pet"}, "minItems": 1}
        )

        assert schema.items.ref == "#/definitions/Pet"
        assert schema.min_items == 1

    def test_set_property(self) -> None:
        schema = Schema()
        name = schema.set_property("name", Schema(type="string"))

        assert schema.properties == {"name": name}

    def test_add_required(self) -> None:
        schema = Schema()

        assert schema.add_required("name") is True
        assert schema.add_required("name") is False
        assert schema.required == ["name"]

    def test_empty_values_are_set(self) -> None:
        schema = Schema(description="", minimum=0)

        assert schema.model_dump(by_alias=True, exclude_none=True) == {
            "description": "",
            "minimum": 0,
        }


class TestOperation:
    def test_parameters_by_location(self) -> None:
        operation = Operation.model_validate(
            {
                "parameters": [
                    {"name": "id", "in": "path", "required": True, "type": "integer"},
                    {"name": "q", "in": "query", "type": "string"},
                    {"name": "body", "in": "body", "schema": {"type": "object"}},
                ]
            }
        )

        assert isinstance(operation.get_parameter("id"), PathParameter)
        assert isinstance(operation.get_parameter("q"), QueryParameter)
        body = operation.get_body_parameter()
        assert isinstance(body, BodyParameter)
        assert body.schema_.type == "object"
        assert operation.get_parameter("missing") is None

    def test_reference_parameters(self) -> None:
        operation = Operation.model_validate(
            {"parameters": [{"$ref": "#/parameters/limit"}, {"name": "q", "in": "query"}]}
        )

        reference, query = operation.parameters
        assert isinstance(reference, ReferenceParameter)
        assert reference.ref == "#/parameters/limit"
        assert isinstance(query, QueryParameter)
        assert operation.get_parameter("q") is query

    def test_parameters_built_in_code(self) -> None:
        operation = Operation(
            parameters=[ReferenceParameter(ref="#/parameters/limit"), QueryParameter(name="q")]
        )

        assert operation.model_dump(by_alias=True, exclude_none=True)["parameters"] == [
            {"$ref": "#/parameters/limit"},
            {"name": "q", "in": "query"},
        ]

    def test_unknown_parameter_location_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Operation.model_validate({"parameters": [{"name": "x", "in": "cookie"}]})

        with pytest.raises(ValidationError):
            Operation.model_validate({"parameters": [{"name": "x"}]})

    def test_responses_are_keyed_by_string(self) -> None:
        operation = Operation()
        response = operation.set_response(404, Response(description="Missing"))

        assert operation.get_response("404") is response
        assert operation.get_response(404) is response
        assert list(operation.responses) == ["404"]

    def test_dump_parameter_location(self) -> None:
        operation = Operation(parameters=[QueryParameter(name="q", type="string")])

        data = operation.model_dump(by_alias=True, exclude_none=True)

        assert data["parameters"] == [{"name": "q", "in": "query", "type": "string"}]


def test_path_item_operations() -> None:
    item = PathItem(get=Operation(), delete=Operation())
    assert list(item.operations()) == ["get", "delete"]


def test_definitions() -> None:
    document = Swagger()
    assert not document.has_definition("Pet")

    pet = document.add_definition("Pet", Schema(type="object"))

    assert document.has_definition("Pet")
    assert document.definitions["Pet"] is pet
    assert document.swagger == "2.0"
