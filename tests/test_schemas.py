"""Tests for car schemas."""

import pytest
from bson import ObjectId
from pydantic import ValidationError

from car_api.app.schemas.car import CarCreate, CarRead, CarUpdate, describe_validation_errors


def test_create_dumps_stored_keys():
    car = CarCreate(brand="Toyota", model="Corolla", year=2023)
    assert car.to_document() == {"marca": "Toyota", "modelo": "Corolla", "año": 2023}


def test_create_rejects_float_year():
    with pytest.raises(ValidationError):
        CarCreate(marca="Toyota", modelo="Corolla", año=2023.5)


def test_update_dumps_only_supplied_fields():
    assert CarUpdate(año=2020).to_document() == {"año": 2020}
    assert CarUpdate().to_document() == {}


def test_read_from_document_serializes_by_alias():
    oid = ObjectId()
    car = CarRead.from_document({"_id": oid, "marca": "Ford", "modelo": "Mustang", "año": 2022})
    assert car.id == str(oid)
    assert car.model_dump(by_alias=True) == {
        "_id": str(oid),
        "marca": "Ford",
        "modelo": "Mustang",
        "año": 2022,
    }


def test_describe_validation_errors_lists_missing_fields():
    with pytest.raises(ValidationError) as exc_info:
        CarCreate(marca="Toyota")
    described = describe_validation_errors(exc_info.value.errors())
    assert sorted(item["field"] for item in described) == ["año", "modelo"]
    assert {item["type"] for item in described} == {"missing"}


def test_describe_validation_errors_strips_body_prefix():
    errors = [
        {"loc": ("body", "año"), "msg": "Input should be a valid integer", "type": "int_parsing"},
        {"loc": ("body",), "msg": "Field required", "type": "missing"},
    ]
    assert describe_validation_errors(errors) == [
        {"field": "año", "message": "Input should be a valid integer", "type": "int_parsing"},
        {"field": "body", "message": "Field required", "type": "missing"},
    ]


@pytest.mark.parametrize("year", [2**63, -(2**63) - 1])
def test_year_must_fit_in_bson_int64(year):
    with pytest.raises(ValidationError):
        CarCreate(marca="Toyota", modelo="Corolla", año=year)
    with pytest.raises(ValidationError):
        CarUpdate(año=year)


def test_year_at_int64_limits_accepted():
    assert CarCreate(marca="A", modelo="B", año=2**63 - 1).year == 2**63 - 1
    assert CarUpdate(año=-(2**63)).year == -(2**63)


def test_read_keeps_fractional_year_from_store():
    car = CarRead.from_document({"_id": ObjectId(), "marca": "Fiat", "modelo": "Uno", "año": 1999.5})
    assert car.year == 1999.5
    whole = CarRead.from_document({"_id": ObjectId(), "marca": "Fiat", "modelo": "Uno", "año": 1999})
    assert isinstance(whole.year, int)
