"""
Pydantic schemas for cars.

A car has a brand, a model and a year.  On the wire and in the
database the fields use their Spanish names (``marca``, ``modelo``,
``año``) and the store-assigned identifier is ``_id``; the Python
attributes use English names.  Request bodies are accepted with
either spelling.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# BSON stores integers in at most 8 bytes.
BSON_INT64_MIN = -(2**63)
BSON_INT64_MAX = 2**63 - 1


class CarBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class CarCreate(CarBase):
    """Schema for creating a new car.  All fields are required."""

    brand: str = Field(..., alias="marca", min_length=1, description="Marca del carro")
    model: str = Field(..., alias="modelo", min_length=1, description="Modelo del carro")
    year: int = Field(..., alias="año", ge=BSON_INT64_MIN, le=BSON_INT64_MAX, description="Año del carro")

    model_config = ConfigDict(
        json_schema_extra={"example": {"marca": "Toyota", "modelo": "Corolla", "año": 2023}},
    )

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class CarUpdate(CarBase):
    """Schema for updating an existing car.

    All fields are optional; only provided, non-null values will be
    updated.
    """

    brand: Optional[str] = Field(None, alias="marca", min_length=1)
    model: Optional[str] = Field(None, alias="modelo", min_length=1)
    year: Optional[int] = Field(None, alias="año", ge=BSON_INT64_MIN, le=BSON_INT64_MAX)

    model_config = ConfigDict(
        json_schema_extra={"example": {"marca": "Toyota", "modelo": "Corolla", "año": 2022}},
    )

    def to_document(self) -> Dict[str, Any]:
        """Return the fields to ``$set``, keyed by their stored names."""
        return self.model_dump(by_alias=True, exclude_none=True)


class CarRead(CarBase):
    """Schema for reading a car."""

    id: str = Field(..., alias="_id")
    brand: str = Field(..., alias="marca")
    model: str = Field(..., alias="modelo")
    # Documents written by other clients of the collection may hold a
    # fractional year; those are returned as stored.
    year: Union[int, float] = Field(..., alias="año")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "_id": "61555f3e0f30588a3c4d34e8",
                "marca": "Toyota",
                "modelo": "Corolla",
                "año": 2023,
            }
        },
    )

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "CarRead":
        """Build a ``CarRead`` from a stored document."""
        return cls(
            id=str(doc["_id"]),
            brand=doc["marca"],
            model=doc["modelo"],
            year=doc["año"],
        )


def describe_validation_errors(errors: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    """Flatten Pydantic error entries into ``{field, message, type}`` dicts.

    The ``body`` prefix FastAPI adds to request-body locations is
    dropped, so a missing brand is reported as field ``marca``.
    """
    described: List[Dict[str, Any]] = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] == "body":
            loc = loc[1:]
        described.append(
            {
                "field": ".".join(loc) or "body",
                "message": error.get("msg", ""),
                "type": error.get("type", ""),
            }
        )
    return described
