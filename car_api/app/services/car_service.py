"""
Service layer for cars.

This module provides the CRUD operations of the API.  Each operation
issues a single call against the car collection and converts the
stored document into a ``CarRead``.  Driver failures are re-raised as
``StorageError``; unknown or malformed identifiers raise
``CarNotFoundError`` or ``InvalidCarIdError`` so that the API layer
can map them to status codes in one place.

Field constraints (required, non-empty, integer year that fits in
BSON) are enforced by the schemas before a request reaches the
service.  Stored documents that cannot be read back also surface as
``StorageError``.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping

from bson import ObjectId
from bson.errors import InvalidId
from pydantic import ValidationError
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from car_api.app.core.errors import CarNotFoundError, InvalidCarIdError, StorageError
from car_api.app.schemas.car import CarCreate, CarRead, CarUpdate

logger = logging.getLogger(__name__)


def parse_car_id(car_id: str) -> ObjectId:
    """Convert a path identifier into an ``ObjectId``.

    Raises ``InvalidCarIdError`` when ``car_id`` is not a 24-character
    hex string.
    """
    try:
        return ObjectId(car_id)
    except (InvalidId, TypeError):
        raise InvalidCarIdError(car_id) from None


def document_to_car(doc: Mapping[str, Any]) -> CarRead:
    """Convert a stored document, reporting unreadable ones as ``StorageError``."""
    try:
        return CarRead.from_document(doc)
    except (KeyError, ValidationError) as exc:
        logger.error("Stored car %s cannot be read: %s", doc.get("_id"), exc)
        raise StorageError(f"Documento inválido {doc.get('_id')}: {exc}") from exc


class CarService:
    """Service class for managing cars stored in one collection."""

    def __init__(self, collection: Any):
        self.collection = collection

    async def create_car(self, data: CarCreate) -> CarRead:
        """Insert a new car and return it with its assigned ``_id``."""
        doc = data.to_document()
        try:
            result = await self.collection.insert_one(doc)
        except PyMongoError as exc:
            logger.exception("Failed to create car")
            raise StorageError(str(exc)) from exc
        doc["_id"] = result.inserted_id
        logger.info("Created car %s", result.inserted_id)
        return document_to_car(doc)

    async def list_cars(self) -> List[CarRead]:
        """Return every car in the collection, in natural order."""
        try:
            docs = await self.collection.find().to_list(length=None)
        except PyMongoError as exc:
            logger.exception("Failed to list cars")
            raise StorageError(str(exc)) from exc
        return [document_to_car(doc) for doc in docs]

    async def get_car(self, car_id: str) -> CarRead:
        """Retrieve a single car by its identifier."""
        oid = parse_car_id(car_id)
        try:
            doc = await self.collection.find_one({"_id": oid})
        except PyMongoError as exc:
            logger.exception("Failed to fetch car %s", car_id)
            raise StorageError(str(exc)) from exc
        if doc is None:
            raise CarNotFoundError(car_id)
        return document_to_car(doc)

    async def update_car(self, car_id: str, data: CarUpdate) -> CarRead:
        """Update an existing car.

        Only fields provided in ``data`` are changed; the identifier and
        the other fields are kept.  An update without fields returns the
        current record.
        """
        oid = parse_car_id(car_id)
        changes = data.to_document()
        if not changes:
            return await self.get_car(car_id)
        try:
            doc = await self.collection.find_one_and_update(
                {"_id": oid},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as exc:
            logger.exception("Failed to update car %s", car_id)
            raise StorageError(str(exc)) from exc
        if doc is None:
            raise CarNotFoundError(car_id)
        logger.info("Updated car %s: %s", car_id, sorted(changes))
        return document_to_car(doc)

    async def delete_car(self, car_id: str) -> None:
        """Delete a car by identifier."""
        oid = parse_car_id(car_id)
        try:
            result = await self.collection.delete_one({"_id": oid})
        except PyMongoError as exc:
            logger.exception("Failed to delete car %s", car_id)
            raise StorageError(str(exc)) from exc
        if result.deleted_count == 0:
            raise CarNotFoundError(car_id)
        logger.info("Deleted car %s", car_id)
