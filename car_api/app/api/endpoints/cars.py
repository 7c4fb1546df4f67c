"""
Car endpoints.

These routes expose a CRUD API for cars.  Each handler delegates to
``CarService``, which issues a single call against the store.  Errors
raised by the service (not found, malformed identifier, storage
faults) are rendered by the handlers registered in ``main``; request
payloads that fail validation are answered with 400.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Response, status

from car_api.app.api.deps import get_car_service
from car_api.app.core.errors import NOT_FOUND_MESSAGE
from car_api.app.schemas.car import CarCreate, CarRead, CarUpdate
from car_api.app.services.car_service import CarService

router = APIRouter()

_CAR_EXAMPLE = {
    "_id": "61555f3e0f30588a3c4d34e8",
    "marca": "Toyota",
    "modelo": "Corolla",
    "año": 2023,
}

_NOT_FOUND: Dict[int, Dict[str, Any]] = {
    status.HTTP_404_NOT_FOUND: {
        "description": "Carro no encontrado",
        "content": {"application/json": {"example": {"error": NOT_FOUND_MESSAGE}}},
    }
}

_STORAGE_ERROR: Dict[int, Dict[str, Any]] = {
    status.HTTP_500_INTERNAL_SERVER_ERROR: {
        "description": "Error de almacenamiento",
        "content": {
            "application/json": {
                "example": {"error": "Error de almacenamiento", "detail": "connection refused"}
            }
        },
    }
}

_INVALID_DATA: Dict[int, Dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {
        "description": "Datos inválidos para el carro",
        "content": {
            "application/json": {
                "example": {
                    "error": "Datos inválidos para el carro: año",
                    "fields": [{"field": "año", "message": "Field required", "type": "missing"}],
                }
            }
        },
    }
}


@router.post(
    "",
    response_model=CarRead,
    status_code=status.HTTP_201_CREATED,
    summary="Crea un nuevo carro",
    response_description="Carro creado exitosamente",
    responses={**_INVALID_DATA, **_STORAGE_ERROR},
)
async def create_car(
    car_in: CarCreate,
    service: CarService = Depends(get_car_service),
) -> CarRead:
    """Create a new car; the store assigns its ``_id``."""
    return await service.create_car(car_in)


@router.get(
    "",
    response_model=List[CarRead],
    summary="Obtiene todos los carros",
    response_description="Lista de carros obtenida exitosamente",
    responses={
        status.HTTP_200_OK: {
            "content": {
                "application/json": {
                    "example": [
                        _CAR_EXAMPLE,
                        {
                            "_id": "61555f3e0f30588a3c4d34e9",
                            "marca": "Ford",
                            "modelo": "Mustang",
                            "año": 2022,
                        },
                    ]
                }
            }
        },
        **_STORAGE_ERROR,
    },
)
async def list_cars(service: CarService = Depends(get_car_service)) -> List[CarRead]:
    """Return every stored car.  No pagination or filtering."""
    return await service.list_cars()


@router.get(
    "/{car_id}",
    response_model=CarRead,
    summary="Obtiene un carro por su ID",
    response_description="Carro obtenido exitosamente",
    responses={**_NOT_FOUND, **_STORAGE_ERROR},
)
async def get_car(car_id: str, service: CarService = Depends(get_car_service)) -> CarRead:
    """Retrieve a single car by ID.

    Returns HTTP 404 if the car does not exist or the ID is not a
    valid identifier.
    """
    return await service.get_car(car_id)


@router.put(
    "/{car_id}",
    response_model=CarRead,
    summary="Actualiza un carro por su ID",
    response_description="Carro actualizado exitosamente",
    responses={**_INVALID_DATA, **_NOT_FOUND, **_STORAGE_ERROR},
)
async def update_car(
    car_id: str,
    car_in: CarUpdate,
    service: CarService = Depends(get_car_service),
) -> CarRead:
    """Update the supplied fields of an existing car."""
    return await service.update_car(car_id, car_in)


@router.delete(
    "/{car_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Elimina un carro por su ID",
    response_description="Carro eliminado exitosamente",
    response_class=Response,
    responses={**_NOT_FOUND, **_STORAGE_ERROR},
)
async def delete_car(car_id: str, service: CarService = Depends(get_car_service)) -> Response:
    """Delete a car by ID."""
    await service.delete_car(car_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
