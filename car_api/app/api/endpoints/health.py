"""Health probe for process supervisors.  Does not touch the store."""

from typing import Dict

from fastapi import APIRouter

router = APIRouter()


@router.get("/health", response_model=Dict[str, str], summary="Estado del servicio")
async def health() -> Dict[str, str]:
    return {"status": "ok"}
