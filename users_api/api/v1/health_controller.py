# External package imports
from fastapi import APIRouter


router = APIRouter(tags=["health"])


@router.get("/")
async def health() -> dict:
    """Liveness check"""
    return {"health": "ok"}
