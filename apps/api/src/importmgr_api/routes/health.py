from __future__ import annotations

from fastapi import APIRouter

from importmgr_api.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health() -> dict:
    return {"status": "ok"}
