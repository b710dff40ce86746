from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException
from importmgr_core.boe import BoeCalculationError, BoeCalculationResult, calculate_duties

from importmgr_api.schemas import BoeCalculateRequest

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/v1/boe/calculate", response_model=BoeCalculationResult)
def calculate_boe(request: BoeCalculateRequest) -> BoeCalculationResult:
    try:
        return calculate_duties(request.shipment, request.form_values, request.item_inputs)
    except BoeCalculationError as exc:
        logger.warning("BOE calculation rejected for shipment %s: %s", request.shipment.id, exc)
        raise HTTPException(status_code=400, detail={"message": str(exc)}) from exc
