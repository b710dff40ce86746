from __future__ import annotations

from fastapi import APIRouter
from importmgr_core.duty import (
    DutyBreakdown,
    compute_duty_savings,
    compute_landed_cost_per_unit,
    compute_per_unit_duty,
    compute_potential_duty,
    compute_savings_from_actual_vs_boe,
)

from importmgr_api.schemas import (
    ActualVsBoeSavingsRequest,
    DutyBreakdownRequest,
    DutySavingsRequest,
    SavingsResponse,
    UnitEconomicsRequest,
    UnitEconomicsResponse,
)

router = APIRouter(prefix="/v1/duty")


@router.post("/breakdown", response_model=DutyBreakdown)
def duty_breakdown(request: DutyBreakdownRequest) -> DutyBreakdown:
    return compute_potential_duty(request.assessable_value, request.rates)


@router.post("/unit-economics", response_model=UnitEconomicsResponse)
def unit_economics(request: UnitEconomicsRequest) -> dict:
    return {
        "per_unit_duty": compute_per_unit_duty(request.total_duty, request.quantity),
        "landed_cost_per_unit": compute_landed_cost_per_unit(
            request.assessable_value,
            request.total_duty,
            request.quantity,
        ),
    }


@router.post("/savings", response_model=SavingsResponse)
def duty_savings(request: DutySavingsRequest) -> dict:
    return {
        "savings": compute_duty_savings(request.actual_duty_total, request.potential_duty_total)
    }


@router.post("/savings/actual-vs-boe", response_model=SavingsResponse)
def actual_vs_boe_savings(request: ActualVsBoeSavingsRequest) -> dict:
    savings = compute_savings_from_actual_vs_boe(
        method=request.method,
        assessable_value=request.assessable_value,
        actual_rates=request.actual_rates,
        boe=request.boe,
    )
    return {"savings": savings}
