from __future__ import annotations

from importmgr_core.boe import BoeFormValues, BoeItemInput, Shipment
from importmgr_core.duty import CalcMethod, DutyBreakdown, RateSet
from importmgr_core.reports import ReportFilters, ReportRow
from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str


class DutyBreakdownRequest(BaseModel):
    assessable_value: float
    rates: RateSet


class UnitEconomicsRequest(BaseModel):
    assessable_value: float
    total_duty: float
    quantity: float | None = None


class UnitEconomicsResponse(BaseModel):
    per_unit_duty: float
    landed_cost_per_unit: float


class DutySavingsRequest(BaseModel):
    actual_duty_total: float
    potential_duty_total: float


class ActualVsBoeSavingsRequest(BaseModel):
    method: CalcMethod
    assessable_value: float
    actual_rates: RateSet
    boe: DutyBreakdown


class SavingsResponse(BaseModel):
    savings: float


class BoeCalculateRequest(BaseModel):
    shipment: Shipment
    form_values: BoeFormValues
    item_inputs: list[BoeItemInput] = Field(default_factory=list)


class ReportQueryRequest(BaseModel):
    rows: list[ReportRow] = Field(default_factory=list)
    filters: ReportFilters = Field(default_factory=ReportFilters)


class ReportCsvRequest(BaseModel):
    rows: list[ReportRow] = Field(default_factory=list)
