from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from importmgr_core.duty.models import CalcMethod


class InvoiceItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    part_no: str
    description: str = ""
    line_total: float
    actual_bcd_rate: float = 0.0
    actual_sws_rate: float = 0.0
    actual_igst_rate: float = 0.0


class Shipment(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    supplier_name: str
    invoice_number: str
    invoice_date: str
    invoice_value: float
    invoice_currency: str = "USD"
    incoterm: str = ""
    status: str = ""
    items: list[InvoiceItem] = Field(default_factory=list)


class BoeFormValues(BaseModel):
    model_config = ConfigDict(frozen=True)

    exchange_rate: float
    freight_cost: float = 0.0
    exw_cost: float = 0.0
    insurance_rate: float = 0.0
    interest: float | None = None


class BoeItemInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    part_no: str
    calculation_method: CalcMethod = "Standard"
    boe_bcd_rate: float
    boe_sws_rate: float
    boe_igst_rate: float


class CalculatedDutyItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    part_no: str
    description: str
    assessable_value: float
    bcd_value: float
    sws_value: float
    igst_value: float


class BoeCalculationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    calculated_items: list[CalculatedDutyItem] = Field(default_factory=list)
    bcd_total: float
    sws_total: float
    igst_total: float
    interest: float
    customs_duty_total: float
