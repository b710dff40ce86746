from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ReportColumn = Literal[
    "supplier",
    "invoice_no",
    "invoice_date",
    "part_no",
    "description",
    "unit",
    "qty",
    "unit_price",
    "assessable_value",
    "bcd_amount",
    "sws_amount",
    "igst_amount",
    "expenses_total",
    "ldc_per_qty",
]


class ReportRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    supplier: str
    invoice_no: str
    invoice_date: str
    part_no: str
    description: str = ""
    unit: str = ""
    qty: float = 0.0
    unit_price: float = 0.0
    assessable_value: float = 0.0
    bcd_amount: float = 0.0
    sws_amount: float = 0.0
    igst_amount: float = 0.0
    expenses_total: float = 0.0
    ldc_per_qty: float = 0.0


class ReportLine(BaseModel):
    """Invoice line data for one part, joined to BOE items by part number."""

    model_config = ConfigDict(frozen=True)

    part_no: str
    qty: float
    unit_price: float = 0.0
    unit: str = ""
    description: str | None = None


class ReportTotals(BaseModel):
    model_config = ConfigDict(frozen=True)

    qty: float
    assessable_value: float
    bcd_amount: float
    sws_amount: float
    igst_amount: float
    expenses_total: float


class ReportFilters(BaseModel):
    model_config = ConfigDict(frozen=True)

    start_date: str | None = None
    end_date: str | None = None
    supplier: str | None = None
    invoice_no: str | None = None
    part_no: str | None = None
    page: int = Field(default=1, ge=1)
    page_size: int | None = Field(default=None, ge=1)
    sort_by: str | None = None
    sort_direction: str | None = None
    include_totals: bool = False


class ReportResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    rows: list[ReportRow]
    page: int
    page_size: int
    total_rows: int
    totals: ReportTotals | None = None
