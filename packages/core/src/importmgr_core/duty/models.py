from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

CalcMethod = Literal["Standard", "CEPA", "Rodtep"]


class RateSet(BaseModel):
    """Duty rates as percentages, e.g. 7.5 for 7.5%."""

    model_config = ConfigDict(frozen=True)

    bcd_rate: float
    sws_rate: float
    igst_rate: float


class DutyBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    bcd: float
    sws: float
    igst: float
    total: float
