from importmgr_core.duty.financial import (
    compute_duty_from_rates,
    compute_duty_savings,
    compute_landed_cost_per_unit,
    compute_per_unit_duty,
    compute_potential_duty,
    compute_savings_from_actual_vs_boe,
    round_amount,
    round_whole,
    to_fixed2,
)
from importmgr_core.duty.models import CalcMethod, DutyBreakdown, RateSet

__all__ = [
    "CalcMethod",
    "DutyBreakdown",
    "RateSet",
    "compute_duty_from_rates",
    "compute_duty_savings",
    "compute_landed_cost_per_unit",
    "compute_per_unit_duty",
    "compute_potential_duty",
    "compute_savings_from_actual_vs_boe",
    "round_amount",
    "round_whole",
    "to_fixed2",
]
