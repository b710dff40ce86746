"""Customs duty arithmetic: BCD/SWS/IGST cascade, unit economics and savings.

Every function here is pure and total over floats. Invalid input such as
``NaN`` is not rejected; it propagates into the result.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_DOWN, ROUND_HALF_UP, Decimal, localcontext

from importmgr_core.duty.models import CalcMethod, DutyBreakdown, RateSet

# Fixed-point formatting stops applying at this magnitude.
_FIXED_POINT_LIMIT = 1e21


def round_amount(value: float, decimals: int = 2) -> float:
    """Round half away from zero using the exact binary value of ``value``.

    ``round_amount(1.235) == 1.24`` because the stored double is slightly
    above 1.235, while ``round_amount(1.005) == 1.0`` because it is below.
    Exact ties such as 0.125 go away from zero (0.13), unlike ``round``.
    """
    if not math.isfinite(value) or abs(value) >= _FIXED_POINT_LIMIT:
        return value
    with localcontext() as ctx:
        ctx.prec = 130
        quantum = Decimal(1).scaleb(-decimals)
        return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def round_whole(value: float) -> float:
    """Round to the nearest integer, ties toward positive infinity."""
    if not math.isfinite(value):
        return value
    exact = Decimal(value)
    rounding = ROUND_HALF_UP if exact >= 0 else ROUND_HALF_DOWN
    with localcontext() as ctx:
        ctx.prec = 400
        return float(exact.quantize(Decimal(1), rounding=rounding))


def to_fixed2(value: float | None) -> str:
    if value is None or math.isnan(value):
        return "0.00"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return f"{round_amount(value, 2):.2f}"


def _effective_quantity(quantity: float | None) -> float:
    if quantity and quantity > 0:
        return quantity
    return 1


def compute_per_unit_duty(total_duty: float, quantity: float | None) -> float:
    """Duty per unit; a missing or non-positive quantity counts as one unit."""
    qty = _effective_quantity(quantity)
    return round_amount(total_duty / qty, 2)


def compute_landed_cost_per_unit(
    assessable_value: float,
    total_duty: float,
    quantity: float | None,
) -> float:
    qty = _effective_quantity(quantity)
    assessable_per_unit = assessable_value / qty
    duty_per_unit = compute_per_unit_duty(total_duty, qty)
    return round_amount(assessable_per_unit + duty_per_unit, 2)


def compute_potential_duty(assessable_value: float, rates: RateSet) -> DutyBreakdown:
    """Cascade BCD -> SWS -> IGST over ``assessable_value``.

    SWS is levied on the BCD amount and IGST on value + BCD + SWS. The
    total is summed from the unrounded components and rounded once, so it
    can differ from the sum of the rounded fields by a cent.
    """
    bcd = assessable_value * (rates.bcd_rate / 100)
    sws = bcd * (rates.sws_rate / 100)
    igst = (assessable_value + bcd + sws) * (rates.igst_rate / 100)
    total = bcd + sws + igst
    return DutyBreakdown(
        bcd=round_amount(bcd, 2),
        sws=round_amount(sws, 2),
        igst=round_amount(igst, 2),
        total=round_amount(total, 2),
    )


def compute_duty_from_rates(assessable_value: float, rates: RateSet) -> DutyBreakdown:
    """Actual duty from shipment-declared rates; same cascade as the benchmark."""
    return compute_potential_duty(assessable_value, rates)


def compute_duty_savings(actual_duty_total: float, potential_duty_total: float) -> float:
    return round_amount(max(potential_duty_total - actual_duty_total, 0), 2)


def compute_savings_from_actual_vs_boe(
    *,
    method: CalcMethod,
    assessable_value: float,
    actual_rates: RateSet,
    boe: DutyBreakdown,
) -> float:
    """Savings of the filed BOE duty against duty at the actual rates.

    Only preferential methods (CEPA, Rodtep) have a savings concept.
    """
    if method == "Standard":
        return 0.0
    actual = compute_duty_from_rates(assessable_value, actual_rates)
    return round_amount(max(actual.total - boe.total, 0), 2)
