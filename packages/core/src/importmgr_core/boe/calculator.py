"""Item-wise Bill of Entry duty calculation for a single shipment."""

from __future__ import annotations

import logging

from importmgr_core.boe.models import (
    BoeCalculationResult,
    BoeFormValues,
    BoeItemInput,
    CalculatedDutyItem,
    InvoiceItem,
    Shipment,
)
from importmgr_core.duty.financial import round_amount, round_whole

logger = logging.getLogger(__name__)


class BoeCalculationError(ValueError):
    pass


def calculate_duties(
    shipment: Shipment,
    form_values: BoeFormValues,
    item_inputs: list[BoeItemInput],
) -> BoeCalculationResult:
    """Compute per-item assessable value and duties, then whole-number totals.

    Freight and EXW charges are apportioned by each item's share of the
    invoice value. Items without a matching input are left out.
    """
    if shipment.invoice_value == 0:
        raise BoeCalculationError(
            f"Shipment {shipment.id} has zero invoice value; cannot apportion freight and EXW costs"
        )
    inputs_by_part: dict[str, BoeItemInput] = {}
    for entry in item_inputs:
        inputs_by_part.setdefault(entry.part_no, entry)

    calculated: list[CalculatedDutyItem] = []
    for item in shipment.items:
        item_input = inputs_by_part.get(item.part_no)
        if item_input is None:
            logger.debug("No BOE input for part %s; skipping", item.part_no)
            continue
        calculated.append(_calculate_item(item, item_input, shipment.invoice_value, form_values))

    bcd_total = round_whole(sum(entry.bcd_value for entry in calculated))
    sws_total = round_whole(sum(entry.sws_value for entry in calculated))
    igst_total = round_whole(sum(entry.igst_value for entry in calculated))
    interest = form_values.interest or 0.0
    customs_duty_total = round_whole(bcd_total + sws_total + igst_total + interest)
    logger.info(
        "BOE calculated for shipment %s: %d items, customs duty %s",
        shipment.id,
        len(calculated),
        customs_duty_total,
    )
    return BoeCalculationResult(
        calculated_items=calculated,
        bcd_total=bcd_total,
        sws_total=sws_total,
        igst_total=igst_total,
        interest=interest,
        customs_duty_total=customs_duty_total,
    )


def _calculate_item(
    item: InvoiceItem,
    item_input: BoeItemInput,
    invoice_value: float,
    form_values: BoeFormValues,
) -> CalculatedDutyItem:
    assessable_value = _assessable_value(item.line_total, invoice_value, form_values)

    boe_bcd_rate = item_input.boe_bcd_rate / 100
    boe_sws_rate = item_input.boe_sws_rate / 100
    boe_igst_rate = item_input.boe_igst_rate / 100

    bcd_raw = assessable_value * boe_bcd_rate
    if item_input.calculation_method == "Rodtep":
        # SWS and the IGST base follow the actual BCD, not the remitted one.
        actual_bcd = assessable_value * (item.actual_bcd_rate / 100)
        sws_raw = actual_bcd * boe_sws_rate
        igst_raw = (assessable_value + actual_bcd + sws_raw) * boe_igst_rate
    else:
        sws_raw = bcd_raw * boe_sws_rate
        igst_raw = (assessable_value + bcd_raw + sws_raw) * boe_igst_rate

    return CalculatedDutyItem(
        part_no=item.part_no,
        description=item.description,
        assessable_value=assessable_value,
        bcd_value=round_amount(bcd_raw, 1),
        sws_value=round_amount(sws_raw, 1),
        igst_value=round_amount(igst_raw, 1),
    )


def _assessable_value(line_total: float, invoice_value: float, form_values: BoeFormValues) -> float:
    value_inr = round_amount(line_total * form_values.exchange_rate, 2)
    freight = round_amount((form_values.freight_cost / invoice_value) * line_total, 2)
    exw = round_amount((form_values.exw_cost / invoice_value) * line_total, 2)
    insurance = round_amount((value_inr + exw) * (form_values.insurance_rate / 100), 1)
    return round_amount(value_inr + freight + exw + insurance, 1)
