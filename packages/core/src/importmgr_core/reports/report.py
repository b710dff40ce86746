from __future__ import annotations

import logging
from typing import get_args

from importmgr_core.boe.models import BoeCalculationResult
from importmgr_core.duty.financial import round_amount
from importmgr_core.reports.models import (
    ReportColumn,
    ReportFilters,
    ReportLine,
    ReportResponse,
    ReportRow,
    ReportTotals,
)

logger = logging.getLogger(__name__)

REPORT_COLUMNS: tuple[str, ...] = get_args(ReportColumn)
DEFAULT_SORT_COLUMN = "invoice_date"
DEFAULT_PAGE_SIZE = 50


def build_report_rows(
    *,
    supplier: str,
    invoice_no: str,
    invoice_date: str,
    calculation: BoeCalculationResult,
    lines: list[ReportLine],
    expenses_basic: float = 0.0,
) -> list[ReportRow]:
    """Join BOE items with invoice lines and derive landed cost per unit.

    Shipment expenses (basic value, GST excluded) are allocated to items in
    proportion to their share of the BOE assessable total. Items with no
    invoice line are omitted.
    """
    lines_by_part: dict[str, ReportLine] = {}
    for line in lines:
        lines_by_part.setdefault(line.part_no, line)
    assessable_total = sum(item.assessable_value for item in calculation.calculated_items)

    rows: list[ReportRow] = []
    for item in calculation.calculated_items:
        line = lines_by_part.get(item.part_no)
        if line is None:
            logger.debug("No invoice line for BOE part %s; omitted from report", item.part_no)
            continue
        if assessable_total:
            expenses = expenses_basic * (item.assessable_value / assessable_total)
        else:
            expenses = 0.0
        landed = item.assessable_value + item.bcd_value + item.sws_value + expenses
        ldc_per_qty = landed / line.qty if line.qty else 0.0
        rows.append(
            ReportRow(
                supplier=supplier,
                invoice_no=invoice_no,
                invoice_date=invoice_date,
                part_no=item.part_no,
                description=line.description if line.description is not None else item.description,
                unit=line.unit,
                qty=round_amount(line.qty, 2),
                unit_price=round_amount(line.unit_price, 4),
                assessable_value=round_amount(item.assessable_value, 2),
                bcd_amount=round_amount(item.bcd_value, 2),
                sws_amount=round_amount(item.sws_value, 2),
                igst_amount=round_amount(item.igst_value, 2),
                expenses_total=round_amount(expenses, 2),
                ldc_per_qty=round_amount(ldc_per_qty, 2),
            )
        )
    return rows


def query_report(
    rows: list[ReportRow],
    filters: ReportFilters,
    *,
    default_page_size: int = DEFAULT_PAGE_SIZE,
) -> ReportResponse:
    matched = [row for row in rows if _matches(row, filters)]
    sort_col = filters.sort_by if filters.sort_by in REPORT_COLUMNS else DEFAULT_SORT_COLUMN
    descending = filters.sort_direction == "desc"
    ordered = sorted(matched, key=lambda row: getattr(row, sort_col), reverse=descending)

    page = filters.page
    page_size = filters.page_size or default_page_size
    offset = (page - 1) * page_size
    totals = _summarize(matched) if filters.include_totals else None
    logger.debug(
        "Report query matched %d of %d rows (page %d, size %d, sort %s)",
        len(matched),
        len(rows),
        page,
        page_size,
        sort_col,
    )
    return ReportResponse(
        rows=ordered[offset : offset + page_size],
        page=page,
        page_size=page_size,
        total_rows=len(matched),
        totals=totals,
    )


def _matches(row: ReportRow, filters: ReportFilters) -> bool:
    if filters.start_date is not None and row.invoice_date < filters.start_date:
        return False
    if filters.end_date is not None and row.invoice_date > filters.end_date:
        return False
    for field_name in ("supplier", "invoice_no", "part_no"):
        needle = getattr(filters, field_name)
        if needle and needle.lower() not in getattr(row, field_name).lower():
            return False
    return True


def _summarize(rows: list[ReportRow]) -> ReportTotals:
    return ReportTotals(
        qty=round_amount(sum(row.qty for row in rows), 2),
        assessable_value=round_amount(sum(row.assessable_value for row in rows), 2),
        bcd_amount=round_amount(sum(row.bcd_amount for row in rows), 2),
        sws_amount=round_amount(sum(row.sws_amount for row in rows), 2),
        igst_amount=round_amount(sum(row.igst_amount for row in rows), 2),
        expenses_total=round_amount(sum(row.expenses_total for row in rows), 2),
    )
