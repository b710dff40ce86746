from __future__ import annotations

import pytest

from importmgr_core.boe import BoeCalculationResult, CalculatedDutyItem
from importmgr_core.reports import (
    ReportFilters,
    ReportLine,
    ReportRow,
    build_report_rows,
    query_report,
)


def _calculation() -> BoeCalculationResult:
    return BoeCalculationResult(
        calculated_items=[
            CalculatedDutyItem(
                part_no="P-1",
                description="Valve body",
                assessable_value=600,
                bcd_value=60,
                sws_value=6,
                igst_value=120,
            ),
            CalculatedDutyItem(
                part_no="P-2",
                description="Valve stem",
                assessable_value=400,
                bcd_value=40,
                sws_value=4,
                igst_value=80,
            ),
            CalculatedDutyItem(
                part_no="P-3",
                description="Sample",
                assessable_value=1000,
                bcd_value=100,
                sws_value=10,
                igst_value=200,
            ),
        ],
        bcd_total=200,
        sws_total=20,
        igst_total=400,
        interest=0,
        customs_duty_total=620,
    )


def _build_rows(expenses_basic: float = 200) -> list[ReportRow]:
    return build_report_rows(
        supplier="Acme Components",
        invoice_no="INV-9",
        invoice_date="2024-05-01",
        calculation=_calculation(),
        lines=[
            ReportLine(part_no="P-1", qty=10, unit_price=1.23456, unit="pcs"),
            ReportLine(part_no="P-2", qty=0, unit="pcs", description="Stem, hardened"),
        ],
        expenses_basic=expenses_basic,
    )


def test_report_rows_join_items_with_lines() -> None:
    rows = _build_rows()
    assert [row.part_no for row in rows] == ["P-1", "P-2"]
    assert rows[0].description == "Valve body"
    assert rows[1].description == "Stem, hardened"
    assert rows[0].unit_price == pytest.approx(1.2346)


def test_expenses_allocated_by_assessable_share() -> None:
    first, second = _build_rows()
    # shares of a 2000 assessable total: 600 -> 30%, 400 -> 20%
    assert first.expenses_total == pytest.approx(60)
    assert second.expenses_total == pytest.approx(40)


def test_landed_cost_per_qty() -> None:
    first, second = _build_rows()
    # (600 + 60 + 6 + 60) / 10
    assert first.ldc_per_qty == pytest.approx(72.6)
    assert second.ldc_per_qty == 0


def test_no_expenses_when_assessable_total_is_zero() -> None:
    calculation = BoeCalculationResult(
        calculated_items=[
            CalculatedDutyItem(
                part_no="P-1",
                description="Free sample",
                assessable_value=0,
                bcd_value=0,
                sws_value=0,
                igst_value=0,
            )
        ],
        bcd_total=0,
        sws_total=0,
        igst_total=0,
        interest=0,
        customs_duty_total=0,
    )
    (row,) = build_report_rows(
        supplier="Acme",
        invoice_no="INV-1",
        invoice_date="2024-01-01",
        calculation=calculation,
        lines=[ReportLine(part_no="P-1", qty=5)],
        expenses_basic=500,
    )
    assert row.expenses_total == 0
    assert row.ldc_per_qty == 0


def _sample_rows() -> list[ReportRow]:
    return [
        ReportRow(
            supplier="Acme Components",
            invoice_no="INV-1",
            invoice_date="2024-01-10",
            part_no="P-1",
            qty=5,
            assessable_value=100,
            bcd_amount=10,
            sws_amount=1,
            igst_amount=20,
            expenses_total=3,
        ),
        ReportRow(
            supplier="Borealis Trading",
            invoice_no="INV-2",
            invoice_date="2024-03-05",
            part_no="Q-7",
            qty=12,
            assessable_value=250.5,
            bcd_amount=25.05,
            sws_amount=2.51,
            igst_amount=50,
            expenses_total=7.25,
        ),
        ReportRow(
            supplier="acme components",
            invoice_no="INV-3",
            invoice_date="2024-02-20",
            part_no="P-2",
            qty=1,
            assessable_value=40,
            bcd_amount=4,
            sws_amount=0.4,
            igst_amount=8,
            expenses_total=1,
        ),
    ]


def test_query_defaults_sort_by_invoice_date() -> None:
    response = query_report(_sample_rows(), ReportFilters())
    assert [row.invoice_no for row in response.rows] == ["INV-1", "INV-3", "INV-2"]
    assert response.page == 1
    assert response.page_size == 50
    assert response.total_rows == 3
    assert response.totals is None


def test_query_unknown_sort_column_falls_back() -> None:
    response = query_report(_sample_rows(), ReportFilters(sort_by="bogus", sort_direction="desc"))
    assert [row.invoice_no for row in response.rows] == ["INV-2", "INV-3", "INV-1"]


def test_query_text_filters_are_case_insensitive_substrings() -> None:
    response = query_report(_sample_rows(), ReportFilters(supplier="ACME", part_no=""))
    assert sorted(row.invoice_no for row in response.rows) == ["INV-1", "INV-3"]


def test_query_date_range_is_inclusive() -> None:
    response = query_report(
        _sample_rows(),
        ReportFilters(start_date="2024-01-10", end_date="2024-02-20"),
    )
    assert [row.invoice_no for row in response.rows] == ["INV-1", "INV-3"]


def test_query_sorts_and_pages() -> None:
    response = query_report(
        _sample_rows(),
        ReportFilters(sort_by="qty", sort_direction="desc", page=2, page_size=2),
    )
    assert [row.invoice_no for row in response.rows] == ["INV-3"]
    assert response.total_rows == 3
    assert response.page_size == 2


def test_query_uses_default_page_size() -> None:
    response = query_report(_sample_rows(), ReportFilters(), default_page_size=1)
    assert response.page_size == 1
    assert len(response.rows) == 1


def test_query_totals_cover_all_filtered_rows() -> None:
    response = query_report(
        _sample_rows(),
        ReportFilters(supplier="acme", page_size=1, include_totals=True),
    )
    assert len(response.rows) == 1
    totals = response.totals
    assert totals is not None
    assert totals.qty == pytest.approx(6)
    assert totals.assessable_value == pytest.approx(140)
    assert totals.bcd_amount == pytest.approx(14)
    assert totals.sws_amount == pytest.approx(1.4)
    assert totals.igst_amount == pytest.approx(28)
    assert totals.expenses_total == pytest.approx(4)
