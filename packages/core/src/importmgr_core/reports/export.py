from __future__ import annotations

import csv
import io
from collections.abc import Iterable, Mapping
from typing import Any

from importmgr_core.reports.models import ReportRow

REPORT_CSV_HEADER = [
    "Supplier",
    "Invoice No",
    "Date",
    "Part No",
    "Description",
    "Unit",
    "Qty",
    "Unit Price",
    "Assessable Value",
    "BCD",
    "SWS",
    "IGST",
    "Expenses",
    "LDC per qty",
]

REPORT_CSV_FIELDS = [
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


def build_report_csv(rows: Iterable[ReportRow | Mapping[str, Any]]) -> str:
    """Render report rows as CSV: bare header, every data cell quoted, no trailing newline."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for row in rows:
        record = row.model_dump() if isinstance(row, ReportRow) else row
        writer.writerow([_format_cell(record.get(field)) for field in REPORT_CSV_FIELDS])
    lines = [",".join(REPORT_CSV_HEADER)]
    body = buffer.getvalue().rstrip("\n")
    if body:
        lines.append(body)
    return "\n".join(lines)


def _format_cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
