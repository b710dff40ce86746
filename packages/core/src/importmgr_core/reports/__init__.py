from importmgr_core.reports.export import REPORT_CSV_HEADER, build_report_csv
from importmgr_core.reports.models import (
    ReportFilters,
    ReportLine,
    ReportResponse,
    ReportRow,
    ReportTotals,
)
from importmgr_core.reports.report import REPORT_COLUMNS, build_report_rows, query_report

__all__ = [
    "REPORT_COLUMNS",
    "REPORT_CSV_HEADER",
    "ReportFilters",
    "ReportLine",
    "ReportResponse",
    "ReportRow",
    "ReportTotals",
    "build_report_csv",
    "build_report_rows",
    "query_report",
]
