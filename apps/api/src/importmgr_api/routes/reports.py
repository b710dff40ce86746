from __future__ import annotations

from fastapi import APIRouter, Depends, Response
from importmgr_core.reports import ReportResponse, build_report_csv, query_report

from importmgr_api.deps import get_settings_dep
from importmgr_api.schemas import ReportCsvRequest, ReportQueryRequest
from importmgr_api.settings import Settings

router = APIRouter(prefix="/v1/reports")

CSV_FILENAME = "landed-cost-report.csv"


@router.post("/query", response_model=ReportResponse)
def report_query(
    request: ReportQueryRequest,
    settings: Settings = Depends(get_settings_dep),
) -> ReportResponse:
    return query_report(
        request.rows,
        request.filters,
        default_page_size=settings.report_page_size,
    )


@router.post("/csv")
def report_csv(request: ReportCsvRequest) -> Response:
    return Response(
        content=build_report_csv(request.rows),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{CSV_FILENAME}"'},
    )
