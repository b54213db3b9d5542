from dishka import FromDishka
from dishka.integrations.fastapi import DishkaRoute
from fastapi import APIRouter, HTTPException, Query, Request, Response

from hostprofile.api.common.utils import build_filters
from hostprofile.api.modules.hardware.models import HardwareReportLog
from hostprofile.api.modules.hardware.schema import (
    HardwareReport,
    HardwareReportLogListResponse,
    HardwareReportLogPaginationParams,
    HardwareReportLogResponse,
    HostSnapshot,
)
from hostprofile.api.modules.hardware.service import HardwareFacadeService
from hostprofile.api.modules.hardware.services.public.collector import (
    build_collector_script,
)
from hostprofile.database.uow import UnitOfWork
from hostprofile.settings import Config

router = APIRouter(route_class=DishkaRoute)


@router.post("/report", response_model=HardwareReport, status_code=200)
async def create_report(
    request: Request,
    payload: HostSnapshot,
    facade: FromDishka[HardwareFacadeService],
) -> HardwareReport:
    return await facade.report_request(request=request, payload=payload)


@router.get("/collector.js", status_code=200)
async def get_collector_script(config: FromDishka[Config]) -> Response:
    script = build_collector_script(
        battery_timeout_ms=int(config.hardware.battery_timeout_seconds * 1000),
    )
    return Response(content=script, media_type="application/javascript")


@router.get("/reports", response_model=HardwareReportLogListResponse, status_code=200)
async def get_reports(
    uow: FromDishka[UnitOfWork],
    params: HardwareReportLogPaginationParams = Query(),
) -> HardwareReportLogListResponse:
    filter_data = params.model_dump(
        exclude={"page", "page_size"},
        exclude_none=True,
    )
    filters = build_filters(HardwareReportLog, filter_data)

    items, total = await uow.hardware_reports.get_page(
        filters, limit=params.page_size, offset=params.offset
    )

    return HardwareReportLogListResponse(
        items=[HardwareReportLogResponse.model_validate(item) for item in items],
        total=total,
        page=params.page,
        page_size=params.page_size,
    )


@router.get(
    "/reports/{report_id}",
    response_model=HardwareReportLogResponse,
    status_code=200,
)
async def get_report(
    report_id: int,
    uow: FromDishka[UnitOfWork],
) -> HardwareReportLogResponse:
    item = await uow.hardware_reports.get_by_id(report_id)
    if item is None:
        raise HTTPException(status_code=404, detail="hardware_report_not_found")
    return HardwareReportLogResponse.model_validate(item)
