import logging
from dataclasses import dataclass
from typing import Protocol

from hostprofile.api.modules.hardware.models import HardwareReportLog
from hostprofile.api.modules.hardware.schema import HardwareReport, HostSnapshot
from hostprofile.database.uow import UnitOfWork

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ReportContext:
    session_id: str | None = None
    request_ip: str | None = None
    snapshot: HostSnapshot | None = None


class ReportSink(Protocol):
    async def save(self, report: HardwareReport, context: ReportContext) -> None: ...


class DatabaseReportSink:
    def __init__(self, uow: UnitOfWork):
        self._uow = uow

    async def save(self, report: HardwareReport, context: ReportContext) -> None:
        try:
            log = HardwareReportLog(
                session_id=context.session_id,
                request_ip=context.request_ip,
                device_name=report.name,
                is_mobile_device=report.is_mobile_device,
                is_game_console=report.is_game_console,
                is_laptop=report.is_laptop,
                is_virtual_machine=report.is_virtual_machine,
                report=report.to_wire(),
                snapshot=(
                    context.snapshot.model_dump(mode="json")
                    if context.snapshot
                    else {}
                ),
            )
            await self._uow.hardware_reports.create(log)
            await self._uow.commit()
        except Exception:
            logger.exception("Failed to save hardware report")
            await self._uow.rollback()


class NullReportSink:
    async def save(self, report: HardwareReport, context: ReportContext) -> None:
        logger.debug("Report persistence disabled, dropping %r", report.name)


__all__ = ("DatabaseReportSink", "NullReportSink", "ReportContext", "ReportSink")
