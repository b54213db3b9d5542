import logging

from fastapi import HTTPException, Request

from hostprofile.api.modules.hardware.schema import HardwareReport, HostSnapshot
from hostprofile.api.modules.hardware.services import (
    FingerprintAssembler,
    ReportContext,
    ReportSink,
    RequestIpResolver,
    SnapshotHost,
)

logger = logging.getLogger(__name__)


class HardwareFacadeService:
    def __init__(
        self,
        assembler: FingerprintAssembler,
        ip_resolver: RequestIpResolver,
        sink: ReportSink,
    ):
        self._assembler = assembler
        self._ip_resolver = ip_resolver
        self._sink = sink

    async def report_request(
        self,
        request: Request,
        payload: HostSnapshot,
    ) -> HardwareReport:
        request_ip = self._ip_resolver.get_request_ip(request)
        return await self.report(payload=payload, request_ip=request_ip)

    async def report(
        self,
        payload: HostSnapshot,
        request_ip: str | None = None,
    ) -> HardwareReport:
        try:
            report = await self._assembler.assemble(SnapshotHost(payload))
        except Exception:
            logger.exception(
                "Failed to assemble hardware report",
                extra={"session_id": payload.session_id},
            )
            raise HTTPException(
                status_code=500, detail="hardware_report_failed"
            ) from None

        await self._sink.save(
            report,
            ReportContext(
                session_id=payload.session_id,
                request_ip=request_ip,
                snapshot=payload,
            ),
        )
        return report
