from collections.abc import Sequence

from sqlalchemy import BinaryExpression, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from hostprofile.api.modules.hardware.models import HardwareReportLog


class HardwareReportGateway:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_page(
        self,
        filters: list[BinaryExpression],
        limit: int,
        offset: int,
    ) -> tuple[Sequence[HardwareReportLog], int]:
        """Newest reports first, with the total matching the same filters."""
        total = await self.session.scalar(
            select(func.count(HardwareReportLog.id)).where(*filters)
        )
        rows = await self.session.scalars(
            select(HardwareReportLog)
            .where(*filters)
            .order_by(
                HardwareReportLog.created_at.desc(),
                HardwareReportLog.id.desc(),
            )
            .offset(offset)
            .limit(limit)
        )
        return rows.all(), total or 0

    async def get_by_id(self, report_id: int) -> HardwareReportLog | None:
        return await self.session.get(HardwareReportLog, report_id)

    async def create(self, log: HardwareReportLog) -> HardwareReportLog:
        self.session.add(log)
        await self.session.flush()
        return log
