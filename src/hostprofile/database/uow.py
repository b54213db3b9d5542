from sqlalchemy.ext.asyncio import AsyncSession

from hostprofile.api.modules.hardware.gateway import HardwareReportGateway


class UnitOfWork:
    """Groups the gateways sharing one session and owns its transaction."""

    def __init__(self, session: AsyncSession):
        self._session = session
        self.hardware_reports = HardwareReportGateway(session)

    async def commit(self) -> None:
        await self._session.commit()

    async def rollback(self) -> None:
        await self._session.rollback()


__all__ = ("UnitOfWork",)
