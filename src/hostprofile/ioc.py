from collections.abc import AsyncIterator

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from hostprofile.api.modules.hardware.service import HardwareFacadeService
from hostprofile.api.modules.hardware.services import (
    DeviceIdentityResolver,
    FingerprintAssembler,
    MarkerSignatureLibrary,
    ReportSink,
    RequestIpResolver,
    SignalCollector,
    SignatureLibrary,
)
from hostprofile.api.modules.hardware.services.core import (
    DatabaseReportSink,
    NullReportSink,
)
from hostprofile.database import build_engine, build_session_factory
from hostprofile.database.uow import UnitOfWork
from hostprofile.settings import Config, get_config


class AppProvider(Provider):
    """Application provider for dependency injection."""

    def __init__(self, config: Config | None = None):
        super().__init__()
        self._config = config

    @provide(scope=Scope.APP)
    def get_config(self) -> Config:
        return self._config or get_config()


class DatabaseProvider(Provider):
    """Engine, sessions and unit of work."""

    @provide(scope=Scope.APP)
    async def get_engine(self, config: Config) -> AsyncIterator[AsyncEngine]:
        engine = build_engine(config)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return build_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            yield session

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, session: AsyncSession) -> UnitOfWork:
        return UnitOfWork(session)


class ServicesProvider(Provider):
    """Services provider for dependency injection."""

    @provide(scope=Scope.APP)
    def get_signature_library(self) -> SignatureLibrary:
        return MarkerSignatureLibrary()

    @provide(scope=Scope.APP)
    def get_signal_collector(self, config: Config) -> SignalCollector:
        return SignalCollector(
            battery_timeout_seconds=config.hardware.battery_timeout_seconds,
        )

    @provide(scope=Scope.APP)
    def get_identity_resolver(
        self, signatures: SignatureLibrary
    ) -> DeviceIdentityResolver:
        return DeviceIdentityResolver(signatures)

    @provide(scope=Scope.APP)
    def get_fingerprint_assembler(
        self,
        collector: SignalCollector,
        resolver: DeviceIdentityResolver,
    ) -> FingerprintAssembler:
        return FingerprintAssembler(collector=collector, resolver=resolver)

    @provide(scope=Scope.APP)
    def get_request_ip_resolver(self, config: Config) -> RequestIpResolver:
        return RequestIpResolver(config)

    @provide(scope=Scope.REQUEST)
    def get_report_sink(self, config: Config, uow: UnitOfWork) -> ReportSink:
        if not config.hardware.store_reports:
            return NullReportSink()
        return DatabaseReportSink(uow)

    @provide(scope=Scope.REQUEST)
    def get_hardware_facade_service(
        self,
        assembler: FingerprintAssembler,
        ip_resolver: RequestIpResolver,
        sink: ReportSink,
    ) -> HardwareFacadeService:
        return HardwareFacadeService(
            assembler=assembler,
            ip_resolver=ip_resolver,
            sink=sink,
        )


def get_async_container(config: Config | None = None) -> AsyncContainer:
    return make_async_container(
        AppProvider(config),
        DatabaseProvider(),
        ServicesProvider(),
    )
