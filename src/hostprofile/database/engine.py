from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from hostprofile.settings import Config


def build_engine(config: Config) -> AsyncEngine:
    return create_async_engine(
        config.database_url,
        echo=config.database.echo,
        pool_pre_ping=not config.database_url.startswith("sqlite"),
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


__all__ = ("build_engine", "build_session_factory")
