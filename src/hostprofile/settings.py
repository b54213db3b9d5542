from functools import lru_cache
from typing import Literal, final

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from yarl import URL


class PostgresConfig(BaseModel):
    user: str
    password: str
    host: str
    port: int = 5432
    db: str


class DatabaseConfig(BaseModel):
    url: str | None = None
    echo: bool = False


class APIConfig(BaseModel):
    title: str = "Host Hardware Profiler"
    version: str = "1.0.0"
    allowed_hosts: list[str] = Field(default_factory=lambda: ["*"])
    api_key: str | None = None


class HardwareConfig(BaseModel):
    battery_timeout_seconds: float = Field(default=0.5, gt=0, le=30)
    trust_forwarded_ip: bool = False
    store_reports: bool = True


@final
class Config(BaseSettings):
    model_config: SettingsConfigDict = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="APP__",
        env_nested_delimiter="__",
        extra="ignore",
    )

    env: Literal["local", "dev", "prod"] = "local"

    api: APIConfig = APIConfig()
    database: DatabaseConfig = DatabaseConfig()
    postgres: PostgresConfig | None = None
    hardware: HardwareConfig = HardwareConfig()

    @property
    def database_url(self) -> str:
        if self.database.url:
            return self.database.url
        if self.postgres is None:
            raise ValueError("Either database.url or postgres settings are required")

        host = "localhost" if self.env == "local" else self.postgres.host
        return URL.build(
            scheme="postgresql+asyncpg",
            user=self.postgres.user,
            password=self.postgres.password,
            host=host,
            port=self.postgres.port,
            path=f"/{self.postgres.db}",
        ).human_repr()


@lru_cache
def get_config() -> Config:
    return Config()
