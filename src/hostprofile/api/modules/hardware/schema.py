import math
from datetime import datetime
from typing import Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
)

from hostprofile.api.common.schema import Pagination, PaginationParams

Unknown = Literal["unknown"]


def _unreadable_as_none(value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
    # A single out-of-range signal is reported as unknown, not rejected.
    try:
        return handler(value)
    except ValidationError:
        return None


class NavigatorSnapshot(BaseModel):
    user_agent: str = Field(default="", max_length=2048)
    platform: str | None = Field(default=None, max_length=128)
    cpu_class: str | None = Field(default=None, max_length=32)
    hardware_concurrency: int | None = Field(default=None, ge=1, le=1024)
    device_memory: int | float | None = Field(default=None, ge=0, le=1024)

    model_config = ConfigDict(extra="forbid")

    @field_validator("user_agent", mode="wrap")
    @classmethod
    def drop_invalid_user_agent(
        cls, value: Any, handler: ValidatorFunctionWrapHandler
    ) -> str:
        return _unreadable_as_none(value, handler) or ""

    @field_validator(
        "platform",
        "cpu_class",
        "hardware_concurrency",
        "device_memory",
        mode="wrap",
    )
    @classmethod
    def drop_invalid_signal(
        cls, value: Any, handler: ValidatorFunctionWrapHandler
    ) -> Any:
        return _unreadable_as_none(value, handler)


class ScreenSnapshot(BaseModel):
    width: int | None = Field(default=None, ge=0, le=100_000)
    height: int | None = Field(default=None, ge=0, le=100_000)
    color_depth: int | None = Field(default=None, ge=0, le=64)

    model_config = ConfigDict(extra="forbid")

    @field_validator("width", "height", "color_depth", mode="wrap")
    @classmethod
    def drop_invalid_signal(
        cls, value: Any, handler: ValidatorFunctionWrapHandler
    ) -> Any:
        return _unreadable_as_none(value, handler)


class WebGLSnapshot(BaseModel):
    context: Literal["webgl", "experimental-webgl"] | None = None
    debug_renderer_info: bool = False
    renderer: str | None = Field(default=None, max_length=512)
    vendor: str | None = Field(default=None, max_length=256)

    model_config = ConfigDict(extra="forbid")

    @field_validator("renderer", "vendor", mode="wrap")
    @classmethod
    def drop_invalid_signal(
        cls, value: Any, handler: ValidatorFunctionWrapHandler
    ) -> Any:
        return _unreadable_as_none(value, handler)


class BatterySnapshot(BaseModel):
    source: Literal["getBattery", "battery", "webkitBattery", "mozBattery"]
    charging: bool
    level: float = Field(..., ge=0, le=1)
    charging_time: float | None = None
    discharging_time: float | None = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("charging_time", "discharging_time", mode="before")
    @classmethod
    def parse_infinity(cls, value: object) -> object:
        # JSON has no infinity literal, the collector script sends a string.
        if isinstance(value, str) and value.strip().lower() in {"infinity", "inf"}:
            return math.inf
        return value


class HostSnapshot(BaseModel):
    session_id: str | None = Field(default=None, max_length=128)
    navigator: NavigatorSnapshot
    screen: ScreenSnapshot | None = None
    webgl: WebGLSnapshot | None = None
    battery: BatterySnapshot | None = None
    touch_events: bool | None = None
    collected_at: datetime | None = None

    model_config = ConfigDict(extra="forbid")


class HardwareReport(BaseModel):
    """Flat report consumed by the operator console.

    Field aliases are the wire names and must not change.
    """

    arch: str
    cores: int | Unknown
    gpu: str
    vendor: str
    memory: int | float | Unknown
    charging_status: bool | Unknown = Field(alias="chargingStatus")
    battery_level: str = Field(alias="batteryLevel")
    charging_time: int | float | str = Field(alias="chargingTime")
    discharging_time: int | float | str = Field(alias="dischargingTime")
    width: int | Unknown
    height: int | Unknown
    colordepth: int | Unknown
    is_touch_enabled: bool = Field(alias="isTouchEnabled")
    is_virtual_machine: bool = Field(alias="isVirtualMachine")
    is_laptop: bool = Field(alias="isLaptop")
    is_mobile_device: bool = Field(alias="isMobileDevice")
    is_game_console: bool = Field(alias="isGameConsole")
    name: str

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class HardwareReportLogResponse(BaseModel):
    id: int
    session_id: str | None
    request_ip: str | None
    device_name: str
    report: dict
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class HardwareReportLogListResponse(Pagination[HardwareReportLogResponse]):
    pass


class HardwareReportLogPaginationParams(PaginationParams):
    session_id: str | None = Field(default=None, max_length=128)
    device_name: str | None = Field(default=None, max_length=64)
    is_mobile_device: bool | None = None
    is_virtual_machine: bool | None = None
    is_laptop: bool | None = None
    is_game_console: bool | None = None
