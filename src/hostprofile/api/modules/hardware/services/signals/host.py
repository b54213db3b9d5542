from dataclasses import dataclass
from typing import Protocol

WEBGL_CONTEXT_NAMES = ("webgl", "experimental-webgl")
DEBUG_RENDERER_INFO = "WEBGL_debug_renderer_info"
UNMASKED_VENDOR_WEBGL = 0x9245
UNMASKED_RENDERER_WEBGL = 0x9246

# Primary promise-based API first, then vendor-prefixed legacy objects.
BATTERY_SOURCES = ("getBattery", "battery", "webkitBattery", "mozBattery")

TOUCH_START_EVENT = "ontouchstart"


@dataclass(frozen=True, slots=True)
class BatteryReading:
    charging: bool
    level: float
    charging_time: float | None
    discharging_time: float | None


class GLContext(Protocol):
    def get_extension(self, name: str) -> object | None: ...

    def get_parameter(self, parameter: int) -> object: ...


class DrawingSurface(Protocol):
    def get_context(self, name: str) -> GLContext | None: ...


class BrowserHost(Protocol):
    """Capability sources of one browser session.

    Accessors raise ``CapabilityUnavailable`` (or anything else) when the
    capability is missing; the signal collector treats both the same way.
    """

    def navigator(self, name: str) -> object: ...

    def screen(self, name: str) -> object: ...

    def has_event_type(self, name: str) -> bool: ...

    def create_surface(self) -> DrawingSurface: ...

    async def read_battery(self, source: str) -> BatteryReading | None:
        """Return the reading of ``source`` or None when it does not exist."""
        ...


__all__ = (
    "BATTERY_SOURCES",
    "DEBUG_RENDERER_INFO",
    "TOUCH_START_EVENT",
    "UNMASKED_RENDERER_WEBGL",
    "UNMASKED_VENDOR_WEBGL",
    "WEBGL_CONTEXT_NAMES",
    "BatteryReading",
    "BrowserHost",
    "DrawingSurface",
    "GLContext",
)
