from hostprofile.api.modules.hardware.schema import HostSnapshot, WebGLSnapshot
from hostprofile.api.modules.hardware.services.signals.host import (
    DEBUG_RENDERER_INFO,
    TOUCH_START_EVENT,
    UNMASKED_RENDERER_WEBGL,
    UNMASKED_VENDOR_WEBGL,
    BatteryReading,
)
from hostprofile.api.modules.hardware.services.signals.probe import (
    CapabilityUnavailable,
)

_NAVIGATOR_FIELDS = {
    "userAgent": "user_agent",
    "platform": "platform",
    "cpuClass": "cpu_class",
    "hardwareConcurrency": "hardware_concurrency",
    "deviceMemory": "device_memory",
}
_SCREEN_FIELDS = {
    "width": "width",
    "height": "height",
    "colorDepth": "color_depth",
}


class _SnapshotGLContext:
    def __init__(self, webgl: WebGLSnapshot):
        self._webgl = webgl

    def get_extension(self, name: str) -> object | None:
        if name == DEBUG_RENDERER_INFO and self._webgl.debug_renderer_info:
            return name
        return None

    def get_parameter(self, parameter: int) -> object:
        if parameter == UNMASKED_RENDERER_WEBGL:
            return self._webgl.renderer
        if parameter == UNMASKED_VENDOR_WEBGL:
            return self._webgl.vendor
        raise CapabilityUnavailable(f"parameter {parameter:#x}")


class _SnapshotSurface:
    def __init__(self, webgl: WebGLSnapshot | None):
        self._webgl = webgl

    def get_context(self, name: str) -> _SnapshotGLContext | None:
        # Only the context name the page actually obtained is available.
        if self._webgl is None or self._webgl.context != name:
            return None
        return _SnapshotGLContext(self._webgl)


class SnapshotHost:
    """Replays a snapshot posted by the collector script as a browser host.

    Whatever the page could not read is missing from the snapshot and is
    reported back as an unavailable capability.
    """

    def __init__(self, snapshot: HostSnapshot):
        self._snapshot = snapshot

    def navigator(self, name: str) -> object:
        field = _NAVIGATOR_FIELDS.get(name)
        if field is None:
            raise CapabilityUnavailable(f"navigator.{name}")
        return getattr(self._snapshot.navigator, field)

    def screen(self, name: str) -> object:
        field = _SCREEN_FIELDS.get(name)
        if field is None or self._snapshot.screen is None:
            raise CapabilityUnavailable(f"screen.{name}")
        return getattr(self._snapshot.screen, field)

    def has_event_type(self, name: str) -> bool:
        if name != TOUCH_START_EVENT:
            return False
        return bool(self._snapshot.touch_events)

    def create_surface(self) -> _SnapshotSurface:
        return _SnapshotSurface(self._snapshot.webgl)

    async def read_battery(self, source: str) -> BatteryReading | None:
        battery = self._snapshot.battery
        if battery is None or battery.source != source:
            return None
        return BatteryReading(
            charging=battery.charging,
            level=battery.level,
            charging_time=battery.charging_time,
            discharging_time=battery.discharging_time,
        )


__all__ = ("SnapshotHost",)
