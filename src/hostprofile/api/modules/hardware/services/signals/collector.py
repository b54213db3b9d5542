import asyncio
import logging
from dataclasses import dataclass
from functools import partial

from hostprofile.api.modules.hardware.services.signals.host import (
    BATTERY_SOURCES,
    DEBUG_RENDERER_INFO,
    TOUCH_START_EVENT,
    UNMASKED_RENDERER_WEBGL,
    UNMASKED_VENDOR_WEBGL,
    WEBGL_CONTEXT_NAMES,
    BatteryReading,
    BrowserHost,
    GLContext,
)
from hostprofile.api.modules.hardware.services.signals.probe import (
    as_int,
    as_number,
    as_text,
    probe,
    unavailable,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RawSignals:
    """Everything read from one host, once. ``None`` means unknown."""

    user_agent: str
    platform: str | None = None
    cpu_class: str | None = None
    core_count: int | None = None
    device_memory: int | float | None = None
    webgl_renderer: str | None = None
    webgl_vendor: str | None = None
    battery: BatteryReading | None = None
    screen_width: int | None = None
    screen_height: int | None = None
    screen_color_depth: int | None = None
    touch_capable: bool = False


class SignalCollector:
    def __init__(self, battery_timeout_seconds: float):
        self._battery_timeout_seconds = battery_timeout_seconds

    async def collect(self, host: BrowserHost) -> RawSignals:
        user_agent = probe(
            "navigator.userAgent",
            lambda: as_text(host.navigator("userAgent")),
        )
        platform = probe(
            "navigator.platform",
            lambda: as_text(host.navigator("platform")),
        )
        cpu_class = probe(
            "navigator.cpuClass",
            lambda: as_text(host.navigator("cpuClass")),
        )
        cores = probe(
            "navigator.hardwareConcurrency",
            lambda: as_int(host.navigator("hardwareConcurrency")),
        )
        memory = probe(
            "navigator.deviceMemory",
            lambda: as_number(host.navigator("deviceMemory")),
        )
        width = probe("screen.width", lambda: as_int(host.screen("width")))
        height = probe("screen.height", lambda: as_int(host.screen("height")))
        color_depth = probe(
            "screen.colorDepth",
            lambda: as_int(host.screen("colorDepth")),
        )
        touch = probe(
            f"document.{TOUCH_START_EVENT}",
            lambda: bool(host.has_event_type(TOUCH_START_EVENT)),
        )
        renderer, vendor = self._read_webgl(host)
        battery = await self._read_battery(host)

        return RawSignals(
            user_agent=user_agent.get(""),
            platform=platform.value,
            cpu_class=cpu_class.value,
            core_count=cores.value,
            device_memory=memory.value,
            webgl_renderer=renderer,
            webgl_vendor=vendor,
            battery=battery,
            screen_width=width.value,
            screen_height=height.value,
            screen_color_depth=color_depth.value,
            touch_capable=touch.get(False),
        )

    def _read_webgl(self, host: BrowserHost) -> tuple[str | None, str | None]:
        context = probe("webgl.context", lambda: _open_context(host))
        if not context.available:
            return None, None

        gl = context.value
        extension = probe(
            f"webgl.{DEBUG_RENDERER_INFO}",
            lambda: gl.get_extension(DEBUG_RENDERER_INFO),
        )
        if not extension.available:
            return None, None

        renderer = probe(
            "webgl.UNMASKED_RENDERER_WEBGL",
            lambda: as_text(gl.get_parameter(UNMASKED_RENDERER_WEBGL)),
        )
        vendor = probe(
            "webgl.UNMASKED_VENDOR_WEBGL",
            lambda: as_text(gl.get_parameter(UNMASKED_VENDOR_WEBGL)),
        )
        return renderer.value, vendor.value

    async def _read_battery(self, host: BrowserHost) -> BatteryReading | None:
        try:
            return await asyncio.wait_for(
                _first_battery_reading(host),
                timeout=self._battery_timeout_seconds,
            )
        except TimeoutError:
            unavailable(
                "battery",
                f"no answer within {self._battery_timeout_seconds}s",
            )
            return None


def _open_context(host: BrowserHost) -> GLContext | None:
    surface = host.create_surface()
    for name in WEBGL_CONTEXT_NAMES:
        context = probe(
            f"canvas.getContext({name})",
            partial(surface.get_context, name),
        )
        if context.available:
            return context.value
    return None


async def _first_battery_reading(host: BrowserHost) -> BatteryReading | None:
    for source in BATTERY_SOURCES:
        try:
            reading = await host.read_battery(source)
        except Exception as exc:  # noqa: BLE001
            unavailable(f"battery.{source}", f"{type(exc).__name__}: {exc}")
            continue
        if isinstance(reading, BatteryReading):
            logger.debug("Battery read from %s", source)
            return reading
    unavailable("battery", "no source exposed")
    return None


__all__ = ("RawSignals", "SignalCollector")
