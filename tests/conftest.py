from __future__ import annotations

import asyncio
from collections.abc import Iterator
from typing import Any

import pytest
from fastapi.testclient import TestClient

from hostprofile.api.modules.hardware.services.signals import (
    BatteryReading,
    CapabilityUnavailable,
    RawSignals,
)
from hostprofile.api.modules.hardware.services.signals.host import (
    DEBUG_RENDERER_INFO,
    UNMASKED_RENDERER_WEBGL,
    UNMASKED_VENDOR_WEBGL,
)
from hostprofile.application import get_production_app
from hostprofile.settings import APIConfig, Config, DatabaseConfig, HardwareConfig

DESKTOP_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/126.0.0.0 Safari/537.36"
)
IPHONE_UA = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 17_5 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.5 Mobile/15E148 Safari/604.1"
)
ANDROID_PHONE_UA = (
    "Mozilla/5.0 (Linux; Android 14; Pixel 8) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/126.0.0.0 Mobile Safari/537.36"
)
LINUX_UA = (
    "Mozilla/5.0 (X11; Linux i686; rv:109.0) Gecko/20100101 Firefox/115.0"
)


class FakeGLContext:
    def __init__(
        self,
        renderer: str | None = "ANGLE (NVIDIA GeForce RTX 3060)",
        vendor: str | None = "Google Inc. (NVIDIA)",
        has_debug_info: bool = True,
    ):
        self.renderer = renderer
        self.vendor = vendor
        self.has_debug_info = has_debug_info

    def get_extension(self, name: str) -> object | None:
        if name == DEBUG_RENDERER_INFO and self.has_debug_info:
            return object()
        return None

    def get_parameter(self, parameter: int) -> object:
        if parameter == UNMASKED_RENDERER_WEBGL:
            return self.renderer
        if parameter == UNMASKED_VENDOR_WEBGL:
            return self.vendor
        raise ValueError(parameter)


class FakeSurface:
    def __init__(self, contexts: dict[str, Any]):
        self.contexts = contexts
        self.requested: list[str] = []

    def get_context(self, name: str) -> Any:
        self.requested.append(name)
        context = self.contexts.get(name)
        if isinstance(context, Exception):
            raise context
        return context


class FakeHost:
    """In-memory browser host; values that are exceptions are raised."""

    def __init__(
        self,
        navigator: dict[str, Any] | None = None,
        screen: dict[str, Any] | None = None,
        contexts: dict[str, Any] | None = None,
        batteries: dict[str, Any] | None = None,
        touch: bool | Exception = False,
        battery_delay: float = 0.0,
    ):
        self.navigator_values = {"userAgent": DESKTOP_UA, "platform": "Win32"}
        self.navigator_values.update(navigator or {})
        self.screen_values = {"width": 1920, "height": 1080, "colorDepth": 24}
        self.screen_values.update(screen or {})
        self.surface = FakeSurface(
            {"webgl": FakeGLContext()} if contexts is None else contexts
        )
        self.batteries = batteries or {}
        self.touch = touch
        self.battery_delay = battery_delay

    def _lookup(self, values: dict[str, Any], name: str) -> object:
        if name not in values:
            raise CapabilityUnavailable(name)
        value = values[name]
        if isinstance(value, Exception):
            raise value
        return value

    def navigator(self, name: str) -> object:
        return self._lookup(self.navigator_values, name)

    def screen(self, name: str) -> object:
        return self._lookup(self.screen_values, name)

    def has_event_type(self, name: str) -> bool:
        if isinstance(self.touch, Exception):
            raise self.touch
        return name == "ontouchstart" and self.touch

    def create_surface(self) -> FakeSurface:
        return self.surface

    async def read_battery(self, source: str) -> BatteryReading | None:
        if self.battery_delay:
            await asyncio.sleep(self.battery_delay)
        reading = self.batteries.get(source)
        if isinstance(reading, Exception):
            raise reading
        return reading


def make_signals(**overrides: Any) -> RawSignals:
    values: dict[str, Any] = {
        "user_agent": DESKTOP_UA,
        "platform": "Win32",
        "screen_width": 1920,
        "screen_height": 1080,
        "screen_color_depth": 24,
    }
    values.update(overrides)
    return RawSignals(**values)


def make_snapshot_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "session_id": "hook-1",
        "navigator": {
            "user_agent": DESKTOP_UA,
            "platform": "Win32",
            "hardware_concurrency": 8,
            "device_memory": 8,
        },
        "screen": {"width": 1920, "height": 1080, "color_depth": 24},
        "webgl": {
            "context": "webgl",
            "debug_renderer_info": True,
            "renderer": "ANGLE (Intel, Intel(R) UHD Graphics 620)",
            "vendor": "Google Inc. (Intel)",
        },
        "battery": {
            "source": "getBattery",
            "charging": True,
            "level": 0.5,
            "charging_time": 1200,
            "discharging_time": "Infinity",
        },
        "touch_events": False,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def make_config(tmp_path):
    def factory(**hardware: Any) -> Config:
        return Config(
            env="dev",
            api=APIConfig(allowed_hosts=["*"], api_key=hardware.pop("api_key", None)),
            database=DatabaseConfig(url=f"sqlite+aiosqlite:///{tmp_path / 'reports.db'}"),
            hardware=HardwareConfig(**hardware),
        )

    return factory


@pytest.fixture
def client(make_config) -> Iterator[TestClient]:
    app = get_production_app(make_config())
    with TestClient(app) as test_client:
        yield test_client
