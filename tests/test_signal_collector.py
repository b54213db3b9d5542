import asyncio
import math

from conftest import DESKTOP_UA, FakeGLContext, FakeHost, make_snapshot_payload

from hostprofile.api.modules.hardware.schema import HostSnapshot
from hostprofile.api.modules.hardware.services.signals import (
    BatteryReading,
    SignalCollector,
    SnapshotHost,
)
from hostprofile.api.modules.hardware.services.signals.probe import (
    CapabilityUnavailable,
    as_int,
    probe,
)

READING = BatteryReading(
    charging=False, level=0.42, charging_time=None, discharging_time=5400
)


def collect(host, timeout: float = 0.5):
    return asyncio.run(SignalCollector(battery_timeout_seconds=timeout).collect(host))


def test_probe_converts_failures_to_unavailable():
    def broken():
        raise RuntimeError("boom")

    def missing():
        raise CapabilityUnavailable("cpuClass")

    assert probe("x", broken).reason == "RuntimeError: boom"
    assert probe("x", missing).reason == "not exposed"
    assert probe("x", lambda: None).available is False
    assert probe("x", lambda: 4).get() == 4


def test_as_int_rejects_non_integers():
    assert as_int(True) is None
    assert as_int("8") is None
    assert as_int(8.0) == 8
    assert as_int(8.5) is None


def test_collects_every_available_signal():
    host = FakeHost(
        navigator={"hardwareConcurrency": 8, "deviceMemory": 16, "cpuClass": "x86"},
        batteries={"getBattery": READING},
        touch=True,
    )

    signals = collect(host)

    assert signals.user_agent == DESKTOP_UA
    assert signals.platform == "Win32"
    assert signals.cpu_class == "x86"
    assert signals.core_count == 8
    assert signals.device_memory == 16
    assert signals.webgl_renderer == "ANGLE (NVIDIA GeForce RTX 3060)"
    assert signals.webgl_vendor == "Google Inc. (NVIDIA)"
    assert signals.battery == READING
    assert (signals.screen_width, signals.screen_height) == (1920, 1080)
    assert signals.screen_color_depth == 24
    assert signals.touch_capable is True


def test_one_failing_signal_does_not_stop_the_others():
    host = FakeHost(
        navigator={
            "hardwareConcurrency": RuntimeError("denied"),
            "deviceMemory": 4,
        },
        screen={"colorDepth": TypeError("bad")},
        touch=RuntimeError("no document"),
    )

    signals = collect(host)

    assert signals.core_count is None
    assert signals.device_memory == 4
    assert signals.screen_color_depth is None
    assert signals.screen_width == 1920
    assert signals.touch_capable is False


def test_missing_user_agent_becomes_empty_string():
    host = FakeHost(navigator={"userAgent": RuntimeError("gone")})

    assert collect(host).user_agent == ""


def test_webgl_falls_back_to_experimental_context():
    legacy = FakeGLContext(renderer="Mesa DRI", vendor="VMware, Inc.")
    host = FakeHost(contexts={"webgl": None, "experimental-webgl": legacy})

    signals = collect(host)

    assert host.surface.requested == ["webgl", "experimental-webgl"]
    assert signals.webgl_renderer == "Mesa DRI"
    assert signals.webgl_vendor == "VMware, Inc."


def test_webgl_context_errors_leave_gpu_unknown():
    host = FakeHost(
        contexts={
            "webgl": RuntimeError("context lost"),
            "experimental-webgl": RuntimeError("context lost"),
        }
    )

    signals = collect(host)

    assert signals.webgl_renderer is None
    assert signals.webgl_vendor is None


def test_missing_debug_extension_leaves_gpu_unknown():
    host = FakeHost(contexts={"webgl": FakeGLContext(has_debug_info=False)})

    signals = collect(host)

    assert (signals.webgl_renderer, signals.webgl_vendor) == (None, None)


def test_surface_creation_failure_leaves_gpu_unknown():
    host = FakeHost()

    def no_canvas():
        raise RuntimeError("no canvas")

    host.create_surface = no_canvas

    signals = collect(host)

    assert (signals.webgl_renderer, signals.webgl_vendor) == (None, None)


def test_battery_uses_first_exposed_source():
    legacy = BatteryReading(
        charging=True, level=1.0, charging_time=0, discharging_time=None
    )
    host = FakeHost(batteries={"webkitBattery": legacy, "mozBattery": READING})

    assert collect(host).battery == legacy


def test_battery_skips_source_that_raises():
    host = FakeHost(
        batteries={"getBattery": RuntimeError("not allowed"), "battery": READING}
    )

    assert collect(host).battery == READING


def test_battery_without_any_source_is_unknown():
    assert collect(FakeHost()).battery is None


def test_battery_wait_is_bounded():
    host = FakeHost(batteries={"getBattery": READING}, battery_delay=5)

    signals = collect(host, timeout=0.05)

    assert signals.battery is None
    assert signals.screen_width == 1920


def test_snapshot_host_replays_posted_capabilities():
    payload = make_snapshot_payload(
        webgl={
            "context": "experimental-webgl",
            "debug_renderer_info": True,
            "renderer": "Mali-G78",
            "vendor": "ARM",
        },
        battery={
            "source": "mozBattery",
            "charging": False,
            "level": 0.25,
            "discharging_time": "Infinity",
        },
        touch_events=True,
    )

    signals = collect(SnapshotHost(HostSnapshot.model_validate(payload)))

    assert signals.webgl_renderer == "Mali-G78"
    assert signals.battery.level == 0.25
    assert math.isinf(signals.battery.discharging_time)
    assert signals.battery.charging_time is None
    assert signals.touch_capable is True
    assert signals.core_count == 8
