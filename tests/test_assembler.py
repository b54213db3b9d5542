import asyncio

import pytest
from conftest import IPHONE_UA, FakeGLContext, FakeHost

from hostprofile.api.modules.hardware.schema import HardwareReport
from hostprofile.api.modules.hardware.services import (
    DeviceIdentityResolver,
    FingerprintAssembler,
    MarkerSignatureLibrary,
    SignalCollector,
)
from hostprofile.api.modules.hardware.services.signals import BatteryReading

WIRE_FIELDS = {
    "arch",
    "cores",
    "gpu",
    "vendor",
    "memory",
    "chargingStatus",
    "batteryLevel",
    "chargingTime",
    "dischargingTime",
    "width",
    "height",
    "colordepth",
    "isTouchEnabled",
    "isVirtualMachine",
    "isLaptop",
    "isMobileDevice",
    "isGameConsole",
    "name",
}


class EmptyHost:
    """A host exposing nothing at all."""

    def navigator(self, name):
        raise AttributeError(name)

    def screen(self, name):
        raise AttributeError(name)

    def has_event_type(self, name):
        raise AttributeError(name)

    def create_surface(self):
        raise AttributeError("canvas")

    async def read_battery(self, source):
        raise AttributeError(source)


@pytest.fixture
def assembler() -> FingerprintAssembler:
    return FingerprintAssembler(
        collector=SignalCollector(battery_timeout_seconds=0.2),
        resolver=DeviceIdentityResolver(MarkerSignatureLibrary()),
    )


def assemble(assembler: FingerprintAssembler, host) -> HardwareReport:
    return asyncio.run(assembler.assemble(host))


def test_report_has_stable_wire_fields(assembler):
    report = assemble(assembler, FakeHost())

    assert set(report.to_wire()) == WIRE_FIELDS


def test_empty_host_yields_complete_unknown_report(assembler):
    wire = assemble(assembler, EmptyHost()).to_wire()

    assert None not in wire.values()
    assert wire["arch"] == "UNKNOWN"
    for field in (
        "cores",
        "gpu",
        "vendor",
        "memory",
        "chargingStatus",
        "batteryLevel",
        "chargingTime",
        "dischargingTime",
        "width",
        "height",
        "colordepth",
    ):
        assert wire[field] == "unknown", field
    assert wire["isTouchEnabled"] is False
    assert wire["isVirtualMachine"] is False
    assert wire["isLaptop"] is False
    assert wire["name"] == "Unknown"


def test_desktop_report(assembler):
    host = FakeHost(
        navigator={"hardwareConcurrency": 16, "deviceMemory": 8},
        batteries={
            "getBattery": BatteryReading(
                charging=True, level=0.87, charging_time=600, discharging_time=None
            )
        },
    )

    wire = assemble(assembler, host).to_wire()

    assert wire["arch"] == "x86_64"
    assert wire["cores"] == 16
    assert wire["memory"] == 8
    assert wire["gpu"] == "ANGLE (NVIDIA GeForce RTX 3060)"
    assert wire["chargingStatus"] is True
    assert wire["batteryLevel"] == "87%"
    assert wire["chargingTime"] == 600
    assert wire["dischargingTime"] == "unknown"
    assert (wire["width"], wire["height"], wire["colordepth"]) == (1920, 1080, 24)
    assert wire["name"] == "Unknown"


def test_vmware_guest(assembler):
    host = FakeHost(
        contexts={"webgl": FakeGLContext(renderer="SVGA3D", vendor="VMware, Inc")}
    )

    wire = assemble(assembler, host).to_wire()

    assert wire["isVirtualMachine"] is True
    assert wire["name"] == "Virtual Machine"


def test_odd_desktop_resolution_is_virtual_machine(assembler):
    wire = assemble(assembler, FakeHost(screen={"width": 1365})).to_wire()

    assert wire["isVirtualMachine"] is True


def test_touch_phone(assembler):
    host = FakeHost(
        navigator={"userAgent": IPHONE_UA, "platform": "iPhone"},
        screen={"width": 393, "height": 851},
        contexts={},
        touch=True,
    )

    wire = assemble(assembler, host).to_wire()

    assert wire["name"] == "iPhone"
    assert wire["isMobileDevice"] is True
    assert wire["isTouchEnabled"] is True
    assert wire["isVirtualMachine"] is False
    assert wire["isLaptop"] is False
    assert wire["arch"] == "UNKNOWN"


def test_identical_host_state_gives_identical_reports(assembler):
    host = FakeHost(navigator={"hardwareConcurrency": 4})

    assert assemble(assembler, host) == assemble(assembler, host)


def test_report_is_immutable(assembler):
    report = assemble(assembler, FakeHost())

    with pytest.raises(Exception):
        report.name = "Laptop"


def test_unexpected_fault_aborts_assembly():
    class ExplodingResolver:
        def resolve(self, signals, gpu, screen):
            raise RuntimeError("unexpected")

    assembler = FingerprintAssembler(
        collector=SignalCollector(battery_timeout_seconds=0.2),
        resolver=ExplodingResolver(),
    )

    with pytest.raises(RuntimeError):
        assemble(assembler, FakeHost())
