import pytest

from hostprofile.api.modules.hardware.services.classifiers import (
    GpuProfile,
    ScreenProfile,
)
from hostprofile.api.modules.hardware.services.heuristics import (
    detect_laptop,
    detect_virtual_machine,
)

NVIDIA = GpuProfile(renderer="GeForce RTX 3060", vendor="NVIDIA Corporation")
VMWARE = GpuProfile(renderer="SVGA3D; build: RELEASE", vendor="VMware, Inc.")
UNKNOWN_GPU = GpuProfile(renderer="unknown", vendor="unknown")


def screen(width, height) -> ScreenProfile:
    return ScreenProfile(width=width, height=height, color_depth=24)


def test_vmware_vendor_wins_even_with_even_screen():
    assert detect_virtual_machine(VMWARE, screen(1920, 1080), is_mobile=False)


def test_vmware_vendor_wins_before_mobile_exclusion():
    assert detect_virtual_machine(VMWARE, screen(390, 844), is_mobile=True)


@pytest.mark.parametrize(("width", "height"), [(1365, 768), (1366, 767), (801, 601)])
def test_odd_desktop_resolution_is_virtual(width, height):
    assert detect_virtual_machine(NVIDIA, screen(width, height), is_mobile=False)


def test_mobile_odd_resolution_is_not_virtual():
    assert not detect_virtual_machine(NVIDIA, screen(1365, 767), is_mobile=True)


def test_even_desktop_resolution_is_not_virtual():
    assert not detect_virtual_machine(UNKNOWN_GPU, screen(2560, 1440), is_mobile=False)


def test_unknown_screen_is_not_virtual():
    assert not detect_virtual_machine(
        NVIDIA, screen("unknown", "unknown"), is_mobile=False
    )


@pytest.mark.parametrize(
    ("width", "height", "expected"),
    [
        (1366, 768, True),
        (1024, 600, True),
        (1280, 800, False),
        (768, 1366, False),
        (1366, 769, False),
        ("unknown", "unknown", False),
    ],
)
def test_laptop_resolutions(width, height, expected):
    assert detect_laptop(screen(width, height), is_mobile=False) is expected


def test_mobile_is_never_a_laptop():
    assert detect_laptop(screen(1366, 768), is_mobile=True) is False
