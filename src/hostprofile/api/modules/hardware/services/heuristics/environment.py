from hostprofile.api.modules.hardware.services.classifiers import (
    GpuProfile,
    ScreenProfile,
)

HYPERVISOR_GPU_VENDOR_MARKERS = ("VMware, Inc",)

# 1366x768 is the most common laptop panel, 1024x600 covers netbooks.
LAPTOP_RESOLUTIONS = ((1366, 768), (1024, 600))


def detect_virtual_machine(
    gpu: GpuProfile,
    screen: ScreenProfile,
    is_mobile: bool,
) -> bool:
    """Guess whether the browser runs inside a virtual machine.

    A hypervisor GPU vendor string decides on its own. Otherwise an odd
    desktop resolution counts as a virtualization artifact; phones are
    excluded because odd physical panels are common there.
    """
    if any(marker in gpu.vendor for marker in HYPERVISOR_GPU_VENDOR_MARKERS):
        return True
    if is_mobile:
        return False
    return screen.has_odd_dimension()


def detect_laptop(screen: ScreenProfile, is_mobile: bool) -> bool:
    if is_mobile:
        return False
    return any(screen.matches(width, height) for width, height in LAPTOP_RESOLUTIONS)


__all__ = (
    "HYPERVISOR_GPU_VENDOR_MARKERS",
    "LAPTOP_RESOLUTIONS",
    "detect_laptop",
    "detect_virtual_machine",
)
