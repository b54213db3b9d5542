from hostprofile.api.modules.hardware.services.classifiers.battery import (
    BatteryProfile,
    classify_battery,
)
from hostprofile.api.modules.hardware.services.classifiers.cpu import (
    CpuProfile,
    classify_cpu,
)
from hostprofile.api.modules.hardware.services.classifiers.gpu import (
    GpuProfile,
    classify_gpu,
)
from hostprofile.api.modules.hardware.services.classifiers.memory import (
    classify_memory,
)
from hostprofile.api.modules.hardware.services.classifiers.screen import (
    ScreenProfile,
    classify_screen,
    is_touch_enabled,
)

__all__ = (
    "BatteryProfile",
    "CpuProfile",
    "GpuProfile",
    "ScreenProfile",
    "classify_battery",
    "classify_cpu",
    "classify_gpu",
    "classify_memory",
    "classify_screen",
    "is_touch_enabled",
)
