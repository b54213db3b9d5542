from typing import Literal

from hostprofile.api.modules.hardware.services.signals import RawSignals
from hostprofile.api.modules.hardware.services.signals.probe import UNKNOWN


def classify_memory(signals: RawSignals) -> int | float | Literal["unknown"]:
    """Approximate RAM in GiB, exactly as the browser rounds it."""
    if signals.device_memory is None:
        return UNKNOWN
    return signals.device_memory


__all__ = ("classify_memory",)
