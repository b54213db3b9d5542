import logging
from dataclasses import dataclass

from hostprofile.api.modules.hardware.services.signals import RawSignals
from hostprofile.api.modules.hardware.services.signals.probe import UNKNOWN

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GpuProfile:
    renderer: str
    vendor: str


def classify_gpu(signals: RawSignals) -> GpuProfile:
    renderer = signals.webgl_renderer or UNKNOWN
    vendor = signals.webgl_vendor or UNKNOWN
    if renderer == UNKNOWN and vendor == UNKNOWN:
        logger.debug("WebGL renderer info not available")
    else:
        logger.debug("GPU: %s - Vendor: %s", renderer, vendor)
    return GpuProfile(renderer=renderer, vendor=vendor)


__all__ = ("GpuProfile", "classify_gpu")
