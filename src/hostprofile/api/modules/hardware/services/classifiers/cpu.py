import re
from dataclasses import dataclass
from typing import Literal

from hostprofile.api.modules.hardware.services.signals import RawSignals
from hostprofile.api.modules.hardware.services.signals.probe import UNKNOWN

# WOW64 is a 32-bit browser on 64-bit Windows; the OS arch is what we report.
X86_64_UA_PATTERN = re.compile(r"WOW64|x64|x86_64")
X86_64_PLATFORMS = frozenset({"win64"})

CPU_CLASS_ARCHES = {
    "68K": "Motorola 68K",
    "PPC": "Motorola PPC",
    "Digital": "Alpha",
}
DEFAULT_CPU_CLASS_ARCH = "x86"
UNKNOWN_ARCH = "UNKNOWN"


@dataclass(frozen=True, slots=True)
class CpuProfile:
    arch: str
    cores: int | Literal["unknown"]


def detect_arch(signals: RawSignals) -> str:
    if X86_64_UA_PATTERN.search(signals.user_agent):
        return "x86_64"
    if signals.platform and signals.platform.lower() in X86_64_PLATFORMS:
        return "x86_64"
    if signals.cpu_class is not None:
        return CPU_CLASS_ARCHES.get(signals.cpu_class, DEFAULT_CPU_CLASS_ARCH)
    return UNKNOWN_ARCH


def classify_cpu(signals: RawSignals) -> CpuProfile:
    cores = signals.core_count if signals.core_count is not None else UNKNOWN
    return CpuProfile(arch=detect_arch(signals), cores=cores)


__all__ = ("CpuProfile", "classify_cpu", "detect_arch")
