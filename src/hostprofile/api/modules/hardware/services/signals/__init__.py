from hostprofile.api.modules.hardware.services.signals.collector import (
    RawSignals,
    SignalCollector,
)
from hostprofile.api.modules.hardware.services.signals.host import (
    BatteryReading,
    BrowserHost,
)
from hostprofile.api.modules.hardware.services.signals.probe import (
    CapabilityUnavailable,
    Probe,
    probe,
)
from hostprofile.api.modules.hardware.services.signals.snapshot import SnapshotHost

__all__ = (
    "BatteryReading",
    "BrowserHost",
    "CapabilityUnavailable",
    "Probe",
    "RawSignals",
    "SignalCollector",
    "SnapshotHost",
    "probe",
)
