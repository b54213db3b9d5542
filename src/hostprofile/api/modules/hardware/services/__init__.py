from hostprofile.api.modules.hardware.services.core import (
    FingerprintAssembler,
    ReportContext,
    ReportSink,
)
from hostprofile.api.modules.hardware.services.identity import (
    DeviceIdentityResolver,
    MarkerSignatureLibrary,
    SignatureLibrary,
)
from hostprofile.api.modules.hardware.services.network import RequestIpResolver
from hostprofile.api.modules.hardware.services.signals import (
    SignalCollector,
    SnapshotHost,
)

__all__ = (
    "DeviceIdentityResolver",
    "FingerprintAssembler",
    "MarkerSignatureLibrary",
    "ReportContext",
    "ReportSink",
    "RequestIpResolver",
    "SignalCollector",
    "SignatureLibrary",
    "SnapshotHost",
)
