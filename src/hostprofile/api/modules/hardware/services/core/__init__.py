from hostprofile.api.modules.hardware.services.core.assembler import (
    FingerprintAssembler,
)
from hostprofile.api.modules.hardware.services.core.sink import (
    DatabaseReportSink,
    NullReportSink,
    ReportContext,
    ReportSink,
)

__all__ = (
    "DatabaseReportSink",
    "FingerprintAssembler",
    "NullReportSink",
    "ReportContext",
    "ReportSink",
)
