from hostprofile.api.modules.hardware.services.network.common import (
    RequestIpResolver,
    normalize_ip,
)

__all__ = ("RequestIpResolver", "normalize_ip")
