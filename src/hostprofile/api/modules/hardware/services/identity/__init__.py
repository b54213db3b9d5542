from hostprofile.api.modules.hardware.services.identity.resolver import (
    IDENTITY_RULES,
    DeviceIdentity,
    DeviceIdentityResolver,
    IdentityRule,
)
from hostprofile.api.modules.hardware.services.identity.signatures import (
    DeviceFamily,
    MarkerSignatureLibrary,
    SignatureLibrary,
)

__all__ = (
    "IDENTITY_RULES",
    "DeviceFamily",
    "DeviceIdentity",
    "DeviceIdentityResolver",
    "IdentityRule",
    "MarkerSignatureLibrary",
    "SignatureLibrary",
)
