import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from hostprofile.api.modules.hardware.services.classifiers import (
    GpuProfile,
    ScreenProfile,
)
from hostprofile.api.modules.hardware.services.heuristics import (
    detect_laptop,
    detect_virtual_machine,
)
from hostprofile.api.modules.hardware.services.identity import vendors
from hostprofile.api.modules.hardware.services.identity.signatures import (
    DeviceFamily,
    SignatureLibrary,
    normalize_identity,
)
from hostprofile.api.modules.hardware.services.signals import RawSignals

logger = logging.getLogger(__name__)

UNKNOWN_DEVICE = "Unknown"


@dataclass(frozen=True, slots=True)
class DeviceIdentity:
    name: str
    is_mobile: bool
    is_game_console: bool
    is_laptop: bool
    is_virtual_machine: bool


@dataclass(frozen=True, slots=True)
class IdentityContext:
    user_agent: str
    identity: str
    signatures: SignatureLibrary
    is_laptop: bool = False
    is_virtual_machine: bool = False

    def matches(self, family: DeviceFamily) -> bool:
        try:
            return bool(self.signatures.matches(family, self.identity))
        except Exception as exc:  # noqa: BLE001
            logger.debug("Signature lookup for %s failed: %s", family, exc)
            return False


IdentityPredicate = Callable[[IdentityContext], bool]


@dataclass(frozen=True, slots=True)
class IdentityRule:
    name: str
    matches: IdentityPredicate


def signature(family: DeviceFamily) -> IdentityPredicate:
    return lambda context: context.matches(family)


def brand(check: Callable[[str], bool]) -> IdentityPredicate:
    return lambda context: check(context.user_agent)


# Highest priority first. Brand checks run before the OS families because
# some User-Agents carry both, and specific variants precede their generic
# sibling (Kindle Fire before Kindle, named Nintendo consoles before Nintendo).
IDENTITY_RULES: tuple[IdentityRule, ...] = (
    IdentityRule("iPhone", signature(DeviceFamily.IPHONE)),
    IdentityRule("iPod Touch", signature(DeviceFamily.IPOD)),
    IdentityRule("iPad", signature(DeviceFamily.IPAD)),
    IdentityRule("HTC", brand(vendors.is_htc)),
    IdentityRule("Motorola", brand(vendors.is_motorola)),
    IdentityRule("Zune", brand(vendors.is_zune)),
    IdentityRule("Google Nexus One", brand(vendors.is_google_nexus_one)),
    IdentityRule("Ericsson", brand(vendors.is_ericsson)),
    IdentityRule("Android Phone", signature(DeviceFamily.ANDROID_PHONE)),
    IdentityRule("Android Tablet", signature(DeviceFamily.ANDROID_TABLET)),
    IdentityRule("Nokia S60 Open Source", signature(DeviceFamily.S60_OSS_BROWSER)),
    IdentityRule("Nokia S60", signature(DeviceFamily.S60)),
    IdentityRule("Nokia S70", signature(DeviceFamily.S70)),
    IdentityRule("Nokia S80", signature(DeviceFamily.S80)),
    IdentityRule("Nokia S90", signature(DeviceFamily.S90)),
    IdentityRule("Nokia Symbian", signature(DeviceFamily.SYMBIAN)),
    IdentityRule("Nokia", brand(vendors.is_nokia)),
    IdentityRule("Windows Phone 7", signature(DeviceFamily.WINDOWS_PHONE_7)),
    IdentityRule("Windows Phone 8", signature(DeviceFamily.WINDOWS_PHONE_8)),
    IdentityRule("Windows Phone 10", signature(DeviceFamily.WINDOWS_PHONE_10)),
    IdentityRule("Windows Mobile", signature(DeviceFamily.WINDOWS_MOBILE)),
    IdentityRule("BlackBerry Tablet", signature(DeviceFamily.BLACKBERRY_TABLET)),
    IdentityRule("BlackBerry OS 6", signature(DeviceFamily.BLACKBERRY_WEBKIT)),
    IdentityRule("BlackBerry Touch", signature(DeviceFamily.BLACKBERRY_TOUCH)),
    IdentityRule("BlackBerry OS 5", signature(DeviceFamily.BLACKBERRY_HIGH)),
    IdentityRule("BlackBerry", signature(DeviceFamily.BLACKBERRY)),
    IdentityRule("Palm OS", signature(DeviceFamily.PALM_OS)),
    IdentityRule("Palm Web OS", signature(DeviceFamily.PALM_WEBOS)),
    IdentityRule("Garmin Nuvifone", signature(DeviceFamily.GARMIN_NUVIFONE)),
    IdentityRule("Archos", signature(DeviceFamily.ARCHOS)),
    IdentityRule("Brew", signature(DeviceFamily.BREW)),
    IdentityRule("Danger Hiptop", signature(DeviceFamily.DANGER_HIPTOP)),
    IdentityRule("Maemo Tablet", signature(DeviceFamily.MAEMO_TABLET)),
    IdentityRule("Sony Mylo", signature(DeviceFamily.SONY_MYLO)),
    IdentityRule("Kindle Fire", signature(DeviceFamily.AMAZON_SILK)),
    IdentityRule("Kindle", signature(DeviceFamily.KINDLE)),
    IdentityRule("Playstation", signature(DeviceFamily.SONY_PLAYSTATION)),
    IdentityRule("Nintendo DS", signature(DeviceFamily.NINTENDO_DS)),
    IdentityRule("Nintendo Wii", signature(DeviceFamily.NINTENDO_WII)),
    IdentityRule("Nintendo", signature(DeviceFamily.NINTENDO)),
    IdentityRule("Xbox", signature(DeviceFamily.XBOX)),
    IdentityRule("Laptop", lambda context: context.is_laptop),
    IdentityRule("Virtual Machine", lambda context: context.is_virtual_machine),
)


class DeviceIdentityResolver:
    def __init__(
        self,
        signatures: SignatureLibrary,
        rules: Sequence[IdentityRule] = IDENTITY_RULES,
    ):
        self._signatures = signatures
        self._rules = tuple(rules)

    @property
    def rules(self) -> tuple[IdentityRule, ...]:
        return self._rules

    def resolve(
        self,
        signals: RawSignals,
        gpu: GpuProfile,
        screen: ScreenProfile,
    ) -> DeviceIdentity:
        context = IdentityContext(
            user_agent=signals.user_agent,
            identity=normalize_identity(signals.user_agent),
            signatures=self._signatures,
        )
        is_mobile = context.matches(DeviceFamily.MOBILE_QUICK)
        is_game_console = context.matches(DeviceFamily.GAME_CONSOLE)
        context = IdentityContext(
            user_agent=context.user_agent,
            identity=context.identity,
            signatures=self._signatures,
            is_laptop=detect_laptop(screen, is_mobile),
            is_virtual_machine=detect_virtual_machine(gpu, screen, is_mobile),
        )

        return DeviceIdentity(
            name=self.resolve_name(context),
            is_mobile=is_mobile,
            is_game_console=is_game_console,
            is_laptop=context.is_laptop,
            is_virtual_machine=context.is_virtual_machine,
        )

    def resolve_name(self, context: IdentityContext) -> str:
        for rule in self._rules:
            if rule.matches(context):
                return rule.name
        return UNKNOWN_DEVICE


__all__ = (
    "IDENTITY_RULES",
    "UNKNOWN_DEVICE",
    "DeviceIdentity",
    "DeviceIdentityResolver",
    "IdentityContext",
    "IdentityRule",
    "brand",
    "signature",
)
