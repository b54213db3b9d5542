from collections.abc import Callable
from enum import StrEnum
from typing import Protocol


class DeviceFamily(StrEnum):
    IPHONE = "iphone"
    IPOD = "ipod"
    IPAD = "ipad"
    ANDROID_PHONE = "android_phone"
    ANDROID_TABLET = "android_tablet"
    S60_OSS_BROWSER = "s60_oss_browser"
    S60 = "s60"
    S70 = "s70"
    S80 = "s80"
    S90 = "s90"
    SYMBIAN = "symbian"
    WINDOWS_PHONE_7 = "windows_phone_7"
    WINDOWS_PHONE_8 = "windows_phone_8"
    WINDOWS_PHONE_10 = "windows_phone_10"
    WINDOWS_MOBILE = "windows_mobile"
    BLACKBERRY_TABLET = "blackberry_tablet"
    BLACKBERRY_WEBKIT = "blackberry_webkit"
    BLACKBERRY_TOUCH = "blackberry_touch"
    BLACKBERRY_HIGH = "blackberry_high"
    BLACKBERRY = "blackberry"
    PALM_OS = "palm_os"
    PALM_WEBOS = "palm_webos"
    GARMIN_NUVIFONE = "garmin_nuvifone"
    ARCHOS = "archos"
    BREW = "brew"
    DANGER_HIPTOP = "danger_hiptop"
    MAEMO_TABLET = "maemo_tablet"
    SONY_MYLO = "sony_mylo"
    AMAZON_SILK = "amazon_silk"
    KINDLE = "kindle"
    SONY_PLAYSTATION = "sony_playstation"
    NINTENDO_DS = "nintendo_ds"
    NINTENDO_WII = "nintendo_wii"
    NINTENDO = "nintendo"
    XBOX = "xbox"
    # Aggregate families.
    MOBILE_QUICK = "mobile_quick"
    GAME_CONSOLE = "game_console"


class SignatureLibrary(Protocol):
    """Pattern database matching identity strings to device families."""

    def matches(self, family: DeviceFamily, identity: str) -> bool: ...


def normalize_identity(user_agent: str) -> str:
    return user_agent.lower()


def contains_any(value: str, markers: tuple[str, ...]) -> bool:
    return any(marker in value for marker in markers)


WEBKIT = "webkit"
MOBILE = "mobile"
OPERA_MOBILE_MARKERS = ("opera mobi", "opera mini")
WINDOWS_PHONE = "windows phone"
WINDOWS_MOBILE_MARKERS = ("windows ce", "wce;", "iemobile", "wm5 pie", "windows mobile")
BLACKBERRY_MARKERS = ("blackberry", "vnd.rim", "bb10")
BLACKBERRY_TOUCH_MARKERS = (
    "blackberry95",  # Storm
    "blackberry 98",  # Torch
    "blackberry 99",  # Bold touch
    "blackberry 938",  # Curve touch
)
BLACKBERRY_HIGH_MARKERS = (
    "blackberry96",  # Tour
    "blackberry97",  # Bold
    "blackberry89",  # Curve
)
PALM_OS_MARKERS = ("palm", "blazer", "xiino")
WEBOS_MARKERS = ("webos", "hpwos")
SILK_MARKERS = ("silk-accelerated", "silk/")
LEGACY_MOBILE_MARKERS = ("midp", "wap", "up.browser", "up.link")


def _is_iphone(ua: str) -> bool:
    return "iphone" in ua and "ipad" not in ua and "ipod" not in ua


def _is_ipad(ua: str) -> bool:
    return "ipad" in ua and WEBKIT in ua


def _is_android(ua: str) -> bool:
    return "android" in ua or "googletv" in ua


def _is_android_phone(ua: str) -> bool:
    if not _is_android(ua):
        return False
    return MOBILE in ua or contains_any(ua, OPERA_MOBILE_MARKERS)


def _is_android_tablet(ua: str) -> bool:
    return _is_android(ua) and not _is_android_phone(ua)


def _is_s60_oss_browser(ua: str) -> bool:
    return WEBKIT in ua and ("series60" in ua or "symbian" in ua)


def _is_windows_mobile(ua: str) -> bool:
    if WINDOWS_PHONE in ua:
        return False
    if contains_any(ua, WINDOWS_MOBILE_MARKERS):
        return True
    return "ppc" in ua and "macintosh" not in ua


def _is_blackberry(ua: str) -> bool:
    return contains_any(ua, BLACKBERRY_MARKERS)


def _is_blackberry_tablet(ua: str) -> bool:
    return "playbook" in ua and "rim tablet" in ua


def _is_blackberry_webkit(ua: str) -> bool:
    return _is_blackberry(ua) and WEBKIT in ua


def _is_blackberry_touch(ua: str) -> bool:
    return _is_blackberry(ua) and contains_any(ua, BLACKBERRY_TOUCH_MARKERS)


def _is_blackberry_high(ua: str) -> bool:
    if _is_blackberry_webkit(ua) or not _is_blackberry(ua):
        return False
    return _is_blackberry_touch(ua) or contains_any(ua, BLACKBERRY_HIGH_MARKERS)


def _is_palm_webos(ua: str) -> bool:
    return contains_any(ua, WEBOS_MARKERS)


def _is_palm_os(ua: str) -> bool:
    return contains_any(ua, PALM_OS_MARKERS) and not _is_palm_webos(ua)


def _is_maemo_tablet(ua: str) -> bool:
    if "maemo" in ua:
        return True
    return (
        "linux" in ua
        and "tablet" in ua
        and not _is_palm_webos(ua)
        and not _is_android(ua)
    )


def _is_sony_mylo(ua: str) -> bool:
    return "sony" in ua and ("qtembedded" in ua or "mylocom2" in ua)


def _is_kindle(ua: str) -> bool:
    return "kindle" in ua and not _is_android(ua)


def _is_nintendo(ua: str) -> bool:
    return contains_any(ua, ("nintendo", "wii", "nitro"))


def _is_game_console(ua: str) -> bool:
    return "playstation" in ua or _is_nintendo(ua) or "xbox" in ua


def _is_tablet_tier(ua: str) -> bool:
    return (
        _is_ipad(ua)
        or _is_android_tablet(ua)
        or _is_blackberry_tablet(ua)
        or (_is_palm_webos(ua) and contains_any(ua, ("tablet", "touchpad")))
    )


def _is_smartphone(ua: str) -> bool:
    return (
        _is_iphone(ua)
        or "ipod" in ua
        or _is_android_phone(ua)
        or _is_s60_oss_browser(ua)
        or "symbian" in ua
        or WINDOWS_PHONE in ua
        or _is_windows_mobile(ua)
        or _is_blackberry(ua)
        or _is_palm_os(ua)
        or _is_palm_webos(ua)
        or _is_maemo_tablet(ua)
    )


def _is_mobile_quick(ua: str) -> bool:
    # Tablets are deliberately not counted as mobile phones.
    if _is_tablet_tier(ua):
        return False
    if _is_smartphone(ua) or MOBILE in ua:
        return True
    if contains_any(ua, OPERA_MOBILE_MARKERS + SILK_MARKERS + LEGACY_MOBILE_MARKERS):
        return True
    return (
        "kindle" in ua
        or "brew" in ua
        or "danger" in ua
        or "hiptop" in ua
        or "archos" in ua
        or "nuvifone" in ua
        or _is_sony_mylo(ua)
    )


FAMILY_RULES: dict[DeviceFamily, Callable[[str], bool]] = {
    DeviceFamily.IPHONE: _is_iphone,
    DeviceFamily.IPOD: lambda ua: "ipod" in ua,
    DeviceFamily.IPAD: _is_ipad,
    DeviceFamily.ANDROID_PHONE: _is_android_phone,
    DeviceFamily.ANDROID_TABLET: _is_android_tablet,
    DeviceFamily.S60_OSS_BROWSER: _is_s60_oss_browser,
    DeviceFamily.S60: lambda ua: "series60" in ua,
    DeviceFamily.S70: lambda ua: "series70" in ua,
    DeviceFamily.S80: lambda ua: "series80" in ua,
    DeviceFamily.S90: lambda ua: "series90" in ua,
    DeviceFamily.SYMBIAN: lambda ua: "symbian" in ua,
    DeviceFamily.WINDOWS_PHONE_7: lambda ua: "windows phone os 7" in ua,
    DeviceFamily.WINDOWS_PHONE_8: lambda ua: "windows phone 8" in ua,
    DeviceFamily.WINDOWS_PHONE_10: lambda ua: "windows phone 10" in ua,
    DeviceFamily.WINDOWS_MOBILE: _is_windows_mobile,
    DeviceFamily.BLACKBERRY_TABLET: _is_blackberry_tablet,
    DeviceFamily.BLACKBERRY_WEBKIT: _is_blackberry_webkit,
    DeviceFamily.BLACKBERRY_TOUCH: _is_blackberry_touch,
    DeviceFamily.BLACKBERRY_HIGH: _is_blackberry_high,
    DeviceFamily.BLACKBERRY: _is_blackberry,
    DeviceFamily.PALM_OS: _is_palm_os,
    DeviceFamily.PALM_WEBOS: _is_palm_webos,
    DeviceFamily.GARMIN_NUVIFONE: lambda ua: "nuvifone" in ua,
    DeviceFamily.ARCHOS: lambda ua: "archos" in ua,
    DeviceFamily.BREW: lambda ua: "brew" in ua,
    DeviceFamily.DANGER_HIPTOP: lambda ua: "danger" in ua or "hiptop" in ua,
    DeviceFamily.MAEMO_TABLET: _is_maemo_tablet,
    DeviceFamily.SONY_MYLO: _is_sony_mylo,
    DeviceFamily.AMAZON_SILK: lambda ua: contains_any(ua, SILK_MARKERS),
    DeviceFamily.KINDLE: _is_kindle,
    DeviceFamily.SONY_PLAYSTATION: lambda ua: "playstation" in ua,
    DeviceFamily.NINTENDO_DS: lambda ua: "nitro" in ua,
    DeviceFamily.NINTENDO_WII: lambda ua: "wii" in ua,
    DeviceFamily.NINTENDO: lambda ua: "nintendo" in ua,
    DeviceFamily.XBOX: lambda ua: "xbox" in ua,
    DeviceFamily.MOBILE_QUICK: _is_mobile_quick,
    DeviceFamily.GAME_CONSOLE: _is_game_console,
}


class MarkerSignatureLibrary:
    """Default signature tables based on lower-cased User-Agent markers."""

    def __init__(
        self,
        rules: dict[DeviceFamily, Callable[[str], bool]] | None = None,
    ):
        self._rules = dict(FAMILY_RULES if rules is None else rules)

    def matches(self, family: DeviceFamily, identity: str) -> bool:
        rule = self._rules.get(family)
        if rule is None:
            return False
        return rule(identity)


__all__ = (
    "FAMILY_RULES",
    "DeviceFamily",
    "MarkerSignatureLibrary",
    "SignatureLibrary",
    "contains_any",
    "normalize_identity",
)
