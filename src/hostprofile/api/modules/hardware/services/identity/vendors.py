import re

# Brand markers are matched against the raw, case-preserved User-Agent.
NOKIA_PATTERN = re.compile(r"(Maemo Browser)|(Symbian)|(Nokia)|(Lumia )")


def is_htc(ua: str) -> bool:
    return "HTC" in ua


def is_motorola(ua: str) -> bool:
    return "Motorola" in ua


def is_zune(ua: str) -> bool:
    return "ZuneWP7" in ua


def is_google_nexus_one(ua: str) -> bool:
    return "Nexus One" in ua


def is_ericsson(ua: str) -> bool:
    return "Ericsson" in ua


def is_nokia(ua: str) -> bool:
    return NOKIA_PATTERN.search(ua) is not None


__all__ = (
    "is_ericsson",
    "is_google_nexus_one",
    "is_htc",
    "is_motorola",
    "is_nokia",
    "is_zune",
)
