import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Sentinel every profile field falls back to when its signal is missing.
UNKNOWN = "unknown"


class CapabilityUnavailable(LookupError):
    """Raised by a host when it does not expose the requested capability."""


@dataclass(frozen=True, slots=True)
class Probe(Generic[T]):
    """Outcome of reading one host capability.

    Either ``value`` is set, or ``reason`` explains why the capability could
    not be read. Callers never see the exception that caused it.
    """

    name: str
    value: T | None = None
    reason: str | None = None

    @property
    def available(self) -> bool:
        return self.reason is None and self.value is not None

    def get(self, default: T | None = None) -> T | None:
        return self.value if self.available else default


def probe(name: str, read: Callable[[], T | None]) -> Probe[T]:
    try:
        value = read()
    except CapabilityUnavailable:
        return unavailable(name, "not exposed")
    except Exception as exc:  # noqa: BLE001
        return unavailable(name, f"{type(exc).__name__}: {exc}")

    if value is None:
        return unavailable(name, "empty")
    return Probe(name=name, value=value)


def unavailable(name: str, reason: str) -> Probe:
    logger.debug("Capability %s unavailable: %s", name, reason)
    return Probe(name=name, reason=reason)


def as_int(value: object) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def as_number(value: object) -> int | float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def as_text(value: object) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


__all__ = (
    "UNKNOWN",
    "CapabilityUnavailable",
    "Probe",
    "as_int",
    "as_number",
    "as_text",
    "probe",
    "unavailable",
)
