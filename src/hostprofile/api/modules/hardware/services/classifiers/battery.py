import math
from dataclasses import dataclass
from typing import Literal

from hostprofile.api.modules.hardware.services.signals import RawSignals
from hostprofile.api.modules.hardware.services.signals.probe import UNKNOWN

INFINITE_TIME = "Infinity"

BatteryTime = int | float | str


@dataclass(frozen=True, slots=True)
class BatteryProfile:
    charging_status: bool | Literal["unknown"]
    battery_level: str
    charging_time: BatteryTime
    discharging_time: BatteryTime


UNKNOWN_BATTERY = BatteryProfile(
    charging_status=UNKNOWN,
    battery_level=UNKNOWN,
    charging_time=UNKNOWN,
    discharging_time=UNKNOWN,
)


def format_level(level: float) -> str:
    return f"{level * 100:g}%"


def format_time(seconds: float | None) -> BatteryTime:
    if seconds is None or math.isnan(seconds):
        return UNKNOWN
    if math.isinf(seconds):
        return INFINITE_TIME
    if float(seconds).is_integer():
        return int(seconds)
    return seconds


def classify_battery(signals: RawSignals) -> BatteryProfile:
    battery = signals.battery
    if battery is None:
        return UNKNOWN_BATTERY
    return BatteryProfile(
        charging_status=battery.charging,
        battery_level=format_level(battery.level),
        charging_time=format_time(battery.charging_time),
        discharging_time=format_time(battery.discharging_time),
    )


__all__ = (
    "INFINITE_TIME",
    "UNKNOWN_BATTERY",
    "BatteryProfile",
    "classify_battery",
    "format_level",
    "format_time",
)
