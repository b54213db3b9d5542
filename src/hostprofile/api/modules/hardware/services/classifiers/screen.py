from dataclasses import dataclass
from typing import Literal

from hostprofile.api.modules.hardware.services.signals import RawSignals
from hostprofile.api.modules.hardware.services.signals.probe import UNKNOWN

Dimension = int | Literal["unknown"]


@dataclass(frozen=True, slots=True)
class ScreenProfile:
    width: Dimension
    height: Dimension
    color_depth: Dimension

    def matches(self, width: int, height: int) -> bool:
        return self.width == width and self.height == height

    def has_odd_dimension(self) -> bool:
        return any(
            isinstance(value, int) and value % 2 == 1
            for value in (self.width, self.height)
        )


def _or_unknown(value: int | None) -> Dimension:
    return UNKNOWN if value is None else value


def classify_screen(signals: RawSignals) -> ScreenProfile:
    return ScreenProfile(
        width=_or_unknown(signals.screen_width),
        height=_or_unknown(signals.screen_height),
        color_depth=_or_unknown(signals.screen_color_depth),
    )


def is_touch_enabled(signals: RawSignals) -> bool:
    return signals.touch_capable


__all__ = ("ScreenProfile", "classify_screen", "is_touch_enabled")
