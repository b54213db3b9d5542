import logging

from hostprofile.api.modules.hardware.schema import HardwareReport
from hostprofile.api.modules.hardware.services.classifiers import (
    classify_battery,
    classify_cpu,
    classify_gpu,
    classify_memory,
    classify_screen,
    is_touch_enabled,
)
from hostprofile.api.modules.hardware.services.identity import DeviceIdentityResolver
from hostprofile.api.modules.hardware.services.signals import (
    BrowserHost,
    RawSignals,
    SignalCollector,
)

logger = logging.getLogger(__name__)


class FingerprintAssembler:
    """Builds one hardware report per host.

    Missing signals come back as ``"unknown"`` fields. Only a fault outside
    the capability probes can make ``assemble`` raise.
    """

    def __init__(
        self,
        collector: SignalCollector,
        resolver: DeviceIdentityResolver,
    ):
        self._collector = collector
        self._resolver = resolver

    async def assemble(self, host: BrowserHost) -> HardwareReport:
        signals = await self._collector.collect(host)
        return self.build_report(signals)

    def build_report(self, signals: RawSignals) -> HardwareReport:
        cpu = classify_cpu(signals)
        gpu = classify_gpu(signals)
        battery = classify_battery(signals)
        screen = classify_screen(signals)
        identity = self._resolver.resolve(signals, gpu=gpu, screen=screen)

        logger.debug(
            "Resolved device %r (mobile=%s, vm=%s, laptop=%s)",
            identity.name,
            identity.is_mobile,
            identity.is_virtual_machine,
            identity.is_laptop,
        )

        return HardwareReport(
            arch=cpu.arch,
            cores=cpu.cores,
            gpu=gpu.renderer,
            vendor=gpu.vendor,
            memory=classify_memory(signals),
            charging_status=battery.charging_status,
            battery_level=battery.battery_level,
            charging_time=battery.charging_time,
            discharging_time=battery.discharging_time,
            width=screen.width,
            height=screen.height,
            colordepth=screen.color_depth,
            is_touch_enabled=is_touch_enabled(signals),
            is_virtual_machine=identity.is_virtual_machine,
            is_laptop=identity.is_laptop,
            is_mobile_device=identity.is_mobile,
            is_game_console=identity.is_game_console,
            name=identity.name,
        )


__all__ = ("FingerprintAssembler",)
