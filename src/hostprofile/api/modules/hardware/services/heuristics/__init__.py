from hostprofile.api.modules.hardware.services.heuristics.environment import (
    detect_laptop,
    detect_virtual_machine,
)

__all__ = ("detect_laptop", "detect_virtual_machine")
