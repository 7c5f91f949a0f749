"""On/off state reported by a smart device."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DeviceState:
    """Whether a device is switched on."""

    on: bool = False

    @classmethod
    def parse(cls, text: str) -> DeviceState:
        """Read ``"on"`` as switched on; any other text means off."""
        return cls(text == "on")

    def __bool__(self) -> bool:
        return self.on

    def __str__(self) -> str:
        return "on" if self.on else "off"