"""Smart socket reading and its text message form."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from smartdevices.power import Power
from smartdevices.state import DeviceState

_MESSAGE = re.compile(r"Socket\s+(\d+((\.\d)*)?)W\s+State:\s+(on|off)")


@dataclass
class Socket:
    """Power drawn through a smart socket together with its on/off state."""

    power: Power = field(default_factory=Power)
    state: DeviceState = field(default_factory=DeviceState)

    @classmethod
    def parse(cls, text: str) -> Socket:
        """Parse a message such as ``"Socket 1500W State: on"``.

        A power figure that matches the message shape but is not a number
        falls back to zero watts.
        """
        match = _MESSAGE.match(text)
        if match is None:
            raise ValueError("does not look like message from socket")
        try:
            power = Power.parse(match.group(1))
        except ValueError:
            power = Power()
        return cls(power, DeviceState.parse(match.group(4)))

    def __str__(self) -> str:
        return f"Socket {self.power}W State: {self.state}"