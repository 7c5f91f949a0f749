"""Thermometer reading and its text message form."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from smartdevices.state import DeviceState
from smartdevices.temperature import Temperature

_MESSAGE = re.compile(r"Termometer(\s)+(\d+((\.\d+)*)?)C\s+State:\s+(on|off)")


@dataclass
class Termometer:
    """Temperature measured by a thermometer together with its on/off state."""

    temperature: Temperature = field(default_factory=Temperature)
    state: DeviceState = field(default_factory=DeviceState)

    @classmethod
    def parse(cls, text: str) -> Termometer:
        """Parse a message such as ``"Termometer 21.500C State: on"``.

        A temperature that matches the message shape but is not a number
        falls back to zero degrees.
        """
        match = _MESSAGE.match(text)
        if match is None:
            raise ValueError("does not look like message from termometer")
        try:
            temperature = Temperature.parse(match.group(2))
        except ValueError:
            temperature = Temperature()
        return cls(temperature, DeviceState.parse(match.group(5)))

    def __str__(self) -> str:
        return f"Termometer {self.temperature}C State: {self.state}"