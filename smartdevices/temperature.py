"""Temperature reported by a thermometer, in degrees Celsius."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import ClassVar

_NUMBER = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)",
    re.ASCII | re.IGNORECASE,
)


@dataclass
class Temperature:
    """A temperature reading in degrees Celsius."""

    MIN_TEMPERATURE: ClassVar[float] = 0.0
    MAX_TEMPERATURE: ClassVar[float] = 100.0
    GRADUATION: ClassVar[float] = 0.5

    value: float = 0.0

    def set(self, value: float) -> None:
        """Change the reading if ``value`` lies within the supported range."""
        if self.MIN_TEMPERATURE <= value <= self.MAX_TEMPERATURE:
            self.value = value

    @staticmethod
    def ratio(temperature: float) -> float:
        """Position of ``temperature`` within the supported range."""
        return (temperature - Temperature.MIN_TEMPERATURE) / (
            Temperature.MAX_TEMPERATURE - Temperature.MIN_TEMPERATURE
        )

    @classmethod
    def parse(cls, text: str) -> Temperature:
        """Parse an integer or decimal number of degrees."""
        if not _NUMBER.fullmatch(text):
            raise ValueError("Can't parse temperature")
        return cls(float(text))

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        if math.isnan(self.value):
            return "NaN"
        if math.isinf(self.value):
            return "inf" if self.value > 0 else "-inf"
        return f"{self.value:.3f}"