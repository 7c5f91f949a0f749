"""Electrical power drawn by a smart socket, in watts."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar

_NUMBER = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)",
    re.ASCII | re.IGNORECASE,
)


def _parse_number(text: str) -> float | None:
    if not _NUMBER.fullmatch(text):
        return None
    return float(text)


def _format_plain(value: float) -> str:
    """Shortest decimal form, without an exponent and without a trailing ``.0``."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


@dataclass
class Power:
    """A power reading in watts."""

    MIN_POWER: ClassVar[float] = 500.0
    MAX_POWER: ClassVar[float] = 2000.0
    GRADUATION: ClassVar[float] = 2.5

    value: float = 0.0

    def set(self, value: float) -> None:
        """Change the reading if ``value`` lies within the supported range."""
        if self.MIN_POWER <= value <= self.MAX_POWER:
            self.value = value

    @staticmethod
    def ratio(power: float) -> float:
        """Position of ``power`` within the supported range; 0 below the minimum."""
        if power >= Power.MIN_POWER:
            return (power - Power.MIN_POWER) / (Power.MAX_POWER - Power.MIN_POWER)
        return 0.0

    @classmethod
    def parse(cls, text: str) -> Power:
        """Parse an integer or decimal number of watts."""
        number = _parse_number(text)
        if number is None:
            raise ValueError("Can't parse power")
        return cls(number)

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        return _format_plain(self.value)