"""Interactive device simulators that report their readings to the dashboard."""

from __future__ import annotations

import argparse
import socket
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, ClassVar

from smartdevices.power import Power
from smartdevices.socket_device import Socket
from smartdevices.state import DeviceState
from smartdevices.temperature import Temperature
from smartdevices.termometer import Termometer

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 8080

LABEL_ON = "Включено"
LABEL_OFF = "Выключено"


def send_message(text: str, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
    """Open a connection, send ``text`` and close it."""
    with socket.create_connection((host, port)) as connection:
        connection.sendall(text.encode("utf-8"))


@dataclass
class DeviceController(ABC):
    """A simulated device with a power switch and a value slider."""

    TITLE: ClassVar[str]
    MIN_VALUE: ClassVar[float]
    MAX_VALUE: ClassVar[float]
    STEP: ClassVar[float]
    DISPLAY_FORMAT: ClassVar[str]

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    state: bool = False
    value: float = 0.0
    transport: Callable[[str, str, int], None] = field(default=send_message)

    def toggle_power(self) -> None:
        """Flip the power switch; switching off zeroes the value."""
        self.state = not self.state
        if not self.state:
            self.value = 0.0
        self.notify()

    def slider_changed(self, value: float) -> None:
        """Move the slider; the value only changes while the device is on."""
        if self.state:
            self.value = self._snap(value)
        self.notify()

    def _snap(self, value: float) -> float:
        clamped = min(max(value, self.MIN_VALUE), self.MAX_VALUE)
        steps = round((clamped - self.MIN_VALUE) / self.STEP)
        return min(self.MIN_VALUE + steps * self.STEP, self.MAX_VALUE)

    @abstractmethod
    def message(self) -> str:
        """The text message describing the current reading."""

    def display(self) -> str:
        """Title, current value and switch label, one per line."""
        button = LABEL_ON if self.state else LABEL_OFF
        return "\n".join(
            [self.TITLE, self.DISPLAY_FORMAT.format(self.value), f"[{button}]"]
        )

    def notify(self) -> None:
        """Report the current reading to the dashboard."""
        self.transport(self.message(), self.host, self.port)


@dataclass
class SocketController(DeviceController):
    """A simulated smart socket."""

    TITLE: ClassVar[str] = "Розетка"
    MIN_VALUE: ClassVar[float] = Power.MIN_POWER
    MAX_VALUE: ClassVar[float] = Power.MAX_POWER
    STEP: ClassVar[float] = Power.GRADUATION
    DISPLAY_FORMAT: ClassVar[str] = "Текущая мощность: {:.1f} Вт"

    def message(self) -> str:
        return str(Socket(Power(self.value), DeviceState(self.state)))


@dataclass
class ThermometerController(DeviceController):
    """A simulated thermometer."""

    TITLE: ClassVar[str] = "Термометр"
    MIN_VALUE: ClassVar[float] = Temperature.MIN_TEMPERATURE
    MAX_VALUE: ClassVar[float] = Temperature.MAX_TEMPERATURE
    STEP: ClassVar[float] = Temperature.GRADUATION
    DISPLAY_FORMAT: ClassVar[str] = "Текущая температура: {:.1f} С"

    def message(self) -> str:
        return str(Termometer(Temperature(self.value), DeviceState(self.state)))


_CONTROLLERS: dict[str, type[DeviceController]] = {
    "socket": SocketController,
    "termo": ThermometerController,
}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Simulate a device. Commands: 'toggle', a number, 'quit'."
    )
    parser.add_argument("device", nargs="?", choices=sorted(_CONTROLLERS), default="socket")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)

    controller = _CONTROLLERS[args.device](host=args.host, port=args.port)
    print(controller.display())
    for line in sys.stdin:
        command = line.strip().lower()
        if not command:
            continue
        if command in ("q", "quit"):
            break
        try:
            if command in ("t", "toggle"):
                controller.toggle_power()
            else:
                controller.slider_changed(float(command))
        except ValueError:
            print(f"unknown command: {command}", file=sys.stderr)
            continue
        except OSError:
            print("Unable to connect", file=sys.stderr)
            return 1
        print(controller.display())
    return 0