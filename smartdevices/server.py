"""Dashboard server that collects readings sent by smart devices over TCP."""

from __future__ import annotations

import argparse
import asyncio
from dataclasses import dataclass, field
from typing import Union

from smartdevices.socket_device import Socket
from smartdevices.termometer import Termometer

STATUS_OFFLINE = "Статуc: Offline"
STATUS_ONLINE = "Статуc: Online"
VALUE_NA = "N/A"

TEMPERATURE_FORMAT = "Текущая температура: {:.1f} C"
POWER_FORMAT = "Текущая мощность: {:.1f} Вт"

SOCKET_LABEL = "Розетка"
TERMOMETER_LABEL = "Термометр"

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 8080

_READ_LIMIT = 128

Reading = Union[Socket, Termometer]


@dataclass
class DeviceWidget:
    """Displayed status and value of one device."""

    value_format: str
    state: bool = False
    value: float = 0.0

    def status(self) -> str:
        """Online or offline status line."""
        return STATUS_ONLINE if self.state else STATUS_OFFLINE

    def value_text(self) -> str:
        """Formatted current value, or ``N/A`` while the device is offline."""
        return self.value_format.format(self.value) if self.state else VALUE_NA


@dataclass
class Dashboard:
    """Latest known state of the socket and the thermometer."""

    termo_widget: DeviceWidget = field(
        default_factory=lambda: DeviceWidget(TEMPERATURE_FORMAT)
    )
    socket_widget: DeviceWidget = field(
        default_factory=lambda: DeviceWidget(POWER_FORMAT)
    )

    def termometer_online(self, termometer: Termometer) -> None:
        self.termo_widget.state = True
        self.termo_widget.value = float(termometer.temperature)

    def termometer_offline(self) -> None:
        self.termo_widget.state = False
        self.termo_widget.value = 0.0

    def socket_online(self, socket: Socket) -> None:
        self.socket_widget.state = True
        self.socket_widget.value = float(socket.power)

    def socket_offline(self) -> None:
        self.socket_widget.state = False
        self.socket_widget.value = 0.0

    def apply(self, reading: Reading) -> None:
        """Update the matching widget from a device reading."""
        if isinstance(reading, Socket):
            if reading.state:
                self.socket_online(reading)
            else:
                self.socket_offline()
        elif isinstance(reading, Termometer):
            if reading.state:
                self.termometer_online(reading)
            else:
                self.termometer_offline()
        else:
            raise TypeError(f"unsupported reading: {reading!r}")

    def render(self) -> str:
        """Both devices side by side as plain text."""
        left = [
            SOCKET_LABEL,
            self.socket_widget.status(),
            self.socket_widget.value_text(),
        ]
        right = [
            TERMOMETER_LABEL,
            self.termo_widget.status(),
            self.termo_widget.value_text(),
        ]
        width = max(len(line) for line in left) + 4
        return "\n".join(
            f"{lhs.ljust(width)}{rhs}" for lhs, rhs in zip(left, right)
        )


def parse_reading(text: str) -> Reading | None:
    """Interpret a device message, or return ``None`` if it is not one."""
    for kind in (Termometer, Socket):
        try:
            return kind.parse(text)
        except ValueError:
            continue
    return None


async def handle_connection(
    reader: asyncio.StreamReader,
    writer: asyncio.StreamWriter,
    dashboard: Dashboard,
) -> Reading | None:
    """Read one message from a device connection and apply it to the dashboard."""
    try:
        data = await reader.read(_READ_LIMIT)
        reading = parse_reading(data.decode("utf-8", errors="replace"))
        if reading is not None:
            dashboard.apply(reading)
        return reading
    finally:
        writer.close()
        await writer.wait_closed()


async def run_server(
    dashboard: Dashboard, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT
) -> None:
    """Accept device connections forever, printing the dashboard after each update."""

    async def on_connection(
        reader: asyncio.StreamReader, writer: asyncio.StreamWriter
    ) -> None:
        reading = await handle_connection(reader, writer, dashboard)
        if reading is None:
            print("Nothing happened", flush=True)
        else:
            print(dashboard.render(), flush=True)

    server = await asyncio.start_server(on_connection, host, port)
    print(dashboard.render(), flush=True)
    async with server:
        await server.serve_forever()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Show readings sent by smart devices.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    try:
        asyncio.run(run_server(Dashboard(), args.host, args.port))
    except KeyboardInterrupt:
        pass
    return 0