# smartdevices

Two simulated smart-home devices and a dashboard server that listens for their readings.

- A **socket** reports the power it draws, in watts. Its slider runs from 500 to 2000 W in steps of 2.5 W.
- A **thermometer** reports a temperature, in degrees Celsius. Its slider runs from 0 to 100 °C in steps of 0.5 °C.

Each device opens a TCP connection (by default to `localhost:8080`), sends one message and closes the connection. Messages look like this:

```
Socket 1500W State: on
Termometer 21.500C State: off
```

## Installation

```
pip install .
```

## Running

Start the dashboard server:

```
smartdevices-server [--host HOST] [--port PORT]
```

It prints the dashboard once at start and again after every message it accepts. The dashboard shows, for the socket and the thermometer side by side, whether the device is online and the value it last reported (`N/A` while it is offline). A connection whose first 128 bytes are not a device message makes the server print `Nothing happened`.

From another terminal, drive a device:

```
smartdevices-client [socket|termo] [--host HOST] [--port PORT]
```

The device defaults to `socket`. The client reads commands from standard input, one per line:

- `toggle` (or `t`) switches the device on or off. Switching it off resets its value to zero.
- a number moves the slider. The value is clamped to the device's range and rounded to its step, and only changes while the device is on.
- `quit` (or `q`) ends the client.

After every command the current reading is sent to the server and the client prints the device's title, value and switch label. If the server cannot be reached, the client prints `Unable to connect` and exits with status 1.

## Library use

The devices and their message formats can be used on their own:

```python
from smartdevices.socket_device import Socket
from smartdevices.termometer import Termometer

socket = Socket.parse("Socket 21.5W State: off")
thermo = Termometer.parse("Termometer 21C State: on")

float(socket.power)       # 21.5
bool(thermo.state)        # True
str(thermo)               # "Termometer 21.000C State: on"
```

`parse` raises `ValueError` when the text does not look like a message from that device. `str()` on a device gives back its message form.

Other pieces:

- `smartdevices.power.Power` and `smartdevices.temperature.Temperature` hold a reading; `set` only accepts values within the range, `ratio` gives a value's position within it, and `parse` reads a number.
- `smartdevices.state.DeviceState` holds the on/off state; `parse("on")` is on and any other text is off.
- `smartdevices.server` has `Dashboard` (with `apply` and `render`), `parse_reading`, `handle_connection` and the coroutine `run_server`.
- `smartdevices.clients` has `SocketController`, `ThermometerController` and `send_message`. A controller takes a `transport` callable, so it can be driven without a network.

## What it does not do

There is no graphical window: the dashboard and the devices are shown as plain text in the terminal. The server keeps only the latest reading of each device in memory and stores nothing.

## Tests

```
pip install .[test]
pytest
```