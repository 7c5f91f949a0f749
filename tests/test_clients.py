import io
import socket as pysocket

import pytest

from smartdevices.clients import (
    LABEL_OFF,
    LABEL_ON,
    SocketController,
    ThermometerController,
    main,
    send_message,
)
from smartdevices.power import Power
from smartdevices.socket_device import Socket
from smartdevices.temperature import Temperature
from smartdevices.termometer import Termometer


def _recorder():
    sent = []

    def transport(text, host, port):
        sent.append((text, host, port))

    return sent, transport


@pytest.fixture
def listener():
    sock = pysocket.socket()
    sock.bind(("127.0.0.1", 0))
    sock.listen(8)
    sock.settimeout(5)
    yield sock
    sock.close()


def _recv_all(listener):
    conn, _ = listener.accept()
    with conn:
        conn.settimeout(5)
        chunks = []
        while True:
            chunk = conn.recv(1024)
            if not chunk:
                break
            chunks.append(chunk)
    return b"".join(chunks).decode("utf-8")


def _closed_port():
    with pysocket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def test_toggle_power_switches_and_notifies():
    sent, transport = _recorder()
    controller = SocketController(transport=transport)
    controller.toggle_power()
    assert controller.state is True
    assert len(sent) == 1
    assert Socket.parse(sent[0][0]).state.on is True
    assert sent[0][1:] == ("localhost", 8080)


def test_switching_off_zeroes_value():
    sent, transport = _recorder()
    controller = ThermometerController(transport=transport)
    controller.toggle_power()
    controller.slider_changed(40.0)
    controller.toggle_power()
    assert controller.state is False
    assert controller.value == 0.0
    reading = Termometer.parse(sent[-1][0])
    assert reading.state.on is False
    assert reading.temperature.value == 0.0


def test_slider_ignored_while_off():
    sent, transport = _recorder()
    controller = SocketController(transport=transport)
    controller.slider_changed(1500.0)
    assert controller.value == 0.0
    assert len(sent) == 1


def test_slider_sets_value_while_on():
    sent, transport = _recorder()
    controller = SocketController(transport=transport)
    controller.toggle_power()
    controller.slider_changed(1500.0)
    assert controller.value == 1500.0
    reading = Socket.parse(sent[-1][0])
    assert reading.power.value == 1500.0
    assert reading.state.on is True


def test_slider_stays_in_range_and_on_steps():
    _, transport = _recorder()
    controller = ThermometerController(transport=transport)
    controller.toggle_power()
    controller.slider_changed(150.0)
    assert controller.value == Temperature.MAX_TEMPERATURE
    controller.slider_changed(-5.0)
    assert controller.value == Temperature.MIN_TEMPERATURE
    controller.slider_changed(33.3)
    assert controller.value % Temperature.GRADUATION == 0
    assert abs(controller.value - 33.3) <= Temperature.GRADUATION / 2


def test_socket_slider_respects_power_range():
    _, transport = _recorder()
    controller = SocketController(transport=transport)
    controller.toggle_power()
    controller.slider_changed(10.0)
    assert controller.value == Power.MIN_POWER
    controller.slider_changed(5000.0)
    assert controller.value == Power.MAX_POWER


def test_display_shows_switch_state():
    _, transport = _recorder()
    controller = SocketController(transport=transport)
    lines = controller.display().splitlines()
    assert lines[0] == "Розетка"
    assert lines[2] == f"[{LABEL_OFF}]"
    controller.toggle_power()
    assert controller.display().splitlines()[2] == f"[{LABEL_ON}]"


def test_notify_sends_over_tcp(listener):
    port = listener.getsockname()[1]
    controller = ThermometerController(host="127.0.0.1", port=port)
    controller.notify()
    text = _recv_all(listener)
    assert text == controller.message()
    assert Termometer.parse(text).state.on is False


def test_send_message_delivers_text(listener):
    port = listener.getsockname()[1]
    send_message("Socket 1500W State: on", "127.0.0.1", port)
    received = _recv_all(listener)
    assert received == "Socket 1500W State: on"
    reading = Socket.parse(received)
    assert reading.power.value == 1500.0
    assert reading.state.on is True


def test_send_message_without_server_raises():
    with pytest.raises(OSError):
        send_message("Socket 1500W State: on", "127.0.0.1", _closed_port())


def test_main_sends_commands(listener, monkeypatch):
    port = listener.getsockname()[1]
    monkeypatch.setattr("sys.stdin", io.StringIO("toggle\n25\nbogus\nquit\n"))
    code = main(["termo", "--host", "127.0.0.1", "--port", str(port)])
    assert code == 0
    first = Termometer.parse(_recv_all(listener))
    second = Termometer.parse(_recv_all(listener))
    assert first.state.on is True
    assert second.temperature.value == 25.0


def test_main_reports_connection_failure(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("toggle\n"))
    code = main(["socket", "--host", "127.0.0.1", "--port", str(_closed_port())])
    assert code == 1