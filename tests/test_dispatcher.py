"""Tests for routing a frequency request to the right backend."""

from __future__ import annotations

import socket
import threading

import pytest

import dispatcher as dispatcher_module
import loghandler
from dispatcher import Dispatcher, find_profile, format_cat_command
from radio_interface import SelectionError, SendResult
from radio_profile import ConnectionType, RadioProfile
from radio_registry import build_senders
from radios.serial_cat import sender as serial_sender_module
from radios.tcp import sender as tcp_sender_module


class RecordingSender:
    def __init__(self, name: str):
        self.name = name
        self.calls = []

    def send(self, *args, **kwargs) -> SendResult:
        self.calls.append((args, kwargs))
        return SendResult.success(self.name, str(args[-1]))


@pytest.fixture
def senders():
    return {
        ConnectionType.TCP: RecordingSender("TCP"),
        ConnectionType.SERIAL: RecordingSender("Serial"),
        ConnectionType.RIGCTL: RecordingSender("rigctl"),
    }


PROFILES = [
    RadioProfile("TS-890S", ConnectionType.TCP, tcp_host="10.0.0.5", tcp_port="60000"),
    RadioProfile("FT-991A", ConnectionType.SERIAL, serial_port="/dev/ttyUSB0", baud_rate=38400),
    RadioProfile("Dummy", ConnectionType.RIGCTL, rigctl_freq="14074000", rigctl_model=2),
    RadioProfile("TS-890S", ConnectionType.SERIAL, serial_port="/dev/ttyUSB9", baud_rate=9600),
]


@pytest.mark.parametrize("freq", ["12345678", "", "abc", " 7.074 MHz", "-1"])
def test_cat_command_is_verbatim(freq: str) -> None:
    assert format_cat_command(freq) == "FA" + freq + ";"


def test_find_profile_takes_first_match() -> None:
    assert find_profile(PROFILES, "TS-890S") is PROFILES[0]
    assert find_profile(PROFILES, "nope") is None


def test_unknown_rig_invokes_no_backend(senders) -> None:
    result = Dispatcher(senders).dispatch(PROFILES, "IC-7300", "14074000")

    assert not result.ok
    assert isinstance(result.error, SelectionError)
    assert result.error.reason == SelectionError.UNKNOWN_RIG
    assert all(not s.calls for s in senders.values())


def test_missing_backend_is_unroutable(senders) -> None:
    del senders[ConnectionType.SERIAL]

    result = Dispatcher(senders).dispatch(PROFILES, "FT-991A", "7000000")

    assert not result.ok
    assert result.error.reason == SelectionError.UNROUTABLE
    assert all(not s.calls for s in senders.values())


def test_tcp_gets_formatted_command(senders) -> None:
    Dispatcher(senders).dispatch(PROFILES, "TS-890S", "14250000")

    assert senders[ConnectionType.TCP].calls == [(("10.0.0.5", "60000", "FA14250000;"), {})]


def test_serial_gets_formatted_command(senders) -> None:
    Dispatcher(senders).dispatch(PROFILES, "FT-991A", "")

    assert senders[ConnectionType.SERIAL].calls == [(("/dev/ttyUSB0", 38400, "FA;"), {})]


def test_rigctl_gets_raw_frequency_and_profile_model(senders) -> None:
    Dispatcher(senders).dispatch(PROFILES, "Dummy", "3573000")

    assert senders[ConnectionType.RIGCTL].calls == [(("3573000",), {"model": 2})]


def test_end_to_end_tcp_echo() -> None:
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server.bind(("127.0.0.1", 0))
    server.listen(1)
    port = server.getsockname()[1]
    received = []

    def _run() -> None:
        conn, _ = server.accept()
        try:
            received.append(conn.recv(1024))
            conn.sendall(b"OK\n")
        finally:
            conn.close()
            server.close()

    thread = threading.Thread(target=_run, daemon=True)
    thread.start()

    profiles = [RadioProfile("R1", ConnectionType.TCP, tcp_host="127.0.0.1", tcp_port=str(port))]
    dispatcher = Dispatcher(build_senders({"tcp": {"timeout": 2.0}, "rigctl": {"model": 1}}))

    result = dispatcher.dispatch(profiles, "R1", "14250000")

    thread.join(timeout=2)
    assert received == [b"FA14250000;\n"]
    assert result.ok
    assert result.response == "OK\n"


def test_modules_share_the_application_logger() -> None:
    Dispatcher(build_senders({"tcp": {"timeout": 1.0}, "rigctl": {"model": 1}}))

    app_logger = loghandler.get_logger()
    assert dispatcher_module.logger is app_logger
    assert tcp_sender_module.logger is app_logger
    assert serial_sender_module.logger is app_logger
