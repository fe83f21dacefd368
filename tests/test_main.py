"""Tests for the command-line front end."""

from __future__ import annotations

import json
import socket
import threading

import pytest

import main
from profile_store import load_profiles


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    monkeypatch.setenv("NO_ANSI", "1")
    settings = tmp_path / "settings.yml"
    radios = tmp_path / "radios.json"
    settings.write_text(
        f"radios_file: {radios}\nlogging:\n  log_dir: {tmp_path / 'logs'}\ntcp:\n  timeout: 2\n",
        encoding="utf-8",
    )
    radios.write_text(json.dumps({"radios": [
        {"rig_id": "R1", "conn_type": "TCP", "tcp_host": "127.0.0.1", "tcp_port": "9"},
    ]}), encoding="utf-8")
    return settings, radios


def _run(settings, *args) -> int:
    return main.main(["--settings", str(settings), "--no-banner", *args])


def test_list_prints_profiles(workspace, capsys) -> None:
    settings, _ = workspace

    assert _run(settings, "list") == 0
    out = capsys.readouterr().out
    assert "R1 [TCP] 127.0.0.1:9" in out
    assert "CAT command over a TCP socket" in out


def test_add_appends_and_saves(workspace, capsys) -> None:
    settings, radios = workspace

    rc = _run(settings, "add", "--rig-id", "FT-991A", "--type", "Serial",
              "--serial-port", "/dev/ttyUSB0", "--baud", "38400")

    assert rc == 0
    assert [p.rig_id for p in load_profiles(str(radios))] == ["R1", "FT-991A"]
    assert "Settings saved successfully" in capsys.readouterr().out


def test_add_with_unknown_type_fails(workspace) -> None:
    settings, radios = workspace

    assert _run(settings, "add", "--rig-id", "X", "--type", "morse") == 1
    assert len(load_profiles(str(radios))) == 1


def test_set_unknown_rig_exits_one(workspace, capsys) -> None:
    settings, _ = workspace

    assert _run(settings, "set", "NOPE", "14074000") == 1
    assert "FAILED" in capsys.readouterr().out


def test_set_over_tcp(workspace, capsys) -> None:
    settings, radios = workspace
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server.bind(("127.0.0.1", 0))
    server.listen(1)
    port = server.getsockname()[1]
    radios.write_text(json.dumps({"radios": [
        {"rig_id": "R1", "conn_type": "TCP", "tcp_host": "127.0.0.1", "tcp_port": str(port)},
    ]}), encoding="utf-8")
    received = []

    def _serve() -> None:
        conn, _ = server.accept()
        try:
            received.append(conn.recv(1024))
            conn.sendall(b"OK\n")
        finally:
            conn.close()
            server.close()

    thread = threading.Thread(target=_serve, daemon=True)
    thread.start()

    rc = _run(settings, "set", "R1", "14250000")

    thread.join(timeout=2)
    assert rc == 0
    assert received == [b"FA14250000;\n"]
    assert "OK | TCP: sent 'FA14250000;' -> OK" in capsys.readouterr().out


def test_missing_radios_file_is_fatal(workspace) -> None:
    settings, radios = workspace
    radios.unlink()

    assert _run(settings, "list") == 1


def test_no_command_prints_help(workspace, capsys) -> None:
    settings, _ = workspace

    assert _run(settings) == 2
    assert "usage" in capsys.readouterr().out


def test_clear_logs_removes_old_log_files(workspace, tmp_path) -> None:
    settings, _ = workspace
    log_dir = tmp_path / "logs"
    log_dir.mkdir()
    (log_dir / "radio-console_20240101_000000.log").write_text("old", encoding="utf-8")
    (log_dir / "keep.txt").write_text("keep", encoding="utf-8")

    assert main.main(["--settings", str(settings), "--clear-logs"]) == 0
    assert sorted(p.name for p in log_dir.iterdir()) == ["keep.txt"]
