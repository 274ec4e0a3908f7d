import os
import signal
import struct
from unittest import mock

import pytest

from pingtool.packet import build_packet, calculate_checksum
from pingtool.params import Params
from pingtool.runner import PingError, handle_response, main, open_socket, run_ping, send_ping

IP_HEADER = b"\x45" + bytes(19)


def _reply_to(packet):
    reply = bytearray(packet)
    reply[0] = 0
    reply[2:4] = b"\x00\x00"
    reply[2:4] = struct.pack("!H", calculate_checksum(bytes(reply)))
    return IP_HEADER + bytes(reply)


class FakeSocket:
    def __init__(self, replies=(), echo=False, stop_after_send=False, fail_send=False):
        self.replies = list(replies)
        self.echo = echo
        self.stop_after_send = stop_after_send
        self.fail_send = fail_send
        self.sent = []
        self.closed = False

    def setsockopt(self, *args):
        pass

    def settimeout(self, value):
        self.timeout = value

    def sendto(self, data, address):
        if self.fail_send:
            raise OSError("network down")
        self.sent.append((data, address))
        if self.stop_after_send:
            signal.raise_signal(signal.SIGINT)
        return len(data)

    def recv(self, size):
        if self.echo:
            return _reply_to(self.sent[-1][0])
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


def test_send_ping_sends_echo_request():
    sock = FakeSocket()
    send_ping(sock, "192.0.2.1", 5, 42)
    assert sock.sent == [(build_packet(5, 42), ("192.0.2.1", 0))]


def test_send_failure_raises():
    with pytest.raises(PingError):
        send_ping(FakeSocket(fail_send=True), "192.0.2.1", 1, 1)


def test_handle_valid_response():
    sock = FakeSocket([_reply_to(build_packet(2, 42))])
    assert handle_response(sock, 2, 42) is True


def test_handle_wrong_response():
    sock = FakeSocket([_reply_to(build_packet(2, 42))])
    assert handle_response(sock, 3, 42) is False


def test_handle_timeout(capsys):
    sock = FakeSocket([TimeoutError("timed out")])
    assert handle_response(sock, 1, 1) is False
    assert "Ping timeout" in capsys.readouterr().err


def test_handle_too_short(capsys):
    assert handle_response(FakeSocket([b"\x00"]), 1, 1) is False
    assert "Ping timeout" in capsys.readouterr().err


def test_open_socket_failure():
    with mock.patch("pingtool.runner.socket.socket", side_effect=PermissionError):
        with pytest.raises(PingError, match="socket not created"):
            open_socket()


def test_open_socket_sets_timeout():
    fake = FakeSocket()
    with mock.patch("pingtool.runner.socket.socket", return_value=fake):
        assert open_socket() is fake
    assert fake.timeout == 1.0


def test_run_ping_until_interrupted(capsys):
    fake = FakeSocket(echo=True, stop_after_send=True)
    params = Params(target="192.0.2.1", host="example.com", ip="192.0.2.1")
    before = signal.getsignal(signal.SIGINT)
    with mock.patch("pingtool.runner.socket.socket", return_value=fake), mock.patch(
        "pingtool.runner.time.sleep"
    ):
        stats = run_ping(params)
    out = capsys.readouterr().out
    assert (stats.count, stats.success_count) == (1, 1)
    assert fake.sent[0][0] == build_packet(1, os.getpid() & 0xFFFF)
    assert "icmp_seq=1, ttl=64" in out
    assert "1 packets transmitted, 1 received" in out
    assert fake.closed is True
    assert signal.getsignal(signal.SIGINT) is before


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert "Usage: ping [-v] host/ip" in capsys.readouterr().out


def test_main_with_bad_address(capsys):
    assert main(["1.2.3.abc"]) == 1
    assert "wrong format" in capsys.readouterr().err