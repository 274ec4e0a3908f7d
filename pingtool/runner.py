"""The ping loop and its command-line entry point."""

from __future__ import annotations

import os
import signal
import socket
import sys
import time

from .display import format_ping_message, format_stats, format_unreachable
from .packet import build_packet, check_response
from .params import Params, ResolutionError, parse_params
from .stats import Stats, subtract_time

PING_RATE = 1.0
RECV_TIMEOUT = 1.0
BUFF_SIZE = 1000
TTL = 64


class PingError(Exception):
    """The socket could not be set up or used."""


def open_socket() -> socket.socket:
    """Open a raw ICMP socket with the TTL and receive timeout set."""
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_RAW, socket.IPPROTO_ICMP)
    except OSError as exc:
        raise PingError("socket not created") from exc
    try:
        sock.setsockopt(socket.IPPROTO_IP, socket.IP_TTL, TTL)
    except OSError as exc:
        sock.close()
        raise PingError("impossible to set ttl for socket") from exc
    sock.settimeout(RECV_TIMEOUT)
    return sock


def send_ping(sock: socket.socket, address: str, seq: int, ident: int) -> None:
    """Send echo request ``seq`` to ``address``."""
    try:
        sock.sendto(build_packet(seq, ident), (address, 0))
    except OSError as exc:
        raise PingError("failed to send packet") from exc


def handle_response(sock: socket.socket, seq: int, ident: int) -> bool:
    """Wait for the reply to request ``seq`` and tell whether it is valid."""
    try:
        data = sock.recv(BUFF_SIZE)
    except OSError:
        data = b""
    if len(data) > 1:
        return check_response(data, seq, ident)
    print("Ping timeout", file=sys.stderr)
    return False


def run_ping(params: Params) -> Stats:
    """Ping until interrupted, print the summary and return the statistics."""
    stats = Stats()
    running = True

    def _stop(signum, frame):
        nonlocal running
        running = False

    ident = os.getpid() & 0xFFFF
    elapsed = 0
    with open_socket() as sock:
        previous = signal.signal(signal.SIGINT, _stop)
        try:
            stats.start = time.time_ns()
            seq = 1
            while running:
                time.sleep(PING_RATE)
                before = time.monotonic_ns()
                send_ping(sock, params.ip, seq, ident)
                success = handle_response(sock, seq, ident)
                if success:
                    elapsed = subtract_time(time.monotonic_ns(), before)
                    print(format_ping_message(seq, params, elapsed))
                else:
                    print(format_unreachable(seq, params))
                stats.gather(elapsed, success)
                seq += 1
            stats.end = time.time_ns()
        finally:
            signal.signal(signal.SIGINT, previous)
    print(format_stats(params, stats))
    return stats


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: ping [-v] host/ip")
        return 1
    try:
        run_ping(parse_params(args))
    except ValueError as exc:
        print(exc)
        return 1
    except (ResolutionError, PingError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())