"""Command-line parameters and host name resolution."""

from __future__ import annotations

import re
import socket
from dataclasses import dataclass, replace

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class ResolutionError(Exception):
    """A target could not be resolved to an address or a name."""


@dataclass(frozen=True)
class Params:
    """What to ping and how to show it."""

    target: str
    host: str
    ip: str
    verbose: bool = False


def parse_params(argv: list[str]) -> Params:
    """Build parameters from the arguments after the program name."""
    verbose = False
    params = None
    for arg in argv:
        if arg.startswith("-v"):
            verbose = True
        else:
            params = parse_target(arg, False)
    if params is None:
        raise ValueError("Usage: ping [-v] host/ip")
    return replace(params, verbose=verbose)


def parse_target(target: str, verbose: bool) -> Params:
    """Resolve ``target``, given either as a dotted address or a host name."""
    if is_ip_addr(target):
        try:
            socket.inet_pton(socket.AF_INET, target)
        except OSError as exc:
            raise ResolutionError(f"ip address wrong format {target}") from exc
        return Params(target, reverse_resolve_dns(target), target, verbose)
    return Params(target, target, resolve_dns(target), verbose)


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def is_ip_addr(target: str) -> bool:
    """Tell whether ``target`` looks like four dotted numbers from 0 to 255."""
    chunks = [chunk for chunk in target.split(".") if chunk]
    if any(not 0 <= _atoi(chunk) <= 255 for chunk in chunks):
        return False
    return len(chunks) == 4


def resolve_dns(host: str) -> str:
    """Return the first IPv4 address of ``host``."""
    try:
        results = socket.getaddrinfo(
            host, None, socket.AF_INET, socket.SOCK_RAW, socket.IPPROTO_ICMP
        )
    except socket.gaierror as exc:
        raise ResolutionError(f"getaddrinfo: {exc.strerror}") from exc
    if not results:
        raise ResolutionError("DNS resolution failed: no result")
    return results[0][4][0]


def reverse_resolve_dns(ip: str) -> str:
    """Return the host name of the IPv4 address ``ip``."""
    try:
        host, _ = socket.getnameinfo((ip, 0), 0)
    except OSError as exc:
        raise ResolutionError(f"impossible to reverse resolve dns ip {ip}") from exc
    return host