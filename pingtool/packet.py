"""Building and validating ICMP echo packets."""

from __future__ import annotations

import struct

PING_SIZE = 64
ICMP_HEADER_SIZE = 8
ICMP_ECHO_REQUEST = 8
ICMP_ECHO_REPLY = 0
PAYLOAD_PATTERN = bytes(range(33, 43))

_HEADER = struct.Struct("!BBHHH")
_HEADER_FIELDS = struct.Struct("!BB2xHH")
_CHECKSUM_FIELD = struct.Struct("!H")


def calculate_checksum(data: bytes) -> int:
    """Return the one's complement Internet checksum of ``data``."""
    data = bytes(data)
    if len(data) % 2:
        data += b"\x00"
    total = sum(struct.unpack(f"!{len(data) // 2}H", data))
    while total >> 16:
        total = (total & 0xFFFF) + (total >> 16)
    return ~total & 0xFFFF


def build_packet(seq: int, ident: int) -> bytes:
    """Build a complete echo request of ``PING_SIZE`` bytes."""
    payload = PAYLOAD_PATTERN.ljust(PING_SIZE - ICMP_HEADER_SIZE, b"\x00")
    ident &= 0xFFFF
    seq &= 0xFFFF
    unsigned = _HEADER.pack(ICMP_ECHO_REQUEST, 0, 0, ident, seq) + payload
    checksum = calculate_checksum(unsigned)
    return _HEADER.pack(ICMP_ECHO_REQUEST, 0, checksum, ident, seq) + payload


def check_header(icmp: bytes, seq: int, ident: int) -> bool:
    """Tell whether ``icmp`` is the echo reply to our request ``seq``."""
    if len(icmp) < ICMP_HEADER_SIZE:
        return False
    kind, code, reply_ident, reply_seq = _HEADER_FIELDS.unpack_from(icmp)
    return (
        kind == ICMP_ECHO_REPLY
        and code == 0
        and reply_ident == ident & 0xFFFF
        and reply_seq == seq & 0xFFFF
    )


def check_checksum(icmp: bytes) -> bool:
    """Tell whether the checksum stored in ``icmp`` matches its contents."""
    if len(icmp) < ICMP_HEADER_SIZE:
        return False
    (stored,) = _CHECKSUM_FIELD.unpack_from(icmp, 2)
    zeroed = bytes(icmp[:2]) + b"\x00\x00" + bytes(icmp[4:])
    return stored == calculate_checksum(zeroed)


def check_response(buffer: bytes, seq: int, ident: int) -> bool:
    """Validate a raw IPv4 datagram holding an ICMP echo reply."""
    if not buffer:
        return False
    header_length = (buffer[0] & 0x0F) * 4
    icmp = bytes(buffer[header_length:])
    return check_header(icmp, seq, ident) and check_checksum(icmp)