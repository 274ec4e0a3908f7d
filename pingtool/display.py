"""Text shown for each probe and for the final summary."""

from __future__ import annotations

import math

from .params import Params
from .stats import Stats, subtract_time, to_ms

PING_SIZE = 64
TTL = 64


def format_ping_message(seq: int, params: Params, elapsed: int) -> str:
    """Line for a probe answered after ``elapsed`` microseconds."""
    return (
        f"{PING_SIZE} bytes from {params.host}({params.ip}): "
        f"icmp_seq={seq}, ttl={TTL}, time={to_ms(elapsed):2.0f} ms"
    )


def format_unreachable(seq: int, params: Params) -> str:
    """Line for a probe that got no valid answer."""
    return (
        f"{PING_SIZE} bytes from {params.host}({params.ip}): "
        f"icmp_seq={seq} Destination Host Unreachable"
    )


def format_stats(params: Params, stats: Stats) -> str:
    """Summary shown when pinging stops."""
    ratio = stats.success_count / stats.count if stats.count else math.nan
    loss = 100 - ratio * subtract_time(stats.end, stats.start)
    return "\n".join(
        [
            f"--- {params.target} ping statistics---",
            f"{stats.count} packets transmitted, {stats.success_count} received, "
            f"{loss:2.0f}% packet loss, time 0ms",
            f"rtt min/avg/max/mdev = {to_ms(stats.minimum):3.2f}/"
            f"{stats.average():3.2f}/{to_ms(stats.maximum):3.2f}/"
            f"{stats.mdev():3.2f} ms",
        ]
    )