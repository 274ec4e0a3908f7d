# pingtool

`pingtool` sends an ICMP echo request to a host once a second and prints a
line for each one. When you stop it with Ctrl-C, it prints a summary of the
packets sent and received and their round-trip times.

## Installation

```
pip install .
```

It needs only the standard library. Sending ICMP packets requires a raw
socket. On most systems you must run it as root or give the Python
interpreter the `CAP_NET_RAW` capability.

## Usage

```
pingtool [-v] host/ip
```

The target is a host name or a dotted IPv4 address. Given a name, the tool
looks up its first IPv4 address. Given an address, it looks up the name.
When several targets are given, the last one is used. The `-v` flag is
accepted and recorded, but it does not change the output.

Sample lines:

```
64 bytes from example.com(93.184.216.34): icmp_seq=1, ttl=64, time=12 ms
64 bytes from example.com(93.184.216.34): icmp_seq=2, ttl=64, time=11 ms
--- example.com ping statistics---
2 packets transmitted, 2 received, ...
rtt min/avg/max/mdev = 11.00/11.50/12.00/0.50 ms
```

Each request waits up to one second for a reply. If nothing arrives,
`Ping timeout` goes to standard error. If no reply arrives or the reply is
not the expected echo reply, the request is reported as
`Destination Host Unreachable`. Counting each request also reuses the last
measured round-trip time.

The command exits with status 1 in these cases: no target is given, a name
or address cannot be resolved, or the socket cannot be opened or used. The
error goes to standard error, prefixed with `Error:`.

## Library use

You can also use the pieces on their own:

- `pingtool.packet`: `build_packet(seq, ident)` builds a 64-byte echo
  request. `calculate_checksum(data)` computes the Internet checksum.
  `check_header`, `check_checksum` and `check_response` validate a reply.
  `check_response` takes a whole IPv4 datagram.
- `pingtool.stats`: the `Stats` dataclass keeps counts and totals in
  microseconds. It has `gather(elapsed, success)`, `average()` and `mdev()`,
  and both of the last two return milliseconds. The module also has
  `subtract_time` (nanosecond timestamps to microseconds) and `to_ms`.
- `pingtool.params`: `parse_params(argv)` and `parse_target(target, verbose)`
  return a frozen `Params` value (`target`, `host`, `ip`, `verbose`).
  `is_ip_addr`, `resolve_dns` and `reverse_resolve_dns` are also available.
  Lookup failures raise `ResolutionError`. A missing target raises
  `ValueError`.
- `pingtool.display`: `format_ping_message`, `format_unreachable` and
  `format_stats` return the output text.
- `pingtool.runner`: `open_socket`, `send_ping`, `handle_response`,
  `run_ping` and `main` drive the loop. Socket failures raise `PingError`.
  `run_ping` returns the final `Stats`.

## Limitations

- Only IPv4 is supported.
- The TTL shown is always 64, the value set on the outgoing socket. It is
  not read from the reply.
- The summary always reports `time 0ms`.
- The packet-loss figure is not a plain percentage of lost packets.

## Development

```
pip install -e ".[test]"
pytest
```