"""Send ICMP echo requests over IPv4 and report round-trip statistics."""

__version__ = "0.1.0"