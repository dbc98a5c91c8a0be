"""Server configuration built with functional options."""

from __future__ import annotations

import ssl
from dataclasses import dataclass
from typing import Callable, Optional


@dataclass
class Server:
    """Network server settings; timeout is in seconds."""

    addr: str
    port: int
    protocol: str = "tcp"
    timeout: float = 30.0
    max_conns: int = 1000
    tls: Optional[ssl.SSLContext] = None


Option = Callable[[Server], None]


def protocol(p: str) -> Option:
    """Option setting the protocol."""

    def apply(server: Server) -> None:
        server.protocol = p

    return apply


def timeout(seconds: float) -> Option:
    """Option setting the timeout in seconds."""

    def apply(server: Server) -> None:
        server.timeout = seconds

    return apply


def max_conns(count: int) -> Option:
    """Option setting the maximum number of connections."""

    def apply(server: Server) -> None:
        server.max_conns = count

    return apply


def tls(config: Optional[ssl.SSLContext]) -> Option:
    """Option setting the TLS context."""

    def apply(server: Server) -> None:
        server.tls = config

    return apply


def new_server(addr: str, port: int, *options: Option) -> Server:
    """Create a server with defaults, then apply each option in order."""
    server = Server(addr, port)
    for option in options:
        option(server)
    return server