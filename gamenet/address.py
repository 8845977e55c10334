"""IPv4 socket addresses and their construction from "host:port" text."""

from __future__ import annotations

import ipaddress
import logging
import socket
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class SocketAddressError(ValueError):
    """Raised when text or a socket address cannot be turned into an IPv4 address."""


@dataclass(frozen=True)
class SocketAddress:
    """An IPv4 address held as a 32-bit host-order integer plus a port."""

    address: int
    port: int

    def __post_init__(self) -> None:
        if not 0 <= self.address <= 0xFFFFFFFF:
            raise ValueError(f"{self.address} is not a 32-bit IPv4 address")
        if not 0 <= self.port <= 0xFFFF:
            raise ValueError(f"{self.port} is not a 16-bit port")

    @classmethod
    def from_sockaddr(cls, sockaddr) -> SocketAddress:
        """Build an address from a ``(host, port)`` tuple as the socket module gives."""
        host, port = sockaddr[0], sockaddr[1]
        try:
            packed = ipaddress.IPv4Address(host)
        except ValueError as exc:
            raise SocketAddressError(f"{host!r} is not an IPv4 address") from exc
        return cls(int(packed), int(port))

    def as_sockaddr(self) -> tuple[str, int]:
        """Return the ``(host, port)`` tuple the socket module expects."""
        return str(ipaddress.IPv4Address(self.address)), self.port

    def __str__(self) -> str:
        host, port = self.as_sockaddr()
        return f"{host}:{port}"


def create_ipv4_from_string(text: str) -> SocketAddress:
    """Resolve ``"host:service"`` (or just ``"host"``, port 0) to an IPv4 address."""
    host, separator, service = text.rpartition(":")
    if not separator:
        host, service = text, "0"

    try:
        results = socket.getaddrinfo(host, service, socket.AF_INET)
    except (socket.gaierror, UnicodeError) as exc:
        logger.error("Error create_ipv4_from_string: %s", exc)
        raise SocketAddressError(f"cannot resolve {text!r}: {exc}") from exc

    for *_, sockaddr in results:
        if sockaddr:
            return SocketAddress.from_sockaddr(sockaddr)
    raise SocketAddressError(f"no IPv4 address found for {text!r}")