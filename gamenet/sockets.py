"""Thin TCP and UDP socket wrappers that raise on failure and log errors."""

from __future__ import annotations

import enum
import logging
import select as _select
import socket
from typing import Iterable, Sequence

from gamenet.address import SocketAddress

logger = logging.getLogger(__name__)


class SocketAddressFamily(enum.IntEnum):
    INET = socket.AF_INET
    INET6 = socket.AF_INET6


class SocketError(OSError):
    """A socket operation failed; ``operation`` names which one."""

    def __init__(self, operation: str, errno: int | None, message: str) -> None:
        super().__init__(errno, f"{operation}: {message}")
        self.operation = operation


def _report(operation: str, exc: OSError) -> SocketError:
    """Log the failure and return the error to raise."""
    code = exc.errno if exc.errno is not None else 0
    message = exc.strerror or str(exc)
    logger.error("Error %s: %d- %s", operation, code, message)
    return SocketError(operation, exc.errno, message)


class _SocketBase:
    def __init__(self, sock: socket.socket) -> None:
        self._sock = sock

    @property
    def local_address(self) -> SocketAddress:
        """The address the socket is bound to."""
        return SocketAddress.from_sockaddr(self._sock.getsockname())

    def close(self) -> None:
        self._sock.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class TCPSocket(_SocketBase):
    """A stream socket."""

    def connect(self, address: SocketAddress) -> None:
        try:
            self._sock.connect(address.as_sockaddr())
        except OSError as exc:
            raise _report("TCPSocket.connect", exc) from exc

    def bind(self, address: SocketAddress) -> None:
        try:
            self._sock.bind(address.as_sockaddr())
        except OSError as exc:
            raise _report("TCPSocket.bind", exc) from exc

    def listen(self, backlog: int = 32) -> None:
        try:
            self._sock.listen(backlog)
        except OSError as exc:
            raise _report("TCPSocket.listen", exc) from exc

    def accept(self) -> tuple[TCPSocket, SocketAddress]:
        """Accept a connection; return the new socket and the peer's address."""
        try:
            new_sock, peer = self._sock.accept()
        except OSError as exc:
            raise _report("TCPSocket.accept", exc) from exc
        return TCPSocket(new_sock), SocketAddress.from_sockaddr(peer)

    def send(self, data: bytes) -> int:
        """Send data and return the number of bytes sent."""
        try:
            return self._sock.send(data)
        except OSError as exc:
            raise _report("TCPSocket.send", exc) from exc

    def receive(self, max_length: int) -> bytes:
        """Receive up to ``max_length`` bytes; empty bytes mean the peer closed."""
        try:
            return self._sock.recv(max_length)
        except OSError as exc:
            raise _report("TCPSocket.receive", exc) from exc

    def fileno(self) -> int:
        return self._sock.fileno()

    def close(self) -> None:
        self._sock.close()


class UDPSocket(_SocketBase):
    """A datagram socket."""

    def bind(self, address: SocketAddress) -> None:
        try:
            self._sock.bind(address.as_sockaddr())
        except OSError as exc:
            raise _report("UDPSocket.bind", exc) from exc

    def send_to(self, data: bytes, address: SocketAddress) -> int:
        """Send one datagram and return the number of bytes sent."""
        try:
            return self._sock.sendto(data, address.as_sockaddr())
        except OSError as exc:
            raise _report("UDPSocket.send_to", exc) from exc

    def receive_from(self, max_length: int) -> tuple[bytes, SocketAddress | None]:
        """Receive one datagram and its sender.

        A non-blocking socket with nothing waiting gives ``(b"", None)``.
        """
        try:
            data, sender = self._sock.recvfrom(max_length)
        except BlockingIOError:
            return b"", None
        except ConnectionResetError as exc:
            logger.info("Connection reset while receiving")
            raise SocketError("UDPSocket.receive_from", exc.errno, "connection reset") from exc
        except OSError as exc:
            raise _report("UDPSocket.receive_from", exc) from exc
        return data, SocketAddress.from_sockaddr(sender)

    def set_blocking(self, blocking: bool) -> None:
        try:
            self._sock.setblocking(blocking)
        except OSError as exc:
            raise _report("UDPSocket.set_blocking", exc) from exc

    def fileno(self) -> int:
        return self._sock.fileno()

    def close(self) -> None:
        self._sock.close()


def create_udp_socket(family: SocketAddressFamily = SocketAddressFamily.INET) -> UDPSocket:
    try:
        sock = socket.socket(int(family), socket.SOCK_DGRAM, socket.IPPROTO_UDP)
    except OSError as exc:
        raise _report("create_udp_socket", exc) from exc
    return UDPSocket(sock)


def create_tcp_socket(family: SocketAddressFamily = SocketAddressFamily.INET) -> TCPSocket:
    try:
        sock = socket.socket(int(family), socket.SOCK_STREAM, socket.IPPROTO_TCP)
    except OSError as exc:
        raise _report("create_tcp_socket", exc) from exc
    return TCPSocket(sock)


def select(
    read_set: Iterable[TCPSocket] | None = None,
    write_set: Iterable[TCPSocket] | None = None,
    except_set: Iterable[TCPSocket] | None = None,
    timeout: float | None = None,
) -> tuple[list[TCPSocket], list[TCPSocket], list[TCPSocket]]:
    """Wait until sockets are ready; return the ready ones of each set in input order.

    A set given as None is not watched and comes back empty. With no timeout
    the call blocks.
    """
    reads: Sequence[TCPSocket] = list(read_set or ())
    writes: Sequence[TCPSocket] = list(write_set or ())
    excepts: Sequence[TCPSocket] = list(except_set or ())
    try:
        ready_r, ready_w, ready_x = _select.select(reads, writes, excepts, timeout)
    except OSError as exc:
        raise _report("select", exc) from exc

    def keep(candidates: Sequence[TCPSocket], ready: list) -> list[TCPSocket]:
        ready_ids = {id(s) for s in ready}
        return [s for s in candidates if id(s) in ready_ids]

    return keep(reads, ready_r), keep(writes, ready_w), keep(excepts, ready_x)