"""Socket option helpers (TCP MSS, window size) and full-length read/write."""

from __future__ import annotations

import socket
import warnings

_TCP_MAXSEG = getattr(socket, "TCP_MAXSEG", None)
_TCP_WINSHIFT = getattr(socket, "TCP_WINSHIFT", None)
_TCP_RFC1323 = getattr(socket, "TCP_RFC1323", None)
_LARGE_WINDOW = 65535


def set_tcp_mss(sock: socket.socket, mss: int) -> None:
    """Set the TCP maximum segment size if ``mss`` is positive.

    A failure to set, or a different value read back, is reported as a
    :class:`RuntimeWarning`; the socket keeps working either way.
    """
    if _TCP_MAXSEG is None or mss <= 0:
        return
    try:
        sock.setsockopt(socket.IPPROTO_TCP, _TCP_MAXSEG, mss)
    except OSError:
        warnings.warn(
            f"attempt to set TCP maximum segment size to {mss} failed. "
            "Setting the MSS may not be implemented on this OS.",
            RuntimeWarning,
            stacklevel=2,
        )
        return
    try:
        actual = sock.getsockopt(socket.IPPROTO_TCP, _TCP_MAXSEG)
    except OSError as exc:
        warnings.warn(f"getsockopt TCP_MAXSEG: {exc}", RuntimeWarning, stacklevel=2)
        return
    if actual != mss:
        warnings.warn(
            f"attempt to set TCP maximum segment size to {mss}, but got {actual}",
            RuntimeWarning,
            stacklevel=2,
        )


def get_tcp_mss(sock: socket.socket) -> int:
    """Return the TCP maximum segment size, or 0 if it cannot be read."""
    if _TCP_MAXSEG is None:
        return 0
    try:
        return sock.getsockopt(socket.IPPROTO_TCP, _TCP_MAXSEG)
    except OSError as exc:
        warnings.warn(f"getsockopt TCP_MAXSEG: {exc}", RuntimeWarning, stacklevel=2)
        return 0


def readn(sock: socket.socket, length: int) -> bytes:
    """Read up to ``length`` bytes, stopping early only at end of stream.

    Interrupted reads are retried; other socket errors propagate.
    """
    buffer = bytearray(max(length, 0))
    view = memoryview(buffer)
    received = 0
    while received < length:
        count = sock.recv_into(view[received:], length - received)
        if count == 0:
            break
        received += count
    return bytes(buffer[:received])


def writen(sock: socket.socket, data: bytes) -> int:
    """Write all of ``data`` and return the number of bytes written."""
    sock.sendall(data)
    return len(data)


def set_tcp_window_size(sock: socket.socket, size: int, send: bool) -> None:
    """Set the send or receive buffer size if ``size`` is positive.

    Call before ``listen()`` or ``connect()`` for windows above 64 KB to
    take effect. Raises :class:`OSError` if the option cannot be set.
    """
    if size <= 0:
        return
    if size > _LARGE_WINDOW:
        if _TCP_WINSHIFT is not None:
            shift = (size >> 16).bit_length()
            sock.setsockopt(socket.IPPROTO_TCP, _TCP_WINSHIFT, shift)
        if _TCP_RFC1323 is not None:
            sock.setsockopt(socket.IPPROTO_TCP, _TCP_RFC1323, 1)
    option = socket.SO_SNDBUF if send else socket.SO_RCVBUF
    sock.setsockopt(socket.SOL_SOCKET, option, size)


def get_tcp_window_size(sock: socket.socket, send: bool) -> int:
    """Return the send or receive buffer size; raises :class:`OSError` on failure."""
    option = socket.SO_SNDBUF if send else socket.SO_RCVBUF
    return sock.getsockopt(socket.SOL_SOCKET, option)