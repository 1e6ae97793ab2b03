"""Test modes, option flags and the wire headers exchanged by client and server."""

from __future__ import annotations

import enum
import struct
from dataclasses import astuple, dataclass
from typing import ClassVar

# Smallest supported report interval, in seconds.
SMALLEST_INTERVAL = 0.005

# Bits of the ``flags`` word at the start of the client and server headers.
HEADER_VERSION1 = 0x80000000
RUN_NOW = 0x00000001
UNITS_PPS = 0x00000002

_UINT32_MASK = 0xFFFFFFFF


class ThreadMode(enum.IntEnum):
    """Role a worker plays."""

    UNKNOWN = 0
    SERVER = 1
    CLIENT = 2
    REPORTER = 3
    LISTENER = 4


class ReportMode(enum.IntEnum):
    """Output style of reports."""

    DEFAULT = 0
    CSV = 1
    MAXIMUM = 2


class TestMode(enum.IntEnum):
    """Whether and how the reverse direction is tested."""

    NORMAL = 0
    DUAL_TEST = 1
    TRADE_OFF = 2
    UNKNOWN = 3


class RateUnits(enum.IntEnum):
    """Unit of a requested rate: bandwidth or packets per second."""

    BW = 0
    PPS = 1


class Flag(enum.IntFlag):
    """Boolean options of a run.

    The ``NO*REPORT`` members are active low: a report is produced unless
    its flag is set.
    """

    BUFLENSET = 0x00000001
    COMPAT = 0x00000002
    DAEMON = 0x00000004
    DOMAIN = 0x00000008
    FILEINPUT = 0x00000010
    NODELAY = 0x00000020
    PRINTMSS = 0x00000040
    REMOVESERVICE = 0x00000080
    STDIN = 0x00000100
    STDOUT = 0x00000200
    SUGGESTWIN = 0x00000400
    UDP = 0x00000800
    MODETIME = 0x00001000
    REPORTSETTINGS = 0x00002000
    MULTICAST = 0x00004000
    NOSETTREPORT = 0x00008000
    NOCONNREPORT = 0x00010000
    NODATAREPORT = 0x00020000
    NOSERVREPORT = 0x00040000
    NOMULTREPORT = 0x00080000
    SINGLECLIENT = 0x00100000
    SINGLEUDP = 0x00200000
    CONGESTION = 0x00400000
    REALTIME = 0x00800000
    BWSET = 0x01000000
    ENHANCEDREPORT = 0x02000000
    SSL = 0x04000000
    KTLS = 0x08000000
    NODECRYPT = 0x10000000


def _pack(layout: struct.Struct, values: tuple) -> bytes:
    try:
        return layout.pack(*values)
    except struct.error as exc:
        raise ValueError(f"header field out of range: {exc}") from exc


def _unpack(layout: struct.Struct, data: bytes) -> tuple:
    if len(data) < layout.size:
        raise ValueError(f"need at least {layout.size} bytes, got {len(data)}")
    return layout.unpack_from(data)


@dataclass
class UDPDatagram:
    """Sequence number and send time carried at the start of each UDP packet."""

    id: int = 0
    tv_sec: int = 0
    tv_usec: int = 0

    _LAYOUT: ClassVar[struct.Struct] = struct.Struct("!iII")
    SIZE: ClassVar[int] = _LAYOUT.size

    def pack(self) -> bytes:
        """Encode in network byte order."""
        return _pack(self._LAYOUT, astuple(self))

    @classmethod
    def unpack(cls, data: bytes) -> UDPDatagram:
        """Decode from the start of ``data``; trailing payload is ignored."""
        return cls(*_unpack(cls._LAYOUT, data))


@dataclass
class ClientHeader:
    """Options a client sends to the server to request a reverse test."""

    flags: int = 0
    num_threads: int = 0
    port: int = 0
    buffer_len: int = 0
    window_size: int = 0
    amount: int = 0
    rate: int = 0
    rate_units: int = 0
    realtime: int = 0

    _LAYOUT: ClassVar[struct.Struct] = struct.Struct("!I8i")
    SIZE: ClassVar[int] = _LAYOUT.size

    def pack(self) -> bytes:
        """Encode in network byte order."""
        values = astuple(self)
        return _pack(self._LAYOUT, (values[0] & _UINT32_MASK, *values[1:]))

    @classmethod
    def unpack(cls, data: bytes) -> ClientHeader:
        """Decode from the start of ``data``; ``flags`` comes back unsigned."""
        return cls(*_unpack(cls._LAYOUT, data))


@dataclass
class ServerHeader:
    """UDP results the server reports back on the closing acknowledgement."""

    flags: int = 0
    total_len1: int = 0
    total_len2: int = 0
    stop_sec: int = 0
    stop_usec: int = 0
    error_cnt: int = 0
    outorder_cnt: int = 0
    datagrams: int = 0
    jitter1: int = 0
    jitter2: int = 0
    min_transit1: int = 0
    min_transit2: int = 0
    max_transit1: int = 0
    max_transit2: int = 0
    sum_transit1: int = 0
    sum_transit2: int = 0
    mean_transit1: int = 0
    mean_transit2: int = 0
    m2_transit1: int = 0
    m2_transit2: int = 0
    vd_transit1: int = 0
    vd_transit2: int = 0
    cnt_transit: int = 0
    ipg_cnt: int = 0
    ipg_sum: int = 0

    _LAYOUT: ClassVar[struct.Struct] = struct.Struct("!I24i")
    SIZE: ClassVar[int] = _LAYOUT.size

    def pack(self) -> bytes:
        """Encode in network byte order."""
        values = astuple(self)
        return _pack(self._LAYOUT, (values[0] & _UINT32_MASK, *values[1:]))

    @classmethod
    def unpack(cls, data: bytes) -> ServerHeader:
        """Decode from the start of ``data``; ``flags`` comes back unsigned."""
        return cls(*_unpack(cls._LAYOUT, data))

    def total_len(self) -> int:
        """Return the 64-bit byte count split over the two length words."""
        return ((self.total_len1 & _UINT32_MASK) << 32) + (self.total_len2 & _UINT32_MASK)

    def jitter(self) -> float:
        """Return the jitter in seconds from its seconds and microseconds words."""
        return self.jitter1 + self.jitter2 / 1_000_000.0