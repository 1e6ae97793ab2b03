"""Report kinds, transit (latency) statistics and timeval arithmetic."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

from bwtest.timestamp import MILLION, Timestamp

NUM_REPORT_STRUCTS = 10000
NUM_MULTI_SLOTS = 5
# Minimum latencies outside these bounds (seconds) suggest unsynchronised clocks.
UNREALISTIC_LATENCYMINMIN = -1
UNREALISTIC_LATENCYMINMAX = 60


class ReportType(enum.IntFlag):
    """Kinds of report a reporter entry may carry."""

    TRANSFER_REPORT = 0x00000001
    SERVER_RELAY_REPORT = 0x00000002
    SETTINGS_REPORT = 0x00000004
    CONNECTION_REPORT = 0x00000008
    MULTIPLE_REPORT = 0x00000010


@dataclass
class TransitStats:
    """End-to-end latency statistics for the current interval and in total."""

    max_transit: float = -math.inf
    min_transit: float = math.inf
    sum_transit: float = 0.0
    last_transit: float = 0.0
    mean_transit: float = 0.0
    m2_transit: float = 0.0
    vd_transit: float = 0.0
    cnt_transit: int = 0
    tot_max_transit: float = -math.inf
    tot_min_transit: float = math.inf
    tot_sum_transit: float = 0.0
    tot_cnt_transit: int = 0
    tot_mean_transit: float = 0.0
    tot_m2_transit: float = 0.0
    tot_vd_transit: float = 0.0

    def update(self, transit: float) -> None:
        """Fold one transit-time sample into interval and total statistics."""
        variation = transit - self.last_transit if self.tot_cnt_transit else 0.0
        self.vd_transit = variation
        self.tot_vd_transit = variation
        self.last_transit = transit

        self.max_transit = max(self.max_transit, transit)
        self.min_transit = min(self.min_transit, transit)
        self.sum_transit += transit
        self.cnt_transit += 1
        delta = transit - self.mean_transit
        self.mean_transit += delta / self.cnt_transit
        self.m2_transit += delta * (transit - self.mean_transit)

        self.tot_max_transit = max(self.tot_max_transit, transit)
        self.tot_min_transit = min(self.tot_min_transit, transit)
        self.tot_sum_transit += transit
        self.tot_cnt_transit += 1
        delta = transit - self.tot_mean_transit
        self.tot_mean_transit += delta / self.tot_cnt_transit
        self.tot_m2_transit += delta * (transit - self.tot_mean_transit)

    def reset_interval(self) -> None:
        """Clear the per-interval statistics, keeping totals and the last sample."""
        self.max_transit = -math.inf
        self.min_transit = math.inf
        self.sum_transit = 0.0
        self.mean_transit = 0.0
        self.m2_transit = 0.0
        self.vd_transit = 0.0
        self.cnt_transit = 0


def time_difference(left: Timestamp, right: Timestamp) -> float:
    """Return ``left - right`` in floating-point seconds."""
    return (left.sec - right.sec) + (left.usec - right.usec) / MILLION


def time_add(left: Timestamp, right: Timestamp) -> Timestamp:
    """Return the sum of two timestamps, carrying microseconds into seconds."""
    sec = left.sec + right.sec
    usec = left.usec + right.usec
    if usec >= MILLION:
        usec -= MILLION
        sec += 1
    return Timestamp(sec, usec)