"""Building blocks for network bandwidth measurement: units, timestamps, latency statistics, socket options and wire headers."""

__version__ = "2.0.8"