# bwtest

Building blocks for measuring network bandwidth over TCP and UDP. The
package depends on nothing outside the standard library.

## What is inside

- `bwtest.units`
  - `byte_atof` and `byte_atoi` read sizes such as `"64K"` or `"10m"`.
    Upper-case `K`, `M` and `G` are powers of 1024. Lower-case `k`, `m` and
    `g` are powers of 1000. Only the character right after the number counts.
  - `byte_atoi` truncates the result to an integer. It raises `ValueError`
    for negative, infinite or NaN values.
  - `format_bytes(value, fmt)` prints a byte count.
    - `B K M G` print it in bytes, and `b k m g` print it in bits.
    - `A` or `a`, or any other character, picks the unit.
    - The number is shown with two decimals, one decimal or none, depending
      on its size.
  - `pattern(size)` returns `size` bytes of repeating ASCII digits, for use
    as a payload.
  - `VERSION` and `VERSION_DATE` hold the version string and its date.
- `bwtest.timestamp`
  - `Timestamp` is an ordered dataclass of `sec` and `usec`.
  - `now()` and `from_seconds()` build one. `set_now()` and `get()` set and
    read it.
  - `sub_usec()` and `sub_sec()` take differences. `add()` and
    `add_seconds()` add in place.
  - `before()` and `after()` compare. `delta_usec()` resets the timestamp to
    now and returns the microseconds elapsed.
  - `fraction(current, end)` returns how far `current` lies between the
    timestamp and `end`, or `-1.0` when `current` is outside that span.
- `bwtest.reporter`
  - `ReportType` holds the report kind flags.
  - `TransitStats` keeps running latency statistics for the current interval
    and for the whole run: maximum, minimum, sum, count, mean, running M2,
    and the variation from the previous sample. `update()` adds a sample and
    `reset_interval()` clears the interval values.
  - `time_difference(left, right)` returns the difference between two
    `Timestamp`s in seconds. `time_add(left, right)` returns their sum as a
    new `Timestamp`.
- `bwtest.sockopts`
  - `readn(sock, length)` reads until `length` bytes have arrived or the
    stream ends.
  - `writen(sock, data)` sends all of `data` and returns its length.
  - `set_tcp_mss` and `get_tcp_mss` handle the TCP maximum segment size. They
    report problems as `RuntimeWarning`.
  - `set_tcp_window_size` and `get_tcp_window_size` handle the send or
    receive buffer size. They raise `OSError` on failure.
- `bwtest.settings`
  - The mode enums are `ThreadMode`, `ReportMode`, `TestMode` and
    `RateUnits`.
  - `Flag` holds the option bits.
  - The wire headers are `UDPDatagram`, `ClientHeader` and `ServerHeader`.
    Each has `pack` and `unpack` and uses network byte order.
  - `ServerHeader` also has `total_len()` and `jitter()`.

## Example

```python
from bwtest.units import byte_atoi, format_bytes
from bwtest.settings import UDPDatagram

byte_atoi("2M")              # 2097152
format_bytes(2097152, "M")   # "2.00 MByte"

datagram = UDPDatagram(id=7, tv_sec=1, tv_usec=500)
UDPDatagram.unpack(datagram.pack()) == datagram   # True
```

## What it does not do

This is a library of parts. It has none of the following:

- a command-line tool
- a client or a listening server that runs a measurement
- report printing or output formatting of results
- thread management

Programs built on it have to supply those themselves.

## Tests

```
pip install -e .[test]
pytest
```