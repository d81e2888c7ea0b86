# netwatch

Building blocks for watching network traffic per process on Linux.

The package gathers the pieces a traffic monitor needs around its capture
loop:

- `netwatch.jhash` – Jenkins hash functions (`jhash8` over bytes, `jhash32`
  over a sequence of unsigned 32-bit words, raising `ValueError` for a word
  out of range) for keying connection tables.
- `netwatch.textutil` – small helpers: `round_half_up`, `strlen_space`
  (length of a command line up to its first space) and `index_last_char`
  (position of the last occurrence of a character, or -1).
- `netwatch.timer` – a monotonic millisecond clock (`get_time`) and
  `msec2clock`, which renders a duration as `hh:mm:ss`.
- `netwatch.usage` – the version banner and option summary
  (`version_text`, `usage_text`, `show_version`, `usage`). `show_version`
  writes to standard output by default; `usage` writes the version to
  standard output and the option summary to standard error unless a stream
  is given.
- `netwatch.sort` – the `SortColumn` enum and `sort_processes`, which orders
  a list of processes in place (and, optionally, each process's
  connections) by rate, packets per second, totals or PID. Statistics sort
  descending, PID ascending. `process_key` and `connection_key` give the
  keys used.
- `netwatch.translate` – turns a connection's IPv4 addresses and ports into
  a `host:service <-> host:service` line, numerically or by name
  (`host_name`, `service_name`, `translate`). The protocol is an IP
  protocol number; 17 (UDP) looks services up as `udp`, anything else as
  `tcp`. Failed lookups fall back to the numeric form.
- `netwatch.capture` – opens a non-blocking raw `AF_PACKET` socket bound to
  one interface or all of them (`open_socket`, `close_socket`) and works out
  the layout of a packet receive ring (`ring_request`, `RingRequest`).
  Failures raise `CaptureError`. Opening a raw socket needs root or
  `CAP_NET_RAW`.

## Examples

```python
from netwatch.timer import msec2clock
from netwatch.textutil import round_half_up, strlen_space, index_last_char

msec2clock(3_723_000)                 # "01:02:03"
round_half_up(1.5)                    # 2
strlen_space("/usr/bin/prog --flag")  # 13
index_last_char("/usr/bin/prog", "/") # 8
```

Sorting columns cycle in display order, wrapping from the last to `S_PID`:

```python
from netwatch.sort import SortColumn

SortColumn.RATE_RX.next()   # SortColumn.TOT_TX
SortColumn.TOT_RX.next()    # SortColumn.S_PID
```

Formatting a connection without name lookups:

```python
import socket
from netwatch.translate import translate

line = translate("192.0.2.10", 51000, "198.51.100.7", 443, socket.IPPROTO_TCP,
                 translate_host=False, translate_service=False)
# "192.0.2.10:51000 <-> 198.51.100.7:443"
```

Capturing on one interface:

```python
from netwatch.capture import open_socket, close_socket, ring_request, CaptureError

try:
    sock = open_socket("eth0")
except CaptureError as exc:
    print(f"cannot capture: {exc}")
else:
    request = ring_request(4096)
    print(request.ring_size(), request.block_offsets())
    close_socket(sock)
```

With a 4096-byte page, `ring_request` gives four 256 KiB blocks of 2048-byte
frames, 512 frames in all.

## What it does not do

netwatch is a library of parts, not a finished monitor. It has no command
to run, no terminal screen, and no code that reads packets from the socket,
maps the ring into memory, links traffic to processes or keeps rate
statistics. `sort_processes` works on any objects carrying the attributes
its module docstring lists; supplying them is up to the caller.

The package has no third-party dependencies; the test suite uses pytest.