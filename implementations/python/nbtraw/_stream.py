"""Byte sink / byte source capabilities and the two helpers built on them.

All codec functions talk to streams only through write_all() and
read_exact().  That keeps OSError → NbtError conversion in one place: the
scalar, string, array and header codecs never see a raw OSError.

Any object with a compatible write()/read() works: io.BytesIO, a file
opened in binary mode, socket.makefile("rb"), or a hand-rolled wrapper.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from ._errors import ERR_EOF, ERR_IO, NbtError

log = logging.getLogger("nbtraw")


class ByteSink(Protocol):
    """Anything that accepts sequential byte writes.

    write() may return the number of bytes taken (raw / unbuffered streams)
    or None (some buffered writers).  A short count is retried.
    """

    def write(self, data: bytes) -> Optional[int]:
        ...


class ByteSource(Protocol):
    """Anything that yields sequential bytes.

    read(n) may return fewer than n bytes; b"" means the source is exhausted.
    Non-blocking sources (read() returning None) are not supported.
    """

    def read(self, n: int) -> bytes:
        ...


def write_all(sink: ByteSink, data: bytes) -> None:
    """Write every byte of `data` to `sink`, retrying short writes."""
    while data:
        try:
            n = sink.write(data)
        except OSError as e:
            log.debug("sink write of %d bytes failed: %s", len(data), e)
            raise NbtError(ERR_IO, "write failed: {}".format(e)) from e
        if n is None or n >= len(data):
            return
        if n <= 0:
            log.debug("sink accepted 0 of %d bytes", len(data))
            raise NbtError(ERR_IO, "sink accepted no bytes")
        data = data[n:]


def read_exact(source: ByteSource, n: int, code: str = ERR_EOF) -> bytes:
    """Read exactly `n` bytes from `source`.

    Partial reads are accumulated.  If the source reports exhaustion (an
    empty read) before `n` bytes arrive, raise NbtError(code): ERR_EOF for
    fixed-width fields, ERR_INCOMPLETE for string payloads.
    """
    if n == 0:
        return b""
    buf = bytearray()
    while len(buf) < n:
        try:
            chunk = source.read(n - len(buf))
        except OSError as e:
            log.debug("source read failed after %d of %d bytes: %s",
                      len(buf), n, e)
            raise NbtError(ERR_IO, "read failed: {}".format(e)) from e
        if chunk is None:
            # Non-blocking source with nothing buffered; not exhaustion.
            log.debug("source would block after %d of %d bytes", len(buf), n)
            raise NbtError(ERR_IO, "source has no data available (non-blocking "
                           "streams are not supported)")
        if not chunk:
            log.debug("source exhausted after %d of %d bytes", len(buf), n)
            raise NbtError(code, "expected {} bytes, got {}".format(n, len(buf)))
        buf += chunk
    return bytes(buf)
