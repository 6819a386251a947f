"""Array codec: i32 little-endian element count, then fixed-width elements.

Element layouts are the scalar ones (I8 / I32 / I64 from _scalar), so a
byte array of [1, -1] is the count 02 00 00 00 followed by 01 FF.

The count on the wire is untrusted.  Readers pull elements in chunks of at
most READ_CHUNK_BYTES, so memory only grows as real bytes arrive; a
corrupt count of two billion fails with ERR_EOF after the source runs dry
rather than allocating up front.
"""

from __future__ import annotations

import struct
from typing import Iterable, List, Optional, Union

from ._constants import (
    INT8_MAX,
    INT8_MIN,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    MAX_ARRAY_COUNT,
    READ_CHUNK_BYTES,
)
from ._errors import ERR_LENGTH, ERR_LIMIT, NbtError
from ._scalar import I8, I32, I64, check_int
from ._stream import ByteSink, ByteSource, read_exact, write_all


# ── Shared helpers ───────────────────────────────────────────

def _count_prefix(n: int) -> bytes:
    if n > MAX_ARRAY_COUNT:
        raise NbtError(ERR_LIMIT, "array of {} elements exceeds {}".format(
            n, MAX_ARRAY_COUNT))
    return I32.pack(n)


def _write_array(sink: ByteSink, elements: Iterable[int], layout: struct.Struct,
                 lo: int, hi: int, kind: str) -> None:
    values = [check_int(v, lo, hi, kind) for v in elements]
    prefix = _count_prefix(len(values))
    body = struct.pack("<{}{}".format(len(values), layout.format[-1]), *values)
    write_all(sink, prefix + body)


def _read_array_count(source: ByteSource, max_count: Optional[int] = None) -> int:
    """Read and vet an i32 element count."""
    n = I32.unpack(read_exact(source, 4))[0]
    if n < 0:
        raise NbtError(ERR_LENGTH, "negative array length {}".format(n))
    if max_count is not None and n > max_count:
        raise NbtError(ERR_LIMIT, "array length {} exceeds limit {}".format(
            n, max_count))
    return n


def _read_array(source: ByteSource, layout: struct.Struct,
                max_count: Optional[int]) -> List[int]:
    remaining = _read_array_count(source, max_count)
    per_chunk = max(1, READ_CHUNK_BYTES // layout.size)
    out: List[int] = []
    while remaining:
        k = min(remaining, per_chunk)
        raw = read_exact(source, k * layout.size)
        out.extend(v for (v,) in layout.iter_unpack(raw))
        remaining -= k
    return out


# ── Byte arrays ──────────────────────────────────────────────

def write_bare_byte_array(sink: ByteSink,
                          elements: Union[bytes, bytearray, Iterable[int]]) -> None:
    """Write a byte array.

    `elements` is either signed ints in [-128, 127] or a bytes-like object,
    whose octets go out verbatim (0xFF reads back as -1).
    """
    if isinstance(elements, (bytes, bytearray, memoryview)):
        raw = bytes(elements)
        write_all(sink, _count_prefix(len(raw)) + raw)
        return
    _write_array(sink, elements, I8, INT8_MIN, INT8_MAX, "byte")


def read_bare_byte_array(source: ByteSource,
                         max_count: Optional[int] = None) -> List[int]:
    return _read_array(source, I8, max_count)


# ── Int / long arrays ────────────────────────────────────────

def write_bare_int_array(sink: ByteSink, elements: Iterable[int]) -> None:
    _write_array(sink, elements, I32, INT32_MIN, INT32_MAX, "int")


def read_bare_int_array(source: ByteSource,
                        max_count: Optional[int] = None) -> List[int]:
    return _read_array(source, I32, max_count)


def write_bare_long_array(sink: ByteSink, elements: Iterable[int]) -> None:
    _write_array(sink, elements, I64, INT64_MIN, INT64_MAX, "long")


def read_bare_long_array(source: ByteSource,
                         max_count: Optional[int] = None) -> List[int]:
    return _read_array(source, I64, max_count)
