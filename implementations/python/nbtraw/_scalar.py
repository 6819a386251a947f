"""Scalar codec: fixed-width little-endian integers and IEEE-754 floats.

    byte    i8   1 byte
    short   i16  2 bytes
    int     i32  4 bytes
    long    i64  8 bytes
    float   f32  4 bytes
    double  f64  8 bytes

No prefix, no tag.  Floats are packed from their bit pattern as-is; NaN
and signed zero are not canonicalised.
"""

from __future__ import annotations

import math
import struct
from typing import Any

from ._constants import (
    INT8_MAX,
    INT8_MIN,
    INT16_MAX,
    INT16_MIN,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    UINT8_MAX,
)
from ._errors import ERR_RANGE, ERR_TYPE, NbtError
from ._stream import ByteSink, ByteSource, read_exact, write_all

# Precompiled layouts.  The array codec reuses these for its elements.
U8 = struct.Struct("<B")
I8 = struct.Struct("<b")
I16 = struct.Struct("<h")
U16 = struct.Struct("<H")
I32 = struct.Struct("<i")
I64 = struct.Struct("<q")
U32 = struct.Struct("<I")
U64 = struct.Struct("<Q")
F32 = struct.Struct("<f")
F64 = struct.Struct("<d")


# ── Argument checks ──────────────────────────────────────────

def check_int(value: Any, lo: int, hi: int, kind: str) -> int:
    """Reject non-ints (bool included) and ints outside [lo, hi]."""
    # bool is a subclass of int; True must not silently become 1.
    if isinstance(value, bool) or not isinstance(value, int):
        raise NbtError(ERR_TYPE, "{} expects int, got {}".format(
            kind, type(value).__name__))
    if value < lo or value > hi:
        raise NbtError(ERR_RANGE, "{} {} outside [{}, {}]".format(
            kind, value, lo, hi))
    return value


def _check_float(value: Any, kind: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise NbtError(ERR_TYPE, "{} expects float, got {}".format(
            kind, type(value).__name__))
    try:
        return float(value)
    except OverflowError:
        raise NbtError(ERR_RANGE, "{} {} too large for a double".format(
            kind, value))


# ── float32 NaN transcoding ───────────────────────────────
# Widening a float32 NaN to a Python float through struct "<f" sets the
# quiet bit on a signaling NaN.  NaNs are widened and narrowed by moving
# the bits directly: sign stays, the 23-bit mantissa sits at the top of
# the 52-bit one.

def _nan_single_to_double(bits: int) -> float:
    sign = bits >> 31
    mant = bits & 0x007FFFFF
    return F64.unpack(U64.pack(sign << 63 | 0x7FF << 52 | mant << 29))[0]


def _nan_double_to_single(v: float) -> int:
    bits = U64.unpack(F64.pack(v))[0]
    mant = (bits >> 29) & 0x007FFFFF
    if not mant:
        # Payload only in the low bits; zero would turn it into inf.
        mant = 0x00400000
    return (bits >> 63) << 31 | 0x7F800000 | mant


# ── Writers ──────────────────────────────────────────────────

def write_bare_ubyte(sink: ByteSink, value: int) -> None:
    """Write an unsigned byte (0..255).  Used for tag bytes."""
    write_all(sink, U8.pack(check_int(value, 0, UINT8_MAX, "ubyte")))


def write_bare_byte(sink: ByteSink, value: int) -> None:
    write_all(sink, I8.pack(check_int(value, INT8_MIN, INT8_MAX, "byte")))


def write_bare_short(sink: ByteSink, value: int) -> None:
    write_all(sink, I16.pack(check_int(value, INT16_MIN, INT16_MAX, "short")))


def write_bare_int(sink: ByteSink, value: int) -> None:
    write_all(sink, I32.pack(check_int(value, INT32_MIN, INT32_MAX, "int")))


def write_bare_long(sink: ByteSink, value: int) -> None:
    write_all(sink, I64.pack(check_int(value, INT64_MIN, INT64_MAX, "long")))


def write_bare_float(sink: ByteSink, value: float) -> None:
    """Write a single-precision float.

    Doubles are rounded to the nearest single.  A finite value that rounds
    to infinity raises ERR_RANGE; inf passes through.  NaN keeps its sign
    and the top 23 payload bits, so a NaN produced by read_bare_float is
    written back with its original bytes.
    """
    v = _check_float(value, "float")
    if math.isnan(v):
        write_all(sink, U32.pack(_nan_double_to_single(v)))
        return
    try:
        data = F32.pack(v)
    except OverflowError:
        raise NbtError(ERR_RANGE, "float {!r} outside float32 range".format(v))
    write_all(sink, data)


def write_bare_double(sink: ByteSink, value: float) -> None:
    write_all(sink, F64.pack(_check_float(value, "double")))


# ── Readers ──────────────────────────────────────────────────

def read_bare_ubyte(source: ByteSource) -> int:
    return U8.unpack(read_exact(source, 1))[0]


def read_bare_byte(source: ByteSource) -> int:
    return I8.unpack(read_exact(source, 1))[0]


def read_bare_short(source: ByteSource) -> int:
    return I16.unpack(read_exact(source, 2))[0]


def read_bare_int(source: ByteSource) -> int:
    return I32.unpack(read_exact(source, 4))[0]


def read_bare_long(source: ByteSource) -> int:
    return I64.unpack(read_exact(source, 8))[0]


def read_bare_float(source: ByteSource) -> float:
    raw = read_exact(source, 4)
    bits = U32.unpack(raw)[0]
    if bits & 0x7F800000 == 0x7F800000 and bits & 0x007FFFFF:
        return _nan_single_to_double(bits)
    return F32.unpack(raw)[0]


def read_bare_double(source: ByteSource) -> float:
    return F64.unpack(read_exact(source, 8))[0]
