"""nbtraw constants: wire limits, integer ranges, and the terminator tag.

Every bound here is a property of the little-endian wire layout, not a
policy choice, except READ_CHUNK_BYTES which only controls how much the
array readers pull from a source per call.
"""

from __future__ import annotations

# The terminator tag.  A header with this tag carries no name.
TAG_END: int = 0x00

# ── Two's-complement integer ranges ──────────────────────────
# Python ints are arbitrary-precision, so writers must range-check
# explicitly before packing.
INT8_MIN: int = -(2**7)
INT8_MAX: int = 2**7 - 1
INT16_MIN: int = -(2**15)
INT16_MAX: int = 2**15 - 1
INT32_MIN: int = -(2**31)
INT32_MAX: int = 2**31 - 1
INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1

UINT8_MAX: int = 2**8 - 1
UINT16_MAX: int = 2**16 - 1

# ── Length prefixes ──────────────────────────────────────────
# Strings carry a u16 byte count; arrays carry an i32 element count.
MAX_STRING_BYTES: int = UINT16_MAX
MAX_ARRAY_COUNT: int = INT32_MAX

# Array readers never ask the source for more than this many bytes at a
# time, so a corrupt count can't force a huge up-front allocation.
READ_CHUNK_BYTES: int = 65_536
