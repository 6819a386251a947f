"""nbtraw: bare-value codec for little-endian NBT.

Reads and writes the primitive payloads of an NBT-style tree (scalars,
strings, arrays), the (tag, name) headers that precede them inside a
container, and the 0x00 byte that closes a container.  Building the tree,
mapping tags to codecs and (de)compression are left to the caller.

Every function takes a binary stream and advances it by exactly one value:

    >>> import io
    >>> from nbtraw import write_bare_string, read_bare_string
    >>> buf = io.BytesIO()
    >>> write_bare_string(buf, "AB")
    >>> buf.getvalue()
    b'\\x02\\x00AB'
    >>> read_bare_string(io.BytesIO(buf.getvalue()))
    'AB'

Failures raise NbtError; compare `.code` against the ERR_* constants.
"""

from __future__ import annotations

import logging

from ._array import (
    read_bare_byte_array,
    read_bare_int_array,
    read_bare_long_array,
    write_bare_byte_array,
    write_bare_int_array,
    write_bare_long_array,
)
from ._constants import (
    INT8_MAX,
    INT8_MIN,
    INT16_MAX,
    INT16_MIN,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    MAX_ARRAY_COUNT,
    MAX_STRING_BYTES,
    READ_CHUNK_BYTES,
    TAG_END,
)
from ._errors import (
    ERR_EOF,
    ERR_INCOMPLETE,
    ERR_IO,
    ERR_LENGTH,
    ERR_LIMIT,
    ERR_RANGE,
    ERR_TYPE,
    ERR_UTF8,
    ERR_VALUE,
    NbtError,
)
from ._header import read_header, write_header, write_terminator
from ._scalar import (
    read_bare_byte,
    read_bare_double,
    read_bare_float,
    read_bare_int,
    read_bare_long,
    read_bare_short,
    read_bare_ubyte,
    write_bare_byte,
    write_bare_double,
    write_bare_float,
    write_bare_int,
    write_bare_long,
    write_bare_short,
    write_bare_ubyte,
)
from ._stream import ByteSink, ByteSource
from ._string import read_bare_string, write_bare_string

logging.getLogger("nbtraw").addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Header codec
    "read_header",
    "write_header",
    "write_terminator",
    # Scalar codec
    "read_bare_byte",
    "read_bare_short",
    "read_bare_int",
    "read_bare_long",
    "read_bare_float",
    "read_bare_double",
    "read_bare_ubyte",
    "write_bare_byte",
    "write_bare_short",
    "write_bare_int",
    "write_bare_long",
    "write_bare_float",
    "write_bare_double",
    "write_bare_ubyte",
    # String codec
    "read_bare_string",
    "write_bare_string",
    # Array codec
    "read_bare_byte_array",
    "read_bare_int_array",
    "read_bare_long_array",
    "write_bare_byte_array",
    "write_bare_int_array",
    "write_bare_long_array",
    # Stream capabilities
    "ByteSink",
    "ByteSource",
    # Exception
    "NbtError",
    # Error codes
    "ERR_IO",
    "ERR_EOF",
    "ERR_INCOMPLETE",
    "ERR_UTF8",
    "ERR_TYPE",
    "ERR_RANGE",
    "ERR_LENGTH",
    "ERR_LIMIT",
    "ERR_VALUE",
    # Limits
    "TAG_END",
    "INT8_MIN",
    "INT8_MAX",
    "INT16_MIN",
    "INT16_MAX",
    "INT32_MIN",
    "INT32_MAX",
    "INT64_MIN",
    "INT64_MAX",
    "MAX_STRING_BYTES",
    "MAX_ARRAY_COUNT",
    "READ_CHUNK_BYTES",
]
