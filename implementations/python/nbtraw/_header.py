"""Header codec: the (tag, name) pair in front of every named value.

    tag != 0:  [tag u8][name: bare string]
    tag == 0:  [0x00]            -- container terminator, no name

The tag is opaque here; deciding which codec follows it belongs to the
caller walking the tree.
"""

from __future__ import annotations

from typing import Tuple

from ._constants import TAG_END
from ._errors import ERR_VALUE, NbtError
from ._scalar import read_bare_ubyte, write_bare_ubyte
from ._string import read_bare_string, write_bare_string
from ._stream import ByteSink, ByteSource


def write_terminator(sink: ByteSink) -> None:
    """Close the open container: one 0x00 byte."""
    write_bare_ubyte(sink, TAG_END)


def write_header(sink: ByteSink, tag: int, name: str = "") -> None:
    """Write a tag byte and, unless the tag is TAG_END, its name."""
    if tag == TAG_END:
        if name:
            raise NbtError(ERR_VALUE, "terminator tag cannot carry a name")
        write_terminator(sink)
        return
    write_bare_ubyte(sink, tag)
    write_bare_string(sink, name)


def read_header(source: ByteSource) -> Tuple[int, str]:
    """Read the next header.

    Returns (0, "") for a terminator without reading anything past the tag
    byte; otherwise (tag, name).
    """
    tag = read_bare_ubyte(source)
    if tag == TAG_END:
        return TAG_END, ""
    return tag, read_bare_string(source)
