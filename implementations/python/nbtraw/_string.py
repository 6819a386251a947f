"""String codec: u16 little-endian byte length, then UTF-8 bytes.

The length counts encoded bytes, not characters: "é" is one character but
a length of 2.  Text whose encoding exceeds MAX_STRING_BYTES is refused
outright; the prefix is never allowed to wrap.
"""

from __future__ import annotations

from ._constants import MAX_STRING_BYTES
from ._errors import ERR_INCOMPLETE, ERR_LIMIT, ERR_TYPE, ERR_UTF8, NbtError
from ._scalar import U16
from ._stream import ByteSink, ByteSource, read_exact, write_all


def encode_text(text: str) -> bytes:
    """Strict UTF-8 encode.  Lone surrogates raise ERR_UTF8."""
    if not isinstance(text, str):
        raise NbtError(ERR_TYPE, "string expects str, got {}".format(
            type(text).__name__))
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError:
        raise NbtError(ERR_UTF8, "text is not encodable as utf-8")


def write_bare_string(sink: ByteSink, text: str) -> None:
    raw = encode_text(text)
    if len(raw) > MAX_STRING_BYTES:
        raise NbtError(ERR_LIMIT, "string of {} bytes exceeds {}".format(
            len(raw), MAX_STRING_BYTES))
    # One write so a buffered sink sees the prefix and payload together.
    write_all(sink, U16.pack(len(raw)) + raw)


def read_bare_string(source: ByteSource) -> str:
    """Read one bare string.

    A source that runs dry inside the payload raises ERR_INCOMPLETE (not
    ERR_EOF), so callers can tell a truncated record from a missing one.
    Invalid UTF-8 raises ERR_UTF8 with the raw payload in `.data`.
    """
    n = U16.unpack(read_exact(source, 2))[0]
    if n == 0:
        return ""
    raw = read_exact(source, n, ERR_INCOMPLETE)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise NbtError(ERR_UTF8, "invalid utf-8: {}".format(e.reason),
                       data=raw) from e
