"""nbtraw error codes and exception class.

Every failure in the codec surfaces as an NbtError whose `.code` is one of
the ERR_* strings below.  Callers that only care about "the stream ended
mid-record" versus "the stream broke" compare codes; nothing here retries
or recovers.
"""

from __future__ import annotations

from typing import Optional

# ── Error codes ──────────────────────────────────────────────

ERR_IO: str = "ERR_IO"                  # sink/source raised or refused bytes
ERR_EOF: str = "ERR_EOF"                # source ended inside a fixed-width field
ERR_INCOMPLETE: str = "ERR_INCOMPLETE"  # source ended inside a string payload
ERR_UTF8: str = "ERR_UTF8"              # invalid UTF-8 / unencodable text
ERR_TYPE: str = "ERR_TYPE"              # wrong Python type handed to a writer
ERR_RANGE: str = "ERR_RANGE"            # value outside the kind's domain
ERR_LENGTH: str = "ERR_LENGTH"          # negative array count on the wire
ERR_LIMIT: str = "ERR_LIMIT"            # length over a wire or caller limit
ERR_VALUE: str = "ERR_VALUE"            # inconsistent arguments


class NbtError(Exception):
    """Exception for every nbtraw encode/decode failure.

    `.code` is one of the ERR_* strings above.  For ERR_UTF8 raised while
    reading, `.data` holds the undecoded payload bytes; otherwise it is None.
    Transport failures are chained to the original OSError via __cause__.
    """

    def __init__(self, code: str, msg: str = "",
                 data: Optional[bytes] = None) -> None:
        super().__init__(msg or code)
        self.code = code
        self.data = data
