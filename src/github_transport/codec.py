"""JSON encoding and decoding for GitHub API payloads.

A single `JSON_CODEC` instance is created at import time and shared by every
request. It holds no mutable state.
"""

import dataclasses
import enum
import json
from datetime import date, datetime
from typing import Any


def _default(obj: Any) -> Any:
    """Convert values the json module cannot serialize natively."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {k: v for k, v in dataclasses.asdict(obj).items() if v is not None}
    if isinstance(obj, enum.Enum):
        return obj.value
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    if isinstance(obj, (set, frozenset)):
        return sorted(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


@dataclasses.dataclass(frozen=True)
class JsonCodec:
    """Structural encode/decode between bytes and Python values."""

    encoding: str = "utf-8"

    def encode(self, obj: Any) -> bytes:
        return json.dumps(obj, default=_default, separators=(",", ":")).encode(self.encoding)

    def decode(self, data: bytes) -> Any:
        """Decode a response body.

        Raises:
            ValueError: If the body is not valid JSON (including bad UTF-8).
        """
        return json.loads(data.decode(self.encoding))

    def to_pretty_string(self, obj: Any) -> str:
        return json.dumps(obj, default=_default, indent=2, sort_keys=True)


JSON_CODEC = JsonCodec()
