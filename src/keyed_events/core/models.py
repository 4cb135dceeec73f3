"""Core data models.

- `RawLog`: one emitted log, topics and data as raw bytes.

Logs usually arrive as JSON-RPC (`eth_getLogs`) or Etherscan objects where
topics and data are 0x-hex strings; `RawLog.from_rpc` converts those.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from eth_utils import to_bytes


def _hex_to_bytes(value: str | bytes, what: str) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    try:
        return to_bytes(hexstr=value)
    except (ValueError, TypeError) as e:
        raise ValueError(f"{what} is not valid hex: {value!r}") from e


@dataclass(slots=True, frozen=True)
class RawLog:
    """Raw log: topic list (topic0 = event selector) and ABI-encoded body."""

    topics: tuple[bytes, ...]
    data: bytes = b""

    @classmethod
    def from_hex(cls, topics: Sequence[str | bytes], data: str | bytes = "0x") -> RawLog:
        return cls(
            topics=tuple(_hex_to_bytes(t, "topic") for t in topics),
            data=_hex_to_bytes(data, "data"),
        )

    @classmethod
    def from_rpc(cls, obj: Mapping[str, Any]) -> RawLog:
        """Build from a JSON-RPC / Etherscan log object (`topics`, `data` keys)."""
        if "topics" not in obj:
            raise ValueError("log object has no 'topics'")
        # Etherscan pads missing topics with null / empty strings
        topics = [t for t in obj["topics"] if t]
        return cls.from_hex(topics, obj.get("data") or "0x")
