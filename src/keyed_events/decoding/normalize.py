"""Canonical JSON-like encoding of decoded ABI values.

Encoding rules:
- integers (signed or unsigned, any width) → base-10 string (JSON-safe for uint256)
- `bytesN` and `bytes` → standard base64
- addresses → EIP-55 checksummed hex
- function references → 0x-prefixed hex of address + selector
- arrays, fixed arrays and tuples → lists; named structs → dicts (struct name dropped)
"""

from __future__ import annotations

import base64
from typing import Any

from eth_utils import to_checksum_address  # type: ignore[attr-defined]

from keyed_events.decoding.values import (
    Address,
    Array,
    Bool,
    Bytes,
    CustomStruct,
    DecodedValue,
    FixedArray,
    FixedBytes,
    Function,
    Int,
    String,
    Tuple,
    Uint,
)

JsonValue = bool | str | list[Any] | dict[str, Any]


def to_json_value(value: DecodedValue) -> JsonValue:
    """Recursively convert one decoded value into its JSON-like form."""
    match value:
        case Bool():
            return value.value
        case Int() | Uint():
            return str(value.value)
        case FixedBytes() | Bytes():
            return base64.b64encode(value.value).decode("ascii")
        case Address():
            return to_checksum_address(value.value)
        case Function():
            return "0x" + value.value.hex()
        case String():
            return value.value
        case Array() | FixedArray() | Tuple():
            return [to_json_value(v) for v in value.items]
        case CustomStruct():
            return {k: to_json_value(v) for k, v in zip(value.prop_names, value.values)}
    raise RuntimeError(f"Unsupported decoded value: {type(value).__name__}")
