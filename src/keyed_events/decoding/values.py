"""Decoded ABI values as a closed tagged union.

One frozen dataclass per ABI type category. Values are produced by
`decode_log_parts` and consumed once by `to_json_value`.

- Scalars: `Bool`, `Int`, `Uint`, `FixedBytes`, `Address`, `Function`, `Bytes`, `String`
- Composites: `Array`, `FixedArray`, `Tuple`, `CustomStruct`
"""

from __future__ import annotations

from dataclasses import dataclass

# ---------- scalars ----------


@dataclass(slots=True, frozen=True)
class Bool:
    value: bool


@dataclass(slots=True, frozen=True)
class Int:
    """Signed integer of `bits` width (8..256)."""

    value: int
    bits: int


@dataclass(slots=True, frozen=True)
class Uint:
    """Unsigned integer of `bits` width (8..256)."""

    value: int
    bits: int


@dataclass(slots=True, frozen=True)
class FixedBytes:
    """`bytesN`; `value` holds exactly `size` bytes."""

    value: bytes
    size: int


@dataclass(slots=True, frozen=True)
class Address:
    value: bytes  # 20 raw bytes


@dataclass(slots=True, frozen=True)
class Function:
    """External function reference: 20-byte address followed by 4-byte selector."""

    value: bytes  # 24 raw bytes


@dataclass(slots=True, frozen=True)
class Bytes:
    value: bytes


@dataclass(slots=True, frozen=True)
class String:
    value: str


# ---------- composites ----------


@dataclass(slots=True, frozen=True)
class Array:
    items: tuple[DecodedValue, ...]


@dataclass(slots=True, frozen=True)
class FixedArray:
    items: tuple[DecodedValue, ...]


@dataclass(slots=True, frozen=True)
class Tuple:
    items: tuple[DecodedValue, ...]


@dataclass(slots=True, frozen=True)
class CustomStruct:
    """Tuple declared as a named struct; `prop_names` align with `values`."""

    name: str
    prop_names: tuple[str, ...]
    values: tuple[DecodedValue, ...]


DecodedValue = (
    Bool
    | Int
    | Uint
    | FixedBytes
    | Address
    | Function
    | Bytes
    | String
    | Array
    | FixedArray
    | Tuple
    | CustomStruct
)
