"""Log decoding against one ABI event definition.

`decode_log_parts` splits a raw log into indexed values (from topics) and body
values (from data, via `eth_abi`), then lifts eth_abi's plain Python results
into the `DecodedValue` union by walking the `eth_abi.grammar` type tree.

Indexed value types are read straight out of their 32-byte word, without
padding checks. Indexed parameters of other types (string, bytes, arrays,
tuples) are stored on the wire as keccak hashes; they come back as
`FixedBytes(topic, 32)`.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from eth_abi import decode as abi_decode
from eth_abi.exceptions import ABITypeError, DecodingError, ParseError
from eth_abi.grammar import ABIType, BasicType, TupleType, parse
from eth_utils import to_canonical_address

from keyed_events.abi_events import AbiEvent, AbiParam
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

_FUNCTION_RE = re.compile(r"\bfunction\b")

WORD = 32


class AbiDecodeError(Exception):
    """Topics/data cannot be decoded with the given event definition."""


@dataclass(slots=True, frozen=True)
class DecodedEvent:
    """Decoded values, each tuple aligned with the matching input partition."""

    indexed: tuple[DecodedValue, ...]
    body: tuple[DecodedValue, ...]


# ---------- type helpers ----------


def _abi_type(param: AbiParam) -> ABIType:
    """Parsed signature type of `param` (tuples expanded, aliases normalized)."""
    try:
        return parse(param.canonical_type())
    except ParseError as e:
        raise AbiDecodeError(f"cannot parse ABI type {param.type!r}: {e}") from e


def _decoder_type(param: AbiParam) -> str:
    """eth_abi type string for `param`; `function` is decoded as bytes24."""
    return _FUNCTION_RE.sub("bytes24", param.canonical_type())


def _unsupported(abi_type: ABIType) -> AbiDecodeError:
    return AbiDecodeError(f"unsupported ABI type: {abi_type.to_type_str()}")


# ---------- lifting ----------


def _lift(abi_type: ABIType, param: AbiParam, raw: Any) -> DecodedValue:
    """Convert one eth_abi result into a `DecodedValue` following `abi_type`."""
    if abi_type.is_array:
        items = tuple(_lift(abi_type.item_type, param, v) for v in raw)
        return FixedArray(items) if abi_type.arrlist[-1] else Array(items)

    if isinstance(abi_type, TupleType):
        components = param.components or ()
        values = tuple(_lift(t, c, v) for t, c, v in zip(abi_type.components, components, raw))
        struct_name = param.struct_name
        if struct_name is None:
            return Tuple(values)
        return CustomStruct(struct_name, tuple(c.name for c in components), values)

    base, sub = abi_type.base, abi_type.sub
    match base:
        case "bool":
            return Bool(raw)
        case "address":
            return Address(to_canonical_address(raw))
        case "function":
            return Function(raw)
        case "string":
            return String(raw)
        case "bytes" if sub is None:
            return Bytes(raw)
        case "bytes":
            return FixedBytes(raw, sub)
        case "uint":
            return Uint(raw, sub)
        case "int":
            return Int(raw, sub)
    raise _unsupported(abi_type)


def _is_value_type(abi_type: ABIType) -> bool:
    """True if the type fits a single word and is emitted in the topic unhashed."""
    if abi_type.is_array or isinstance(abi_type, TupleType):
        return False
    return not (abi_type.base == "string" or (abi_type.base == "bytes" and abi_type.sub is None))


def _word_value(abi_type: BasicType, word: bytes) -> DecodedValue:
    """Read a value type from a topic word, ignoring dirty high-order bits."""
    base, sub = abi_type.base, abi_type.sub
    match base:
        case "bool":
            return Bool(any(word))
        case "address":
            return Address(word[-20:])
        case "function":
            return Function(word[:24])
        case "bytes":
            return FixedBytes(word[:sub], sub)
        case "uint":
            return Uint(int.from_bytes(word, "big") & ((1 << sub) - 1), sub)
        case "int":
            v = int.from_bytes(word, "big") & ((1 << sub) - 1)
            if v >= 1 << (sub - 1):
                v -= 1 << sub
            return Int(v, sub)
    raise _unsupported(abi_type)


def _decode_topic(param: AbiParam, topic: bytes) -> DecodedValue:
    abi_type = _abi_type(param)
    if not _is_value_type(abi_type):
        return FixedBytes(topic, WORD)
    return _word_value(abi_type, topic)


def _decode_body(params: Sequence[AbiParam], data: bytes) -> tuple[DecodedValue, ...]:
    types = [_decoder_type(p) for p in params]
    try:
        raw = abi_decode(types, data, strict=False)
    except (DecodingError, ParseError, ABITypeError, ValueError) as e:
        raise AbiDecodeError(f"cannot decode {types}: {e}") from e
    return tuple(_lift(_abi_type(p), p, v) for p, v in zip(params, raw))


# ---------- main ----------


def decode_log_parts(
    event: AbiEvent,
    topics: Sequence[bytes],
    data: bytes,
    validate: bool = True,
) -> DecodedEvent:
    """Decode `topics` + `data` with `event`, or raise `AbiDecodeError`.

    With `validate`, the topic count must match the number of indexed inputs
    (plus the selector for non-anonymous events) and topic0 must equal the
    selector. Neither topics nor body are checked for clean padding.
    """
    for i, t in enumerate(topics):
        if len(t) != WORD:
            raise AbiDecodeError(f"topic {i} is {len(t)} bytes, expected {WORD}")

    indexed_inputs = event.indexed_inputs
    skip = 0 if event.anonymous else 1
    if validate:
        expected = len(indexed_inputs) + skip
        if len(topics) != expected:
            raise AbiDecodeError(f"{event.name}: expected {expected} topics, got {len(topics)}")
        if not event.anonymous and bytes(topics[0]) != event.selector:
            raise AbiDecodeError(f"{event.name}: topic0 does not match selector")
    elif len(topics) < len(indexed_inputs) + skip:
        raise AbiDecodeError(f"{event.name}: not enough topics ({len(topics)})")

    indexed = tuple(_decode_topic(p, bytes(t)) for p, t in zip(indexed_inputs, topics[skip:]))
    body = _decode_body(event.body_inputs, bytes(data))

    return DecodedEvent(indexed=indexed, body=body)
