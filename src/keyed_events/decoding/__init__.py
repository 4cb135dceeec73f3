"""Event decoding against a JSON ABI.

This package provides:
- Decoded value union (Bool, Int, Uint, ..., CustomStruct)
- `decode_log_parts`: split a log into indexed and body values with eth_abi
- `to_json_value`: canonical JSON-like encoding of decoded values
- `EventParser`: raw log → `KeyedEvent` or a `ParsingError`
"""

from keyed_events.decoding.abi_decoder import AbiDecodeError, DecodedEvent, decode_log_parts
from keyed_events.decoding.errors import DecodingError, MalformedLog, ParsingError, UnknownEvent
from keyed_events.decoding.normalize import to_json_value
from keyed_events.decoding.parser import EventParser, KeyedEvent, ParseResult

__all__ = [
    "AbiDecodeError",
    "DecodedEvent",
    "decode_log_parts",
    "DecodingError",
    "MalformedLog",
    "ParsingError",
    "UnknownEvent",
    "to_json_value",
    "EventParser",
    "KeyedEvent",
    "ParseResult",
]
