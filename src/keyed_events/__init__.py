from __future__ import annotations

from .abi_events import Abi, AbiEvent, AbiParam, load_abi
from .core.models import RawLog
from .decoding.errors import DecodingError, MalformedLog, ParsingError, UnknownEvent
from .decoding.normalize import to_json_value
from .decoding.parser import EventParser, KeyedEvent

__all__ = [
    "Abi",
    "AbiEvent",
    "AbiParam",
    "load_abi",
    "RawLog",
    "EventParser",
    "KeyedEvent",
    "ParsingError",
    "UnknownEvent",
    "DecodingError",
    "MalformedLog",
    "to_json_value",
]
