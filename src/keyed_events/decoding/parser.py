"""ABI-driven event parser.

Turns a `RawLog` into a `KeyedEvent`: the event name plus a dict of parameter
name → JSON-like value. Indexed parameters come first, then body parameters,
each in ABI declaration order.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from keyed_events.abi_events import Abi
from keyed_events.core.models import RawLog
from keyed_events.decoding.abi_decoder import AbiDecodeError, decode_log_parts
from keyed_events.decoding.errors import DecodingError, MalformedLog, ParsingError, UnknownEvent
from keyed_events.decoding.normalize import to_json_value

logger = logging.getLogger(__name__)


# ---------- keyed event ----------


@dataclass(slots=True)
class KeyedEvent:
    """A decoded event, self-describing through its parameter names."""

    name: str
    data: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "data": self.data}

    def to_json(self) -> str:
        """Serialize as a compact JSON line (no trailing newline)."""
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @classmethod
    def from_dict(cls, obj: dict[str, Any]) -> KeyedEvent:
        """Rebuild from the `{"name": ..., "data": {...}}` shape of `to_dict`."""
        try:
            name, data = obj["name"], obj["data"]
        except KeyError as e:
            raise ValueError(f"keyed event is missing {e.args[0]!r}") from e
        if not isinstance(name, str) or not isinstance(data, dict):
            raise ValueError("keyed event needs a string 'name' and an object 'data'")
        return cls(name=name, data=data)

    @classmethod
    def from_json(cls, line: str) -> KeyedEvent:
        return cls.from_dict(json.loads(line))


ParseResult = KeyedEvent | ParsingError


# ---------- parser ----------


class EventParser:
    """Parse raw logs against one ABI.

    The ABI is borrowed, never copied or mutated, so one parser can serve
    concurrent threads.
    """

    def __init__(self, abi: Abi) -> None:
        self._abi = abi

    @property
    def abi(self) -> Abi:
        return self._abi

    def parse(self, log: RawLog) -> ParseResult:
        """Return the `KeyedEvent` for `log`, or the `ParsingError` explaining why not."""
        if not log.topics:
            return MalformedLog("log has no topics")

        selector = bytes(log.topics[0])
        definition = self._abi.find_event(selector)
        if definition is None:
            logger.debug("no event for selector 0x%s", selector.hex())
            return UnknownEvent(selector)

        try:
            decoded = decode_log_parts(definition, log.topics, log.data, validate=True)
        except AbiDecodeError as e:
            logger.debug("decoding %s failed: %s", definition.name, e)
            return DecodingError(definition.name, e)

        # decoder guarantees each value tuple matches its input partition
        indexed = zip(definition.indexed_inputs, decoded.indexed)
        body = zip(definition.body_inputs, decoded.body)

        values: dict[str, Any] = {}
        for param, value in (*indexed, *body):
            values[param.name] = to_json_value(value)

        return KeyedEvent(name=definition.name, data=values)

    def parse_many(self, logs: Iterable[RawLog]) -> Iterator[ParseResult]:
        """Parse each log independently; failures are yielded, not raised."""
        for log in logs:
            yield self.parse(log)
