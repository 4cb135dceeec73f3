"""JSON ABI event definitions.

Pydantic models for the `event` entries of a contract ABI, their canonical
signatures and topic0 selectors. Non-event entries are ignored on load.
"""

from __future__ import annotations

import json
import re
from collections.abc import Iterable, Sequence
from functools import cached_property
from pathlib import Path
from typing import Any, Literal

from eth_utils.abi import event_signature_to_log_topic
from pydantic import BaseModel, ConfigDict

# shorthand base types and their canonical spelling in signatures
_TYPE_ALIASES = {"uint": "uint256", "int": "int256", "fixed": "fixed128x18", "ufixed": "ufixed128x18", "byte": "bytes1"}
_ALIAS_RE = re.compile(r"^(uint|int|fixed|ufixed|byte)(?=\[|$)")


def normalize_type(abi_type: str) -> str:
    """Expand a bare alias base (`uint[]` → `uint256[]`); other types are returned as is."""
    return _ALIAS_RE.sub(lambda m: _TYPE_ALIASES[m.group(1)], abi_type)


class AbiParam(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    type: str
    internalType: str | None = None
    indexed: bool = False
    components: Sequence[AbiParam] | None = None

    def canonical_type(self) -> str:
        """Type as it appears in the event signature (tuples expanded)."""
        if not self.type.startswith("tuple"):
            return normalize_type(self.type)
        inner = ",".join(c.canonical_type() for c in self.components or ())
        return f"({inner}){self.type[len('tuple'):]}"

    @property
    def struct_name(self) -> str | None:
        """Struct name from `internalType` (e.g. "struct Pool.Key[]" → "Pool.Key")."""
        it = self.internalType or ""
        if not it.startswith("struct "):
            return None
        return it[len("struct ") :].split("[", 1)[0]


class AbiEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    inputs: Sequence[AbiParam] = ()
    anonymous: bool = False
    type: Literal["event"] = "event"

    @property
    def signature(self) -> str:
        return get_event_signature(self)

    @cached_property
    def selector(self) -> bytes:
        """32-byte topic0 of this event."""
        return get_event_selector(self)

    @property
    def indexed_inputs(self) -> list[AbiParam]:
        return [p for p in self.inputs if p.indexed]

    @property
    def body_inputs(self) -> list[AbiParam]:
        return [p for p in self.inputs if not p.indexed]


class Abi(BaseModel):
    """Read-only set of event definitions, in ABI declaration order."""

    model_config = ConfigDict(frozen=True)

    events: tuple[AbiEvent, ...] = ()

    def find_event(self, selector: bytes) -> AbiEvent | None:
        """First event whose selector equals `selector`."""
        for event in self.events:
            if event.selector == selector:
                return event
        return None


def get_event_signature(event: AbiEvent) -> str:
    return f"{event.name}({','.join(p.canonical_type() for p in event.inputs)})"


def get_event_selector(event: AbiEvent) -> bytes:
    return bytes(event_signature_to_log_topic(get_event_signature(event)))


def get_event_topic0(event: AbiEvent) -> str:
    return "0x" + get_event_selector(event).hex()


AbiJson = Iterable[dict[str, Any]]
AbiSource = AbiJson | Path | str


def _load_abi(abi: AbiSource) -> AbiJson:
    if isinstance(abi, (str, Path)):
        try:
            abi = json.loads(Path(abi).read_text())
        except json.JSONDecodeError as e:
            raise ValueError(f"ABI file is not valid JSON: {abi}") from e
    # Hardhat/Foundry artifacts wrap the ABI
    if isinstance(abi, dict):
        if "abi" not in abi:
            raise ValueError("ABI must be a JSON list or an object with an 'abi' key")
        abi = abi["abi"]
    return abi


def get_events_from_abi(abi: AbiSource) -> list[AbiEvent]:
    return [AbiEvent.model_validate(entry) for entry in _load_abi(abi) if entry.get("type") == "event"]


def load_abi(abi: AbiSource) -> Abi:
    """Build an `Abi` from a JSON file path or already-parsed ABI entries."""
    return Abi(events=tuple(get_events_from_abi(abi)))


__all__ = [
    "Abi",
    "AbiEvent",
    "AbiParam",
    "get_event_selector",
    "get_event_signature",
    "get_event_topic0",
    "get_events_from_abi",
    "load_abi",
    "normalize_type",
]
