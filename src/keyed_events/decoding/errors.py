"""Parse failures.

`EventParser.parse` returns these instead of raising them; they subclass
`Exception` so callers that prefer exceptions can raise the returned value.
"""

from __future__ import annotations


class ParsingError(Exception):
    """Base class for every parse failure."""


class UnknownEvent(ParsingError):
    """topic0 matches no event in the ABI (wrong ABI, unrelated contract)."""

    def __init__(self, selector: bytes) -> None:
        super().__init__(f"event not found for given abi: 0x{selector.hex()}")
        self.selector = selector


class DecodingError(ParsingError):
    """The event was found but its topics/data do not decode (ABI version skew)."""

    def __init__(self, event: str, cause: Exception) -> None:
        super().__init__(f"could not decode {event}, abi might mismatch data: {cause}")
        self.event = event
        self.cause = cause


class MalformedLog(ParsingError):
    """The log cannot be matched at all (no topics)."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason
