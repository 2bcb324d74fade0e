"""
Core primitives.

- Values: typed telemetry values (Number, String, Boolean, Array)
- Parser: telemetry text -> Value
- Events: mission event categories and 9-byte records
- IDs: random 128-bit identifiers
"""

from .values import Value, Number, String, Boolean, Array, type_name
from .parser import parse
from .events import EventKind, MissionEvent, encode_event, RECORD_SIZE
from .ids import new_identifier, identifier_bytes
from .errors import (
    ParseError,
    NothingToParse,
    ArrayNoClosingBracket,
    StringNoClosingQuote,
    NumberBadData,
    TelemetryError,
    BlobStoreError,
)

__all__ = [
    "Value",
    "Number",
    "String",
    "Boolean",
    "Array",
    "type_name",
    "parse",
    "EventKind",
    "MissionEvent",
    "encode_event",
    "RECORD_SIZE",
    "new_identifier",
    "identifier_bytes",
    "ParseError",
    "NothingToParse",
    "ArrayNoClosingBracket",
    "StringNoClosingQuote",
    "NumberBadData",
    "TelemetryError",
    "BlobStoreError",
]
