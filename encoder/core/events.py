"""
Mission events and their fixed-width binary record.

Record layout (9 bytes, little-endian):
    offset 0, 8 bytes: timestamp in whole seconds (unsigned)
    offset 8, 1 byte:  EventKind ordinal
"""

import enum
import struct
from dataclasses import dataclass
from datetime import timedelta
from typing import Union

_RECORD = struct.Struct("<QB")

RECORD_SIZE = _RECORD.size  # 9


class EventKind(enum.IntEnum):
    """
    Event categories. Ordinals are part of the wire format: never reorder.
    """
    ObjectCreated = 0
    ObjectKilled = 1
    Fired = 2
    MarkerCreated = 3
    MarkerDestroyed = 4
    MarkerUpdated = 5
    ObjectGetIn = 6
    ObjectGetOut = 7
    Custom = 8
    MissionStart = 9
    MissionEnd = 10


def encode_event(timestamp: int, kind: Union[EventKind, int]) -> bytes:
    """
    Encode one event record.

    Caller guarantees 0 <= timestamp < 2**64 and a valid kind.

    Returns:
        9 bytes: little-endian u64 seconds followed by the kind ordinal
    """
    return _RECORD.pack(timestamp, int(kind))


@dataclass(frozen=True)
class MissionEvent:
    """
    One observed occurrence during a mission.

    Fields:
        timestamp: Seconds since mission start
        kind: Event category
    """
    timestamp: int
    kind: EventKind

    @classmethod
    def from_duration(cls, elapsed: timedelta, kind: EventKind) -> "MissionEvent":
        """Build from elapsed time, truncated to whole seconds."""
        return cls(timestamp=elapsed // timedelta(seconds=1), kind=kind)

    def to_bytes(self) -> bytes:
        return encode_event(self.timestamp, self.kind)
