"""
Telemetry ingestion: parsed values -> mission events.

One event per line, written as a value token:
    [<seconds>, "<EventKind name>"]    e.g. [457853, "Custom"]
    [<seconds>, <ordinal>]             e.g. [457853, 8]
"""

import logging
from typing import Iterable, Iterator

from .core.errors import ParseError, TelemetryError
from .core.events import EventKind, MissionEvent
from .core.parser import parse
from .core.values import Array, Number, String, Value, type_name

logger = logging.getLogger(__name__)

_MAX_TIMESTAMP = 2 ** 64 - 1


def _whole_number(value: Value, what: str, upper: int) -> int:
    if not isinstance(value, Number):
        raise TelemetryError(f"{what} must be a Number, got {type_name(value)}")
    n = value.value
    if not n.is_integer() or n < 0 or n > upper:
        raise TelemetryError(f"{what} out of range: {n!r}")
    return int(n)


def event_from_value(value: Value) -> MissionEvent:
    """
    Convert a parsed [seconds, kind] array into a MissionEvent.

    Raises:
        TelemetryError: If the value does not describe an event
    """
    if not isinstance(value, Array) or len(value) != 2:
        raise TelemetryError(f"expected [seconds, kind], got {type_name(value)}")

    seconds_value, kind_value = value.items
    timestamp = _whole_number(seconds_value, "timestamp", _MAX_TIMESTAMP)

    if isinstance(kind_value, String):
        try:
            kind = EventKind[kind_value.value]
        except KeyError:
            raise TelemetryError(f"unknown event kind: {kind_value.value!r}") from None
    else:
        kind = EventKind(_whole_number(kind_value, "event kind", max(EventKind)))

    return MissionEvent(timestamp=timestamp, kind=kind)


def read_events(lines: Iterable[str]) -> Iterator[MissionEvent]:
    """
    Parse telemetry lines into events, in input order.

    Blank lines are skipped. Surrounding whitespace is removed before parsing.

    Raises:
        TelemetryError: On the first bad line (line number attached)
    """
    for lineno, line in enumerate(lines, start=1):
        token = line.strip()
        if not token:
            continue
        try:
            value = parse(token)
            event = event_from_value(value)
        except ParseError as ex:
            raise TelemetryError(f"{type(ex).__name__}: {token!r}", line=lineno) from ex
        except TelemetryError as ex:
            raise TelemetryError(str(ex), line=lineno) from ex
        logger.debug("line %d: %s at %ds", lineno, event.kind.name, event.timestamp)
        yield event
