"""
Replay blob (format version 1).

Byte layout:
    offset 0,  1 byte:    format version (= 1)
    offset 1,  16 bytes:  replay identifier
    offset 17, 16 bytes:  mission identifier
    offset 33, 16 bytes:  history identifier
    offset 49, 9*N bytes: N event records, in append order

Identifiers use the little-endian GUID layout (uuid.UUID.bytes_le). There is no
event count field; N = (len(blob) - 49) / 9.
"""

import os
import uuid
from typing import Iterable, List, Optional

from ..core.events import RECORD_SIZE, MissionEvent
from ..core.ids import identifier_bytes, new_identifier
from ..logging_config import get_logger
from .file_store import FileBlobStore
from .store import BlobStore, WriteResult

FORMAT_VERSION = 1
HEADER_SIZE = 1 + 3 * 16  # 49


def event_count_for_length(total_len: int) -> int:
    """
    Number of event records in a serialized blob of total_len bytes.

    Raises:
        ValueError: If total_len is not a valid v1 blob length
    """
    body = total_len - HEADER_SIZE
    if body < 0 or body % RECORD_SIZE:
        raise ValueError(f"invalid v1 blob length: {total_len}")
    return body // RECORD_SIZE


class ReplayBlob:
    """
    Versioned container for one mission's event timeline.

    Identifiers are generated at creation and never change. Events keep their
    append order. A blob is owned by a single writer: appends are not
    synchronized.

    Usage:
        blob = ReplayBlob.create()
        blob.append(MissionEvent(0, EventKind.MissionStart))
        blob.save(FileBlobStore("/var/replays"))
    """

    def __init__(
        self,
        replay_id: Optional[uuid.UUID] = None,
        mission_id: Optional[uuid.UUID] = None,
        history_id: Optional[uuid.UUID] = None,
    ) -> None:
        self._replay_id = replay_id or new_identifier()
        self._mission_id = mission_id or new_identifier()
        self._history_id = history_id or new_identifier()
        self._events: List[MissionEvent] = []
        self.logger = get_logger(__name__, trace_id=str(self._replay_id))

    @classmethod
    def create(cls) -> "ReplayBlob":
        """Empty blob with three fresh random identifiers."""
        return cls()

    @property
    def version(self) -> int:
        return FORMAT_VERSION

    @property
    def replay_id(self) -> uuid.UUID:
        return self._replay_id

    @property
    def mission_id(self) -> uuid.UUID:
        return self._mission_id

    @property
    def history_id(self) -> uuid.UUID:
        return self._history_id

    @property
    def events(self) -> List[MissionEvent]:
        """Copy of the event sequence."""
        return list(self._events)

    @property
    def file_name(self) -> str:
        """Intended name of the persisted blob: the replay identifier."""
        return str(self._replay_id)

    def __len__(self) -> int:
        return len(self._events)

    def append(self, event: MissionEvent) -> None:
        self._events.append(event)

    def extend(self, events: Iterable[MissionEvent]) -> None:
        for event in events:
            self.append(event)

    def header_bytes(self) -> bytes:
        return (
            bytes([FORMAT_VERSION])
            + identifier_bytes(self._replay_id)
            + identifier_bytes(self._mission_id)
            + identifier_bytes(self._history_id)
        )

    def serialize(self) -> bytes:
        """
        Serialize header and all events.

        Returns:
            HEADER_SIZE + RECORD_SIZE * len(self) bytes
        """
        parts = [self.header_bytes()]
        parts.extend(event.to_bytes() for event in self._events)
        data = b"".join(parts)
        self.logger.debug("serialized %d events into %d bytes", len(self._events), len(data))
        return data

    def save(self, store: BlobStore) -> WriteResult:
        """
        Serialize and hand the bytes to a storage collaborator under file_name.

        Raises:
            BlobStoreError: Propagated from the store
        """
        result = store.put(self.file_name, self.serialize())
        self.logger.info("saved replay blob to %s (%d bytes)", result.location, result.size)
        return result

    def to_file(self, path: Optional[str] = None) -> WriteResult:
        """
        Write the blob to the current directory as {replay_id}.

        The destination argument is accepted but not used: output location is
        always derived from the replay identifier. Use save() to choose a store.
        """
        cwd = os.getcwd()
        if path is not None and os.path.abspath(path) != os.path.join(cwd, self.file_name):
            self.logger.warning(
                "destination %s ignored; writing %s to current directory", path, self.file_name
            )
        return self.save(FileBlobStore(cwd))
