"""
Tests for the replay blob byte layout.
"""

import os
import uuid

import pytest

from encoder.blob import FORMAT_VERSION, HEADER_SIZE, FileBlobStore, ReplayBlob, event_count_for_length
from encoder.core.events import EventKind, MissionEvent


def test_empty_blob_is_header_only():
    blob = ReplayBlob.create()
    data = blob.serialize()

    assert len(data) == HEADER_SIZE == 49
    assert data[0] == FORMAT_VERSION == 1
    assert data[1:17] == blob.replay_id.bytes_le
    assert data[17:33] == blob.mission_id.bytes_le
    assert data[33:49] == blob.history_id.bytes_le


def test_identifiers_are_fresh_and_distinct():
    a = ReplayBlob.create()
    b = ReplayBlob.create()

    ids = {a.replay_id, a.mission_id, a.history_id, b.replay_id, b.mission_id, b.history_id}
    assert len(ids) == 6
    assert a.replay_id.version == 4


def test_identifier_byte_order():
    """GUID little-endian layout: first three fields swapped, tail kept."""
    replay_id = uuid.UUID("00112233-4455-6677-8899-aabbccddeeff")
    blob = ReplayBlob(replay_id=replay_id)

    assert blob.serialize()[1:17] == bytes.fromhex("33221100554477668899aabbccddeeff")


def test_events_appended_in_order():
    blob = ReplayBlob.create()
    events = [
        MissionEvent(0, EventKind.MissionStart),
        MissionEvent(30, EventKind.Fired),
        MissionEvent(5, EventKind.ObjectKilled),
        MissionEvent(600, EventKind.MissionEnd),
    ]
    blob.extend(events)

    data = blob.serialize()
    assert len(data) == HEADER_SIZE + 9 * len(events)
    body = data[HEADER_SIZE:]
    for i, event in enumerate(events):
        assert body[i * 9 : (i + 1) * 9] == event.to_bytes()


def test_serialize_is_repeatable():
    blob = ReplayBlob.create()
    blob.append(MissionEvent(457853, EventKind.Custom))

    assert blob.serialize() == blob.serialize()
    assert len(blob) == 1


def test_events_property_is_a_copy():
    blob = ReplayBlob.create()
    blob.events.append(MissionEvent(1, EventKind.Custom))
    assert len(blob) == 0


def test_event_count_for_length():
    assert event_count_for_length(49) == 0
    assert event_count_for_length(49 + 9 * 7) == 7
    with pytest.raises(ValueError):
        event_count_for_length(48)
    with pytest.raises(ValueError):
        event_count_for_length(50)


def test_file_name_is_replay_id():
    blob = ReplayBlob.create()
    assert blob.file_name == str(blob.replay_id)


def test_save_uses_store(tmp_path):
    blob = ReplayBlob.create()
    blob.append(MissionEvent(1, EventKind.ObjectCreated))

    result = blob.save(FileBlobStore(str(tmp_path)))

    path = tmp_path / blob.file_name
    assert result.location == str(path)
    assert result.size == HEADER_SIZE + 9
    assert path.read_bytes() == blob.serialize()


def test_to_file_ignores_destination(tmp_path, monkeypatch, caplog):
    """Output location is always derived from the replay identifier."""
    monkeypatch.chdir(tmp_path)
    blob = ReplayBlob.create()

    with caplog.at_level("WARNING"):
        result = blob.to_file(os.path.join(str(tmp_path), "elsewhere", "custom.bin"))

    assert os.path.exists(tmp_path / blob.file_name)
    assert not os.path.exists(tmp_path / "elsewhere")
    assert result.size == HEADER_SIZE
    assert "ignored" in caplog.text
