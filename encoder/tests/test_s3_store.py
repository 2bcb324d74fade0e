"""
Unit tests for S3BlobStore using moto (S3 mock).
"""

import boto3
import pytest
from moto import mock_aws

from encoder.blob import ReplayBlob
from encoder.blob.s3_store import S3BlobStore
from encoder.core.errors import BlobStoreError
from encoder.core.events import EventKind, MissionEvent


@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch):
    """Fake credentials so boto3 never touches a real account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.delenv("MISSION_ENCODER_S3_SKIP_BUCKET_CHECK", raising=False)


@mock_aws
def test_put_object_roundtrip():
    s3_client = boto3.client("s3", region_name="us-east-1")
    s3_client.create_bucket(Bucket="replays")

    store = S3BlobStore(bucket="replays", prefix="mission")
    result = store.put("abc", b"\x01payload")

    assert result.location == "s3://replays/mission/abc"
    assert result.size == 8
    body = s3_client.get_object(Bucket="replays", Key="mission/abc")["Body"].read()
    assert body == b"\x01payload"


@mock_aws
def test_blob_saved_under_replay_id():
    s3_client = boto3.client("s3", region_name="us-east-1")
    s3_client.create_bucket(Bucket="replays")

    blob = ReplayBlob.create()
    blob.append(MissionEvent(0, EventKind.MissionStart))
    blob.save(S3BlobStore(bucket="replays"))

    key = f"replays/{blob.replay_id}"
    body = s3_client.get_object(Bucket="replays", Key=key)["Body"].read()
    assert body == blob.serialize()


@mock_aws
def test_empty_prefix_uses_bare_name():
    s3_client = boto3.client("s3", region_name="us-east-1")
    s3_client.create_bucket(Bucket="replays")

    store = S3BlobStore(bucket="replays", prefix="")
    assert store.key_for("abc") == "abc"


@mock_aws
def test_missing_bucket_rejected():
    with pytest.raises(BlobStoreError):
        S3BlobStore(bucket="does-not-exist")


@mock_aws
def test_put_failure_raises_store_error(monkeypatch):
    monkeypatch.setenv("MISSION_ENCODER_S3_SKIP_BUCKET_CHECK", "true")
    store = S3BlobStore(bucket="does-not-exist")

    with pytest.raises(BlobStoreError):
        store.put("abc", b"data")
