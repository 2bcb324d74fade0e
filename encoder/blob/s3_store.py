"""
S3-based blob store using one-object-per-blob pattern.

Object key: {prefix}/{name}
Body: serialized replay blob (application/octet-stream)
"""

import logging
import os
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ..core.errors import BlobStoreError
from .store import BlobStore, WriteResult

logger = logging.getLogger(__name__)


class S3BlobStore(BlobStore):
    """
    S3 blob store.

    Works against AWS S3 or any S3-compatible endpoint (MinIO, localstack).
    Credentials come from the standard boto3 chain (AWS_ACCESS_KEY_ID, ...).
    """

    def __init__(
        self,
        bucket: str,
        prefix: str = "replays",
        endpoint_url: Optional[str] = None,
        region: str = "us-east-1",
    ) -> None:
        """
        Initialize S3 blob store.

        Args:
            bucket: S3 bucket name
            prefix: Key prefix for blobs (default: "replays")
            endpoint_url: S3 endpoint URL (for MinIO, localstack, etc.)
            region: AWS region (default: us-east-1)

        Raises:
            BlobStoreError: If client creation fails or the bucket is not accessible
        """
        self.bucket = bucket
        self.prefix = prefix.strip("/")
        self.endpoint_url = endpoint_url
        self.region = region

        try:
            self.s3_client = boto3.client(
                "s3",
                endpoint_url=endpoint_url,
                region_name=region,
            )
        except (BotoCoreError, ValueError) as e:
            raise BlobStoreError(f"Failed to create S3 client: {e}") from e

        if os.getenv("MISSION_ENCODER_S3_SKIP_BUCKET_CHECK", "").lower() != "true":
            try:
                self.s3_client.head_bucket(Bucket=bucket)
            except ClientError as e:
                error_code = e.response.get("Error", {}).get("Code", "Unknown")
                raise BlobStoreError(
                    f"Bucket '{bucket}' not accessible (code: {error_code})"
                ) from e

    def key_for(self, name: str) -> str:
        if not self.prefix:
            return name
        return f"{self.prefix}/{name}"

    def put(self, name: str, data: bytes) -> WriteResult:
        key = self.key_for(name)
        try:
            self.s3_client.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=data,
                ContentType="application/octet-stream",
            )
        except (BotoCoreError, ClientError) as e:
            raise BlobStoreError(f"Failed to put s3://{self.bucket}/{key}: {e}") from e

        logger.debug("wrote %d bytes to s3://%s/%s", len(data), self.bucket, key)
        return WriteResult(location=f"s3://{self.bucket}/{key}", size=len(data))
