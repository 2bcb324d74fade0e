"""
Replay blob container and storage.

This module provides:
- ReplayBlob: versioned binary container for a mission's event timeline
- BlobStore: abstract storage collaborator
- FileBlobStore: one file per blob
- S3BlobStore: one S3 object per blob
"""

from .container import ReplayBlob, FORMAT_VERSION, HEADER_SIZE, event_count_for_length
from .store import BlobStore, WriteResult
from .file_store import FileBlobStore
from .s3_store import S3BlobStore

__all__ = [
    "ReplayBlob",
    "FORMAT_VERSION",
    "HEADER_SIZE",
    "event_count_for_length",
    "BlobStore",
    "WriteResult",
    "FileBlobStore",
    "S3BlobStore",
]
