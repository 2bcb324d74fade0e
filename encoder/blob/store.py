"""
BlobStore abstract interface.

The storage collaborator for serialized replay blobs.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class WriteResult:
    """
    Result of a successful write.

    Fields:
        location: Where the blob ended up (file path or s3:// URI)
        size: Number of bytes written
    """

    location: str
    size: int


class BlobStore(ABC):
    """
    Abstract blob storage interface.

    Implementations must:
    - Write the bytes exactly as given
    - Report failure by raising BlobStoreError (never partially succeed silently)
    """

    @abstractmethod
    def put(self, name: str, data: bytes) -> WriteResult:
        """
        Persist one blob.

        Args:
            name: Blob name (the replay identifier)
            data: Serialized blob

        Returns:
            WriteResult with final location

        Raises:
            BlobStoreError: If the write fails
        """
        ...
