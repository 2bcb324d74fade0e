"""
File-based blob store: one file per replay blob.
"""

import logging
import os

from ..core.errors import BlobStoreError
from .store import BlobStore, WriteResult

logger = logging.getLogger(__name__)


class FileBlobStore(BlobStore):
    """
    Writes each blob to {directory}/{name}.

    Guarantees:
    - Fsync after write (durability)
    - Existing file with the same name is replaced
    """

    def __init__(self, directory: str) -> None:
        """
        Initialize file blob store.

        Args:
            directory: Output directory (created if missing)
        """
        self.directory = directory or "."
        os.makedirs(self.directory, exist_ok=True)

    def path_for(self, name: str) -> str:
        return os.path.join(self.directory, name)

    def put(self, name: str, data: bytes) -> WriteResult:
        path = self.path_for(name)
        try:
            with open(path, "wb") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
        except OSError as ex:
            raise BlobStoreError(f"failed to write {path}: {ex}") from ex

        logger.debug("wrote %d bytes to %s", len(data), path)
        return WriteResult(location=path, size=len(data))
