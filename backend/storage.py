"""Blob storage on the local filesystem, keyed by storage name."""

import logging
from pathlib import Path
from typing import BinaryIO, Iterator

from tokens import is_storage_name

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024  # 1MB


class BlobStore:

    def __init__(self, root: Path | str):
        self.root = Path(root)
        self.root.mkdir(parents=True, exist_ok=True)

    def path_for(self, name: str) -> Path:
        if not is_storage_name(name):
            raise FileNotFoundError(name)
        return self.root / name

    def create(self, name: str) -> BinaryIO:
        """Open a new blob for writing. Fails if the name is already taken."""
        return open(self.path_for(name), "xb")

    def open(self, name: str) -> BinaryIO:
        return open(self.path_for(name), "rb")

    def exists(self, name: str) -> bool:
        try:
            return self.path_for(name).is_file()
        except FileNotFoundError:
            return False

    def size(self, name: str) -> int:
        return self.path_for(name).stat().st_size

    def remove(self, name: str) -> bool:
        """Delete a blob, logging instead of raising when that fails."""
        try:
            self.path_for(name).unlink()
            return True
        except OSError:
            logger.exception("Failed to remove blob %s", name)
            return False

    @staticmethod
    def iter_chunks(handle: BinaryIO, chunk_size: int = CHUNK_SIZE) -> Iterator[bytes]:
        with handle:
            while chunk := handle.read(chunk_size):
                yield chunk
