"""Local filesystem blob store."""

import logging
from pathlib import Path
from typing import AsyncIterable

import aiofiles

from learnio.core.exceptions import BlobExistsError, StorageWriteError
from learnio.storage.base import BlobStore

logger = logging.getLogger(__name__)


class LocalBlobStore(BlobStore):
    """Flat local directory blob store.

    Every blob lives directly under ``root``; no subdirectories are created.
    The root itself must already exist and be writable.
    """

    def __init__(self, root: str | Path):
        self.root = Path(root)

    def get_path(self, storage_name: str) -> str:
        return str(self._target_path(storage_name))

    async def write(self, storage_name: str, chunks: AsyncIterable[bytes]) -> int:
        """Stream chunks into ``root/storage_name``.

        The file is created exclusively, so an existing blob is never
        overwritten. A failed write may leave a partial file behind.
        """
        target_path = self._target_path(storage_name)
        size_bytes = 0

        try:
            async with aiofiles.open(target_path, "xb") as f:
                async for chunk in chunks:
                    await f.write(chunk)
                    size_bytes += len(chunk)
        except FileExistsError as e:
            raise BlobExistsError(f"Blob already exists: {storage_name}") from e
        except OSError as e:
            logger.error(
                "Blob write failed",
                extra={"storage_path": str(target_path), "bytes_written": size_bytes},
            )
            raise StorageWriteError(f"Failed to write blob {storage_name}: {e}") from e

        logger.debug(
            "Blob written",
            extra={"storage_path": str(target_path), "size_bytes": size_bytes},
        )
        return size_bytes

    def get_backend_name(self) -> str:
        return "local"

    def _target_path(self, storage_name: str) -> Path:
        if (
            not storage_name
            or storage_name in (".", "..")
            or "/" in storage_name
            or "\\" in storage_name
        ):
            raise ValueError(f"Invalid storage name: {storage_name!r}")
        return self.root / storage_name
