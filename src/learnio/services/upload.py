"""Upload request handling: validate, name, store."""

import logging
from contextlib import aclosing
from typing import AsyncIterator

from starlette.datastructures import UploadFile

from learnio.core.exceptions import BlobExistsError, StorageWriteError
from learnio.core.logging import storage_name_context
from learnio.models.upload import NO_FILE_MESSAGE, UploadFailure, UploadSuccess
from learnio.storage.base import BlobStore
from learnio.storage.naming import generate_storage_name

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 65536  # 64KB


class UploadService:
    """Turns one parsed upload into a stored blob.

    Holds everything a request needs (blob store, public path prefix), so
    one instance is built at startup and shared by all requests. Requests
    share no mutable state; concurrent uploads only meet in the store root.
    """

    def __init__(
        self,
        store: BlobStore,
        public_prefix: str = "/images",
        max_name_attempts: int = 3,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        if max_name_attempts < 1:
            raise ValueError("max_name_attempts must be at least 1")
        self.store = store
        self.public_prefix = public_prefix.rstrip("/")
        self.max_name_attempts = max_name_attempts
        self.chunk_size = chunk_size

    def public_path_for(self, storage_name: str) -> str:
        """Client-facing path of a stored blob."""
        return f"{self.public_prefix}/{storage_name}"

    async def handle(self, file: UploadFile | None) -> UploadSuccess | UploadFailure:
        """Store the uploaded file, or report that none was provided.

        Raises:
            EntropySourceError: If no storage name could be generated
            StorageWriteError: If the blob could not be written
        """
        if file is None:
            logger.info("Upload rejected: no file part")
            return UploadFailure(reason=NO_FILE_MESSAGE)

        for attempt in range(1, self.max_name_attempts + 1):
            storage_name = await generate_storage_name(file.filename)
            storage_name_context.set(storage_name)
            try:
                async with aclosing(self._iter_chunks(file)) as chunks:
                    size_bytes = await self.store.write(storage_name, chunks)
            except BlobExistsError:
                logger.warning(
                    "Storage name collision, regenerating",
                    extra={"attempt": attempt, "original_name": file.filename},
                )
                continue

            logger.info(
                "Upload stored",
                extra={
                    "original_name": file.filename,
                    "size_bytes": size_bytes,
                    "storage_path": self.store.get_path(storage_name),
                    "backend": self.store.get_backend_name(),
                },
            )
            return UploadSuccess(
                storage_name=storage_name,
                public_path=self.public_path_for(storage_name),
                size_bytes=size_bytes,
            )

        raise StorageWriteError(
            f"No free storage name after {self.max_name_attempts} attempts"
        )

    async def _iter_chunks(self, file: UploadFile) -> AsyncIterator[bytes]:
        await file.seek(0)
        while chunk := await file.read(self.chunk_size):
            yield chunk
