"""Abstract blob store interface."""

from abc import ABC, abstractmethod
from typing import AsyncIterable


class BlobStore(ABC):
    """Abstract base class for blob stores."""

    @abstractmethod
    def get_path(self, storage_name: str) -> str:
        """Return the location a blob with this name is written to.

        Args:
            storage_name: Generated storage name

        Returns:
            Backend-specific path of the blob
        """
        pass

    @abstractmethod
    async def write(self, storage_name: str, chunks: AsyncIterable[bytes]) -> int:
        """Persist a byte stream under the given name.

        Args:
            storage_name: Generated storage name
            chunks: Blob content as an async stream of byte chunks

        Returns:
            Number of bytes written

        Raises:
            BlobExistsError: If a blob with this name already exists
            StorageWriteError: If the write fails
        """
        pass

    @abstractmethod
    def get_backend_name(self) -> str:
        """Return backend identifier."""
        pass
