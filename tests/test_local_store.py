"""Tests for the local blob store."""

import pytest

from learnio.core.exceptions import BlobExistsError, StorageWriteError
from learnio.storage.local import LocalBlobStore


async def _chunks(*parts: bytes):
    for part in parts:
        yield part


class TestLocalBlobStore:
    """Tests for local blob store."""

    @pytest.mark.asyncio
    async def test_write(self, tmp_path):
        """Test blob content and size after a chunked write."""
        store = LocalBlobStore(tmp_path)

        size = await store.write("abc.bin", _chunks(b"\x01\x02", b"\x03"))

        assert size == 3
        assert (tmp_path / "abc.bin").read_bytes() == b"\x01\x02\x03"

    @pytest.mark.asyncio
    async def test_write_empty(self, tmp_path):
        """Test an empty stream produces an empty blob."""
        store = LocalBlobStore(tmp_path)

        size = await store.write("empty", _chunks())

        assert size == 0
        assert (tmp_path / "empty").read_bytes() == b""

    @pytest.mark.asyncio
    async def test_write_is_flat(self, tmp_path):
        """Test no subdirectories are created under the root."""
        store = LocalBlobStore(tmp_path)

        await store.write("one.txt", _chunks(b"1"))
        await store.write("two.txt", _chunks(b"2"))

        assert sorted(p.name for p in tmp_path.iterdir()) == ["one.txt", "two.txt"]
        assert all(p.is_file() for p in tmp_path.iterdir())

    @pytest.mark.asyncio
    async def test_existing_blob_not_overwritten(self, tmp_path):
        """Test writing over an existing name raises and keeps the old content."""
        (tmp_path / "taken.txt").write_bytes(b"original")
        store = LocalBlobStore(tmp_path)

        with pytest.raises(BlobExistsError):
            await store.write("taken.txt", _chunks(b"new"))

        assert (tmp_path / "taken.txt").read_bytes() == b"original"

    @pytest.mark.asyncio
    async def test_missing_root_raises_storage_error(self, tmp_path):
        """Test I/O failures surface as StorageWriteError."""
        store = LocalBlobStore(tmp_path / "missing")

        with pytest.raises(StorageWriteError):
            await store.write("abc.bin", _chunks(b"data"))

    def test_blob_exists_is_storage_error(self):
        """Test collisions can be handled as generic storage failures."""
        assert issubclass(BlobExistsError, StorageWriteError)

    @pytest.mark.parametrize("bad_name", ["", ".", "..", "a/b", "..\\evil", "../x"])
    def test_invalid_names_rejected(self, tmp_path, bad_name):
        """Test names that would escape the flat root are rejected."""
        store = LocalBlobStore(tmp_path)

        with pytest.raises(ValueError):
            store.get_path(bad_name)

    def test_get_path(self, tmp_path):
        """Test blob path is directly under the root."""
        store = LocalBlobStore(tmp_path)

        assert store.get_path("abc.png") == str(tmp_path / "abc.png")

    def test_get_backend_name(self, tmp_path):
        """Test backend name."""
        assert LocalBlobStore(tmp_path).get_backend_name() == "local"
