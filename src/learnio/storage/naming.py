"""Collision-resistant storage names for uploaded files."""

import asyncio
import re
import secrets

from learnio.core.exceptions import EntropySourceError

RANDOM_BYTES = 12

_SEPARATORS = re.compile(r"[/\\]")


def extract_extension(original_name: str | None) -> str:
    """Return everything from the last '.' of the file's basename, or ''."""
    if not original_name:
        return ""
    basename = _SEPARATORS.split(original_name)[-1]
    index = basename.rfind(".")
    if index == -1:
        return ""
    return basename[index:]


async def generate_storage_name(original_name: str | None) -> str:
    """Generate a storage name: 24 lowercase hex chars plus the original extension.

    The random bytes are read in a worker thread so the event loop is never
    blocked waiting on the system entropy source.

    Raises:
        EntropySourceError: If the entropy source cannot supply random bytes
    """
    try:
        random_bytes = await asyncio.to_thread(secrets.token_bytes, RANDOM_BYTES)
    except (OSError, NotImplementedError) as e:
        raise EntropySourceError(f"Failed to generate random bytes: {e}") from e

    return random_bytes.hex() + extract_extension(original_name)
