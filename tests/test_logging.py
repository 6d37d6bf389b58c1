"""Tests for structured logging."""

import json
import logging
import sys

from learnio.core.logging import CloudLoggingFormatter, storage_name_context


def _record(msg="Upload stored", exc_info=None, **extra):
    record = logging.LogRecord(
        name="learnio.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_format_is_single_line_json():
    """Test records render as one JSON object with extras."""
    output = CloudLoggingFormatter().format(_record(size_bytes=3))

    assert "\n" not in output
    entry = json.loads(output)
    assert entry["severity"] == "INFO"
    assert entry["message"] == "Upload stored"
    assert entry["size_bytes"] == 3
    assert entry["timestamp"].endswith("Z")


def test_format_includes_storage_name_context():
    """Test the blob name in context is attached to the entry."""
    token = storage_name_context.set("0123456789abcdef01234567.png")
    try:
        entry = json.loads(CloudLoggingFormatter().format(_record()))
    finally:
        storage_name_context.reset(token)

    assert entry["storage_name"] == "0123456789abcdef01234567.png"


def test_format_includes_exception():
    """Test exception details are serialized."""
    try:
        raise OSError("disk full")
    except OSError:
        record = _record(msg="Blob write failed", exc_info=sys.exc_info())

    entry = json.loads(CloudLoggingFormatter().format(record))

    assert entry["exception_type"] == "OSError"
    assert entry["exception_message"] == "disk full"
    assert "Traceback" in entry["exception"]
